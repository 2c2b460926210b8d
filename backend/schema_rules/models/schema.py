"""Schema models — the mutable OpenAPI shapes the engine annotates.

Only the constraint-bearing keywords are modelled as fields. Every other key
of an OpenAPI schema object (type, title, $ref, anyOf, ...) is carried as an
extra and written back untouched.
"""

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]

# (flag keyword, bound keyword) pairs
_EXCLUSIVE_BOUNDS = (("exclusiveMinimum", "minimum"), ("exclusiveMaximum", "maximum"))


def uses_numeric_exclusive(openapi_version: str) -> bool:
    """True for OpenAPI 3.1+, where exclusive bounds are numbers instead of flags."""
    try:
        major, minor = (int(part) for part in openapi_version.split(".")[:2])
    except ValueError:
        return False
    return (major, minor) >= (3, 1)


class PropertySchema(BaseModel):
    """Constraint-bearing record for one named property.

    ``exclusive_minimum`` / ``exclusive_maximum`` hold either the OpenAPI 3.0
    boolean flag (what the rules set) or an OpenAPI 3.1 numeric bound read
    from the host document. A numeric bound is its own constraint and is
    written back unchanged.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    min_length: Optional[int] = Field(default=None, alias="minLength")
    max_length: Optional[int] = Field(default=None, alias="maxLength")
    pattern: Optional[str] = None
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    exclusive_minimum: Optional[Union[bool, Number]] = Field(default=None, alias="exclusiveMinimum")
    exclusive_maximum: Optional[Union[bool, Number]] = Field(default=None, alias="exclusiveMaximum")

    def to_openapi(self, numeric_exclusive: bool = False) -> dict:
        """Dump keys that were present or set, with flags or numeric exclusive bounds."""
        data = self.model_dump(by_alias=True, exclude_unset=True)
        if not numeric_exclusive:
            return data

        for flag, bound in _EXCLUSIVE_BOUNDS:
            value = data.get(flag)
            if value is True and data.get(bound) is not None:
                data[flag] = data.pop(bound)
            elif isinstance(value, bool):
                data.pop(flag)
        return data


class Schema(BaseModel):
    """An object schema: named properties plus the required-name list."""

    model_config = ConfigDict(extra="allow")

    properties: Optional[dict[str, PropertySchema]] = None
    required: Optional[list[str]] = None

    def add_required(self, key: str) -> None:
        """Add a property name to the required list. Adding twice is a no-op."""
        if self.required is None:
            self.required = []
        if key not in self.required:
            self.required.append(key)

    @classmethod
    def from_openapi(cls, document: dict) -> "Schema":
        """Parse an OpenAPI 3.0 or 3.1 schema object."""
        return cls.model_validate(document)

    def to_openapi(self, openapi_version: str = "3.0.3") -> dict:
        """Dump keys that were present or set, in the given OpenAPI dialect."""
        numeric_exclusive = uses_numeric_exclusive(openapi_version)
        data = self.model_dump(by_alias=True, exclude_unset=True)
        if self.properties is not None and "properties" in data:
            data["properties"] = {
                key: prop.to_openapi(numeric_exclusive)
                for key, prop in self.properties.items()
            }
        return data


@dataclass(frozen=True)
class SchemaFilterContext:
    """Ambient generation context handed to the engine once per model type."""

    model_type: type
    schema: Schema
