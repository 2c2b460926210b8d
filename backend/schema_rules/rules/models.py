"""Rule models — the named (match, apply) pairs and the per-pass outcomes."""

from dataclasses import dataclass
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from schema_rules.models.schema import PropertySchema, Schema, SchemaFilterContext
from schema_rules.validators.definitions import PropertyValidator, ValidatorKind


@dataclass(frozen=True)
class RuleContext:
    """Everything one rule application sees. Built fresh per triple."""

    schema: Schema
    filter_context: SchemaFilterContext
    property_key: str
    property_validator: PropertyValidator

    @property
    def property_schema(self) -> PropertySchema:
        """The annotated property. Raises KeyError if the key is not declared."""
        if self.schema.properties is None:
            raise KeyError(self.property_key)
        return self.schema.properties[self.property_key]


class Rule(BaseModel):
    """Translates one class of validator definition into schema constraints.

    Identity is the name: a rule passed to the engine replaces the default
    rule of the same name.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    matches: Callable[[PropertyValidator], bool]
    apply: Callable[[RuleContext], None]


class RuleOutcome(BaseModel):
    """Result of applying one rule to one (property, validator) pair."""

    model_config = ConfigDict(use_enum_values=True)

    rule: str
    property_key: str
    validator_kind: ValidatorKind
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class FilterReport(BaseModel):
    """Outcomes of one engine pass over a schema."""

    model_type: str
    outcomes: list[RuleOutcome] = Field(default_factory=list)
    skipped_reason: Optional[str] = Field(
        default=None, description="Set when the pass never reached the rules"
    )

    @property
    def applied(self) -> int:
        return sum(1 for o in self.outcomes if o.succeeded)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.succeeded)

    @property
    def failures(self) -> list[RuleOutcome]:
        return [o for o in self.outcomes if not o.succeeded]
