"""Validator definitions — declarative descriptors of one field-level check.

Each definition is a frozen model tagged with a ValidatorKind. Rules decide
whether they apply by querying the capability properties on the base class,
never by isinstance checks against the concrete variant.
"""

from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict


class ValidatorKind(str, Enum):
    """Capability tags a validator definition can carry."""

    NOT_NULL = "not_null"
    NOT_EMPTY = "not_empty"
    LENGTH = "length"
    PATTERN = "pattern"
    COMPARISON = "comparison"
    BETWEEN = "between"


class Comparison(str, Enum):
    """Comparison operators for ComparisonValidator."""

    EQUAL = "equal"
    NOT_EQUAL = "notEqual"
    GREATER_THAN = "greaterThan"
    GREATER_THAN_OR_EQUAL = "greaterThanOrEqual"
    LESS_THAN = "lessThan"
    LESS_THAN_OR_EQUAL = "lessThanOrEqual"


class PropertyValidator(BaseModel):
    """Base for every validator definition."""

    model_config = ConfigDict(frozen=True)

    kind: ValidatorKind

    @property
    def is_not_null(self) -> bool:
        return self.kind == ValidatorKind.NOT_NULL

    @property
    def is_not_empty(self) -> bool:
        return self.kind == ValidatorKind.NOT_EMPTY

    @property
    def is_length_bounded(self) -> bool:
        return self.kind == ValidatorKind.LENGTH

    @property
    def is_pattern(self) -> bool:
        return self.kind == ValidatorKind.PATTERN

    @property
    def is_comparison(self) -> bool:
        return self.kind == ValidatorKind.COMPARISON

    @property
    def is_between(self) -> bool:
        return self.kind == ValidatorKind.BETWEEN


class NotNullValidator(PropertyValidator):
    kind: Literal[ValidatorKind.NOT_NULL] = ValidatorKind.NOT_NULL


class NotEmptyValidator(PropertyValidator):
    kind: Literal[ValidatorKind.NOT_EMPTY] = ValidatorKind.NOT_EMPTY


class LengthValidator(PropertyValidator):
    """String length bounds. A max of zero or less means unbounded."""

    kind: Literal[ValidatorKind.LENGTH] = ValidatorKind.LENGTH
    min: int = 0
    max: int = -1

    @classmethod
    def maximum(cls, max_length: int) -> "LengthValidator":
        return cls(min=0, max=max_length)

    @classmethod
    def minimum(cls, min_length: int) -> "LengthValidator":
        return cls(min=min_length, max=-1)

    @classmethod
    def exact(cls, length: int) -> "LengthValidator":
        return cls(min=length, max=length)


class RegexValidator(PropertyValidator):
    kind: Literal[ValidatorKind.PATTERN] = ValidatorKind.PATTERN
    expression: str


class EmailValidator(RegexValidator):
    """Loose address check: something, an @, something."""

    expression: str = r"^[^@\s]+@[^@\s]+$"


class ComparisonValidator(PropertyValidator):
    """Compares the field against a constant or another member of the model.

    When ``member_to_compare`` is set the constant is usually None, and the
    schema side has nothing numeric to record.
    """

    kind: Literal[ValidatorKind.COMPARISON] = ValidatorKind.COMPARISON
    comparison: Comparison
    value_to_compare: Any = None
    member_to_compare: Optional[str] = None


class BetweenValidator(PropertyValidator):
    """Range check with independently exclusive ends."""

    kind: Literal[ValidatorKind.BETWEEN] = ValidatorKind.BETWEEN
    from_: Any = None
    to: Any = None
    from_exclusive: bool = False
    to_exclusive: bool = False

    @classmethod
    def inclusive(cls, from_: Any, to: Any) -> "BetweenValidator":
        return cls(from_=from_, to=to)

    @classmethod
    def exclusive(cls, from_: Any, to: Any) -> "BetweenValidator":
        return cls(from_=from_, to=to, from_exclusive=True, to_exclusive=True)
