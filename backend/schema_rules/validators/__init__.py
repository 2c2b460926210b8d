"""Validator definitions and the provider contract the engine consumes."""

from schema_rules.validators.base import ModelValidator, ValidatorProvider
from schema_rules.validators.definitions import (
    BetweenValidator,
    Comparison,
    ComparisonValidator,
    EmailValidator,
    LengthValidator,
    NotEmptyValidator,
    NotNullValidator,
    PropertyValidator,
    RegexValidator,
    ValidatorKind,
)
from schema_rules.validators.provider import ValidatorRegistry

__all__ = [
    "BetweenValidator",
    "Comparison",
    "ComparisonValidator",
    "EmailValidator",
    "LengthValidator",
    "ModelValidator",
    "NotEmptyValidator",
    "NotNullValidator",
    "PropertyValidator",
    "RegexValidator",
    "ValidatorKind",
    "ValidatorProvider",
    "ValidatorRegistry",
]
