"""Tests for the built-in rules, run through the engine one validator at a time."""

from __future__ import annotations

from decimal import Decimal

from conftest import build_schema, context_for
from schema_rules.engine import ValidationEngine
from schema_rules.rules import RuleName, create_default_rules
from schema_rules.validators import (
    BetweenValidator,
    Comparison,
    ComparisonValidator,
    LengthValidator,
    NotEmptyValidator,
    NotNullValidator,
    RegexValidator,
)


def _annotate(registry, customer_validator, *definitions, key="value", truncate=True):
    customer_validator.rule_for(key, *definitions)
    schema = build_schema(key)
    engine = ValidationEngine(validator_provider=registry, truncate_numeric_bounds=truncate)
    engine.apply(schema, context_for(schema))
    return schema, schema.properties[key]


def test_default_rule_order() -> None:
    names = [rule.name for rule in create_default_rules()]

    assert names == ["Required", "NotEmpty", "Length", "Pattern", "Comparison", "Between"]
    assert names == [name.value for name in RuleName]


def test_not_empty_marks_required_and_min_length(registry, customer_validator) -> None:
    schema, prop = _annotate(registry, customer_validator, NotEmptyValidator())

    assert schema.required == ["value"]
    assert prop.min_length == 1


def test_not_null_marks_required_only(registry, customer_validator) -> None:
    schema, prop = _annotate(registry, customer_validator, NotNullValidator())

    assert schema.required == ["value"]
    assert prop.min_length is None


def test_required_is_not_duplicated(registry, customer_validator) -> None:
    schema, _ = _annotate(registry, customer_validator, NotNullValidator(), NotEmptyValidator())

    assert schema.required == ["value"]


def test_length_sets_both_bounds(registry, customer_validator) -> None:
    _, prop = _annotate(registry, customer_validator, LengthValidator(min=2, max=10))

    assert prop.min_length == 2
    assert prop.max_length == 10


def test_length_with_zero_max_is_unbounded(registry, customer_validator) -> None:
    _, prop = _annotate(registry, customer_validator, LengthValidator(min=2, max=0))

    assert prop.min_length == 2
    assert prop.max_length is None


def test_pattern_copies_raw_expression(registry, customer_validator) -> None:
    _, prop = _annotate(registry, customer_validator, RegexValidator(expression=r"^\d{3}-\d{4}$"))

    assert prop.pattern == r"^\d{3}-\d{4}$"


def test_greater_than_or_equal_sets_inclusive_minimum(registry, customer_validator) -> None:
    _, prop = _annotate(
        registry,
        customer_validator,
        ComparisonValidator(comparison=Comparison.GREATER_THAN_OR_EQUAL, value_to_compare=5),
    )

    assert prop.minimum == 5
    assert not prop.exclusive_minimum
    assert prop.maximum is None


def test_greater_than_sets_exclusive_minimum(registry, customer_validator) -> None:
    _, prop = _annotate(
        registry,
        customer_validator,
        ComparisonValidator(comparison=Comparison.GREATER_THAN, value_to_compare=0),
    )

    assert prop.minimum == 0
    assert prop.exclusive_minimum is True


def test_less_than_sets_exclusive_maximum(registry, customer_validator) -> None:
    _, prop = _annotate(
        registry,
        customer_validator,
        ComparisonValidator(comparison=Comparison.LESS_THAN, value_to_compare=100),
    )

    assert prop.maximum == 100
    assert prop.exclusive_maximum is True


def test_less_than_or_equal_sets_inclusive_maximum(registry, customer_validator) -> None:
    _, prop = _annotate(
        registry,
        customer_validator,
        ComparisonValidator(comparison=Comparison.LESS_THAN_OR_EQUAL, value_to_compare=Decimal("9")),
    )

    assert prop.maximum == 9
    assert not prop.exclusive_maximum


def test_equality_comparisons_leave_schema_alone(registry, customer_validator) -> None:
    _, prop = _annotate(
        registry,
        customer_validator,
        ComparisonValidator(comparison=Comparison.EQUAL, value_to_compare=3),
        ComparisonValidator(comparison=Comparison.NOT_EQUAL, value_to_compare=4),
    )

    assert prop.model_dump(exclude_unset=True) == {}


def test_non_numeric_comparand_is_skipped(registry, customer_validator) -> None:
    _, prop = _annotate(
        registry,
        customer_validator,
        ComparisonValidator(comparison=Comparison.GREATER_THAN, value_to_compare="2024-01-01"),
        ComparisonValidator(comparison=Comparison.LESS_THAN, member_to_compare="end_date"),
        ComparisonValidator(comparison=Comparison.GREATER_THAN, value_to_compare=True),
    )

    assert prop.model_dump(exclude_unset=True) == {}


def test_between_mixed_exclusivity(registry, customer_validator) -> None:
    _, prop = _annotate(
        registry,
        customer_validator,
        BetweenValidator(from_=1, to=10, to_exclusive=True),
    )

    assert prop.minimum == 1
    assert not prop.exclusive_minimum
    assert prop.maximum == 10
    assert prop.exclusive_maximum is True


def test_exclusive_between_sets_both_flags(registry, customer_validator) -> None:
    _, prop = _annotate(registry, customer_validator, BetweenValidator.exclusive(0, 5))

    assert (prop.minimum, prop.maximum) == (0, 5)
    assert prop.exclusive_minimum is True
    assert prop.exclusive_maximum is True


def test_between_skips_non_numeric_side(registry, customer_validator) -> None:
    _, prop = _annotate(registry, customer_validator, BetweenValidator.inclusive("a", 10))

    assert prop.minimum is None
    assert prop.maximum == 10


def test_fractional_bounds_truncate_by_default(registry, customer_validator) -> None:
    _, prop = _annotate(
        registry,
        customer_validator,
        ComparisonValidator(comparison=Comparison.GREATER_THAN, value_to_compare=2.7),
    )

    assert prop.minimum == 2
    assert isinstance(prop.minimum, int)


def test_fractional_bounds_kept_without_truncation(registry, customer_validator) -> None:
    _, prop = _annotate(
        registry,
        customer_validator,
        BetweenValidator.inclusive(0.5, Decimal("99.5")),
        truncate=False,
    )

    assert prop.minimum == 0.5
    assert prop.maximum == 99.5
