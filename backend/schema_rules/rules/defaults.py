"""Default rules and the override-by-name merge.

Default order (also the application order for a validator several rules match):
    Required, NotEmpty, Length, Pattern, Comparison, Between
"""

from enum import Enum
from typing import Iterable, Optional

from schema_rules.rules.models import Rule, RuleContext
from schema_rules.validators.definitions import Comparison, PropertyValidator
from schema_rules.validators.numeric import is_numeric, to_bound


class RuleName(str, Enum):
    """Names of the built-in rules. Pass a rule with one of these names to replace it."""

    REQUIRED = "Required"
    NOT_EMPTY = "NotEmpty"
    LENGTH = "Length"
    PATTERN = "Pattern"
    COMPARISON = "Comparison"
    BETWEEN = "Between"


# ── Required ──

def _matches_required(validator: PropertyValidator) -> bool:
    return validator.is_not_null or validator.is_not_empty


def _apply_required(context: RuleContext) -> None:
    context.schema.add_required(context.property_key)


# ── NotEmpty ──

def _matches_not_empty(validator: PropertyValidator) -> bool:
    return validator.is_not_empty


def _apply_not_empty(context: RuleContext) -> None:
    context.property_schema.min_length = 1


# ── Length ──

def _matches_length(validator: PropertyValidator) -> bool:
    return validator.is_length_bounded


def _apply_length(context: RuleContext) -> None:
    length = context.property_validator
    prop = context.property_schema
    if length.max > 0:
        prop.max_length = length.max
    prop.min_length = length.min


# ── Pattern ──

def _matches_pattern(validator: PropertyValidator) -> bool:
    return validator.is_pattern


def _apply_pattern(context: RuleContext) -> None:
    context.property_schema.pattern = context.property_validator.expression


# ── Comparison / Between ──

def _matches_comparison(validator: PropertyValidator) -> bool:
    return validator.is_comparison


def _matches_between(validator: PropertyValidator) -> bool:
    return validator.is_between


def _comparison_rule(truncate: bool) -> Rule:
    def apply(context: RuleContext) -> None:
        comparison = context.property_validator
        if not is_numeric(comparison.value_to_compare):
            return

        value = to_bound(comparison.value_to_compare, truncate)
        prop = context.property_schema

        if comparison.comparison == Comparison.GREATER_THAN_OR_EQUAL:
            prop.minimum = value
        elif comparison.comparison == Comparison.GREATER_THAN:
            prop.minimum = value
            prop.exclusive_minimum = True
        elif comparison.comparison == Comparison.LESS_THAN_OR_EQUAL:
            prop.maximum = value
        elif comparison.comparison == Comparison.LESS_THAN:
            prop.maximum = value
            prop.exclusive_maximum = True

    return Rule(name=RuleName.COMPARISON.value, matches=_matches_comparison, apply=apply)


def _between_rule(truncate: bool) -> Rule:
    def apply(context: RuleContext) -> None:
        between = context.property_validator
        prop = context.property_schema

        if is_numeric(between.from_):
            prop.minimum = to_bound(between.from_, truncate)
            if between.from_exclusive:
                prop.exclusive_minimum = True

        if is_numeric(between.to):
            prop.maximum = to_bound(between.to, truncate)
            if between.to_exclusive:
                prop.exclusive_maximum = True

    return Rule(name=RuleName.BETWEEN.value, matches=_matches_between, apply=apply)


def create_default_rules(truncate_numeric_bounds: bool = True) -> list[Rule]:
    """Create the built-in rules in application order.

    Args:
        truncate_numeric_bounds: Cut comparison and range operands to int.
            With False, fractional bounds are kept.
    """
    return [
        Rule(name=RuleName.REQUIRED.value, matches=_matches_required, apply=_apply_required),
        Rule(name=RuleName.NOT_EMPTY.value, matches=_matches_not_empty, apply=_apply_not_empty),
        Rule(name=RuleName.LENGTH.value, matches=_matches_length, apply=_apply_length),
        Rule(name=RuleName.PATTERN.value, matches=_matches_pattern, apply=_apply_pattern),
        _comparison_rule(truncate_numeric_bounds),
        _between_rule(truncate_numeric_bounds),
    ]


def merge_rules(defaults: Iterable[Rule], overrides: Optional[Iterable[Rule]] = None) -> list[Rule]:
    """Merge caller rules into the defaults by name.

    A rule whose name matches a default takes the default's slot; new names
    are appended in the order given. The result never holds two rules with
    the same name.
    """
    rule_map: dict[str, Rule] = {}
    for rule in defaults:
        rule_map[rule.name] = rule
    for rule in overrides or ():
        # Add or replace
        rule_map[rule.name] = rule
    return list(rule_map.values())
