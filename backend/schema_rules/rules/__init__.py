"""Rules — named (match, apply) pairs that turn validators into schema constraints."""

from schema_rules.rules.defaults import RuleName, create_default_rules, merge_rules
from schema_rules.rules.models import FilterReport, Rule, RuleContext, RuleOutcome

__all__ = [
    "FilterReport",
    "Rule",
    "RuleContext",
    "RuleName",
    "RuleOutcome",
    "create_default_rules",
    "merge_rules",
]
