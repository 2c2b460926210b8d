"""schema-rules — annotate OpenAPI schemas with constraints from declared field validators.

Usage:
    from schema_rules import ValidationEngine, SchemaFilterContext

    engine = ValidationEngine(validator_provider=registry)
    engine.apply(schema, SchemaFilterContext(model_type=Customer, schema=schema))
"""

from schema_rules.engine import ValidationEngine
from schema_rules.models.schema import PropertySchema, Schema, SchemaFilterContext
from schema_rules.rules import (
    FilterReport,
    Rule,
    RuleContext,
    RuleName,
    RuleOutcome,
    create_default_rules,
    merge_rules,
)

__all__ = [
    "FilterReport",
    "PropertySchema",
    "Rule",
    "RuleContext",
    "RuleName",
    "RuleOutcome",
    "Schema",
    "SchemaFilterContext",
    "ValidationEngine",
    "create_default_rules",
    "merge_rules",
]
