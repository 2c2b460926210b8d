"""Validation Engine — annotates a model's schema with its validators' constraints.

The host calls apply() once per generated model schema. For every declared
property the engine looks up the field validators bound to that name and
runs every rule that matches each validator. Nothing raised by the provider
or by a rule escapes to the host.

Usage:
    engine = ValidationEngine(validator_provider=registry, logger=structlog.get_logger())
    engine.apply(schema, SchemaFilterContext(model_type=Customer, schema=schema))
"""

from typing import Any, Iterable, Optional

from schema_rules.config import get_settings
from schema_rules.models.schema import Schema, SchemaFilterContext
from schema_rules.rules.defaults import create_default_rules, merge_rules
from schema_rules.rules.models import FilterReport, Rule, RuleContext, RuleOutcome
from schema_rules.validators.base import ValidatorProvider


class ValidationEngine:
    """Applies the active rule set to schemas, one model type at a time.

    Design principles:
        - Inert without a provider: the schema is left as generated
        - Rules are a snapshot taken at construction
        - A failing rule only costs its own (property, validator) pair
        - Stateless between calls: safe to share across threads for distinct schemas
    """

    def __init__(
        self,
        validator_provider: Optional[ValidatorProvider] = None,
        rules: Optional[Iterable[Rule]] = None,
        logger: Optional[Any] = None,
        truncate_numeric_bounds: Optional[bool] = None,
    ):
        """Initialize with default rules, optionally overridden by name.

        Args:
            validator_provider: Resolves validators per model type. None makes the engine a no-op.
            rules: Extra rules. A rule with a default's name replaces that default.
            logger: structlog-style logger. None drops warnings.
            truncate_numeric_bounds: Cut numeric bounds to int. Defaults to settings.
        """
        if truncate_numeric_bounds is None:
            truncate_numeric_bounds = get_settings().TRUNCATE_NUMERIC_BOUNDS

        self.validator_provider = validator_provider
        self.logger = logger
        self.rules: tuple[Rule, ...] = tuple(
            merge_rules(create_default_rules(truncate_numeric_bounds), rules)
        )

    def apply(self, schema: Schema, context: SchemaFilterContext) -> None:
        """Annotate ``schema`` in place. Never raises for provider or rule failures."""
        self.run(schema, context)

    def run(self, schema: Schema, context: SchemaFilterContext) -> FilterReport:
        """Same pass as apply(), returning the outcome of every rule application."""
        report = FilterReport(model_type=_type_name(context))

        if self.validator_provider is None:
            self._warn(
                "validator_provider_missing",
                message="ValidatorProvider is not provided. Register model validators to annotate schemas.",
            )
            report.skipped_reason = "no_provider"
            return report

        validator = None
        try:
            validator = self.validator_provider.get_validator(context.model_type)
        except Exception as e:
            self._warn(
                "get_validator_failed",
                model_type=report.model_type,
                error=str(e),
                error_type=type(e).__name__,
            )
            report.skipped_reason = "provider_failed"
            return report

        if validator is None:
            report.skipped_reason = "no_validator"
            return report

        properties = schema.properties if schema is not None else None
        for key in list(properties or {}):
            for property_validator in validator.describe_validators_for_field(key, ignore_case=True):
                for rule in self.rules:
                    if rule.matches(property_validator):
                        rule_context = RuleContext(
                            schema=schema,
                            filter_context=context,
                            property_key=key,
                            property_validator=property_validator,
                        )
                        report.outcomes.append(self._apply_rule(rule, rule_context))

        if self.logger is not None:
            self.logger.debug(
                "schema_filter_complete",
                model_type=report.model_type,
                applied=report.applied,
                failed=report.failed,
            )

        return report

    def _apply_rule(self, rule: Rule, context: RuleContext) -> RuleOutcome:
        outcome = RuleOutcome(
            rule=rule.name,
            property_key=context.property_key,
            validator_kind=context.property_validator.kind,
        )
        try:
            rule.apply(context)
        except Exception as e:
            self._warn(
                "rule_apply_failed",
                rule=rule.name,
                key=context.property_key,
                error=str(e),
                error_type=type(e).__name__,
            )
            outcome.error = f"{type(e).__name__}: {e}"
        return outcome

    def _warn(self, event: str, **fields: Any) -> None:
        if self.logger is not None:
            self.logger.warning(event, **fields)


def _type_name(context: SchemaFilterContext) -> str:
    model_type = getattr(context, "model_type", None)
    return getattr(model_type, "__qualname__", repr(model_type))
