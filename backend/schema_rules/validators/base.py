"""Validator abstractions — the per-model validator and the provider contract.

A ModelValidator holds the validator definitions declared for each field of
one model type. A ValidatorProvider resolves the ModelValidator for a type.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from schema_rules.validators.definitions import PropertyValidator


class ModelValidator:
    """Field name -> validator definitions for one model type.

    Usage:
        validator = (
            ModelValidator(Customer)
            .rule_for("name", NotEmptyValidator(), LengthValidator(min=2, max=50))
            .rule_for("age", BetweenValidator.inclusive(18, 120))
        )
    """

    def __init__(self, model_type: Optional[type] = None):
        self.model_type = model_type
        self._fields: dict[str, list[Optional[PropertyValidator]]] = {}

    def rule_for(self, field: str, *definitions: Optional[PropertyValidator]) -> "ModelValidator":
        """Attach definitions to a field. Repeated calls accumulate."""
        self._fields.setdefault(field, []).extend(definitions)
        return self

    @property
    def field_names(self) -> list[str]:
        return list(self._fields)

    def describe_validators_for_field(
        self, name: str, ignore_case: bool = True
    ) -> Iterator[PropertyValidator]:
        """Yield the non-null definitions bound to ``name``.

        With ``ignore_case`` every field whose name matches case-insensitively
        contributes, in declaration order.
        """
        if ignore_case:
            wanted = name.casefold()
            matched = [f for f in self._fields if f.casefold() == wanted]
        else:
            matched = [name] if name in self._fields else []

        for field in matched:
            for definition in self._fields[field]:
                if definition is not None:
                    yield definition


class ValidatorProvider(ABC):
    """Resolves the ModelValidator governing a model type.

    Contract:
        - get_validator() returns None when the type has no validator
        - get_validator() may raise; callers treat that as "no validator"
    """

    @abstractmethod
    def get_validator(self, model_type: type) -> Optional[ModelValidator]:
        ...
