"""Validator registry — an in-memory ValidatorProvider keyed by model type."""

from typing import Optional

from schema_rules.validators.base import ModelValidator, ValidatorProvider


class ValidatorRegistry(ValidatorProvider):
    """Maps model types to their validators.

    Lookup tries the exact type first, then walks the MRO so a subclass
    inherits its base model's validator unless it registers its own.
    """

    def __init__(self, validators: Optional[dict[type, ModelValidator]] = None):
        self._validators: dict[type, ModelValidator] = dict(validators or {})

    def register(self, model_type: type, validator: ModelValidator) -> None:
        """Register (or replace) the validator for a model type."""
        if validator.model_type is None:
            validator.model_type = model_type
        self._validators[model_type] = validator

    def unregister(self, model_type: type) -> None:
        self._validators.pop(model_type, None)

    def get_validator(self, model_type: type) -> Optional[ModelValidator]:
        for candidate in getattr(model_type, "__mro__", (model_type,)):
            validator = self._validators.get(candidate)
            if validator is not None:
                return validator
        return None

    @property
    def model_types(self) -> list[type]:
        return list(self._validators)

    def __contains__(self, model_type: type) -> bool:
        return model_type in self._validators

    def __len__(self) -> int:
        return len(self._validators)
