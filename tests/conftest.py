"""Shared fixtures for the schema filter tests."""

from __future__ import annotations

import pytest

from schema_rules.models.schema import PropertySchema, Schema, SchemaFilterContext
from schema_rules.validators import ModelValidator, ValidatorRegistry


class Customer:
    """Stand-in model type; the engine only uses it as a lookup key."""


def build_schema(*keys: str) -> Schema:
    return Schema(properties={key: PropertySchema() for key in keys})


def context_for(schema: Schema, model_type: type = Customer) -> SchemaFilterContext:
    return SchemaFilterContext(model_type=model_type, schema=schema)


@pytest.fixture
def customer_type() -> type:
    return Customer


@pytest.fixture
def customer_validator() -> ModelValidator:
    return ModelValidator(Customer)


@pytest.fixture
def registry(customer_validator: ModelValidator) -> ValidatorRegistry:
    registry = ValidatorRegistry()
    registry.register(Customer, customer_validator)
    return registry
