"""Demo application — a FastAPI service whose OpenAPI document carries validator constraints.

Run with: uvicorn schema_rules.main:app --app-dir backend
"""

from typing import Optional

import structlog
from fastapi import FastAPI
from pydantic import BaseModel

from schema_rules.engine import ValidationEngine
from schema_rules.logging_config import configure_logging
from schema_rules.openapi import install_schema_filter
from schema_rules.validators import (
    BetweenValidator,
    Comparison,
    ComparisonValidator,
    EmailValidator,
    LengthValidator,
    ModelValidator,
    NotEmptyValidator,
    NotNullValidator,
    ValidatorRegistry,
)

configure_logging()

logger = structlog.get_logger()


# ── Models ──

class Customer(BaseModel):
    """Customer payload accepted by the demo API."""

    name: str
    email: str
    age: int
    discount: float = 0.0
    nickname: Optional[str] = None


customer_validator = (
    ModelValidator(Customer)
    .rule_for("Name", NotEmptyValidator(), LengthValidator(min=2, max=50))
    .rule_for("email", NotNullValidator(), EmailValidator())
    .rule_for("age", BetweenValidator.inclusive(18, 120))
    .rule_for(
        "discount",
        ComparisonValidator(comparison=Comparison.GREATER_THAN_OR_EQUAL, value_to_compare=0),
        ComparisonValidator(comparison=Comparison.LESS_THAN, value_to_compare=100),
    )
    .rule_for("nickname", LengthValidator.maximum(20))
)


# ── Wiring ──

validator_registry = ValidatorRegistry()
validator_registry.register(Customer, customer_validator)

validation_engine = ValidationEngine(validator_provider=validator_registry, logger=logger)

app = FastAPI(
    title="schema-rules demo",
    description="Customer API whose schema constraints come from declared field validators.",
    version="1.0.0",
)


@app.post("/customers")
async def create_customer(customer: Customer) -> dict:
    """Echo the accepted customer."""
    return {"status": "created", "name": customer.name}


@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {"name": "schema-rules demo", "docs": "/docs"}


install_schema_filter(app, validation_engine, validator_registry.model_types)
