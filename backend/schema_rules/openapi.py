"""OpenAPI glue — runs the engine over a generated document's component schemas.

FastAPI builds component schemas from pydantic models, keyed by model name
(or "<Name>-Input" / "<Name>-Output" when input and output shapes differ).
"""

from typing import Iterable, Optional

import structlog
from fastapi import FastAPI
from pydantic import ValidationError

from schema_rules.config import get_settings
from schema_rules.engine import ValidationEngine
from schema_rules.models.schema import Schema, SchemaFilterContext

logger = structlog.get_logger()


def _component_names(model_type: type) -> list[str]:
    name = model_type.__name__
    return [name, f"{name}-Input", f"{name}-Output"]


def apply_to_openapi(
    document: dict,
    engine: ValidationEngine,
    models: Iterable[type],
    openapi_version: Optional[str] = None,
) -> dict:
    """Annotate the component schemas of ``models`` in place.

    Args:
        document: OpenAPI document as produced by FastAPI's get_openapi()
        engine: Engine holding the provider and rules
        models: Model types whose components should be annotated
        openapi_version: Dialect to write back. Defaults to the document's own.

    Returns:
        The same document, for chaining
    """
    version = openapi_version or document.get("openapi") or get_settings().OPENAPI_VERSION_FALLBACK
    schemas = document.get("components", {}).get("schemas", {})

    for model_type in models:
        for name in _component_names(model_type):
            component = schemas.get(name)
            if component is None:
                continue

            try:
                schema = Schema.from_openapi(component)
            except ValidationError as e:
                logger.warning("openapi_component_unparseable", component=name, error=str(e))
                continue

            engine.apply(schema, SchemaFilterContext(model_type=model_type, schema=schema))
            schemas[name] = schema.to_openapi(version)
            logger.debug("openapi_component_annotated", component=name)

    return document


def install_schema_filter(app: FastAPI, engine: ValidationEngine, models: Iterable[type]) -> None:
    """Wrap ``app.openapi`` so the cached document comes out annotated."""
    models = list(models)
    generate = app.openapi

    def openapi() -> dict:
        if not app.openapi_schema:
            app.openapi_schema = apply_to_openapi(generate(), engine, models)
        return app.openapi_schema

    app.openapi = openapi
