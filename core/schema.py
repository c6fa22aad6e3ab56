from __future__ import annotations
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from core.models import ToolArgumentError


def check_schema(schema: Dict[str, Any]) -> None:
    """Raise jsonschema.SchemaError if a tool's input schema is itself invalid."""
    Draft202012Validator.check_schema(schema)


def _describe(error: jsonschema.ValidationError) -> str:
    if error.path:
        return f"{'.'.join(str(p) for p in error.path)}: {error.message}"
    return error.message


def validate_arguments(schema: Dict[str, Any], raw: Dict[str, Any] | None) -> Dict[str, Any]:
    """
    Validate raw tool arguments against a tool's input schema and return a new
    dict with schema defaults filled in for omitted optional fields.
    """
    if raw is None:
        raw = {}
    if isinstance(raw, dict):
        # null counts as omitted
        raw = {k: v for k, v in raw.items() if v is not None}

    errors = sorted(Draft202012Validator(schema).iter_errors(raw), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ToolArgumentError("; ".join(_describe(e) for e in errors))

    out = dict(raw)
    for key, prop in schema.get("properties", {}).items():
        if key not in out and "default" in prop:
            out[key] = prop["default"]
    return out
