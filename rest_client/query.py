"""Flat record to URL query-string encoding."""

import dataclasses
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel

from rest_client.errors import InvalidInputKindError

QUERY_KEY_METADATA = "query"


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _record_fields(data: Any) -> list[tuple[str, Any]]:
    """Return ``(query_key, value)`` pairs in field declaration order."""
    if isinstance(data, BaseModel):
        return [
            (info.alias or name.lower(), getattr(data, name))
            for name, info in type(data).model_fields.items()
        ]
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return [
            (field.metadata.get(QUERY_KEY_METADATA) or field.name.lower(), getattr(data, field.name))
            for field in dataclasses.fields(data)
        ]
    raise InvalidInputKindError(
        f"input data must be a dataclass or pydantic model instance, got {type(data).__name__}."
    )


def struct_to_query_params(data: Any) -> str:
    """
    Encode a flat record as ``key=value`` pairs sorted by key.

    Dataclass fields may override their key with ``field(metadata={"query": ...})``;
    pydantic fields use their ``alias``. Otherwise the lowercased field name is used.
    """
    grouped: dict[str, list[str]] = {}
    for key, value in _record_fields(data):
        grouped.setdefault(key, []).append(_format_value(value))

    pairs = [(key, value) for key in sorted(grouped) for value in grouped[key]]
    return urlencode(pairs)
