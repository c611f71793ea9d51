"""JSON encoding of webhook payloads and decoding of webhook responses."""

import json
from functools import lru_cache
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, model_validator
from pydantic.errors import PydanticSchemaGenerationError
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

from n8n_webhook_client.errors import DecodeError

T = TypeVar("T")


def _fold(name: str) -> str:
    return name.replace("_", "").lower()


class WebhookModel(BaseModel):
    """Base model for webhook payloads and responses.

    Incoming field names are matched ignoring case and underscores, so
    ``processedAt``, ``ProcessedAt``, ``PROCESSEDAT`` and ``processed_at`` all
    populate ``processed_at``. Models serialize with camelCase keys.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        lookup: Dict[str, str] = {}
        for name, info in cls.model_fields.items():
            lookup[_fold(name)] = name
            if info.alias:
                lookup[_fold(info.alias)] = name

        matched: Dict[Any, Any] = {}
        for key, value in data.items():
            name = lookup.get(_fold(key)) if isinstance(key, str) else None
            matched[name or key] = value
        return matched


def encode_payload(payload: Any) -> bytes:
    """Serialize a payload to UTF-8 encoded JSON.

    Plain JSON values, pydantic models (dumped by alias) and dataclasses are
    accepted.
    """
    return json.dumps(to_jsonable_python(payload, by_alias=True)).encode("utf-8")


@lru_cache(maxsize=128)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def decode_response(body: str, result_type: Optional[Type[T]] = None) -> T:
    """Decode a response body into ``result_type``.

    Args:
        body: Response body text
        result_type: Type to decode into; ``None`` or ``Any`` returns the
            parsed JSON as is

    Returns:
        The decoded value

    Raises:
        DecodeError: If the body is not JSON or does not fit ``result_type``,
            including result types pydantic cannot build a schema for
    """
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as e:
        raise DecodeError(str(e), details={"body": body[:500]}) from e

    if result_type is None or result_type is Any:
        return parsed

    try:
        adapter = _adapter(result_type)
    except PydanticSchemaGenerationError as e:
        raise DecodeError(str(e), details={"result_type": repr(result_type)}) from e

    try:
        return adapter.validate_python(parsed)
    except ValidationError as e:
        raise DecodeError(str(e), details={"errors": e.errors(include_url=False)}) from e
