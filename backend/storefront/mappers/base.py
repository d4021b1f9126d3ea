"""
Mapper base: raw response bytes -> domain entity

Payloads arrive nested under the "data" envelope key.
"""
import json
from typing import Any, Dict, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel, ValidationError

from storefront.core.exceptions import DecodingError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

ENVELOPE_KEY = "data"


class Mapper(Protocol[T]):
    """Decodes a response body into an entity, raising DecodingError on bad shape"""

    def map(self, response: bytes) -> T:
        ...


def load_json(response: bytes) -> Any:
    """Parse a response body, raising DecodingError on invalid JSON"""
    if not response:
        raise DecodingError("Empty response body")
    try:
        return json.loads(response)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodingError(f"Invalid JSON payload: {e}") from e


def unwrap_envelope(response: bytes) -> Any:
    """Return the payload stored under the "data" envelope key"""
    document = load_json(response)
    if not isinstance(document, dict) or ENVELOPE_KEY not in document:
        raise DecodingError(f"Missing '{ENVELOPE_KEY}' envelope")
    return document[ENVELOPE_KEY]


def validate_entity(model: Type[M], payload: Any, context: Optional[Dict[str, Any]] = None) -> M:
    """Validate one entity, turning pydantic and shape errors into DecodingError"""
    try:
        return model.model_validate(payload, context=context)
    except (ValidationError, TypeError, ValueError) as e:
        raise DecodingError(f"{model.__name__}: {e}") from e
