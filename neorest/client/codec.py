"""
JSON body codec.

Outgoing bodies are any JSON-representable value (or a pydantic model);
incoming bodies are decoded into the shape the caller asks for.
"""

import json
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from neorest.models import ErrorEnvelope
from .exceptions import DecodingError, EncodingError


class Shape(str, Enum):
  """Expected shape of a response body."""

  SINGLE_ENTITY = "single_entity"
  ENTITY_LIST = "entity_list"
  PROPERTY_MAP = "property_map"
  ERROR_ENVELOPE = "error_envelope"
  STRING_LIST = "string_list"
  VALUE = "value"
  EMPTY = "empty"


def _encode_default(value: Any) -> Any:
  if isinstance(value, BaseModel):
    return value.model_dump(by_alias=True)
  raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode(value: Any) -> Optional[bytes]:
  """
  Serialize a request body.

  Args:
      value: JSON-representable value, pydantic model, or None for no body

  Returns:
      UTF-8 JSON bytes, or None when there is no body

  Raises:
      EncodingError: If the value cannot be represented as JSON
  """
  if value is None:
    return None

  try:
    text = json.dumps(
      value,
      default=_encode_default,
      allow_nan=False,
      ensure_ascii=False,
      separators=(",", ":"),
    )
  except (TypeError, ValueError, RecursionError) as e:
    raise EncodingError(f"Cannot encode request body: {e}") from e

  return text.encode("utf-8")


def _parse(content: bytes) -> Any:
  if not content:
    raise DecodingError("Expected a JSON body, got an empty response")
  try:
    return json.loads(content)
  except (json.JSONDecodeError, UnicodeDecodeError) as e:
    raise DecodingError(
      f"Invalid JSON response: {e}", response_data=content[:200]
    ) from e


def _validate(model: Type[BaseModel], data: Any) -> BaseModel:
  try:
    return model.model_validate(data)
  except ValidationError as e:
    raise DecodingError(
      f"Response does not match {model.__name__}: {e}", response_data=data
    ) from e


def _require(data: Any, expected: type, shape: Shape) -> None:
  if not isinstance(data, expected):
    raise DecodingError(
      f"Expected {expected.__name__} for {shape.value}, got {type(data).__name__}",
      response_data=data,
    )


def decode(
  content: bytes,
  shape: Shape,
  model: Optional[Type[BaseModel]] = None,
) -> Any:
  """
  Decode a response body into the requested shape.

  Args:
      content: Raw response bytes
      shape: Shape the caller expects
      model: Pydantic model for SINGLE_ENTITY and ENTITY_LIST

  Returns:
      Model instance, list of models, dict, list of strings, ErrorEnvelope,
      any JSON value for VALUE, or None for EMPTY

  Raises:
      DecodingError: If the body is malformed or does not match the shape
  """
  if shape is Shape.EMPTY:
    return None

  if shape is Shape.PROPERTY_MAP:
    # 204 No Content means "no properties"
    if not content:
      return {}
    data = _parse(content)
    _require(data, dict, shape)
    properties: Dict[str, Any] = data
    return properties

  if shape in (Shape.SINGLE_ENTITY, Shape.ENTITY_LIST) and model is None:
    raise ValueError(f"A model is required to decode {shape.value}")

  data = _parse(content)

  if shape is Shape.SINGLE_ENTITY:
    _require(data, dict, shape)
    return _validate(model, data)

  if shape is Shape.ENTITY_LIST:
    _require(data, list, shape)
    return [_validate(model, item) for item in data]

  if shape is Shape.ERROR_ENVELOPE:
    _require(data, dict, shape)
    return _validate(ErrorEnvelope, data)

  if shape is Shape.VALUE:
    return data

  if shape is Shape.STRING_LIST:
    _require(data, list, shape)
    if not all(isinstance(item, str) for item in data):
      raise DecodingError("Expected a list of strings", response_data=data)
    strings: List[str] = data
    return strings

  raise ValueError(f"Unknown shape: {shape!r}")
