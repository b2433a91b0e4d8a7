"""
Error classification for non-success responses.

4xx bodies carry a structured error envelope; the envelope's ``exception``
discriminator selects a specific error kind, falling back to ServerError.
5xx bodies are not decoded.
"""

from typing import Callable, Mapping, Optional

from neorest.models import ErrorEnvelope
from .codec import Shape, decode
from .exceptions import (
  DecodingError,
  EntityNotFound,
  ErrorResponseDecodingError,
  GraphRestError,
  ServerError,
)

ErrorFactory = Callable[[ErrorEnvelope, int], GraphRestError]


def _entity_not_found(envelope: ErrorEnvelope, status_code: int) -> GraphRestError:
  return EntityNotFound(envelope.message, status_code=status_code)


DEFAULT_EXCEPTION_KINDS: Mapping[str, ErrorFactory] = {
  "NodeNotFoundException": _entity_not_found,
  "RelationshipNotFoundException": _entity_not_found,
}


def specific_error(
  envelope: ErrorEnvelope,
  status_code: int,
  exception_kinds: Optional[Mapping[str, ErrorFactory]] = None,
) -> GraphRestError:
  """
  Convert a decoded envelope into its specific error kind.

  ``exception_kinds`` entries are consulted before the defaults.
  """
  factory = None
  if exception_kinds:
    factory = exception_kinds.get(envelope.exception)
  if factory is None:
    factory = DEFAULT_EXCEPTION_KINDS.get(envelope.exception)
  if factory is not None:
    return factory(envelope, status_code)

  return ServerError(
    envelope.message,
    exception=envelope.exception,
    fullname=envelope.fullname,
    stacktrace=envelope.stacktrace,
    status_code=status_code,
    response_data=envelope.model_dump(),
  )


def classify(
  status_code: int,
  content: bytes,
  exception_kinds: Optional[Mapping[str, ErrorFactory]] = None,
) -> GraphRestError:
  """
  Classify a 4xx response.

  Args:
      status_code: HTTP status code, must be in [400, 500)
      content: Raw response body
      exception_kinds: Extra discriminator to error factory mappings

  Returns:
      EntityNotFound, ServerError, or ErrorResponseDecodingError if the
      envelope itself could not be parsed
  """
  if not 400 <= status_code < 500:
    raise ValueError(f"classify() only handles 4xx responses, got {status_code}")

  try:
    envelope = decode(content, Shape.ERROR_ENVELOPE)
  except DecodingError as e:
    error = ErrorResponseDecodingError(
      f"Error decoding server error: {e}",
      status_code=status_code,
      response_data=content,
    )
    error.__cause__ = e
    return error

  return specific_error(envelope, status_code, exception_kinds)


def classify_server_failure(status_code: int, content: bytes) -> ServerError:
  """Wrap a 5xx response as an undecoded ServerError."""
  message = content.decode("utf-8", errors="replace").strip()
  return ServerError(
    message or f"Server returned HTTP {status_code}",
    status_code=status_code,
    response_data=content,
  )
