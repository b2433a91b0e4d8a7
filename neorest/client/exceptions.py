"""
neorest Client Exceptions.

Defines the exception hierarchy for the REST request pipeline.
"""

from typing import Any, List, Optional


class GraphRestError(Exception):
  """Base exception for all neorest errors."""

  def __init__(
    self,
    message: str,
    status_code: Optional[int] = None,
    response_data: Optional[Any] = None,
  ):
    super().__init__(message)
    self.message = message
    self.status_code = status_code
    self.response_data = response_data


class EncodingError(GraphRestError):
  """
  Request body could not be serialized to JSON.

  Examples: sets, arbitrary objects, NaN, cyclic structures
  """

  pass


class DecodingError(GraphRestError):
  """Response body was not valid JSON or did not match the expected shape."""

  pass


class ErrorResponseDecodingError(DecodingError):
  """A 4xx response body could not be parsed as an error envelope."""

  pass


class TransportFailure(GraphRestError):
  """
  Network, connection or HTTP framing failure.

  The underlying httpx exception is kept on ``original`` and chained as
  ``__cause__``. Never retried by the library.
  """

  def __init__(self, message: str, original: Optional[BaseException] = None):
    super().__init__(message)
    self.original = original


class TransportTimeout(TransportFailure):
  """Request timeout errors."""

  pass


class EntityNotFound(GraphRestError):
  """
  The requested node or relationship does not exist.

  Carries only the server's message so callers can branch on absence.
  """

  pass


class ServerError(GraphRestError):
  """
  Any other error reported by the server.

  Carries the full error envelope for diagnostics. 5xx responses produce an
  undecoded ServerError whose message is the raw body text.
  """

  def __init__(
    self,
    message: str,
    exception: str = "",
    fullname: str = "",
    stacktrace: Optional[List[str]] = None,
    status_code: Optional[int] = None,
    response_data: Optional[Any] = None,
  ):
    super().__init__(message, status_code, response_data)
    self.exception = exception
    self.fullname = fullname
    self.stacktrace = list(stacktrace or [])

  def __str__(self) -> str:
    if self.exception:
      return f"{self.exception}: {self.message}"
    return self.message
