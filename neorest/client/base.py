"""
neorest client handle.

Runs the request pipeline shared by every entity:
encode -> execute -> classify (4xx/5xx) or decode (anything else).
"""

from typing import Any, Iterable, Optional, Type, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from neorest.logger import logger
from .codec import Shape, decode, encode
from .classifier import classify, classify_server_failure
from .config import GraphRestConfig
from .transport import TransportExecutor


def append_segment(url: str, segment: Union[int, str]) -> str:
  """Append one percent-quoted path segment to a server-advertised URL."""
  return f"{url.rstrip('/')}/{quote(str(segment), safe='')}"


def join_types(types: Iterable[str]) -> str:
  """Join relationship types into one path segment, ``&`` encoded as ``%26``."""
  return "%26".join(quote(t, safe="") for t in types)


class GraphRestClient:
  """Immutable client handle: configuration plus a thread-safe executor."""

  def __init__(
    self,
    base_url: Optional[str] = None,
    config: Optional[GraphRestConfig] = None,
    http_client: Optional[httpx.Client] = None,
    **kwargs,
  ):
    """
    Initialize the client.

    Args:
        base_url: Address of the root document
        config: Client configuration
        http_client: Preconfigured httpx client (timeouts, transports)
        **kwargs: Additional config overrides
    """
    config = config or GraphRestConfig()
    if base_url:
      kwargs["base_url"] = base_url
    if kwargs:
      config = config.with_overrides(**kwargs)

    if not config.base_url:
      raise ValueError("base_url must be provided")

    self.config = config
    self.executor = TransportExecutor(config, http_client=http_client)
    logger.debug(f"GraphRestClient configured for {config.base_url}")

  def __enter__(self):
    return self

  def __exit__(self, exc_type, exc_val, exc_tb):
    self.close()

  def close(self) -> None:
    """Close the client and cleanup resources."""
    self.executor.close()

  def request(
    self,
    method: str,
    url: str,
    body: Any = None,
    shape: Shape = Shape.EMPTY,
    model: Optional[Type[BaseModel]] = None,
  ) -> Any:
    """
    Make one request and decode the result.

    Args:
        method: HTTP method
        url: Absolute URL taken from an endpoint descriptor
        body: Request body, None for no body
        shape: Expected response shape
        model: Pydantic model for entity shapes

    Returns:
        Decoded value for ``shape``

    Raises:
        EncodingError, TransportFailure, EntityNotFound, ServerError,
        DecodingError
    """
    payload = encode(body)
    response = self.executor.execute(method, url, payload)

    if response.is_client_error:
      raise classify(
        response.status_code, response.content, self.config.exception_kinds
      )
    if response.is_server_error:
      raise classify_server_failure(response.status_code, response.content)

    return decode(response.content, shape, model)
