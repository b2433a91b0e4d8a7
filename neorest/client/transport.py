"""
HTTP transport executor.

Issues one request per call on a shared ``httpx.Client``, following
redirects, and hands back the status code with the fully read body. Status
interpretation is left to the caller; only transport-level failures raise
here.
"""

import time
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from neorest.logger import log_http_request, log_http_response, transport_logger
from .config import GraphRestConfig
from .exceptions import TransportFailure, TransportTimeout

JSON_MEDIA_TYPE = "application/json"


@dataclass(frozen=True)
class RawResponse:
  """Status code and body of a completed round trip."""

  status_code: int
  content: bytes

  @property
  def is_client_error(self) -> bool:
    return 400 <= self.status_code < 500

  @property
  def is_server_error(self) -> bool:
    return self.status_code >= 500


class TransportExecutor:
  """Blocking HTTP executor shared by every entity of one client handle."""

  def __init__(
    self,
    config: Optional[GraphRestConfig] = None,
    http_client: Optional[httpx.Client] = None,
  ):
    """
    Initialize the executor.

    Args:
        config: Client configuration
        http_client: Preconfigured httpx client; not closed by the executor
    """
    self.config = config or GraphRestConfig()
    self._owns_client = http_client is None

    if http_client is None:
      http_client = httpx.Client(
        timeout=httpx.Timeout(self.config.timeout),
        headers=self.config.headers,
        verify=self.config.verify_ssl,
      )
    self.client = http_client

  def __enter__(self):
    return self

  def __exit__(self, exc_type, exc_val, exc_tb):
    self.close()

  def close(self) -> None:
    """Close the underlying client if this executor created it."""
    if self._owns_client:
      self.client.close()

  def _headers(self, body: Optional[bytes]) -> Dict[str, str]:
    headers = {"Accept": JSON_MEDIA_TYPE}
    if body is not None:
      headers["Content-Type"] = JSON_MEDIA_TYPE
    return headers

  def execute(
    self, method: str, url: str, body: Optional[bytes] = None
  ) -> RawResponse:
    """
    Execute one HTTP request.

    Args:
        method: HTTP method
        url: Absolute target URL
        body: Encoded JSON body, or None

    Returns:
        RawResponse with the status code and full body

    Raises:
        ValueError: If method or url is empty
        TransportTimeout: If the request timed out
        TransportFailure: On connection or protocol failures, or a URL
            httpx cannot parse
    """
    if not method:
      raise ValueError("method must not be empty")
    if not url:
      raise ValueError("url must not be empty")

    method = method.upper()

    if self.config.log_requests:
      log_http_request(transport_logger, method, url)

    start_time = time.time()
    try:
      response = self.client.request(
        method,
        url,
        content=body,
        headers=self._headers(body),
        follow_redirects=True,
      )
      content = response.read()
    except httpx.TimeoutException as e:
      raise TransportTimeout(f"Request timeout: {e}", original=e) from e
    except httpx.RequestError as e:
      raise TransportFailure(f"Request error: {e}", original=e) from e
    except httpx.InvalidURL as e:
      raise TransportFailure(f"Invalid URL: {e}", original=e) from e

    if self.config.log_responses:
      duration_ms = (time.time() - start_time) * 1000
      log_http_response(
        transport_logger, method, url, response.status_code, duration_ms, content
      )

    return RawResponse(status_code=response.status_code, content=content)
