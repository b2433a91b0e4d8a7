"""
neorest logging entry point.

Library code logs through these loggers and never installs handlers of its
own beyond a ``NullHandler``. Call ``neorest.config.setup_logging()`` from an
application to get structured output.
"""

import logging

from .config.logging import get_logger, log_http_request, log_http_response

logger = get_logger("neorest")
logger.addHandler(logging.NullHandler())

# Receives the request/response mirror when the diagnostic flags are enabled
transport_logger = get_logger("neorest.transport")

__all__ = [
  "logger",
  "transport_logger",
  "log_http_request",
  "log_http_response",
]
