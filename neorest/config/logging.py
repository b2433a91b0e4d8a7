"""
Structured logging configuration for neorest.

The library never configures logging on import. Applications that want the
JSON-lines output call ``setup_logging()`` once at startup; everyone else gets
whatever their own logging setup does with the ``neorest`` loggers.
"""

import json
import logging
import logging.config
import traceback
from datetime import datetime, timezone
from typing import Any

from neorest.config.env import EnvConfig


class StructuredFormatter(logging.Formatter):
  """
  JSON formatter that emits one searchable object per record.

  Fields:
  - timestamp in ISO format
  - level, component and message
  - HTTP exchange fields (method, url, status_code, duration_ms) when present
  """

  def format(self, record: logging.LogRecord) -> str:
    log_entry = {
      "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
      .isoformat()
      .replace("+00:00", "Z"),
      "level": record.levelname,
      "component": getattr(record, "component", record.name),
      "message": record.getMessage(),
    }

    if hasattr(record, "action"):
      log_entry["action"] = record.action

    for attr in ("method", "url", "status_code", "duration_ms"):
      if hasattr(record, attr):
        log_entry[attr] = getattr(record, attr)

    if record.levelno >= logging.ERROR and record.exc_info:
      log_entry["error"] = {
        "type": record.exc_info[0].__name__ if record.exc_info[0] else "Unknown",
        "message": str(record.exc_info[1]) if record.exc_info[1] else "",
        "traceback": traceback.format_exception(*record.exc_info),
      }

    if hasattr(record, "metadata"):
      log_entry["metadata"] = record.metadata

    return json.dumps(log_entry, default=str, separators=(",", ":"))


def get_logging_config(environment: str | None = None) -> dict[str, Any]:
  """
  Generate logging configuration based on environment.

  - prod: INFO level, structured output
  - test: WARNING level, minimal output for clean test runs
  - dev: LOG_LEVEL (default INFO), plain text output
  """
  env = environment or EnvConfig.ENVIRONMENT

  if env == "prod":
    default_level = "INFO"
  elif env == "test":
    default_level = "WARNING"
  else:  # dev
    default_level = EnvConfig.LOG_LEVEL or "INFO"

  handler = "console" if env == "dev" else "structured"

  return {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
      "structured": {
        "()": StructuredFormatter,
      },
      "simple": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
    },
    "handlers": {
      "structured": {
        "class": "logging.StreamHandler",
        "level": default_level,
        "formatter": "structured",
        "stream": "ext://sys.stderr",
      },
      "console": {
        "class": "logging.StreamHandler",
        "level": default_level,
        "formatter": "simple",
        "stream": "ext://sys.stderr",
      },
    },
    "loggers": {
      "neorest": {
        "level": default_level,
        "handlers": [handler],
        "propagate": False,
      },
      "neorest.transport": {
        "level": default_level,
        "handlers": [handler],
        "propagate": False,
      },
      # Third-party loggers (reduced verbosity)
      "httpx": {
        "level": "WARNING",
        "handlers": [handler],
        "propagate": False,
      },
      "httpcore": {
        "level": "WARNING",
        "handlers": [handler],
        "propagate": False,
      },
    },
  }


def setup_logging(environment: str | None = None) -> None:
  """Initialize structured logging configuration."""
  config = get_logging_config(environment)
  logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
  """Get a logger with structured logging capabilities."""
  return logging.getLogger(name)


def log_http_request(logger: logging.Logger, method: str, url: str) -> None:
  """Mirror an outgoing request line."""
  logger.info(
    f"{method} {url}",
    extra={
      "component": "transport",
      "action": "request_sent",
      "method": method,
      "url": url,
    },
  )


def log_http_response(
  logger: logging.Logger,
  method: str,
  url: str,
  status_code: int,
  duration_ms: float,
  content: bytes = b"",
) -> None:
  """Mirror an incoming response status and body."""
  logger.info(
    f"{method} {url} - {status_code} ({duration_ms:.2f}ms)",
    extra={
      "component": "transport",
      "action": "response_received",
      "method": method,
      "url": url,
      "status_code": status_code,
      "duration_ms": duration_ms,
      "metadata": {"body": content.decode("utf-8", errors="replace")},
    },
  )
