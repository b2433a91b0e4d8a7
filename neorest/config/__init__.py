"""
Centralized configuration package for neorest.

Process-level environment settings and the structured logging setup.
"""

from .env import EnvConfig, env
from .logging import (
  StructuredFormatter,
  get_logger,
  get_logging_config,
  setup_logging,
)

__all__ = [
  "EnvConfig",
  "StructuredFormatter",
  "env",
  "get_logger",
  "get_logging_config",
  "setup_logging",
]
