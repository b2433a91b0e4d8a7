"""
Centralized environment variable configuration.

Only process-level settings live here (environment name and log level).
Client settings are explicit constructor configuration, see
``neorest.client.config.GraphRestConfig``.
"""

import os


def get_str_env(key: str, default: str = "") -> str:
  """Get a string environment variable."""
  return os.getenv(key, default)


class EnvConfig:
  """Process-wide settings read once at import."""

  # prod, test or dev; selects the logging profile
  ENVIRONMENT = get_str_env("NEOREST_ENVIRONMENT", "dev")
  LOG_LEVEL = get_str_env("NEOREST_LOG_LEVEL", "INFO")


env = EnvConfig()
