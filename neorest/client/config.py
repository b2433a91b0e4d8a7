"""
neorest Client Configuration.

Centralized configuration for the REST client handle.
"""

import os
from typing import Any, Callable, Dict
from dataclasses import dataclass, field

DEFAULT_ADDRESS = "http://localhost:7474/db/data/"


@dataclass
class GraphRestConfig:
  """Configuration for the REST client."""

  # Connection settings
  base_url: str = DEFAULT_ADDRESS
  timeout: float = 30.0

  # Request settings
  headers: Dict[str, str] = field(default_factory=dict)
  verify_ssl: bool = True

  # Diagnostics: mirror method+URL and status+body to the transport logger
  log_requests: bool = False
  log_responses: bool = False

  # Error envelope "exception" name to error factory, checked before the
  # built-in kinds
  exception_kinds: Dict[str, Callable[..., Any]] = field(default_factory=dict)

  @classmethod
  def from_env(cls, prefix: str = "NEOREST_CLIENT_") -> "GraphRestConfig":
    """
    Create configuration from environment variables.

    Never called by the library itself; embedding applications opt in.

    Args:
        prefix: Environment variable prefix

    Returns:
        GraphRestConfig instance
    """
    config = cls()

    # Map of config attribute to env var suffix
    env_mappings = {
      "base_url": "BASE_URL",
      "timeout": "TIMEOUT",
      "verify_ssl": "VERIFY_SSL",
      "log_requests": "LOG_REQUESTS",
      "log_responses": "LOG_RESPONSES",
    }

    for attr, env_suffix in env_mappings.items():
      env_var = prefix + env_suffix
      value = os.environ.get(env_var)

      if value is not None:
        # Convert to appropriate type
        attr_type = type(getattr(config, attr))
        if attr_type is bool:
          setattr(config, attr, value.lower() in ("true", "1", "yes"))
        elif attr_type in (int, float):
          setattr(config, attr, attr_type(value))
        else:
          setattr(config, attr, value)

    return config

  def with_overrides(self, **kwargs: Any) -> "GraphRestConfig":
    """
    Create a new config with overridden values.

    Args:
        **kwargs: Values to override

    Returns:
        New GraphRestConfig instance
    """
    config_dict: Dict[str, Any] = {
      "base_url": self.base_url,
      "timeout": self.timeout,
      "headers": self.headers.copy(),
      "verify_ssl": self.verify_ssl,
      "log_requests": self.log_requests,
      "log_responses": self.log_responses,
      "exception_kinds": self.exception_kinds.copy(),
    }
    config_dict.update(kwargs)
    return GraphRestConfig(**config_dict)
