"""
neorest - client library for a graph database's hypermedia REST interface.
"""

from .client import (
  DEFAULT_ADDRESS,
  DecodingError,
  EncodingError,
  EntityNotFound,
  GraphRestClient,
  GraphRestConfig,
  GraphRestError,
  Node,
  Relationship,
  ServerError,
  ServiceRoot,
  TransportFailure,
  TransportTimeout,
  open_database,
)

__version__ = "0.1.0"

__all__ = [
  "DEFAULT_ADDRESS",
  "DecodingError",
  "EncodingError",
  "EntityNotFound",
  "GraphRestClient",
  "GraphRestConfig",
  "GraphRestError",
  "Node",
  "Relationship",
  "ServerError",
  "ServiceRoot",
  "TransportFailure",
  "TransportTimeout",
  "open_database",
]
