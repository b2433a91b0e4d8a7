"""
neorest Client - blocking client for a graph database hypermedia REST API.

The request pipeline (codec, transport, classifier) plus the entity façade
built on top of it.
"""

from .base import GraphRestClient
from .classifier import DEFAULT_EXCEPTION_KINDS, classify
from .codec import Shape, decode, encode
from .config import DEFAULT_ADDRESS, GraphRestConfig
from .entities import Node, Relationship, ServiceRoot, open_database
from .exceptions import (
  DecodingError,
  EncodingError,
  EntityNotFound,
  ErrorResponseDecodingError,
  GraphRestError,
  ServerError,
  TransportFailure,
  TransportTimeout,
)
from .transport import RawResponse, TransportExecutor

__all__ = [
  "DEFAULT_ADDRESS",
  "DEFAULT_EXCEPTION_KINDS",
  "DecodingError",
  "EncodingError",
  "EntityNotFound",
  "ErrorResponseDecodingError",
  "GraphRestClient",
  "GraphRestConfig",
  "GraphRestError",
  "Node",
  "RawResponse",
  "Relationship",
  "ServerError",
  "ServiceRoot",
  "Shape",
  "TransportExecutor",
  "TransportFailure",
  "TransportTimeout",
  "classify",
  "decode",
  "encode",
  "open_database",
]
