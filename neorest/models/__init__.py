"""
Pydantic models for the hypermedia documents exchanged with the server.
"""

from .errors import ErrorEnvelope
from .links import NodeLinks, RelationshipLinks, ServiceRootLinks

__all__ = [
  "ErrorEnvelope",
  "NodeLinks",
  "RelationshipLinks",
  "ServiceRootLinks",
]
