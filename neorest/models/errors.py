"""
Error envelope returned by the server on 4xx responses.
"""

from typing import List

from pydantic import ConfigDict, Field

from .base import DocumentModel


class ErrorEnvelope(DocumentModel):
  """Wire format of a client error: ``{message, exception, fullname, stacktrace}``."""

  model_config = ConfigDict(extra="ignore", frozen=True)

  message: str = Field("", description="Human readable error message")
  exception: str = Field("", description="Short exception name, the kind discriminator")
  fullname: str = Field("", description="Fully qualified exception class name")
  stacktrace: List[str] = Field(default_factory=list, description="Server stack trace")
