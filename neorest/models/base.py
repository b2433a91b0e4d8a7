"""
Shared base for server documents.
"""

from typing import Any

from pydantic import BaseModel, ValidationInfo, field_validator


class DocumentModel(BaseModel):
  """Base model where a JSON null decodes to the field's empty default."""

  @field_validator("*", mode="before")
  @classmethod
  def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
    if value is None and info.field_name is not None:
      return cls.model_fields[info.field_name].get_default(call_default_factory=True)
    return value
