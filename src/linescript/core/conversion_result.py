"""
Data structures representing the output of the conversion pipeline.

This module defines the `ConversionResult` Pydantic model, which carries the
generated code or the error that stopped the translation.
"""

from typing import List

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
  """
  Container for the result of translating one source text.
  """

  code: str = Field(default="", description="The generated TypeScript source.")
  errors: List[str] = Field(default_factory=list, description="Error messages encountered.")
  success: bool = Field(default=True, description="False if translation was aborted.")
  statement_count: int = Field(default=0, description="Number of IR statements produced.")

  @property
  def has_errors(self) -> bool:
    return len(self.errors) > 0
