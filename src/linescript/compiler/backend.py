"""
Compiler Backend Protocol.

Defines the interface for backends that consume the statement IR and emit
target source text.
"""

from abc import ABC, abstractmethod

from linescript.compiler.ir import Program


class CompilerBackend(ABC):
  """
  Abstract base class for code generation backends.
  """

  extension: str = ""
  """File extension of the generated source (e.g. ``.ts``)."""

  @abstractmethod
  def emit(self, program: Program) -> str:
    """
    Renders a whole program.

    Args:
        program (Program): The parsed statements of one file.

    Returns:
        str: Target source text, one line per statement.
    """
    pass
