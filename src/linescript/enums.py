"""
Enumerations for linescript.

This module defines the statement kinds used to tag IR nodes and the fixed
keyword tables the classifier dispatches on.
"""

from enum import Enum


class StatementKind(str, Enum):
  """
  Tag of a classified source line.

  Every IR node carries exactly one of these values in its ``kind`` field.
  """

  VARIABLE = "variable"
  FUNCTION = "function"
  BLOCK_END = "block_end"
  ASSIGN = "assign"
  OUTPUT = "output"
  RETURN = "return"
  CONDITIONAL = "conditional"
  ELSE = "else"
  WHILE = "while"
  REPEAT = "repeat"
  CALL = "call"


# Primitive type names accepted at the start of a declaration.
PRIMITIVE_TYPES = ("string", "number", "boolean")

# Aliases for console output.
OUTPUT_COMMANDS = ("write", "say", "echo", "print")
