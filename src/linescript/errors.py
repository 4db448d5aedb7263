"""
Exception hierarchy for linescript.

Lexical failures are fatal to the translation of a whole file. They carry
the position of the offending character so the CLI can report it.
"""

from typing import Optional


class LineScriptError(Exception):
  """Base class for all errors raised by the translator."""

  pass


class TokenizeError(LineScriptError, ValueError):
  """
  Raised when a source line cannot be split into tokens.

  Attributes:
      line (Optional[int]): 1-based source line number, when known.
      column (Optional[int]): 1-based column of the offending character.
  """

  def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
    super().__init__(message)
    self.message = message
    self.line = line
    self.column = column

  def __str__(self) -> str:
    if self.line is None:
      return self.message
    if self.column is None:
      return f"{self.message} (line {self.line})"
    return f"{self.message} (line {self.line}, col {self.column})"


class InvalidString(TokenizeError):
  """An opening quote has no terminating quote on the same line."""

  def __init__(self, line: Optional[int] = None, column: Optional[int] = None):
    super().__init__("Invalid String", line=line, column=column)


class UnknownCharacter(TokenizeError):
  """
  A character outside the word/operator class, whitespace and quotes.

  Attributes:
      char (str): The offending character.
  """

  def __init__(self, char: str, line: Optional[int] = None, column: Optional[int] = None):
    super().__init__(f"Unknown Character: {char!r}", line=line, column=column)
    self.char = char


class UnbalancedBlock(LineScriptError):
  """
  Raised by the optional block balance check.

  Attributes:
      line (Optional[int]): 1-based source line of the offending statement, or
          None when blocks are left open at the end of the file.
  """

  def __init__(self, message: str, line: Optional[int] = None):
    super().__init__(message if line is None else f"{message} (line {line})")
    self.line = line
