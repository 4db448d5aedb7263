"""
Program Parser.

Splits linescript source into lines and runs each non-blank line through the
tokenizer and classifier, in order, to build a `Program`.
"""

import logging
import re
from typing import List

from linescript.compiler.frontend.classifier import classify
from linescript.compiler.frontend.tokens import LineLexer
from linescript.compiler.ir import Program, Statement

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


class LineParser:
  """
  Builds the IR for a whole source file.
  """

  def __init__(self, code: str):
    """
    Args:
        code: The full source text.
    """
    self.code = code
    self.lexer = LineLexer()

  def parse(self) -> Program:
    """
    Parses every non-blank line.

    Returns:
        Program: One statement per non-blank line, in source order.

    Raises:
        TokenizeError: On the first line that cannot be tokenized. The error
            carries that line's 1-based number.
    """
    statements: List[Statement] = []
    lines: List[int] = []

    for number, raw in enumerate(_LINE_BREAK.split(self.code), start=1):
      text = raw.strip()
      if not text:
        continue
      tokens = self.lexer.tokenize(text, line_number=number)
      statements.append(classify(tokens))
      lines.append(number)

    logger.debug("Parsed %d statements", len(statements))
    return Program(statements=tuple(statements), lines=tuple(lines))


def parse_program(code: str) -> Program:
  """Shortcut for ``LineParser(code).parse()``."""
  return LineParser(code).parse()
