"""
Line Tokenizer.

Provides `LineLexer`, which splits one line of linescript source into a flat
list of string tokens. There are only two token classes:

- **Word/operator runs**: a maximal run of ASCII letters, digits and the
  punctuation ``!@#$%^&*()-=_+[]{};:,.<>/?``. Identifiers, numbers, booleans
  and operators all fall in this class, so ``a+b`` is a single token.
- **Quoted strings**: everything from a ``"`` up to the next ``"``, kept
  verbatim including both quotes.

Tokens never contain whitespace except inside a quoted string.
"""

import re
from typing import List, Optional

from linescript.errors import InvalidString, UnknownCharacter

WORD_CHARS = r"A-Za-z0-9!@#$%^&*()\-=_+\[\]{};:,.<>/?"
QUOTE = '"'


class LineLexer:
  """
  Character-class scanner for a single source line.
  """

  WORD_RUN = re.compile(f"[{WORD_CHARS}]+")
  WHITESPACE = re.compile(r"\s+")

  def tokenize(self, text: str, line_number: Optional[int] = None) -> List[str]:
    """
    Tokenizes one line.

    Args:
        text: The raw line (without its terminator).
        line_number: 1-based line number used only for error reporting.

    Returns:
        The ordered tokens. Empty for a blank line.

    Raises:
        InvalidString: If a quote is opened but not closed on this line.
        UnknownCharacter: If a character belongs to no token class.
    """
    tokens: List[str] = []
    pos = 0
    length = len(text)

    while pos < length:
      match = self.WHITESPACE.match(text, pos)
      if match:
        pos = match.end()
        continue

      match = self.WORD_RUN.match(text, pos)
      if match:
        tokens.append(match.group(0))
        pos = match.end()
        continue

      char = text[pos]
      if char == QUOTE:
        close = text.find(QUOTE, pos + 1)
        if close == -1:
          raise InvalidString(line=line_number, column=pos + 1)
        tokens.append(text[pos : close + 1])
        pos = close + 1
        continue

      raise UnknownCharacter(char, line=line_number, column=pos + 1)

    return tokens


_DEFAULT_LEXER = LineLexer()


def tokenize(text: str, line_number: Optional[int] = None) -> List[str]:
  """Module-level shortcut for :meth:`LineLexer.tokenize`."""
  return _DEFAULT_LEXER.tokenize(text, line_number)
