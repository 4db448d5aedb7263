"""
linescript Frontend.

Turns source text into the flat statement IR: `LineLexer` splits a line into
tokens, `classify` maps the tokens to one statement, and `LineParser` drives
both over a whole file.
"""

from linescript.compiler.frontend.classifier import classify, pair_params
from linescript.compiler.frontend.parser import LineParser, parse_program
from linescript.compiler.frontend.tokens import LineLexer, tokenize

__all__ = [
  "LineLexer",
  "LineParser",
  "classify",
  "pair_params",
  "parse_program",
  "tokenize",
]
