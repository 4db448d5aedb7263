"""
Block Balance Analysis.

The translator itself never checks that ``end``/``else``/``elif`` lines match
the blocks opened before them; mismatches just produce unbalanced output.
This module provides an opt-in check that walks the IR and tracks nesting
depth so such files can be rejected before anything is written.
"""

from typing import List

from linescript.compiler.ir import BlockEnd, Conditional, Else, Function, Program, Repeat, While
from linescript.errors import UnbalancedBlock


def opens_block(stmt: object) -> bool:
  """True for statements whose rendering ends with an opening brace only."""
  if isinstance(stmt, Conditional):
    return not stmt.is_elif
  return isinstance(stmt, (Function, While, Repeat))


def check_block_balance(program: Program) -> None:
  """
  Verifies that every block is closed exactly once.

  ``else`` and ``elif`` continue the innermost open block, so they need one
  to be open but leave the depth unchanged.

  Args:
      program: The parsed statements.

  Raises:
      UnbalancedBlock: On a close or continuation with no open block, or
          when blocks are still open at the end of the program.
  """
  open_lines: List[int] = []

  for line, stmt in program.numbered():
    if opens_block(stmt):
      open_lines.append(line)
    elif isinstance(stmt, BlockEnd):
      if not open_lines:
        raise UnbalancedBlock("'end' without an open block", line=line)
      open_lines.pop()
    elif isinstance(stmt, (Else, Conditional)):
      if not open_lines:
        keyword = "else" if isinstance(stmt, Else) else "elif"
        raise UnbalancedBlock(f"'{keyword}' without an open block", line=line)

  if open_lines:
    starts = ", ".join(str(n) for n in open_lines)
    raise UnbalancedBlock(f"{len(open_lines)} block(s) never closed (opened on line {starts})")
