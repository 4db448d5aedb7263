"""
Inspect Command Handler.

Implements ``linescript inspect``: prints the IR of a source file as a table
(one row per statement) without writing anything.
"""

import dataclasses
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from linescript.compiler.frontend.parser import LineParser
from linescript.compiler.ir import Function, Statement
from linescript.errors import LineScriptError
from linescript.utils.console import console, log_error, log_warning


def describe(stmt: Statement) -> str:
  """Renders a statement's fields as ``name=value`` pairs."""
  parts = []
  for f in dataclasses.fields(stmt):
    value = getattr(stmt, f.name)
    if isinstance(stmt, Function) and f.name == "params":
      value = stmt.param_types
    elif isinstance(value, tuple):
      value = " ".join(value)
    parts.append(f"{f.name}={value!r}")
  return ", ".join(parts)


def handle_inspect(path: Path) -> int:
  """
  Parses ``path`` and prints its statements.

  Returns:
      int: 0 on success, 1 if the file is missing or fails to tokenize.
  """
  try:
    code = path.read_text(encoding="utf-8-sig")
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to read [path]{escape(str(path))}[/path]: {escape(str(e))}")
    return 1

  try:
    program = LineParser(code).parse()
  except LineScriptError as e:
    log_error(f"Failed to parse [path]{escape(str(path))}[/path]: {escape(str(e))}")
    return 1

  if not len(program):
    log_warning(f"No statements found in [path]{escape(str(path))}[/path]")

  table = Table(title=escape(str(path)))
  table.add_column("Line", justify="right")
  table.add_column("Kind", style="bold magenta")
  table.add_column("Fields")
  for line, stmt in program.numbered():
    table.add_row(str(line), stmt.kind.value, escape(describe(stmt)))

  console.print(table)
  return 0
