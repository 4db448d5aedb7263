"""
TypeScript Emitter (Backend).

Renders each IR statement as exactly one line of TypeScript. Block-opening
statements (function, if, while, repeat) end their line with ``{``; ``end``
becomes ``}``; ``elif`` and ``else`` close the previous block and open a new
one on the same line.

No brace balancing is done here: a source file with a missing or extra
``end`` yields unbalanced TypeScript.
"""

from typing import Callable, Dict, Mapping, Optional

from linescript.compiler.backend import CompilerBackend
from linescript.compiler.ir import (
  Assign,
  BlockEnd,
  Call,
  Conditional,
  Else,
  Function,
  Output,
  Program,
  Repeat,
  Return,
  Statement,
  Variable,
  While,
)
from linescript.enums import StatementKind

# Source type name -> TypeScript type name. Unlisted names pass through.
TYPE_ALIASES: Dict[str, str] = {
  "float": "number",
}


class TypeScriptEmitter(CompilerBackend):
  """
  Converts linescript statements into TypeScript source lines.
  """

  extension = ".ts"

  def __init__(self, type_aliases: Optional[Mapping[str, str]] = None):
    """
    Args:
        type_aliases: Extra source->target type names, applied on top of
            `TYPE_ALIASES`.
    """
    self.type_aliases: Dict[str, str] = {**TYPE_ALIASES, **(type_aliases or {})}
    self._handlers: Dict[StatementKind, Callable[..., str]] = {
      StatementKind.VARIABLE: self._variable,
      StatementKind.FUNCTION: self._function,
      StatementKind.BLOCK_END: self._block_end,
      StatementKind.ASSIGN: self._assign,
      StatementKind.OUTPUT: self._output,
      StatementKind.RETURN: self._return,
      StatementKind.CONDITIONAL: self._conditional,
      StatementKind.ELSE: self._else,
      StatementKind.WHILE: self._while,
      StatementKind.REPEAT: self._repeat,
      StatementKind.CALL: self._call,
    }

  def emit(self, program: Program) -> str:
    """
    Renders every statement, newline-joined, without a trailing newline.
    """
    return "\n".join(self.emit_statement(stmt) for stmt in program)

  def emit_statement(self, stmt: Statement) -> str:
    return self._handlers[stmt.kind](stmt)

  def map_type(self, name: str) -> str:
    return self.type_aliases.get(name, name)

  # --- Templates ---

  def _variable(self, stmt: Variable) -> str:
    keyword = "const" if stmt.constant else "let"
    return f"{keyword} {stmt.name}: {self.map_type(stmt.type_name)} = {' '.join(stmt.value)};"

  def _function(self, stmt: Function) -> str:
    params = ", ".join(f"{name}: {type_name}" for name, type_name in stmt.params)
    return f"function {stmt.name}({params}): {self.map_type(stmt.returns)} {{"

  def _block_end(self, stmt: BlockEnd) -> str:
    return "}"

  def _assign(self, stmt: Assign) -> str:
    return f"{stmt.name} = {' '.join(stmt.value)};"

  def _output(self, stmt: Output) -> str:
    return f"console.log({', '.join(stmt.args)});"

  def _return(self, stmt: Return) -> str:
    if not stmt.value:
      return "return;"
    return f"return {' '.join(stmt.value)};"

  def _conditional(self, stmt: Conditional) -> str:
    prefix = "} else " if stmt.is_elif else ""
    return f"{prefix}if ({' '.join(stmt.condition)}) {{"

  def _else(self, stmt: Else) -> str:
    return "} else {"

  def _while(self, stmt: While) -> str:
    return f"while ({' '.join(stmt.condition)}) {{"

  def _repeat(self, stmt: Repeat) -> str:
    var = stmt.var
    return f"for (let {var} = 0; {var} < {stmt.times}; {var}++) {{"

  def _call(self, stmt: Call) -> str:
    return f"{stmt.name}({', '.join(stmt.args)});"
