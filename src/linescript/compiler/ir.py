"""
Intermediate Representation (IR).

One IR node is produced per non-blank source line. Nodes form a flat,
ordered sequence; block nesting is only implied by the order of
block-opening nodes and `BlockEnd` markers.

Each statement kind is its own frozen dataclass with only the fields that
kind needs. The ``kind`` class attribute tags the variant so consumers can
dispatch on either ``isinstance`` or the enum value.

Expression-like fields (values, conditions, arguments) are opaque token runs
copied verbatim from the source.
"""

from dataclasses import dataclass
from typing import ClassVar, Dict, Iterator, Mapping, Tuple, Union

from linescript.enums import StatementKind


@dataclass(frozen=True)
class Variable:
  """``[const] <type> <name> = <value...>``"""

  kind: ClassVar[StatementKind] = StatementKind.VARIABLE

  name: str
  type_name: str
  constant: bool
  value: Tuple[str, ...]


@dataclass(frozen=True)
class Function:
  """
  ``func <name> <type> <param> ... -> <returns>``

  Attributes:
      params: ``(name, type)`` pairs in source order. A mapping passed in is
          converted to pairs so the node stays immutable and hashable.
  """

  kind: ClassVar[StatementKind] = StatementKind.FUNCTION

  name: str
  params: Tuple[Tuple[str, str], ...] = ()
  returns: str = ""

  def __post_init__(self) -> None:
    if isinstance(self.params, Mapping):
      object.__setattr__(self, "params", tuple(self.params.items()))
    else:
      object.__setattr__(self, "params", tuple(tuple(p) for p in self.params))

  @property
  def param_types(self) -> Dict[str, str]:
    """A fresh ``{name: type}`` dict of the parameters."""
    return dict(self.params)


@dataclass(frozen=True)
class BlockEnd:
  kind: ClassVar[StatementKind] = StatementKind.BLOCK_END


@dataclass(frozen=True)
class Assign:
  kind: ClassVar[StatementKind] = StatementKind.ASSIGN

  name: str
  value: Tuple[str, ...]


@dataclass(frozen=True)
class Output:
  """Console output; each token is one argument."""

  kind: ClassVar[StatementKind] = StatementKind.OUTPUT

  args: Tuple[str, ...]


@dataclass(frozen=True)
class Return:
  kind: ClassVar[StatementKind] = StatementKind.RETURN

  value: Tuple[str, ...]


@dataclass(frozen=True)
class Conditional:
  """``if <cond...>`` or, when ``is_elif`` is set, ``elif <cond...>``."""

  kind: ClassVar[StatementKind] = StatementKind.CONDITIONAL

  condition: Tuple[str, ...]
  is_elif: bool = False


@dataclass(frozen=True)
class Else:
  kind: ClassVar[StatementKind] = StatementKind.ELSE


@dataclass(frozen=True)
class While:
  kind: ClassVar[StatementKind] = StatementKind.WHILE

  condition: Tuple[str, ...]


@dataclass(frozen=True)
class Repeat:
  """``repeat <times> times <var>``: a counting loop from 0 to ``times``."""

  kind: ClassVar[StatementKind] = StatementKind.REPEAT

  times: str
  var: str


@dataclass(frozen=True)
class Call:
  """Catch-all: ``<name> <arg> ...``."""

  kind: ClassVar[StatementKind] = StatementKind.CALL

  name: str
  args: Tuple[str, ...] = ()


Statement = Union[Variable, Function, BlockEnd, Assign, Output, Return, Conditional, Else, While, Repeat, Call]


@dataclass(frozen=True)
class Program:
  """
  The ordered statements of one source file.
  """

  statements: Tuple[Statement, ...] = ()
  """One node per non-blank source line, in source order."""

  lines: Tuple[int, ...] = ()
  """1-based source line number of each statement (parallel to ``statements``)."""

  def __iter__(self) -> Iterator[Statement]:
    return iter(self.statements)

  def __len__(self) -> int:
    return len(self.statements)

  def numbered(self) -> Iterator[Tuple[int, Statement]]:
    """Yields ``(source_line, statement)`` pairs."""
    if len(self.lines) == len(self.statements):
      return zip(self.lines, self.statements)
    return enumerate(self.statements, start=1)
