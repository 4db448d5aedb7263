"""
Line Classifier.

Maps the token list of one line to exactly one IR statement. Classification
is an ordered list of shape tests, first match wins. Several shapes share a
prefix (``number x = 1`` vs ``x = 1``), so the order below is significant:

1.  ``<type> <name> = ...``               -> Variable
2.  ``const <type> <name> = ...``         -> Variable (constant)
3.  ``<name> = ...``                      -> Assign
4.  ``func <name> [<type> <param>]* -> <type>`` -> Function
5.  ``end``                               -> BlockEnd
6.  ``write|say|echo|print ...``          -> Output
7.  ``return ...``                        -> Return
8.  ``if ...`` / ``elif ...``             -> Conditional
9.  ``else``                              -> Else
10. ``while ...``                         -> While
11. ``repeat <n> times <var>``            -> Repeat
12. anything else                         -> Call

Rule 12 accepts every line, so classification cannot fail.
"""

from typing import Callable, Dict, List, Optional, Sequence

from linescript.compiler.ir import (
  Assign,
  BlockEnd,
  Call,
  Conditional,
  Else,
  Function,
  Output,
  Repeat,
  Return,
  Statement,
  Variable,
  While,
)
from linescript.enums import OUTPUT_COMMANDS, PRIMITIVE_TYPES

Rule = Callable[[str, List[str]], Optional[Statement]]


def _variable(cmd: str, args: List[str]) -> Optional[Statement]:
  if cmd in PRIMITIVE_TYPES and len(args) >= 2 and args[1] == "=":
    return Variable(name=args[0], type_name=cmd, constant=False, value=tuple(args[2:]))
  return None


def _constant(cmd: str, args: List[str]) -> Optional[Statement]:
  if cmd == "const" and len(args) >= 3 and args[0] in PRIMITIVE_TYPES and args[2] == "=":
    return Variable(name=args[1], type_name=args[0], constant=True, value=tuple(args[3:]))
  return None


def _assign(cmd: str, args: List[str]) -> Optional[Statement]:
  if args and args[0] == "=":
    return Assign(name=cmd, value=tuple(args[1:]))
  return None


def pair_params(tokens: Sequence[str]) -> Dict[str, str]:
  """
  Reads ``type name type name ...`` into ``{name: type}``.

  A repeated name keeps its first position and takes the later type.
  A trailing type without a name is dropped.
  """
  params: Dict[str, str] = {}
  for i in range(0, len(tokens) - 1, 2):
    params[tokens[i + 1]] = tokens[i]
  return params


def _function(cmd: str, args: List[str]) -> Optional[Statement]:
  if cmd == "func" and len(args) >= 2 and args[-2] == "->":
    return Function(name=args[0], params=pair_params(args[1:-2]), returns=args[-1])
  return None


def _block_end(cmd: str, args: List[str]) -> Optional[Statement]:
  if cmd == "end" and not args:
    return BlockEnd()
  return None


def _output(cmd: str, args: List[str]) -> Optional[Statement]:
  if cmd in OUTPUT_COMMANDS:
    return Output(args=tuple(args))
  return None


def _return(cmd: str, args: List[str]) -> Optional[Statement]:
  if cmd == "return":
    return Return(value=tuple(args))
  return None


def _conditional(cmd: str, args: List[str]) -> Optional[Statement]:
  if cmd in ("if", "elif"):
    return Conditional(condition=tuple(args), is_elif=cmd == "elif")
  return None


def _else(cmd: str, args: List[str]) -> Optional[Statement]:
  if cmd == "else" and not args:
    return Else()
  return None


def _while(cmd: str, args: List[str]) -> Optional[Statement]:
  if cmd == "while":
    return While(condition=tuple(args))
  return None


def _repeat(cmd: str, args: List[str]) -> Optional[Statement]:
  # repeat <times> times <var>; missing positions are left empty
  if cmd == "repeat":
    times = args[0] if args else ""
    var = args[2] if len(args) > 2 else ""
    return Repeat(times=times, var=var)
  return None


# Priority order. Do not reorder.
RULES: List[Rule] = [
  _variable,
  _constant,
  _assign,
  _function,
  _block_end,
  _output,
  _return,
  _conditional,
  _else,
  _while,
  _repeat,
]


def classify(tokens: Sequence[str]) -> Statement:
  """
  Classifies the tokens of one line.

  Args:
      tokens: Non-empty token list for one line.

  Returns:
      The IR statement for the line. Lines matching no specific shape become
      a `Call` named after their first token.

  Raises:
      ValueError: If ``tokens`` is empty. Blank lines must be filtered out
          before classification.
  """
  if not tokens:
    raise ValueError("Cannot classify an empty line.")

  cmd, args = tokens[0], list(tokens[1:])
  for rule in RULES:
    stmt = rule(cmd, args)
    if stmt is not None:
      return stmt
  return Call(name=cmd, args=tuple(args))
