"""
Orchestration Engine.

`TranspilerEngine` runs the full pipeline for one source text:

1.  **Parsing**: split into lines, tokenize and classify each (`LineParser`).
2.  **Block check** (optional): reject unbalanced ``end``/``else`` structure.
3.  **Emission**: render each statement as TypeScript (`TypeScriptEmitter`).

Translation is all-or-nothing: the first error aborts the file and no partial
output is produced.
"""

import logging
from typing import Optional

from linescript.compiler.analysis import check_block_balance
from linescript.compiler.backends.typescript import TypeScriptEmitter
from linescript.compiler.frontend.parser import LineParser
from linescript.compiler.ir import Program
from linescript.config import RuntimeConfig
from linescript.core.conversion_result import ConversionResult
from linescript.errors import LineScriptError

logger = logging.getLogger(__name__)


class TranspilerEngine:
  """
  The main compilation unit.

  Stateless between calls; one instance can translate any number of files.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None):
    """
    Args:
        config (RuntimeConfig, optional): Runtime settings. Defaults are used if None.
    """
    self.config = config or RuntimeConfig()
    self.emitter = TypeScriptEmitter(type_aliases=self.config.type_aliases)

  def parse(self, code: str) -> Program:
    """
    Parses source text into IR, applying the block check if enabled.

    Raises:
        LineScriptError: On tokenize errors or, with ``check_blocks``, unbalanced blocks.
    """
    program = LineParser(code).parse()
    if self.config.check_blocks:
      check_block_balance(program)
    return program

  def translate(self, code: str) -> str:
    """
    Translates source text to TypeScript.

    Raises:
        LineScriptError: On the first error; nothing is returned in that case.
    """
    return self.emitter.emit(self.parse(code))

  def run(self, code: str) -> ConversionResult:
    """
    Translates source text, capturing errors in the result instead of raising.

    Args:
        code (str): The full source text.

    Returns:
        ConversionResult: Generated code on success, the error message otherwise.
    """
    try:
      program = self.parse(code)
    except LineScriptError as e:
      logger.debug("Translation aborted: %s", e)
      return ConversionResult(success=False, errors=[str(e)])

    return ConversionResult(code=self.emitter.emit(program), statement_count=len(program))
