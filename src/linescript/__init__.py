"""
linescript Package.

A line-oriented translator from the linescript scripting language to
TypeScript. Each non-blank source line becomes exactly one line of output.

Usage
-----

.. code-block:: python

    import linescript
    print(linescript.translate('const string name = "Bob"'))
    # const name: string = "Bob";

Capturing errors instead of raising:

.. code-block:: python

    from linescript import RuntimeConfig, TranspilerEngine

    engine = TranspilerEngine(RuntimeConfig(check_blocks=True))
    res = engine.run(source)
    if not res.success:
        print(res.errors)
"""

from typing import Optional

from linescript.config import RuntimeConfig
from linescript.core.conversion_result import ConversionResult
from linescript.core.engine import TranspilerEngine
from linescript.errors import (
  InvalidString,
  LineScriptError,
  TokenizeError,
  UnbalancedBlock,
  UnknownCharacter,
)

__version__ = "0.1.0"


def translate(code: str, config: Optional[RuntimeConfig] = None) -> str:
  """
  Translates linescript source text to TypeScript.

  Args:
      code (str): The source text.
      config (RuntimeConfig, optional): Runtime settings (type aliases, block check).

  Returns:
      str: The TypeScript source, one line per non-blank input line.

  Raises:
      InvalidString: If a string literal is not closed on its line.
      UnknownCharacter: If a line contains a character outside the language.
      UnbalancedBlock: If ``config.check_blocks`` is set and blocks do not match.
  """
  return TranspilerEngine(config).translate(code)


__all__ = [
  "ConversionResult",
  "InvalidString",
  "LineScriptError",
  "RuntimeConfig",
  "TokenizeError",
  "TranspilerEngine",
  "UnbalancedBlock",
  "UnknownCharacter",
  "translate",
  "__version__",
]
