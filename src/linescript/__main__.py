"""
Entry point for module execution (``python -m linescript``).

This module delegates execution to the CLI handler in ``linescript.cli.__main__``.
"""

import sys
from linescript.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
