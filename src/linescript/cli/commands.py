"""
CLI Command Handlers Facade.

Re-exports the handlers from `linescript.cli.handlers` so the dispatcher (and
tests patching it) have a single import point.
"""

from linescript.cli.handlers.convert import (
  _convert_single_file,
  _print_batch_summary,
  handle_convert,
  output_path_for,
)
from linescript.cli.handlers.inspect import handle_inspect

__all__ = [
  "_convert_single_file",
  "_print_batch_summary",
  "handle_convert",
  "handle_inspect",
  "output_path_for",
]
