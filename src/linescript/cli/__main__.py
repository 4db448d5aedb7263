"""
Main Entry Point for the linescript CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `linescript.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from linescript import __version__
from linescript.cli import commands


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="linescript: line-by-line translator to TypeScript")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CONVERT ---
  cmd_conv = subparsers.add_parser("convert", help="Translate source files to sibling .ts files")
  cmd_conv.add_argument("paths", type=Path, nargs="+", help="Input source files")
  cmd_conv.add_argument("--ext", default=None, help="Output extension (default: from toml, then .ts)")
  cmd_conv.add_argument(
    "--check-blocks",
    action="store_true",
    default=None,
    help="Reject files whose end/else/elif lines do not match their blocks (Overrides config)",
  )
  cmd_conv.add_argument("--stdout", action="store_true", help="Print generated code instead of writing files")

  # --- Command: INSPECT ---
  cmd_insp = subparsers.add_parser("inspect", help="Show the parsed statements of a source file")
  cmd_insp.add_argument("path", type=Path, help="Input source file")

  args = parser.parse_args(argv)

  if args.command == "convert":
    return commands.handle_convert(args.paths, args.ext, args.check_blocks, args.stdout)

  elif args.command == "inspect":
    return commands.handle_inspect(args.path)

  return 0


if __name__ == "__main__":
  sys.exit(main())
