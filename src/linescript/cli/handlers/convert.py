"""
Convert Command Handler.

Implements ``linescript convert``: each input file is read fully, translated,
and written next to the input with its extension replaced (``hello.ls`` ->
``hello.ts``), overwriting any existing file. A file that fails is reported
and skipped; the remaining files are still processed.
"""

from pathlib import Path
from typing import Dict, List, Optional

from rich.markup import escape
from rich.table import Table

from linescript.config import RuntimeConfig
from linescript.core.conversion_result import ConversionResult
from linescript.core.engine import TranspilerEngine
from linescript.utils.console import console, log_error, log_info, log_success


def output_path_for(input_path: Path, extension: str) -> Path:
  """
  Sibling path of ``input_path`` with its extension replaced.

  Args:
      input_path: The source file.
      extension: The new extension, including the leading dot.

  Returns:
      Path: e.g. ``src/main.ls`` -> ``src/main.ts``; ``script`` -> ``script.ts``.
  """
  return input_path.with_suffix(extension)


def handle_convert(
  paths: List[Path],
  output_extension: Optional[str] = None,
  check_blocks: Optional[bool] = None,
  to_stdout: bool = False,
) -> int:
  """
  Handles the 'convert' command execution.

  Args:
      paths: Source files to translate.
      output_extension: Override for the generated extension (default from toml, then ``.ts``).
      check_blocks: Override for block balance checking.
      to_stdout: Print the generated code instead of writing files.

  Returns:
      int: Exit code (0 if every file converted, 1 otherwise).
  """
  try:
    config = RuntimeConfig.load(
      output_extension=output_extension,
      check_blocks=check_blocks,
      search_path=paths[0].parent if paths else None,
    )
  except ValueError as e:
    log_error(f"Invalid configuration: {escape(str(e))}")
    return 1
  engine = TranspilerEngine(config)

  if len(paths) > 1 and not to_stdout:
    log_info(f"Processing {len(paths)} files...")

  results: Dict[str, ConversionResult] = {}
  for path in paths:
    results[str(path)] = _convert_single_file(path, engine, config.output_extension, to_stdout)

  all_ok = all(r.success for r in results.values())
  # stdout carries only generated code unless something failed
  if not (to_stdout and all_ok):
    _print_batch_summary(results)
  return 0 if all_ok else 1


def _convert_single_file(
  input_path: Path,
  engine: TranspilerEngine,
  extension: str,
  to_stdout: bool = False,
) -> ConversionResult:
  """
  Translates one file and persists the output.

  Args:
      input_path: Source file path.
      engine: The configured engine.
      extension: Extension for the output file.
      to_stdout: Print instead of writing.

  Returns:
      ConversionResult: Result object containing status and code.
  """
  try:
    code = input_path.read_text(encoding="utf-8-sig")
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to read [path]{escape(str(input_path))}[/path]: {escape(str(e))}")
    return ConversionResult(success=False, errors=[str(e)])

  result = engine.run(code)
  if not result.success:
    log_error(f"Failed to convert [path]{escape(str(input_path))}[/path]: {escape('; '.join(result.errors))}")
    return result

  if to_stdout:
    console.print(result.code, markup=False, highlight=False, emoji=False, soft_wrap=True)
    return result

  output_path = output_path_for(input_path, extension)
  try:
    output_path.write_text(result.code, encoding="utf-8")
  except OSError as e:
    log_error(f"Failed to write [path]{escape(str(output_path))}[/path]: {escape(str(e))}")
    return ConversionResult(success=False, errors=[str(e)])

  log_success(f"Transpiled: [path]{escape(str(input_path))}[/path] -> [path]{escape(str(output_path))}[/path]")
  return result


def _print_batch_summary(results: Dict[str, ConversionResult]) -> None:
  """
  Renders a table of failed files, or a one-line success message.

  Args:
      results: Mapping of file name to its conversion result.
  """
  total = len(results)
  failures = {name: r for name, r in results.items() if not r.success}

  if not failures:
    log_success(f"Batch Complete: {total}/{total} files converted.")
    return

  table = Table(title="Transpilation Report")
  table.add_column("File", style="cyan")
  table.add_column("Issues", style="red")
  for name, res in failures.items():
    table.add_row(escape(name), escape("; ".join(res.errors) or "Unknown Error"))

  console.print(table)
  console.print(f"\n[bold]Summary:[/bold] {total - len(failures)} Passed, {len(failures)} Failed.")
