"""
Tests for the 'convert' command.

Verifies:
1. Sibling output files with the extension replaced (and overwritten).
2. A failing file is skipped without aborting the batch, and yields exit code 1.
3. Config overrides (--ext, --check-blocks) and --stdout.
"""

from pathlib import Path

from linescript.cli.__main__ import main
from linescript.cli.handlers.convert import output_path_for


def _write(path: Path, text: str) -> Path:
  path.write_text(text, encoding="utf-8")
  return path


def test_output_path_for():
  assert output_path_for(Path("src/main.ls"), ".ts") == Path("src/main.ts")
  assert output_path_for(Path("script"), ".ts") == Path("script.ts")
  assert output_path_for(Path("a.b.ls"), ".tsx") == Path("a.b.tsx")


def test_convert_writes_sibling_file(tmp_path, captured_console):
  src = _write(tmp_path / "hello.ls", 'say "hi"\nnumber x = 5\n')

  exit_code = main(["convert", str(src)])

  assert exit_code == 0
  out_file = tmp_path / "hello.ts"
  assert out_file.read_text(encoding="utf-8") == 'console.log("hi");\nlet x: number = 5;'
  assert "hello.ts" in captured_console()


def test_convert_overwrites_existing_output(tmp_path, captured_console):
  src = _write(tmp_path / "a.ls", "x = 1")
  _write(tmp_path / "a.ts", "stale content")

  assert main(["convert", str(src)]) == 0
  assert (tmp_path / "a.ts").read_text(encoding="utf-8") == "x = 1;"


def test_failing_file_is_skipped_others_continue(tmp_path, captured_console):
  bad = _write(tmp_path / "bad.ls", 'say "unterminated')
  good = _write(tmp_path / "good.ls", "tick")

  exit_code = main(["convert", str(bad), str(good)])

  assert exit_code == 1
  assert not (tmp_path / "bad.ts").exists()
  assert (tmp_path / "good.ts").read_text(encoding="utf-8") == "tick();"

  out = captured_console()
  assert "Invalid String" in out
  assert "Transpilation Report" in out
  assert "1 Passed, 1 Failed" in out


def test_missing_file_reports_error(tmp_path, captured_console):
  exit_code = main(["convert", str(tmp_path / "nope.ls")])

  assert exit_code == 1
  assert "Failed to read" in captured_console()


def test_ext_override(tmp_path, captured_console):
  src = _write(tmp_path / "m.ls", "x = 1")

  assert main(["convert", str(src), "--ext", "mts"]) == 0
  assert (tmp_path / "m.mts").exists()
  assert not (tmp_path / "m.ts").exists()


def test_ext_from_pyproject(tmp_path, captured_console):
  _write(tmp_path / "pyproject.toml", '[tool.linescript]\noutput_extension = ".tsx"\n')
  src = _write(tmp_path / "m.ls", "x = 1")

  assert main(["convert", str(src)]) == 0
  assert (tmp_path / "m.tsx").exists()


def test_invalid_config_fails_cleanly(tmp_path, captured_console):
  _write(tmp_path / "pyproject.toml", '[tool.linescript]\noutput_extension = "a/b"\n')
  src = _write(tmp_path / "m.ls", "x = 1")

  assert main(["convert", str(src)]) == 1
  assert "Invalid configuration" in captured_console()


def test_check_blocks_flag(tmp_path, captured_console):
  src = _write(tmp_path / "loop.ls", "while x\n  x = 0\n")

  assert main(["convert", str(src)]) == 0
  (tmp_path / "loop.ts").unlink()

  assert main(["convert", str(src), "--check-blocks"]) == 1
  assert not (tmp_path / "loop.ts").exists()
  assert "never closed" in captured_console()


def test_stdout_does_not_write(tmp_path, captured_console):
  src = _write(tmp_path / "p.ls", 'say "a:x:b"\nnumber x = 5')

  assert main(["convert", str(src), "--stdout"]) == 0
  assert not (tmp_path / "p.ts").exists()
  assert captured_console() == 'console.log("a:x:b");\nlet x: number = 5;\n'


def test_stdout_keeps_failure_report(tmp_path, captured_console):
  good = _write(tmp_path / "good.ls", "x = 1")
  bad = _write(tmp_path / "bad.ls", "a ~ b")

  assert main(["convert", str(good), str(bad), "--stdout"]) == 1
  out = captured_console()
  assert out.startswith("x = 1;\n")
  assert "Unknown Character" in out


def test_byte_order_mark_is_ignored(tmp_path, captured_console):
  src = tmp_path / "bom.ls"
  src.write_bytes("\ufeffnumber x = 5\n".encode("utf-8"))

  assert main(["convert", str(src)]) == 0
  assert (tmp_path / "bom.ts").read_text(encoding="utf-8") == "let x: number = 5;"


def test_batch_success_summary(tmp_path, captured_console):
  a = _write(tmp_path / "a.ls", "a = 1")
  b = _write(tmp_path / "b.ls", "b = 2")

  assert main(["convert", str(a), str(b)]) == 0
  assert "2/2 files converted" in captured_console()
  assert "Processing 2 files" in captured_console()
