"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Snapshot testing fixture for golden TypeScript output.
- Console capture fixture so CLI output can be asserted on.
"""

import io
import sys
from pathlib import Path
from typing import Callable, Optional

import pytest
from rich.console import Console

# Add src to path so we can import 'linescript' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from linescript.utils.console import reset_console, set_console  # noqa: E402


class SnapshotAssert:
  """
  Compares generated text against a stored file in ``__snapshots__``.
  """

  def __init__(self, request: pytest.FixtureRequest):
    self.request = request
    self.test_name = request.node.name
    self.module_path = Path(request.node.fspath).parent
    self.snapshot_dir = self.module_path / "__snapshots__"
    self.update_mode = request.config.getoption("--update-snapshots", default=False)

  def assert_match(self, content: str, name: Optional[str] = None, extension: str = "ts", normalizer: Optional[Callable[[str], str]] = None):
    """
    Compares content against the stored snapshot.

    Args:
        content: The actual output string.
        name: Snapshot base name (defaults to the test name).
        extension: File extension of the snapshot.
        normalizer: Optional function applied to both sides before comparison.
    """
    self.snapshot_dir.mkdir(parents=True, exist_ok=True)
    snapshot_file = self.snapshot_dir / f"{name or self.test_name}.{extension}"

    content = content.replace("\r\n", "\n")

    if self.update_mode or not snapshot_file.exists():
      snapshot_file.write_text(normalizer(content) if normalizer else content, encoding="utf-8")
      if self.update_mode:
        return

    expected = snapshot_file.read_text(encoding="utf-8").replace("\r\n", "\n")

    lhs, rhs = content, expected
    if normalizer:
      lhs, rhs = normalizer(lhs), normalizer(rhs)

    assert lhs == rhs, f"Snapshot mismatch for {snapshot_file.name}. Run pytest with --update-snapshots to accept changes."


@pytest.fixture
def snapshot(request):
  """Fixture to assert text matches a stored snapshot."""
  return SnapshotAssert(request)


@pytest.fixture
def captured_console():
  """
  Redirects the global console (and log records) into a buffer.

  Yields:
      Callable[[], str]: Returns everything written so far.
  """
  buffer = io.StringIO()
  set_console(Console(file=buffer, width=1000, force_terminal=False, color_system=None))
  yield buffer.getvalue
  reset_console()


def pytest_addoption(parser):
  """Add CLI flag to update snapshots."""
  parser.addoption("--update-snapshots", action="store_true", default=False, help="Update snapshots for visual tests")
