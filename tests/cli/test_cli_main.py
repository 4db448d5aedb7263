"""
Tests for CLI argument parsing and dispatch.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from linescript import __version__
from linescript.cli.__main__ import main


@patch("linescript.cli.commands.handle_convert")
def test_convert_dispatch_defaults(mock_handle):
  mock_handle.return_value = 0

  assert main(["convert", "a.ls", "b.ls"]) == 0

  mock_handle.assert_called_once()
  paths, ext, check_blocks, to_stdout = mock_handle.call_args[0]
  assert paths == [Path("a.ls"), Path("b.ls")]
  assert ext is None
  # None means "defer to config"
  assert check_blocks is None
  assert to_stdout is False


@patch("linescript.cli.commands.handle_convert")
def test_convert_dispatch_flags(mock_handle):
  mock_handle.return_value = 1

  assert main(["convert", "a.ls", "--ext", ".js", "--check-blocks", "--stdout"]) == 1

  paths, ext, check_blocks, to_stdout = mock_handle.call_args[0]
  assert ext == ".js"
  assert check_blocks is True
  assert to_stdout is True


@patch("linescript.cli.commands.handle_inspect")
def test_inspect_dispatch(mock_handle):
  mock_handle.return_value = 0
  assert main(["inspect", "x.ls"]) == 0
  mock_handle.assert_called_once_with(Path("x.ls"))


def test_convert_requires_paths():
  with pytest.raises(SystemExit) as excinfo:
    main(["convert"])
  assert excinfo.value.code == 2


def test_command_is_required():
  with pytest.raises(SystemExit):
    main([])


def test_version(capsys):
  with pytest.raises(SystemExit) as excinfo:
    main(["--version"])
  assert excinfo.value.code == 0
  assert __version__ in capsys.readouterr().out
