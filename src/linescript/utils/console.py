"""
Console and Logging Utilities.

All user-facing output of the CLI goes through a single ``rich`` console.
The standard ``logging`` root logger is wired to that console through a
``RichHandler`` so that library modules can simply use
``logging.getLogger(__name__)`` while CLI handlers use the ``log_*`` helpers.

The console can be swapped (e.g. for an in-memory ``Console(file=StringIO())``
in tests) with :func:`set_console`; the logging handler follows it.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Between INFO (20) and WARNING (30)
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
  }
)


class _ConsoleProxy:
  """
  Stable module-level handle around a replaceable ``rich`` Console.

  Modules import ``console`` once; :meth:`set_backend` changes where it writes
  without invalidating those references.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._handler: RichHandler = self._install_handler()

  @property
  def backend(self) -> Console:
    return self._backend

  def set_backend(self, new_console: Console) -> None:
    self._backend = new_console
    self._handler = self._install_handler()

  def reset(self) -> None:
    self.set_backend(Console(theme=_THEME))

  def _install_handler(self) -> RichHandler:
    """Replaces any RichHandler on the root logger with one bound to the active console."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    handler = RichHandler(
      console=self._backend,
      show_time=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )
    if root_logger.level == logging.NOTSET or root_logger.level > logging.INFO:
      root_logger.setLevel(logging.INFO)
    root_logger.addHandler(handler)
    return handler

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Redirects console output and log records to ``new_console``.

  Args:
      new_console (Console): The Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Restores the default stdout console."""
  console.reset()


def get_console() -> Console:
  return console.backend


def log_info(msg: str) -> None:
  """Logs a progress message at INFO. May include rich markup."""
  logging.info(msg, extra={"markup": True})


def log_success(msg: str) -> None:
  """
  Logs at the custom SUCCESS level.

  Args:
      msg (str): The message content. May include rich markup.
  """
  logging.log(SUCCESS_LEVEL_NUM, msg, extra={"markup": True})


def log_warning(msg: str) -> None:
  """Logs a recoverable problem at WARNING. May include rich markup."""
  logging.warning(msg, extra={"markup": True})


def log_error(msg: str) -> None:
  """Logs a failure at ERROR. May include rich markup."""
  logging.error(msg, extra={"markup": True})
