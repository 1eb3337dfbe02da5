"""
Console and Logging Helpers.

Package output goes through the `lucide_preprocess` logger, rendered by a
`rich` handler. The engine only emits debug records; the CLI reports progress
with the `log_*` helpers below.

Modules import the module-level `console` proxy rather than a concrete
`Console`, so tests can redirect every message with `set_console`.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Between INFO and WARNING
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

LOGGER_NAME = "lucide_preprocess"

logger = logging.getLogger(LOGGER_NAME)

THEME = Theme(
  {
    "logging.level.success": "green",
    "warning": "yellow",
    "error": "bold red",
    "path": "bold blue",
    "code": "bold magenta",
  }
)


class _ConsoleProxy:
  """
  Stable stand-in for the active `rich` console.

  Attribute access is forwarded to the backend. Swapping the backend also
  moves the package logger's handler onto it.
  """

  def __init__(self) -> None:
    self._backend: Console
    self.use(None)

  def use(self, backend: Optional[Console]) -> None:
    """
    Installs a backend console, or a fresh stderr console when None.

    Args:
        backend (Optional[Console]): Console receiving all output.
    """
    self._backend = backend if backend is not None else Console(theme=THEME, stderr=True)

    for handler in list(logger.handlers):
      if isinstance(handler, RichHandler):
        logger.removeHandler(handler)
    logger.addHandler(
      RichHandler(
        console=self._backend,
        show_time=False,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
      )
    )
    if logger.level == logging.NOTSET:
      logger.setLevel(logging.INFO)
    logger.propagate = False

  @property
  def backend(self) -> Console:
    return self._backend

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """Routes console output and log records to `new_console`."""
  console.use(new_console)


def reset_console() -> None:
  """Restores the default stderr console."""
  console.use(None)


def get_console() -> Console:
  return console.backend


def set_verbose(verbose: bool) -> None:
  """
  Toggles debug output of the package logger.

  Args:
      verbose (bool): True to emit debug records.
  """
  logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def log_debug(msg: str) -> None:
  logger.debug(msg, extra={"markup": True})


def log_info(msg: str) -> None:
  """Logs an informational message. Rich markup such as `[path]` is rendered."""
  logger.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  logger.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  logger.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  logger.error(f"❌ {msg}", extra={"markup": True})
