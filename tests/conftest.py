"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so tests can capture log output.
"""

import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'lucide_preprocess' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from lucide_preprocess.utils.console import THEME, reset_console, set_console  # noqa: E402


@pytest.fixture
def captured_console():
  """
  Routes console output and package logs into an in-memory recorder.

  Yields:
      Console: The recording console; read it with `export_text()`.
  """
  recorder = Console(record=True, width=200, force_terminal=False, theme=THEME)
  set_console(recorder)
  yield recorder
  reset_console()
