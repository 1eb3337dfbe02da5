"""
Rename Table Loader.

The table ships as package data (`renamings.json`) and is read once, on first
use, into a read-only mapping shared by every transform call.
"""

import json
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

RENAMINGS_FILE = "renamings.json"


def resolve_renamings_path() -> Path:
  """
  Locates the bundled rename table.

  Prioritizes the local file system (relative to this file) so editable
  installs and tests read the source of truth; falls back to package resources.

  Returns:
      Path: The absolute path to `renamings.json`.
  """
  local_path = Path(__file__).parent / RENAMINGS_FILE
  if local_path.exists():
    return local_path
  return Path(str(files("lucide_preprocess.renamings").joinpath(RENAMINGS_FILE)))


def load_rename_table(path: Path) -> Mapping[str, str]:
  """
  Reads a rename table from a JSON object of `old-slug -> new-slug` pairs.

  Args:
      path: The JSON file to read.

  Returns:
      Mapping[str, str]: An immutable view of the table.

  Raises:
      ValueError: If the file does not hold a flat string-to-string object.
  """
  with open(path, "rt", encoding="utf-8") as f:
    data = json.load(f)

  if not isinstance(data, dict) or not all(isinstance(k, str) and isinstance(v, str) for k, v in data.items()):
    raise ValueError(f"Rename table {path} must be a JSON object of string pairs")
  return MappingProxyType(dict(data))


@lru_cache(maxsize=1)
def get_rename_table() -> Mapping[str, str]:
  """
  Returns the bundled rename table, loading it on first call.

  Returns:
      Mapping[str, str]: The process-wide read-only table.
  """
  return load_rename_table(resolve_renamings_path())
