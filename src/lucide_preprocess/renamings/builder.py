"""
Offline Rename Table Builder.

Regenerates `renamings.json` from a published icon package. The package's
icon index and alias index both re-export components from per-icon files::

    export { default as AlertCircle } from './icons/circle-alert.svelte';

Every component whose computed slug differs from the file it is exported from
becomes a `computed -> actual` entry.
"""

import json
import re
from pathlib import Path
from typing import Dict, Mapping

from lucide_preprocess.core.naming import dashed_slug
from lucide_preprocess.utils.console import log_warning

EXPORT_PATTERN = re.compile(
  r"^export\s*\{\s*default\s+as\s+(?P<name>\S+)\s*}\s*from\s*[\"'](?P<path>[^\"']+)[\"']",
  re.MULTILINE,
)

_EXTENSION = re.compile(r"\.(?:svelte|vue|astro|[cm]?[jt]sx?)$")


def _path_to_slug(path: str) -> str:
  return _EXTENSION.sub("", path.rsplit("/", 1)[-1])


def parse_icon_exports(text: str) -> Dict[str, str]:
  """
  Extracts `component -> slug` pairs from an index module.

  Args:
      text: Source of the icons or aliases index.

  Returns:
      Dict[str, str]: Component names mapped to file slugs, in file order.
  """
  return {m.group("name"): _path_to_slug(m.group("path")) for m in EXPORT_PATTERN.finditer(text)}


def build_rename_table(icons_text: str, aliases_text: str = "") -> Dict[str, str]:
  """
  Computes the rename table for one release of the icon package.

  Aliases that share a name with a primary icon are skipped; the primary icon
  wins.

  Args:
      icons_text: Source of the primary icons index.
      aliases_text: Source of the aliases index.

  Returns:
      Dict[str, str]: Sorted `computed-slug -> actual-slug` entries.
  """
  icons = parse_icon_exports(icons_text)
  aliases = {name: slug for name, slug in parse_icon_exports(aliases_text).items() if name not in icons}

  table: Dict[str, str] = {}
  for name, slug in [*icons.items(), *aliases.items()]:
    computed = dashed_slug(name)
    if computed == slug:
      continue
    if computed in table and table[computed] != slug:
      log_warning(f"Conflicting renames for '{computed}': keeping '{table[computed]}', dropping '{slug}' ({name})")
      continue
    table[computed] = slug

  return dict(sorted(table.items()))


def save_rename_table(table: Mapping[str, str], path: Path) -> None:
  """
  Writes a rename table as pretty-printed JSON.

  Args:
      table: The entries to write.
      path: Destination file; parent directories are created.
  """
  path.parent.mkdir(parents=True, exist_ok=True)
  with open(path, "wt", encoding="utf-8") as f:
    json.dump(dict(table), f, indent=2)
    f.write("\n")
