"""
Renamings Command Handler.

Regenerates the slug rename table from the icon and alias index modules of a
published icon package (e.g. `node_modules/lucide-svelte/dist/icons/index.js`
and `node_modules/lucide-svelte/dist/aliases/aliases.js`).
"""

import json
from pathlib import Path
from typing import Optional

from rich.markup import escape

from lucide_preprocess.renamings.builder import build_rename_table, save_rename_table
from lucide_preprocess.utils.console import log_error, log_info, log_success


def handle_renamings(icons_path: Path, aliases_path: Optional[Path], output_path: Optional[Path]) -> int:
  """
  Handles 'renamings' command.

  Args:
      icons_path: The primary icons index module.
      aliases_path: The aliases index module, if the package has one.
      output_path: Destination JSON file. Printed to stdout when omitted.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  try:
    icons_text = icons_path.read_text(encoding="utf-8")
    aliases_text = aliases_path.read_text(encoding="utf-8") if aliases_path else ""
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to read index module: {escape(str(e))}")
    return 1

  table = build_rename_table(icons_text, aliases_text)
  log_info(f"Found {len(table)} renamed icon slugs.")

  if output_path:
    try:
      save_rename_table(table, output_path)
    except OSError as e:
      log_error(f"Failed to write {output_path}: {escape(str(e))}")
      return 1
    log_success(f"Rename table saved to [path]{output_path}[/path]")
  else:
    print(json.dumps(table, indent=2))
  return 0
