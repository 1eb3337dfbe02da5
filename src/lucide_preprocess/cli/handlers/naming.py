"""CLI handlers for icon name inspection."""

from typing import List

from rich.table import Table

from lucide_preprocess.core.naming import dashed_slug, icon_comp_to_dashed
from lucide_preprocess.utils.console import console


def handle_slug(names: List[str]) -> int:
  """
  Handles 'slug' command.

  Prints the module slug each component name resolves to, flagging names
  that went through the rename table.

  Args:
      names: PascalCase component names.

  Returns:
      int: Exit code (always 0).
  """
  table = Table(title="Icon Slugs")
  table.add_column("Component", style="cyan")
  table.add_column("Slug", style="bold magenta")
  table.add_column("Renamed From", style="dim")

  for name in names:
    computed = dashed_slug(name)
    resolved = icon_comp_to_dashed(name)
    table.add_row(name, resolved, computed if computed != resolved else "")

  console.print(table)
  return 0
