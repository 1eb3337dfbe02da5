"""
Main Entry Point for lucide-preprocess CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `lucide_preprocess.cli.commands`.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from lucide_preprocess import __version__
from lucide_preprocess.cli import commands
from lucide_preprocess.config import parse_cli_key_values
from lucide_preprocess.enums import ImportMode
from lucide_preprocess.utils.console import set_verbose


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="lucide-preprocess: Direct Lucide icon imports")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Emit debug logging")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: TRANSFORM ---
  cmd_tf = subparsers.add_parser("transform", help="Rewrite icon imports of a file or directory")
  cmd_tf.add_argument("path", type=Path, help="Input source file or directory")
  cmd_tf.add_argument("--out", type=Path, help="Output destination (file or dir)")
  cmd_tf.add_argument(
    "--import-mode",
    choices=[m.value for m in ImportMode],
    default=None,
    help="Build flavour for react/vue/preact packages (default: from toml, else esm)",
  )
  cmd_tf.add_argument(
    "--config",
    nargs="*",
    help="Plugin options in key=value format (e.g. importMode=cjs)",
  )
  cmd_tf.add_argument(
    "--check",
    action="store_true",
    help="Write nothing; exit 1 if any file would be rewritten",
  )

  # --- Command: SLUG ---
  cmd_slug = subparsers.add_parser("slug", help="Show the icon module slug of component names")
  cmd_slug.add_argument("names", nargs="+", help="PascalCase component names (e.g. AlertCircle)")

  # --- Command: RENAMINGS ---
  cmd_ren = subparsers.add_parser("renamings", help="Rebuild the slug rename table from an icon package")
  cmd_ren.add_argument("icons", type=Path, help="Icons index module of the package")
  cmd_ren.add_argument("aliases", type=Path, nargs="?", default=None, help="Aliases index module")
  cmd_ren.add_argument("--out", type=Path, default=None, help="Destination JSON file (default: stdout)")

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  if args.command == "transform":
    plugin_settings = parse_cli_key_values(args.config)
    return commands.handle_transform(args.path, args.out, args.import_mode, plugin_settings, args.check)

  elif args.command == "slug":
    return commands.handle_slug(args.names)

  elif args.command == "renamings":
    return commands.handle_renamings(args.icons, args.aliases, args.out)

  return 0


if __name__ == "__main__":
  raise SystemExit(main())
