"""
Tests for the 'renamings' command handler.
"""

import json

from lucide_preprocess.cli.handlers.renamings import handle_renamings

ICONS = "export { default as House } from './house.svelte';\n"
ALIASES = "export { default as Home } from '../icons/house.svelte';\n"


def test_renamings_to_stdout(tmp_path, capsys):
  icons = tmp_path / "index.js"
  aliases = tmp_path / "aliases.js"
  icons.write_text(ICONS)
  aliases.write_text(ALIASES)

  assert handle_renamings(icons, aliases, None) == 0
  assert json.loads(capsys.readouterr().out) == {"home": "house"}


def test_renamings_to_file(tmp_path, captured_console):
  icons = tmp_path / "index.js"
  aliases = tmp_path / "aliases.js"
  icons.write_text(ICONS)
  aliases.write_text(ALIASES)
  out = tmp_path / "renamings.json"

  assert handle_renamings(icons, aliases, out) == 0
  assert json.loads(out.read_text()) == {"home": "house"}
  assert "Found 1 renamed icon slugs" in captured_console.export_text()


def test_renamings_missing_input(tmp_path, captured_console):
  assert handle_renamings(tmp_path / "missing.js", None, None) == 1
  assert "Failed to read index module" in captured_console.export_text()
