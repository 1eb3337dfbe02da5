"""
Transform Command Handler.

This module implements the logic for the `lucide-preprocess transform` command.
It orchestrates:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Rewriting a single file or every source file of a directory tree.
3. Output writing, `--check` reporting and the batch summary.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from lucide_preprocess.config import PreprocessConfig
from lucide_preprocess.core.engine import PreprocessEngine
from lucide_preprocess.utils.console import (
  console,
  log_error,
  log_info,
  log_success,
  log_warning,
)

SOURCE_EXTENSIONS = (
  ".js",
  ".jsx",
  ".mjs",
  ".cjs",
  ".ts",
  ".tsx",
  ".mts",
  ".cts",
  ".svelte",
  ".vue",
  ".astro",
)


class FileReport(BaseModel):
  """
  Outcome of transforming one file.
  """

  rewritten: int = Field(default=0, description="Number of import statements replaced.")
  skipped: bool = Field(default=False, description="True if the file lives in an ignored location.")
  error: Optional[str] = Field(default=None, description="Failure message, if any.")

  @property
  def success(self) -> bool:
    return self.error is None


def handle_transform(
  input_path: Path,
  output_path: Optional[Path],
  import_mode: Optional[str],
  plugin_settings: Dict[str, Any],
  check: bool = False,
) -> int:
  """
  Handles the 'transform' command execution.

  Args:
      input_path: Source file or directory.
      output_path: Destination file or directory. Single files go to stdout when omitted.
      import_mode: Override for the import mode ("cjs" or "esm").
      plugin_settings: Extra `key=value` options from `--config`.
      check: If True, write nothing and fail when any file would change.

  Returns:
      int: Exit code (0 for success, 1 for failure or pending changes in check mode).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    config = PreprocessConfig.load(
      import_mode=import_mode,
      options=plugin_settings,
      search_path=input_path if input_path.is_dir() else input_path.parent,
    )
  except ValueError as e:
    log_error(escape(str(e)))
    return 1

  engine = PreprocessEngine(config)
  results: Dict[str, FileReport] = {}

  if input_path.is_file():
    results[input_path.name] = _transform_single_file(input_path, output_path, engine, check)
  else:
    if not output_path and not check:
      log_error("Directory transform requires --out destination directory (or --check).")
      return 1

    files = _collect_sources(input_path)
    if not files:
      log_warning(f"No source files found in {input_path}")
      return 0

    log_info(f"Processing {len(files)} files from {input_path}...")
    for src_file in files:
      rel_path = src_file.relative_to(input_path)
      dest_file = output_path / rel_path if output_path else None
      results[rel_path.as_posix()] = _transform_single_file(src_file, dest_file, engine, check)

    _print_batch_summary(results)

  if any(not r.success for r in results.values()):
    return 1
  if check:
    pending = [name for name, r in results.items() if r.rewritten]
    for name in pending:
      log_warning(f"Would rewrite [path]{name}[/path]")
    return 1 if pending else 0
  return 0


def _collect_sources(root: Path) -> List[Path]:
  """
  Lists the rewritable source files below a directory, in stable order.

  Args:
      root: Directory to scan.

  Returns:
      List[Path]: Matching files.
  """
  return sorted(p for p in root.rglob("*") if p.is_file() and p.suffix in SOURCE_EXTENSIONS)


def _transform_single_file(
  input_path: Path,
  output_path: Optional[Path],
  engine: PreprocessEngine,
  check: bool,
) -> FileReport:
  """
  Helper to rewrite one file.

  Args:
      input_path: Source file path.
      output_path: Destination file path. Printed to stdout when None.
      engine: Configured engine.
      check: If True, nothing is written.

  Returns:
      FileReport: What happened to the file.
  """
  try:
    with open(input_path, "rt", encoding="utf-8") as f:
      code = f.read()
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to read {input_path}: {escape(str(e))}")
    return FileReport(error=str(e))

  result = engine.transform(code, input_path.resolve().as_posix())
  # Ignored files pass through untouched
  report = FileReport(skipped=True) if result is None else FileReport(rewritten=result.rewritten)
  if check:
    return report

  new_code = code if result is None else result.code
  if output_path:
    try:
      output_path.parent.mkdir(parents=True, exist_ok=True)
      with open(output_path, "wt", encoding="utf-8") as f:
        f.write(new_code)
    except OSError as e:
      log_error(f"Failed to write {output_path}: {escape(str(e))}")
      return report.model_copy(update={"error": str(e)})
    if report.rewritten:
      log_success(f"Rewrote {report.rewritten} import(s): [path]{input_path}[/path] -> [path]{output_path}[/path]")
  else:
    print(new_code, end="")

  return report


def _print_batch_summary(results: Dict[str, FileReport]) -> None:
  """
  Renders a summary table of transform results to the console.

  Args:
      results: Dictionary mapping relative file names to reports.
  """
  total = len(results)
  changed = sum(1 for r in results.values() if r.rewritten)
  skipped = sum(1 for r in results.values() if r.skipped)
  failures = sum(1 for r in results.values() if not r.success)

  table = Table(title="Lucide Import Rewrite")
  table.add_column("File", style="cyan")
  table.add_column("Imports", justify="right")
  table.add_column("Status", justify="center")

  for filename, res in results.items():
    if not res.success:
      table.add_row(filename, "-", Text(res.error, style="bold red"))
    elif res.skipped:
      table.add_row(filename, "-", "ignored")
    elif res.rewritten:
      table.add_row(filename, str(res.rewritten), "rewritten")

  if changed or failures or skipped:
    console.print(table)
  console.print(
    f"\n[bold]Summary:[/bold] {total} files, {changed} rewritten, {skipped} ignored, {failures} failed."
  )
