"""
Runtime Configuration Store.

Holds the options threaded through a single plugin invocation. The only option
affecting the rewrite itself is `import_mode`; `ignored_paths` controls which
files the plugin refuses to touch.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from rich.markup import escape

from lucide_preprocess.enums import ImportMode
from lucide_preprocess.utils.console import log_warning

if sys.version_info >= (3, 11):
  import tomllib
else:
  try:
    import tomli as tomllib
  except ImportError:
    tomllib = None  # type: ignore

DEFAULT_IGNORED_PATHS: Tuple[str, ...] = ("/node_modules/", "/.svelte-kit/")

TOML_SECTION = "lucide_preprocess"


class PreprocessConfig(BaseModel):
  """
  Immutable configuration for one plugin instance.

  Accepts both the snake_case field names and the camelCase option names used by
  JavaScript build configs (`importMode`, `ignoredPaths`).
  """

  model_config = ConfigDict(frozen=True, populate_by_name=True)

  import_mode: ImportMode = Field(
    ImportMode.ESM,
    alias="importMode",
    description="Build flavour used for frameworks publishing cjs and esm builds.",
  )
  ignored_paths: Tuple[str, ...] = Field(
    DEFAULT_IGNORED_PATHS,
    alias="ignoredPaths",
    description="Path substrings marking files that must never be rewritten.",
  )

  @field_validator("import_mode", mode="before")
  @classmethod
  def normalize_import_mode(cls, v: Any) -> Any:
    """
    Lowercases and strips raw string values before enum coercion.

    Args:
        v (Any): The raw option value.

    Returns:
        Any: The normalised value.
    """
    if isinstance(v, str):
      return v.lower().strip()
    return v

  def is_ignored(self, path: str) -> bool:
    """
    Checks whether a file path lives inside an excluded location.

    Args:
        path (str): The path of the file handed over by the build tool.

    Returns:
        bool: True if any ignored marker is a substring of the path.
    """
    normalized = path.replace("\\", "/")
    return any(marker in normalized for marker in self.ignored_paths)

  @classmethod
  def _canonical_keys(cls, options: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Renames camelCase option aliases to their field names.

    Args:
        options (Mapping): Raw options.

    Returns:
        Dict[str, Any]: Options keyed by field name.
    """
    aliases = {f.alias: name for name, f in cls.model_fields.items() if f.alias}
    return {aliases.get(k, k): v for k, v in options.items()}

  @classmethod
  def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "PreprocessConfig":
    """
    Merges a user options mapping over the defaults.

    Keys that are not recognised are ignored.

    Args:
        options (Optional[Mapping]): Options as passed to the plugin factory.

    Returns:
        PreprocessConfig: The validated configuration.

    Raises:
        ValueError: If an option has an invalid value.
    """
    cleaned = {k: v for k, v in cls._canonical_keys(options or {}).items() if k in cls.model_fields}
    try:
      return cls.model_validate(cleaned)
    except ValidationError as e:
      raise ValueError(f"Invalid lucide-preprocess options: {e}")

  @classmethod
  def load(
    cls,
    import_mode: Optional[str] = None,
    options: Optional[Mapping[str, Any]] = None,
    search_path: Optional[Path] = None,
  ) -> "PreprocessConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        import_mode (Optional[str]): Override for the import mode.
        options (Optional[Mapping]): Additional key/value overrides (e.g. from `--config`).
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        PreprocessConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    merged: Dict[str, Any] = {**cls._canonical_keys(toml_config), **cls._canonical_keys(options or {})}
    if import_mode is not None:
      merged["import_mode"] = import_mode

    return cls.from_options(merged)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  if not tomllib:
    return {}, None

  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        log_warning(f"Could not read [path]{toml_path}[/path]: {escape(str(e))}")
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get(TOML_SECTION, {}), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into an options dictionary.

  Values stay strings, except for sequence options (`ignoredPaths`), whose
  value is split on commas into a tuple, e.g. `ignoredPaths=/vendor/,/dist/`.

  Args:
      items (Optional[List[str]]): List of raw CLI strings directly from argparse.

  Returns:
      Dict[str, Any]: Parsed dictionary.
  """
  if not items:
    return {}

  sequence_keys = {"ignored_paths", "ignoredPaths"}
  config: Dict[str, Any] = {}
  for item in items:
    if "=" not in item:
      log_warning(f"Ignoring invalid config format: '{escape(item)}'. Expected 'key=value'.")
      continue

    key, val_str = item.split("=", 1)
    key = key.strip()
    val_str = val_str.strip()

    if key in sequence_keys:
      config[key] = tuple(part.strip() for part in val_str.split(",") if part.strip())
    else:
      config[key] = val_str

  return config
