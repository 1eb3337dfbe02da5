"""
Framework Import Path Resolution.

Some icon packages publish both a CommonJS and an ES module build, each with
its own icons directory; the others publish a single flat icons directory.
"""

from typing import FrozenSet, Union

from lucide_preprocess.config import PreprocessConfig
from lucide_preprocess.enums import ImportMode

# Packages laid out as dist/<mode>/icons/
BUILD_QUALIFIED_FRAMEWORKS: FrozenSet[str] = frozenset({"react", "vue", "vue-next", "preact"})


def framework_import_path(framework: str, config: Union[PreprocessConfig, dict, None] = None) -> str:
  """
  Returns the subpath between the package root and the icon slug.

  Example:
    >>> framework_import_path("react", {"importMode": "cjs"})
    '/dist/cjs/icons/'
    >>> framework_import_path("svelte")
    '/icons/'

  Args:
      framework: Framework suffix of the package (e.g. `react`, `svelte`).
      config: Plugin configuration, or a raw options mapping.

  Returns:
      str: The subpath, with leading and trailing slashes.
  """
  if not isinstance(config, PreprocessConfig):
    config = PreprocessConfig.from_options(config)

  if framework in BUILD_QUALIFIED_FRAMEWORKS:
    mode = ImportMode(config.import_mode).value
    return f"/dist/{mode}/icons/"
  return "/icons/"
