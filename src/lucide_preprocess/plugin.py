"""
Build-tool plugin facade.

Exposes the object shape build tools such as Vite expect from a plugin
factory: a `name`, an `enforce` ordering hint and a `transform(code, path)`
hook returning `{code}` or nothing.
"""

from typing import Any, Mapping, Optional, Union

from lucide_preprocess.config import PreprocessConfig
from lucide_preprocess.core.engine import PreprocessEngine, TransformResult

PLUGIN_NAME = "vite-plugin-lucide-preprocess"


class LucidePreprocessPlugin:
  """
  Plugin object wrapping a `PreprocessEngine`.

  Attributes:
      name (str): Plugin identifier reported to the build tool.
      enforce (str): Runs the transform before other plugins.
      config (PreprocessConfig): Resolved options.
  """

  name = PLUGIN_NAME
  enforce = "pre"

  def __init__(self, config: Optional[PreprocessConfig] = None):
    self.config = config or PreprocessConfig()
    self.engine = PreprocessEngine(self.config)

  def transform(self, code: str, path: str) -> Optional[TransformResult]:
    """
    Rewrites the icon imports of one module.

    Args:
        code: The module source.
        path: The module path.

    Returns:
        Optional[TransformResult]: None for ignored paths.
    """
    return self.engine.transform(code, path)

  def __repr__(self) -> str:
    return f"{type(self).__name__}(import_mode={self.config.import_mode.value!r})"


def plugin(options: Union[PreprocessConfig, Mapping[str, Any], None] = None) -> LucidePreprocessPlugin:
  """
  Plugin factory.

  Args:
      options: A configuration object, or a raw options mapping such as
          `{"importMode": "cjs"}`.

  Returns:
      LucidePreprocessPlugin: A ready plugin instance.

  Raises:
      ValueError: If the options are invalid.
  """
  if isinstance(options, PreprocessConfig):
    return LucidePreprocessPlugin(options)
  return LucidePreprocessPlugin(PreprocessConfig.from_options(options))
