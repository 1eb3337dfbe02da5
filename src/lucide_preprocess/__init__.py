"""
lucide-preprocess Package.

Rewrites barrel imports of Lucide icon packages into direct per-icon imports,
so bundlers only ever see the icons a module actually uses.

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import lucide_preprocess as lp
    code = 'import { AlertCircle, Home } from "lucide-svelte";'
    print(lp.transform(code))
    # import AlertCircle from "lucide-svelte/icons/circle-alert";
    # import Home from "lucide-svelte/icons/house";

Plugin Usage
^^^^^^^^^^^^

.. code-block:: python

    from lucide_preprocess import plugin

    p = plugin({"importMode": "cjs"})
    res = p.transform('import { Icon1 } from "lucide-react";', "src/App.tsx")
    print(res.code)
    # import Icon1 from "lucide-react/dist/cjs/icons/icon-1";
"""

from lucide_preprocess.config import PreprocessConfig
from lucide_preprocess.core.engine import PreprocessEngine, TransformResult
from lucide_preprocess.enums import ImportMode
from lucide_preprocess.plugin import LucidePreprocessPlugin, plugin

__version__ = "0.1.0"


def transform(code: str, path: str = "", import_mode: str = "esm") -> str:
  """
  Rewrites the Lucide icon imports of a string of source code.

  This is a convenience wrapper around `PreprocessEngine` with default options.

  Args:
      code (str): The source code.
      path (str): The file path, used to skip ignored locations.
      import_mode (str): "esm" (default) or "cjs".

  Returns:
      str: The rewritten code; the input unchanged when the path is ignored.

  Raises:
      ValueError: If `import_mode` is not a known mode.
  """
  config = PreprocessConfig.from_options({"import_mode": import_mode})
  result = PreprocessEngine(config).transform(code, path)
  if result is None:
    return code
  return result.code


__all__ = [
  "ImportMode",
  "LucidePreprocessPlugin",
  "PreprocessConfig",
  "PreprocessEngine",
  "TransformResult",
  "__version__",
  "plugin",
  "transform",
]
