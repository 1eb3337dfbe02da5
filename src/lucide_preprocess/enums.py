"""
Enumerations for lucide-preprocess.

This module defines the standard enumerations shared by the configuration
layer and the path resolver.
"""

from enum import Enum


class ImportMode(str, Enum):
  """
  Build flavour of the icon packages that publish both CommonJS and ES modules.

  Used by the path resolver to pick the `dist/<mode>/icons/` subdirectory.
  """

  CJS = "cjs"
  ESM = "esm"
