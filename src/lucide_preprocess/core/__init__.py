"""
Core import-rewriting pipeline.

Leaf-first: `naming` and `modules` resolve names and symbol lists, `paths`
picks the per-framework icon directory, `matcher` finds statements,
`rewriter` emits replacements and `engine` splices them back.
"""

from lucide_preprocess.core.engine import PreprocessEngine, TransformResult
from lucide_preprocess.core.matcher import IMPORTS_PATTERN, ImportMatch, ImportMatcher
from lucide_preprocess.core.modules import ImportedSymbol, ModuleLists, raw_modules_to_lists
from lucide_preprocess.core.naming import dashed_slug, icon_comp_to_dashed
from lucide_preprocess.core.paths import framework_import_path
from lucide_preprocess.core.rewriter import StatementRewriter

__all__ = [
  "IMPORTS_PATTERN",
  "ImportMatch",
  "ImportMatcher",
  "ImportedSymbol",
  "ModuleLists",
  "PreprocessEngine",
  "StatementRewriter",
  "TransformResult",
  "dashed_slug",
  "framework_import_path",
  "icon_comp_to_dashed",
  "raw_modules_to_lists",
]
