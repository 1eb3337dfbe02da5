"""
Orchestration Engine for Import Rewriting.

This module provides the `PreprocessEngine`, which drives one transform call:

1.  **Exclusion**: Files inside ignored locations (dependency folders, framework
    build output) are skipped and reported as unchanged (`None`).
2.  **Matching**: `ImportMatcher` yields every barrel icon import in the text.
3.  **Rewriting**: `StatementRewriter` parses each symbol list and emits the
    direct imports.
4.  **Splicing**: Replacements are substituted at their original spans; all
    other text is kept byte for byte.

The engine holds no mutable state, so a single instance may serve concurrent
calls.
"""

from typing import List, Mapping, Optional

from pydantic import BaseModel, Field

from lucide_preprocess.config import PreprocessConfig
from lucide_preprocess.core.matcher import ImportMatcher
from lucide_preprocess.core.rewriter import StatementRewriter
from lucide_preprocess.utils.console import log_debug


class TransformResult(BaseModel):
  """
  Structured result of a single file transform.
  """

  code: str = Field(default="", description="The transformed source code.")
  rewritten: int = Field(default=0, description="Number of import statements replaced.")

  @property
  def changed(self) -> bool:
    """
    Returns True if at least one statement was rewritten.

    Returns:
        bool: True if `rewritten` is non-zero.
    """
    return self.rewritten > 0


class PreprocessEngine:
  """
  The main transform unit.

  Attributes:
      config (PreprocessConfig): Options for this plugin invocation.
      matcher (ImportMatcher): Locates candidate statements.
      rewriter (StatementRewriter): Builds replacement text.
  """

  def __init__(
    self,
    config: Optional[PreprocessConfig] = None,
    renamings: Optional[Mapping[str, str]] = None,
  ):
    """
    Initializes the Engine.

    Args:
        config (PreprocessConfig, optional): The configuration. Defaults are used if None.
        renamings (Mapping, optional): Slug rename table override.
    """
    self.config = config or PreprocessConfig()
    self.matcher = ImportMatcher()
    self.rewriter = StatementRewriter(self.config, renamings)

  def rewrite(self, code: str) -> TransformResult:
    """
    Rewrites every barrel icon import in a piece of source text.

    Args:
        code (str): The source text.

    Returns:
        TransformResult: The new text and the number of statements replaced.
    """
    parts: List[str] = []
    cursor = 0
    count = 0

    for match in self.matcher.finditer(code):
      start, end = match.source_span
      parts.append(code[cursor:start])
      parts.append(self.rewriter.rewrite(match))
      cursor = end
      count += 1

    if not count:
      return TransformResult(code=code)

    parts.append(code[cursor:])
    return TransformResult(code="".join(parts), rewritten=count)

  def transform(self, code: str, path: str = "") -> Optional[TransformResult]:
    """
    Build-tool transform hook.

    Args:
        code (str): The file contents.
        path (str): The file path, checked against the ignored locations.

    Returns:
        Optional[TransformResult]: None for ignored files, otherwise the result
        (whose code equals the input when nothing matched).
    """
    if self.config.is_ignored(path):
      log_debug(f"Skipping ignored file [path]{path}[/path]")
      return None

    result = self.rewrite(code)
    if result.changed:
      log_debug(f"Rewrote {result.rewritten} icon import(s) in [path]{path}[/path]")
    return result
