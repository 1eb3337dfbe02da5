"""
Statement Rewriter.

Turns one matched barrel import into its replacement text:

- one aggregated `import type { ... }` from the package root when the
  statement carried type-only symbols;
- one default import per value symbol from its per-icon module.

The original indentation and line trailer (usually `;`) are reused on every
emitted statement.
"""

from typing import List, Mapping, Optional

from lucide_preprocess.config import PreprocessConfig
from lucide_preprocess.core.matcher import ImportMatch
from lucide_preprocess.core.modules import ImportedSymbol, ModuleLists, raw_modules_to_lists
from lucide_preprocess.core.naming import icon_comp_to_dashed
from lucide_preprocess.core.paths import framework_import_path


class StatementRewriter:
  """
  Emits replacement imports for `ImportMatch` records.

  Attributes:
      config (PreprocessConfig): Options controlling the icon path layout.
      renamings (Optional[Mapping]): Slug rename table; bundled table if None.
  """

  def __init__(self, config: Optional[PreprocessConfig] = None, renamings: Optional[Mapping[str, str]] = None):
    self.config = config or PreprocessConfig()
    self.renamings = renamings

  def icon_specifier(self, match: ImportMatch, symbol: ImportedSymbol) -> str:
    """
    Builds the module specifier of a single icon, without quotes.

    Args:
        match: The statement the symbol came from.
        symbol: The icon symbol.

    Returns:
        str: e.g. `lucide-react/dist/esm/icons/circle-alert`.
    """
    subpath = framework_import_path(match.framework_name, self.config)
    slug = icon_comp_to_dashed(symbol.import_name, self.renamings)
    return f"{match.library_root}{subpath}{slug}"

  def render_lines(self, match: ImportMatch, modules: ModuleLists) -> List[str]:
    """
    Renders every replacement statement of one match, type import first.

    Args:
        match: The matched statement.
        modules: Its parsed symbol lists.

    Returns:
        List[str]: The statements, each prefixed with the original whitespace.
    """
    indent = match.leading_whitespace
    quote = match.quote_char
    trailer = match.line_trailer.rstrip()

    lines = []
    if modules.types:
      names = ", ".join(s.render() for s in modules.types)
      lines.append(f"{indent}import type {{ {names} }} from {quote}{match.library_root}{quote}{trailer}")

    for symbol in modules.plain:
      specifier = self.icon_specifier(match, symbol)
      lines.append(f"{indent}import {symbol.render()} from {quote}{specifier}{quote}{trailer}")
    return lines

  def rewrite(self, match: ImportMatch) -> str:
    """
    Produces the text that replaces the matched statement.

    Args:
        match: The matched statement.

    Returns:
        str: The joined replacement statements. Empty for `{}` imports.
    """
    modules = raw_modules_to_lists(match.raw_symbol_list)
    if modules.is_empty:
      return ""

    separator = "" if match.is_multiline else "\n"
    return separator.join(self.render_lines(match, modules))
