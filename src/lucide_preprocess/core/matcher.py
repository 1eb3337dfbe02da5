"""
Import Statement Matcher.

Scans raw source text for barrel imports of a Lucide icon package, i.e.
statements of the form::

    import { IconA, IconB as B, type IconProps } from "lucide-react";
    import { IconA } from '@lucide/svelte'

The scan is a single regular-expression pass over the text (no syntax tree).
Each hit is returned as a typed `ImportMatch` record instead of raw capture
groups.

Statements that are never matched:

- bare or wildcard imports (`import X from ...`, `import * as X from ...`);
- whole-statement type imports (`import type { X } from ...`);
- imports from any other package, including the `lab` icon collection.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Tuple

LEGACY_PREFIX = "lucide-"
NAMESPACED_PREFIX = "@lucide/"

# Frameworks that share the package prefix but are not icon bindings
EXCLUDED_FRAMEWORKS = ("lab",)

IMPORTS_PATTERN = re.compile(
  r"^(?P<indent>\s*)"
  r"import\s+\{(?P<modules>[^}]*)}\s+from\s+"
  r"(?P<quote>[\"'])"
  r"(?P<prefix>lucide-|@lucide/)"
  r"(?!(?:" + "|".join(EXCLUDED_FRAMEWORKS) + r")(?P=quote))"
  r"(?P<framework>[^\"'\n/]+?)"
  r"(?P=quote)"
  r"(?P<trailer>.*)$",
  re.MULTILINE,
)


@dataclass(frozen=True)
class ImportMatch:
  """
  One barrel import found in the source text.

  Attributes:
      leading_whitespace: Whitespace preceding `import`. May contain newlines
          when blank lines precede the statement.
      raw_symbol_list: The text between the braces, verbatim.
      quote_char: The quote delimiting the module specifier (`"` or `'`).
      library_prefix: `lucide-` or `@lucide/`.
      framework_name: The framework suffix of the specifier (e.g. `react`).
      line_trailer: Everything after the closing quote up to end of line.
      source_span: `(start, end)` offsets of the whole statement in the text.
  """

  leading_whitespace: str
  raw_symbol_list: str
  quote_char: str
  library_prefix: str
  framework_name: str
  line_trailer: str
  source_span: Tuple[int, int]

  @property
  def library_root(self) -> str:
    """
    The package specifier as written (e.g. `lucide-react`, `@lucide/svelte`).

    Returns:
        str: Prefix joined with the framework name.
    """
    return f"{self.library_prefix}{self.framework_name}"

  @property
  def is_multiline(self) -> bool:
    """
    True if the captured leading whitespace already carries a line break.

    Returns:
        bool: Whether emitted statements bring their own line separation.
    """
    return "\n" in self.leading_whitespace


class ImportMatcher:
  """
  Finds every qualifying icon import in a piece of source text.
  """

  def __init__(self, pattern: "re.Pattern[str]" = IMPORTS_PATTERN) -> None:
    """
    Initializes the matcher.

    Args:
        pattern: Compiled pattern exposing the named groups `indent`, `modules`,
            `quote`, `prefix`, `framework` and `trailer`.
    """
    self.pattern = pattern

  def finditer(self, code: str) -> Iterator[ImportMatch]:
    """
    Lazily yields matches in order of appearance, without overlap.

    Args:
        code: The full source text.

    Yields:
        ImportMatch: One record per qualifying statement.
    """
    for m in self.pattern.finditer(code):
      yield self._to_match(m)

  def _to_match(self, m: "re.Match[str]") -> ImportMatch:
    return ImportMatch(
      leading_whitespace=m.group("indent"),
      raw_symbol_list=m.group("modules"),
      quote_char=m.group("quote"),
      library_prefix=m.group("prefix"),
      framework_name=m.group("framework"),
      line_trailer=m.group("trailer"),
      source_span=m.span(),
    )
