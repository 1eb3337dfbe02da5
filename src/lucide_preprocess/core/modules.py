"""
Module List Parser.

Decomposes the raw text found between the braces of an import statement into
structured `ImportedSymbol` entries. Parsing is permissive: stray, leading,
trailing or repeated commas and arbitrary whitespace (including line breaks)
are accepted.
"""

import re
from dataclasses import dataclass, field
from typing import List

TYPE_MODIFIER = re.compile(r"^type\s+(?!as\s)")
ALIAS_SEPARATOR = re.compile(r"\s+as\s+")


@dataclass(frozen=True)
class ImportedSymbol:
  """
  A single name bound by an import statement.

  Attributes:
      import_name: The exported name, before any alias.
      exposed_name: The local binding; equals `import_name` unless aliased.
      is_type_only: True for symbols marked with a `type` modifier.
  """

  import_name: str
  exposed_name: str
  is_type_only: bool = False

  @property
  def is_aliased(self) -> bool:
    return self.exposed_name != self.import_name

  def render(self) -> str:
    """
    Formats the symbol as it appears inside an import clause.

    Returns:
        str: `Name` or `Name as Alias`.
    """
    if self.is_aliased:
      return f"{self.import_name} as {self.exposed_name}"
    return self.import_name


@dataclass
class ModuleLists:
  """
  The two ordered symbol lists of one statement.

  Attributes:
      plain: Value symbols, each rewritten to its own direct import.
      types: Type-only symbols, collected into one aggregated type import.
  """

  plain: List[ImportedSymbol] = field(default_factory=list)
  types: List[ImportedSymbol] = field(default_factory=list)

  @property
  def is_empty(self) -> bool:
    return not self.plain and not self.types


def parse_symbol(token: str, is_type_only: bool = False) -> ImportedSymbol:
  """
  Splits one trimmed token on its `as` clause.

  Args:
      token: e.g. `Icon1` or `Icon3 as Icon4`.
      is_type_only: Flag carried onto the resulting symbol.

  Returns:
      ImportedSymbol: The parsed entry.
  """
  parts = ALIAS_SEPARATOR.split(token, maxsplit=1)
  if len(parts) == 2 and parts[0] and parts[1]:
    return ImportedSymbol(parts[0], parts[1], is_type_only)
  return ImportedSymbol(token, token, is_type_only)


def raw_modules_to_lists(raw_modules: str) -> ModuleLists:
  """
  Converts the raw brace contents of an import into plain and type lists.

  Example:
    >>> lists = raw_modules_to_lists(" type Props, Icon1, Icon3 as Icon4, ")
    >>> [s.render() for s in lists.plain]
    ['Icon1', 'Icon3 as Icon4']
    >>> [s.render() for s in lists.types]
    ['Props']

  Args:
      raw_modules: The text between `{` and `}`.

  Returns:
      ModuleLists: Both lists, each in source order.
  """
  lists = ModuleLists()
  for raw in raw_modules.split(","):
    token = raw.strip()
    if not token:
      continue

    type_match = TYPE_MODIFIER.match(token)
    if type_match:
      lists.types.append(parse_symbol(token[type_match.end() :], is_type_only=True))
    else:
      lists.plain.append(parse_symbol(token))
  return lists
