"""
Icon Name Resolution.

Converts a PascalCase icon component identifier into the dashed slug of the
module that exports it, e.g. `ArrowDown01` -> `arrow-down-0-1`.

The conversion is a fixed sequence of text rewrites (order matters, later steps
rely on the normalisation of earlier ones), followed by a lookup in the static
rename table for icons whose file name cannot be derived from their
component name.
"""

import re
from typing import Mapping, Optional

from lucide_preprocess.renamings.table import get_rename_table

ALIAS_MARKER = " as "

_UPPER_OR_DIGIT = re.compile(r"[A-Z\d]")
# Dimension tokens: "grid-2x-2" -> "grid-2x2"
_DIMENSION = re.compile(r"(\d)x-(\d)")
# Two-digit clock faces: "clock-1-0" -> "clock-10"
_CLOCK_FACE = re.compile(r"clock-(\d)-(\d)")

LIBRARY_PREFIX = "lucide-"
REDUNDANT_SUFFIX = "-icon"


def _dash_boundary(match: "re.Match[str]") -> str:
  char = match.group(0).lower()
  return f"-{char}" if match.start() > 0 else char


def dashed_slug(component: str) -> str:
  """
  Computes the slug of a component name without consulting the rename table.

  Example:
    >>> dashed_slug("Grid2x2Check")
    'grid-2x2-check'

  Args:
      component: The PascalCase icon component name. A trailing `as` clause is
          ignored.

  Returns:
      str: The computed dashed slug.
  """
  if ALIAS_MARKER in component:
    component = component.split(ALIAS_MARKER, 1)[0]
  component = component.strip()

  slug = _UPPER_OR_DIGIT.sub(_dash_boundary, component).lower()
  slug = _DIMENSION.sub(r"\1x\2", slug, count=1)
  slug = _CLOCK_FACE.sub(r"clock-\1\2", slug, count=1)

  if slug.startswith(LIBRARY_PREFIX):
    slug = slug[len(LIBRARY_PREFIX) :]
  if slug.endswith(REDUNDANT_SUFFIX):
    slug = slug[: -len(REDUNDANT_SUFFIX)]
  return slug


def icon_comp_to_dashed(component: str, renamings: Optional[Mapping[str, str]] = None) -> str:
  """
  Resolves a component name to the slug of its icon module.

  Args:
      component: The PascalCase icon component name (e.g. `AlertCircle`).
      renamings: Slug rename table. Defaults to the bundled table.

  Returns:
      str: The module slug (e.g. `circle-alert`). Unknown names degrade to the
      computed slug.
  """
  table = get_rename_table() if renamings is None else renamings
  slug = dashed_slug(component)
  return table.get(slug, slug)
