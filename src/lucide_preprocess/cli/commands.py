"""
CLI Command Handlers Facade.

Re-exports handlers from `lucide_preprocess.cli.handlers` so the dispatcher
(and tests patching it) reference a single module.
"""

from lucide_preprocess.cli.handlers.transform import (
  handle_transform,
  _transform_single_file,
  _print_batch_summary,
)
from lucide_preprocess.cli.handlers.naming import handle_slug
from lucide_preprocess.cli.handlers.renamings import handle_renamings

__all__ = [
  "_print_batch_summary",
  "_transform_single_file",
  "handle_renamings",
  "handle_slug",
  "handle_transform",
]
