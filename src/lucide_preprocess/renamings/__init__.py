"""
Static rename table for icon slugs.

Maps slugs computed from outdated or irregular component names to the file
name the icon module is actually published under.
"""

from lucide_preprocess.renamings.table import get_rename_table, load_rename_table, resolve_renamings_path

__all__ = ["get_rename_table", "load_rename_table", "resolve_renamings_path"]
