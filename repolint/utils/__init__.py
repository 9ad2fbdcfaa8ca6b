"""Utility helpers for the linter."""

from .fileio import read_yaml_file, read_text_file
from .globbing import is_broken_symlink, iter_glob_matches

__all__ = [
    "read_yaml_file",
    "read_text_file",
    "is_broken_symlink",
    "iter_glob_matches",
]
