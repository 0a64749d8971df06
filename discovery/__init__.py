"""FAF file discovery module."""

from .finder import (
    FAF_FILES,
    MAX_DEPTH,
    FindError,
    FafNotFoundError,
    FafFindParseError,
    find_faf_file,
    find_and_parse,
)

__all__ = [
    "FAF_FILES",
    "MAX_DEPTH",
    "FindError",
    "FafNotFoundError",
    "FafFindParseError",
    "find_faf_file",
    "find_and_parse",
]
