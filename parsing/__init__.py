"""FAF parsing: YAML text to typed documents and back."""

from .errors import (
    FafError,
    EmptyContentError,
    FafSyntaxError,
    FafTypeError,
    MissingFieldError,
    FafIOError,
)
from .parser import FafFile, parse, parse_file, parse_score, stringify

__all__ = [
    "FafError",
    "EmptyContentError",
    "FafSyntaxError",
    "FafTypeError",
    "MissingFieldError",
    "FafIOError",
    "FafFile",
    "parse",
    "parse_file",
    "parse_score",
    "stringify",
]
