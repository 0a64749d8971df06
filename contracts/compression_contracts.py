"""Compression contracts."""

from enum import Enum


class CompressionLevel(str, Enum):
    """Fidelity tier for a compressed FAF view."""
    MINIMAL = "minimal"  # project name/goal + tech stack, ~150 tokens
    STANDARD = "standard"  # core project, instant context and stack, ~400 tokens
    FULL = "full"  # everything, ~800 tokens
