"""Pydantic contracts for the FAF SDK.

Parsed documents, validation results and compression levels are all typed
through these contracts.
"""

from .faf_contracts import (
    FafSection,
    Project,
    InstantContext,
    Stack,
    ContextQuality,
    HumanContext,
    Preferences,
    State,
    FafData,
)

from .validation_contracts import ValidationResult

from .compression_contracts import CompressionLevel

__all__ = [
    # Document
    "FafSection",
    "Project",
    "InstantContext",
    "Stack",
    "ContextQuality",
    "HumanContext",
    "Preferences",
    "State",
    "FafData",
    # Validation
    "ValidationResult",
    # Compression
    "CompressionLevel",
]
