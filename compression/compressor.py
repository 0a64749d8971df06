"""FAF compression for token-budgeted contexts.

Each level is a curated projection of the document, not a generic
truncation. The input is never modified; a new FafData is returned.
"""

import logging
from typing import Dict, Union

from contracts import CompressionLevel, FafData, InstantContext, Project
from parsing import FafFile

logger = logging.getLogger(__name__)


STANDARD_KEY_FILES_LIMIT = 5

# Nominal token budgets per level; fixed values, not measured
TOKEN_ESTIMATES: Dict[CompressionLevel, int] = {
    CompressionLevel.MINIMAL: 150,
    CompressionLevel.STANDARD: 400,
    CompressionLevel.FULL: 800,
}


def _compress_minimal(data: FafData) -> FafData:
    ic = data.instant_context
    return FafData(
        faf_version=data.faf_version,
        project=Project(name=data.project.name, goal=data.project.goal),
        instant_context=InstantContext(tech_stack=ic.tech_stack) if ic is not None else None,
    )


def _compress_standard(data: FafData) -> FafData:
    ic = data.instant_context
    return FafData(
        faf_version=data.faf_version,
        project=data.project.model_copy(),
        ai_score=data.ai_score,
        instant_context=InstantContext(
            what_building=ic.what_building,
            tech_stack=ic.tech_stack,
            key_files=list(ic.key_files[:STANDARD_KEY_FILES_LIMIT]),
        ) if ic is not None else None,
        stack=data.stack.model_copy() if data.stack is not None else None,
    )


def compress(faf: Union[FafFile, FafData], level: Union[CompressionLevel, str]) -> FafData:
    """Compress a FAF document to the given level.

    Args:
        faf: A parsed FafFile or a bare FafData document.
        level: CompressionLevel or its string value ("minimal", "standard", "full").

    Returns:
        A new FafData holding only the fields retained at that level.
    """
    level = CompressionLevel(level)
    data = faf.data if isinstance(faf, FafFile) else faf

    if level == CompressionLevel.MINIMAL:
        compressed = _compress_minimal(data)
    elif level == CompressionLevel.STANDARD:
        compressed = _compress_standard(data)
    else:
        compressed = data.model_copy(deep=True)

    logger.debug(f"Compressed {data.project.name!r} to {level.value}")
    return compressed


def estimate_tokens(level: Union[CompressionLevel, str]) -> int:
    """Nominal token budget for a compression level."""
    return TOKEN_ESTIMATES[CompressionLevel(level)]
