"""FAF validation and completeness scoring."""

import logging
from typing import Dict, List, Union

from contracts import FafData, ValidationResult
from parsing import FafFile

logger = logging.getLogger(__name__)


# Completeness weights; they sum to exactly 100
SCORE_WEIGHTS: Dict[str, int] = {
    "faf_version": 10,
    "project.name": 10,
    "project.goal": 10,
    "instant_context.what_building": 10,
    "instant_context.tech_stack": 10,
    "instant_context.key_files": 10,
    "stack": 15,
    "human_context": 15,
    "tags": 5,
    "state": 5,
}

MAX_SCORE = 100


def _data_of(faf: Union[FafFile, FafData]) -> FafData:
    return faf.data if isinstance(faf, FafFile) else faf


def _filled_slots(data: FafData) -> List[str]:
    """Names of the scored slots that are populated in `data`."""
    ic = data.instant_context
    checks = {
        "faf_version": bool(data.faf_version),
        "project.name": bool(data.project.name),
        "project.goal": data.project.goal is not None,
        "instant_context.what_building": ic is not None and ic.what_building is not None,
        "instant_context.tech_stack": ic is not None and ic.tech_stack is not None,
        "instant_context.key_files": ic is not None and bool(ic.key_files),
        "stack": data.stack is not None,
        "human_context": data.human_context is not None,
        "tags": bool(data.tags),
        "state": data.state is not None,
    }
    return [slot for slot, filled in checks.items() if filled]


def calculate_score(faf: Union[FafFile, FafData]) -> int:
    """Completeness score (0-100) from the fixed slot weights."""
    total = sum(SCORE_WEIGHTS[slot] for slot in _filled_slots(_data_of(faf)))
    return min(total, MAX_SCORE)


def validate(faf: Union[FafFile, FafData]) -> ValidationResult:
    """Validate FAF document structure.

    Only an empty faf_version or an empty project.name is an error. Missing
    recommended sections are reported as warnings and never affect validity.

    Args:
        faf: A parsed FafFile or a bare FafData document.

    Returns:
        ValidationResult with errors, warnings and the completeness score.
    """
    data = _data_of(faf)
    errors: List[str] = []
    warnings: List[str] = []

    # Required fields
    if not data.faf_version:
        errors.append("Missing faf_version")
    if not data.project.name:
        errors.append("Missing project.name")

    # Recommended sections
    ic = data.instant_context
    if ic is None:
        warnings.append("Missing instant_context section")
    else:
        if ic.what_building is None:
            warnings.append("Missing instant_context.what_building")
        if ic.tech_stack is None:
            warnings.append("Missing instant_context.tech_stack")

    if data.stack is None:
        warnings.append("Missing stack section")
    if data.human_context is None:
        warnings.append("Missing human_context section")

    result = ValidationResult(
        valid=not errors,
        errors=errors,
        warnings=warnings,
        score=calculate_score(data),
    )
    logger.debug(
        f"Validated {data.project.name!r}: valid={result.valid} "
        f"score={result.score} warnings={len(warnings)}"
    )
    return result
