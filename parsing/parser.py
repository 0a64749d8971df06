"""Core FAF parser.

Turns YAML text into a typed `FafData` document and back. Decoding is done
with a PyYAML safe loader, so anchors, aliases and merge keys are resolved
before the schema ever sees the data. Plain scalars stay text: `ai_score: 85`,
`when: 2024-01-01` and `name: yes` all decode as the strings written.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import ValidationError

from config import settings
from contracts import FafData
from .errors import EmptyContentError, FafIOError, FafSyntaxError, FafTypeError, MissingFieldError

logger = logging.getLogger(__name__)

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")
_MAX_SCORE = 255

# Minimum score for is_high_quality()
HIGH_QUALITY_THRESHOLD = 70

# YAML 1.1 implicit types that would otherwise turn plain text into int,
# float, bool or date; null and merge keys are still resolved
_TEXT_TAGS = frozenset({
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
})


class FafLoader(yaml.SafeLoader):
    """Safe loader that keeps plain scalars as strings."""


FafLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TEXT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_score(raw: Optional[str]) -> Optional[int]:
    """Integer view of a raw `ai_score` string.

    All trailing '%' characters are stripped ("85%%" -> 85) and the rest must
    be an unsigned integer that fits in 0..255. Anything else (spaces,
    negatives, fractions, words, overflow) yields None rather than an error.
    """
    if raw is None:
        return None
    digits = raw.rstrip("%")
    if not _UNSIGNED_INT.fullmatch(digits):
        return None
    value = int(digits)
    if value > _MAX_SCORE:
        return None
    return value


@dataclass(frozen=True)
class FafFile:
    """Parsed FAF file with convenient accessors."""

    data: FafData
    path: Optional[str] = None  # Set when loaded with parse_file

    @property
    def project_name(self) -> str:
        return self.data.project.name

    @property
    def version(self) -> str:
        return self.data.faf_version

    def score(self) -> Optional[int]:
        """AI score as an integer, or None when absent or unreadable."""
        return parse_score(self.data.ai_score)

    def tech_stack(self) -> Optional[str]:
        ic = self.data.instant_context
        return ic.tech_stack if ic is not None else None

    def what_building(self) -> Optional[str]:
        ic = self.data.instant_context
        return ic.what_building if ic is not None else None

    def key_files(self) -> List[str]:
        ic = self.data.instant_context
        return list(ic.key_files) if ic is not None else []

    def goal(self) -> Optional[str]:
        return self.data.project.goal

    def is_high_quality(self) -> bool:
        """Check if the score meets the high quality threshold of 70."""
        score = self.score()
        return score is not None and score >= HIGH_QUALITY_THRESHOLD


def _loc_to_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


def _decode(content: str) -> Any:
    try:
        return yaml.load(content, Loader=FafLoader)
    except yaml.YAMLError as e:
        raise FafSyntaxError(str(e), e) from e


def parse(content: str) -> FafFile:
    """Parse FAF content from a string.

    Args:
        content: Raw YAML text of a .faf file.

    Returns:
        FafFile wrapping the typed document.

    Raises:
        EmptyContentError: If content is empty or whitespace-only.
        FafSyntaxError: If the YAML is malformed or a field has the wrong type.
        MissingFieldError: If faf_version, project or project.name is absent.
    """
    content = content.strip()
    if not content:
        raise EmptyContentError()

    raw = _decode(content)
    if raw is None:
        # Comment-only documents decode to nothing
        raise MissingFieldError("faf_version")
    if not isinstance(raw, dict):
        raise FafTypeError(f"expected a mapping at document root, found {type(raw).__name__}")

    try:
        data = FafData.model_validate(raw)
    except ValidationError as e:
        for err in e.errors():
            if err["type"] == "missing":
                raise MissingFieldError(_loc_to_path(err["loc"]), e) from e
        first = e.errors()[0]
        raise FafTypeError(f"{_loc_to_path(first['loc'])}: {first['msg']}", e) from e

    logger.debug(f"Parsed FAF document for project {data.project.name!r}")
    return FafFile(data=data)


def parse_file(path: Union[str, Path]) -> FafFile:
    """Parse a FAF file from disk.

    Raises:
        FafIOError: If the file cannot be read.
        FafError: Any parse error from `parse`.
    """
    path_str = str(path)
    try:
        content = Path(path).read_text(encoding=settings.encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise FafIOError(path_str, e) from e

    faf = parse(content)
    logger.info(f"Loaded FAF file: {path_str}")
    return FafFile(data=faf.data, path=path_str)


def stringify(faf: Union[FafFile, FafData]) -> str:
    """Serialize a FAF document back to YAML.

    Absent fields and empty lists/mappings are omitted; keys keep the schema
    order.
    """
    data = faf.data if isinstance(faf, FafFile) else faf
    return yaml.safe_dump(
        data.to_yaml_dict(),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
