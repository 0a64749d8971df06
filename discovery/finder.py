"""FAF file discovery - find project.faf in the directory tree."""

import logging
from pathlib import Path
from typing import Optional, Union

from parsing import FafError, FafFile, parse_file

logger = logging.getLogger(__name__)


# Parent directories checked above the start directory
MAX_DEPTH = 10

# FAF file names to search for, in priority order (modern, legacy)
FAF_FILES = ("project.faf", ".faf")


class FindError(Exception):
    """Base class for find_and_parse failures."""


class FafNotFoundError(FindError):
    """No FAF file in the start directory or its searched ancestors."""

    def __init__(self, start: Optional[Path] = None):
        where = f" above {start}" if start is not None else ""
        super().__init__(f"No FAF file found in directory tree{where}")
        self.start = start


class FafFindParseError(FindError):
    """A FAF file was found but could not be parsed."""

    def __init__(self, path: Path, error: FafError):
        super().__init__(f"Parse error in {path}: {error}")
        self.path = path
        self.error = error


def find_faf_file(
    start_dir: Optional[Union[str, Path]] = None,
    max_depth: Optional[int] = None,
) -> Optional[Path]:
    """Find a FAF file starting from a directory and walking up to its parents.

    Each level is checked for `project.faf` and then `.faf` before moving up,
    so the nearest directory always wins. The start directory plus up to
    `max_depth` ancestors (MAX_DEPTH by default) are searched.

    Args:
        start_dir: Directory to start from. Defaults to the current directory.
        max_depth: Number of parents to ascend. Defaults to MAX_DEPTH.

    Returns:
        Path of the first FAF file found, or None.
    """
    current = Path(start_dir) if start_dir is not None else Path.cwd()
    current = current.absolute()
    limit = MAX_DEPTH if max_depth is None else max_depth

    depth = 0
    while True:
        for filename in FAF_FILES:
            candidate = current / filename
            if candidate.is_file():
                logger.debug(f"Found FAF file at depth {depth}: {candidate}")
                return candidate

        parent = current.parent
        if depth >= limit or parent == current:
            break
        current = parent
        depth += 1

    logger.debug(f"No FAF file found within {depth} levels of {start_dir or 'cwd'}")
    return None


def find_and_parse(start_dir: Optional[Union[str, Path]] = None) -> FafFile:
    """Find and parse a FAF file in one call.

    Raises:
        FafNotFoundError: If no FAF file is found.
        FafFindParseError: If the file is found but fails to parse.
    """
    path = find_faf_file(start_dir)
    if path is None:
        raise FafNotFoundError(Path(start_dir) if start_dir is not None else None)
    try:
        return parse_file(path)
    except FafError as e:
        raise FafFindParseError(path, e) from e
