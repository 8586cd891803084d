"""
Discovery of BPMN files below a directory.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from ..constants import BPMN_SUFFIXES

logger = logging.getLogger(__name__)


def has_bpmn_suffix(path: Path, suffixes: Iterable[str] = BPMN_SUFFIXES) -> bool:
    """Check the file name against suffixes (case-insensitive, multi-part suffixes allowed)."""
    name = path.name.lower()
    return any(name.endswith(suffix.lower()) for suffix in suffixes)


def find_bpmn_files(
    directory: Path,
    suffixes: Iterable[str] = BPMN_SUFFIXES,
    skip_prefix: Optional[str] = None
) -> List[Path]:
    """
    Recursively collect BPMN files in a directory.

    Args:
        directory: Directory to scan, including all subdirectories
        suffixes: Accepted file suffixes
        skip_prefix: Ignore files whose name starts with this prefix
            (used to leave earlier fixed outputs alone)

    Returns:
        Sorted list of matching file paths
    """
    suffixes = list(suffixes)
    bpmn_files = []

    for path in sorted(Path(directory).rglob("*")):
        if not path.is_file() or not has_bpmn_suffix(path, suffixes):
            continue
        if skip_prefix and path.name.startswith(skip_prefix):
            logger.debug(f"Skipping fixed output: {path}")
            continue
        bpmn_files.append(path)

    logger.info(f"Found {len(bpmn_files)} BPMN file(s) in {directory}")
    return bpmn_files
