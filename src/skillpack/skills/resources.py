"""
Resource file discovery for skill packages.
"""

import os
from pathlib import Path
from typing import Iterable, List, Sequence

from skillpack.logger import get_logger

from .errors import ResourceScanIOError
from .models import SkillResources

logger = get_logger(__name__)

RESOURCE_CATEGORIES: Sequence[str] = ("scripts", "references", "assets")


def _walk(directory: Path) -> Iterable[Path]:
    """Yield files depth-first in lexical order; symlinked dirs are not followed."""
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda e: e.name)
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(Path(entry.path))
        else:
            yield Path(entry.path)


def find_resource_files(skill_path: Path, category: str) -> List[str]:
    """
    List every file under ``skill_path/category``, relative to ``skill_path``.

    A missing category directory yields an empty list.

    Raises:
        ResourceScanIOError: the walk hit an I/O error.
    """
    scan_dir = skill_path / category
    if not scan_dir.exists():
        return []

    try:
        if not scan_dir.is_dir():
            return [scan_dir.relative_to(skill_path).as_posix()]
        return [p.relative_to(skill_path).as_posix() for p in _walk(scan_dir)]
    except OSError as e:
        raise ResourceScanIOError(scan_dir, str(e)) from e


def scan_resources(skill_path: Path) -> SkillResources:
    """Collect the scripts, references and assets of one package."""
    found = {category: find_resource_files(skill_path, category) for category in RESOURCE_CATEGORIES}
    logger.debug(
        f"Resources in {skill_path}: "
        + ", ".join(f"{len(files)} {category}" for category, files in found.items())
    )
    return SkillResources(**found)
