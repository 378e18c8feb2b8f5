"""
Errors raised while parsing a skill package.

Every stage fails fast: the first error ends the parse and no partial
package is produced.
"""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class SkillPackageError(Exception):
    """Base error for skill package parsing.

    Attributes:
        path: The offending directory or file, when known.
        detail: Underlying diagnostic (decoder message, OS error text), if any.
    """

    reason = "skill package error"

    def __init__(self, path: Optional[PathLike] = None, detail: Optional[str] = None):
        self.path = Path(path) if path is not None else None
        self.detail = detail

        parts = [self.reason]
        if self.path is not None:
            parts.append(f": {self.path}")
        if detail:
            parts.append(f" ({detail})")
        super().__init__("".join(parts))


class MissingDirectory(SkillPackageError):
    """The package path does not exist or is not a directory."""

    reason = "skill directory not found"


class MissingDefinitionFile(SkillPackageError):
    """The package directory has no definition document."""

    reason = "definition file not found in skill directory"


class DefinitionReadError(SkillPackageError):
    """The definition document exists but could not be read."""

    reason = "failed to read definition file"


class MissingFrontmatter(SkillPackageError):
    """Fewer than two frontmatter delimiter lines were found."""

    reason = "no YAML frontmatter found"


class InvalidMetadataSyntax(SkillPackageError):
    """The frontmatter block could not be decoded into skill metadata."""

    reason = "failed to parse frontmatter"


class ResourceScanIOError(SkillPackageError):
    """Walking a resource subtree failed."""

    reason = "error scanning resource directory"
