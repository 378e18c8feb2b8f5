from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, List, Optional, Union

from skillpack.logger import get_logger

from .errors import (
    DefinitionReadError,
    InvalidMetadataSyntax,
    MissingDefinitionFile,
    MissingDirectory,
    MissingFrontmatter,
)
from .frontmatter import split_frontmatter
from .metadata import decode_metadata
from .models import SkillPackage
from .resources import scan_resources
from .segmenter import segment_body

logger = get_logger(__name__)

DEFINITION_FILE = "SKILL.md"


def parse_skill_package(dir_path: Union[str, Path], definition_file: str = DEFINITION_FILE) -> SkillPackage:
    """
    Parse the skill package in ``dir_path``.

    Either the whole package is returned or an error is raised; nothing is
    built partially.

    Raises:
        MissingDirectory: ``dir_path`` does not exist or is not a directory.
        MissingDefinitionFile: the directory has no definition file.
        DefinitionReadError: the definition file could not be read.
        MissingFrontmatter: the document has fewer than two ``---`` lines.
        InvalidMetadataSyntax: the frontmatter is not valid metadata.
        ResourceScanIOError: a resource subtree could not be walked.
    """
    skill_dir = Path(dir_path)
    if not skill_dir.is_dir():
        raise MissingDirectory(skill_dir)

    skill_md = skill_dir / definition_file
    try:
        data = skill_md.read_bytes()
    except FileNotFoundError as e:
        raise MissingDefinitionFile(skill_dir) from e
    except OSError as e:
        raise DefinitionReadError(skill_md, str(e)) from e

    frontmatter, body = split_frontmatter(data, skill_md)
    metadata = decode_metadata(frontmatter, skill_md)
    segments = segment_body(body)
    resources = scan_resources(skill_dir)

    logger.debug(f"Parsed skill '{metadata.name}' from {skill_dir} ({len(segments)} segments)")
    return SkillPackage(path=skill_dir, metadata=metadata, segments=segments, resources=resources)


def _try_parse(skill_dir: Path, definition_file: str, skip_invalid: bool) -> Optional[SkillPackage]:
    try:
        return parse_skill_package(skill_dir, definition_file)
    except (MissingDirectory, MissingDefinitionFile):
        logger.debug(f"Skipping {skill_dir}: not a skill package")
        return None
    except (MissingFrontmatter, InvalidMetadataSyntax) as e:
        if not skip_invalid:
            raise
        logger.warning(f"Skipping invalid skill package: {e}")
        return None


def discover_skills(
    skills_root: Union[str, Path],
    max_workers: Optional[int] = None,
    skip_invalid: bool = False,
    definition_file: str = DEFINITION_FILE,
) -> List[SkillPackage]:
    """
    Parse every immediate subdirectory of ``skills_root`` as a skill package.

    Directories without a definition file are not packages and are skipped.
    Parse errors propagate unless ``skip_invalid`` is set; I/O errors always
    propagate. Results are ordered by directory name.
    """
    root = Path(skills_root)
    if not root.is_dir():
        logger.debug(f"Skills directory {root} does not exist. No skills loaded.")
        return []

    candidates = sorted((p for p in root.iterdir() if p.is_dir()), key=lambda p: p.name)
    if not candidates:
        return []

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        # map() yields in submission order, so results stay sorted by name
        results = list(
            executor.map(lambda p: _try_parse(p, definition_file, skip_invalid), candidates)
        )

    return [pkg for pkg in results if pkg is not None]


class SkillLoader:
    def __init__(
        self,
        skills_dir: Path,
        max_workers: Optional[int] = None,
        definition_file: str = DEFINITION_FILE,
    ):
        self.skills_dir = Path(skills_dir)
        self.max_workers = max_workers
        self.definition_file = definition_file
        self.skills: Dict[str, SkillPackage] = {}
        # We load skills immediately upon initialization
        self.load_skills()

    def load_skills(self):
        """Scan the skills directory and load every valid package."""
        packages = discover_skills(
            self.skills_dir,
            max_workers=self.max_workers,
            skip_invalid=True,
            definition_file=self.definition_file,
        )

        skills: Dict[str, SkillPackage] = {}
        for package in packages:
            if not package.name:
                logger.warning(f"Skipping skill at {package.path}: frontmatter has no name")
                continue
            if package.name in skills:
                logger.warning(
                    f"Duplicate skill name '{package.name}' at {package.path}; "
                    f"keeping {skills[package.name].path}"
                )
                continue
            skills[package.name] = package
            logger.debug(f"Loaded skill: {package.name}")

        self.skills = skills

    def get_skill(self, name: str) -> Optional[SkillPackage]:
        return self.skills.get(name)

    def list_skills(self) -> List[SkillPackage]:
        return list(self.skills.values())

    def search(self, query: str) -> List[SkillPackage]:
        """Case-insensitive substring match on name and description."""
        needle = query.lower()
        return [
            skill
            for skill in self.skills.values()
            if needle in skill.metadata.name.lower() or needle in skill.metadata.description.lower()
        ]
