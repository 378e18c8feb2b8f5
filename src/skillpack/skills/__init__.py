"""
Skill packages: parsing, discovery and model-facing rendering.
"""

from .errors import (
    DefinitionReadError,
    InvalidMetadataSyntax,
    MissingDefinitionFile,
    MissingDirectory,
    MissingFrontmatter,
    ResourceScanIOError,
    SkillPackageError,
)
from .frontmatter import split_frontmatter
from .loader import DEFINITION_FILE, SkillLoader, discover_skills, parse_skill_package
from .manager import SkillManager, get_skill_manager
from .metadata import decode_metadata
from .models import (
    BodySegment,
    ImplementationSegment,
    MarkdownSegment,
    SectionSegment,
    SkillMetadata,
    SkillPackage,
    SkillResources,
    TitleSegment,
)
from .resources import find_resource_files, scan_resources
from .segmenter import segment_body

__all__ = [
    'DEFINITION_FILE',
    'BodySegment',
    'DefinitionReadError',
    'ImplementationSegment',
    'InvalidMetadataSyntax',
    'MarkdownSegment',
    'MissingDefinitionFile',
    'MissingDirectory',
    'MissingFrontmatter',
    'ResourceScanIOError',
    'SectionSegment',
    'SkillLoader',
    'SkillManager',
    'SkillMetadata',
    'SkillPackage',
    'SkillPackageError',
    'SkillResources',
    'TitleSegment',
    'decode_metadata',
    'discover_skills',
    'find_resource_files',
    'get_skill_manager',
    'parse_skill_package',
    'scan_resources',
    'segment_body',
    'split_frontmatter',
]
