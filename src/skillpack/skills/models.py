import json
from pathlib import Path
from typing import Annotated, Any, Dict, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class SkillMetadata(BaseModel):
    """Metadata for a skill, parsed from frontmatter."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    description: str = ""
    allowed_tools: Tuple[str, ...] = Field(default=(), alias="allowed-tools")
    model: str = ""
    author: str = ""
    version: str = ""
    license: str = ""


class TitleSegment(BaseModel):
    """A ``[Title]: ...`` marker line."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Title"] = "Title"
    text: str


class SectionSegment(BaseModel):
    """A ``[Section]: title: "..."`` marker and the text that follows it."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Section"] = "Section"
    title: str
    content: str = ""


class MarkdownSegment(BaseModel):
    """Plain text between markers."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Markdown"] = "Markdown"
    content: str


class ImplementationSegment(BaseModel):
    """A fenced code block introduced by ``This is the implementation in <language>``."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Implementation"] = "Implementation"
    language: str
    code: str


BodySegment = Annotated[
    Union[TitleSegment, SectionSegment, MarkdownSegment, ImplementationSegment],
    Field(discriminator="type"),
]


class SkillResources(BaseModel):
    """Resource files of a package, as paths relative to the package root."""

    model_config = ConfigDict(frozen=True)

    scripts: Tuple[str, ...] = ()
    references: Tuple[str, ...] = ()
    assets: Tuple[str, ...] = ()

    def all_files(self) -> List[str]:
        return [*self.scripts, *self.references, *self.assets]


class SkillPackage(BaseModel):
    """
    A fully parsed skill package.

    Attributes:
        path: The package directory.
        metadata: Decoded frontmatter.
        segments: The body as an ordered tuple of typed segments.
        resources: Files found under the resource subdirectories.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: Path
    metadata: SkillMetadata = Field(alias="meta")
    segments: Tuple[BodySegment, ...] = Field(default=(), alias="body")
    resources: SkillResources = Field(default_factory=SkillResources)

    @property
    def name(self) -> str:
        return self.metadata.name

    def to_dict(self) -> Dict[str, Any]:
        """Return the interchange form (``path``, ``meta``, ``body``, ``resources``)."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SkillPackage":
        return cls.model_validate(data)
