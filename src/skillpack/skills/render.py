"""
Renders parsed segments back into markdown for display and model context.
"""

from typing import Iterable, List

from .models import (
    BodySegment,
    ImplementationSegment,
    MarkdownSegment,
    SectionSegment,
    SkillResources,
    TitleSegment,
)


def render_segment(segment: BodySegment) -> str:
    match segment:
        case TitleSegment(text=text):
            return f"# {text}"
        case SectionSegment(title=title, content=content):
            return f"## {title}\n\n{content}" if content else f"## {title}"
        case MarkdownSegment(content=content):
            return content
        case ImplementationSegment(language=language, code=code):
            return f"Implementation ({language}):\n```{language}\n{code}```"
        case _:
            raise TypeError(f"Unknown body segment: {type(segment).__name__}")


def render_body(segments: Iterable[BodySegment]) -> str:
    """Join rendered segments with blank lines, in document order."""
    return "\n\n".join(render_segment(segment) for segment in segments)


def render_resources(resources: SkillResources) -> List[str]:
    """One ``Label: a, b`` line per non-empty resource category."""
    lines = []
    for label, files in (
        ("Scripts", resources.scripts),
        ("References", resources.references),
        ("Assets", resources.assets),
    ):
        if files:
            lines.append(f"{label}: {', '.join(files)}")
    return lines
