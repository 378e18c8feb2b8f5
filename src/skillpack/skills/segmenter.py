"""
Body segmenter: scans the text after the frontmatter into typed segments.

The scan is a single left-to-right pass over lines. ``SegmenterState`` holds
everything the scan knows; ``step`` advances it by one line and ``finish``
flushes whatever is left at end of input. ``segment_body`` ties the three
together.

Marker lines recognised outside a code fence::

    [Title]: <text>
    [Section]: title: "<title>"
    This is the implementation in <language>

An implementation marker takes the fenced block that follows it (the line
right after the marker is taken as the opening fence) and emits its lines,
without the fences, as an ``Implementation`` segment.

Fence tracking is a plain toggle on any line starting with three backticks.
A stray triple backtick in prose therefore flips the fence state for the
rest of the document.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .models import (
    BodySegment,
    ImplementationSegment,
    MarkdownSegment,
    SectionSegment,
    TitleSegment,
)

FENCE = "```"

TITLE_RE = re.compile(r"^\[Title\]\s*:\s*(.*)$")
SECTION_RE = re.compile(r'^\[Section\]\s*:\s*title:\s*"(.*)"')
IMPLEMENTATION_RE = re.compile(r"^This is the implementation in (.*)$")


class ScanMode(Enum):
    TEXT = "text"
    AWAIT_FENCE = "await_fence"
    IMPLEMENTATION = "implementation"


@dataclass
class SegmenterState:
    open_fence: bool = False
    buffer: List[str] = field(default_factory=list)
    segments: List[BodySegment] = field(default_factory=list)
    mode: ScanMode = ScanMode.TEXT
    language: str = ""
    code_lines: List[str] = field(default_factory=list)


def _pending_section(state: SegmenterState) -> Optional[SectionSegment]:
    """The last segment, if it is a Section still waiting for content."""
    if state.segments:
        last = state.segments[-1]
        if isinstance(last, SectionSegment) and not last.content:
            return last
    return None


def _flush(state: SegmenterState) -> None:
    text = "".join(state.buffer).strip()
    state.buffer.clear()
    if not text:
        return

    section = _pending_section(state)
    if section is not None:
        state.segments[-1] = section.model_copy(update={"content": text})
    else:
        state.segments.append(MarkdownSegment(content=text))


def _emit_implementation(state: SegmenterState) -> None:
    code = "".join(f"{line}\n" for line in state.code_lines)
    state.segments.append(ImplementationSegment(language=state.language, code=code))
    state.mode = ScanMode.TEXT
    state.language = ""
    state.code_lines.clear()


def step(state: SegmenterState, line: str) -> SegmenterState:
    """Advance the scan by one line (without its line terminator)."""
    if state.mode is ScanMode.AWAIT_FENCE:
        # opening fence of the implementation block
        state.mode = ScanMode.IMPLEMENTATION
        return state

    if state.mode is ScanMode.IMPLEMENTATION:
        if line.startswith(FENCE):
            _emit_implementation(state)
        else:
            state.code_lines.append(line)
        return state

    if line.startswith(FENCE):
        state.open_fence = not state.open_fence
        state.buffer.append(f"{line}\n")
        return state

    if state.open_fence:
        state.buffer.append(f"{line}\n")
        return state

    match = TITLE_RE.match(line)
    if match:
        _flush(state)
        state.segments.append(TitleSegment(text=match.group(1).strip()))
        return state

    match = SECTION_RE.match(line)
    if match:
        _flush(state)
        state.segments.append(SectionSegment(title=match.group(1)))
        return state

    match = IMPLEMENTATION_RE.match(line)
    if match:
        _flush(state)
        state.mode = ScanMode.AWAIT_FENCE
        state.language = match.group(1).strip()
        return state

    state.buffer.append(f"{line}\n")
    return state


def finish(state: SegmenterState) -> List[BodySegment]:
    """Flush the end of input and return the finished segment list."""
    if state.mode is not ScanMode.TEXT:
        # body ended inside an implementation block
        _emit_implementation(state)
    _flush(state)
    return state.segments


def split_lines(text: str) -> List[str]:
    if not text:
        return []
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def segment_body(body: str) -> List[BodySegment]:
    """
    Scan body text into an ordered list of segments.

    Pure and deterministic: the same text always yields the same segments,
    and an empty body yields an empty list.
    """
    state = SegmenterState()
    for line in split_lines(body):
        state = step(state, line)
    return finish(state)
