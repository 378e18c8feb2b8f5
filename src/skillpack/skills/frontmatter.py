"""
Splits a definition document into its frontmatter block and body text.
"""

import codecs
import re
from typing import Optional, Tuple

from skillpack.logger import get_logger

from .errors import MissingFrontmatter, PathLike

logger = get_logger(__name__)

# A line holding only "---"; trailing blanks and a CR are tolerated.
DELIMITER_RE = re.compile(rb"^---[ \t]*\r?$", re.MULTILINE)


def split_frontmatter(data: bytes, path: Optional[PathLike] = None) -> Tuple[bytes, str]:
    """
    Split raw document bytes on the first two delimiter lines.

    Anything before the first delimiter is discarded.

    Args:
        data: The raw document.
        path: Source path, only used for error reporting.

    Returns:
        ``(frontmatter_bytes, body_text)`` with the body stripped of
        surrounding whitespace.

    Raises:
        MissingFrontmatter: fewer than two delimiter lines.
    """
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]

    delimiters = list(DELIMITER_RE.finditer(data))
    if len(delimiters) < 2:
        raise MissingFrontmatter(path, f"found {len(delimiters)} of 2 '---' delimiter lines")

    opening, closing = delimiters[0], delimiters[1]
    frontmatter = data[opening.end():closing.start()]
    body = data[closing.end():].decode("utf-8", errors="replace").strip()

    logger.debug(f"Split frontmatter: {len(frontmatter)} bytes metadata, {len(body)} chars body")
    return frontmatter, body
