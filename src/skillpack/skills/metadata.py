"""
Decodes a YAML frontmatter block into SkillMetadata.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from skillpack.logger import get_logger

from .errors import InvalidMetadataSyntax, PathLike
from .models import SkillMetadata

logger = get_logger(__name__)

STRING_FIELDS = ("name", "description", "model", "author", "version", "license")


def _as_text(value: Any) -> Any:
    """Render YAML scalars typed as numbers or dates (``version: 1.0``) as strings."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float, date, datetime)):
        return str(value)
    return value


def _as_tool_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        # "Read, Grep, Bash" is a common shorthand for a sequence
        return [tool.strip() for tool in value.split(",") if tool.strip()]
    if isinstance(value, list):
        return [_as_text(tool) for tool in value]
    return value


def decode_metadata(frontmatter: bytes, path: Optional[PathLike] = None) -> SkillMetadata:
    """
    Decode frontmatter bytes into a SkillMetadata record.

    Unset optional fields come back as empty strings. Unknown keys are ignored.

    Raises:
        InvalidMetadataSyntax: the YAML is malformed, is not a mapping, or a
            field has the wrong shape.
    """
    try:
        raw = yaml.safe_load(frontmatter)
    except yaml.YAMLError as e:
        raise InvalidMetadataSyntax(path, str(e)) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise InvalidMetadataSyntax(path, f"expected a mapping, got {type(raw).__name__}")

    fields: Dict[str, Any] = {key: _as_text(raw.get(key)) for key in STRING_FIELDS}
    fields["allowed-tools"] = _as_tool_list(raw.get("allowed-tools"))

    try:
        metadata = SkillMetadata.model_validate(fields)
    except ValidationError as e:
        raise InvalidMetadataSyntax(path, _summarize(e)) from e

    missing: List[str] = [key for key in ("name", "description") if not getattr(metadata, key)]
    if missing:
        logger.warning(f"Frontmatter in {path or '<document>'} has no {', '.join(missing)}")

    return metadata


def _summarize(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in error.errors()
    )
