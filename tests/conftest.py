"""
Shared fixtures: build skill package directories on disk.
"""

from pathlib import Path
from typing import Dict, Optional

import pytest

SAMPLE_SKILL_MD = '''---
name: Test Skill
description: A skill for testing purposes.
allowed-tools: ["tool1", "tool2"]
model: gpt-4
author: Gemini
version: 0.1.0
license: MIT
---
[Title]: Test Skill Title

This is the main body of the skill. It contains instructions and other markdown content.

[Section]: title: "Section 1"
- Item 1
- Item 2

This is the implementation in bash
```bash
echo "Hello from bash"
```
'''


def write_skill(
    root: Path,
    dirname: str,
    content: Optional[str] = SAMPLE_SKILL_MD,
    files: Optional[Dict[str, str]] = None,
) -> Path:
    """Create ``root/dirname`` with a SKILL.md (unless content is None) and extra files."""
    skill_dir = root / dirname
    skill_dir.mkdir(parents=True)
    if content is not None:
        (skill_dir / "SKILL.md").write_text(content, encoding="utf-8")
    for rel, text in (files or {}).items():
        target = skill_dir / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    return skill_dir


def skill_md(name: str, description: str, body: str = "Some instructions.") -> str:
    return f"---\nname: {name}\ndescription: {description}\n---\n{body}\n"


@pytest.fixture
def sample_skill(tmp_path):
    """A complete package with one file in each resource category."""
    return write_skill(
        tmp_path,
        "test-skill",
        files={
            "scripts/test.sh": "echo 'hello'",
            "references/doc.txt": "some reference",
            "assets/image.png": "image data",
        },
    )


@pytest.fixture
def skills_root(tmp_path):
    """A directory holding two valid skills and some non-skill entries."""
    root = tmp_path / "skills"
    root.mkdir()
    write_skill(root, "beta", skill_md("beta-skill", "Converts PDF files to text."))
    write_skill(root, "alpha", skill_md("alpha-skill", "Formats spreadsheets."))
    write_skill(root, "not-a-skill", content=None, files={"README.md": "hello"})
    (root / "stray.txt").write_text("not a directory")
    return root
