"""
smolagents tool that hands an enabled skill package to the agent as markdown.
"""
from typing import Optional

from smolagents.tools import Tool

from skillpack.skills import SkillManager, get_skill_manager

USAGE = """Returns the skill's instructions rendered from its SKILL.md: the title, each
section, prose, and the fenced implementation blocks with their language, followed
by the allowed tools and the script/reference/asset files shipped with the package
(paths are relative to the package location)."""


class SkillTool(Tool):
    name = "load_skill"
    description = "Read the instructions of an enabled skill package."

    inputs = {
        "skill_name": {
            "type": "string",
            "description": "Exact <name> of one of the packages listed under <available_skills>.",
        }
    }
    output_type = "string"

    def __init__(self, skill_manager: Optional[SkillManager] = None):
        super().__init__()
        self.skill_manager = skill_manager or get_skill_manager()
        # the listing is fixed when the tool is built; toggles need a new tool
        self.description = "\n\n".join(
            [
                "Read the instructions of an enabled skill package.",
                USAGE,
                self.skill_manager.get_skills_xml(),
            ]
        )

    def forward(self, skill_name: str) -> str:
        content = None
        if self.skill_manager.is_skill_enabled(skill_name):
            content = self.skill_manager.get_skill_content(skill_name)
        if content:
            return content
        return (
            f"Error: Skill '{skill_name}' not found. "
            f"Enabled skills:\n{self.skill_manager.get_skill_descriptions()}"
        )
