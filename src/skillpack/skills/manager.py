import json
from pathlib import Path
from typing import List, Optional
from xml.sax.saxutils import escape

from skillpack.config import CONFIG
from skillpack.logger import get_logger

from .loader import SkillLoader
from .models import SkillPackage
from .render import render_body, render_resources

logger = get_logger(__name__)


class SkillManager:
    _instance = None

    def __init__(
        self,
        skills_dir: Optional[Path] = None,
        state_file: Optional[Path] = None,
        max_workers: Optional[int] = None,
    ):
        self.skills_dir = Path(skills_dir) if skills_dir else CONFIG.skills_dir
        self.persistence_file = Path(state_file) if state_file else CONFIG.state_file
        self.loader = SkillLoader(
            self.skills_dir,
            max_workers=max_workers if max_workers is not None else CONFIG.discovery_workers,
            definition_file=CONFIG.definition_file,
        )

        # Skills start disabled until explicitly enabled
        self.enabled_skills = set()
        self._load_enabled_state()

        logger.info(f"SkillManager initialized with directory: {self.skills_dir}")

    @classmethod
    def get_instance(cls):
        if cls._instance is None:
            cls._instance = SkillManager()
        return cls._instance

    def _load_enabled_state(self):
        """Load enabled skills from the persistence file."""
        if not self.persistence_file.exists():
            return
        try:
            with open(self.persistence_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.enabled_skills = set(data.get("enabled", []))
        except (OSError, ValueError, AttributeError) as e:
            logger.error(f"Failed to load skills state: {e}")

    def _save_enabled_state(self):
        """Save enabled skills to the persistence file."""
        try:
            self.persistence_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.persistence_file, "w", encoding="utf-8") as f:
                json.dump({"enabled": sorted(self.enabled_skills)}, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to save skills state: {e}")

    def is_skill_enabled(self, name: str) -> bool:
        return name in self.enabled_skills

    def enable_skill(self, name: str):
        self.enabled_skills.add(name)
        self._save_enabled_state()

    def disable_skill(self, name: str):
        self.enabled_skills.discard(name)
        self._save_enabled_state()

    def toggle_skill(self, name: str) -> bool:
        """Toggle skill state and return new state (True=Enabled)."""
        if name in self.enabled_skills:
            self.disable_skill(name)
            return False
        self.enable_skill(name)
        return True

    def reload(self):
        """Reload all skills from disk and forget enabled skills that vanished."""
        self.loader.load_skills()
        available = {s.metadata.name for s in self.loader.list_skills()}
        self.enabled_skills = self.enabled_skills.intersection(available)
        self._save_enabled_state()

    def enabled_packages(self) -> List[SkillPackage]:
        return [s for s in self.loader.list_skills() if self.is_skill_enabled(s.metadata.name)]

    def get_skill_descriptions(self) -> str:
        """
        Skill descriptions for a tool description or system prompt.
        """
        skills = self.enabled_packages()
        if not skills:
            return "(no skills available)"

        return "\n".join(
            f"- {skill.metadata.name}: {skill.metadata.description}" for skill in skills
        )

    def get_skills_xml(self) -> str:
        """
        Enabled skills as an ``<available_skills>`` block for context injection.
        """
        xml_lines = ["<available_skills>"]
        for skill in self.enabled_packages():
            xml_lines.append("  <skill>")
            xml_lines.append(f"    <name>{escape(skill.metadata.name)}</name>")
            xml_lines.append(f"    <description>{escape(skill.metadata.description)}</description>")
            xml_lines.append(f"    <location>{escape(str(skill.path))}</location>")
            xml_lines.append("  </skill>")
        xml_lines.append("</available_skills>")
        return "\n".join(xml_lines)

    def get_skill_content(self, name: str) -> Optional[str]:
        """
        Full skill content for injection: rendered body plus resource hints.
        """
        skill = self.loader.get_skill(name)
        if not skill:
            return None

        content = f"# Skill: {skill.metadata.name}\n\n{render_body(skill.segments)}"

        if skill.metadata.allowed_tools:
            content += f"\n\n**Allowed tools:** {', '.join(skill.metadata.allowed_tools)}"

        resources = render_resources(skill.resources)
        if resources:
            content += f"\n\n**Available resources in {skill.path}:**\n"
            content += "\n".join(f"- {r}" for r in resources)

        return content


def get_skill_manager():
    return SkillManager.get_instance()
