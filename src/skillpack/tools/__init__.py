from .skill_tool import SkillTool

__all__ = ['SkillTool']
