"""
API routes for skill browsing and management.

Handlers read the SkillManager from ``request.app.state.skill_manager``.
"""

from starlette.responses import JSONResponse

from skillpack.skills import SkillManager


def _manager(request) -> SkillManager:
    return request.app.state.skill_manager


async def get_skills(request):
    """
    Get list of available skills with metadata.
    """
    manager = _manager(request)
    skills = manager.loader.list_skills()

    response_data = [
        {
            "name": skill.metadata.name,
            "description": skill.metadata.description,
            "path": str(skill.path),
            "enabled": manager.is_skill_enabled(skill.metadata.name),
        }
        for skill in skills
    ]

    return JSONResponse(response_data)


async def get_skill(request):
    """
    Get one fully parsed skill package in interchange form.
    """
    skill_name = request.path_params["skill_name"]
    skill = _manager(request).loader.get_skill(skill_name)
    if not skill:
        return JSONResponse({"error": "Skill not found"}, status_code=404)
    return JSONResponse(skill.to_dict())


async def toggle_skill(request):
    """
    Toggle a skill's enabled state.
    """
    skill_name = request.path_params["skill_name"]
    manager = _manager(request)

    skill = manager.loader.get_skill(skill_name)
    if not skill:
        return JSONResponse({"error": "Skill not found"}, status_code=404)

    new_state = manager.toggle_skill(skill_name)
    return JSONResponse({"name": skill_name, "enabled": new_state})


async def reload_skills(request):
    """
    Force reload of all skills from disk.
    """
    _manager(request).reload()
    return await get_skills(request)
