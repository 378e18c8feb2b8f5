"""
Starlette-based web server exposing parsed skill packages.

Endpoints:
- GET  /skills: List skills with their enabled state
- GET  /skills/{skill_name}: One skill in interchange form
- POST /skills/{skill_name}/toggle: Enable or disable a skill
- POST /skills/reload: Re-scan the skills directory
"""

from typing import Optional

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import Route

from skillpack.config import CONFIG
from skillpack.logger import setup_logging, get_logger
from skillpack.routes.skill_routes import (
    get_skills,
    get_skill,
    toggle_skill,
    reload_skills,
)
from skillpack.skills import SkillManager

logger = get_logger(__name__)


def create_app(manager: Optional[SkillManager] = None, debug: bool = False) -> Starlette:
    """Build the application around one shared SkillManager."""
    app = Starlette(
        debug=debug,
        routes=[
            Route("/skills", get_skills, methods=["GET"]),
            # before /skills/{skill_name} so "reload" is not taken as a name
            Route("/skills/reload", reload_skills, methods=["POST"]),
            Route("/skills/{skill_name}", get_skill, methods=["GET"]),
            Route("/skills/{skill_name}/toggle", toggle_skill, methods=["POST"]),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["*"],
                allow_headers=["*"],
            )
        ],
    )
    app.state.skill_manager = manager or SkillManager()
    return app


if __name__ == "__main__":
    import uvicorn

    setup_logging(level=CONFIG.log_level, log_file=CONFIG.log_file)
    logger.info("Starting skillpack server on http://0.0.0.0:8000")
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
