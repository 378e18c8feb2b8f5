"""
Tests for the skill HTTP routes.
"""

import pytest
from starlette.testclient import TestClient

from conftest import skill_md, write_skill
from skillpack.server import create_app
from skillpack.skills import SkillManager


@pytest.fixture
def client(skills_root, tmp_path):
    manager = SkillManager(skills_dir=skills_root, state_file=tmp_path / "skills.json")
    return TestClient(create_app(manager))


class TestSkillRoutes:
    def test_list_skills(self, client, skills_root):
        response = client.get("/skills")
        assert response.status_code == 200
        assert response.json() == [
            {
                "name": "alpha-skill",
                "description": "Formats spreadsheets.",
                "path": str(skills_root / "alpha"),
                "enabled": False,
            },
            {
                "name": "beta-skill",
                "description": "Converts PDF files to text.",
                "path": str(skills_root / "beta"),
                "enabled": False,
            },
        ]

    def test_get_skill(self, client):
        response = client.get("/skills/beta-skill")
        assert response.status_code == 200
        data = response.json()
        assert data["meta"]["name"] == "beta-skill"
        assert data["body"] == [{"type": "Markdown", "content": "Some instructions."}]

    def test_get_unknown_skill(self, client):
        assert client.get("/skills/missing").status_code == 404

    def test_toggle(self, client):
        response = client.post("/skills/alpha-skill/toggle")
        assert response.json() == {"name": "alpha-skill", "enabled": True}
        enabled = {s["name"]: s["enabled"] for s in client.get("/skills").json()}
        assert enabled == {"alpha-skill": True, "beta-skill": False}

    def test_toggle_unknown_skill(self, client):
        assert client.post("/skills/missing/toggle").status_code == 404

    def test_reload(self, client, skills_root):
        write_skill(skills_root, "gamma", skill_md("gamma-skill", "New one."))
        response = client.post("/skills/reload")
        assert response.status_code == 200
        assert [s["name"] for s in response.json()] == ["alpha-skill", "beta-skill", "gamma-skill"]
