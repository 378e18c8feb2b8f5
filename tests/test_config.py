"""
Tests for configuration loading.
"""

import pytest

from skillpack.config import PROJECT_DIR, ConfigModel


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("SKILLS_DIR", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(var, raising=False)


class TestLoadFromFiles:
    def test_defaults_without_files(self, tmp_path):
        cfg = ConfigModel.load_from_files(tmp_path)
        assert cfg.definition_file == "SKILL.md"
        assert cfg.skills_dir == PROJECT_DIR / "skills"
        assert cfg.discovery_workers is None

    def test_default_overrides_example_per_key(self, tmp_path):
        (tmp_path / "default.example.yaml").write_text("log_level: DEBUG\ndiscovery_workers: 2\n")
        (tmp_path / "default.yaml").write_text("DISCOVERY-WORKERS: 4\n")
        cfg = ConfigModel.load_from_files(tmp_path)
        assert cfg.log_level == "DEBUG"
        assert cfg.discovery_workers == 4

    def test_relative_paths_anchor_to_project(self, tmp_path):
        (tmp_path / "default.yaml").write_text("skills_dir: my-skills\n")
        assert ConfigModel.load_from_files(tmp_path).skills_dir == PROJECT_DIR / "my-skills"

    def test_env_overrides_files(self, tmp_path, monkeypatch):
        (tmp_path / "default.yaml").write_text(f"skills_dir: {tmp_path / 'from-file'}\n")
        monkeypatch.setenv("SKILLS_DIR", str(tmp_path / "from-env"))
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        cfg = ConfigModel.load_from_files(tmp_path)
        assert cfg.skills_dir == tmp_path / "from-env"
        assert cfg.log_level == "WARNING"

    def test_malformed_yaml_is_skipped(self, tmp_path):
        (tmp_path / "default.yaml").write_text("log_level: [unterminated\n")
        assert ConfigModel.load_from_files(tmp_path).log_level == "INFO"
