import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from .logger import get_logger

# Project root (two levels above this file: src/skillpack -> src -> project root)
PROJECT_DIR = Path(__file__).resolve().parents[2]

logger = get_logger(__name__)


def _normalize_keys(d: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize incoming keys to lowercase snake style the model expects.

    Accepts SCREAMING_SNAKE_CASE (SKILLS_DIR), kebab-case or snake_case.
    """
    out: Dict[str, Any] = {}
    for k, v in d.items():
        if not isinstance(k, str):
            continue
        nk = k.strip().lower().replace("-", "_").replace(" ", "_")
        out[nk] = v
    return out


class ConfigModel(BaseModel):
    skills_dir: Path = PROJECT_DIR / "skills"
    definition_file: str = "SKILL.md"

    # None lets the executor pick its own worker count
    discovery_workers: Optional[int] = None

    state_file: Path = PROJECT_DIR / "config" / "skills.json"

    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("skills_dir", "state_file")
    @classmethod
    def _anchor_to_project(cls, v: Path) -> Path:
        # relative paths in YAML resolve against the project root, not the cwd
        return v if v.is_absolute() else PROJECT_DIR / v

    @classmethod
    def load_from_files(cls, cfg_dir: Optional[Path] = None) -> "ConfigModel":
        """Build the configuration from YAML files in ``cfg_dir`` plus environment overrides.

        ``default.yaml`` overrides ``default.example.yaml`` per key, and the
        ``SKILLS_DIR``, ``LOG_LEVEL`` and ``LOG_FILE`` environment variables
        override both.
        """
        cfg_dir = cfg_dir or PROJECT_DIR / "config"

        example_path = cfg_dir / "default.example.yaml"
        default_path = cfg_dir / "default.yaml"

        data: Dict[str, Any] = {}
        loaded_files: List[Path] = []

        for p in (example_path, default_path):
            if not p.exists():
                continue
            try:
                with p.open("r", encoding="utf-8") as fh:
                    raw = yaml.safe_load(fh) or {}
            except (OSError, yaml.YAMLError) as exc:
                logger.warning(f"Failed to parse config file {p}: {exc}")
                continue
            if isinstance(raw, dict):
                data.update(_normalize_keys(raw))
                loaded_files.append(p)

        env_overrides = {
            "skills_dir": os.getenv("SKILLS_DIR"),
            "log_level": os.getenv("LOG_LEVEL"),
            "log_file": os.getenv("LOG_FILE"),
        }
        data.update({k: v for k, v in env_overrides.items() if v})

        try:
            cfg = cls.model_validate(data)
        except ValidationError as ve:
            logger.error(f"Config validation error: {ve}")
            raise

        if loaded_files:
            logger.debug(f"Loaded configuration overrides from {loaded_files[-1]}")

        return cfg


load_dotenv()

# Load configuration at import time and expose typed CONFIG instance
CONFIG = ConfigModel.load_from_files()
