from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent
ARGS_DIR = PROJECT_ROOT / "args"
CONFIG_PATH = ARGS_DIR / "domotive.yaml"
DEFAULT_DB_PATH = PROJECT_ROOT / "data" / "domotive.db"


# =============================================================================
# Sections of args/domotive.yaml
# =============================================================================

class StorageConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    db_path: str = Field(default=str(DEFAULT_DB_PATH))


class ScoreWeightsConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    mood: float = Field(default=0.40, ge=0.0, le=1.0)
    time_of_day: float = Field(default=0.20, ge=0.0, le=1.0)
    history: float = Field(default=0.25, ge=0.0, le=1.0)
    energy: float = Field(default=0.15, ge=0.0, le=1.0)


def _default_time_fit() -> dict[str, dict[str, float]]:
    return {
        "exercise": {"morning": 1.0},
        "cleaning": {"morning": 1.0},
        "creative": {"morning": 0.9, "afternoon": 0.9},
        "admin": {"afternoon": 1.0},
        "selfcare": {"evening": 1.0},
        "social": {"evening": 0.9},
    }


class SuggestionsConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    max_suggestions: int = Field(default=5, ge=1)
    weights: ScoreWeightsConfig = Field(default_factory=ScoreWeightsConfig)
    # category -> time of day -> fit score
    time_of_day_fit: dict[str, dict[str, float]] = Field(default_factory=_default_time_fit)
    time_of_day_default: float = Field(default=0.7, ge=0.0, le=1.0)
    neutral_mood_score: float = Field(default=0.5, ge=0.0, le=1.0)
    neutral_history_score: float = Field(default=0.5, ge=0.0, le=1.0)
    history_mood_band: int = Field(default=1, ge=0)
    record_suggestions: bool = Field(default=True)


class TasksConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    due_offset_days: int = Field(default=1, ge=0)


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    level: str = Field(default="WARNING")
    json_output: bool = Field(default=False)


class DoMotiveConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    storage: StorageConfig = Field(default_factory=StorageConfig)
    suggestions: SuggestionsConfig = Field(default_factory=SuggestionsConfig)
    tasks: TasksConfig = Field(default_factory=TasksConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_and_validate(path: Optional[Path] = None) -> DoMotiveConfig:
    yaml_path = Path(path) if path else CONFIG_PATH

    try:
        if yaml_path.exists():
            with open(yaml_path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            raw = {}

        config = DoMotiveConfig.model_validate(raw)
    except Exception as e:
        logger.warning(f"Config validation failed for {yaml_path}: {e}, using defaults")
        config = DoMotiveConfig()

    return apply_env_overrides(config)


def apply_env_overrides(config: DoMotiveConfig) -> DoMotiveConfig:
    """Environment beats the YAML file."""
    env_db = os.environ.get("DOMOTIVE_DB_PATH")
    if env_db:
        config.storage.db_path = env_db

    env_level = os.environ.get("DOMOTIVE_LOG_LEVEL")
    if env_level:
        config.logging.level = env_level

    env_format = os.environ.get("DOMOTIVE_LOG_FORMAT")
    if env_format:
        config.logging.json_output = env_format.strip().lower() == "json"

    return config
