from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from awardodds.model.types import ExperienceConfig

CONFIG_ENV_VAR = "AWARDODDS_CONFIG"


class LoggingSettings(BaseModel):
    json_logs: bool = False
    level: str = "INFO"
    log_dir: Optional[str] = None
    retention_bytes: int = Field(default=5 * 1024 * 1024, ge=1024)

    @model_validator(mode="before")
    @classmethod
    def _alias_json(cls, data: Any) -> Any:
        if isinstance(data, dict) and "json" in data and "json_logs" not in data:
            data = dict(data)
            data["json_logs"] = data.pop("json")
        return data


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="AWARDODDS_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    scoring_kernel: Literal["python", "vector"] = "python"
    history_path: Optional[str] = None
    experience_path: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _apply_yaml_overrides(cls, data: Any) -> Any:
        overrides = _load_yaml_overrides()
        if not overrides:
            return data
        if not isinstance(data, dict):
            return overrides
        return _deep_merge(overrides, data)

    def load_experience(self) -> ExperienceConfig:
        """Track-record tables from experience_path, or empty tables."""
        if not self.experience_path:
            return ExperienceConfig()
        return ExperienceConfig.from_yaml(self.experience_path)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override into base key by key; nested dicts merge recursively."""
    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _load_yaml_overrides() -> Dict[str, Any]:
    candidates: list[Path] = []
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        candidates.append(Path(explicit).resolve())
    candidates.append(_repo_root() / "config" / "awardodds.yaml")

    for path in candidates:
        if not path.exists():
            continue
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        section = data.get("awardodds", data) if isinstance(data, dict) else None
        if isinstance(section, dict):
            return section
    return {}


def load_settings(**overrides: Any) -> Settings:
    """Build settings from defaults, YAML, .env, environment and overrides."""
    return Settings(**overrides)


__all__ = ["LoggingSettings", "Settings", "load_settings", "CONFIG_ENV_VAR"]
