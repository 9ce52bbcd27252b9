"""Configuration helpers for abbs-l10n-sync."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class AppConfig(BaseModel):
    """Application level configuration."""

    marker_dir: str = "groups"
    catalog_path: Path = Field(default=Path("l10n/en.json"))
    exclude_fragments: List[str] = Field(default_factory=lambda: [".git", "assets", "groups"])
    generator_command: List[str] = Field(default_factory=lambda: ["acbs-build"])
    generator_flag: str = "--generate-package-metadata"
    descriptor_suffix: str = ".json"
    catalog_indent: Optional[int] = Field(default=None, ge=0)

    @field_validator("generator_command")
    @classmethod
    def validate_command(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("generator_command must name at least one program")
        return value

    @field_validator("descriptor_suffix")
    @classmethod
    def validate_suffix(cls, value: str) -> str:
        value = value.strip()
        return value if value.startswith(".") else f".{value}"


def load_config(path: Optional[Path]) -> AppConfig:
    """Load configuration from a YAML file, falling back to defaults."""

    data: Dict[str, Any] = {}
    if path is not None and path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return AppConfig(**data)
