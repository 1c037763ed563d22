"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:    str = "folio"
    site_root:   str = Field(default=".",                 description="Directory all output paths are relative to")
    entries_dir: str = Field(default="content/entries",   description="Directory of markdown entries")
    index_path:  str = Field(default="data/content.json", description="JSON index path, relative to site_root")
    content_dir: str = Field(default="content",           description="Directory for per-entry HTML fragments")
    cms_config:  str = Field(default="admin/config.yml",  description="CMS config holding auto option blocks")
    legacy_fence_markup: bool = Field(
        default=False, description="Reproduce the stray quote of previously published bare code fences",
    )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then FOLIO_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"FOLIO_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
