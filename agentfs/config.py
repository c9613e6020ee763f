from __future__ import annotations
from pathlib import Path
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List, Optional
import yaml

DEFAULT_CONFIG_FILE = ".agentfs.yml"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"  # Allow extra fields from config files
    )

    tools_allowed: List[str] = Field(default_factory=lambda: [
        "read_file", "write_file"
    ])
    # Base directory for relative write paths when a call does not carry one
    working_directory: Optional[Path] = Field(default=None)

    # Tool-call logging
    log_tool_calls: bool = Field(
        False, description="Save every dispatched tool call as a JSON file under log_dir"
    )
    log_dir: Path = Field(
        Path("tool_logs"), description="Directory that receives tool-call logs"
    )

def _load_yaml(path: Path | None):
    if path and path.exists():
        with open(path, "r") as fh:
            return yaml.safe_load(fh) or {}
    return {}

@lru_cache
def get_settings(config_path: Path | None = None) -> Settings:
    file_vals = _load_yaml(config_path or Path(DEFAULT_CONFIG_FILE))
    return Settings(**file_vals)
