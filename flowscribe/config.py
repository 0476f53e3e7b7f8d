from __future__ import annotations

import os
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_PALETTE = ["#4CAF50", "#2196F3", "#FF9800", "#9C27B0", "#00BCD4"]


class StyleConfig(BaseModel):
    """Colors and spacing handed to diagram-authoring agents."""

    palette: List[str] = Field(default_factory=lambda: list(DEFAULT_PALETTE))
    decision_color: str = "#FFEB3B"
    error_border_color: str = "#F44336"
    min_horizontal_spacing: int = 80
    min_vertical_spacing: int = 40

    @field_validator("palette")
    @classmethod
    def _ensure_palette(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("palette must contain at least one color")
        return v


class OutputConfig(BaseModel):
    """Where and what the CLI renders by default."""

    default_formats: List[str] = Field(default_factory=lambda: ["prompt"])
    directory: Optional[str] = None


class FlowscribeConfig(BaseModel):
    """Top-level configuration model."""

    styles: StyleConfig = StyleConfig()
    output: OutputConfig = OutputConfig()
    log_level: str = "WARNING"


def load_config(path: Optional[str] = None) -> FlowscribeConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to FLOWSCRIBE_CONFIG env
            variable or 'flowscribe.yaml' in the current directory.
    """

    config_path = path or os.getenv("FLOWSCRIBE_CONFIG", "flowscribe.yaml")
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        config = FlowscribeConfig(**data)
    else:
        config = FlowscribeConfig()

    env_output_dir = os.getenv("FLOWSCRIBE_OUTPUT_DIR")
    if env_output_dir:
        config.output.directory = env_output_dir
    env_log_level = os.getenv("FLOWSCRIBE_LOG_LEVEL")
    if env_log_level:
        config.log_level = env_log_level.upper()
    return config
