"""
Configuration management for inkboard.

Loads YAML configuration with defaults for recognition, eraser, stroke style
and tracing. The recognition thresholds are hand-tuned and meant to be
adjusted per deployment.
"""

import os
from dataclasses import asdict, dataclass, field, fields

import yaml


@dataclass
class RecognitionConfig:
    """Thresholds for freehand shape recognition."""
    min_points: int = 10
    min_session_points: int = 5
    closed_ratio: float = 0.25  # end gap / path length below which a stroke is closed
    line_straightness: float = 1.2  # path length / chord length below which a stroke is a line
    epsilon_factor: float = 0.05  # simplification tolerance as a fraction of the bbox diagonal
    circularity_cv: float = 0.15
    ellipse_segments: int = 45
    debounce_seconds: float = 0.6


@dataclass
class EraserConfig:
    """Configuration for the stroke eraser."""
    threshold: float = 5.0  # world units
    screen_threshold: float = 10.0  # screen pixels, divided by view scale
    min_scale: float = 0.1  # view zoom limits
    max_scale: float = 10.0


@dataclass
class StyleConfig:
    """Default stroke styling per tool."""
    default_width: float = 3.0
    pen_opacity: float = 1.0
    highlighter_opacity: float = 0.5
    default_color: str = "#000000"


@dataclass
class TracingConfig:
    """Configuration for runtime tracing."""
    enabled: bool = False
    level: str = "INFO"
    file_path: str = None
    json_output: bool = False


@dataclass
class BoardConfig:
    """Complete inkboard configuration."""
    recognition: RecognitionConfig = field(default_factory=RecognitionConfig)
    eraser: EraserConfig = field(default_factory=EraserConfig)
    style: StyleConfig = field(default_factory=StyleConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)


def load_config(config_path=None):
    """
    Load configuration from a YAML file.

    Missing files, sections and keys fall back to defaults. Unknown keys are
    ignored.
    """
    config = BoardConfig()

    if config_path and os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

        config = _merge_config(config, yaml_data)

    return config


def _merge_config(config, yaml_data):
    """Merge YAML sections into the matching config dataclasses."""
    for section in fields(config):
        values = yaml_data.get(section.name)
        if not isinstance(values, dict):
            continue

        target = getattr(config, section.name)
        for key, value in values.items():
            if hasattr(target, key):
                setattr(target, key, value)

    return config


def save_default_config(path):
    """Save default configuration to a YAML file for reference."""
    yaml_data = asdict(BoardConfig())

    # Not useful as a default in a shared file
    yaml_data["tracing"].pop("file_path")

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False)
