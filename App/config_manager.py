"""Configuration persistence manager for the StitchGrid application.

This module handles loading and saving of application settings to/from JSON files.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Tuple

from errors import PatternError
from models import AppConfig, CONFIG_FILE, PEN_SIZES
from pattern.palette import make_palette


class ConfigManager:
    """Handles loading and saving of application configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.stitchgrid_config.json)
        """
        self.config_path = config_path

    def load(self) -> AppConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            AppConfig with loaded or default values
        """
        config = AppConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                # Update config with loaded values (fallback to defaults)
                config.rows = _positive_int(data.get("rows"), config.rows)
                config.cols = _positive_int(data.get("cols"), config.cols)
                config.cell_size = _positive_int(data.get("cell_size"), config.cell_size)
                if data.get("pen_size") in PEN_SIZES:
                    config.pen_size = data["pen_size"]
                opacity = data.get("image_opacity", config.image_opacity)
                if isinstance(opacity, (int, float)) and 0.0 <= opacity <= 1.0:
                    config.image_opacity = float(opacity)
                config.data_dir = str(data.get("data_dir", config.data_dir))
                if "palette" in data:
                    try:
                        config.palette = list(make_palette(data["palette"]))
                    except PatternError as e:
                        print(f"Warning: Ignoring saved palette: {e}")
                print(f"✓ Loaded configuration from {self.config_path}")
        except (OSError, ValueError, AttributeError) as e:
            print(f"Warning: Could not load config file: {e}")

        return config

    def save(self, config: AppConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: AppConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w") as f:
                json.dump(asdict(config), f, indent=2)
            return True, None
        except (OSError, TypeError) as e:
            return False, str(e)


def _positive_int(value, default: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return default
