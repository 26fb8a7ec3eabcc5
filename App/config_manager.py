"""Configuration persistence manager for the camera stylizer.

This module handles loading and saving of stylizer settings to/from JSON files.
"""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Tuple

from models import CONFIG_FILE, StylizeMode, StylizerConfig

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid size or index
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigManager:
    """Handles loading and saving of stylizer configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.camera_stylizer_config.json)
        """
        self.config_path = config_path

    def load(self) -> StylizerConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            StylizerConfig with loaded or default values
        """
        config = StylizerConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                    # Update config with loaded values (fallback to defaults)
                    config.block_size = data.get("block_size", config.block_size)
                    config.use_palette = data.get("use_palette", config.use_palette)
                    config.camera_index = data.get("camera_index", config.camera_index)
                    config.mirror = data.get("mirror", config.mirror)
                    config.max_grid_width = data.get("max_grid_width", config.max_grid_width)
                    config.frame_interval_ms = data.get(
                        "frame_interval_ms", config.frame_interval_ms
                    )
                    if "mode" in data:
                        config.mode = StylizeMode(data["mode"])
                    if "palette" in data:
                        config.palette = [tuple(int(c) for c in color) for color in data["palette"]]
                logger.info("Loaded configuration from %s", self.config_path)
        except Exception as e:
            logger.warning("Could not load config file: %s", e)
            config = StylizerConfig()

        return self.validate(config)

    def validate(self, config: StylizerConfig) -> StylizerConfig:
        """Replace out-of-range values with defaults."""
        defaults = StylizerConfig()

        if not _is_int(config.block_size) or config.block_size < 1:
            logger.warning("Invalid block size %r, using %d", config.block_size, defaults.block_size)
            config.block_size = defaults.block_size

        if not config.palette or any(len(color) != 3 for color in config.palette):
            logger.warning("Invalid palette, using the pop-art palette")
            config.palette = defaults.palette

        for name, minimum in (("camera_index", 0), ("max_grid_width", 0), ("frame_interval_ms", 1)):
            value = getattr(config, name)
            if not _is_int(value) or value < minimum:
                logger.warning("Invalid %s %r, using %r", name, value, getattr(defaults, name))
                setattr(config, name, getattr(defaults, name))

        for name in ("mirror", "use_palette"):
            if not isinstance(getattr(config, name), bool):
                logger.warning("Invalid %s %r, using default", name, getattr(config, name))
                setattr(config, name, getattr(defaults, name))

        return config

    def save(self, config: StylizerConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: StylizerConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        data = asdict(config)
        data["mode"] = config.mode.value

        try:
            with open(self.config_path, "w") as f:
                json.dump(data, f, indent=2)
            return True, None
        except Exception as e:
            return False, str(e)
