"""
Settings manager for the pixel art maker
Handles saving and loading user preferences
"""

import json
import os
from pathlib import Path
from typing import Any, Optional, Union

from .pixel_art_constants import (
    DEFAULT_CANVAS_COLOR,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    DEFAULT_PALETTE,
    DEFAULT_PIXEL_SIZE,
    DEFAULT_SAVE_FILENAME,
    SETTINGS_APP_NAME,
    SETTINGS_FILENAME,
)
from .pixel_art_exceptions import ValidationError
from .pixel_art_models import CanvasConfig, Theme
from .pixel_art_utils import color_to_hex, debug_log, optional_path, sanitize_for_json, to_rgba


class SettingsManager:
    """Manages application settings with persistence"""

    def __init__(
        self,
        app_name: str = SETTINGS_APP_NAME,
        settings_dir: Optional[Union[str, Path]] = None,
    ):
        self.app_name = app_name
        self.settings_file = self._get_settings_path(settings_dir)
        self.settings = self._load_settings()

    def _get_settings_path(self, settings_dir: Optional[Union[str, Path]]) -> Path:
        """Get the appropriate settings directory for the platform"""
        if settings_dir is not None:
            directory = Path(settings_dir)
        elif os.name == "nt":  # Windows
            base = Path(os.environ.get("APPDATA", os.path.expanduser("~")))
            directory = base / self.app_name
        else:  # Linux/Mac
            directory = Path(os.path.expanduser("~")) / f".{self.app_name}"

        return directory / SETTINGS_FILENAME

    def _load_settings(self) -> dict[str, Any]:
        """Load settings from file, merged over the defaults"""
        settings = self._get_default_settings()
        if self.settings_file.exists():
            try:
                with open(self.settings_file) as f:
                    stored = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                # If file is corrupted, start fresh
                debug_log("SETTINGS", f"Ignoring unreadable settings: {e}", "WARNING")
                return settings
            if isinstance(stored, dict):
                self._merge(settings, stored)
        return settings

    @staticmethod
    def _merge(target: dict[str, Any], source: dict[str, Any]) -> None:
        for key, value in source.items():
            if isinstance(value, dict) and isinstance(target.get(key), dict):
                SettingsManager._merge(target[key], value)
            else:
                target[key] = value

    def _get_default_settings(self) -> dict[str, Any]:
        """Get default settings"""
        return {
            "canvas": {
                "width": DEFAULT_GRID_WIDTH,
                "height": DEFAULT_GRID_HEIGHT,
                "pixel_size": DEFAULT_PIXEL_SIZE,
                "color": color_to_hex(DEFAULT_CANVAS_COLOR),
            },
            "palette": [color_to_hex(c) for c in DEFAULT_PALETTE],
            "save_path": str(Path("~") / DEFAULT_SAVE_FILENAME),
            "last_save_path": "",
        }

    def save_settings(self) -> bool:
        """Save current settings to file

        Returns:
            True if the file was written
        """
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.settings_file, "w") as f:
                json.dump(sanitize_for_json(self.settings), f, indent=2)
        except OSError as e:
            # Settings are a convenience, a failed write must not stop the app
            debug_log("SETTINGS", f"Could not save settings: {e}", "WARNING")
            return False
        return True

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value using a dotted key such as "canvas.width" """
        value: Any = self.settings
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a setting value using a dotted key"""
        keys = key.split(".")
        target = self.settings
        for k in keys[:-1]:
            if not isinstance(target.get(k), dict):
                target[k] = {}
            target = target[k]
        target[keys[-1]] = value

    def record_save(self, file_path: Union[str, Path]) -> None:
        """Remember the destination of a successful save"""
        self.set("last_save_path", str(file_path))
        self.save_settings()

    def to_canvas_config(self, save_path: Optional[Union[str, Path]] = None) -> CanvasConfig:
        """Build the canvas configuration from the stored settings

        Args:
            save_path: Overrides the configured save destination

        Raises:
            ValidationError: If the stored settings describe an invalid canvas
        """
        try:
            width = int(self.get("canvas.width", DEFAULT_GRID_WIDTH))
            height = int(self.get("canvas.height", DEFAULT_GRID_HEIGHT))
            pixel_size = int(self.get("canvas.pixel_size", DEFAULT_PIXEL_SIZE))
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid canvas settings: {e}") from e

        destination = optional_path(save_path) or optional_path(self.get("save_path"))
        config = CanvasConfig(
            width=width,
            height=height,
            pixel_size=pixel_size,
            canvas_color=to_rgba(self.get("canvas.color", DEFAULT_CANVAS_COLOR)),
            palette=[to_rgba(c) for c in self.get("palette", DEFAULT_PALETTE)],
            theme=Theme(),
        )
        if destination is not None:
            config.save_path = destination
        return config
