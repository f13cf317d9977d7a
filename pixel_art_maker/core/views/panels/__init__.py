"""Panel components for the pixel art maker"""

from .control_panel import ControlPanel

__all__ = ["ControlPanel"]
