"""模块说明：__init__。"""

from autosave.toggle.controller import ToggleController, validate_interval_text

__all__ = ["ToggleController", "validate_interval_text"]
