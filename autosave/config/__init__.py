"""模块说明：__init__。"""

from autosave.config.loader import SettingsStore
from autosave.config.schema import AutoSaveSettings, ToggleConfig

__all__ = ["AutoSaveSettings", "SettingsStore", "ToggleConfig"]
