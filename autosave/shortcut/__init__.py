"""模块说明：__init__。"""

from autosave.shortcut.keys import KeyCode, lookup_key
from autosave.shortcut.resolver import ShortcutResolver

__all__ = ["KeyCode", "ShortcutResolver", "lookup_key"]
