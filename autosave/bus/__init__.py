"""模块说明：__init__。"""

from autosave.bus.events import HudMessage
from autosave.bus.queue import MessageBus

__all__ = ["MessageBus", "HudMessage"]
