"""模块说明：__init__。"""

from autosave.host.base import SAVE_STATE_IDLE, HostAdapter, Participant
from autosave.host.snapshot import HostSnapshot

__all__ = ["HostAdapter", "HostSnapshot", "Participant", "SAVE_STATE_IDLE"]
