"""autosave：按固定间隔、在一组前置门控通过时触发宿主保存。"""

__version__ = "0.1.0"

from autosave.bus import HudMessage, MessageBus
from autosave.config import AutoSaveSettings, SettingsStore, ToggleConfig
from autosave.host import HostAdapter, HostSnapshot, Participant
from autosave.runtime import AutoSaveRuntime, IntervalUpdate
from autosave.types import GateReasonCode, TriggerOutcome

__all__ = [
    "AutoSaveRuntime",
    "AutoSaveSettings",
    "GateReasonCode",
    "HostAdapter",
    "HostSnapshot",
    "HudMessage",
    "IntervalUpdate",
    "MessageBus",
    "Participant",
    "SettingsStore",
    "ToggleConfig",
    "TriggerOutcome",
]
