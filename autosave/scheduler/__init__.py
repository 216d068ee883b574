"""模块说明：__init__。"""

from autosave.types import GateReasonCode, GateResult, SchedulerState, TriggerOutcome
from autosave.scheduler.trigger import SaveTrigger
from autosave.scheduler.service import Scheduler

__all__ = ["GateReasonCode", "GateResult", "SaveTrigger", "Scheduler", "SchedulerState", "TriggerOutcome"]
