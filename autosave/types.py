"""模块说明：types。"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal


# 调度器时间戳的"从未初始化"哨兵值
NEVER = -1


class GateReasonCode(str, Enum):
    """跳过保存的原因（闭合枚举，按门控优先级排列）。"""

    NOT_HOST_AUTHORITATIVE = "not_host_authoritative"
    BUSY = "busy"
    DIALOG_BLOCKING = "dialog_blocking"
    FEATURE_BLOCKED = "feature_blocked"
    SHOWCASE_MODE = "showcase_mode"
    CHALLENGE_ACTIVE = "challenge_active"


SAVED_MESSAGE = "Game has been saved"
HOST_ERROR_MESSAGE = "Unable to save game, check logs"

GATE_MESSAGES: dict[GateReasonCode, str] = {
    GateReasonCode.NOT_HOST_AUTHORITATIVE: "Unable to save game (not the host or not in singleplayer mode)",
    GateReasonCode.BUSY: "Unable to save game (busy state)",
    GateReasonCode.DIALOG_BLOCKING: "Unable to save game (a story dialog is playing)",
    GateReasonCode.FEATURE_BLOCKED: "Unable to save game (feature is temporarily blocked)",
    GateReasonCode.SHOWCASE_MODE: "Unable to save game (Gamescom is enabled)",
    GateReasonCode.CHALLENGE_ACTIVE: "Unable to save game (a challenge is active)",
}


@dataclass(frozen=True)
class GateResult:
    """类说明：GateResult。"""
    passed: bool
    reason: GateReasonCode | None = None

    @classmethod
    def ok(cls) -> "GateResult":
        return cls(passed=True)

    @classmethod
    def fail(cls, reason: GateReasonCode) -> "GateResult":
        return cls(passed=False, reason=reason)


@dataclass(frozen=True)
class TriggerOutcome:
    """一次保存尝试的结果：saved | gated(reason) | host_error。"""
    kind: Literal["saved", "gated", "host_error"]
    reason: GateReasonCode | None = None

    @classmethod
    def saved(cls) -> "TriggerOutcome":
        return cls(kind="saved")

    @classmethod
    def gated(cls, reason: GateReasonCode) -> "TriggerOutcome":
        return cls(kind="gated", reason=reason)

    @classmethod
    def host_error(cls) -> "TriggerOutcome":
        return cls(kind="host_error")

    @property
    def message(self) -> str:
        """函数说明：message。"""
        if self.kind == "saved":
            return SAVED_MESSAGE
        if self.kind == "gated" and self.reason is not None:
            return GATE_MESSAGES[self.reason]
        return HOST_ERROR_MESSAGE


@dataclass
class SchedulerState:
    """类说明：SchedulerState。"""
    last_trigger_s: int = NEVER
    interval_s: int = 600

    @property
    def initialized(self) -> bool:
        return self.last_trigger_s >= 0
