"""内置门控，顺序即优先级：先检查最便宜、最可能失败的条件。"""

from autosave.gates.base import Gate
from autosave.gates.registry import GateChain
from autosave.host.base import SAVE_STATE_IDLE, HostAdapter
from autosave.types import GateReasonCode


class HostAuthorityGate(Gate):
    """只有单人模式或会话主机可以保存。"""
    name = "host_authority"
    reason = GateReasonCode.NOT_HOST_AUTHORITATIVE

    def blocks(self, host: HostAdapter) -> bool:
        return not host.is_authoritative()


class BusyGate(Gate):
    """类说明：BusyGate。"""
    name = "busy"
    reason = GateReasonCode.BUSY

    def blocks(self, host: HostAdapter) -> bool:
        return host.get_save_state() != SAVE_STATE_IDLE

    def describe(self, host: HostAdapter) -> str:
        return f"{super().describe(host)} (State: {host.get_save_state()})"


class StoryDialogGate(Gate):
    """类说明：StoryDialogGate。"""
    name = "story_dialog"
    reason = GateReasonCode.DIALOG_BLOCKING

    def blocks(self, host: HostAdapter) -> bool:
        return host.is_story_dialog_playing()


class SaveBlockedGate(Gate):
    """类说明：SaveBlockedGate。"""
    name = "save_blocked"
    reason = GateReasonCode.FEATURE_BLOCKED

    def blocks(self, host: HostAdapter) -> bool:
        return host.is_save_blocked()


class ShowcaseGate(Gate):
    """类说明：ShowcaseGate。"""
    name = "showcase"
    reason = GateReasonCode.SHOWCASE_MODE

    def blocks(self, host: HostAdapter) -> bool:
        return host.is_showcase_mode()


class ChallengeGate(Gate):
    """类说明：ChallengeGate。"""
    name = "challenge"
    reason = GateReasonCode.CHALLENGE_ACTIVE

    def blocks(self, host: HostAdapter) -> bool:
        return host.is_challenge_active()


def default_gate_chain() -> GateChain:
    """函数说明：default_gate_chain。"""
    return GateChain([
        HostAuthorityGate(),
        BusyGate(),
        StoryDialogGate(),
        SaveBlockedGate(),
        ShowcaseGate(),
        ChallengeGate(),
    ])
