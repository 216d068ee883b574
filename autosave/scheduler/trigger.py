"""单次保存尝试。

SaveTrigger 是唯一捕获宿主异常的地方：门控评估和保存原语都在故障
边界之内执行，任何异常都会被记录并转换为 host_error 结果，不会
传播到宿主的 tick。
"""

from loguru import logger

from autosave.gates.builtin import default_gate_chain
from autosave.gates.registry import GateChain
from autosave.host.base import PLAYER_SAVED_KEY, HostAdapter
from autosave.types import TriggerOutcome


class SaveTrigger:
    """类说明：SaveTrigger。"""

    def __init__(self, gates: GateChain | None = None):
        self.gates = gates or default_gate_chain()

    def attempt(self, host: HostAdapter) -> TriggerOutcome:
        """运行门控链，通过后调用宿主保存原语。"""
        logger.info("Saving game...")
        try:
            result = self.gates.evaluate(host)
            if not result.passed:
                return TriggerOutcome.gated(result.reason)

            host.save_game()
        except Exception:
            logger.exception("Exception caught while saving game")
            return TriggerOutcome.host_error()

        self._save_participant(host)

        logger.info("Game has been saved.")
        return TriggerOutcome.saved()

    def _save_participant(self, host: HostAdapter) -> None:
        """多人会话中由主机请求保存本地参与者状态并在会话日志中公告。

        这一步失败只记录日志，不影响已经成功的保存结果。
        """
        try:
            if not host.is_master() or host.is_playing_alone():
                return
            participant = host.get_local_participant()
            if participant is None:
                return
            host.request_participant_save(participant)
            host.announce(PLAYER_SAVED_KEY, participant)
        except Exception:
            logger.exception("Exception caught while saving replicated participant state")
