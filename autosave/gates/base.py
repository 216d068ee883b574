"""门控抽象基类。

每个 Gate 是保存前必须成立的一个前置条件：
- name: 门控名（用于日志）
- reason: 失败时报告的 GateReasonCode
- blocks: 根据宿主实时状态判断是否阻止保存
"""

from abc import ABC, abstractmethod

from autosave.host.base import HostAdapter
from autosave.types import GATE_MESSAGES, GateReasonCode


class Gate(ABC):
    """保存前置条件的统一接口。"""

    @property
    @abstractmethod
    def name(self) -> str:
        """门控名（需在链内唯一）。"""
        pass

    @property
    @abstractmethod
    def reason(self) -> GateReasonCode:
        """阻止保存时上报的原因码。"""
        pass

    @abstractmethod
    def blocks(self, host: HostAdapter) -> bool:
        """返回 True 表示此门控阻止本次保存。"""
        pass

    def describe(self, host: HostAdapter) -> str:
        """用于日志的失败描述。"""
        return GATE_MESSAGES[self.reason]
