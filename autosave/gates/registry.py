"""门控链。

GateChain 按固定优先级依次评估门控，遇到第一个失败即返回，
后续门控不再查询宿主。
"""

from loguru import logger

from autosave.gates.base import Gate
from autosave.host.base import HostAdapter
from autosave.types import GateResult


class GateChain:
    """有序门控容器与评估入口。"""

    def __init__(self, gates: list[Gate] | None = None):
        self._gates: list[Gate] = []
        for gate in gates or []:
            self.register(gate)

    def register(self, gate: Gate) -> None:
        """追加到链尾；同名门控会被替换并保持原位置。"""
        for i, existing in enumerate(self._gates):
            if existing.name == gate.name:
                self._gates[i] = gate
                return
        self._gates.append(gate)

    def unregister(self, name: str) -> None:
        """注销门控；不存在时静默忽略。"""
        self._gates = [g for g in self._gates if g.name != name]

    def evaluate(self, host: HostAdapter) -> GateResult:
        """按顺序评估，返回第一个失败门控的原因；全部通过返回 ok。

        宿主查询抛出的异常不在这里处理，由 SaveTrigger 的故障边界接管。
        """
        for gate in self._gates:
            if gate.blocks(host):
                logger.info(f"Cannot save game: {gate.describe(host)} (gate: {gate.name})")
                return GateResult.fail(gate.reason)
        return GateResult.ok()

    @property
    def gate_names(self) -> list[str]:
        """返回门控名列表（按评估顺序）。"""
        return [g.name for g in self._gates]

    def __len__(self) -> int:
        return len(self._gates)

    def __contains__(self, name: str) -> bool:
        return any(g.name == name for g in self._gates)
