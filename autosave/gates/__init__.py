"""门控子包导出入口。"""

from autosave.gates.base import Gate
from autosave.gates.builtin import default_gate_chain
from autosave.gates.registry import GateChain

__all__ = ["Gate", "GateChain", "default_gate_chain"]
