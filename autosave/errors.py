"""autosave 错误类型。

期望中的"门控跳过"不是异常，而是 TriggerOutcome 值；
这里只定义需要在边界处被捕获并转换为消息的异常。
"""

from __future__ import annotations

from pathlib import Path


class AutoSaveError(Exception):
    """类说明：AutoSaveError。"""


class IntervalValidationError(AutoSaveError):
    """保存间隔文本校验失败，当前值保持不变。"""

    def __init__(self, candidate: str, reason: str):
        self.candidate = candidate
        self.reason = reason
        super().__init__(f"Invalid saves frequency {candidate!r}: {reason}")


class SettingsStoreError(AutoSaveError):
    """类说明：SettingsStoreError。"""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to write settings to {path}: {cause}")
