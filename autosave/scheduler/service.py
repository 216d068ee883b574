"""模块说明：service。"""

from typing import Callable

from loguru import logger

from autosave.config.schema import ToggleConfig
from autosave.host.base import HostAdapter
from autosave.scheduler.trigger import SaveTrigger
from autosave.types import NEVER, SchedulerState, TriggerOutcome
from autosave.utils.helpers import now_seconds


class Scheduler:
    """决定每个 tick 是否到期并触发保存。

    两个状态：Idle（等待）和 Due（已过间隔）。进入 Due 时先把
    last_trigger 重置为 now，再委托 SaveTrigger；因此失败或被门控
    拦截的尝试同样要等满一个完整间隔，不会立即重试。
    """

    def __init__(
        self,
        config: ToggleConfig,
        trigger: SaveTrigger | None = None,
        clock: Callable[[], int] = now_seconds,
    ):
        self.config = config
        self.trigger = trigger or SaveTrigger()
        self.clock = clock
        self.state = SchedulerState(interval_s=config.interval_seconds)

    def is_due(self, now: int) -> bool:
        """函数说明：is_due。"""
        return self.state.initialized and now - self.state.last_trigger_s > self.state.interval_s

    def tick(self, host: HostAdapter, now: int | None = None) -> TriggerOutcome | None:
        """执行一次到期检查；到期时返回本次尝试的结果，否则返回 None。"""
        now = self.clock() if now is None else now
        # 间隔可能在运行时被修改
        self.state.interval_s = self.config.interval_seconds

        if not self.state.initialized:
            self.state.last_trigger_s = now
            logger.debug(f"Autosave baseline established at {now}")
            return None

        if not self.is_due(now):
            return None

        self.state.last_trigger_s = now
        return self.trigger.attempt(host)

    def reset(self) -> None:
        """回到未初始化状态，下一次 tick 重新建立基线。"""
        self.state.last_trigger_s = NEVER
