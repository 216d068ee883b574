"""自动保存运行时。

AutoSaveRuntime 在宿主进程启动时构造一次，把设置存储、开关控制、
调度器、快捷键和消息总线组装在一起，并作为显式上下文传给需要它的
宿主代码（替代全局单例）。宿主每帧调用 tick_once。
"""

import asyncio
from pathlib import Path
from dataclasses import dataclass
from typing import Callable, Hashable

from loguru import logger

from autosave.bus.events import HudMessage
from autosave.bus.queue import MessageBus
from autosave.config.loader import SettingsStore
from autosave.config.schema import AutoSaveSettings, ToggleConfig
from autosave.errors import IntervalValidationError
from autosave.host.base import HostAdapter
from autosave.scheduler.service import Scheduler
from autosave.scheduler.trigger import SaveTrigger
from autosave.shortcut.keys import lookup_key
from autosave.shortcut.resolver import ShortcutResolver
from autosave.toggle.controller import ToggleController
from autosave.types import TriggerOutcome
from autosave.utils.helpers import configure_logging, now_seconds


@dataclass
class IntervalUpdate:
    """类说明：IntervalUpdate。"""
    accepted: bool
    interval_seconds: int
    error: str | None = None


class AutoSaveRuntime:
    """宿主 UI 层使用的开关/触发接口。"""

    def __init__(
        self,
        settings: AutoSaveSettings,
        config: ToggleConfig,
        store: SettingsStore,
        shortcut: Hashable,
        bus: MessageBus | None = None,
        trigger: SaveTrigger | None = None,
        clock: Callable[[], int] = now_seconds,
    ):
        self.settings = settings
        self.config = config
        self.store = store
        self.shortcut = shortcut
        self.bus = bus or MessageBus()
        self.toggle = ToggleController(config, store, self.bus, settings.mod_name)
        self.scheduler = Scheduler(config, trigger=trigger, clock=clock)
        self.panel_visible = False
        self._running = False

    @classmethod
    def create(
        cls,
        settings: AutoSaveSettings | None = None,
        clock: Callable[[], int] = now_seconds,
        setup_logging: bool = True,
    ) -> "AutoSaveRuntime":
        """启动流程：加载设置、解析快捷键，返回就绪的运行时。"""
        settings = settings or AutoSaveSettings()
        if setup_logging:
            configure_logging(settings.log_level, Path(settings.log_file) if settings.log_file else None)

        name = settings.mod_name
        logger.info(f"Initializing {name}...")

        store = SettingsStore(settings.settings_path)
        config = store.load()

        default_key = lookup_key(settings.default_key)
        if default_key is None:
            logger.warning(f"Unknown default shortcut {settings.default_key!r}, using Keypad7")
            default_key = lookup_key("Keypad7")
        resolver = ShortcutResolver(name, default=default_key)
        shortcut = resolver.resolve_file(settings.runtime_config_path)

        runtime = cls(settings, config, store, shortcut, clock=clock)
        logger.info(f"{name} initialized.")
        logger.info(f"{name} has been turned {'on' if config.enabled else 'off'}.")
        return runtime

    def get_enabled(self) -> bool:
        """函数说明：get_enabled。"""
        return self.toggle.enabled

    def set_enabled(self, enabled: bool) -> None:
        """函数说明：set_enabled。"""
        self.toggle.set_enabled(enabled)

    def get_interval_text(self) -> str:
        """函数说明：get_interval_text。"""
        return str(self.toggle.interval_seconds)

    def set_interval_text(self, text: str) -> IntervalUpdate:
        """校验并应用间隔文本；失败时返回错误原因，当前值不变。"""
        try:
            seconds = self.toggle.set_interval(text)
        except IntervalValidationError as e:
            return IntervalUpdate(accepted=False, interval_seconds=self.toggle.interval_seconds, error=e.reason)
        return IntervalUpdate(accepted=True, interval_seconds=seconds)

    def tick_once(self, host: HostAdapter, now: int | None = None) -> TriggerOutcome | None:
        """每帧调用一次；禁用时不推进调度器。"""
        if not self.toggle.enabled:
            return None
        outcome = self.scheduler.tick(host, now)
        if outcome is not None:
            self.bus.publish(HudMessage(text=outcome.message))
        return outcome

    def on_key_down(self, key: Hashable) -> bool:
        """快捷键切换设置面板，返回面板当前是否可见。"""
        if key == self.shortcut:
            self.panel_visible = not self.panel_visible
        return self.panel_visible

    def can_configure(self, host: HostAdapter) -> bool:
        """函数说明：can_configure。"""
        return host.is_authoritative()

    def panel_notice(self, host: HostAdapter) -> str | None:
        """无法配置时面板上显示的提示。"""
        if self.can_configure(host):
            return None
        return f"{self.settings.mod_name} mod only works if you are the host or in singleplayer mode."

    async def run(self, host_provider: Callable[[], HostAdapter], poll_interval_s: float = 1.0) -> None:
        """为没有帧循环的宿主提供的协作式驱动，在事件循环线程内调用 tick_once。"""
        self._running = True
        logger.info(f"{self.settings.mod_name} loop started (poll every {poll_interval_s}s)")
        while self._running:
            try:
                self.tick_once(host_provider())
                await asyncio.sleep(poll_interval_s)
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"{self.settings.mod_name} loop error: {e}")
                await asyncio.sleep(poll_interval_s)

    def stop(self) -> None:
        """函数说明：stop。"""
        self._running = False

    @property
    def is_running(self) -> bool:
        """函数说明：is_running。"""
        return self._running
