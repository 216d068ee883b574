"""开关与间隔控制。

ToggleController 持有可变的 ToggleConfig，负责校验编辑、同步到
SettingsStore，并通过消息总线发出确认或错误提示。
"""

import re

from loguru import logger

from autosave.bus.events import HudMessage
from autosave.bus.queue import MessageBus
from autosave.config.loader import SettingsStore
from autosave.config.schema import MAX_INTERVAL_S, MIN_INTERVAL_S, ToggleConfig
from autosave.errors import IntervalValidationError, SettingsStoreError
from autosave.utils.helpers import GREEN, RED, big_info_markup

MAX_INTERVAL_TEXT_LEN = 10

_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*")

INVALID_INTERVAL_MESSAGE = (
    f"Incorrect saves frequency value (it must be between {MIN_INTERVAL_S} and {MAX_INTERVAL_S})."
)


def validate_interval_text(candidate: str) -> int:
    """校验间隔文本，返回秒数；不合法时抛出 IntervalValidationError。"""
    if not candidate:
        raise IntervalValidationError(candidate, "value is empty")
    if len(candidate) > MAX_INTERVAL_TEXT_LEN:
        raise IntervalValidationError(candidate, f"value is longer than {MAX_INTERVAL_TEXT_LEN} characters")
    if not _INTEGER_RE.fullmatch(candidate):
        raise IntervalValidationError(candidate, "value is not a base-10 integer")
    seconds = int(candidate, 10)
    if not MIN_INTERVAL_S <= seconds <= MAX_INTERVAL_S:
        raise IntervalValidationError(candidate, f"value must be between {MIN_INTERVAL_S} and {MAX_INTERVAL_S}")
    return seconds


class ToggleController:
    """类说明：ToggleController。"""

    def __init__(self, config: ToggleConfig, store: SettingsStore, bus: MessageBus, mod_name: str):
        self.config = config
        self.store = store
        self.bus = bus
        self.mod_name = mod_name

    @property
    def enabled(self) -> bool:
        """函数说明：enabled。"""
        return self.config.enabled

    @property
    def interval_seconds(self) -> int:
        """函数说明：interval_seconds。"""
        return self.config.interval_seconds

    def set_enabled(self, enabled: bool) -> bool:
        """切换开关；值未变化时不做任何事，返回是否发生变更。"""
        previous = self.config.enabled
        self.config.enabled = enabled
        if self.config.enabled == previous:
            return False

        if self.config.enabled:
            text = f"{self.mod_name} has been turned on (frequency: every {self.config.interval_seconds} seconds)"
            self._big_info(text, "Info", GREEN)
        else:
            text = f"{self.mod_name} has been turned off"
            self._big_info(text, "Info", RED)
        logger.info(text)
        self._persist()
        return True

    def set_interval(self, candidate: str) -> int:
        """校验并应用新的保存间隔，返回新值。

        校验失败时发出错误提示并重新抛出 IntervalValidationError，
        当前值保持不变。
        """
        try:
            seconds = validate_interval_text(candidate)
        except IntervalValidationError as e:
            logger.warning(f"{INVALID_INTERVAL_MESSAGE} ({e.reason}: {candidate!r})")
            self._big_info(INVALID_INTERVAL_MESSAGE, "Error", RED)
            raise

        self.config.interval_seconds = seconds
        self._big_info(f"Automatic saves frequency updated to {seconds} seconds.", "Info", GREEN)
        logger.info(f"Saves frequency updated to {seconds} seconds.")
        self._persist()
        return seconds

    def _persist(self) -> None:
        try:
            self.store.save(self.config)
        except SettingsStoreError as e:
            # 内存中的新值依然生效，只是下次启动不会保留
            logger.error(f"Exception caught while updating settings: {e}")

    def _big_info(self, message: str, level: str, color: str) -> None:
        self.bus.publish(HudMessage(
            text=big_info_markup(message, level, color),
            kind="big_info",
            header=f"{self.mod_name} Info",
            level=level,
            color=color,
        ))
