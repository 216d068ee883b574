"""设置文件读写。

文件为 UTF-8 纯文本，CRLF 换行：

    IsEnabled=true
    SavesFrequency=600

旧版本写入的是两行裸值（布尔值 + 整数），同样可以解析。
解析是宽松的逐行扫描：无法识别的行直接忽略，越界或非法的
频率值保持内存中的当前值不变。
"""

from pathlib import Path

from loguru import logger

from autosave.config.schema import MAX_INTERVAL_S, MIN_INTERVAL_S, ToggleConfig
from autosave.errors import SettingsStoreError

ENABLED_KEY = "IsEnabled="
FREQUENCY_KEY = "SavesFrequency="


def parse_interval(text: str) -> int | None:
    """解析频率字段：仅接受纯数字且位于 [1, 2000000000] 的值。"""
    value = text.strip()
    if not value or not value.isdigit():
        return None
    try:
        seconds = int(value)
    except ValueError:
        return None
    if MIN_INTERVAL_S <= seconds <= MAX_INTERVAL_S:
        return seconds
    return None


def parse_settings(content: str, current: ToggleConfig | None = None) -> ToggleConfig:
    """把设置文本叠加到 current 上，返回新的配置对象。"""
    config = current.model_copy() if current else ToggleConfig()

    for raw in content.splitlines():
        if not raw.strip():
            continue
        lowered = raw.lower()
        if "true" in lowered:
            config.enabled = True
        elif "false" in lowered:
            config.enabled = False
        elif raw.startswith(FREQUENCY_KEY) and len(raw) > len(FREQUENCY_KEY):
            _apply_interval(config, raw[len(FREQUENCY_KEY):])
        elif raw.strip().isdigit():
            # 兼容旧格式的裸整数行
            _apply_interval(config, raw)
        else:
            logger.debug(f"Ignoring unrecognized settings line: {raw!r}")

    return config


def _apply_interval(config: ToggleConfig, text: str) -> None:
    seconds = parse_interval(text)
    if seconds is None:
        logger.warning(f"Ignoring invalid saves frequency {text.strip()!r} in settings file")
        return
    config.interval_seconds = seconds


def format_settings(config: ToggleConfig) -> str:
    """函数说明：format_settings。"""
    enabled = "true" if config.enabled else "false"
    return f"{ENABLED_KEY}{enabled}\r\n{FREQUENCY_KEY}{config.interval_seconds}\r\n"


class SettingsStore:
    """ToggleConfig 的持久化存储。"""

    def __init__(self, path: Path):
        self.path = path

    def load(self, current: ToggleConfig | None = None) -> ToggleConfig:
        """加载设置；文件不存在时用当前默认值创建文件。

        任何读取/解析错误都不会抛出，只记录日志并返回默认值。
        """
        config = current.model_copy() if current else ToggleConfig()

        if not self.path.exists():
            try:
                self.save(config)
            except SettingsStoreError as e:
                logger.error(f"Failed to create default settings file: {e}")
            self._log_loaded(config)
            return config

        try:
            content = self.path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read settings from {self.path}: {e}. Using default settings.")
            return config

        config = parse_settings(content, config)
        self._log_loaded(config)
        return config

    def save(self, config: ToggleConfig) -> None:
        """函数说明：save。"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # newline="" 保证 CRLF 原样写出
            with open(self.path, "w", encoding="utf-8", newline="") as f:
                f.write(format_settings(config))
        except OSError as e:
            raise SettingsStoreError(self.path, e) from e

        logger.info(
            f"Settings were updated (Feature enabled: {str(config.enabled).lower()}. "
            f"Saves frequency: {config.interval_seconds} seconds)."
        )

    def _log_loaded(self, config: ToggleConfig) -> None:
        logger.info(
            f"Settings were loaded (Feature enabled: {str(config.enabled).lower()}. "
            f"Saves frequency: {config.interval_seconds} seconds)."
        )
