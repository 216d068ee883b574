"""模块说明：schema。"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_INTERVAL_S = 1
MAX_INTERVAL_S = 2_000_000_000
DEFAULT_INTERVAL_S = 600


class ToggleConfig(BaseModel):
    """运行时可变的开关与间隔配置（启动时加载，每次变更即持久化）。"""
    model_config = ConfigDict(validate_assignment=True)

    enabled: bool = True
    interval_seconds: int = Field(default=DEFAULT_INTERVAL_S, ge=MIN_INTERVAL_S, le=MAX_INTERVAL_S)


class AutoSaveSettings(BaseSettings):
    """类说明：AutoSaveSettings。"""
    model_config = SettingsConfigDict(env_prefix="AUTOSAVE_")

    mod_name: str = "AutomaticSaves"
    mods_dir: str = "~/.autosave"
    settings_file_name: str = "AutoSave.txt"
    runtime_config_file_name: str = "RuntimeConfiguration.xml"  # 宿主的快捷键配置文件
    default_key: str = "Keypad7"
    log_level: str = "INFO"
    log_file: str | None = None

    @property
    def mods_path(self) -> Path:
        """函数说明：mods_path。"""
        return Path(self.mods_dir).expanduser()

    @property
    def settings_path(self) -> Path:
        """函数说明：settings_path。"""
        return self.mods_path / self.settings_file_name

    @property
    def runtime_config_path(self) -> Path:
        """函数说明：runtime_config_path。"""
        return self.mods_path / self.runtime_config_file_name
