"""模块说明：helpers。"""

import sys
import time
from pathlib import Path
from typing import Literal

from loguru import logger

GREEN = "00FF00FF"
RED = "FF0000FF"


def ensure_dir(path: Path) -> Path:
    """函数说明：ensure_dir。"""
    path.mkdir(parents=True, exist_ok=True)
    return path


def now_seconds() -> int:
    """单调时钟（整秒），只用于比较时间差。"""
    return int(time.monotonic())


def big_info_markup(
    message: str,
    level: Literal["Info", "Warning", "Error"],
    color: str | None = None,
) -> str:
    """生成 HUD 大信息框的富文本：带颜色的级别标题 + 正文。"""
    return f"<color=#{color or RED}>{level}</color>\n{message}"


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """函数说明：configure_logging。"""
    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file:
        ensure_dir(log_file.parent)
        logger.add(log_file, level=level, encoding="utf-8")
