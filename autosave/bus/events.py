"""模块说明：events。"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal


@dataclass
class HudMessage:
    """类说明：HudMessage。"""

    text: str
    kind: Literal["hud", "big_info"] = "hud"  # hud：单行状态；big_info：带标题的信息框
    header: str | None = None
    level: Literal["Info", "Warning", "Error"] = "Info"
    color: str | None = None  # RRGGBBAA
    timestamp: datetime = field(default_factory=datetime.now)
