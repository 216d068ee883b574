"""快捷键解析。

从宿主的快捷键配置文本中找到

    <Button ID="<ModName>">SYMBOL</Button>

并把 SYMBOL 映射为宿主按键。任何环节失败（文件缺失、标记不存在、
捕获为空、未知按键）都会记录原因并返回默认按键。只在启动时解析一次。
"""

from pathlib import Path
from typing import Callable, Hashable

from loguru import logger

from autosave.shortcut.keys import KeyCode, lookup_key

END_MARKER = "</Button>"

# 宿主配置中的厂商别名，查找前改写
ALIASES = (("NumPad", "Keypad"), ("Oem", ""))


def start_marker(mod_name: str) -> str:
    """函数说明：start_marker。"""
    return f'<Button ID="{mod_name}">'


def normalize_symbol(symbol: str) -> str:
    """函数说明：normalize_symbol。"""
    for old, new in ALIASES:
        symbol = symbol.replace(old, new)
    return symbol


def extract_symbol(line: str, mod_name: str) -> str | None:
    """返回行内标记之间的子串；没有匹配或为空时返回 None。"""
    start = start_marker(mod_name)
    idx = line.find(start)
    if idx < 0:
        return None
    rest = line[idx + len(start):]
    end = rest.find(END_MARKER)
    if end <= 0:
        return None
    return rest[:end]


class ShortcutResolver:
    """类说明：ShortcutResolver。"""

    def __init__(
        self,
        mod_name: str,
        default: Hashable = KeyCode.Keypad7,
        lookup: Callable[[str], Hashable | None] = lookup_key,
    ):
        self.mod_name = mod_name
        self.default = default
        self.lookup = lookup

    def resolve(self, text: str | None) -> Hashable:
        """函数说明：resolve。"""
        if not text:
            return self._fallback("shortcut configuration is empty")

        for line in text.splitlines():
            symbol = extract_symbol(line, self.mod_name)
            if not symbol:
                continue
            normalized = normalize_symbol(symbol)
            if not normalized:
                logger.warning(f"Shortcut symbol {symbol!r} is empty after alias rewriting")
                continue
            key = self.lookup(normalized)
            if key is None:
                logger.warning(f"Unknown shortcut symbol {normalized!r}")
                continue
            logger.info(f"\"Show settings\" shortcut has been parsed ({normalized}).")
            return key

        return self._fallback(f"no <Button ID=\"{self.mod_name}\"> binding found")

    def resolve_file(self, path: Path) -> Hashable:
        """读取宿主快捷键配置文件并解析；读取失败时返回默认按键。"""
        if not path.exists():
            return self._fallback(f"{path} does not exist")
        try:
            text = path.read_text(encoding="utf-8-sig", errors="replace")
        except OSError as e:
            logger.error(f"Exception caught while reading configured shortcut: {e}")
            return self._fallback(f"{path} could not be read")
        return self.resolve(text)

    def _fallback(self, reason: str) -> Hashable:
        default_name = getattr(self.default, "name", self.default)
        logger.warning(
            f"Could not parse \"Show settings\" shortcut ({reason}). Using default value ({default_name})."
        )
        return self.default
