"""宿主输入标识空间（按键名）。"""

import string
from enum import Enum

_NAMES = (
    ["None", "Backspace", "Delete", "Tab", "Clear", "Return", "Pause", "Escape", "Space"]
    + [f"Alpha{i}" for i in range(10)]
    + list(string.ascii_uppercase)
    + [f"Keypad{i}" for i in range(10)]
    + ["KeypadPeriod", "KeypadDivide", "KeypadMultiply", "KeypadMinus", "KeypadPlus",
       "KeypadEnter", "KeypadEquals"]
    + ["UpArrow", "DownArrow", "RightArrow", "LeftArrow", "Insert", "Home", "End",
       "PageUp", "PageDown"]
    + [f"F{i}" for i in range(1, 16)]
    + ["Numlock", "CapsLock", "ScrollLock", "RightShift", "LeftShift", "RightControl",
       "LeftControl", "RightAlt", "LeftAlt", "Print", "Menu"]
    + ["Exclaim", "DoubleQuote", "Hash", "Dollar", "Percent", "Ampersand", "Quote",
       "LeftParen", "RightParen", "Asterisk", "Plus", "Comma", "Minus", "Period",
       "Slash", "Colon", "Semicolon", "Less", "Equals", "Greater", "Question", "At",
       "LeftBracket", "Backslash", "RightBracket", "Caret", "Underscore", "BackQuote",
       "LeftCurlyBracket", "Pipe", "RightCurlyBracket", "Tilde"]
)

KeyCode = Enum("KeyCode", [(name, name) for name in _NAMES], type=str)

_BY_LOWER_NAME = {name.lower(): KeyCode[name] for name in _NAMES}


def lookup_key(symbol: str) -> KeyCode | None:
    """大小写不敏感地查找按键；未知返回 None。"""
    return _BY_LOWER_NAME.get(symbol.strip().lower())
