"""Keyboard input: read one keypress and classify it into a logical key.

Logical keys are plain strings. Named keys use the ``KEY_*`` constants below,
printable characters are returned as themselves and anything else becomes
``KEY_UNKNOWN``.
"""

from __future__ import annotations

import curses

from ztui.logging import LoggerFactory

log = LoggerFactory.for_input()

KEY_UP = "KEY_UP"
KEY_DOWN = "KEY_DOWN"
KEY_LEFT = "KEY_LEFT"
KEY_RIGHT = "KEY_RIGHT"
KEY_ENTER = "KEY_ENTER"
KEY_ESC = "KEY_ESC"
KEY_UNKNOWN = "KEY_UNKNOWN"

ESC_CODE = 27
ENTER_CODES = {curses.KEY_ENTER, ord("\n"), ord("\r")}

_CODE_TO_KEY = {
    curses.KEY_UP: KEY_UP,
    curses.KEY_DOWN: KEY_DOWN,
    curses.KEY_LEFT: KEY_LEFT,
    curses.KEY_RIGHT: KEY_RIGHT,
    ESC_CODE: KEY_ESC,
}


def classify_key(code: int) -> str:
    if code in ENTER_CODES:
        return KEY_ENTER
    key = _CODE_TO_KEY.get(code)
    if key is not None:
        return key
    # getch() hands out multibyte input one byte at a time and function keys
    # as codes above 255, so only single ASCII bytes are literal characters.
    if 0 <= code < 128:
        char = chr(code)
        if char.isprintable():
            return char
    return KEY_UNKNOWN


def read_key(window) -> str:
    """Block until one keypress is available and return its logical key."""
    code = window.getch()
    key = classify_key(code)
    log.debug(f"Key received: '{key}' (raw code: {code})")
    return key
