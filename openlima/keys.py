"""Keyboard buttons and the mapping of platform key codes onto them."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Union


class KeyboardButton(IntEnum):
    """A keyboard button, independent of the platform that reported it."""

    KEY_NONE = 0

    KEY_0 = ord("0")
    KEY_1 = ord("1")
    KEY_2 = ord("2")
    KEY_3 = ord("3")
    KEY_4 = ord("4")
    KEY_5 = ord("5")
    KEY_6 = ord("6")
    KEY_7 = ord("7")
    KEY_8 = ord("8")
    KEY_9 = ord("9")

    KEY_A = ord("A")
    KEY_B = ord("B")
    KEY_C = ord("C")
    KEY_D = ord("D")
    KEY_E = ord("E")
    KEY_F = ord("F")
    KEY_G = ord("G")
    KEY_H = ord("H")
    KEY_I = ord("I")
    KEY_J = ord("J")
    KEY_K = ord("K")
    KEY_L = ord("L")
    KEY_M = ord("M")
    KEY_N = ord("N")
    KEY_O = ord("O")
    KEY_P = ord("P")
    KEY_Q = ord("Q")
    KEY_R = ord("R")
    KEY_S = ord("S")
    KEY_T = ord("T")
    KEY_U = ord("U")
    KEY_V = ord("V")
    KEY_W = ord("W")
    KEY_X = ord("X")
    KEY_Y = ord("Y")
    KEY_Z = ord("Z")

    # Function keys sit 145 above the Windows virtual-key codes 0x70..0x7B.
    KEY_F1 = 0x70 + 145
    KEY_F2 = 0x71 + 145
    KEY_F3 = 0x72 + 145
    KEY_F4 = 0x73 + 145
    KEY_F5 = 0x74 + 145
    KEY_F6 = 0x75 + 145
    KEY_F7 = 0x76 + 145
    KEY_F8 = 0x77 + 145
    KEY_F9 = 0x78 + 145
    KEY_F10 = 0x79 + 145
    KEY_F11 = 0x7A + 145
    KEY_F12 = 0x7B + 145

    KEY_LEFT = 269
    KEY_UP = 270
    KEY_RIGHT = 271
    KEY_DOWN = 272
    KEY_PAGE_UP = 273
    KEY_PAGE_DOWN = 274
    KEY_HOME = 275
    KEY_END = 276
    KEY_INSERT = 277
    KEY_NUM_LOCK = 278
    KEY_DELETE = 279

    KEY_CONTROL = 280
    KEY_ALT = 281
    KEY_SHIFT = 282

    KEY_BACK = 283
    KEY_TAB = 284
    KEY_ENTER = 285
    KEY_PAUSE = 286
    KEY_CAPSLOCK = 287
    KEY_ESCAPE = 288
    KEY_SPACE = 289
    KEY_NUMPAD0 = 290
    KEY_NUMPAD1 = 291
    KEY_NUMPAD2 = 292
    KEY_NUMPAD3 = 293
    KEY_NUMPAD4 = 294
    KEY_NUMPAD5 = 295
    KEY_NUMPAD6 = 296
    KEY_NUMPAD7 = 297
    KEY_NUMPAD8 = 298
    KEY_NUMPAD9 = 299
    KEY_MULTIPLY = 300
    KEY_ADD = 301
    KEY_SUBTRACT = 302
    KEY_DECIMAL = 303
    KEY_DIVIDE = 304
    KEY_OEM_PLUS = 305
    KEY_OEM_COMMA = 306
    KEY_OEM_MINUS = 307
    KEY_OEM_PERIOD = 308
    KEY_OEM_1 = 309
    KEY_OEM_2 = 310
    KEY_OEM_3 = 311
    KEY_OEM_4 = 312
    KEY_OEM_5 = 313
    KEY_OEM_6 = 314
    KEY_OEM_7 = 315
    KEY_OEM_8 = 316


K = KeyboardButton

_VIRTUAL_KEYS: dict[int, KeyboardButton] = {
    0x25: K.KEY_LEFT,
    0x26: K.KEY_UP,
    0x27: K.KEY_RIGHT,
    0x28: K.KEY_DOWN,
    0x21: K.KEY_PAGE_UP,
    0x22: K.KEY_PAGE_DOWN,
    0x24: K.KEY_HOME,
    0x23: K.KEY_END,
    0x2D: K.KEY_INSERT,
    0x90: K.KEY_NUM_LOCK,
    0x2E: K.KEY_DELETE,
    0x08: K.KEY_BACK,
    0x09: K.KEY_TAB,
    0x0D: K.KEY_ENTER,
    0x13: K.KEY_PAUSE,
    0x14: K.KEY_CAPSLOCK,
    0x1B: K.KEY_ESCAPE,
    0x20: K.KEY_SPACE,
    0x60: K.KEY_NUMPAD0,
    0x61: K.KEY_NUMPAD1,
    0x62: K.KEY_NUMPAD2,
    0x63: K.KEY_NUMPAD3,
    0x64: K.KEY_NUMPAD4,
    0x65: K.KEY_NUMPAD5,
    0x66: K.KEY_NUMPAD6,
    0x67: K.KEY_NUMPAD7,
    0x68: K.KEY_NUMPAD8,
    0x69: K.KEY_NUMPAD9,
    0x6A: K.KEY_MULTIPLY,
    0x6B: K.KEY_ADD,
    0x6D: K.KEY_SUBTRACT,
    0x6E: K.KEY_DECIMAL,
    0x6F: K.KEY_DIVIDE,
    0xBB: K.KEY_OEM_PLUS,
    0xBC: K.KEY_OEM_COMMA,
    0xBD: K.KEY_OEM_MINUS,
    0xBE: K.KEY_OEM_PERIOD,
    0xBA: K.KEY_OEM_1,
    0xBF: K.KEY_OEM_2,
    0xC0: K.KEY_OEM_3,
    0xDB: K.KEY_OEM_4,
    0xDC: K.KEY_OEM_5,
    0xDD: K.KEY_OEM_6,
    0xDE: K.KEY_OEM_7,
    0xDF: K.KEY_OEM_8,
    0xA2: K.KEY_CONTROL,
    0xA3: K.KEY_CONTROL,
    0x11: K.KEY_CONTROL,
    0xA4: K.KEY_ALT,
    0xA5: K.KEY_ALT,
    0x12: K.KEY_ALT,
    0xA0: K.KEY_SHIFT,
    0xA1: K.KEY_SHIFT,
    0x10: K.KEY_SHIFT,
}

_KEYSYMS: dict[int, KeyboardButton] = {
    65470: K.KEY_F1,
    65471: K.KEY_F2,
    65472: K.KEY_F3,
    65473: K.KEY_F4,
    65474: K.KEY_F5,
    65475: K.KEY_F6,
    65476: K.KEY_F7,
    65477: K.KEY_F8,
    65478: K.KEY_F9,
    65479: K.KEY_F10,
    65480: K.KEY_F11,
    65481: K.KEY_F12,
    65361: K.KEY_LEFT,
    65362: K.KEY_UP,
    65363: K.KEY_RIGHT,
    65364: K.KEY_DOWN,
    65365: K.KEY_PAGE_UP,
    65366: K.KEY_PAGE_DOWN,
    65360: K.KEY_HOME,
    65367: K.KEY_END,
    65379: K.KEY_INSERT,
    65407: K.KEY_NUM_LOCK,
    65535: K.KEY_DELETE,
    65507: K.KEY_CONTROL,
    65508: K.KEY_CONTROL,
    65513: K.KEY_ALT,
    65027: K.KEY_ALT,
    65505: K.KEY_SHIFT,
    65506: K.KEY_SHIFT,
    65288: K.KEY_BACK,
    65289: K.KEY_TAB,
    65421: K.KEY_ENTER,
    65293: K.KEY_ENTER,
    65299: K.KEY_PAUSE,
    65509: K.KEY_CAPSLOCK,
    65307: K.KEY_ESCAPE,
    32: K.KEY_SPACE,
    65438: K.KEY_NUMPAD0,
    65436: K.KEY_NUMPAD1,
    65433: K.KEY_NUMPAD2,
    65435: K.KEY_NUMPAD3,
    65430: K.KEY_NUMPAD4,
    65437: K.KEY_NUMPAD5,
    65432: K.KEY_NUMPAD6,
    65429: K.KEY_NUMPAD7,
    65431: K.KEY_NUMPAD8,
    65434: K.KEY_NUMPAD9,
    65450: K.KEY_MULTIPLY,
    65451: K.KEY_ADD,
    65453: K.KEY_SUBTRACT,
    65439: K.KEY_DECIMAL,
    65455: K.KEY_DIVIDE,
}

_DESCRIPTIONS: dict[KeyboardButton, str] = {
    K.KEY_NONE: "None",
    K.KEY_LEFT: "Left",
    K.KEY_UP: "Up",
    K.KEY_RIGHT: "Right",
    K.KEY_DOWN: "Down",
    K.KEY_PAGE_UP: "Page Up",
    K.KEY_PAGE_DOWN: "Page Down",
    K.KEY_HOME: "Home",
    K.KEY_END: "End",
    K.KEY_INSERT: "Insert",
    K.KEY_NUM_LOCK: "Numlock",
    K.KEY_DELETE: "Delete",
    K.KEY_CONTROL: "Control",
    K.KEY_ALT: "Alt",
    K.KEY_SHIFT: "Shift",
    K.KEY_BACK: "Back",
    K.KEY_TAB: "Tab",
    K.KEY_ENTER: "Enter",
    K.KEY_PAUSE: "Pause",
    K.KEY_CAPSLOCK: "Capslock",
    K.KEY_ESCAPE: "Escape",
    K.KEY_SPACE: "Space",
    K.KEY_MULTIPLY: "Multiply (Numpad)",
    K.KEY_ADD: "Add (Numpad)",
    K.KEY_SUBTRACT: "Subtract (Numpad)",
    K.KEY_DECIMAL: "Decimal (Numpad)",
    K.KEY_DIVIDE: "Divide (Numpad)",
    K.KEY_OEM_PLUS: "Plus",
    K.KEY_OEM_COMMA: "Comma",
    K.KEY_OEM_MINUS: "Minus",
    K.KEY_OEM_PERIOD: "Period",
}
_DESCRIPTIONS.update(
    {KeyboardButton(ord(c)): c for c in "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"}
)
_DESCRIPTIONS.update(
    {KeyboardButton[f"KEY_F{n}"]: f"F{n}" for n in range(1, 13)}
)
_DESCRIPTIONS.update(
    {KeyboardButton[f"KEY_NUMPAD{n}"]: f"{n} (Numpad)" for n in range(10)}
)
_DESCRIPTIONS.update(
    {KeyboardButton[f"KEY_OEM_{n}"]: f"Special key {n}" for n in range(1, 9)}
)

del K


def _is_letter_or_digit(code: int) -> bool:
    return ord("A") <= code <= ord("Z") or ord("0") <= code <= ord("9")


def _as_button(key: Union[KeyboardButton, int]) -> Optional[KeyboardButton]:
    try:
        return KeyboardButton(key)
    except ValueError:
        return None


def map_virtual_key(vk: int) -> KeyboardButton:
    """Map a Windows virtual-key code to a keyboard button."""
    if _is_letter_or_digit(vk):
        return KeyboardButton(vk)
    if 0x70 <= vk <= 0x7B:
        return KeyboardButton(vk + 145)
    return _VIRTUAL_KEYS.get(vk, KeyboardButton.KEY_NONE)


def map_keysym(keysym: int) -> KeyboardButton:
    """Map an X11 keysym (unshifted) to a keyboard button."""
    if ord("a") <= keysym <= ord("z"):
        return KeyboardButton(keysym - ord("a") + ord("A"))
    if ord("0") <= keysym <= ord("9"):
        return KeyboardButton(keysym)
    return _KEYSYMS.get(keysym, KeyboardButton.KEY_NONE)


def key_value(key: Union[KeyboardButton, int]) -> Optional[str]:
    """The character a letter or digit key types, or None for other keys."""
    if _is_letter_or_digit(int(key)):
        return chr(key)
    return None


def key_description(key: Union[KeyboardButton, int]) -> str:
    """A human-readable description of the key, or "Unknown"."""
    button = _as_button(key)
    if button is None:
        return "Unknown"
    return _DESCRIPTIONS.get(button, "Unknown")


def key_type_name(key: Union[KeyboardButton, int]) -> str:
    """The symbolic name of the key, such as "KEY_A", or "UNKNOWN"."""
    button = _as_button(key)
    if button is None:
        return "UNKNOWN"
    return button.name