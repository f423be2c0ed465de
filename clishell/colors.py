"""ANSI colour escapes and the prompt colour profile."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import Optional, Union

__all__ = [
    "Style",
    "Fg",
    "Bg",
    "FgBright",
    "BgBright",
    "escape",
    "supports_color",
    "set_color",
    "set_no_color",
    "color_enabled",
    "before_prompt",
    "after_prompt",
    "before_input",
    "after_input",
]


class Style(IntEnum):
    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    RBLINK = 6
    REVERSED = 7
    CONCEAL = 8
    CROSSED = 9


class Fg(IntEnum):
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GRAY = 37
    RESET = 39


class Bg(IntEnum):
    BLACK = 40
    RED = 41
    GREEN = 42
    YELLOW = 43
    BLUE = 44
    MAGENTA = 45
    CYAN = 46
    GRAY = 47
    RESET = 49


class FgBright(IntEnum):
    BLACK = 90
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    GRAY = 97


class BgBright(IntEnum):
    BLACK = 100
    RED = 101
    GREEN = 102
    YELLOW = 103
    BLUE = 104
    MAGENTA = 105
    CYAN = 106
    GRAY = 107


Code = Union[Style, Fg, Bg, FgBright, BgBright]

_COLOR_TERMS = (
    "ansi", "color", "console", "cygwin", "gnome", "konsole", "kterm",
    "linux", "msys", "putty", "rxvt", "screen", "vt100", "xterm",
)


def escape(value: Code) -> str:
    """Return the ANSI escape sequence for ``value``."""
    return f"\033[{int(value)}m"


def supports_color(term: Optional[str] = None) -> bool:
    """Tell whether a terminal type understands colours.

    Without ``term`` the TERM environment variable is used.
    """
    if term is None:
        term = os.environ.get("TERM")
    if term is None:
        return False
    return any(name in term for name in _COLOR_TERMS)


class _Profile:
    enabled = False


_profile = _Profile()


def set_color() -> None:
    """Turn prompt colours on."""
    _profile.enabled = True


def set_no_color() -> None:
    """Turn prompt colours off."""
    _profile.enabled = False


def color_enabled() -> bool:
    """Return True when prompt colours are on."""
    return _profile.enabled


def before_prompt() -> str:
    """Text written before the prompt."""
    return escape(Fg.GREEN) + escape(Style.BOLD) if _profile.enabled else ""


def after_prompt() -> str:
    """Text written after the prompt."""
    return escape(Style.RESET) if _profile.enabled else ""


def before_input() -> str:
    """Text written before echoed user input."""
    return escape(FgBright.GRAY) if _profile.enabled else ""


def after_input() -> str:
    """Text written after echoed user input."""
    return escape(Style.RESET) if _profile.enabled else ""