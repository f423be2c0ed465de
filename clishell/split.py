"""Split a command line into words, honouring quotes and backslash escapes."""

from __future__ import annotations

from enum import Enum, auto

__all__ = ["split"]

_BLANKS = " \t\n"
_QUOTES = "\"'"
_ESCAPABLE = "\"'\\"


class _State(Enum):
    SPACE = auto()
    WORD = auto()
    SENTENCE = auto()
    ESCAPE = auto()


def split(text: str) -> list[str]:
    """Split ``text`` at blanks; single or double quotes group words together.

    A backslash before a quote or another backslash yields that character;
    before anything else the backslash is kept. Empty words are dropped.
    """
    words: list[str] = []
    state = _State.SPACE
    resume = _State.SPACE
    quote = '"'

    for c in text:
        if state is _State.SPACE:
            if c in _BLANKS:
                continue
            if c in _QUOTES:
                state, quote = _State.SENTENCE, c
                words.append("")
            elif c == "\\":
                resume, state = _State.WORD, _State.ESCAPE
                words.append("")
            else:
                state = _State.WORD
                words.append(c)
        elif state is _State.WORD:
            if c in _BLANKS:
                state = _State.SPACE
            elif c in _QUOTES:
                state, quote = _State.SENTENCE, c
                words.append("")
            elif c == "\\":
                resume, state = _State.WORD, _State.ESCAPE
            else:
                words[-1] += c
        elif state is _State.SENTENCE:
            if c == quote:
                state = _State.SPACE
            elif c == "\\":
                resume, state = _State.SENTENCE, _State.ESCAPE
            else:
                words[-1] += c
        else:
            if c not in _ESCAPABLE:
                words[-1] += "\\"
            words[-1] += c
            state = resume

    return [word for word in words if word]