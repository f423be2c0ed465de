"""Telnet option negotiation and terminal key decoding for remote sessions."""

from __future__ import annotations

import logging
from enum import Enum, IntEnum, auto
from typing import Callable, Optional, Union

__all__ = [
    "KeyType",
    "TelnetProtocol",
    "KeyDecoder",
    "encode_output",
    "negotiation_preamble",
]

_log = logging.getLogger(__name__)

Key = tuple["KeyType", str]


class _Cmd(IntEnum):
    SE = 0xF0
    NOP = 0xF1
    DATA_MARK = 0xF2
    BREAK = 0xF3
    INTERRUPT_PROCESS = 0xF4
    ABORT_OUTPUT = 0xF5
    ARE_YOU_THERE = 0xF6
    ERASE_CHARACTER = 0xF7
    ERASE_LINE = 0xF8
    GO_AHEAD = 0xF9
    SB = 0xFA
    WILL = 0xFB
    WONT = 0xFC
    DO = 0xFD
    DONT = 0xFE
    IAC = 0xFF


class _Opt(IntEnum):
    ECHO = 0x01
    SUPPRESS_GO_AHEAD = 0x03
    TERMINAL_TYPE = 0x18
    NEGOTIATE_ABOUT_WIN_SIZE = 0x1F
    TERMINAL_SPEED = 0x20
    LINEMODE = 0x22
    NEW_ENV_OPTION = 0x27


_SIMPLE_COMMANDS = frozenset(
    {
        _Cmd.DATA_MARK,
        _Cmd.BREAK,
        _Cmd.INTERRUPT_PROCESS,
        _Cmd.ABORT_OUTPUT,
        _Cmd.ARE_YOU_THERE,
        _Cmd.ERASE_CHARACTER,
        _Cmd.ERASE_LINE,
        _Cmd.GO_AHEAD,
        _Cmd.NOP,
    }
)


def encode_output(text: str) -> str:
    """Turn every line feed into the telnet line ending CR LF."""
    return text.replace("\n", "\r\n")


def negotiation_preamble() -> bytes:
    """Bytes a server sends on connect: line mode off and server-side echo."""
    do_linemode = bytes([_Cmd.IAC, _Cmd.DO, _Opt.LINEMODE])
    linemode_zero = bytes(
        [_Cmd.IAC, _Cmd.SB, _Opt.LINEMODE, 0x01, 0x00, _Cmd.IAC, _Cmd.SE]
    )
    will_echo = bytes([_Cmd.IAC, _Cmd.WILL, _Opt.ECHO])
    return do_linemode + linemode_zero + will_echo


class _State(Enum):
    DATA = auto()
    SUB = auto()
    WAIT_WILL = auto()
    WAIT_WONT = auto()
    WAIT_DO = auto()
    WAIT_DONT = auto()


class TelnetProtocol:
    """Separates telnet commands from data and answers option requests.

    ``send`` receives the bytes to write back to the peer; ``on_data`` is
    called with every data byte, as an int.
    """

    def __init__(
        self,
        send: Callable[[bytes], None],
        on_data: Optional[Callable[[int], None]] = None,
    ) -> None:
        self._send = send
        self._on_data = on_data
        self._state = _State.DATA
        self._escape = False

    def feed(self, data: Union[bytes, bytearray, memoryview]) -> None:
        """Consume bytes received from the peer."""
        for byte in bytes(data):
            self._consume(byte)

    def _consume(self, byte: int) -> None:
        if self._escape:
            self._escape = False
            if byte == _Cmd.IAC:
                self._data(byte)
            else:
                self._command(byte)
        elif byte == _Cmd.IAC:
            self._escape = True
        else:
            self._data(byte)

    def _data(self, byte: int) -> None:
        state = self._state
        if state is _State.DATA:
            if self._on_data is not None:
                self._on_data(byte)
        elif state is _State.SUB:
            pass
        else:
            if state is _State.WAIT_WILL:
                self._rx_will(byte)
            elif state is _State.WAIT_DO:
                self._rx_do(byte)
            self._state = _State.DATA

    def _command(self, byte: int) -> None:
        if byte == _Cmd.SE:
            if self._state is _State.SUB:
                self._state = _State.DATA
            else:
                _log.warning("received SE when not in sub state")
        elif byte in _SIMPLE_COMMANDS:
            self._state = _State.DATA
        elif byte == _Cmd.SB:
            if self._state is not _State.SUB:
                self._state = _State.SUB
            else:
                _log.warning("received SB when already in sub state")
        elif byte == _Cmd.WILL:
            self._state = _State.WAIT_WILL
        elif byte == _Cmd.WONT:
            self._state = _State.WAIT_WONT
        elif byte == _Cmd.DO:
            self._state = _State.WAIT_DO
        elif byte == _Cmd.DONT:
            self._state = _State.WAIT_DONT

    def _rx_will(self, option: int) -> None:
        if option == _Opt.SUPPRESS_GO_AHEAD:
            self._send_cmd(_Cmd.WILL, _Opt.SUPPRESS_GO_AHEAD)
        elif option == _Opt.NEGOTIATE_ABOUT_WIN_SIZE:
            self._send_cmd(_Cmd.DO, _Opt.NEGOTIATE_ABOUT_WIN_SIZE)
        else:
            self._send_cmd(_Cmd.DONT, option)

    def _rx_do(self, option: int) -> None:
        if option == _Opt.ECHO:
            self._send_cmd(_Cmd.DO, _Opt.ECHO)
        elif option == _Opt.SUPPRESS_GO_AHEAD:
            self._send_cmd(_Cmd.WILL, _Opt.SUPPRESS_GO_AHEAD)
        else:
            self._send_cmd(_Cmd.WONT, option)

    def _send_cmd(self, action: int, option: int) -> None:
        self._send(bytes([_Cmd.IAC, action, option]))


class KeyType(Enum):
    """Kinds of key press a terminal can send."""

    ASCII = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    BACKSPACE = auto()
    CANC = auto()
    HOME = auto()
    END = auto()
    RET = auto()
    EOF = auto()
    IGNORED = auto()


class _Step(Enum):
    START = auto()
    ESC = auto()
    CSI = auto()
    TILDE = auto()
    WAIT_ZERO = auto()


_ARROWS = {
    65: KeyType.UP,
    66: KeyType.DOWN,
    68: KeyType.LEFT,
    67: KeyType.RIGHT,
    70: KeyType.END,
    72: KeyType.HOME,
}


class KeyDecoder:
    """Turns the data bytes of a telnet session into key presses."""

    def __init__(self) -> None:
        self._step = _Step.START

    def feed(self, byte: int) -> Optional[Key]:
        """Consume one byte; return a (KeyType, char) pair once a key is complete."""
        byte &= 0xFF
        step = self._step
        if step is _Step.START:
            if byte in (0xFF, 4):
                return KeyType.EOF, " "
            if byte in (8, 127):
                return KeyType.BACKSPACE, " "
            if byte == 27:
                self._step = _Step.ESC
                return None
            if byte == 13:
                self._step = _Step.WAIT_ZERO
                return None
            return KeyType.ASCII, chr(byte)
        if step is _Step.ESC:
            if byte == 91:
                self._step = _Step.CSI
                return None
            self._step = _Step.START
            return KeyType.IGNORED, " "
        if step is _Step.CSI:
            key = _ARROWS.get(byte)
            if key is None:
                self._step = _Step.TILDE
                return None
            self._step = _Step.START
            return key, " "
        self._step = _Step.START
        if step is _Step.TILDE:
            return (KeyType.CANC if byte == 126 else KeyType.IGNORED), " "
        return (KeyType.RET if byte in (0, 10) else KeyType.IGNORED), " "