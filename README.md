# clishell

Small, dependency-free pieces for building interactive command shells in Python.

## Modules

- `clishell.split`: `split(text)` breaks a command line into words at spaces, tabs and
  newlines. Single or double quotes group words together. A backslash before a quote or
  another backslash yields that character; before anything else the backslash is kept.
  Empty words are dropped.
- `clishell.fromstring`: strict parsing of command arguments. `parse_signed(text, bits)`
  and `parse_unsigned(text, bits)` check the range of a fixed-width integer;
  `parse_bool` accepts `true`, `false`, `1` and `0`; `parse_char` accepts exactly one
  character; `parse_float` requires the whole string to be a number.
  `from_string(text, target)` takes a `Target` member (such as `Target.SHORT` or
  `Target.UNSIGNED_CHAR`) or one of `str`, `bool`, `int`, `float` and `type(None)`.
  Bad input raises `BadConversion`, a `ValueError`.
- `clishell.history`: `History(max_size)` is a bounded command history that can be
  browsed with `previous(line)` and `next()`. `new_command(item)` records a command,
  `load_commands` and `get_commands` exchange commands oldest first, and `show(out)`
  writes the history to a text stream.
- `clishell.storage`: the `HistoryStorage` interface (`store`, `commands`, `clear`) and
  two implementations. `VolatileHistoryStorage(max_size=1000)` keeps commands in
  memory. `FileHistoryStorage(path, max_size=1000)` keeps them in a text file, one per
  line.
- `clishell.loopscheduler`: `LoopScheduler` is a thread-safe task queue with `post`,
  `exec_one`, `poll_one`, `run`, `stop` and `stopped`. Used as a context manager, it
  stops on exit.
- `clishell.fsm`: a small finite state machine. Subclass `State` and override `entry`,
  `exit` and `react(machine, event)`. `StateMachine(initial)` keeps one instance per
  state type and provides `start`, `dispatch`, `transit(target, action=None,
  condition=None)`, `is_in_state`, `state`, `reset` and the `current` property.
  `FsmList` starts and drives several machines together.
- `clishell.colors`: ANSI code enums (`Style`, `Fg`, `Bg`, `FgBright`, `BgBright`),
  `escape(value)` and `supports_color(term=None)`, which checks `TERM` when no term is
  given. It also has a prompt colour profile: `set_color`, `set_no_color`,
  `color_enabled`, and `before_prompt`, `after_prompt`, `before_input`, `after_input`.
  The last four return escape strings, or empty strings when colours are off.
- `clishell.telnet`: `TelnetProtocol(send, on_data=None)` separates telnet commands from
  data bytes and answers WILL/DO option requests through `send`.
  `KeyDecoder.feed(byte)` turns data bytes into `(KeyType, char)` key presses, and
  returns `None` while a sequence is incomplete. `encode_output(text)` converts LF to
  CR LF, and `negotiation_preamble()` returns the bytes a server sends on connect.
- `clishell.base64`: `encode(data)` and `encode_str(text)` produce padded base64.
  `decode(encoded)` accepts the text with or without trailing padding and raises
  `Base64Error` on invalid input.

## Examples

```python
from clishell.split import split
from clishell.fromstring import parse_signed

words = split('say "hello world" 42')
# ['say', 'hello world', '42']
count = parse_signed(words[2], 32)
```

```python
from clishell.base64 import encode, decode

assert encode(b"foobar") == "Zm9vYmFy"
assert decode("Zm9vYmFy") == b"foobar"
```

```python
from clishell.telnet import TelnetProtocol, KeyDecoder

replies = []
decoder = KeyDecoder()
keys = []

def on_data(byte):
    key = decoder.feed(byte)
    if key is not None:
        keys.append(key)

protocol = TelnetProtocol(replies.append, on_data)
protocol.feed(b"\xff\xfd\x01hi\r\x00")
# replies == [b"\xff\xfd\x01"]; keys holds two ASCII keys and a RET
```

## What it does not do

The package has no command menus, no command dispatcher and no interactive session
loop. It does not read the local keyboard, and it has no network server: the telnet
pieces work on bytes you pass in, and reply through the callback you supply. It
installs no command-line program.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```