"""A small finite state machine with one instance per state type."""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

__all__ = ["State", "StateMachine", "FsmList"]

S = TypeVar("S", bound="State")


class State:
    """Base class for states; override the hooks a state needs.

    The default hooks keep ``active`` up to date and leave every event
    unhandled.
    """

    active: bool = False

    def entry(self, machine: "StateMachine") -> None:
        """Called when the machine enters this state; marks it active."""
        self.active = True

    def exit(self, machine: "StateMachine") -> None:
        """Called when the machine leaves this state; marks it inactive."""
        self.active = False

    def react(self, machine: "StateMachine", event: Any) -> bool:
        """Handle ``event``; call ``machine.transit`` to change state.

        Returns whether the event was handled; the default handles nothing.
        """
        return False


def _check_state_type(state_type: object) -> None:
    if not (isinstance(state_type, type) and issubclass(state_type, State)):
        raise TypeError(f"not a State subclass: {state_type!r}")


class StateMachine:
    """Holds one instance of each state type and a current state."""

    def __init__(self, initial: type[State]) -> None:
        _check_state_type(initial)
        self._initial = initial
        self._instances: dict[type[State], State] = {}
        self._current_type: Optional[type[State]] = None

    @property
    def current(self) -> State:
        """The current state instance."""
        if self._current_type is None:
            raise RuntimeError("state machine has not been started")
        return self.state(self._current_type)

    def state(self, state_type: type[S]) -> S:
        """Return this machine's instance of ``state_type``."""
        _check_state_type(state_type)
        instance = self._instances.get(state_type)
        if instance is None:
            instance = state_type()
            self._instances[state_type] = instance
        return instance  # type: ignore[return-value]

    def is_in_state(self, state_type: type[State]) -> bool:
        """Return True if the current state is of exactly ``state_type``."""
        _check_state_type(state_type)
        return self._current_type is state_type

    def _set_initial_state(self) -> None:
        self._current_type = self._initial

    def _enter(self) -> None:
        self.current.entry(self)

    def start(self) -> None:
        """Move to the initial state and run its entry hook."""
        self._set_initial_state()
        self._enter()

    def dispatch(self, event: Any) -> None:
        """Hand ``event`` to the current state."""
        self.current.react(self, event)

    def transit(
        self,
        target: type[State],
        action: Optional[Callable[[], None]] = None,
        condition: Optional[Callable[[], bool]] = None,
    ) -> None:
        """Leave the current state for ``target``.

        ``action`` runs between the exit and entry hooks. When ``condition``
        is given and returns false, nothing happens.
        """
        _check_state_type(target)
        if condition is not None and not condition():
            return
        self.current.exit(self)
        if action is not None:
            action()
        self._current_type = target
        self.current.entry(self)

    def reset(self) -> None:
        """Replace every state instance with a fresh one."""
        self._instances.clear()


class FsmList:
    """A group of state machines started and driven together."""

    def __init__(self, *args: StateMachine) -> None:
        self._machines = tuple(args)

    def __iter__(self):
        return iter(self._machines)

    def __len__(self) -> int:
        return len(self._machines)

    def start(self) -> None:
        """Set every machine's initial state, then run their entry hooks."""
        for machine in self._machines:
            machine._set_initial_state()
        for machine in self._machines:
            machine._enter()

    def dispatch(self, event: Any) -> None:
        """Hand ``event`` to every machine in order."""
        for machine in self._machines:
            machine.dispatch(event)

    def reset(self) -> None:
        """Reset every machine."""
        for machine in self._machines:
            machine.reset()