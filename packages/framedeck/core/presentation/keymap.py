"""Keyboard bindings for presentation commands.

Bindings are matched by priority (highest first); the first binding whose
test accepts the event wins. Stop has the highest priority so Escape always
ends a running presentation, whatever else is bound to it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Key(str, Enum):
    """Key names understood by the presentation bindings."""

    ESCAPE = "Escape"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    SPACE = " "


class PresentationCommand(str, Enum):
    """Commands the presentation controller can run."""

    START = "start"
    STOP = "stop"
    NEXT = "next"
    PREVIOUS = "previous"


class KeyEvent(BaseModel):
    """A key press as delivered by the host UI."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str
    shift: bool = False

    @classmethod
    def parse(cls, token: str) -> KeyEvent:
        """Parse a key token such as "ArrowRight", "Space" or "Shift+Space"."""
        token = token.strip()
        shift = False
        if token.lower().startswith("shift+"):
            shift = True
            token = token[len("shift+") :]
        if token.lower() in ("space", "spacebar"):
            token = Key.SPACE.value
        elif token.lower() in ("esc", "escape"):
            token = Key.ESCAPE.value
        return cls(key=token, shift=shift)


@dataclass(frozen=True)
class KeyBinding:
    """Key binding registration"""

    command: PresentationCommand
    priority: int
    test: Callable[[KeyEvent, bool], bool]


DEFAULT_BINDINGS: tuple[KeyBinding, ...] = (
    KeyBinding(
        PresentationCommand.STOP,
        priority=100,
        test=lambda event, active: active and event.key == Key.ESCAPE.value,
    ),
    KeyBinding(
        PresentationCommand.NEXT,
        priority=0,
        test=lambda event, active: active
        and (
            event.key == Key.ARROW_RIGHT.value
            or (event.key == Key.SPACE.value and not event.shift)
        ),
    ),
    KeyBinding(
        PresentationCommand.PREVIOUS,
        priority=0,
        test=lambda event, active: active
        and (
            event.key == Key.ARROW_LEFT.value or (event.key == Key.SPACE.value and event.shift)
        ),
    ),
)


def resolve_command(
    event: KeyEvent,
    active: bool,
    bindings: tuple[KeyBinding, ...] = DEFAULT_BINDINGS,
) -> PresentationCommand | None:
    """Pick the command bound to a key press.

    Args:
        event: Key press
        active: Whether a presentation is running
        bindings: Bindings to match against

    Returns:
        Highest-priority matching command, or None if the key is unbound
    """
    for binding in sorted(bindings, key=lambda b: b.priority, reverse=True):
        if binding.test(event, active):
            return binding.command
    return None


__all__ = [
    "DEFAULT_BINDINGS",
    "Key",
    "KeyBinding",
    "KeyEvent",
    "PresentationCommand",
    "resolve_command",
]
