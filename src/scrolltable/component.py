"""
Base class for widgets a host redraws on demand.

A host that composes several widgets treats each one the same way: ask for
its lines at a given width, feed it key presses, and skip the redraw while
nothing has changed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from scrolltable.keys import Key


class Component(ABC):
    """
    A widget that renders to pre-styled lines and tracks whether it changed.

    Subclasses call :meth:`invalidate` whenever their output would differ
    and clear the flag in :meth:`render`.
    """

    def __init__(self) -> None:
        self._dirty: bool = True

    @abstractmethod
    def render(self, width: int) -> list[str]:
        """Return the widget's lines, none wider than *width* display columns."""
        ...

    def handle_input(self, key: Key) -> bool:
        """Handle a key press; return ``True`` if it was consumed."""
        return False

    def invalidate(self) -> None:
        self._dirty = True

    @property
    def dirty(self) -> bool:
        """Whether the output changed since the last :meth:`render`."""
        return self._dirty
