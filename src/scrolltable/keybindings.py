"""
Keybinding management.

Maps the table's logical navigation actions to key descriptors and
supports user overrides loaded from a YAML file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from scrolltable.keys import Key
from scrolltable.logging import get_logger

logger = get_logger("keybindings")

# ---------------------------------------------------------------------------
# Default keybinding map
# ---------------------------------------------------------------------------

DEFAULT_KEYBINDINGS: dict[str, list[str]] = {
    "up": ["up"],
    "down": ["down"],
    "page_up": ["page_up"],
    "page_down": ["page_down"],
    "home": ["home"],
    "end": ["end"],
    "left": ["left"],
    "right": ["right"],
}

ACTION_HELP: dict[str, str] = {
    "up": "up",
    "down": "down",
    "page_up": "page up",
    "page_down": "page down",
    "home": "top",
    "end": "bottom",
    "left": "left",
    "right": "right",
}

_KEY_LABELS: dict[str, str] = {
    "up": "↑",
    "down": "↓",
    "left": "←",
    "right": "→",
    "page_up": "pgup",
    "page_down": "pgdown",
}


# ---------------------------------------------------------------------------
# Descriptor normalisation
# ---------------------------------------------------------------------------

def _normalise_key_descriptor(descriptor: str) -> str:
    """
    Normalise a human-readable key descriptor to a canonical form.

    ``"Ctrl+Shift+Up"`` -> ``"ctrl+shift+up"``
    """
    if len(descriptor) == 1:
        return descriptor
    *modifiers, base = [p.strip() for p in descriptor.split("+")]
    return "+".join(sorted(m.lower() for m in modifiers) + [_normalise_base(base)])


def _normalise_base(base: str) -> str:
    # Single characters keep their case so "J" and "j" stay distinct.
    return base if len(base) == 1 else base.lower()


def _key_to_descriptor(key: Key) -> str:
    """
    Convert a parsed :class:`Key` into a canonical descriptor string.

    >>> _key_to_descriptor(Key(name="up", ctrl=True))
    'ctrl+up'
    >>> _key_to_descriptor(Key(name="ctrl+a", char="a", ctrl=True))
    'ctrl+a'
    """
    modifiers = {
        name
        for name, held in (("ctrl", key.ctrl), ("alt", key.alt), ("shift", key.shift))
        if held
    }
    base = key.name
    # Ctrl+letter keys carry the modifier in their name already.
    if len(base) > 1 and "+" in base:
        base = base.rsplit("+", 1)[-1]
    return "+".join(sorted(modifiers) + [_normalise_base(base)])


# ---------------------------------------------------------------------------
# Manager
# ---------------------------------------------------------------------------

class KeybindingsManager:
    """
    Maps logical action names to key descriptors.

    Parameters
    ----------
    user_overrides:
        Optional mapping of action names to key descriptor lists that
        replace the defaults for those actions.
    """

    def __init__(self, user_overrides: dict[str, list[str]] | None = None) -> None:
        self._bindings: dict[str, list[str]] = {
            action: list(keys) for action, keys in DEFAULT_KEYBINDINGS.items()
        }
        if user_overrides:
            self._bindings.update(user_overrides)

        self._normalised: dict[str, list[str]] = {
            action: [_normalise_key_descriptor(d) for d in descriptors]
            for action, descriptors in self._bindings.items()
        }

    @classmethod
    def load(cls, config_path: str | Path) -> KeybindingsManager:
        """
        Load overrides from a YAML file mapping actions to key lists::

            down: [down, j, ctrl+n]
            up: [up, k, ctrl+p]

        A missing or malformed file falls back to the defaults.
        """
        path = Path(config_path)
        overrides: dict[str, list[str]] | None = None

        if path.is_file():
            try:
                raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
            except (yaml.YAMLError, OSError) as exc:
                logger.debug("Ignoring keybindings file %s: %s", path, exc)
            else:
                overrides = _coerce_overrides(raw)

        return cls(user_overrides=overrides)

    # ------------------------------------------------------------------
    # Querying
    # ------------------------------------------------------------------

    def matches(self, key: Key | str, action: str) -> bool:
        """Test whether *key* (a ``Key`` or a descriptor) is bound to *action*."""
        descriptors = self._normalised.get(action)
        if descriptors is None:
            return False

        if isinstance(key, str):
            normalised = _normalise_key_descriptor(key)
        else:
            normalised = _key_to_descriptor(key)

        return normalised in descriptors

    def find_action(self, key: Key | str) -> str | None:
        """Return the first action bound to *key*, in insertion order."""
        for action in self._bindings:
            if self.matches(key, action):
                return action
        return None

    def get_keys(self, action: str) -> list[str]:
        """Return the descriptors bound to *action*, as configured."""
        return list(self._bindings.get(action, []))

    def actions(self) -> list[str]:
        return list(self._bindings.keys())

    def help_entries(self) -> list[tuple[str, str]]:
        """
        Return ``(keys, description)`` pairs for a help bar.

        >>> KeybindingsManager().help_entries()[0]
        ('↑', 'up')
        """
        entries: list[tuple[str, str]] = []
        for action, descriptors in self._bindings.items():
            if not descriptors:
                continue
            label = "/".join(_KEY_LABELS.get(d, d) for d in descriptors)
            entries.append((label, ACTION_HELP.get(action, action.replace("_", " "))))
        return entries


def _coerce_overrides(raw: Any) -> dict[str, list[str]] | None:
    if not isinstance(raw, dict):
        return None
    overrides: dict[str, list[str]] = {}
    for action, val in raw.items():
        if isinstance(val, str):
            overrides[str(action)] = [val]
        elif isinstance(val, list) and all(isinstance(v, str) for v in val):
            overrides[str(action)] = val
    return overrides
