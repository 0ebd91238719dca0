from __future__ import annotations

from collections.abc import Mapping

from domain.types import Action

DEFAULT_KEYMAP: Mapping[str, Action] = {"q": "cross", "w": "block", "e": "jab"}


def map_key(key: str | None, keymap: Mapping[str, Action] = DEFAULT_KEYMAP) -> Action:
    """None means the response window elapsed. Unknown keys are treated the same."""
    if key is None:
        return "none"
    return keymap.get(key, "none")


def response_keys(keymap: Mapping[str, Action] = DEFAULT_KEYMAP) -> tuple[str, ...]:
    return tuple(keymap)
