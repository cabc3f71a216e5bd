"""
glfwbind.core.hints - Window hint normalization.

Hints are pending state inside GLFW: every glfwWindowHint call updates the
configuration used by the next glfwCreateWindow, after which GLFW resets
them to their defaults.  The binding does not mirror that state; it only
normalizes values before forwarding them.

Negative integer policy:
    CONTEXT_VERSION_MAJOR -> 1  (GLFW's documented default)
    CONTEXT_VERSION_MINOR -> 0  (GLFW's documented default)
    any other integer hint -> DONT_CARE (-1)
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Union

from glfwbind.interop.constants import (
    BOOLEAN_HINTS,
    DONT_CARE,
    INTEGER_HINTS,
    WindowHint,
    encode,
)

log = logging.getLogger(__name__)

# Integer hints with a fixed default instead of DONT_CARE
VERSION_HINT_DEFAULTS: dict[WindowHint, int] = {
    WindowHint.CONTEXT_VERSION_MAJOR: 1,
    WindowHint.CONTEXT_VERSION_MINOR: 0,
}

HintValue = Union[bool, int, enum.Enum]


def normalize_hint(key: Union[WindowHint, int], value: HintValue) -> int:
    """
    Return the integer that should be forwarded for *key* = *value*.

    Keys outside WindowHint and values of unknown hints pass through
    unchanged; GLFW reports INVALID_ENUM / INVALID_VALUE for those.
    """
    raw = encode(value)

    try:
        hint = WindowHint(encode(key))
    except ValueError:
        return raw

    if hint in INTEGER_HINTS and not isinstance(value, (bool, enum.Enum)) and raw < 0:
        return VERSION_HINT_DEFAULTS.get(hint, DONT_CARE)

    return raw


class WindowHintBuilder:
    """
    Forwards window hints to the native library after normalization.

    Usage:
        hints = WindowHintBuilder(lib)
        hints.set_hint(WindowHint.CONTEXT_VERSION_MAJOR, 3)
        hints.set_hint(WindowHint.RESIZABLE, False)
    """

    def __init__(self, lib: Any) -> None:
        self._lib = lib

    def set_hint(self, key: Union[WindowHint, int], value: HintValue) -> int:
        """
        Record a hint for the next window creation.

        Returns:
            The integer actually passed to glfwWindowHint.
        """
        forwarded = normalize_hint(key, value)
        raw_key = encode(key)
        if forwarded != encode(value):
            log.debug(
                "Hint %s=%r normalized to %d", _hint_name(raw_key), value, forwarded
            )
        elif raw_key in BOOLEAN_HINTS or isinstance(value, bool):
            log.debug("Hint %s=%s", _hint_name(raw_key), bool(value))
        else:
            log.debug("Hint %s=%d", _hint_name(raw_key), forwarded)

        self._lib.glfwWindowHint(raw_key, forwarded)
        return forwarded

    def set_hints(self, hints: dict[Union[WindowHint, int], HintValue]) -> None:
        """Apply several hints in insertion order."""
        for key, value in hints.items():
            self.set_hint(key, value)

    def defaults(self) -> None:
        """Reset every hint to its default (glfwDefaultWindowHints)."""
        log.debug("Hints reset to defaults")
        self._lib.glfwDefaultWindowHints()


def _hint_name(raw_key: int) -> str:
    try:
        return WindowHint(raw_key).name
    except ValueError:
        return f"{raw_key:#x}"
