"""
glfwbind.core.callbacks - Native callback trampolines and their registry.

GLFW stores exactly one C function pointer per event kind (per window, for
window events).  A CallbackRegistry:

    1. Wraps a Python callable in a ctypes thunk with the native signature.
    2. The thunk decodes raw arguments (addresses, event codes, C strings)
       into handles, enums and str before calling the Python callable.
    3. Installs the thunk through the matching glfwSet*Callback entry point.
    4. Keeps the thunk referenced until it is replaced or cleared, so GLFW
       never calls into freed memory.

Trampolines run synchronously on the thread that called into GLFW (the
poll call, or the failing call for errors).  Nothing here spawns threads
or takes locks.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

from glfwbind.config.library import LibraryConfig
from glfwbind.core import native
from glfwbind.core.errors import PreconditionError
from glfwbind.interop.constants import (
    Action,
    ErrorCode,
    Modifier,
    MonitorEvent,
    decode,
)
from glfwbind.interop.handles import Monitor, Window, expect

log = logging.getLogger(__name__)


# ============================================================================
# Event kinds
# ============================================================================
class EventKind(enum.Enum):
    """Callback slots GLFW exposes."""

    # Global slots
    ERROR = "error"
    MONITOR = "monitor"

    # Per-window slots
    WINDOW_POS = "window_pos"
    WINDOW_SIZE = "window_size"
    WINDOW_CLOSE = "window_close"
    WINDOW_REFRESH = "window_refresh"
    WINDOW_FOCUS = "window_focus"
    WINDOW_ICONIFY = "window_iconify"
    FRAMEBUFFER_SIZE = "framebuffer_size"
    KEY = "key"
    CHAR = "char"
    MOUSE_BUTTON = "mouse_button"
    CURSOR_POS = "cursor_pos"
    CURSOR_ENTER = "cursor_enter"
    SCROLL = "scroll"

    @property
    def window_scoped(self) -> bool:
        return _EVENTS[self].window_scoped

    @property
    def setter(self) -> str:
        return _EVENTS[self].setter


# Decoders turn the raw ctypes arguments into the values the Python
# callback receives.  They get the registry's config for string decoding.
Decoder = Callable[..., tuple]


def _window(raw: Optional[int]) -> Window:
    return Window.wrap(raw)


def _decode_error(config: LibraryConfig, code: int, description: Optional[bytes]) -> tuple:
    return (decode(ErrorCode, code), config.decode_text(description))


def _decode_monitor(config: LibraryConfig, monitor: Optional[int], event: int) -> tuple:
    return (Monitor.wrap(monitor), decode(MonitorEvent, event))


def _decode_window(config: LibraryConfig, window: Optional[int]) -> tuple:
    return (_window(window),)


def _decode_window_ints(config: LibraryConfig, window: Optional[int], a: int, b: int) -> tuple:
    return (_window(window), a, b)


def _decode_window_flag(config: LibraryConfig, window: Optional[int], flag: int) -> tuple:
    return (_window(window), bool(flag))


def _decode_window_doubles(
    config: LibraryConfig, window: Optional[int], a: float, b: float
) -> tuple:
    return (_window(window), a, b)


def _decode_key(
    config: LibraryConfig,
    window: Optional[int],
    key: int,
    scancode: int,
    action: int,
    mods: int,
) -> tuple:
    return (_window(window), key, scancode, decode(Action, action), Modifier(mods))


def _decode_char(config: LibraryConfig, window: Optional[int], codepoint: int) -> tuple:
    return (_window(window), chr(codepoint))


def _decode_mouse_button(
    config: LibraryConfig, window: Optional[int], button: int, action: int, mods: int
) -> tuple:
    return (_window(window), button, decode(Action, action), Modifier(mods))


@dataclass(frozen=True, slots=True)
class _EventEntry:
    setter: str
    prototype: Any
    decoder: Decoder
    window_scoped: bool


_EVENTS: dict[EventKind, _EventEntry] = {
    EventKind.ERROR: _EventEntry(
        "glfwSetErrorCallback", native.GLFWerrorfun, _decode_error, False
    ),
    EventKind.MONITOR: _EventEntry(
        "glfwSetMonitorCallback", native.GLFWmonitorfun, _decode_monitor, False
    ),
    EventKind.WINDOW_POS: _EventEntry(
        "glfwSetWindowPosCallback", native.GLFWwindowposfun, _decode_window_ints, True
    ),
    EventKind.WINDOW_SIZE: _EventEntry(
        "glfwSetWindowSizeCallback", native.GLFWwindowsizefun, _decode_window_ints, True
    ),
    EventKind.WINDOW_CLOSE: _EventEntry(
        "glfwSetWindowCloseCallback", native.GLFWwindowclosefun, _decode_window, True
    ),
    EventKind.WINDOW_REFRESH: _EventEntry(
        "glfwSetWindowRefreshCallback", native.GLFWwindowrefreshfun, _decode_window, True
    ),
    EventKind.WINDOW_FOCUS: _EventEntry(
        "glfwSetWindowFocusCallback", native.GLFWwindowfocusfun, _decode_window_flag, True
    ),
    EventKind.WINDOW_ICONIFY: _EventEntry(
        "glfwSetWindowIconifyCallback",
        native.GLFWwindowiconifyfun,
        _decode_window_flag,
        True,
    ),
    EventKind.FRAMEBUFFER_SIZE: _EventEntry(
        "glfwSetFramebufferSizeCallback",
        native.GLFWframebuffersizefun,
        _decode_window_ints,
        True,
    ),
    EventKind.KEY: _EventEntry(
        "glfwSetKeyCallback", native.GLFWkeyfun, _decode_key, True
    ),
    EventKind.CHAR: _EventEntry(
        "glfwSetCharCallback", native.GLFWcharfun, _decode_char, True
    ),
    EventKind.MOUSE_BUTTON: _EventEntry(
        "glfwSetMouseButtonCallback",
        native.GLFWmousebuttonfun,
        _decode_mouse_button,
        True,
    ),
    EventKind.CURSOR_POS: _EventEntry(
        "glfwSetCursorPosCallback", native.GLFWcursorposfun, _decode_window_doubles, True
    ),
    EventKind.CURSOR_ENTER: _EventEntry(
        "glfwSetCursorEnterCallback", native.GLFWcursorenterfun, _decode_window_flag, True
    ),
    EventKind.SCROLL: _EventEntry(
        "glfwSetScrollCallback", native.GLFWscrollfun, _decode_window_doubles, True
    ),
}


# ============================================================================
# Registry
# ============================================================================
SlotKey = tuple[EventKind, Optional[Window]]


@dataclass(frozen=True, slots=True)
class Slot:
    """An installed trampoline."""

    kind: EventKind
    window: Optional[Window]
    callback: Callable[..., Any]
    thunk: Any


class CallbackRegistry:
    """
    Owns every trampoline installed into one GLFW library instance.

    Each slot is keyed by (kind, window); window is None for the global
    kinds (ERROR, MONITOR).  Registering a callback replaces whatever the
    slot held; registering None clears it.
    """

    def __init__(self, lib: Any, config: Optional[LibraryConfig] = None) -> None:
        self._lib = lib
        self._config = config if config is not None else LibraryConfig()
        self._slots: dict[SlotKey, Slot] = {}

    # ------------------------------------------------------------------
    # Public: registration
    # ------------------------------------------------------------------
    def register(
        self,
        kind: EventKind,
        callback: Optional[Callable[..., Any]],
        window: Optional[Window] = None,
    ) -> None:
        """
        Install *callback* as the only handler of *kind* (for *window*).

        Args:
            kind:     Event kind to register.
            callback: Python callable, or None to clear the slot.
            window:   Required for window-scoped kinds, forbidden otherwise.

        Raises:
            PreconditionError: *window* does not match the kind's scope.
        """
        entry = _EVENTS[kind]
        key = self._slot_key(kind, window)

        if callback is None:
            self._install(entry, key, None)
            old = self._slots.pop(key, None)
            if old is not None:
                log.debug("Callback cleared: %s", self._describe(key))
            return

        thunk = entry.prototype(self._trampoline(kind, entry, callback))

        # The new thunk goes in before the old one is dropped
        self._install(entry, key, thunk)
        old = self._slots.get(key)
        self._slots[key] = Slot(kind, key[1], callback, thunk)

        if old is None:
            log.debug("Callback registered: %s", self._describe(key))
        else:
            log.debug("Callback replaced: %s", self._describe(key))

    def unregister(self, kind: EventKind, window: Optional[Window] = None) -> bool:
        """Clear a slot.  Returns True if it was active."""
        active = self.is_active(kind, window)
        self.register(kind, None, window)
        return active

    # ------------------------------------------------------------------
    # Public: lifetime hooks
    # ------------------------------------------------------------------
    def discard(self, kind: EventKind, window: Optional[Window] = None) -> bool:
        """
        Drop a slot without calling into native code.

        Used when the native setter is known to have ignored the thunk
        (e.g. the monitor callback before glfwInit).  Returns True if the
        slot was active.
        """
        slot = self._slots.pop(self._slot_key(kind, window), None)
        if slot is not None:
            log.debug("Callback discarded: %s", self._describe((slot.kind, slot.window)))
        return slot is not None

    def release_window(self, window: Window) -> int:
        """
        Drop every slot of a destroyed window.

        GLFW never invokes the callbacks of a destroyed window, so the
        thunks can be released without touching native state.

        Returns:
            Number of slots released.
        """
        keys = [key for key in self._slots if key[1] == window]
        for key in keys:
            del self._slots[key]
        if keys:
            log.debug("Released %d callbacks of %r", len(keys), window)
        return len(keys)

    def release_all(self, keep: tuple[EventKind, ...] = (EventKind.ERROR,)) -> int:
        """
        Drop every slot except the kinds in *keep*.

        Called after glfwTerminate, which forgets all callbacks except the
        error callback.
        """
        keys = [key for key in self._slots if key[0] not in keep]
        for key in keys:
            del self._slots[key]
        if keys:
            log.debug("Released %d callbacks", len(keys))
        return len(keys)

    # ------------------------------------------------------------------
    # Public: introspection
    # ------------------------------------------------------------------
    def is_active(self, kind: EventKind, window: Optional[Window] = None) -> bool:
        return self._slot_key(kind, window) in self._slots

    def get(self, kind: EventKind, window: Optional[Window] = None) -> Optional[Slot]:
        return self._slots.get(self._slot_key(kind, window))

    def thunk_for(self, kind: EventKind, window: Optional[Window] = None) -> Any:
        """The ctypes thunk currently installed for a slot, or None."""
        slot = self.get(kind, window)
        return slot.thunk if slot is not None else None

    @property
    def slots(self) -> list[Slot]:
        return list(self._slots.values())

    def __len__(self) -> int:
        return len(self._slots)

    def dump_state(self) -> str:
        """Return a formatted string of all active slots."""
        lines = [f"=== CallbackRegistry: {len(self._slots)} active slots ===", ""]
        for key, slot in self._slots.items():
            name = getattr(slot.callback, "__qualname__", repr(slot.callback))
            lines.append(f"  {self._describe(key):<40s} -> {name}")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    @staticmethod
    def _slot_key(kind: EventKind, window: Optional[Window]) -> SlotKey:
        if _EVENTS[kind].window_scoped:
            expect(window, Window)
            return (kind, window)
        if window is not None:
            raise PreconditionError(f"{kind.name} callbacks are not per-window")
        return (kind, None)

    def _install(self, entry: _EventEntry, key: SlotKey, thunk: Any) -> None:
        setter = getattr(self._lib, entry.setter)
        window = key[1]
        if window is None:
            setter(thunk)
        else:
            setter(window.address, thunk)

    def _trampoline(
        self, kind: EventKind, entry: _EventEntry, callback: Callable[..., Any]
    ) -> Callable[..., None]:
        config = self._config
        decoder = entry.decoder

        def trampoline(*raw: Any) -> None:
            # Exceptions cannot cross back into C; log and return
            try:
                args = decoder(config, *raw)
                callback(*args)
            except Exception:
                log.exception("Error in %s callback %r", kind.value, callback)

        return trampoline

    @staticmethod
    def _describe(key: SlotKey) -> str:
        kind, window = key
        if window is None:
            return kind.value
        return f"{kind.value} {window!r}"
