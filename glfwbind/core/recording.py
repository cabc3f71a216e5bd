"""
glfwbind.core.recording - RecordingProvider: an in-memory GLFW stand-in.

Implements the same C entry points as the real library (see
glfwbind.core.provider) with the same calling semantics, so the binding's
marshaling and trampoline code runs unchanged against it:

    - Arrays are returned as real native buffers plus a count written
      through the out-parameter, and are reused on the next call.
    - Callbacks are stored as the ctypes function pointers the binding
      installed and invoked through them.
    - Errors are reported through the installed error callback while the
      failing call is still running, never as return values.
    - Window events are queued and delivered only by glfwPollEvents /
      glfwWaitEvents, on the calling thread.

Every call is appended to ``calls`` as (name, args).
"""

from __future__ import annotations

import ctypes
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Optional

from glfwbind.interop.constants import (
    DEFAULT_HINTS,
    FALSE,
    TRUE,
    ErrorCode,
    MonitorEvent,
    WindowAttrib,
    WindowHint,
)
from glfwbind.interop.structs import (
    GAMMA_RAMP_SIZE,
    GLFWgammaramp,
    GLFWvidmode,
    GammaRamp,
    NativeGammaRamp,
    VideoMode,
    cast_address,
)

log = logging.getLogger(__name__)

VERSION = (3, 1, 2)

# Frame extents reported for decorated windowed-mode windows
DECORATED_FRAME = (4, 24, 4, 4)

DEFAULT_MODES = (
    VideoMode(1280, 720, 8, 8, 8, 60),
    VideoMode(1920, 1080, 8, 8, 8, 60),
)

# Largest value glfwSetTime accepts
_MAX_TIME = 18446744073.0

_ERROR_SLOT = ("glfwSetErrorCallback", 0)
_MONITOR_SLOT = ("glfwSetMonitorCallback", 0)


def gamma_to_ramp(gamma: float) -> GammaRamp:
    """The ramp glfwSetGamma generates for an exponent."""
    samples = []
    for i in range(GAMMA_RAMP_SIZE):
        value = (i / (GAMMA_RAMP_SIZE - 1)) ** (1.0 / gamma) * 65535 + 0.5
        samples.append(min(int(value), 65535))
    channel = tuple(samples)
    return GammaRamp(channel, channel, channel)


# ============================================================================
# Simulated native objects
# ============================================================================
@dataclass
class FakeMonitor:
    address: int
    name: str
    modes: list[VideoMode]
    position: tuple[int, int] = (0, 0)
    physical_size: tuple[int, int] = (520, 290)
    current_mode: int = -1
    gamma: GammaRamp = field(default_factory=GammaRamp.linear)

    # Buffers handed out to the caller; valid until the next query
    mode_buffer: Any = None
    current_buffer: Any = None
    gamma_buffer: Optional[NativeGammaRamp] = None


@dataclass
class FakeWindow:
    address: int
    title: str
    size: tuple[int, int]
    position: tuple[int, int] = (0, 0)
    monitor: int = 0
    share: int = 0
    should_close: bool = False
    user_pointer: int = 0
    attribs: dict[int, int] = field(default_factory=dict)

    @property
    def frame_size(self) -> tuple[int, int, int, int]:
        if self.monitor or not self.attribs.get(WindowAttrib.DECORATED):
            return (0, 0, 0, 0)
        return DECORATED_FRAME


# ============================================================================
# RecordingProvider
# ============================================================================
class RecordingProvider:
    """
    In-memory GLFW.  Starts uninitialized with two monitors connected.

    Usage:
        lib = RecordingProvider()
        glfw = Glfw(lib)
        glfw.init()
        lib.queue_event("glfwSetWindowPosCallback", win.address, 10, 20)
        glfw.poll_events()
    """

    def __init__(self, monitor_count: int = 2) -> None:
        self.calls: list[tuple[str, tuple]] = []
        self.errors: list[tuple[int, str]] = []
        self.initialized: bool = False
        self.fail_init: bool = False

        self._next_address = 0x10000
        self._monitors: list[FakeMonitor] = []
        self._windows: dict[int, FakeWindow] = {}
        self._hints: dict[int, int] = _default_hints()
        self._callbacks: dict[tuple[str, int], Any] = {}
        self._pending: deque[tuple[str, int, tuple]] = deque()
        self._monitor_array: Any = None
        self._current_context: int = 0
        self._swap_interval: int = 0
        self._time: float = 0.0

        for i in range(monitor_count):
            self.add_monitor(f"Recording Monitor {i + 1}", position=(1920 * i, 0))

    # ------------------------------------------------------------------
    # Test helpers (not part of the C interface)
    # ------------------------------------------------------------------
    @property
    def monitors(self) -> list[FakeMonitor]:
        return list(self._monitors)

    @property
    def windows(self) -> dict[int, FakeWindow]:
        return dict(self._windows)

    @property
    def hints(self) -> dict[int, int]:
        return dict(self._hints)

    @property
    def pending_events(self) -> int:
        return len(self._pending)

    def installed(self, setter: str, window: int = 0) -> Any:
        """The function pointer stored for a callback slot, or None."""
        return self._callbacks.get((setter, window))

    def call_names(self) -> list[str]:
        return [name for name, _args in self.calls]

    def add_monitor(
        self,
        name: str,
        modes: Optional[list[VideoMode]] = None,
        position: tuple[int, int] = (0, 0),
        physical_size: tuple[int, int] = (520, 290),
    ) -> int:
        """Connect a monitor.  Queues CONNECTED once the library is initialized."""
        monitor = FakeMonitor(
            address=self._allocate(),
            name=name,
            modes=list(modes if modes is not None else DEFAULT_MODES),
            position=position,
            physical_size=physical_size,
        )
        self._monitors.append(monitor)
        if self.initialized:
            self._pending.append(
                ("glfwSetMonitorCallback", 0, (monitor.address, MonitorEvent.CONNECTED))
            )
        return monitor.address

    def disconnect_monitor(self, address: int) -> None:
        """Unplug a monitor.  Queues DISCONNECTED once the library is initialized."""
        self._monitors = [m for m in self._monitors if m.address != address]
        for window in self._windows.values():
            if window.monitor == address:
                window.monitor = 0
        if self.initialized:
            self._pending.append(
                ("glfwSetMonitorCallback", 0, (address, MonitorEvent.DISCONNECTED))
            )

    def queue_event(self, setter: str, window: int, *args: Any) -> None:
        """Queue a raw window event for the next poll."""
        self._pending.append((setter, window, args))

    def request_close(self, window: int) -> None:
        """Simulate the user clicking the close button."""
        self._pending.append(("__close__", window, ()))

    def raise_error(self, code: int, description: str) -> None:
        """Report an error through the installed error callback now."""
        self._error(code, description)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def _allocate(self) -> int:
        address = self._next_address
        self._next_address += 0x100
        return address

    def _error(self, code: int, description: str) -> None:
        self.errors.append((int(code), description))
        log.debug("Reporting error %#x: %s", int(code), description)
        callback = self._callbacks.get(_ERROR_SLOT)
        if callback is not None:
            callback(int(code), description.encode("utf-8"))

    def _require_init(self) -> bool:
        if not self.initialized:
            self._error(ErrorCode.NOT_INITIALIZED, "The GLFW library is not initialized")
            return False
        return True

    def _monitor(self, address: Optional[int]) -> FakeMonitor:
        for monitor in self._monitors:
            if monitor.address == address:
                return monitor
        raise LookupError(f"Unknown monitor {address!r}")

    def _window(self, address: Optional[int]) -> FakeWindow:
        try:
            return self._windows[address or 0]
        except KeyError:
            raise LookupError(f"Unknown window {address!r}") from None

    def _set_slot(self, setter: str, window: Optional[int], cbfun: Any) -> Any:
        key = (setter, window or 0)
        previous = self._callbacks.get(key)
        if cbfun is None:
            self._callbacks.pop(key, None)
        else:
            self._callbacks[key] = cbfun
        return previous

    def _deliver(self, setter: str, window: int, args: tuple) -> None:
        if setter == "__close__":
            target = self._windows.get(window)
            if target is None:
                return
            target.should_close = True
            setter, args = "glfwSetWindowCloseCallback", ()

        if window and window not in self._windows:
            return

        callback = self._callbacks.get((setter, window))
        if callback is None:
            return
        if window:
            callback(window, *args)
        else:
            callback(*args)

    # ------------------------------------------------------------------
    # Initialization and version
    # ------------------------------------------------------------------
    def glfwInit(self) -> int:
        self._record("glfwInit")
        if self.fail_init:
            self._error(ErrorCode.PLATFORM_ERROR, "Recording provider refused to start")
            return FALSE
        self.initialized = True
        return TRUE

    def glfwTerminate(self) -> None:
        self._record("glfwTerminate")
        if not self.initialized:
            return
        for address in list(self._windows):
            self._destroy(address)
        error_callback = self._callbacks.get(_ERROR_SLOT)
        self._callbacks.clear()
        if error_callback is not None:
            self._callbacks[_ERROR_SLOT] = error_callback
        self._pending.clear()
        self._hints = _default_hints()
        self._current_context = 0
        self.initialized = False

    def glfwGetVersion(self, major: Any, minor: Any, rev: Any) -> None:
        self._record("glfwGetVersion")
        for ptr, value in zip((major, minor, rev), VERSION):
            if ptr:
                ptr[0] = value

    def glfwGetVersionString(self) -> bytes:
        self._record("glfwGetVersionString")
        return ("%d.%d.%d Recording" % VERSION).encode("ascii")

    def glfwSetErrorCallback(self, cbfun: Any) -> Any:
        self._record("glfwSetErrorCallback", cbfun)
        return self._set_slot("glfwSetErrorCallback", 0, cbfun)

    # ------------------------------------------------------------------
    # Monitors
    # ------------------------------------------------------------------
    def glfwGetMonitors(self, count: Any) -> Any:
        self._record("glfwGetMonitors")
        count[0] = 0
        if not self._require_init() or not self._monitors:
            return None

        addresses = [m.address for m in self._monitors]
        self._monitor_array = (ctypes.c_void_p * len(addresses))(*addresses)
        count[0] = len(addresses)
        return ctypes.cast(self._monitor_array, ctypes.POINTER(ctypes.c_void_p))

    def glfwGetPrimaryMonitor(self) -> Optional[int]:
        self._record("glfwGetPrimaryMonitor")
        if not self._require_init() or not self._monitors:
            return None
        return self._monitors[0].address

    def glfwGetMonitorPos(self, monitor: Optional[int], xpos: Any, ypos: Any) -> None:
        self._record("glfwGetMonitorPos", monitor)
        xpos[0] = ypos[0] = 0
        if not self._require_init():
            return
        xpos[0], ypos[0] = self._monitor(monitor).position

    def glfwGetMonitorPhysicalSize(
        self, monitor: Optional[int], width: Any, height: Any
    ) -> None:
        self._record("glfwGetMonitorPhysicalSize", monitor)
        width[0] = height[0] = 0
        if not self._require_init():
            return
        width[0], height[0] = self._monitor(monitor).physical_size

    def glfwGetMonitorName(self, monitor: Optional[int]) -> Optional[bytes]:
        self._record("glfwGetMonitorName", monitor)
        if not self._require_init():
            return None
        return self._monitor(monitor).name.encode("utf-8")

    def glfwSetMonitorCallback(self, cbfun: Any) -> Any:
        self._record("glfwSetMonitorCallback", cbfun)
        if not self._require_init():
            return None
        return self._set_slot("glfwSetMonitorCallback", 0, cbfun)

    def glfwGetVideoModes(self, monitor: Optional[int], count: Any) -> Any:
        self._record("glfwGetVideoModes", monitor)
        count[0] = 0
        if not self._require_init():
            return None

        target = self._monitor(monitor)
        if not target.modes:
            return None
        target.mode_buffer = (GLFWvidmode * len(target.modes))(
            *(mode.to_native() for mode in target.modes)
        )
        count[0] = len(target.modes)
        return ctypes.cast(target.mode_buffer, ctypes.POINTER(GLFWvidmode))

    def glfwGetVideoMode(self, monitor: Optional[int]) -> Any:
        self._record("glfwGetVideoMode", monitor)
        if not self._require_init():
            return None

        target = self._monitor(monitor)
        if not target.modes:
            return None
        target.current_buffer = target.modes[target.current_mode].to_native()
        return ctypes.pointer(target.current_buffer)

    def glfwSetGamma(self, monitor: Optional[int], gamma: float) -> None:
        self._record("glfwSetGamma", monitor, gamma)
        if not self._require_init():
            return
        if not gamma > 0.0:
            self._error(ErrorCode.INVALID_VALUE, "Gamma value must be greater than zero")
            return
        self._monitor(monitor).gamma = gamma_to_ramp(gamma)

    def glfwGetGammaRamp(self, monitor: Optional[int]) -> Any:
        self._record("glfwGetGammaRamp", monitor)
        if not self._require_init():
            return None

        target = self._monitor(monitor)
        ramp = target.gamma
        target.gamma_buffer = NativeGammaRamp(ramp.red, ramp.green, ramp.blue)
        return target.gamma_buffer.pointer()

    def glfwSetGammaRamp(self, monitor: Optional[int], ramp: Any) -> None:
        self._record("glfwSetGammaRamp", monitor)
        if not self._require_init():
            return

        native_ramp = cast_address(ramp, GLFWgammaramp).contents
        size = native_ramp.size
        if size != GAMMA_RAMP_SIZE:
            self._error(ErrorCode.PLATFORM_ERROR, "Gamma ramp size must match current ramp size")
            return
        self._monitor(monitor).gamma = GammaRamp(
            tuple(native_ramp.red[:size]),
            tuple(native_ramp.green[:size]),
            tuple(native_ramp.blue[:size]),
        )

    # ------------------------------------------------------------------
    # Window hints and lifecycle
    # ------------------------------------------------------------------
    def glfwDefaultWindowHints(self) -> None:
        self._record("glfwDefaultWindowHints")
        if not self._require_init():
            return
        self._hints = _default_hints()

    def glfwWindowHint(self, hint: int, value: int) -> None:
        self._record("glfwWindowHint", hint, value)
        if not self._require_init():
            return
        if hint not in self._hints:
            self._error(ErrorCode.INVALID_ENUM, "Invalid window hint %#x" % hint)
            return
        self._hints[hint] = value

    def glfwCreateWindow(
        self,
        width: int,
        height: int,
        title: bytes,
        monitor: Optional[int],
        share: Optional[int],
    ) -> Optional[int]:
        self._record("glfwCreateWindow", width, height, title, monitor, share)
        if not self._require_init():
            return None
        if width <= 0 or height <= 0:
            self._error(ErrorCode.INVALID_VALUE, "Invalid window size")
            return None
        if share and share not in self._windows:
            self._error(ErrorCode.INVALID_VALUE, "Invalid share window")
            return None

        hints = self._hints
        window = FakeWindow(
            address=self._allocate(),
            title=title.decode("utf-8"),
            size=(width, height),
            monitor=monitor or 0,
            share=share or 0,
        )
        if monitor:
            window.position = self._monitor(monitor).position

        visible = hints[WindowHint.VISIBLE]
        window.attribs = {
            WindowAttrib.FOCUSED: TRUE if visible and hints[WindowHint.FOCUSED] else FALSE,
            WindowAttrib.ICONIFIED: FALSE,
            WindowAttrib.RESIZABLE: hints[WindowHint.RESIZABLE],
            WindowAttrib.VISIBLE: visible,
            WindowAttrib.DECORATED: hints[WindowHint.DECORATED],
            WindowAttrib.FLOATING: hints[WindowHint.FLOATING],
            WindowAttrib.OPENGL_FORWARD_COMPAT: hints[WindowHint.OPENGL_FORWARD_COMPAT],
            WindowAttrib.OPENGL_DEBUG_CONTEXT: hints[WindowHint.OPENGL_DEBUG_CONTEXT],
        }
        self._windows[window.address] = window

        # Hints only apply to the window they were set for
        self._hints = _default_hints()
        return window.address

    def _destroy(self, address: int) -> None:
        self._windows.pop(address, None)
        for key in [k for k in self._callbacks if k[1] == address]:
            del self._callbacks[key]
        self._pending = deque(e for e in self._pending if e[1] != address)
        if self._current_context == address:
            self._current_context = 0

    def glfwDestroyWindow(self, window: Optional[int]) -> None:
        self._record("glfwDestroyWindow", window)
        if not window:
            return
        self._destroy(window)

    def glfwWindowShouldClose(self, window: Optional[int]) -> int:
        self._record("glfwWindowShouldClose", window)
        return TRUE if self._window(window).should_close else FALSE

    def glfwSetWindowShouldClose(self, window: Optional[int], value: int) -> None:
        self._record("glfwSetWindowShouldClose", window, value)
        self._window(window).should_close = bool(value)

    def glfwSetWindowTitle(self, window: Optional[int], title: bytes) -> None:
        self._record("glfwSetWindowTitle", window, title)
        self._window(window).title = title.decode("utf-8")

    # ------------------------------------------------------------------
    # Window geometry and state
    # ------------------------------------------------------------------
    def glfwGetWindowPos(self, window: Optional[int], xpos: Any, ypos: Any) -> None:
        self._record("glfwGetWindowPos", window)
        xpos[0], ypos[0] = self._window(window).position

    def glfwSetWindowPos(self, window: Optional[int], xpos: int, ypos: int) -> None:
        self._record("glfwSetWindowPos", window, xpos, ypos)
        target = self._window(window)
        if target.monitor:
            return
        if target.position != (xpos, ypos):
            target.position = (xpos, ypos)
            self.queue_event("glfwSetWindowPosCallback", target.address, xpos, ypos)

    def glfwGetWindowSize(self, window: Optional[int], width: Any, height: Any) -> None:
        self._record("glfwGetWindowSize", window)
        width[0], height[0] = self._window(window).size

    def glfwSetWindowSize(self, window: Optional[int], width: int, height: int) -> None:
        self._record("glfwSetWindowSize", window, width, height)
        target = self._window(window)
        if target.size != (width, height):
            target.size = (width, height)
            self.queue_event("glfwSetWindowSizeCallback", target.address, width, height)
            self.queue_event(
                "glfwSetFramebufferSizeCallback", target.address, width, height
            )

    def glfwGetFramebufferSize(
        self, window: Optional[int], width: Any, height: Any
    ) -> None:
        self._record("glfwGetFramebufferSize", window)
        width[0], height[0] = self._window(window).size

    def glfwGetWindowFrameSize(
        self, window: Optional[int], left: Any, top: Any, right: Any, bottom: Any
    ) -> None:
        self._record("glfwGetWindowFrameSize", window)
        extents = self._window(window).frame_size
        for ptr, value in zip((left, top, right, bottom), extents):
            if ptr:
                ptr[0] = value

    def _set_attrib(self, window: Optional[int], attrib: int, value: int, event: str) -> None:
        target = self._window(window)
        if target.attribs.get(attrib) == value:
            return
        target.attribs[attrib] = value
        if event:
            self.queue_event(event, target.address, value)

    def glfwIconifyWindow(self, window: Optional[int]) -> None:
        self._record("glfwIconifyWindow", window)
        self._set_attrib(window, WindowAttrib.ICONIFIED, TRUE, "glfwSetWindowIconifyCallback")

    def glfwRestoreWindow(self, window: Optional[int]) -> None:
        self._record("glfwRestoreWindow", window)
        self._set_attrib(window, WindowAttrib.ICONIFIED, FALSE, "glfwSetWindowIconifyCallback")

    def glfwShowWindow(self, window: Optional[int]) -> None:
        self._record("glfwShowWindow", window)
        if self._window(window).monitor:
            return
        self._set_attrib(window, WindowAttrib.VISIBLE, TRUE, "")

    def glfwHideWindow(self, window: Optional[int]) -> None:
        self._record("glfwHideWindow", window)
        if self._window(window).monitor:
            return
        self._set_attrib(window, WindowAttrib.VISIBLE, FALSE, "")

    def glfwGetWindowMonitor(self, window: Optional[int]) -> Optional[int]:
        self._record("glfwGetWindowMonitor", window)
        return self._window(window).monitor or None

    def glfwGetWindowAttrib(self, window: Optional[int], attrib: int) -> int:
        self._record("glfwGetWindowAttrib", window, attrib)
        target = self._window(window)
        if attrib not in target.attribs:
            self._error(ErrorCode.INVALID_ENUM, "Invalid window attribute %#x" % attrib)
            return 0
        return target.attribs[attrib]

    def glfwSetWindowUserPointer(self, window: Optional[int], pointer: Optional[int]) -> None:
        self._record("glfwSetWindowUserPointer", window, pointer)
        self._window(window).user_pointer = pointer or 0

    def glfwGetWindowUserPointer(self, window: Optional[int]) -> Optional[int]:
        self._record("glfwGetWindowUserPointer", window)
        return self._window(window).user_pointer or None

    # ------------------------------------------------------------------
    # Window and input callbacks
    # ------------------------------------------------------------------
    def _set_window_slot(self, setter: str, window: Optional[int], cbfun: Any) -> Any:
        self._record(setter, window, cbfun)
        self._window(window)
        return self._set_slot(setter, window, cbfun)

    def glfwSetWindowPosCallback(self, window: Optional[int], cbfun: Any) -> Any:
        return self._set_window_slot("glfwSetWindowPosCallback", window, cbfun)

    def glfwSetWindowSizeCallback(self, window: Optional[int], cbfun: Any) -> Any:
        return self._set_window_slot("glfwSetWindowSizeCallback", window, cbfun)

    def glfwSetWindowCloseCallback(self, window: Optional[int], cbfun: Any) -> Any:
        return self._set_window_slot("glfwSetWindowCloseCallback", window, cbfun)

    def glfwSetWindowRefreshCallback(self, window: Optional[int], cbfun: Any) -> Any:
        return self._set_window_slot("glfwSetWindowRefreshCallback", window, cbfun)

    def glfwSetWindowFocusCallback(self, window: Optional[int], cbfun: Any) -> Any:
        return self._set_window_slot("glfwSetWindowFocusCallback", window, cbfun)

    def glfwSetWindowIconifyCallback(self, window: Optional[int], cbfun: Any) -> Any:
        return self._set_window_slot("glfwSetWindowIconifyCallback", window, cbfun)

    def glfwSetFramebufferSizeCallback(self, window: Optional[int], cbfun: Any) -> Any:
        return self._set_window_slot("glfwSetFramebufferSizeCallback", window, cbfun)

    def glfwSetKeyCallback(self, window: Optional[int], cbfun: Any) -> Any:
        return self._set_window_slot("glfwSetKeyCallback", window, cbfun)

    def glfwSetCharCallback(self, window: Optional[int], cbfun: Any) -> Any:
        return self._set_window_slot("glfwSetCharCallback", window, cbfun)

    def glfwSetMouseButtonCallback(self, window: Optional[int], cbfun: Any) -> Any:
        return self._set_window_slot("glfwSetMouseButtonCallback", window, cbfun)

    def glfwSetCursorPosCallback(self, window: Optional[int], cbfun: Any) -> Any:
        return self._set_window_slot("glfwSetCursorPosCallback", window, cbfun)

    def glfwSetCursorEnterCallback(self, window: Optional[int], cbfun: Any) -> Any:
        return self._set_window_slot("glfwSetCursorEnterCallback", window, cbfun)

    def glfwSetScrollCallback(self, window: Optional[int], cbfun: Any) -> Any:
        return self._set_window_slot("glfwSetScrollCallback", window, cbfun)

    # ------------------------------------------------------------------
    # Events, context and time
    # ------------------------------------------------------------------
    def glfwPollEvents(self) -> None:
        self._record("glfwPollEvents")
        if not self._require_init():
            return
        # Events queued by callbacks wait for the next poll
        events, self._pending = list(self._pending), deque()
        for setter, window, args in events:
            self._deliver(setter, window, args)

    def glfwWaitEvents(self) -> None:
        self._record("glfwWaitEvents")
        if not self._require_init():
            return
        events, self._pending = list(self._pending), deque()
        for setter, window, args in events:
            self._deliver(setter, window, args)

    def glfwMakeContextCurrent(self, window: Optional[int]) -> None:
        self._record("glfwMakeContextCurrent", window)
        if window:
            self._window(window)
        self._current_context = window or 0

    def glfwGetCurrentContext(self) -> Optional[int]:
        self._record("glfwGetCurrentContext")
        return self._current_context or None

    def glfwSwapBuffers(self, window: Optional[int]) -> None:
        self._record("glfwSwapBuffers", window)
        self._window(window)

    def glfwSwapInterval(self, interval: int) -> None:
        self._record("glfwSwapInterval", interval)
        if not self._require_init():
            return
        if not self._current_context:
            self._error(ErrorCode.NO_CURRENT_CONTEXT, "No context is current for this thread")
            return
        self._swap_interval = interval

    def glfwGetTime(self) -> float:
        self._record("glfwGetTime")
        if not self._require_init():
            return 0.0
        return self._time

    def glfwSetTime(self, time: float) -> None:
        self._record("glfwSetTime", time)
        if not self._require_init():
            return
        if time != time or time < 0.0 or time > _MAX_TIME:
            self._error(ErrorCode.INVALID_VALUE, "Invalid time %f" % time)
            return
        self._time = time


def _default_hints() -> dict[int, int]:
    return {int(hint): int(value) for hint, value in DEFAULT_HINTS.items()}
