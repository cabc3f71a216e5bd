"""
glfwbind.core.binding - Glfw: the Python-facing GLFW surface.

Each method forwards to exactly one GLFW entry point.  The work done here is
marshaling: handles in and out, out-parameters into tuples, native arrays
and structs into Python values, text to and from bytes.

Errors reported by GLFW are NOT raised.  They are delivered to the callback
installed with set_error_callback while the failing call runs, and the call
returns whatever default GLFW produced (None handles, zeros, empty lists).
Register an error callback before anything else.
"""

from __future__ import annotations

import ctypes
import logging
from collections.abc import Callable
from typing import Any, Optional, Union

from glfwbind.config.library import LibraryConfig
from glfwbind.core import native
from glfwbind.core.callbacks import CallbackRegistry, EventKind
from glfwbind.core.errors import PreconditionError
from glfwbind.core.hints import HintValue, WindowHintBuilder
from glfwbind.interop.arrays import decode_handle_array, decode_struct_array
from glfwbind.interop.constants import FALSE, TRUE, WindowAttrib, WindowHint, encode
from glfwbind.interop.handles import Monitor, Window, expect
from glfwbind.interop.structs import (
    GammaRamp,
    GLFWvidmode,
    VideoMode,
    decode_gamma_ramp,
    decode_video_mode,
    encode_gamma_ramp,
)

log = logging.getLogger(__name__)


def _out_ints(n: int) -> list[ctypes.c_int]:
    return [ctypes.c_int(0) for _ in range(n)]


def _pointers(values: list[ctypes.c_int]) -> list[Any]:
    return [ctypes.pointer(v) for v in values]


def _null(address: int) -> Optional[int]:
    return address or None


class Glfw:
    """
    One GLFW library instance and the callbacks installed into it.

    Usage:
        glfw = Glfw()                     # loads the shared library
        glfw.set_error_callback(on_error)
        if glfw.init():
            window = glfw.create_window(800, 600, "demo")
            while not glfw.window_should_close(window):
                glfw.poll_events()
            glfw.terminate()

    Pass a provider (e.g. RecordingProvider) to run without a native
    library.
    """

    def __init__(
        self,
        provider: Optional[Any] = None,
        config: Optional[LibraryConfig] = None,
    ) -> None:
        self._config = config if config is not None else LibraryConfig.from_env()
        self._lib = provider if provider is not None else native.load_library(self._config)

        # Callback trampolines installed into this library
        self.callbacks = CallbackRegistry(self._lib, self._config)

        # Pending window hints
        self.hints = WindowHintBuilder(self._lib)

        # window -> object whose id() is stored as the native user pointer
        self._user_objects: dict[Window, Any] = {}

        self._initialized = False

    @property
    def provider(self) -> Any:
        return self._lib

    @property
    def config(self) -> LibraryConfig:
        return self._config

    @property
    def initialized(self) -> bool:
        return self._initialized

    # ------------------------------------------------------------------
    # Initialization and version
    # ------------------------------------------------------------------
    def init(self) -> bool:
        ok = self._lib.glfwInit() == TRUE
        self._initialized = ok
        if ok:
            log.info("GLFW initialized")
        else:
            log.error("glfwInit failed")
        return ok

    def terminate(self) -> None:
        """
        Destroy all windows and release GLFW.

        Every outstanding Monitor and Window handle becomes invalid.  The
        error callback stays installed.
        """
        self._lib.glfwTerminate()
        self._initialized = False
        released = self.callbacks.release_all(keep=(EventKind.ERROR,))
        self._user_objects.clear()
        log.info("GLFW terminated (%d callbacks released)", released)

    def get_version(self) -> tuple[int, int, int]:
        """(major, minor, revision) of the loaded library."""
        values = _out_ints(3)
        self._lib.glfwGetVersion(*_pointers(values))
        return (values[0].value, values[1].value, values[2].value)

    def get_version_string(self) -> str:
        return self._config.decode_text(self._lib.glfwGetVersionString())

    # ------------------------------------------------------------------
    # Monitors
    # ------------------------------------------------------------------
    def get_monitors(self) -> list[Monitor]:
        """Snapshot of the connected monitors, primary first."""
        count = ctypes.c_int(0)
        array = self._lib.glfwGetMonitors(ctypes.pointer(count))
        return decode_handle_array(array, count.value, Monitor)

    def get_primary_monitor(self) -> Monitor:
        """The primary monitor, or a none handle if no monitor is connected."""
        return Monitor.wrap(self._lib.glfwGetPrimaryMonitor())

    def get_monitor_pos(self, monitor: Monitor) -> tuple[int, int]:
        x, y = _out_ints(2)
        self._lib.glfwGetMonitorPos(expect(monitor, Monitor), *_pointers([x, y]))
        return (x.value, y.value)

    def get_monitor_physical_size(self, monitor: Monitor) -> tuple[int, int]:
        """Physical size of the display area in millimetres."""
        w, h = _out_ints(2)
        self._lib.glfwGetMonitorPhysicalSize(expect(monitor, Monitor), *_pointers([w, h]))
        return (w.value, h.value)

    def get_monitor_name(self, monitor: Monitor) -> str:
        return self._config.decode_text(
            self._lib.glfwGetMonitorName(expect(monitor, Monitor))
        )

    def get_video_modes(self, monitor: Monitor) -> list[VideoMode]:
        """Every mode the monitor supports, sorted ascending by GLFW."""
        count = ctypes.c_int(0)
        array = self._lib.glfwGetVideoModes(expect(monitor, Monitor), ctypes.pointer(count))
        return decode_struct_array(array, count.value, GLFWvidmode, VideoMode.from_native)

    def get_video_mode(self, monitor: Monitor) -> Optional[VideoMode]:
        """The current mode of the monitor, or None on error."""
        return decode_video_mode(self._lib.glfwGetVideoMode(expect(monitor, Monitor)))

    def set_gamma(self, monitor: Monitor, gamma: float) -> None:
        """Generate and apply a gamma ramp from an exponent."""
        self._lib.glfwSetGamma(expect(monitor, Monitor), float(gamma))

    def get_gamma_ramp(self, monitor: Monitor) -> Optional[GammaRamp]:
        return decode_gamma_ramp(self._lib.glfwGetGammaRamp(expect(monitor, Monitor)))

    def set_gamma_ramp(self, monitor: Monitor, ramp: GammaRamp) -> None:
        """
        Apply a gamma ramp.

        Raises:
            PreconditionError: A channel does not hold exactly 256 samples.
        """
        address = expect(monitor, Monitor)
        native_ramp = encode_gamma_ramp(ramp.red, ramp.green, ramp.blue)
        # native_ramp owns the channel buffers until this call returns
        self._lib.glfwSetGammaRamp(address, native_ramp.pointer())

    # ------------------------------------------------------------------
    # Window hints
    # ------------------------------------------------------------------
    def default_window_hints(self) -> None:
        self.hints.defaults()

    def window_hint(self, key: Union[WindowHint, int], value: HintValue) -> int:
        return self.hints.set_hint(key, value)

    # ------------------------------------------------------------------
    # Window lifecycle
    # ------------------------------------------------------------------
    def create_window(
        self,
        width: int,
        height: int,
        title: str,
        monitor: Optional[Monitor] = None,
        share: Optional[Window] = None,
    ) -> Window:
        """
        Create a window and its context.

        A non-none *monitor* makes the window full screen on it.  *share*
        is a window whose context objects the new context shares.

        Returns:
            The new window, or a none handle if GLFW reported an error.

        Raises:
            PreconditionError: *title* is None.
        """
        if title is None:
            raise PreconditionError("Window title must not be None")

        window = Window.wrap(
            self._lib.glfwCreateWindow(
                int(width),
                int(height),
                self._config.encode_text(title),
                _null(expect(monitor, Monitor, optional=True)),
                _null(expect(share, Window, optional=True)),
            )
        )
        if window:
            log.debug(
                "Window created %r %dx%d %r%s",
                window, width, height, title,
                f" fullscreen on {monitor!r}" if monitor else "",
            )
        return window

    def destroy_window(self, window: Window) -> None:
        """Destroy *window*; the handle must not be used afterwards."""
        self._lib.glfwDestroyWindow(expect(window, Window))
        self.callbacks.release_window(window)
        self._user_objects.pop(window, None)
        log.debug("Window destroyed %r", window)

    def window_should_close(self, window: Window) -> bool:
        return self._lib.glfwWindowShouldClose(expect(window, Window)) != FALSE

    def set_window_should_close(self, window: Window, value: bool) -> None:
        self._lib.glfwSetWindowShouldClose(expect(window, Window), encode(bool(value)))

    def set_window_title(self, window: Window, title: str) -> None:
        if title is None:
            raise PreconditionError("Window title must not be None")
        self._lib.glfwSetWindowTitle(expect(window, Window), self._config.encode_text(title))

    # ------------------------------------------------------------------
    # Window geometry and state
    # ------------------------------------------------------------------
    def get_window_pos(self, window: Window) -> tuple[int, int]:
        x, y = _out_ints(2)
        self._lib.glfwGetWindowPos(expect(window, Window), *_pointers([x, y]))
        return (x.value, y.value)

    def set_window_pos(self, window: Window, x: int, y: int) -> None:
        self._lib.glfwSetWindowPos(expect(window, Window), int(x), int(y))

    def get_window_size(self, window: Window) -> tuple[int, int]:
        w, h = _out_ints(2)
        self._lib.glfwGetWindowSize(expect(window, Window), *_pointers([w, h]))
        return (w.value, h.value)

    def set_window_size(self, window: Window, width: int, height: int) -> None:
        self._lib.glfwSetWindowSize(expect(window, Window), int(width), int(height))

    def get_framebuffer_size(self, window: Window) -> tuple[int, int]:
        """Size of the framebuffer in pixels (may differ from the window size)."""
        w, h = _out_ints(2)
        self._lib.glfwGetFramebufferSize(expect(window, Window), *_pointers([w, h]))
        return (w.value, h.value)

    def get_window_frame_size(self, window: Window) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) extents of the window decorations."""
        values = _out_ints(4)
        self._lib.glfwGetWindowFrameSize(expect(window, Window), *_pointers(values))
        left, top, right, bottom = (v.value for v in values)
        return (left, top, right, bottom)

    def iconify_window(self, window: Window) -> None:
        self._lib.glfwIconifyWindow(expect(window, Window))

    def restore_window(self, window: Window) -> None:
        self._lib.glfwRestoreWindow(expect(window, Window))

    def show_window(self, window: Window) -> None:
        self._lib.glfwShowWindow(expect(window, Window))

    def hide_window(self, window: Window) -> None:
        self._lib.glfwHideWindow(expect(window, Window))

    def get_window_monitor(self, window: Window) -> Monitor:
        """The monitor of a full screen window; a none handle if windowed."""
        return Monitor.wrap(self._lib.glfwGetWindowMonitor(expect(window, Window)))

    def get_window_attrib(self, window: Window, attrib: Union[WindowAttrib, int]) -> bool:
        return self._lib.glfwGetWindowAttrib(expect(window, Window), encode(attrib)) != FALSE

    # ------------------------------------------------------------------
    # User pointer
    # ------------------------------------------------------------------
    def set_window_user_pointer(self, window: Window, value: Any) -> None:
        """
        Associate an arbitrary Python object with *window*.

        The object is kept alive by this Glfw instance until it is
        replaced, the window is destroyed, or the library is terminated.
        """
        address = expect(window, Window)
        self._user_objects.pop(window, None)
        if value is None:
            self._lib.glfwSetWindowUserPointer(address, None)
            return
        self._user_objects[window] = value
        self._lib.glfwSetWindowUserPointer(address, id(value))

    def get_window_user_pointer(self, window: Window) -> Any:
        raw = self._lib.glfwGetWindowUserPointer(expect(window, Window)) or 0
        value = self._user_objects.get(window)
        if value is None or id(value) != raw:
            return None
        return value

    # ------------------------------------------------------------------
    # Context and buffers
    # ------------------------------------------------------------------
    def make_context_current(self, window: Optional[Window]) -> None:
        """Make the context of *window* current on the calling thread (None detaches)."""
        self._lib.glfwMakeContextCurrent(_null(expect(window, Window, optional=True)))

    def get_current_context(self) -> Window:
        return Window.wrap(self._lib.glfwGetCurrentContext())

    def swap_buffers(self, window: Window) -> None:
        self._lib.glfwSwapBuffers(expect(window, Window))

    def swap_interval(self, interval: int) -> None:
        self._lib.glfwSwapInterval(int(interval))

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------
    def set_error_callback(self, callback: Optional[Callable[..., Any]]) -> None:
        """callback(code: ErrorCode, description: str)"""
        self.callbacks.register(EventKind.ERROR, callback)

    def set_monitor_callback(self, callback: Optional[Callable[..., Any]]) -> None:
        """
        callback(monitor: Monitor, event: MonitorEvent)

        GLFW ignores this call before init (and reports NOT_INITIALIZED), so
        the slot is not kept in that case.
        """
        self.callbacks.register(EventKind.MONITOR, callback)
        if callback is not None and not self._initialized:
            self.callbacks.discard(EventKind.MONITOR)
            log.warning("Monitor callback set before init was ignored by GLFW")

    def set_window_pos_callback(
        self, window: Window, callback: Optional[Callable[..., Any]]
    ) -> None:
        """callback(window: Window, x: int, y: int)"""
        self.callbacks.register(EventKind.WINDOW_POS, callback, window)

    def set_window_size_callback(
        self, window: Window, callback: Optional[Callable[..., Any]]
    ) -> None:
        """callback(window: Window, width: int, height: int)"""
        self.callbacks.register(EventKind.WINDOW_SIZE, callback, window)

    def set_window_close_callback(
        self, window: Window, callback: Optional[Callable[..., Any]]
    ) -> None:
        """callback(window: Window)"""
        self.callbacks.register(EventKind.WINDOW_CLOSE, callback, window)

    def set_window_refresh_callback(
        self, window: Window, callback: Optional[Callable[..., Any]]
    ) -> None:
        self.callbacks.register(EventKind.WINDOW_REFRESH, callback, window)

    def set_window_focus_callback(
        self, window: Window, callback: Optional[Callable[..., Any]]
    ) -> None:
        """callback(window: Window, focused: bool)"""
        self.callbacks.register(EventKind.WINDOW_FOCUS, callback, window)

    def set_window_iconify_callback(
        self, window: Window, callback: Optional[Callable[..., Any]]
    ) -> None:
        """callback(window: Window, iconified: bool)"""
        self.callbacks.register(EventKind.WINDOW_ICONIFY, callback, window)

    def set_framebuffer_size_callback(
        self, window: Window, callback: Optional[Callable[..., Any]]
    ) -> None:
        self.callbacks.register(EventKind.FRAMEBUFFER_SIZE, callback, window)

    def set_key_callback(
        self, window: Window, callback: Optional[Callable[..., Any]]
    ) -> None:
        """callback(window, key: int, scancode: int, action: Action, mods: Modifier)"""
        self.callbacks.register(EventKind.KEY, callback, window)

    def set_char_callback(
        self, window: Window, callback: Optional[Callable[..., Any]]
    ) -> None:
        """callback(window: Window, char: str)"""
        self.callbacks.register(EventKind.CHAR, callback, window)

    def set_mouse_button_callback(
        self, window: Window, callback: Optional[Callable[..., Any]]
    ) -> None:
        """callback(window, button: int, action: Action, mods: Modifier)"""
        self.callbacks.register(EventKind.MOUSE_BUTTON, callback, window)

    def set_cursor_pos_callback(
        self, window: Window, callback: Optional[Callable[..., Any]]
    ) -> None:
        self.callbacks.register(EventKind.CURSOR_POS, callback, window)

    def set_cursor_enter_callback(
        self, window: Window, callback: Optional[Callable[..., Any]]
    ) -> None:
        self.callbacks.register(EventKind.CURSOR_ENTER, callback, window)

    def set_scroll_callback(
        self, window: Window, callback: Optional[Callable[..., Any]]
    ) -> None:
        self.callbacks.register(EventKind.SCROLL, callback, window)

    # ------------------------------------------------------------------
    # Events and time
    # ------------------------------------------------------------------
    def poll_events(self) -> None:
        """Process pending events; callbacks run on this thread before it returns."""
        self._lib.glfwPollEvents()

    def wait_events(self) -> None:
        """Block until at least one event arrives, then process like poll_events."""
        self._lib.glfwWaitEvents()

    def get_time(self) -> float:
        return float(self._lib.glfwGetTime())

    def set_time(self, time: float) -> None:
        self._lib.glfwSetTime(float(time))

    # ------------------------------------------------------------------
    # Debug helpers
    # ------------------------------------------------------------------
    def dump_state(self) -> str:
        """Return a formatted string of monitors, modes and callbacks."""
        lines = [f"=== GLFW {self.get_version_string()} ==="]
        primary = self.get_primary_monitor()
        for monitor in self.get_monitors():
            marker = " >> " if monitor == primary else "    "
            x, y = self.get_monitor_pos(monitor)
            w_mm, h_mm = self.get_monitor_physical_size(monitor)
            lines.append(
                f"{marker}{self.get_monitor_name(monitor)!r} {monitor!r} "
                f"at {x},{y} ({w_mm}x{h_mm} mm) current={self.get_video_mode(monitor)}"
            )
            for mode in self.get_video_modes(monitor):
                lines.append(f"        {mode}")
        lines.append("")
        lines.append(self.callbacks.dump_state())
        return "\n".join(lines)
