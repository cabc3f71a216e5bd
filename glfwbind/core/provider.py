"""
glfwbind.core.provider - The native capability interface.

A provider is any object exposing GLFW's C entry points by their C names
with ctypes calling semantics: out-parameters arrive as ctypes pointers,
handles as raw addresses (int or None), strings as bytes, and callbacks as
ctypes function pointers.  Two providers exist:

    - the ctypes.CDLL returned by glfwbind.core.native.load_library
    - glfwbind.core.recording.RecordingProvider, an in-memory stand-in
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

Address = Optional[int]


@runtime_checkable
class NativeProvider(Protocol):
    # Initialization and version
    def glfwInit(self) -> int: ...
    def glfwTerminate(self) -> None: ...
    def glfwGetVersion(self, major: Any, minor: Any, rev: Any) -> None: ...
    def glfwGetVersionString(self) -> Optional[bytes]: ...
    def glfwSetErrorCallback(self, cbfun: Any) -> Any: ...

    # Monitors
    def glfwGetMonitors(self, count: Any) -> Any: ...
    def glfwGetPrimaryMonitor(self) -> Address: ...
    def glfwGetMonitorPos(self, monitor: Address, xpos: Any, ypos: Any) -> None: ...
    def glfwGetMonitorPhysicalSize(
        self, monitor: Address, width: Any, height: Any
    ) -> None: ...
    def glfwGetMonitorName(self, monitor: Address) -> Optional[bytes]: ...
    def glfwSetMonitorCallback(self, cbfun: Any) -> Any: ...
    def glfwGetVideoModes(self, monitor: Address, count: Any) -> Any: ...
    def glfwGetVideoMode(self, monitor: Address) -> Any: ...
    def glfwSetGamma(self, monitor: Address, gamma: float) -> None: ...
    def glfwGetGammaRamp(self, monitor: Address) -> Any: ...
    def glfwSetGammaRamp(self, monitor: Address, ramp: Any) -> None: ...

    # Windows
    def glfwDefaultWindowHints(self) -> None: ...
    def glfwWindowHint(self, hint: int, value: int) -> None: ...
    def glfwCreateWindow(
        self,
        width: int,
        height: int,
        title: bytes,
        monitor: Address,
        share: Address,
    ) -> Address: ...
    def glfwDestroyWindow(self, window: Address) -> None: ...
    def glfwWindowShouldClose(self, window: Address) -> int: ...
    def glfwSetWindowShouldClose(self, window: Address, value: int) -> None: ...
    def glfwSetWindowTitle(self, window: Address, title: bytes) -> None: ...
    def glfwGetWindowPos(self, window: Address, xpos: Any, ypos: Any) -> None: ...
    def glfwSetWindowPos(self, window: Address, xpos: int, ypos: int) -> None: ...
    def glfwGetWindowSize(self, window: Address, width: Any, height: Any) -> None: ...
    def glfwSetWindowSize(self, window: Address, width: int, height: int) -> None: ...
    def glfwGetFramebufferSize(
        self, window: Address, width: Any, height: Any
    ) -> None: ...
    def glfwGetWindowFrameSize(
        self, window: Address, left: Any, top: Any, right: Any, bottom: Any
    ) -> None: ...
    def glfwIconifyWindow(self, window: Address) -> None: ...
    def glfwRestoreWindow(self, window: Address) -> None: ...
    def glfwShowWindow(self, window: Address) -> None: ...
    def glfwHideWindow(self, window: Address) -> None: ...
    def glfwGetWindowMonitor(self, window: Address) -> Address: ...
    def glfwGetWindowAttrib(self, window: Address, attrib: int) -> int: ...
    def glfwSetWindowUserPointer(self, window: Address, pointer: Address) -> None: ...
    def glfwGetWindowUserPointer(self, window: Address) -> Address: ...

    # Window and input callbacks
    def glfwSetWindowPosCallback(self, window: Address, cbfun: Any) -> Any: ...
    def glfwSetWindowSizeCallback(self, window: Address, cbfun: Any) -> Any: ...
    def glfwSetWindowCloseCallback(self, window: Address, cbfun: Any) -> Any: ...
    def glfwSetWindowRefreshCallback(self, window: Address, cbfun: Any) -> Any: ...
    def glfwSetWindowFocusCallback(self, window: Address, cbfun: Any) -> Any: ...
    def glfwSetWindowIconifyCallback(self, window: Address, cbfun: Any) -> Any: ...
    def glfwSetFramebufferSizeCallback(self, window: Address, cbfun: Any) -> Any: ...
    def glfwSetKeyCallback(self, window: Address, cbfun: Any) -> Any: ...
    def glfwSetCharCallback(self, window: Address, cbfun: Any) -> Any: ...
    def glfwSetMouseButtonCallback(self, window: Address, cbfun: Any) -> Any: ...
    def glfwSetCursorPosCallback(self, window: Address, cbfun: Any) -> Any: ...
    def glfwSetCursorEnterCallback(self, window: Address, cbfun: Any) -> Any: ...
    def glfwSetScrollCallback(self, window: Address, cbfun: Any) -> Any: ...

    # Events, context and time
    def glfwPollEvents(self) -> None: ...
    def glfwWaitEvents(self) -> None: ...
    def glfwMakeContextCurrent(self, window: Address) -> None: ...
    def glfwGetCurrentContext(self) -> Address: ...
    def glfwSwapBuffers(self, window: Address) -> None: ...
    def glfwSwapInterval(self, interval: int) -> None: ...
    def glfwGetTime(self) -> float: ...
    def glfwSetTime(self, time: float) -> None: ...
