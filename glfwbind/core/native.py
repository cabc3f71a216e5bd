"""
glfwbind.core.native - Low-level GLFW bindings via ctypes.

Centralizes the C prototypes of every GLFW entry point the binding uses and
the loading of the shared library, so that no other module needs to know
about argtypes / restype.  The loaded CDLL is the real native provider;
glfwbind.core.recording provides an in-memory stand-in with the same
entry points.
"""

from __future__ import annotations

import ctypes
import logging
from typing import Any, Optional

from glfwbind.config.library import LibraryConfig
from glfwbind.core.errors import LibraryNotFoundError
from glfwbind.interop.structs import GLFWgammaramp, GLFWvidmode

log = logging.getLogger(__name__)

# Oldest GLFW whose ABI matches these prototypes
MIN_VERSION = (3, 1)

# ============================================================================
# Pointer types
# ============================================================================
int_p = ctypes.POINTER(ctypes.c_int)
double_p = ctypes.POINTER(ctypes.c_double)
monitor_p = ctypes.c_void_p
window_p = ctypes.c_void_p
vidmode_p = ctypes.POINTER(GLFWvidmode)
gammaramp_p = ctypes.POINTER(GLFWgammaramp)

# ============================================================================
# Callback types
# ============================================================================
# GLFW uses the C calling convention on every platform, Windows included.

# void (*)(int error, const char* description)
GLFWerrorfun = ctypes.CFUNCTYPE(None, ctypes.c_int, ctypes.c_char_p)

# void (*)(GLFWmonitor*, int event)
GLFWmonitorfun = ctypes.CFUNCTYPE(None, monitor_p, ctypes.c_int)

# void (*)(GLFWwindow*, int xpos, int ypos)
GLFWwindowposfun = ctypes.CFUNCTYPE(None, window_p, ctypes.c_int, ctypes.c_int)

# void (*)(GLFWwindow*, int width, int height)
GLFWwindowsizefun = ctypes.CFUNCTYPE(None, window_p, ctypes.c_int, ctypes.c_int)

# void (*)(GLFWwindow*)
GLFWwindowclosefun = ctypes.CFUNCTYPE(None, window_p)
GLFWwindowrefreshfun = ctypes.CFUNCTYPE(None, window_p)

# void (*)(GLFWwindow*, int focused / iconified / entered)
GLFWwindowfocusfun = ctypes.CFUNCTYPE(None, window_p, ctypes.c_int)
GLFWwindowiconifyfun = ctypes.CFUNCTYPE(None, window_p, ctypes.c_int)
GLFWcursorenterfun = ctypes.CFUNCTYPE(None, window_p, ctypes.c_int)

# void (*)(GLFWwindow*, int width, int height)
GLFWframebuffersizefun = ctypes.CFUNCTYPE(
    None, window_p, ctypes.c_int, ctypes.c_int
)

# void (*)(GLFWwindow*, int key, int scancode, int action, int mods)
GLFWkeyfun = ctypes.CFUNCTYPE(
    None,
    window_p,
    ctypes.c_int,   # key
    ctypes.c_int,   # scancode
    ctypes.c_int,   # action
    ctypes.c_int,   # mods
)

# void (*)(GLFWwindow*, unsigned int codepoint)
GLFWcharfun = ctypes.CFUNCTYPE(None, window_p, ctypes.c_uint)

# void (*)(GLFWwindow*, int button, int action, int mods)
GLFWmousebuttonfun = ctypes.CFUNCTYPE(
    None, window_p, ctypes.c_int, ctypes.c_int, ctypes.c_int
)

# void (*)(GLFWwindow*, double x, double y)
GLFWcursorposfun = ctypes.CFUNCTYPE(None, window_p, ctypes.c_double, ctypes.c_double)
GLFWscrollfun = ctypes.CFUNCTYPE(None, window_p, ctypes.c_double, ctypes.c_double)

# ============================================================================
# Prototypes: name -> (restype, argtypes)
# ============================================================================
_PROTOTYPES: dict[str, tuple[Any, tuple[Any, ...]]] = {
    # Initialization and version
    "glfwInit": (ctypes.c_int, ()),
    "glfwTerminate": (None, ()),
    "glfwGetVersion": (None, (int_p, int_p, int_p)),
    "glfwGetVersionString": (ctypes.c_char_p, ()),
    "glfwSetErrorCallback": (GLFWerrorfun, (GLFWerrorfun,)),

    # Monitors
    "glfwGetMonitors": (ctypes.POINTER(monitor_p), (int_p,)),
    "glfwGetPrimaryMonitor": (monitor_p, ()),
    "glfwGetMonitorPos": (None, (monitor_p, int_p, int_p)),
    "glfwGetMonitorPhysicalSize": (None, (monitor_p, int_p, int_p)),
    "glfwGetMonitorName": (ctypes.c_char_p, (monitor_p,)),
    "glfwSetMonitorCallback": (GLFWmonitorfun, (GLFWmonitorfun,)),
    "glfwGetVideoModes": (vidmode_p, (monitor_p, int_p)),
    "glfwGetVideoMode": (vidmode_p, (monitor_p,)),
    "glfwSetGamma": (None, (monitor_p, ctypes.c_float)),
    "glfwGetGammaRamp": (gammaramp_p, (monitor_p,)),
    "glfwSetGammaRamp": (None, (monitor_p, gammaramp_p)),

    # Windows
    "glfwDefaultWindowHints": (None, ()),
    "glfwWindowHint": (None, (ctypes.c_int, ctypes.c_int)),
    "glfwCreateWindow": (
        window_p,
        (ctypes.c_int, ctypes.c_int, ctypes.c_char_p, monitor_p, window_p),
    ),
    "glfwDestroyWindow": (None, (window_p,)),
    "glfwWindowShouldClose": (ctypes.c_int, (window_p,)),
    "glfwSetWindowShouldClose": (None, (window_p, ctypes.c_int)),
    "glfwSetWindowTitle": (None, (window_p, ctypes.c_char_p)),
    "glfwGetWindowPos": (None, (window_p, int_p, int_p)),
    "glfwSetWindowPos": (None, (window_p, ctypes.c_int, ctypes.c_int)),
    "glfwGetWindowSize": (None, (window_p, int_p, int_p)),
    "glfwSetWindowSize": (None, (window_p, ctypes.c_int, ctypes.c_int)),
    "glfwGetFramebufferSize": (None, (window_p, int_p, int_p)),
    "glfwGetWindowFrameSize": (None, (window_p, int_p, int_p, int_p, int_p)),
    "glfwIconifyWindow": (None, (window_p,)),
    "glfwRestoreWindow": (None, (window_p,)),
    "glfwShowWindow": (None, (window_p,)),
    "glfwHideWindow": (None, (window_p,)),
    "glfwGetWindowMonitor": (monitor_p, (window_p,)),
    "glfwGetWindowAttrib": (ctypes.c_int, (window_p, ctypes.c_int)),
    "glfwSetWindowUserPointer": (None, (window_p, ctypes.c_void_p)),
    "glfwGetWindowUserPointer": (ctypes.c_void_p, (window_p,)),

    # Window callbacks
    "glfwSetWindowPosCallback": (GLFWwindowposfun, (window_p, GLFWwindowposfun)),
    "glfwSetWindowSizeCallback": (GLFWwindowsizefun, (window_p, GLFWwindowsizefun)),
    "glfwSetWindowCloseCallback": (GLFWwindowclosefun, (window_p, GLFWwindowclosefun)),
    "glfwSetWindowRefreshCallback": (
        GLFWwindowrefreshfun, (window_p, GLFWwindowrefreshfun),
    ),
    "glfwSetWindowFocusCallback": (GLFWwindowfocusfun, (window_p, GLFWwindowfocusfun)),
    "glfwSetWindowIconifyCallback": (
        GLFWwindowiconifyfun, (window_p, GLFWwindowiconifyfun),
    ),
    "glfwSetFramebufferSizeCallback": (
        GLFWframebuffersizefun, (window_p, GLFWframebuffersizefun),
    ),

    # Input callbacks
    "glfwSetKeyCallback": (GLFWkeyfun, (window_p, GLFWkeyfun)),
    "glfwSetCharCallback": (GLFWcharfun, (window_p, GLFWcharfun)),
    "glfwSetMouseButtonCallback": (GLFWmousebuttonfun, (window_p, GLFWmousebuttonfun)),
    "glfwSetCursorPosCallback": (GLFWcursorposfun, (window_p, GLFWcursorposfun)),
    "glfwSetCursorEnterCallback": (GLFWcursorenterfun, (window_p, GLFWcursorenterfun)),
    "glfwSetScrollCallback": (GLFWscrollfun, (window_p, GLFWscrollfun)),

    # Events, context and time
    "glfwPollEvents": (None, ()),
    "glfwWaitEvents": (None, ()),
    "glfwMakeContextCurrent": (None, (window_p,)),
    "glfwGetCurrentContext": (window_p, ()),
    "glfwSwapBuffers": (None, (window_p,)),
    "glfwSwapInterval": (None, (ctypes.c_int,)),
    "glfwGetTime": (ctypes.c_double, ()),
    "glfwSetTime": (None, (ctypes.c_double,)),
}

ENTRY_POINTS: tuple[str, ...] = tuple(_PROTOTYPES)


# ============================================================================
# Library loading
# ============================================================================

def declare_prototypes(lib: Any) -> list[str]:
    """
    Set argtypes / restype on every GLFW entry point found in *lib*.

    Returns:
        Names of the entry points the library does not export.
    """
    missing: list[str] = []
    for name, (restype, argtypes) in _PROTOTYPES.items():
        try:
            fn = getattr(lib, name)
        except AttributeError:
            missing.append(name)
            continue
        fn.restype = restype
        fn.argtypes = argtypes

    if missing:
        log.warning("GLFW library lacks %d entry points: %s", len(missing), ", ".join(missing))
    return missing


def read_version(lib: Any) -> tuple[int, int, int]:
    """Call glfwGetVersion (valid before glfwInit)."""
    major, minor, rev = ctypes.c_int(0), ctypes.c_int(0), ctypes.c_int(0)
    lib.glfwGetVersion(
        ctypes.pointer(major), ctypes.pointer(minor), ctypes.pointer(rev)
    )
    return (major.value, minor.value, rev.value)


def load_library(config: Optional[LibraryConfig] = None) -> ctypes.CDLL:
    """
    Load the GLFW shared library and declare its prototypes.

    Candidates come from *config* (see LibraryConfig.candidate_names).

    Raises:
        LibraryNotFoundError: No candidate could be loaded.
    """
    if config is None:
        config = LibraryConfig.from_env()

    tried: list[str] = []
    for name in config.candidate_names():
        tried.append(name)
        try:
            lib = ctypes.CDLL(name)
        except OSError:
            log.debug("Could not load %s", name)
            continue

        declare_prototypes(lib)
        version = read_version(lib)
        if version[:2] < MIN_VERSION:
            log.warning(
                "%s is GLFW %d.%d.%d, older than the supported %d.%d",
                name, *version, *MIN_VERSION,
            )
        log.info("Loaded GLFW %d.%d.%d from %s", *version, name)
        return lib

    raise LibraryNotFoundError(tried)
