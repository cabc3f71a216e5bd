"""
glfwbind - ctypes binding for the GLFW 3.1 windowing library.

Run with:  python -m glfwbind   (prints the version and connected monitors)
"""

from glfwbind.core import (
    BindingError,
    CallbackRegistry,
    EventKind,
    Glfw,
    HandleKindError,
    LibraryNotFoundError,
    PreconditionError,
    RecordingProvider,
    WindowHintBuilder,
)
from glfwbind.config import LibraryConfig
from glfwbind.interop import (
    DONT_CARE,
    Action,
    ClientApi,
    ContextRobustness,
    ErrorCode,
    GammaRamp,
    Modifier,
    Monitor,
    MonitorEvent,
    OpenGLProfile,
    ReleaseBehavior,
    VideoMode,
    Window,
    WindowAttrib,
    WindowHint,
)

__version__ = "0.1.0"

__all__ = [
    "Glfw", "LibraryConfig", "RecordingProvider",
    "CallbackRegistry", "EventKind", "WindowHintBuilder",
    "BindingError", "HandleKindError", "LibraryNotFoundError", "PreconditionError",
    "Monitor", "Window", "VideoMode", "GammaRamp",
    "DONT_CARE", "Action", "ClientApi", "ContextRobustness", "ErrorCode",
    "Modifier", "MonitorEvent", "OpenGLProfile", "ReleaseBehavior",
    "WindowAttrib", "WindowHint",
]
