"""
glfwbind.core - The native GLFW boundary.

This package contains:
    - errors    : Exception hierarchy raised by the binding
    - native    : C prototypes and shared library loading via ctypes
    - provider  : NativeProvider - the entry points any provider exposes
    - recording : RecordingProvider - an in-memory GLFW for tests and demos
    - hints     : WindowHintBuilder - hint normalization
    - callbacks : CallbackRegistry - trampolines and their lifetimes
    - binding   : Glfw - the Python-facing API
"""

from glfwbind.core.errors import (
    BindingError,
    HandleKindError,
    LibraryNotFoundError,
    PreconditionError,
)
from glfwbind.core.binding import Glfw
from glfwbind.core.callbacks import CallbackRegistry, EventKind
from glfwbind.core.hints import WindowHintBuilder
from glfwbind.core.recording import RecordingProvider

__all__ = [
    "BindingError", "HandleKindError", "LibraryNotFoundError", "PreconditionError",
    "Glfw", "CallbackRegistry", "EventKind", "WindowHintBuilder",
    "RecordingProvider",
]
