"""
glfwbind.core.errors - Exceptions raised at the binding boundary.

Errors reported by GLFW itself are never raised: they arrive through the
error callback slot (see glfwbind.core.callbacks).  The exceptions here
cover what the binding can detect before a value crosses into native code.
"""

from __future__ import annotations


class BindingError(Exception):
    """Base class for every exception raised by glfwbind."""


class PreconditionError(BindingError, ValueError):
    """A value could not be marshaled into the form the native call needs."""


class HandleKindError(PreconditionError, TypeError):
    """A Monitor was passed where a Window is required, or the reverse."""


class LibraryNotFoundError(BindingError, OSError):
    """No loadable GLFW shared library was found."""

    def __init__(self, tried: list[str]) -> None:
        self.tried = tried
        names = ", ".join(tried) if tried else "<none>"
        super().__init__(f"Could not load the GLFW library (tried: {names})")
