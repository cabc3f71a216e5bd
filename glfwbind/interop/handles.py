"""
glfwbind.interop.handles - Typed wrappers around opaque GLFW pointers.

GLFW hands out GLFWmonitor* and GLFWwindow* values that must never be
dereferenced from Python.  A handle stores nothing but the address, so
two handles are equal exactly when they point at the same native object.
The two kinds are distinct types and never compare equal to each other.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from glfwbind.core.errors import HandleKindError, PreconditionError

H = TypeVar("H", bound="Handle")


class Handle:
    """
    Base class for native handles.

    Equality and hashing are based solely on the address, so a handle can
    be used in sets and as a dict key.  Address 0 is the "none" handle and
    is falsy.
    """

    __slots__ = ("_address",)

    def __init__(self, address: Optional[int] = 0) -> None:
        if address is None:
            address = 0
        if isinstance(address, bool) or not isinstance(address, int):
            raise PreconditionError(
                f"{type(self).__name__} address must be an int, "
                f"got {type(address).__name__}"
            )
        if address < 0:
            raise PreconditionError(
                f"{type(self).__name__} address must be non-negative, got {address}"
            )
        self._address = address

    @classmethod
    def wrap(cls: type[H], address: Optional[int]) -> H:
        """Wrap a raw native address (``None`` means NULL)."""
        return cls(address)

    @classmethod
    def none(cls: type[H]) -> H:
        return cls(0)

    @property
    def address(self) -> int:
        return self._address

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------
    def __bool__(self) -> bool:
        return self._address != 0

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._address == other._address  # type: ignore[attr-defined]
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._address)

    def __repr__(self) -> str:
        if not self._address:
            return f"{type(self).__name__}(none)"
        return f"{type(self).__name__}({self._address:#x})"


class Monitor(Handle):
    """A GLFWmonitor* owned by the native library."""

    __slots__ = ()


class Window(Handle):
    """A GLFWwindow* owned by the native library."""

    __slots__ = ()


def is_none(handle: Optional[Handle]) -> bool:
    """True if *handle* is ``None`` or wraps the NULL address."""
    return handle is None or handle.address == 0


def expect(
    handle: Optional[Handle], kind: type[Handle], optional: bool = False
) -> int:
    """
    Return the raw address of *handle* for a native call.

    Args:
        handle:   The handle passed by the caller (``None`` allowed only
                  when *optional* is true).
        kind:     The handle class the native parameter expects.
        optional: True if the native parameter may be NULL.

    Raises:
        HandleKindError:   *handle* is a handle of another kind.
        PreconditionError: *handle* is none but the parameter is required.
    """
    if handle is None:
        if optional:
            return 0
        raise PreconditionError(f"A {kind.__name__} handle is required, got None")

    if type(handle) is not kind:
        raise HandleKindError(
            f"Expected a {kind.__name__} handle, got {type(handle).__name__}"
        )

    if not handle and not optional:
        raise PreconditionError(f"A non-null {kind.__name__} handle is required")

    return handle.address
