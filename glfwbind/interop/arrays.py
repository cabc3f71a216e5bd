"""
glfwbind.interop.arrays - Decoding of native arrays with a runtime length.

GLFW returns arrays as a pointer plus an element count written through an
out-parameter.  The memory stays owned by GLFW and may be freed or reused
on the next call, so everything is copied into plain Python lists before
the caller sees it.
"""

from __future__ import annotations

import ctypes
from typing import Callable, TypeVar

from glfwbind.interop.handles import Handle
from glfwbind.interop.structs import Address, cast_address

H = TypeVar("H", bound=Handle)
T = TypeVar("T")


def decode_handle_array(address: Address, count: int, kind: type[H]) -> list[H]:
    """
    Decode *count* consecutive native pointers into handles of *kind*.

    A count of zero (or less) yields an empty list without touching
    *address*, which may then be NULL.
    """
    if count <= 0:
        return []

    ptr = cast_address(address, ctypes.c_void_p)
    # c_void_p elements read back as int, or None for NULL
    return [kind.wrap(ptr[i]) for i in range(count)]


def decode_struct_array(
    address: Address,
    count: int,
    struct_type: type[ctypes.Structure],
    decode: Callable[[ctypes.Structure], T],
) -> list[T]:
    """
    Decode *count* consecutive *struct_type* records at *address*.

    Records are read at a stride of ``ctypes.sizeof(struct_type)`` and
    each is passed to *decode*, which must return a value that does not
    alias the native memory.
    """
    if count <= 0:
        return []

    ptr = cast_address(address, struct_type)
    return [decode(ptr[i]) for i in range(count)]
