from __future__ import annotations

import ctypes

import pytest

from glfwbind.interop.arrays import decode_handle_array, decode_struct_array
from glfwbind.interop.handles import Monitor
from glfwbind.interop.structs import GLFWvidmode, VideoMode


def _address_buffer(count: int):
    return (ctypes.c_void_p * max(count, 1))(*(0x1000 + 0x10 * i for i in range(count)))


@pytest.mark.parametrize("count", [0, 1, 16])
def test_decode_handle_array_lengths(count: int) -> None:
    buffer = _address_buffer(count)
    monitors = decode_handle_array(
        ctypes.cast(buffer, ctypes.POINTER(ctypes.c_void_p)), count, Monitor
    )

    assert len(monitors) == count
    assert monitors == [Monitor.wrap(0x1000 + 0x10 * i) for i in range(count)]


def test_null_array_with_zero_count() -> None:
    assert decode_handle_array(None, 0, Monitor) == []
    assert decode_struct_array(None, 0, GLFWvidmode, VideoMode.from_native) == []


def test_handles_survive_buffer_overwrite() -> None:
    buffer = _address_buffer(3)
    monitors = decode_handle_array(
        ctypes.cast(buffer, ctypes.POINTER(ctypes.c_void_p)), 3, Monitor
    )

    ctypes.memset(buffer, 0, ctypes.sizeof(buffer))

    assert [m.address for m in monitors] == [0x1000, 0x1010, 0x1020]


def test_decode_struct_array_reads_at_struct_stride() -> None:
    buffer = (GLFWvidmode * 3)(
        GLFWvidmode(640, 480, 8, 8, 8, 60),
        GLFWvidmode(800, 600, 8, 8, 8, 75),
        GLFWvidmode(1024, 768, 8, 8, 8, 85),
    )

    modes = decode_struct_array(
        ctypes.cast(buffer, ctypes.POINTER(GLFWvidmode)), 3, GLFWvidmode, VideoMode.from_native
    )

    assert [m.size for m in modes] == [(640, 480), (800, 600), (1024, 768)]
    assert [m.refresh_rate for m in modes] == [60, 75, 85]


def test_struct_snapshot_survives_buffer_overwrite() -> None:
    buffer = (GLFWvidmode * 2)(
        GLFWvidmode(640, 480, 8, 8, 8, 60),
        GLFWvidmode(800, 600, 8, 8, 8, 75),
    )
    modes = decode_struct_array(
        ctypes.cast(buffer, ctypes.POINTER(GLFWvidmode)), 2, GLFWvidmode, VideoMode.from_native
    )

    ctypes.memset(buffer, 0xFF, ctypes.sizeof(buffer))

    assert modes[1] == VideoMode(800, 600, 8, 8, 8, 75)


def test_count_of_sixteen_structs() -> None:
    buffer = (GLFWvidmode * 16)(*(GLFWvidmode(100 + i, 100, 8, 8, 8, 60) for i in range(16)))

    modes = decode_struct_array(buffer, 16, GLFWvidmode, VideoMode.from_native)

    assert [m.width for m in modes] == list(range(100, 116))
