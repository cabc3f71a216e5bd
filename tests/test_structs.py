from __future__ import annotations

import ctypes

import pytest

from glfwbind.core.errors import PreconditionError
from glfwbind.interop.structs import (
    GAMMA_RAMP_SIZE,
    GLFWgammaramp,
    GLFWvidmode,
    GammaRamp,
    VideoMode,
    decode_gamma_ramp,
    decode_video_mode,
    encode_gamma_ramp,
)

STEPPED = tuple(range(0, 65536, 256))


def test_vidmode_layout_is_six_ints() -> None:
    assert ctypes.sizeof(GLFWvidmode) == 6 * ctypes.sizeof(ctypes.c_int)
    assert [name for name, _ in GLFWvidmode._fields_] == [
        "width", "height", "redBits", "greenBits", "blueBits", "refreshRate",
    ]


def test_decode_video_mode_copies_fields() -> None:
    native = GLFWvidmode(2560, 1440, 10, 10, 10, 144)
    mode = decode_video_mode(ctypes.pointer(native))

    native.width = 1
    assert mode == VideoMode(2560, 1440, 10, 10, 10, 144)
    assert mode.size == (2560, 1440)
    assert mode.bits_per_pixel == 30
    assert str(mode) == "2560x1440 R10G10B10 @144Hz"


def test_decode_video_mode_null() -> None:
    assert decode_video_mode(None) is None


def test_gamma_ramp_requires_256_samples() -> None:
    with pytest.raises(PreconditionError):
        GammaRamp(STEPPED[:-1], STEPPED, STEPPED)


def test_gamma_ramp_rejects_out_of_range_samples() -> None:
    bad = STEPPED[:-1] + (65536,)
    with pytest.raises(PreconditionError):
        GammaRamp(STEPPED, bad, STEPPED)


def test_linear_ramp_spans_full_range() -> None:
    ramp = GammaRamp.linear()
    assert ramp.red[0] == 0
    assert ramp.red[-1] == 65535
    assert ramp.red == ramp.green == ramp.blue


def test_encode_gamma_ramp_builds_native_struct() -> None:
    red = STEPPED
    green = tuple(reversed(STEPPED))
    blue = (1000,) * GAMMA_RAMP_SIZE

    native = encode_gamma_ramp(red, green, blue)

    assert native.struct.size == GAMMA_RAMP_SIZE
    assert native.struct.red[0] == 0
    assert native.struct.red[255] == 255 * 256
    assert native.struct.green[0] == 255 * 256
    assert native.struct.blue[128] == 1000


def test_encode_then_decode_preserves_samples() -> None:
    native = encode_gamma_ramp(STEPPED, STEPPED, STEPPED)
    ramp = decode_gamma_ramp(native.pointer())

    assert ramp == GammaRamp(STEPPED, STEPPED, STEPPED)


def test_decode_gamma_ramp_null() -> None:
    assert decode_gamma_ramp(None) is None


def test_decode_gamma_ramp_rejects_other_sizes() -> None:
    channel = (ctypes.c_ushort * 16)()
    ushort_p = ctypes.POINTER(ctypes.c_ushort)
    pointer = ctypes.cast(channel, ushort_p)
    native = GLFWgammaramp(pointer, pointer, pointer, 16)

    with pytest.raises(PreconditionError):
        decode_gamma_ramp(ctypes.pointer(native))


def test_encode_rejects_short_channel() -> None:
    with pytest.raises(PreconditionError):
        encode_gamma_ramp(STEPPED, STEPPED, STEPPED[:10])


class _Sample:
    """Int-like sample, as produced by array libraries."""

    def __init__(self, value: int) -> None:
        self.value = value

    def __index__(self) -> int:
        return self.value


def test_gamma_ramp_accepts_index_samples() -> None:
    ramp = GammaRamp(tuple(_Sample(v) for v in STEPPED), STEPPED, STEPPED)

    assert ramp.red == STEPPED
    assert all(type(v) is int for v in ramp.red)


@pytest.mark.parametrize("bad", [1.5, "1", True, -1])
def test_gamma_ramp_rejects_non_integer_samples(bad) -> None:
    channel = (bad,) + STEPPED[1:]
    with pytest.raises(PreconditionError):
        GammaRamp(channel, STEPPED, STEPPED)
