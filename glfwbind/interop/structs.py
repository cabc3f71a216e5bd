"""
glfwbind.interop.structs - Fixed-layout GLFW structs and their codecs.

Defines the ctypes mirrors of GLFWvidmode and GLFWgammaramp together with
the immutable Python values they are decoded into.  Decoded values never
share memory with the native struct.
"""

from __future__ import annotations

import ctypes
import operator
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from glfwbind.core.errors import PreconditionError

# Every channel of a gamma ramp has exactly this many samples
GAMMA_RAMP_SIZE = 256

_SAMPLE_MAX = 0xFFFF

# A native address: raw int, ctypes pointer, or None for NULL
Address = Union[int, ctypes._Pointer, ctypes.c_void_p, None]


# ============================================================================
# Native layouts
# ============================================================================
class GLFWvidmode(ctypes.Structure):
    _fields_ = [
        ("width", ctypes.c_int),
        ("height", ctypes.c_int),
        ("redBits", ctypes.c_int),
        ("greenBits", ctypes.c_int),
        ("blueBits", ctypes.c_int),
        ("refreshRate", ctypes.c_int),
    ]


class GLFWgammaramp(ctypes.Structure):
    _fields_ = [
        ("red", ctypes.POINTER(ctypes.c_ushort)),
        ("green", ctypes.POINTER(ctypes.c_ushort)),
        ("blue", ctypes.POINTER(ctypes.c_ushort)),
        ("size", ctypes.c_uint),
    ]


GammaChannel = ctypes.c_ushort * GAMMA_RAMP_SIZE


def cast_address(address: Address, struct_type: type) -> ctypes._Pointer:
    """Reinterpret *address* as a pointer to *struct_type* (NULL for None)."""
    return ctypes.cast(address, ctypes.POINTER(struct_type))


# ============================================================================
# VideoMode
# ============================================================================
@dataclass(frozen=True, slots=True)
class VideoMode:
    """
    A display configuration as reported by GLFW.

    Attributes mirror GLFWvidmode field by field; the value is a snapshot
    and changing it has no effect on the monitor.
    """

    width: int
    height: int
    red_bits: int
    green_bits: int
    blue_bits: int
    refresh_rate: int

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def bits_per_pixel(self) -> int:
        return self.red_bits + self.green_bits + self.blue_bits

    @classmethod
    def from_native(cls, mode: GLFWvidmode) -> VideoMode:
        return cls(
            width=mode.width,
            height=mode.height,
            red_bits=mode.redBits,
            green_bits=mode.greenBits,
            blue_bits=mode.blueBits,
            refresh_rate=mode.refreshRate,
        )

    def to_native(self) -> GLFWvidmode:
        return GLFWvidmode(
            self.width,
            self.height,
            self.red_bits,
            self.green_bits,
            self.blue_bits,
            self.refresh_rate,
        )

    def __str__(self) -> str:
        return (
            f"{self.width}x{self.height} "
            f"R{self.red_bits}G{self.green_bits}B{self.blue_bits} "
            f"@{self.refresh_rate}Hz"
        )


def decode_video_mode(address: Address) -> Optional[VideoMode]:
    """Read a GLFWvidmode at *address*.  Returns None for NULL."""
    ptr = cast_address(address, GLFWvidmode)
    if not ptr:
        return None
    return VideoMode.from_native(ptr.contents)


# ============================================================================
# GammaRamp
# ============================================================================
def _channel(name: str, samples: Iterable[int]) -> tuple[int, ...]:
    values = tuple(samples)
    if len(values) != GAMMA_RAMP_SIZE:
        raise PreconditionError(
            f"Gamma ramp {name} channel must have {GAMMA_RAMP_SIZE} samples, "
            f"got {len(values)}"
        )
    samples_out: list[int] = []
    for v in values:
        # numpy integers and other __index__ types are accepted
        try:
            sample = operator.index(v)
        except TypeError:
            sample = None
        if sample is None or isinstance(v, bool) or not 0 <= sample <= _SAMPLE_MAX:
            raise PreconditionError(
                f"Gamma ramp {name} sample must be an integer in 0..{_SAMPLE_MAX}: {v!r}"
            )
        samples_out.append(sample)
    return tuple(samples_out)


@dataclass(frozen=True, slots=True)
class GammaRamp:
    """Three 256-sample channels of unsigned 16-bit values."""

    red: tuple[int, ...]
    green: tuple[int, ...]
    blue: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", _channel("red", self.red))
        object.__setattr__(self, "green", _channel("green", self.green))
        object.__setattr__(self, "blue", _channel("blue", self.blue))

    @classmethod
    def linear(cls) -> GammaRamp:
        """The identity ramp (0, 257, 514, ... 65535) on every channel."""
        samples = tuple(i * 257 for i in range(GAMMA_RAMP_SIZE))
        return cls(samples, samples, samples)


class NativeGammaRamp:
    """
    A GLFWgammaramp together with the three buffers it points at.

    The buffers live exactly as long as this object, so it must stay
    referenced until the native call that reads it has returned.
    """

    __slots__ = ("red", "green", "blue", "struct")

    def __init__(
        self, red: Iterable[int], green: Iterable[int], blue: Iterable[int]
    ) -> None:
        self.red = GammaChannel(*_channel("red", red))
        self.green = GammaChannel(*_channel("green", green))
        self.blue = GammaChannel(*_channel("blue", blue))
        ushort_p = ctypes.POINTER(ctypes.c_ushort)
        self.struct = GLFWgammaramp(
            ctypes.cast(self.red, ushort_p),
            ctypes.cast(self.green, ushort_p),
            ctypes.cast(self.blue, ushort_p),
            GAMMA_RAMP_SIZE,
        )

    def pointer(self) -> ctypes._Pointer:
        return ctypes.pointer(self.struct)


def encode_gamma_ramp(
    red: Iterable[int], green: Iterable[int], blue: Iterable[int]
) -> NativeGammaRamp:
    return NativeGammaRamp(red, green, blue)


def decode_gamma_ramp(address: Address) -> Optional[GammaRamp]:
    """
    Copy the GLFWgammaramp at *address* into a GammaRamp.

    Returns None for NULL.  Raises PreconditionError if the native ramp
    does not have exactly GAMMA_RAMP_SIZE samples per channel.
    """
    ptr = cast_address(address, GLFWgammaramp)
    if not ptr:
        return None

    ramp = ptr.contents
    if ramp.size != GAMMA_RAMP_SIZE:
        raise PreconditionError(
            f"Native gamma ramp has {ramp.size} samples, expected {GAMMA_RAMP_SIZE}"
        )

    return GammaRamp(
        red=tuple(ramp.red[:GAMMA_RAMP_SIZE]),
        green=tuple(ramp.green[:GAMMA_RAMP_SIZE]),
        blue=tuple(ramp.blue[:GAMMA_RAMP_SIZE]),
    )
