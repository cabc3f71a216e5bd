"""
glfwbind.interop - Marshaling across the Python / GLFW boundary.

This package contains:
    - handles   : Typed Monitor / Window wrappers around native pointers
    - constants : GLFW integer constants and the option encoder
    - structs   : GLFWvidmode / GLFWgammaramp layouts and codecs
    - arrays    : Decoding of native arrays of handles or structs
"""

from glfwbind.interop.handles import Handle, Monitor, Window, expect, is_none
from glfwbind.interop.constants import (
    DONT_CARE,
    Action,
    ClientApi,
    ContextRobustness,
    ErrorCode,
    Modifier,
    MonitorEvent,
    OpenGLProfile,
    ReleaseBehavior,
    WindowAttrib,
    WindowHint,
    decode,
    encode,
)
from glfwbind.interop.structs import (
    GAMMA_RAMP_SIZE,
    GammaRamp,
    NativeGammaRamp,
    VideoMode,
    decode_gamma_ramp,
    decode_video_mode,
    encode_gamma_ramp,
)
from glfwbind.interop.arrays import decode_handle_array, decode_struct_array

__all__ = [
    "Handle", "Monitor", "Window", "expect", "is_none",
    "DONT_CARE", "Action", "ClientApi", "ContextRobustness", "ErrorCode",
    "Modifier", "MonitorEvent", "OpenGLProfile", "ReleaseBehavior",
    "WindowAttrib", "WindowHint", "decode", "encode",
    "GAMMA_RAMP_SIZE", "GammaRamp", "NativeGammaRamp", "VideoMode",
    "decode_gamma_ramp", "decode_video_mode", "encode_gamma_ramp",
    "decode_handle_array", "decode_struct_array",
]
