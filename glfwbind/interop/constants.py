"""
glfwbind.interop.constants - GLFW 3.1 header constants.

Every value here is copied from glfw3.h.  The native library does not
validate against these tables (a wrong value is silent misconfiguration),
so they must match the compiled headers exactly.
"""

from __future__ import annotations

import enum
import logging
import operator
from typing import TypeVar, Union

from glfwbind.core.errors import PreconditionError

log = logging.getLogger(__name__)

E = TypeVar("E", bound=enum.IntEnum)

TRUE = 1
FALSE = 0

# Accepted wherever GLFW documents "don't care" for an integer hint
DONT_CARE = -1


# ============================================================================
# Errors and events
# ============================================================================
class ErrorCode(enum.IntEnum):
    """Error codes delivered through the error callback."""

    NOT_INITIALIZED = 0x00010001
    NO_CURRENT_CONTEXT = 0x00010002
    INVALID_ENUM = 0x00010003
    INVALID_VALUE = 0x00010004
    OUT_OF_MEMORY = 0x00010005
    API_UNAVAILABLE = 0x00010006
    VERSION_UNAVAILABLE = 0x00010007
    PLATFORM_ERROR = 0x00010008
    FORMAT_UNAVAILABLE = 0x00010009


class MonitorEvent(enum.IntEnum):
    CONNECTED = 0x00040001
    DISCONNECTED = 0x00040002


class Action(enum.IntEnum):
    """Key and mouse button actions."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Modifier(enum.IntFlag):
    """Modifier key bits passed to key and mouse button callbacks."""

    NONE = 0
    SHIFT = 0x0001
    CONTROL = 0x0002
    ALT = 0x0004
    SUPER = 0x0008


# ============================================================================
# Hint values
# ============================================================================
class ClientApi(enum.IntEnum):
    OPENGL_API = 0x00030001
    OPENGL_ES_API = 0x00030002


class ContextRobustness(enum.IntEnum):
    NO_ROBUSTNESS = 0
    NO_RESET_NOTIFICATION = 0x00031001
    LOSE_CONTEXT_ON_RESET = 0x00031002


class OpenGLProfile(enum.IntEnum):
    OPENGL_ANY_PROFILE = 0
    OPENGL_CORE_PROFILE = 0x00032001
    OPENGL_COMPAT_PROFILE = 0x00032002


class ReleaseBehavior(enum.IntEnum):
    ANY_RELEASE_BEHAVIOR = 0
    RELEASE_BEHAVIOR_FLUSH = 0x00035001
    RELEASE_BEHAVIOR_NONE = 0x00035002


# ============================================================================
# Window hints and attributes
# ============================================================================
class WindowHint(enum.IntEnum):
    """Keys accepted by glfwWindowHint."""

    # Window related
    FOCUSED = 0x00020001
    RESIZABLE = 0x00020003
    VISIBLE = 0x00020004
    DECORATED = 0x00020005
    AUTO_ICONIFY = 0x00020006
    FLOATING = 0x00020007

    # Framebuffer related
    RED_BITS = 0x00021001
    GREEN_BITS = 0x00021002
    BLUE_BITS = 0x00021003
    ALPHA_BITS = 0x00021004
    DEPTH_BITS = 0x00021005
    STENCIL_BITS = 0x00021006
    ACCUM_RED_BITS = 0x00021007
    ACCUM_GREEN_BITS = 0x00021008
    ACCUM_BLUE_BITS = 0x00021009
    ACCUM_ALPHA_BITS = 0x0002100A
    AUX_BUFFERS = 0x0002100B
    STEREO = 0x0002100C
    SAMPLES = 0x0002100D
    SRGB_CAPABLE = 0x0002100E
    REFRESH_RATE = 0x0002100F
    DOUBLEBUFFER = 0x00021010

    # Context related
    CLIENT_API = 0x00022001
    CONTEXT_VERSION_MAJOR = 0x00022002
    CONTEXT_VERSION_MINOR = 0x00022003
    CONTEXT_ROBUSTNESS = 0x00022005
    OPENGL_FORWARD_COMPAT = 0x00022006
    OPENGL_DEBUG_CONTEXT = 0x00022007
    OPENGL_PROFILE = 0x00022008
    CONTEXT_RELEASE_BEHAVIOR = 0x00022009


class WindowAttrib(enum.IntEnum):
    """Boolean attributes readable through glfwGetWindowAttrib."""

    FOCUSED = 0x00020001
    ICONIFIED = 0x00020002
    RESIZABLE = 0x00020003
    VISIBLE = 0x00020004
    DECORATED = 0x00020005
    FLOATING = 0x00020007
    OPENGL_FORWARD_COMPAT = 0x00022006
    OPENGL_DEBUG_CONTEXT = 0x00022007


BOOLEAN_HINTS = frozenset({
    WindowHint.FOCUSED,
    WindowHint.RESIZABLE,
    WindowHint.VISIBLE,
    WindowHint.DECORATED,
    WindowHint.AUTO_ICONIFY,
    WindowHint.FLOATING,
    WindowHint.STEREO,
    WindowHint.SRGB_CAPABLE,
    WindowHint.DOUBLEBUFFER,
    WindowHint.OPENGL_FORWARD_COMPAT,
    WindowHint.OPENGL_DEBUG_CONTEXT,
})

INTEGER_HINTS = frozenset({
    WindowHint.RED_BITS,
    WindowHint.GREEN_BITS,
    WindowHint.BLUE_BITS,
    WindowHint.ALPHA_BITS,
    WindowHint.DEPTH_BITS,
    WindowHint.STENCIL_BITS,
    WindowHint.ACCUM_RED_BITS,
    WindowHint.ACCUM_GREEN_BITS,
    WindowHint.ACCUM_BLUE_BITS,
    WindowHint.ACCUM_ALPHA_BITS,
    WindowHint.AUX_BUFFERS,
    WindowHint.SAMPLES,
    WindowHint.REFRESH_RATE,
    WindowHint.CONTEXT_VERSION_MAJOR,
    WindowHint.CONTEXT_VERSION_MINOR,
})

# Hint key -> enum whose members are the legal values
ENUM_HINTS: dict[WindowHint, type[enum.IntEnum]] = {
    WindowHint.CLIENT_API: ClientApi,
    WindowHint.CONTEXT_ROBUSTNESS: ContextRobustness,
    WindowHint.OPENGL_PROFILE: OpenGLProfile,
    WindowHint.CONTEXT_RELEASE_BEHAVIOR: ReleaseBehavior,
}

# Values glfwDefaultWindowHints restores
DEFAULT_HINTS: dict[WindowHint, int] = {
    WindowHint.FOCUSED: TRUE,
    WindowHint.RESIZABLE: TRUE,
    WindowHint.VISIBLE: TRUE,
    WindowHint.DECORATED: TRUE,
    WindowHint.AUTO_ICONIFY: TRUE,
    WindowHint.FLOATING: FALSE,
    WindowHint.RED_BITS: 8,
    WindowHint.GREEN_BITS: 8,
    WindowHint.BLUE_BITS: 8,
    WindowHint.ALPHA_BITS: 8,
    WindowHint.DEPTH_BITS: 24,
    WindowHint.STENCIL_BITS: 8,
    WindowHint.ACCUM_RED_BITS: 0,
    WindowHint.ACCUM_GREEN_BITS: 0,
    WindowHint.ACCUM_BLUE_BITS: 0,
    WindowHint.ACCUM_ALPHA_BITS: 0,
    WindowHint.AUX_BUFFERS: 0,
    WindowHint.STEREO: FALSE,
    WindowHint.SAMPLES: 0,
    WindowHint.SRGB_CAPABLE: FALSE,
    WindowHint.REFRESH_RATE: DONT_CARE,
    WindowHint.DOUBLEBUFFER: TRUE,
    WindowHint.CLIENT_API: ClientApi.OPENGL_API,
    WindowHint.CONTEXT_VERSION_MAJOR: 1,
    WindowHint.CONTEXT_VERSION_MINOR: 0,
    WindowHint.CONTEXT_ROBUSTNESS: ContextRobustness.NO_ROBUSTNESS,
    WindowHint.OPENGL_FORWARD_COMPAT: FALSE,
    WindowHint.OPENGL_DEBUG_CONTEXT: FALSE,
    WindowHint.OPENGL_PROFILE: OpenGLProfile.OPENGL_ANY_PROFILE,
    WindowHint.CONTEXT_RELEASE_BEHAVIOR: ReleaseBehavior.ANY_RELEASE_BEHAVIOR,
}


# ============================================================================
# Encoding / decoding
# ============================================================================
Option = Union[enum.Enum, bool, int]


def encode(option: Option) -> int:
    """
    Translate a symbolic option into the integer GLFW expects.

    Enum members give their value, booleans give TRUE/FALSE and integers
    (anything supporting __index__) pass through unchanged.

    Raises:
        PreconditionError: *option* is not integral (e.g. a float or str).
    """
    if isinstance(option, bool):
        return TRUE if option else FALSE
    value = option.value if isinstance(option, enum.Enum) else option
    try:
        return operator.index(value)
    except TypeError:
        raise PreconditionError(
            f"Option must be an int, bool or enum member, got {option!r}"
        ) from None


def decode(enum_type: type[E], raw: int) -> Union[E, int]:
    """
    Map a raw native integer to a member of *enum_type*.

    Unknown values (e.g. from a newer GLFW than these tables) are returned
    as the raw int.
    """
    try:
        return enum_type(raw)
    except ValueError:
        log.warning("Unknown %s value from native code: %#x", enum_type.__name__, raw)
        return raw
