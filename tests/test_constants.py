from __future__ import annotations

import logging

import pytest

from glfwbind.core.errors import PreconditionError
from glfwbind.core.hints import normalize_hint
from glfwbind.interop.constants import (
    DEFAULT_HINTS,
    DONT_CARE,
    FALSE,
    TRUE,
    ClientApi,
    ErrorCode,
    MonitorEvent,
    OpenGLProfile,
    WindowAttrib,
    WindowHint,
    decode,
    encode,
)


def test_encode_booleans() -> None:
    assert encode(True) == TRUE == 1
    assert encode(False) == FALSE == 0


def test_encode_enum_members_and_ints() -> None:
    assert encode(ClientApi.OPENGL_ES_API) == 0x00030002
    assert encode(OpenGLProfile.OPENGL_CORE_PROFILE) == 0x00032001
    assert encode(WindowHint.SAMPLES) == 0x0002100D
    assert encode(4) == 4
    assert encode(DONT_CARE) == -1


def test_header_values() -> None:
    assert ErrorCode.NOT_INITIALIZED == 0x00010001
    assert ErrorCode.FORMAT_UNAVAILABLE == 0x00010009
    assert MonitorEvent.CONNECTED == 0x00040001
    assert WindowHint.CONTEXT_VERSION_MAJOR == 0x00022002
    assert WindowAttrib.ICONIFIED == 0x00020002


def test_every_hint_has_a_default() -> None:
    assert set(DEFAULT_HINTS) == set(WindowHint)


def test_decode_known_value() -> None:
    assert decode(ErrorCode, 0x00010004) is ErrorCode.INVALID_VALUE


def test_decode_unknown_value_returns_raw_int(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="glfwbind.interop.constants"):
        assert decode(ErrorCode, 0x0001FFFF) == 0x0001FFFF

    assert "Unknown ErrorCode" in caplog.text


class _IndexLike:
    def __index__(self) -> int:
        return 7


def test_encode_accepts_index_types() -> None:
    assert encode(_IndexLike()) == 7


@pytest.mark.parametrize("value", [4.7, "4", None, 1j])
def test_encode_rejects_non_integral_values(value) -> None:
    with pytest.raises(PreconditionError):
        encode(value)


def test_float_hint_is_rejected_not_truncated() -> None:
    with pytest.raises(PreconditionError):
        normalize_hint(WindowHint.SAMPLES, 4.7)
