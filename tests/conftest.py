from __future__ import annotations

import pytest

from glfwbind.config.library import LibraryConfig
from glfwbind.core.binding import Glfw
from glfwbind.core.recording import RecordingProvider


class ErrorLog:
    """Error callback that records (code, description) pairs."""

    def __init__(self) -> None:
        self.errors: list[tuple[object, str]] = []

    def __call__(self, code, description: str) -> None:
        self.errors.append((code, description))

    @property
    def codes(self) -> list[object]:
        return [code for code, _ in self.errors]


class EventLog:
    """Generic callback that records its arguments."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def __call__(self, *args) -> None:
        self.calls.append(args)


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def errors() -> ErrorLog:
    return ErrorLog()


@pytest.fixture
def glfw(provider: RecordingProvider, errors: ErrorLog):
    instance = Glfw(provider, LibraryConfig())
    instance.set_error_callback(errors)
    assert instance.init()
    yield instance
    instance.terminate()


@pytest.fixture
def event_log() -> type[EventLog]:
    return EventLog
