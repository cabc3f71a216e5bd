from __future__ import annotations

import logging

import pytest

import glfwbind
import glfwbind.__main__ as entry
from glfwbind.core.binding import Glfw
from glfwbind.core.errors import LibraryNotFoundError
from glfwbind.core.recording import RecordingProvider
from glfwbind.interop.constants import ErrorCode


@pytest.fixture(autouse=True)
def _no_root_handlers(monkeypatch):
    monkeypatch.setattr(entry, "setup_logging", lambda: None)


def test_report_lists_monitors_and_modes(glfw) -> None:
    text = entry.report(glfw)

    assert text.startswith("GLFW 3.1.2 (3.1.2 Recording)")
    assert "Monitors: 2" in text
    assert "Recording Monitor 1 (primary)" in text
    assert "position: 1920,0  physical size: 520x290 mm" in text
    assert "1280x720 R8G8B8 @60Hz" in text


def test_main_with_recording_provider(capsys) -> None:
    provider = RecordingProvider(monitor_count=1)

    assert entry.main(provider) == 0

    out = capsys.readouterr().out
    assert "Monitors: 1" in out
    assert provider.call_names()[-1] == "glfwTerminate"


def test_main_init_failure() -> None:
    provider = RecordingProvider()
    provider.fail_init = True

    assert entry.main(provider) == 1


def test_main_library_not_found(monkeypatch, caplog) -> None:
    def missing(provider=None, config=None):
        raise LibraryNotFoundError(["libglfw.so.3"])

    monkeypatch.setattr(entry, "Glfw", missing)

    with caplog.at_level(logging.ERROR, logger="glfwbind"):
        assert entry.main() == 1

    assert "libglfw.so.3" in caplog.text


def test_error_callback_logs(caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="glfwbind"):
        entry.on_error(ErrorCode.INVALID_ENUM, "bad hint")
        entry.on_error(0x0001FFFF, "future error")

    assert "INVALID_ENUM: bad hint" in caplog.text
    assert "0x1ffff: future error" in caplog.text


def test_safe_stream_handler_replaces_unencodable(tmp_path) -> None:
    path = tmp_path / "out.log"
    with open(path, "w", encoding="ascii") as stream:
        handler = entry.SafeStreamHandler(stream)
        handler.emit(logging.makeLogRecord({"msg": "Fenêtre", "levelno": logging.INFO}))

    assert path.read_text(encoding="ascii") == "Fen?tre\n"


def test_glfw_is_exported() -> None:
    assert glfwbind.Glfw is Glfw
