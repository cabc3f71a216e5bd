from __future__ import annotations

import logging

import pytest

from glfwbind.core.callbacks import CallbackRegistry, EventKind
from glfwbind.core.errors import HandleKindError, PreconditionError
from glfwbind.interop.constants import Action, ErrorCode, Modifier, MonitorEvent
from glfwbind.interop.handles import Monitor, Window


def test_event_kind_scopes() -> None:
    assert not EventKind.ERROR.window_scoped
    assert not EventKind.MONITOR.window_scoped
    assert EventKind.KEY.window_scoped
    assert EventKind.WINDOW_POS.setter == "glfwSetWindowPosCallback"


def test_replacing_a_callback_routes_events_to_the_new_one_only(glfw, provider, event_log) -> None:
    window = glfw.create_window(800, 600, "title")
    first, second = event_log(), event_log()

    glfw.set_window_pos_callback(window, first)
    glfw.set_window_pos_callback(window, second)
    provider.queue_event("glfwSetWindowPosCallback", window.address, 10, 20)
    glfw.poll_events()

    assert first.calls == []
    assert second.calls == [(window, 10, 20)]


def test_replacement_installs_new_thunk_natively(glfw, provider, event_log) -> None:
    window = glfw.create_window(800, 600, "title")

    glfw.set_key_callback(window, event_log())
    old = glfw.callbacks.thunk_for(EventKind.KEY, window)
    glfw.set_key_callback(window, event_log())
    new = glfw.callbacks.thunk_for(EventKind.KEY, window)

    assert new is not old
    assert provider.installed("glfwSetKeyCallback", window.address) is new


def test_clearing_a_callback(glfw, provider, event_log) -> None:
    window = glfw.create_window(800, 600, "title")
    log = event_log()

    glfw.set_window_size_callback(window, log)
    glfw.set_window_size_callback(window, None)
    glfw.set_window_size(window, 1024, 768)
    glfw.poll_events()

    assert log.calls == []
    assert provider.installed("glfwSetWindowSizeCallback", window.address) is None
    assert not glfw.callbacks.is_active(EventKind.WINDOW_SIZE, window)


def test_clearing_an_empty_slot_is_harmless(glfw) -> None:
    glfw.set_monitor_callback(None)
    assert len(glfw.callbacks) == 1


def test_callbacks_are_per_window(glfw, provider, event_log) -> None:
    a = glfw.create_window(100, 100, "a")
    b = glfw.create_window(100, 100, "b")
    log_a, log_b = event_log(), event_log()

    glfw.set_window_close_callback(a, log_a)
    glfw.set_window_close_callback(b, log_b)
    provider.request_close(b.address)
    glfw.poll_events()

    assert log_a.calls == []
    assert log_b.calls == [(b,)]
    assert glfw.window_should_close(b)
    assert not glfw.window_should_close(a)


def test_key_arguments_are_decoded(glfw, provider, event_log) -> None:
    window = glfw.create_window(100, 100, "keys")
    log = event_log()

    glfw.set_key_callback(window, log)
    provider.queue_event("glfwSetKeyCallback", window.address, 65, 38, 1, 0x3)
    glfw.poll_events()

    (args,) = log.calls
    assert args == (window, 65, 38, Action.PRESS, Modifier.SHIFT | Modifier.CONTROL)
    assert isinstance(args[3], Action)


def test_char_and_scroll_arguments_are_decoded(glfw, provider, event_log) -> None:
    window = glfw.create_window(100, 100, "input")
    chars, scrolls = event_log(), event_log()

    glfw.set_char_callback(window, chars)
    glfw.set_scroll_callback(window, scrolls)
    provider.queue_event("glfwSetCharCallback", window.address, 0x00E9)
    provider.queue_event("glfwSetScrollCallback", window.address, 0.0, -1.5)
    glfw.poll_events()

    assert chars.calls == [(window, "é")]
    assert scrolls.calls == [(window, 0.0, -1.5)]


def test_iconify_flag_is_decoded_to_bool(glfw, event_log) -> None:
    window = glfw.create_window(100, 100, "icon")
    log = event_log()

    glfw.set_window_iconify_callback(window, log)
    glfw.iconify_window(window)
    glfw.poll_events()
    glfw.restore_window(window)
    glfw.poll_events()

    assert log.calls == [(window, True), (window, False)]


def test_monitor_callback_receives_handle_and_event(glfw, provider, event_log) -> None:
    log = event_log()
    glfw.set_monitor_callback(log)

    address = provider.add_monitor("Hotplugged")
    glfw.poll_events()
    provider.disconnect_monitor(address)
    glfw.poll_events()

    assert log.calls == [
        (Monitor.wrap(address), MonitorEvent.CONNECTED),
        (Monitor.wrap(address), MonitorEvent.DISCONNECTED),
    ]


def test_error_callback_runs_during_the_failing_call(glfw, errors) -> None:
    glfw.swap_interval(1)

    assert errors.errors == [
        (ErrorCode.NO_CURRENT_CONTEXT, "No context is current for this thread")
    ]


def test_callback_exceptions_are_logged_not_raised(glfw, provider, caplog) -> None:
    window = glfw.create_window(100, 100, "boom")

    def broken(win, x, y):
        raise RuntimeError("callback failed")

    glfw.set_window_pos_callback(window, broken)
    provider.queue_event("glfwSetWindowPosCallback", window.address, 1, 2)

    with caplog.at_level(logging.ERROR, logger="glfwbind.core.callbacks"):
        glfw.poll_events()

    assert "Error in window_pos callback" in caplog.text
    assert "callback failed" in caplog.text


def test_destroying_a_window_releases_its_slots(glfw, event_log) -> None:
    window = glfw.create_window(100, 100, "gone")
    glfw.set_window_pos_callback(window, event_log())
    glfw.set_key_callback(window, event_log())

    glfw.destroy_window(window)

    assert glfw.callbacks.get(EventKind.KEY, window) is None
    assert [s.kind for s in glfw.callbacks.slots] == [EventKind.ERROR]


def test_error_slot_survives_terminate(glfw, provider, errors, event_log) -> None:
    glfw.set_monitor_callback(event_log())
    glfw.terminate()

    assert glfw.callbacks.is_active(EventKind.ERROR)
    assert not glfw.callbacks.is_active(EventKind.MONITOR)

    glfw.poll_events()
    assert errors.codes == [ErrorCode.NOT_INITIALIZED]


def test_window_scoped_kind_requires_window(glfw, event_log) -> None:
    with pytest.raises(PreconditionError):
        glfw.callbacks.register(EventKind.KEY, event_log())


def test_global_kind_rejects_window(glfw, event_log) -> None:
    window = glfw.create_window(100, 100, "w")
    with pytest.raises(PreconditionError):
        glfw.callbacks.register(EventKind.MONITOR, event_log(), window)


def test_window_slot_rejects_monitor_handle(glfw, event_log) -> None:
    monitor = glfw.get_primary_monitor()
    with pytest.raises(HandleKindError):
        glfw.set_window_focus_callback(monitor, event_log())


def test_unregister_reports_previous_state(glfw, event_log) -> None:
    glfw.set_monitor_callback(event_log())

    assert glfw.callbacks.unregister(EventKind.MONITOR) is True
    assert glfw.callbacks.unregister(EventKind.MONITOR) is False


def test_registry_with_fake_library(event_log) -> None:
    class FakeLib:
        def __init__(self) -> None:
            self.installed: list = []

        def glfwSetErrorCallback(self, cbfun):
            self.installed.append(cbfun)

    lib = FakeLib()
    registry = CallbackRegistry(lib)
    log = event_log()

    registry.register(EventKind.ERROR, log)
    lib.installed[-1](0x00010004, b"Invalid value")

    assert log.calls == [(ErrorCode.INVALID_VALUE, "Invalid value")]
    assert "error" in registry.dump_state()


def test_window_decoded_from_raw_address(event_log) -> None:
    class FakeLib:
        def glfwSetWindowFocusCallback(self, window, cbfun):
            self.thunk = cbfun

    lib = FakeLib()
    log = event_log()
    CallbackRegistry(lib).register(EventKind.WINDOW_FOCUS, log, Window.wrap(0x500))

    lib.thunk(0x500, 1)

    assert log.calls == [(Window.wrap(0x500), True)]


def test_discard_drops_slot_without_native_call(glfw, provider, event_log) -> None:
    glfw.set_monitor_callback(event_log())
    calls_before = len(provider.calls)

    assert glfw.callbacks.discard(EventKind.MONITOR) is True
    assert glfw.callbacks.discard(EventKind.MONITOR) is False
    assert len(provider.calls) == calls_before
