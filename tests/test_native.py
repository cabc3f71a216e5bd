from __future__ import annotations

import ctypes
import ctypes.util
import logging

import pytest

from glfwbind.config.library import LibraryConfig
from glfwbind.core import native
from glfwbind.core.binding import Glfw
from glfwbind.core.errors import LibraryNotFoundError
from glfwbind.core.provider import NativeProvider
from glfwbind.core.recording import RecordingProvider


class FakeFunction:
    def __init__(self, impl=None) -> None:
        self.impl = impl
        self.restype = None
        self.argtypes = None

    def __call__(self, *args):
        if self.impl is not None:
            return self.impl(*args)
        return None


class FakeCDLL:
    """Stands in for ctypes.CDLL; only names in ``loadable`` open."""

    loadable: dict[str, tuple[int, int, int]] = {}
    missing: tuple[str, ...] = ()
    opened: list[str] = []

    def __init__(self, name: str) -> None:
        FakeCDLL.opened.append(name)
        if name not in FakeCDLL.loadable:
            raise OSError(f"{name}: cannot open shared object file")
        self.name = name
        self.functions = {
            entry: FakeFunction() for entry in native.ENTRY_POINTS
            if entry not in FakeCDLL.missing
        }
        self.functions["glfwGetVersion"] = FakeFunction(self._get_version)

    def _get_version(self, major, minor, rev) -> None:
        major[0], minor[0], rev[0] = FakeCDLL.loadable[self.name]

    def __getattr__(self, name: str):
        try:
            return self.__dict__["functions"][name]
        except KeyError:
            raise AttributeError(name) from None


@pytest.fixture
def fake_cdll(monkeypatch):
    FakeCDLL.loadable = {}
    FakeCDLL.missing = ()
    FakeCDLL.opened = []
    monkeypatch.setattr(ctypes, "CDLL", FakeCDLL)
    monkeypatch.setattr(ctypes.util, "find_library", lambda name: None)
    return FakeCDLL


def test_declare_prototypes_sets_types() -> None:
    lib = FakeCDLL.__new__(FakeCDLL)
    lib.functions = {name: FakeFunction() for name in native.ENTRY_POINTS}

    assert native.declare_prototypes(lib) == []
    assert lib.glfwCreateWindow.restype is native.window_p
    assert lib.glfwGetVideoModes.argtypes == (native.monitor_p, native.int_p)
    assert lib.glfwSetKeyCallback.argtypes == (native.window_p, native.GLFWkeyfun)


def test_declare_prototypes_reports_missing(caplog) -> None:
    lib = FakeCDLL.__new__(FakeCDLL)
    lib.functions = {
        name: FakeFunction() for name in native.ENTRY_POINTS if name != "glfwWaitEvents"
    }

    with caplog.at_level(logging.WARNING, logger="glfwbind.core.native"):
        assert native.declare_prototypes(lib) == ["glfwWaitEvents"]

    assert "glfwWaitEvents" in caplog.text


def test_load_library_tries_candidates_in_order(fake_cdll) -> None:
    fake_cdll.loadable = {"libglfw3.so": (3, 1, 2)}
    config = LibraryConfig(search_names=("libglfw.so.3", "libglfw3.so"))

    lib = native.load_library(config)

    assert lib.name == "libglfw3.so"
    assert fake_cdll.opened == ["libglfw.so.3", "libglfw3.so"]
    assert lib.glfwInit.restype is ctypes.c_int


def test_load_library_explicit_path(fake_cdll) -> None:
    fake_cdll.loadable = {"/opt/glfw/libglfw.so": (3, 2, 1)}

    lib = native.load_library(LibraryConfig(library_path="/opt/glfw/libglfw.so"))

    assert lib.name == "/opt/glfw/libglfw.so"
    assert fake_cdll.opened == ["/opt/glfw/libglfw.so"]


def test_load_library_warns_on_old_version(fake_cdll, caplog) -> None:
    fake_cdll.loadable = {"libglfw.so.3": (3, 0, 4)}

    with caplog.at_level(logging.WARNING, logger="glfwbind.core.native"):
        native.load_library(LibraryConfig(search_names=("libglfw.so.3",)))

    assert "older than the supported 3.1" in caplog.text


def test_load_library_not_found(fake_cdll) -> None:
    config = LibraryConfig(search_names=("a.so", "b.so"))

    with pytest.raises(LibraryNotFoundError) as excinfo:
        native.load_library(config)

    assert excinfo.value.tried == ["a.so", "b.so"]
    assert "a.so, b.so" in str(excinfo.value)
    assert isinstance(excinfo.value, OSError)


def test_glfw_without_provider_loads_library(fake_cdll) -> None:
    fake_cdll.loadable = {"libglfw.so.3": (3, 1, 2)}

    glfw = Glfw(config=LibraryConfig(search_names=("libglfw.so.3",)))

    assert glfw.provider.name == "libglfw.so.3"


def test_recording_provider_satisfies_protocol() -> None:
    assert isinstance(RecordingProvider(), NativeProvider)


def test_every_entry_point_is_recorded() -> None:
    provider = RecordingProvider()
    assert all(callable(getattr(provider, name)) for name in native.ENTRY_POINTS)
