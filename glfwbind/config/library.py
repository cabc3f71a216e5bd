"""
glfwbind.config.library - Where to find GLFW and how to talk to it.

Environment variables:
    GLFWBIND_LIBRARY   -> Explicit path (or name) of the GLFW shared library
    GLFWBIND_ENCODING  -> Text encoding for titles and native strings

Without GLFWBIND_LIBRARY the loader asks ctypes.util.find_library, then
falls back to the usual file names for the current platform.
"""

from __future__ import annotations

import ctypes.util
import logging
import os
import sys
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional

log = logging.getLogger(__name__)

ENV_LIBRARY = "GLFWBIND_LIBRARY"
ENV_ENCODING = "GLFWBIND_ENCODING"

DEFAULT_ENCODING = "utf-8"

# Names handed to ctypes.util.find_library
FIND_LIBRARY_NAMES: tuple[str, ...] = ("glfw", "glfw3")


def platform_library_names(platform: str = sys.platform) -> tuple[str, ...]:
    """File names GLFW 3 is commonly installed under on *platform*."""
    if platform.startswith("win"):
        return ("glfw3.dll", "glfw.dll")
    if platform == "darwin":
        return ("libglfw.3.dylib", "libglfw3.dylib", "libglfw.dylib")
    return ("libglfw.so.3", "libglfw3.so", "libglfw.so")


@dataclass(frozen=True, slots=True)
class LibraryConfig:
    """
    Loader and marshaling settings for a Glfw instance.

    Attributes:
        library_path: Explicit library to load; skips the search when set.
        search_names: Fallback file names tried after find_library.
        encoding:     Encoding for strings passed to / read from GLFW.
    """

    library_path: Optional[str] = None
    search_names: tuple[str, ...] = platform_library_names()
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> LibraryConfig:
        path = environ.get(ENV_LIBRARY, "").strip() or None
        encoding = environ.get(ENV_ENCODING, "").strip() or DEFAULT_ENCODING
        if path is not None:
            log.debug("%s=%s", ENV_LIBRARY, path)
        return cls(library_path=path, encoding=encoding)

    def candidate_names(self) -> Iterator[str]:
        """
        Yield library names to try, in order, without duplicates.

        An explicit library_path is the only candidate when set.
        """
        if self.library_path:
            yield self.library_path
            return

        seen: set[str] = set()
        for short in FIND_LIBRARY_NAMES:
            found = ctypes.util.find_library(short)
            if found and found not in seen:
                seen.add(found)
                yield found

        for name in self.search_names:
            if name not in seen:
                seen.add(name)
                yield name

    def encode_text(self, text: str) -> bytes:
        return text.encode(self.encoding)

    def decode_text(self, raw: Optional[bytes]) -> str:
        if not raw:
            return ""
        return raw.decode(self.encoding, errors="replace")
