"""
glfwbind - Diagnostic entry point.

Run with:  python -m glfwbind

Loads GLFW, prints its version and every connected monitor with its video
modes, then terminates.  Set GLFWBIND_LIBRARY to pick a specific library.
"""

import logging
import sys
from typing import Any, Optional

from glfwbind.core.binding import Glfw
from glfwbind.core.errors import LibraryNotFoundError
from glfwbind.interop.constants import ErrorCode

log = logging.getLogger("glfwbind")


class SafeStreamHandler(logging.StreamHandler):
    """Handler that replaces unencodable characters instead of crashing."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            enc = getattr(self.stream, "encoding", "utf-8") or "utf-8"
            safe = msg.encode(enc, errors="replace").decode(enc, errors="replace")
            self.stream.write(safe + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the report."""
    fmt = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    handler = SafeStreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def on_error(code: ErrorCode, description: str) -> None:
    """Error callback: GLFW errors are only ever reported here."""
    name = code.name if isinstance(code, ErrorCode) else f"{code:#x}"
    log.error("GLFW error %s: %s", name, description)


def report(glfw: Glfw) -> str:
    """Return the version and monitor listing of an initialized library."""
    major, minor, rev = glfw.get_version()
    lines = [f"GLFW {major}.{minor}.{rev} ({glfw.get_version_string()})", ""]

    monitors = glfw.get_monitors()
    primary = glfw.get_primary_monitor()
    lines.append(f"Monitors: {len(monitors)}")
    for index, monitor in enumerate(monitors):
        x, y = glfw.get_monitor_pos(monitor)
        w_mm, h_mm = glfw.get_monitor_physical_size(monitor)
        marker = " (primary)" if monitor == primary else ""
        lines.append(f"  [{index}] {glfw.get_monitor_name(monitor)}{marker}")
        lines.append(f"      position: {x},{y}  physical size: {w_mm}x{h_mm} mm")
        lines.append(f"      current:  {glfw.get_video_mode(monitor)}")
        for mode in glfw.get_video_modes(monitor):
            lines.append(f"        {mode}")
    return "\n".join(lines)


def main(provider: Optional[Any] = None) -> int:
    setup_logging()

    try:
        glfw = Glfw(provider)
    except LibraryNotFoundError as e:
        log.error("%s", e)
        return 1

    glfw.set_error_callback(on_error)
    if not glfw.init():
        return 1

    try:
        print("\n" + report(glfw) + "\n")
    finally:
        glfw.terminate()
    return 0


if __name__ == "__main__":
    sys.exit(main())
