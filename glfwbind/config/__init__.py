"""
glfwbind.config - Binding configuration.

This package contains:
    - library : LibraryConfig - library search and text encoding settings
"""

from glfwbind.config.library import LibraryConfig

__all__ = ["LibraryConfig"]
