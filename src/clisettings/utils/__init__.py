"""Common utility functions and helpers for the clisettings package."""

from clisettings.utils.file import atomic_write_text, ensure_directory_exists

__all__ = [
    "atomic_write_text",
    "ensure_directory_exists",
]
