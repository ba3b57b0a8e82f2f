"""Persisted user settings for the clisettings command-line tool."""

__version__ = "0.1.0"
