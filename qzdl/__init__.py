"""Doom launcher configuration: ZDL INI settings, WAD map names and engine command lines."""

__version__ = "3.3.0.0"