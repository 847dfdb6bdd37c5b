"""Name and file entry used when adding IWADs and source ports."""

from __future__ import annotations

import os
from urllib.parse import unquote, urlsplit

from .config import get_active_configuration
from .listables import NameListable

LAST_DIR_KEY = "zdl.general/lastDir"


def get_last_dir() -> str:
    """Return the directory last used in a file chooser, or an empty string."""
    settings = get_active_configuration()
    if settings is None or not settings.contains(LAST_DIR_KEY):
        return ""
    return settings.value(LAST_DIR_KEY)


def save_last_dir(file_name: str) -> None:
    """Remember the absolute directory holding ``file_name``."""
    settings = get_active_configuration()
    if settings is None:
        return
    directory = os.path.dirname(os.path.abspath(file_name))
    settings.set_value(LAST_DIR_KEY, directory)


class NameInput:
    """A display name and a file path as entered for a new list entry."""

    def __init__(self, name: str = "", file: str = ""):
        self.name = name
        self.file = file
        self.filters: list[str] = []

    def get_name(self) -> str:
        """Return the entered name, falling back to the file path when empty."""
        return self.name if self.name else self.file

    def based_off(self, listable: NameListable | None) -> None:
        """Fill both fields from an existing entry."""
        if listable:
            self.file = listable.file
            self.name = listable.name

    def from_url(self, url: str) -> None:
        """Take the file path from a URL."""
        self.file = unquote(urlsplit(url).path)