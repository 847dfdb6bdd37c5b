"""Entries shown in the launcher's list widgets."""

from __future__ import annotations

from .config import get_active_configuration


class Listable:
    """A list entry with a visible label."""

    def __init__(self, name: str = ""):
        self.text = name

    @property
    def name(self) -> str:
        return self.text

    @name.setter
    def name(self, value: str) -> None:
        self.text = value

    def __str__(self) -> str:
        return self.text


class NameListable(Listable):
    """An entry pairing a display name with a file path.

    The visible label is ``"name [file]"`` unless the active configuration
    sets ``zdl.general/showpaths`` to ``"0"``, in which case it is the name.
    """

    def __init__(self, file: str, name: str):
        self._file = file
        self._display_name = name
        super().__init__(self.generate_name())

    @property
    def file(self) -> str:
        return self._file

    @property
    def name(self) -> str:
        return self._display_name

    @name.setter
    def name(self, value: str) -> None:
        self.set_display_name(value)

    def set_display_name(self, name: str) -> None:
        self._display_name = name
        self.text = self.generate_name()

    def set_file(self, file: str) -> None:
        self._file = file
        self.text = self.generate_name()

    def generate_name(self) -> str:
        """Build the visible label from the name, the file and the settings."""
        show_path = True
        settings = get_active_configuration()
        if settings is not None and settings.contains("zdl.general/showpaths"):
            if settings.value("zdl.general/showpaths") == "0":
                show_path = False
        if show_path:
            return f"{self._display_name} [{self._file}]"
        return self._display_name


class FileListable(NameListable):
    """A file entry named after its last path component, with a check state."""

    def __init__(self, file: str):
        super().__init__(file, file.rsplit("/", 1)[-1])
        self.enabled = False

    @property
    def state(self) -> bool:
        return self.enabled

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False