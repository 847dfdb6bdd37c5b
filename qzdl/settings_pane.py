"""The main tab's game settings: source port, IWAD, map and skill."""

from __future__ import annotations

import os
import re

from .component import Component
from .config import Settings, get_active_configuration
from .wad import WadError, get_map_file

SKILLS = ("None", "V. Easy", "Easy", "Medium", "Hard", "V. Hard")

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _settings() -> Settings:
    settings = get_active_configuration()
    if settings is None:
        raise RuntimeError("no active configuration")
    return settings


def _leading_int(text: str) -> int:
    """Parse the leading decimal number of ``text``; 0 when there is none."""
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _map_names(path: str) -> list[str]:
    """Return the map names in a WAD file, or an empty list if it is not one."""
    map_file = get_map_file(path)
    if map_file is None:
        return []
    try:
        map_file.open()
    except WadError:
        return []
    return map_file.get_map_names()


class SettingsPane(Component):
    """Choice of engine, IWAD, starting map and skill, kept under ``zdl.save``."""

    def __init__(self, parent: Component | None = None):
        super().__init__(parent)
        self.skill = 0
        self.warp = ""
        self.warp_items: list[str] = []
        self.source_ports: list[str] = []
        self.source_index: int | None = None
        self.iwads: list[tuple[str, str]] = []
        self.iwad_row: int | None = None

    @property
    def current_source(self) -> str:
        if self.source_index is None or not 0 <= self.source_index < len(self.source_ports):
            return ""
        return self.source_ports[self.source_index]

    @property
    def current_iwad(self) -> tuple[str, str] | None:
        """The selected IWAD as ``(name, file)``, or None."""
        if self.iwad_row is None or not 0 <= self.iwad_row < len(self.iwads):
            return None
        return self.iwads[self.iwad_row]

    def current_row_changed(self, index: int | None) -> None:
        """Select another IWAD and refresh the maps, keeping any typed map."""
        self.iwad_row = index
        current = self.warp
        self.reload_map_list()
        if current:
            self.warp = current

    def get_files_maps(self) -> list[str]:
        """Collect map names from every external file in the configuration."""
        settings = get_active_configuration()
        if settings is None:
            return []
        maps: list[str] = []
        index = 0
        while settings.contains(f"zdl.save/file{index}"):
            maps.extend(_map_names(settings.value(f"zdl.save/file{index}")))
            index += 1
        return maps

    def reload_map_list(self) -> None:
        """Fill the map choices from the external files and the chosen IWAD."""
        iwad = self.current_iwad
        if iwad is None:
            return
        file = iwad[1]
        if not file:
            return
        iwad_maps: list[str] = []
        if os.path.exists(file) and file.lower().endswith(".wad"):
            iwad_maps = _map_names(file)
        files_maps = self.get_files_maps()
        if files_maps or iwad_maps:
            self.warp_items = ["", *files_maps, *iwad_maps]
            self.warp = ""

    def rebuild(self) -> None:
        settings = _settings()
        if self.skill > 0:
            settings.set_value("zdl.save/skill", str(self.skill))
        else:
            settings.remove("zdl.save/skill")

        if self.warp:
            settings.set_value("zdl.save/warp", self.warp)
        else:
            settings.remove("zdl.save/warp")

        index = 0
        while settings.contains(f"zdl.ports/p{index}n"):
            port = settings.value(f"zdl.ports/p{index}n")
            if self.current_source == port:
                settings.set_value("zdl.save/port", port)
            index += 1

        current = self.current_iwad
        index = 0
        while settings.contains(f"zdl.iwads/i{index}n"):
            iwad = settings.value(f"zdl.iwads/i{index}n")
            if current is not None and current[0] == iwad:
                settings.set_value("zdl.save/iwad", iwad)
            index += 1

    def new_config(self) -> None:
        settings = _settings()

        if settings.contains("zdl.save/skill"):
            text = settings.value("zdl.save/skill")
            skill = _leading_int(text) if text else 0
            if 0 <= skill <= 5:
                self.skill = skill
            else:
                settings.set_value("zdl.save/skill", "0")
                self.skill = 0
        else:
            self.skill = 0

        self.reload_map_list()

        if settings.contains("zdl.save/warp"):
            self.warp = settings.value("zdl.save/warp") or ""
        else:
            self.warp = ""

        self.source_ports = []
        index = 0
        while settings.contains(f"zdl.ports/p{index}n"):
            self.source_ports.append(settings.value(f"zdl.ports/p{index}n"))
            index += 1
        self.source_index = 0 if self.source_ports else None

        if settings.contains("zdl.save/port"):
            port = settings.value("zdl.save/port")
            if port:
                self.source_index = (
                    self.source_ports.index(port) if port in self.source_ports else 0
                )

        self.iwads = []
        self.iwad_row = None
        index = 0
        while settings.contains(f"zdl.iwads/i{index}f") and settings.contains(
            f"zdl.iwads/i{index}n"
        ):
            self.iwads.append(
                (settings.value(f"zdl.iwads/i{index}n"), settings.value(f"zdl.iwads/i{index}f"))
            )
            index += 1

        if settings.contains("zdl.save/iwad"):
            wanted = settings.value("zdl.save/iwad")
            found = False
            if wanted:
                for row, (name, _file) in enumerate(self.iwads):
                    if name == wanted:
                        found = True
                        self.current_row_changed(row)
                        break
            if not found:
                if not self.iwads:
                    settings.remove("zdl.save/iwad")
                else:
                    self.current_row_changed(0)
                    settings.set_value("zdl.save/iwad", self.iwads[0][0])