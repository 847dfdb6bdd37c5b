"""Reading map names out of Doom WAD files."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import BinaryIO

_COUNTS = struct.Struct("<ii")
_ENTRY = struct.Struct("<ii8s")
_MAGICS = (b"PWAD", b"IWAD")


class WadError(Exception):
    """Raised when a WAD file cannot be read."""


@dataclass(frozen=True)
class WadLump:
    """One directory entry of a WAD."""

    start: int
    size: int
    name: str


class DoomWad:
    """A WAD read from a path or from a seekable binary stream."""

    def __init__(self, source: str | os.PathLike | BinaryIO):
        self._source = source
        self.lumps: list[WadLump] = []
        self._map_names: list[str] = []

    def open(self) -> None:
        """Read the lump directory, raising WadError if it cannot be read."""
        if isinstance(self._source, (str, os.PathLike)):
            try:
                with open(self._source, "rb") as stream:
                    self._read(stream)
            except OSError as exc:
                raise WadError(f"cannot read {self._source}: {exc}") from exc
        else:
            self._read(self._source)

    def _read(self, stream: BinaryIO) -> None:
        stream.seek(4)
        counts = stream.read(_COUNTS.size)
        if len(counts) != _COUNTS.size:
            raise WadError("truncated WAD header")
        lump_count, dir_offset = _COUNTS.unpack(counts)
        if dir_offset < 0:
            raise WadError("invalid directory offset")
        stream.seek(dir_offset)

        lumps: list[WadLump] = []
        maps: list[str] = []
        last = ""
        for _ in range(lump_count):
            entry = stream.read(_ENTRY.size)
            if len(entry) != _ENTRY.size:
                break
            start, size, raw_name = _ENTRY.unpack(entry)
            name = raw_name.split(b"\0", 1)[0].decode("utf-8", "replace")
            lumps.append(WadLump(start, size, name))
            if name == "THINGS" and last:
                maps.append(last)
            last = name
        self.lumps = lumps
        self._map_names = maps

    def get_map_names(self) -> list[str]:
        return list(self._map_names)

    def get_lump_names(self) -> list[str]:
        return [lump.name for lump in self.lumps]

    def is_compressed(self) -> bool:
        return False


def get_map_file(path: str | os.PathLike) -> DoomWad | None:
    """Return a reader for ``path`` if it is a PWAD or IWAD, else None."""
    if not os.path.exists(path):
        return None
    try:
        with open(path, "rb") as stream:
            magic = stream.read(4)
    except OSError:
        return None
    if magic in _MAGICS:
        return DoomWad(path)
    return None