"""Launcher configuration storage in the ZDL INI dialect."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Mapping

DISABLED_KEY = "zdl.save/disabled"

_KEY_RE = re.compile(r"^(zdl.[a-z]+)/(\w+)")
_SECTION_RE = re.compile(r"^zdl.([a-z]+)/")
_FILE_RE = re.compile(r".file(\d+)")
_PAIR_RE = re.compile(r"[ip]\d+([nf])")
_PAIR_INDEX_RE = re.compile(r"[ip](\d+)[nf]")
_ENTRY_RE = re.compile(r"^([^=:]*?)\s*[=:]\s*(.*)$")
_INT_RE = re.compile(r"\s*[+-]?\d+\s*")

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ConfigFormatError(ValueError):
    """Raised when a key cannot be written in the ZDL INI layout."""


def _to_int(text: str) -> int | None:
    """Parse a 32-bit decimal integer, returning None when it is not one."""
    if not _INT_RE.fullmatch(text):
        return None
    number = int(text)
    if not _INT_MIN <= number <= _INT_MAX:
        return None
    return number


def _to_text(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def read_zdl_conf(text: str) -> dict[str, str]:
    """Parse INI text into a mapping of ``section/name`` keys to values."""
    mapping: dict[str, str] = {}
    section = ""
    for raw in text.lstrip("\ufeff").splitlines():
        line = raw.strip()
        if not line or line[0] in ";#":
            continue
        if line.startswith("["):
            end = line.find("]")
            if end != -1:
                section = line[1:end].strip()
            continue
        match = _ENTRY_RE.match(line)
        if match is None:
            continue
        name, value = match.group(1).strip(), match.group(2).rstrip()
        mapping[f"{section}/{name}"] = value
    return mapping


def _section_key(key: str) -> str:
    match = _SECTION_RE.match(key)
    return match.group(1) if match else ""


def _file_key(key: str) -> int:
    match = _FILE_RE.search(key)
    return int(match.group(1)) + 1 if match else 0


def _pair_key(key: str) -> str:
    match = _PAIR_RE.search(key)
    return match.group(1) if match else ""


def _pair_index_key(key: str) -> str:
    match = _PAIR_INDEX_RE.search(key)
    return match.group(1) if match else ""


def key_sort(keys: Iterable[str]) -> list[str]:
    """Order keys by section, pair index, name-before-file and file number."""
    ordered = sorted(keys, key=_file_key)
    ordered = sorted(ordered, key=_pair_key, reverse=True)
    ordered = sorted(ordered, key=_pair_index_key)
    return sorted(ordered, key=_section_key)


def write_zdl_conf(mapping: Mapping[str, object]) -> str:
    """Render a mapping of ``zdl.section/name`` keys as INI text."""
    lines: list[str] = []
    section = ""
    for key in key_sort(mapping):
        match = _KEY_RE.match(key)
        if match is None:
            raise ConfigFormatError(f"key {key!r} does not belong to a zdl section")
        key_section = match.group(1)
        if key_section != section:
            section = key_section
            lines.append(f"[{section}]")
        lines.append(f"{match.group(2)}={_to_text(mapping[key])}")
    return "".join(line + "\n" for line in lines)


def disabled_scan(text: str, index: int) -> bool:
    """Tell whether ``index`` appears in a comma-separated list of numbers."""
    for part in text.split(","):
        if part and _to_int(part) == index:
            return True
    return False


class Settings:
    """Key/value settings keyed by ``group/name``, optionally backed by a file."""

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else None
        self._values: dict[str, str] = {}
        if self.path is not None and self.path.is_file():
            self.load()

    def contains(self, key: str) -> bool:
        return key in self._values

    def value(self, key: str, default=None):
        return self._values.get(key, default)

    def set_value(self, key: str, value: object) -> None:
        self._values[key] = _to_text(value)

    def remove(self, key: str) -> None:
        """Remove a key together with every key below it; an empty key clears all."""
        if not key:
            self._values.clear()
            return
        prefix = key + "/"
        for existing in [k for k in self._values if k == key or k.startswith(prefix)]:
            del self._values[existing]

    def remove_group(self, group: str) -> None:
        prefix = group + "/"
        for existing in [k for k in self._values if k.startswith(prefix)]:
            del self._values[existing]

    def child_keys(self, group: str) -> list[str]:
        prefix = group + "/"
        return sorted(
            k[len(prefix):]
            for k in self._values
            if k.startswith(prefix) and "/" not in k[len(prefix):]
        )

    def child_groups(self) -> list[str]:
        return sorted({k.split("/", 1)[0] for k in self._values if "/" in k})

    def all_keys(self) -> list[str]:
        return sorted(self._values)

    def load(self) -> None:
        if self.path is None:
            raise ValueError("settings are not backed by a file")
        self._values = read_zdl_conf(self.path.read_text(encoding="utf-8"))

    def save(self) -> None:
        if self.path is None:
            raise ValueError("settings are not backed by a file")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(write_zdl_conf(self._values), encoding="utf-8")


_ACTIVE: dict[str, Settings | None] = {"settings": None}


def set_active_configuration(settings: Settings | None) -> Settings | None:
    """Make ``settings`` the active configuration and return the previous one."""
    previous = _ACTIVE["settings"]
    _ACTIVE["settings"] = settings
    return previous


def get_active_configuration() -> Settings | None:
    return _ACTIVE["settings"]