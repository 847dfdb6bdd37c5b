"""Multiplayer game settings: mode, host, players, frag limit and dmflags."""

from __future__ import annotations

import re

from .component import Component
from .config import Settings, get_active_configuration

MODES = ("Single Player", "Co-op", "Deathmatch")
PLAYERS = ("Joining", "1", "2", "3", "4", "5", "6", "7", "8")

_INT_RE = re.compile(r"\s*[+-]?\d+\s*")


def _parse_int(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    number = int(text)
    if not -(2**31) <= number <= 2**31 - 1:
        return None
    return number


def _settings() -> Settings:
    settings = get_active_configuration()
    if settings is None:
        raise RuntimeError("no active configuration")
    return settings


class MultiPane(Component):
    """The multiplayer section of the main tab, kept under ``zdl.save``."""

    def __init__(self, parent: Component | None = None):
        super().__init__(parent)
        self.mode_index = 0
        self.host = ""
        self.players_index = 0
        self.frag_limit = ""
        self.dmflags = "0"
        self.dmflags2 = "0"

    def new_config(self) -> None:
        settings = _settings()

        self.host = settings.value("zdl.save/host", "") if settings.contains("zdl.save/host") else ""

        self.players_index = 0
        if settings.contains("zdl.save/players"):
            players = _parse_int(settings.value("zdl.save/players"))
            if players is not None and 0 <= players <= 8:
                self.players_index = players

        self.mode_index = 0
        if settings.contains("zdl.save/gametype"):
            mode = _parse_int(settings.value("zdl.save/gametype"))
            if mode is not None and 0 <= mode <= 2:
                self.mode_index = mode

        self.dmflags = self._numeric(settings, "zdl.save/dmflags", "0")
        self.dmflags2 = self._numeric(settings, "zdl.save/dmflags2", "0")
        self.frag_limit = self._numeric(settings, "zdl.save/fraglimit", "")

    @staticmethod
    def _numeric(settings: Settings, key: str, fallback: str) -> str:
        """Return the stored text if it is a whole number, else ``fallback``."""
        if not settings.contains(key):
            return fallback
        text = settings.value(key)
        return text if _parse_int(text) is not None else fallback

    def rebuild(self) -> None:
        settings = _settings()
        for key, text, empty in (
            ("zdl.save/host", self.host, ""),
            ("zdl.save/fraglimit", self.frag_limit, ""),
            ("zdl.save/dmflags", self.dmflags, "0"),
            ("zdl.save/dmflags2", self.dmflags2, "0"),
        ):
            if text != empty:
                settings.set_value(key, text)
            else:
                settings.remove(key)
        settings.set_value("zdl.save/gametype", self.mode_index)
        settings.set_value("zdl.save/players", self.players_index)

    def get_mode(self) -> str:
        return MODES[self.mode_index]

    def get_players(self) -> str:
        return PLAYERS[self.players_index]