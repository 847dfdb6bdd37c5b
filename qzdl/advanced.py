"""Advanced multiplayer options stored under ``zdl.net``."""

from __future__ import annotations

from .config import Settings, get_active_configuration
from .multiplayer import _parse_int

NET_MODES = ("Not Specified", "0 (Classic)", "1 (Client/Server Model)")
DUP_MODES = ("Not Specified", "1", "2", "3", "4", "5", "6", "7", "8", "9")


def _settings() -> Settings:
    settings = get_active_configuration()
    if settings is None:
        raise RuntimeError("no active configuration")
    return settings


class AdvancedMultiplayerSettings:
    """Port, net mode, dup and extratic options; only used when enabled."""

    def __init__(self):
        self.enabled = False
        self.extratic = False
        self.port = ""
        self.net_mode = 0
        self.dup = 0
        self.read_config()

    def read_config(self) -> None:
        settings = _settings()

        def stored(key: str, default: str) -> str:
            return settings.value(key) if settings.contains(key) else default

        self.enabled = stored("zdl.net/advenabled", "disabled") == "enabled"
        self.extratic = stored("zdl.net/extratic", "disabled") == "enabled"
        self.port = stored("zdl.net/port", "")

        dup = _parse_int(stored("zdl.net/dup", "0")) or 0
        net_mode = _parse_int(stored("zdl.net/netmode", "0")) or 0
        self.dup = min(max(dup, 0), 9)
        self.net_mode = min(max(net_mode, 0), 2)

    def save(self) -> None:
        settings = _settings()
        settings.set_value("zdl.net/advenabled", "enabled" if self.enabled else "disabled")
        settings.set_value("zdl.net/extratic", "enabled" if self.extratic else "disabled")

        if self.port:
            settings.set_value("zdl.net/port", self.port)
        else:
            settings.remove("zdl.net/port")

        if self.dup > 0:
            settings.set_value("zdl.net/dup", str(self.dup))
        else:
            settings.remove("zdl.net/dup")

        if self.net_mode > 0:
            settings.set_value("zdl.net/netmode", str(self.net_mode))
        else:
            settings.remove("zdl.net/netmode")

    def get_net_mode(self) -> str:
        return NET_MODES[self.net_mode]

    def get_dup_mode(self) -> str:
        return DUP_MODES[self.dup]