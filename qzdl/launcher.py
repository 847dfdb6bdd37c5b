"""Building the engine command line from the active configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from .config import DISABLED_KEY, Settings, disabled_scan, get_active_configuration
from .multiplayer import _parse_int

VERSION = "3.3.0.0"
SOURCE = "git"
REVISION = "unknown"
BUILD = "custom"
BUILD_NUMBER = 0

_COMMAND_TOKEN = "%command%"


class LaunchError(Exception):
    """Raised when the configuration does not describe a launchable game."""


@dataclass
class LaunchPlan:
    """The program to run, its arguments, directory and environment."""

    executable: str
    arguments: list[str] = field(default_factory=list)
    working_directory: str = ""
    environment: dict[str, str] = field(default_factory=dict)

    @property
    def command(self) -> list[str]:
        return [self.executable, *self.arguments]

    def describe(self) -> str:
        """Return a readable summary of the command line."""
        return (
            f"Executable: {self.executable}\n\n"
            f"Arguments: {' '.join(self.arguments)}\n\n"
            f"Working Directory: {self.working_directory}"
        )


def window_title() -> str:
    return f"ZDL {VERSION}"


def parse_pair(text: str) -> tuple[int, int] | None:
    """Parse ``"a,b"`` into two integers, or None if either is not a number."""
    if "," not in text:
        return None
    parts = text.split(",")
    first = _parse_int(parts[0])
    if first is None:
        return None
    second = _parse_int(parts[1])
    if second is None:
        return None
    return first, second


def parse_extra_args(text: str) -> list[str]:
    """Split an argument string on blanks, honouring double quotes.

    There is no variable expansion and no backslash escaping.
    """
    tokens: list[str] = []
    quotes: list[str] = []
    token = ""
    last = len(text) - 1
    for position, char in enumerate(text):
        if not quotes and char in " \t":
            if token:
                tokens.append(token)
            token = ""
            continue
        if char == '"':
            if quotes and char == quotes[-1]:
                quotes.pop()
                # The collected text is kept after a closing quote.
                tokens.append(token)
                continue
            quotes.append(char)
            if len(quotes) == 1:
                continue
        token += char
        if position == last:
            tokens.append(token)
    return tokens


def _resolve(settings: Settings | None) -> Settings:
    if settings is None:
        settings = get_active_configuration()
    if settings is None:
        raise RuntimeError("no active configuration")
    return settings


def _suffix(path: str) -> str:
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    return name.rsplit(".", 1)[1] if "." in name else ""


def _collect_arguments(settings: Settings) -> tuple[list[str], int]:
    """Return the arguments and the position where user arguments begin."""
    args: list[str] = []

    iwad_name = settings.value("zdl.save/iwad") if settings.contains("zdl.save/iwad") else ""
    if not iwad_name:
        raise LaunchError("Please select an IWAD")

    index = 0
    while settings.contains(f"zdl.iwads/i{index}n") and settings.contains(f"zdl.iwads/i{index}f"):
        if settings.value(f"zdl.iwads/i{index}n") == iwad_name:
            args += ["-iwad", settings.value(f"zdl.iwads/i{index}f")]
            break
        index += 1

    if settings.contains("zdl.save/skill"):
        args += ["-skill", settings.value("zdl.save/skill")]
    if settings.contains("zdl.save/warp"):
        args += ["+map", settings.value("zdl.save/warp")]
    if settings.contains("zdl.save/dmflags"):
        args += ["+set", "dmflags", settings.value("zdl.save/dmflags")]
    if settings.contains("zdl.save/dmflags2"):
        args += ["+set", "dmflags2", settings.value("zdl.save/dmflags2")]

    disabled = settings.value(DISABLED_KEY) if settings.contains(DISABLED_KEY) else ""
    pwads: list[str] = []
    patches: list[str] = []
    index = 0
    while settings.contains(f"zdl.save/file{index}"):
        if not disabled_scan(disabled, index):
            path = settings.value(f"zdl.save/file{index}")
            if _suffix(path).lower() in ("deh", "bex"):
                patches.append(path)
            else:
                pwads.append(path)
        index += 1
    if pwads:
        args += ["-file", *pwads]
    if patches:
        args += ["-deh", *patches]

    if settings.contains("zdl.save/gametype"):
        game_type = settings.value("zdl.save/gametype")
        if game_type != "0":
            if game_type == "2":
                args.append("-deathmatch")
            players = 0
            if settings.contains("zdl.save/players"):
                players = _parse_int(settings.value("zdl.save/players")) or 0
            if players > 0:
                args += ["-host", str(players)]
            elif players == 0 and settings.contains("zdl.save/host"):
                args += ["-join", settings.value("zdl.save/host")]
            if settings.contains("zdl.save/fraglimit"):
                args += ["+set", "fraglimit", settings.value("zdl.save/fraglimit")]

    if settings.contains("zdl.net/advenabled") and settings.value("zdl.net/advenabled") == "enabled":
        if settings.contains("zdl.net/port"):
            args += ["-port", settings.value("zdl.net/port")]
        if settings.contains("zdl.net/extratic") and settings.value("zdl.net/extratic") == "enabled":
            args.append("-extratic")
        if settings.contains("zdl.net/netmode"):
            net_mode = settings.value("zdl.net/netmode")
            if net_mode == "1":
                args += ["-netmode", "0"]
            elif net_mode == "2":
                args += ["-netmode", "1"]
        if settings.contains("zdl.net/dup"):
            dup = settings.value("zdl.net/dup")
            if dup != "0":
                args += ["-dup", dup]

    custom_start = len(args)
    if settings.contains("zdl.save/extra"):
        args += parse_extra_args(settings.value("zdl.save/extra"))
    if settings.contains("zdl.general/alwaysadd"):
        args += parse_extra_args(settings.value("zdl.general/alwaysadd"))
    return args, custom_start


def get_arguments(settings: Settings | None = None) -> list[str]:
    """Return the engine arguments described by the configuration."""
    return _collect_arguments(_resolve(settings))[0]


def get_executable(settings: Settings | None = None) -> str | None:
    """Return the file of the selected source port, or None."""
    settings = _resolve(settings)
    port_name = settings.value("zdl.save/port") if settings.contains("zdl.save/port") else ""
    index = 0
    while settings.contains(f"zdl.ports/p{index}f") and settings.contains(f"zdl.ports/p{index}n"):
        if settings.value(f"zdl.ports/p{index}n") == port_name:
            return settings.value(f"zdl.ports/p{index}f")
        index += 1
    return None


def prepare_launch(
    settings: Settings | None = None, environ: Mapping[str, str] | None = None
) -> LaunchPlan | None:
    """Work out what to run; None when there are no arguments to pass.

    A ``%command%`` among the user arguments wraps the engine: assignments
    before it become environment variables, the next word becomes the
    program, and the remaining words before it precede the engine.
    """
    settings = _resolve(settings)
    executable = get_executable(settings)
    if not executable:
        raise LaunchError("Please select a source port")
    args, custom_start = _collect_arguments(settings)
    if not "".join(args):
        return None

    env = dict(os.environ if environ is None else environ)

    command_index = 0
    position = custom_start
    while position < len(args):
        if args[position].lower() == _COMMAND_TOKEN:
            if command_index == 0:
                command_index = position - custom_start
            del args[position]
            continue
        position += 1

    game_executable = executable
    if command_index:
        parsing_env = True
        insert_at = 0
        position = custom_start
        while command_index:
            arg = args[position]
            equals = arg.find("=")
            if equals != -1 and parsing_env:
                env[arg[:equals]] = arg[equals + 1:]
                del args[position]
            elif game_executable == executable:
                executable = arg
                parsing_env = False
                del args[position]
            else:
                del args[position]
                args.insert(insert_at, arg)
                insert_at += 1
                position += 1
            command_index -= 1
        args.insert(insert_at, game_executable)

    directory = os.sep.join(game_executable.split(os.sep)[:-1])
    return LaunchPlan(
        executable=executable,
        arguments=args,
        working_directory=os.path.abspath(directory),
        environment=env,
    )