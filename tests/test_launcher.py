import os

import pytest

from qzdl.config import Settings
from qzdl.launcher import (
    LaunchError,
    LaunchPlan,
    get_arguments,
    get_executable,
    parse_extra_args,
    parse_pair,
    prepare_launch,
    window_title,
)


def _base(engine="/opt/engine/gzdoom"):
    settings = Settings()
    settings.set_value("zdl.ports/p0n", "GZDoom")
    settings.set_value("zdl.ports/p0f", engine)
    settings.set_value("zdl.iwads/i0n", "Doom2")
    settings.set_value("zdl.iwads/i0f", "/wads/doom2.wad")
    settings.set_value("zdl.save/port", "GZDoom")
    settings.set_value("zdl.save/iwad", "Doom2")
    return settings


def test_window_title_has_version():
    assert window_title() == "ZDL 3.3.0.0"


def test_parse_pair_valid_and_invalid():
    assert parse_pair("640,480") == (640, 480)
    assert parse_pair("640") is None
    assert parse_pair("x,480") is None
    assert parse_pair("640,y") is None


def test_parse_extra_args_splits_on_blanks():
    assert parse_extra_args("a  b\tc") == ["a", "b", "c"]
    assert parse_extra_args("") == []


def test_parse_extra_args_quoted_token():
    assert parse_extra_args('"a b"') == ["a b"]
    assert parse_extra_args('+name "x y z"') == ["+name", "x y z"]


def test_missing_iwad_raises():
    settings = _base()
    settings.remove("zdl.save/iwad")
    with pytest.raises(LaunchError):
        get_arguments(settings)


def test_basic_arguments():
    settings = _base()
    settings.set_value("zdl.save/skill", "3")
    settings.set_value("zdl.save/warp", "MAP01")
    settings.set_value("zdl.save/dmflags", "1024")
    assert get_arguments(settings) == [
        "-iwad", "/wads/doom2.wad", "-skill", "3", "+map", "MAP01",
        "+set", "dmflags", "1024",
    ]


def test_unknown_iwad_gives_no_iwad_argument():
    settings = _base()
    settings.set_value("zdl.save/iwad", "Heretic")
    assert "-iwad" not in get_arguments(settings)


def test_files_split_into_pwads_and_patches_skipping_disabled():
    settings = _base()
    settings.set_value("zdl.save/file0", "/mods/a.wad")
    settings.set_value("zdl.save/file1", "/mods/b.DEH")
    settings.set_value("zdl.save/file2", "/mods/c.wad")
    settings.set_value("zdl.save/file3", "/mods/d.bex")
    settings.set_value("zdl.save/disabled", "2")
    args = get_arguments(settings)
    assert args[2:] == ["-file", "/mods/a.wad", "-deh", "/mods/b.DEH", "/mods/d.bex"]


def test_deathmatch_host():
    settings = _base()
    settings.set_value("zdl.save/gametype", "2")
    settings.set_value("zdl.save/players", "4")
    settings.set_value("zdl.save/fraglimit", "20")
    assert get_arguments(settings)[2:] == [
        "-deathmatch", "-host", "4", "+set", "fraglimit", "20",
    ]


def test_coop_join():
    settings = _base()
    settings.set_value("zdl.save/gametype", "1")
    settings.set_value("zdl.save/players", "0")
    settings.set_value("zdl.save/host", "example.com")
    assert get_arguments(settings)[2:] == ["-join", "example.com"]


def test_single_player_ignores_multiplayer_keys():
    settings = _base()
    settings.set_value("zdl.save/gametype", "0")
    settings.set_value("zdl.save/players", "4")
    assert get_arguments(settings) == ["-iwad", "/wads/doom2.wad"]


def test_advanced_network_options():
    settings = _base()
    settings.set_value("zdl.net/advenabled", "enabled")
    settings.set_value("zdl.net/port", "5029")
    settings.set_value("zdl.net/extratic", "enabled")
    settings.set_value("zdl.net/netmode", "2")
    settings.set_value("zdl.net/dup", "3")
    assert get_arguments(settings)[2:] == [
        "-port", "5029", "-extratic", "-netmode", "1", "-dup", "3",
    ]


def test_advanced_options_ignored_when_disabled():
    settings = _base()
    settings.set_value("zdl.net/advenabled", "disabled")
    settings.set_value("zdl.net/port", "5029")
    assert get_arguments(settings) == ["-iwad", "/wads/doom2.wad"]


def test_extra_then_always_add():
    settings = _base()
    settings.set_value("zdl.save/extra", "-nomonsters")
    settings.set_value("zdl.general/alwaysadd", "+sv_cheats 1")
    assert get_arguments(settings)[2:] == ["-nomonsters", "+sv_cheats", "1"]


def test_get_executable():
    settings = _base()
    assert get_executable(settings) == "/opt/engine/gzdoom"
    settings.set_value("zdl.save/port", "Other")
    assert get_executable(settings) is None


def test_prepare_launch_without_port_raises():
    settings = _base()
    settings.remove("zdl.save/port")
    with pytest.raises(LaunchError, match="source port"):
        prepare_launch(settings, {})


def test_prepare_launch_without_arguments_returns_none():
    settings = _base()
    settings.set_value("zdl.save/iwad", "Unknown")
    assert prepare_launch(settings, {}) is None


def test_prepare_launch_plain(tmp_path):
    engine = os.path.join(str(tmp_path), "engine", "gzdoom")
    settings = _base(engine)
    plan = prepare_launch(settings, {"HOME": "home"})
    assert isinstance(plan, LaunchPlan)
    assert plan.executable == engine
    assert plan.arguments == ["-iwad", "/wads/doom2.wad"]
    assert plan.working_directory == os.path.join(str(tmp_path), "engine")
    assert plan.environment == {"HOME": "home"}
    assert plan.command == [engine, "-iwad", "/wads/doom2.wad"]


def test_prepare_launch_command_wrapper(tmp_path):
    engine = os.path.join(str(tmp_path), "engine", "gzdoom")
    settings = _base(engine)
    settings.set_value("zdl.save/extra", "DXVK_HUD=api,fps mangohud --dlsym %command% abc")
    settings.set_value("zdl.general/alwaysadd", "+sv_cheats 1")
    plan = prepare_launch(settings, {})
    assert plan.executable == "mangohud"
    assert plan.arguments == [
        "--dlsym", engine, "-iwad", "/wads/doom2.wad", "abc", "+sv_cheats", "1",
    ]
    assert plan.environment["DXVK_HUD"] == "api,fps"
    assert plan.working_directory == os.path.join(str(tmp_path), "engine")


def test_command_token_first_is_only_removed():
    settings = _base()
    settings.set_value("zdl.save/extra", "%COMMAND% -fast")
    plan = prepare_launch(settings, {})
    assert plan.executable == "/opt/engine/gzdoom"
    assert plan.arguments == ["-iwad", "/wads/doom2.wad", "-fast"]


def test_describe_mentions_parts():
    plan = LaunchPlan("/bin/engine", ["-a", "-b"], "/bin", {})
    text = plan.describe()
    assert "Executable: /bin/engine" in text
    assert "Arguments: -a -b" in text
    assert text.endswith("Working Directory: /bin")