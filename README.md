# qzdl

A configuration library for Doom source port launchers. It holds your IWADs,
source ports, external files (PWADs and DeHackEd patches), skill, warp map and
multiplayer options in the ZDL INI format. From these it works out the command
line that starts a game.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## Usage

```python
from qzdl.config import Settings, set_active_configuration
from qzdl.launcher import get_arguments, get_executable, parse_extra_args, prepare_launch

settings = Settings("qZDL.ini")   # loaded at once if the file exists
set_active_configuration(settings)

print(get_executable(settings))   # file of the selected source port, or None
print(get_arguments(settings))    # raises LaunchError when no IWAD is selected
print(parse_extra_args('+sv_cheats 1 "-file with spaces.wad"'))

plan = prepare_launch(settings)   # LaunchPlan, or None when there are no arguments
if plan is not None:
    print(plan.describe())
```

`prepare_launch` handles a `%command%` word among the extra arguments. Words of
the form `NAME=value` that come before it become environment variables. The
next word becomes the program to run, and the engine is passed to it as an
argument.

To read a WAD file's map names:

```python
from qzdl.wad import get_map_file

wad = get_map_file("doom2.wad")   # None unless the file starts with PWAD or IWAD
if wad is not None:
    wad.open()                    # raises WadError if the directory cannot be read
    print(wad.get_map_names())
```

## Modules

- `qzdl.config`: the `Settings` store, reading and writing the ZDL INI format (`read_zdl_conf`, `write_zdl_conf`, `key_sort`), the disabled-file list (`disabled_scan`), and the active configuration (`set_active_configuration`, `get_active_configuration`).
- `qzdl.wad`: `DoomWad`, `WadLump` and `get_map_file`, which read a WAD's lump directory and map names.
- `qzdl.component`: `Component`, a tree of parts that pass rebuild and reload requests to one another.
- `qzdl.flags`: `DMFlagCheckbox` and `DMFlagManager`, which combine deathmatch flag bits into a single value.
- `qzdl.listables`: `Listable`, `NameListable` and `FileListable`, the list entries. Their labels follow the `zdl.general/showpaths` setting.
- `qzdl.name_input`: `NameInput`, plus `get_last_dir` and `save_last_dir` for the last directory used.
- `qzdl.multiplayer`: `MultiPane`, which holds game mode, host, players, frag limit and dmflags under `zdl.save`.
- `qzdl.advanced`: `AdvancedMultiplayerSettings`, which holds port, net mode, dup and extratic under `zdl.net`.
- `qzdl.settings_pane`: `SettingsPane`, which holds source port, IWAD, warp map and skill. It fills the warp list from WAD map names.
- `qzdl.launcher`: `get_arguments`, `get_executable`, `prepare_launch`, `LaunchPlan`, `LaunchError`, `parse_extra_args`, `parse_pair` and `window_title`.

## What it does not do

- There is no command-line program and no graphical interface. The package is a library only.
- It does not start the game. `prepare_launch` returns the program, arguments, working directory and environment, and leaves running them to you.
- It has no editors for the external file, IWAD and source port lists beyond the entry classes above. It does not load or save `.zdl` files. Edit the `zdl.save`, `zdl.iwads` and `zdl.ports` keys through `Settings`, and use `read_zdl_conf` and `write_zdl_conf` for the file format.