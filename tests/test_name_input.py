import os

import pytest

from qzdl.config import Settings, set_active_configuration
from qzdl.listables import NameListable
from qzdl.name_input import NameInput, get_last_dir, save_last_dir


@pytest.fixture
def settings():
    conf = Settings()
    set_active_configuration(conf)
    yield conf
    set_active_configuration(None)


@pytest.fixture
def no_settings():
    set_active_configuration(None)
    yield
    set_active_configuration(None)


def test_get_last_dir_without_configuration(no_settings):
    assert get_last_dir() == ""


def test_save_last_dir_without_configuration_is_ignored(no_settings, tmp_path):
    save_last_dir(str(tmp_path / "doom.wad"))
    assert get_last_dir() == ""


def test_get_last_dir_without_key(settings):
    assert get_last_dir() == ""


def test_save_and_get_last_dir(settings, tmp_path):
    save_last_dir(str(tmp_path / "doom.wad"))
    assert get_last_dir() == os.path.abspath(str(tmp_path))
    assert settings.value("zdl.general/lastDir") == get_last_dir()


def test_get_name_prefers_name():
    entry = NameInput("Doom II", "/games/doom2.wad")
    assert entry.get_name() == "Doom II"


def test_get_name_falls_back_to_file():
    entry = NameInput("", "/games/doom2.wad")
    assert entry.get_name() == "/games/doom2.wad"


def test_based_off_copies_fields(settings):
    item = NameListable("/games/doom2.wad", "Doom II")
    entry = NameInput()
    entry.based_off(item)
    assert entry.file == "/games/doom2.wad"
    assert entry.name == "Doom II"


def test_based_off_none_keeps_fields():
    entry = NameInput("keep", "/games/keep.wad")
    entry.based_off(None)
    assert (entry.name, entry.file) == ("keep", "/games/keep.wad")


def test_from_url_takes_decoded_path():
    entry = NameInput()
    entry.from_url("file:///games/doom%20ii.wad")
    assert entry.file == "/games/doom ii.wad"