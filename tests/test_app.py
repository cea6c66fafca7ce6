import os

import pytest

from muffet.app import data_dir_from


def test_data_dir_is_above_program_directory():
    assert data_dir_from("/opt/muffet/bin/Muffet_Game") == "/opt/muffet/bin/../"


def test_data_dir_normalises_to_parent_of_program_directory():
    result = data_dir_from("/opt/muffet/bin/Muffet_Game")
    assert os.path.normpath(result) == os.path.dirname(os.path.dirname("/opt/muffet/bin/Muffet_Game"))


def test_relative_program_path():
    result = data_dir_from("bin/Muffet_Game")
    assert result.startswith("bin/")
    assert os.path.normpath(result) == "."


def test_uses_last_separator():
    result = data_dir_from("a/b/c/prog")
    assert result == "a/b/c" + "/../"


def test_program_without_directory_is_rejected():
    with pytest.raises(ValueError):
        data_dir_from("Muffet_Game")