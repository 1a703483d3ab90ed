import os

import pytest

from sdkswitch.modules.file import FileOperation


def test_symlink_under_root(tmp_path):
    (tmp_path / "src").write_text("data")
    operation = FileOperation(str(tmp_path))
    assert operation.symlink("src", "dest") is True
    assert os.readlink(tmp_path / "dest") == str(tmp_path / "src")
    assert (tmp_path / "dest").read_text() == "data"


def test_symlink_absolute_names_stay_under_root(tmp_path):
    (tmp_path / "src").write_text("data")
    operation = FileOperation(str(tmp_path))
    assert operation.symlink("/src", "/link") is True
    assert os.readlink(tmp_path / "link") == str(tmp_path / "src")


def test_symlink_with_empty_root_uses_names_as_given(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a").write_text("x")
    assert FileOperation("").symlink("a", "b") is True
    assert os.readlink(tmp_path / "b") == "a"


def test_symlink_fails_when_destination_exists(tmp_path):
    (tmp_path / "src").write_text("data")
    (tmp_path / "dest").write_text("other")
    with pytest.raises(FileExistsError):
        FileOperation(str(tmp_path)).symlink("src", "dest")