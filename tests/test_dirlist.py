import pytest

from litekit.dirlist import dir_files


@pytest.fixture
def populated(tmp_path):
    for name in ("b.cfg", "a.cfg", "c.txt", "noext", "d.tar.cfg"):
        (tmp_path / name).write_text("x")
    return tmp_path


def test_all_files_sorted(populated):
    assert dir_files(populated) == ["a.cfg", "b.cfg", "c.txt", "d.tar.cfg", "noext"]


def test_suffix_filter(populated):
    assert dir_files(populated, ".cfg") == ["a.cfg", "b.cfg", "d.tar.cfg"]


def test_strip_suffix(populated):
    assert dir_files(populated, ".cfg", strip=True) == ["a", "b", "d.tar"]


def test_user_filter(populated):
    result = dir_files(populated, ".cfg", filter=lambda name: name.startswith("a"))
    assert result == ["a.cfg"]


def test_no_match_gives_empty_list(populated):
    assert dir_files(populated, ".conf") == []


def test_default_directory(populated, monkeypatch):
    monkeypatch.chdir(populated)
    assert dir_files(None, ".txt") == ["c.txt"]


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        dir_files(tmp_path / "missing")