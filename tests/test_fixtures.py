import pytest

from xtest.fixtures import FixtureManager, open_fixture


def test_open_creates_scratch_dir_and_file(tmp_path):
    scratch = tmp_path / "scratch"
    with open_fixture("data.txt", scratch_dir=scratch) as f:
        assert f.read() == ""
    assert (scratch / "data.txt").exists()


def test_open_writes_contents(tmp_path):
    with open_fixture("data.txt", "hello", scratch_dir=tmp_path) as f:
        assert f.read() == "hello"


def test_contents_replace_existing_by_default(tmp_path):
    (tmp_path / "data.txt").write_text("old")
    with open_fixture("data.txt", "new", scratch_dir=tmp_path) as f:
        assert f.read() == "new"


def test_prevent_replace_keeps_existing(tmp_path):
    (tmp_path / "data.txt").write_text("old")
    with open_fixture("data.txt", "new", prevent_replace=True, scratch_dir=tmp_path) as f:
        assert f.read() == "old"


def test_prevent_replace_still_writes_new_files(tmp_path):
    with open_fixture("data.txt", "new", prevent_replace=True, scratch_dir=tmp_path) as f:
        assert f.read() == "new"


def test_handle_is_writable(tmp_path):
    with open_fixture("data.txt", "abc", scratch_dir=tmp_path) as f:
        f.seek(0, 2)
        f.write("def")
    assert (tmp_path / "data.txt").read_text() == "abcdef"


def test_nested_names(tmp_path):
    with open_fixture("a/b/c.txt", "x", scratch_dir=tmp_path) as f:
        assert f.read() == "x"


def test_default_scratch_dir_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("XTEST_SCRATCH", str(tmp_path / "env"))
    with open_fixture("data.txt", "x"):
        pass
    assert (tmp_path / "env" / "data.txt").read_text() == "x"


def test_name_cannot_escape_scratch_dir(tmp_path):
    manager = FixtureManager(tmp_path / "scratch")
    with pytest.raises(ValueError):
        manager.path("../outside.txt")


def test_cleanup(tmp_path):
    manager = FixtureManager(tmp_path / "scratch")
    manager.open("data.txt", "x").close()
    manager.cleanup()
    assert not (tmp_path / "scratch").exists()
    manager.cleanup()
