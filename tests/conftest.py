import pytest

_ENV_VARS = ("MINIGREP_DEBUG", "MINIGREP_LOG_DIR", "NO_COLOR", "CLICOLOR_FORCE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test without the ambient color/logging environment."""
    for key in _ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def tree(tmp_path):
    """A small directory tree:

    tmp/
      b.txt
      a.txt
      sub/
        c.txt
        deeper/
          d.txt
    """
    (tmp_path / "a.txt").write_text("alpha\nThe Quick fox\nbeta\n", encoding="utf-8")
    (tmp_path / "b.txt").write_text("quick start\nnothing here\n", encoding="utf-8")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "c.txt").write_text("quicksand\n", encoding="utf-8")
    deeper = sub / "deeper"
    deeper.mkdir()
    (deeper / "d.txt").write_text("no match\nQUICK\n", encoding="utf-8")
    return tmp_path
