"""pytest fixture plugin.

Registered through the ``pytest11`` entry point, so installing globx makes
these fixtures available everywhere::

    def test_something(glob_tree, globber):
        assert globber.glob("**/*.f") == ["a/b/c.d/e.f"]
"""

import pytest

from ._expand import Globber


@pytest.fixture
def glob_tree(tmp_path, monkeypatch):
    """The directory tree ``a/b/c.d/e.f`` (directories only) in a fresh
    temporary directory, which also becomes the current directory.
    """
    (tmp_path / "a" / "b" / "c.d" / "e.f").mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def globber() -> Globber:
    """A :class:`Globber` on the host filesystem with default settings."""
    return Globber()
