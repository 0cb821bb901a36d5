import pytest
from globx import Globber
from tests.helpers.fakefs import FakeFileSystem


@pytest.fixture
def fakefs() -> FakeFileSystem:
    """a/b/c.d/e.f as directories, mirroring the on-disk sample tree."""
    fs = FakeFileSystem()
    fs.mkdir("a/b/c.d/e.f")
    return fs


@pytest.fixture
def fake_globber(fakefs) -> Globber:
    return Globber(fs=fakefs)
