import pytest
from globx import Globber, OSFileSystem
from tests.helpers.concurrency import SlowFileSystem, run_concurrent
from tests.helpers.fakefs import FakeFileSystem


@pytest.fixture
def forest():
    fs = FakeFileSystem()
    for top in ("t3", "t1", "t2"):
        for sub in ("y", "x"):
            fs.touch(f"{top}/{sub}/deep/leaf.txt")
            fs.touch(f"{top}/{sub}/note.txt")
    return fs


def test_thread_pool_walks_subtrees_in_parallel(forest):
    slow = SlowFileSystem(forest)
    result = Globber(fs=slow, max_workers=3).glob("*/**/*.txt")
    assert result == Globber(fs=forest).glob("*/**/*.txt")
    assert slow.peak > 1


def test_thread_pool_order_matches_sequential(forest):
    sequential = Globber(fs=forest).glob("*/**")
    assert Globber(fs=SlowFileSystem(forest), max_workers=4).glob("*/**") == sequential
    assert sequential[:3] == ["t3", "t3/y", "t3/y/deep"]


def test_single_candidate_skips_pool(forest):
    slow = SlowFileSystem(forest)
    Globber(fs=slow, max_workers=4).glob("t1/**")
    assert slow.peak == 1


def test_concurrent_expansions_share_nothing(tmp_path):
    for i in range(5):
        (tmp_path / f"d{i}" / "sub").mkdir(parents=True)
        (tmp_path / f"d{i}" / "sub" / "f.txt").write_text(str(i))
    globber = Globber(fs=OSFileSystem())
    expected = globber.glob(f"{tmp_path}/**/*.txt")

    results, errors = run_concurrent(
        lambda _: globber.glob(f"{tmp_path}/**/*.txt"), n_threads=8
    )
    assert not any(errors)
    assert all(r == expected for r in results)
    assert len(expected) == 5
