import os
from pathlib import Path

import pytest

from backup_tool.domain.services import Crawler


def make_file(path: Path, content: bytes = b"data") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


def test_single_file_is_discovered(tmp_path: Path) -> None:
    target = make_file(tmp_path / "a.txt")

    result = Crawler().crawl(target)

    assert result.files == (target,)
    assert result.issues == ()


def test_directory_is_crawled_recursively(tmp_path: Path) -> None:
    root = tmp_path / "d"
    x = make_file(root / "x.txt")
    y = make_file(root / "sub" / "y.txt")
    z = make_file(root / "sub" / "deeper" / "z.txt")
    (root / "empty").mkdir()

    result = Crawler().crawl(root)

    assert set(result.files) == {x, y, z}
    assert len(result.files) == 3
    assert result.issues == ()


def test_subdirectory_contents_stay_contiguous(tmp_path: Path) -> None:
    root = tmp_path / "d"
    make_file(root / "sub" / "one.txt")
    make_file(root / "sub" / "two.txt")
    make_file(root / "top.txt")

    files = list(Crawler().crawl(root).files)

    sub_positions = [i for i, path in enumerate(files) if path.parent.name == "sub"]
    assert sub_positions == list(range(sub_positions[0], sub_positions[0] + 2))


def test_crawl_all_keeps_configuration_order(tmp_path: Path) -> None:
    first = make_file(tmp_path / "b" / "first.txt")
    second = make_file(tmp_path / "a.txt")

    result = Crawler().crawl_all([tmp_path / "b", second])

    assert result.files == (first, second)


def test_missing_input_is_reported_not_fatal(tmp_path: Path, caplog) -> None:
    valid = make_file(tmp_path / "a.txt")
    missing = tmp_path / "nope"

    with caplog.at_level("WARNING"):
        result = Crawler().crawl_all([missing, valid])

    assert result.files == (valid,)
    assert [issue.issue_type for issue in result.issues] == ["missing_input"]
    assert result.issues[0].path == missing
    assert "does not exist" in caplog.text


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires FIFO support")
def test_special_file_is_reported_as_unsupported(tmp_path: Path) -> None:
    fifo = tmp_path / "pipe"
    os.mkfifo(fifo)

    result = Crawler().crawl(tmp_path)

    assert result.files == ()
    assert [issue.issue_type for issue in result.issues] == ["unsupported_path"]


def test_unreadable_directory_is_skipped_with_warning(tmp_path: Path, monkeypatch, caplog) -> None:
    root = tmp_path / "d"
    kept = make_file(root / "kept.txt")
    locked = root / "locked"
    make_file(locked / "secret.txt")

    real_scandir = os.scandir

    def fake_scandir(path):
        if Path(path) == locked:
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    with caplog.at_level("WARNING"):
        result = Crawler().crawl(root)

    assert result.files == (kept,)
    assert [issue.issue_type for issue in result.issues] == ["unreadable_directory"]
    assert f"Unable to read directory {locked}" in caplog.text


def test_symlink_cycle_terminates(tmp_path: Path) -> None:
    root = tmp_path / "d"
    inner = make_file(root / "a.txt")
    (root / "loop").symlink_to(root, target_is_directory=True)

    result = Crawler().crawl(root)

    assert result.files == (inner,)
    assert [issue.issue_type for issue in result.issues] == ["revisited_directory"]


def test_deep_tree_does_not_hit_recursion_limit(tmp_path: Path) -> None:
    path = tmp_path / "deep"
    for index in range(300):
        path = path / f"{index % 10}"
    leaf = make_file(path / "leaf.txt")

    result = Crawler().crawl(tmp_path / "deep")

    assert result.files == (leaf,)
