"""Shared pytest fixtures for scanner tests."""

import os
from pathlib import Path

import pytest


def write_file(path: Path, size: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Build the reference tree.

    root/
        a.txt    100 bytes, 1 link
        b.txt    200 bytes, hard-linked with c.txt
        c.txt    same data as b.txt
        d/e.txt  50 bytes, 1 link
    """
    root = tmp_path / "root"
    write_file(root / "a.txt", 100)
    write_file(root / "b.txt", 200)
    os.link(root / "b.txt", root / "c.txt")
    write_file(root / "d" / "e.txt", 50)
    return root


@pytest.fixture
def plain_tree(tmp_path: Path) -> Path:
    """A nested tree without any hard links."""
    root = tmp_path / "plain"
    write_file(root / "one.bin", 10)
    write_file(root / "sub" / "two.bin", 20)
    write_file(root / "sub" / "deeper" / "three.bin", 30)
    write_file(root / "other" / "four.bin", 0)
    return root


@pytest.fixture
def make_file():
    """Factory: create a file of the given size, including parent folders."""
    return write_file
