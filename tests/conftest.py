# File: tests/conftest.py

import pytest
import os
import sys
import logging

# 1. Add project root to path
sys.path.append(os.getcwd())

from filefinder.core.config.settings import settings

MB = settings.MEGABYTE_IN_BYTES


class _TrackedHandle:
    """Wraps a real scandir iterator and reports when it gets closed."""

    def __init__(self, handle, spy):
        self._handle = handle
        self._spy = spy

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self._handle.close()
        self._spy.closed += 1
        return False

    def __iter__(self):
        return iter(self._handle)


class ScandirSpy:
    """
    Stand-in for os.scandir that counts opened/closed directory handles
    and can pretend some directories are unreadable.
    """

    def __init__(self, real_scandir):
        self._real = real_scandir
        self.opened = 0
        self.closed = 0
        self.denied = set()

    def __call__(self, path):
        if str(path) in self.denied:
            raise PermissionError(13, "Permission denied", str(path))
        handle = self._real(path)
        self.opened += 1
        return _TrackedHandle(handle, self)

    @property
    def open_handles(self) -> int:
        return self.opened - self.closed


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """Lets caplog see DEBUG records from the scanner."""
    logging.getLogger("filefinder").setLevel(logging.DEBUG)
    yield


@pytest.fixture
def make_file():
    """
    Creates a file of the given size without writing its content.
    Sparse files keep multi-megabyte fixtures cheap.
    """
    def _make(path, size_bytes: int):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.truncate(size_bytes)
        return path

    return _make


@pytest.fixture
def scandir_spy(monkeypatch):
    spy = ScandirSpy(os.scandir)
    monkeypatch.setattr(os, "scandir", spy)
    return spy


@pytest.fixture
def photo_tree(tmp_path, make_file):
    """
    Creates:
    /photos
      a.jpg   (6 MB)
      b.jpg   (4 MB)
      c.png   (10 MB)
      /d
        e.jpg (6 MB)
    """
    root = tmp_path / "photos"
    root.mkdir()

    make_file(root / "a.jpg", 6 * MB)
    make_file(root / "b.jpg", 4 * MB)
    make_file(root / "c.png", 10 * MB)
    make_file(root / "d" / "e.jpg", 6 * MB)

    return root
