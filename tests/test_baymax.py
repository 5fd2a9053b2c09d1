import errno
import stat
from datetime import datetime

import pytest

from relicfs.baymax import CHUNK_SIZE, BaymaxFS, FileAttributes


def _clock():
    return datetime(2025, 1, 2, 3, 4, 5)


@pytest.fixture
def fs(tmp_path):
    source = tmp_path / "relics"
    source.mkdir()
    return BaymaxFS(source, tmp_path / "activity.log", _clock)


@pytest.fixture
def image(fs):
    data = bytes(range(256)) * 20
    fs.write("/Baymax.jpeg", data, 0)
    return data


def _log(fs):
    return fs.log_path.read_text() if fs.log_path.exists() else ""


def test_write_splits_into_chunks(fs):
    data = bytes(range(256)) * 10
    assert fs.write("/notes", data, 0) == len(data)
    chunks = sorted(fs.source_dir.glob("notes.*"))
    assert all(len(c.read_bytes()) <= CHUNK_SIZE for c in chunks)
    assert b"".join(c.read_bytes() for c in chunks) == data
    names = ", ".join(c.name for c in chunks)
    assert f"WRITE: notes -> {names}\n" in _log(fs)


def test_log_timestamp_format(fs):
    fs.write("/a", b"x", 0)
    assert _log(fs).startswith("[2025-01-02 03:04:05] WRITE: a -> a.000")


def test_write_empty(fs):
    assert fs.write("/empty", b"", 0) == 0
    assert list(fs.source_dir.glob("empty.*")) == []


def test_total_size_and_read_whole(fs, image):
    assert fs.total_size() == len(image)
    assert fs.read("/Baymax.jpeg", len(image), 0) == image


@pytest.mark.parametrize("offset,size", [(0, 10), (1000, 100), (1023, 2), (3000, 5000), (2048, 1024)])
def test_read_slices(fs, image, offset, size):
    assert fs.read("/Baymax.jpeg", size, offset) == image[offset:offset + size]


def test_read_past_end(fs, image):
    assert fs.read("/Baymax.jpeg", 10, len(image) + 5) == b""


def test_read_other_path(fs):
    with pytest.raises(FileNotFoundError) as info:
        fs.read("/other", 10, 0)
    assert info.value.errno == errno.ENOENT


def test_getattr_root(fs):
    attrs = fs.getattr("/")
    assert stat.S_ISDIR(attrs.mode)
    assert attrs.nlink == 2


def test_getattr_virtual(fs, image):
    attrs = fs.getattr("/Baymax.jpeg")
    assert stat.S_ISREG(attrs.mode)
    assert stat.S_IMODE(attrs.mode) == 0o444
    assert attrs.size == len(image)


def test_getattr_created_file(fs):
    fs.create("/fresh", 0o644)
    assert fs.getattr("/fresh") == FileAttributes(stat.S_IFREG | 0o666, 1, 0)


def test_getattr_missing(fs):
    with pytest.raises(FileNotFoundError):
        fs.getattr("/missing")


def test_readdir(fs):
    fs.write("/notes.txt", b"hello", 0)
    entries = fs.readdir("/")
    assert entries[:3] == [".", "..", "Baymax.jpeg"]
    assert "notes" in entries


def test_readdir_non_root(fs):
    with pytest.raises(FileNotFoundError):
        fs.readdir("/sub")


def test_readdir_missing_source(tmp_path):
    fs = BaymaxFS(tmp_path / "absent", tmp_path / "log", _clock)
    with pytest.raises(FileNotFoundError):
        fs.readdir("/")


def test_open_logs_read(fs):
    fs.open("/Baymax.jpeg")
    assert "READ: Baymax.jpeg\n" in _log(fs)


def test_open_other_path(fs):
    with pytest.raises(FileNotFoundError):
        fs.open("/other")


def test_unlink_removes_chunks(fs):
    fs.write("/notes", bytes(2500), 0)
    chunks = sorted(c.name for c in fs.source_dir.glob("notes.*"))
    fs.unlink("/notes")
    assert list(fs.source_dir.glob("notes.*")) == []
    assert f"DELETE: notes - {chunks[-1]}\n" in _log(fs)


def test_unlink_missing_does_not_log(fs):
    fs.unlink("/ghost")
    assert _log(fs) == ""


def test_flush_logs_copy(fs):
    fs.flush("/Baymax.jpeg", "/tmp/out.jpeg")
    assert "COPY: Baymax.jpeg -> /tmp/out.jpeg\n" in _log(fs)


def test_flush_other_path(fs):
    fs.flush("/notes", "/tmp/out")
    assert _log(fs) == ""