"""A filesystem view that joins numbered chunk files into whole files."""

from __future__ import annotations

import errno
import os
import stat
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable

PARTS_COUNT = 13
CHUNK_SIZE = 1024
VIRTUAL_FILE = "/Baymax.jpeg"


@dataclass(frozen=True)
class FileAttributes:
    """The attributes reported for a path."""

    mode: int
    nlink: int
    size: int = 0


def _enoent(path: str) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)


class BaymaxFS:
    """Operations of a filesystem backed by a directory of chunk files."""

    def __init__(self, source_dir, log_path, clock: Callable[[], datetime] | None = None):
        self.source_dir = Path(source_dir)
        self.log_path = Path(log_path)
        self.clock = clock or datetime.now

    def _log(self, kind: str, message: str) -> None:
        try:
            with open(self.log_path, "a", encoding="utf-8") as log:
                log.write(f"[{self.clock():%Y-%m-%d %H:%M:%S}] {kind}: {message}\n")
        except OSError:
            pass

    def _chunk(self, name: str, index: int) -> Path:
        return self.source_dir / f"{name}.{index:03d}"

    def _virtual_parts(self):
        name = VIRTUAL_FILE[1:]
        return (self._chunk(name, i) for i in range(PARTS_COUNT))

    def _real(self, path: str) -> Path:
        return self.source_dir / path.lstrip("/")

    def total_size(self) -> int:
        """Combined size of the chunks making up the virtual image."""
        total = 0
        for part in self._virtual_parts():
            try:
                total += part.stat().st_size
            except OSError:
                continue
        return total

    def getattr(self, path: str) -> FileAttributes:
        if path == "/":
            return FileAttributes(stat.S_IFDIR | 0o755, 2)
        if path == VIRTUAL_FILE:
            return FileAttributes(stat.S_IFREG | 0o444, 1, self.total_size())
        if os.path.lexists(self._real(path)):
            return FileAttributes(stat.S_IFREG | 0o666, 1, 0)
        raise _enoent(path)

    def readdir(self, path: str) -> list[str]:
        if path != "/":
            raise _enoent(path)
        entries = [".", "..", VIRTUAL_FILE[1:]]
        try:
            names = sorted(os.listdir(self.source_dir))
        except OSError:
            raise _enoent(path) from None
        for name in names:
            if ".000" in name:
                base = name.split(".", 1)[0]
                if base != VIRTUAL_FILE[1:]:
                    entries.append(base)
        return entries

    def open(self, path: str) -> None:
        if path != VIRTUAL_FILE:
            raise _enoent(path)
        self._log("READ", VIRTUAL_FILE[1:])

    def read(self, path: str, size: int, offset: int) -> bytes:
        if path != VIRTUAL_FILE:
            raise _enoent(path)
        blocks: list[bytes] = []
        copied = 0
        current = 0
        for part in self._virtual_parts():
            try:
                with open(part, "rb") as fh:
                    part_size = os.fstat(fh.fileno()).st_size
                    if offset < current + part_size:
                        start = max(offset - current, 0)
                        to_read = min(part_size - start, size - copied)
                        fh.seek(start)
                        block = fh.read(to_read)
                        blocks.append(block)
                        copied += len(block)
                        if copied >= size:
                            break
                    current += part_size
            except OSError:
                continue
        return b"".join(blocks)

    def create(self, path: str, mode: int) -> None:
        fd = os.open(self._real(path), os.O_WRONLY | os.O_CREAT, mode)
        os.close(fd)

    def write(self, path: str, data: bytes, offset: int = 0) -> int:
        """Store ``data`` as numbered chunks; the offset is ignored."""
        filename = path[1:]
        parts: list[str] = []
        for index, start in enumerate(range(0, len(data), CHUNK_SIZE)):
            chunk_path = self._chunk(filename, index)
            try:
                with open(chunk_path, "wb") as fh:
                    fh.write(data[start:start + CHUNK_SIZE])
            except OSError as exc:
                raise OSError(errno.EIO, os.strerror(errno.EIO), str(chunk_path)) from exc
            parts.append(chunk_path.name)
        message = filename
        if parts:
            message += " -> " + ", ".join(parts)
        self._log("WRITE", message)
        return len(data)

    def unlink(self, path: str) -> None:
        filename = path[1:]
        removed = 0
        while True:
            chunk_path = self._chunk(filename, removed)
            if not os.path.lexists(chunk_path):
                break
            try:
                chunk_path.unlink()
            except OSError:
                pass
            removed += 1
        if removed:
            last = self._chunk(filename, removed - 1).name
            self._log("DELETE", f"{filename} - {last}")

    def flush(self, path: str, destination: str | None) -> None:
        """Record a copy of the virtual image to ``destination``."""
        if path == VIRTUAL_FILE and destination:
            self._log("COPY", f"{VIRTUAL_FILE[1:]} -> {destination}")