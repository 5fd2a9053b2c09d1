"""A read-only mirror that flags suspicious names and encodes file contents."""

from __future__ import annotations

import os
import string
from datetime import datetime
from typing import Callable

_BAD_WORDS = ("nafis", "kimcun")

_LOWER = string.ascii_lowercase
_UPPER = string.ascii_uppercase
_ROT_FROM = _LOWER + _UPPER
_ROT_TO = _LOWER[13:] + _LOWER[:13] + _UPPER[13:] + _UPPER[:13]
_STR_TABLE = str.maketrans(_ROT_FROM, _ROT_TO)
_BYTES_TABLE = bytes.maketrans(_ROT_FROM.encode(), _ROT_TO.encode())


def is_bad_filename(name: str) -> bool:
    """Whether ``name`` contains a flagged word, ignoring case."""
    lowered = name.lower()
    return any(word in lowered for word in _BAD_WORDS)


def rot13(text):
    """Rotate ASCII letters by 13 places in a ``str`` or ``bytes`` value."""
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).translate(_BYTES_TABLE)
    return text.translate(_STR_TABLE)


class AntinkFS:
    """Operations of a mirror over ``root`` that logs to ``log_path``."""

    def __init__(self, root, log_path, clock: Callable[[], datetime] | None = None):
        self.root = os.fspath(root)
        self.log_path = os.fspath(log_path)
        self.clock = clock or datetime.now

    def _full(self, path: str) -> str:
        return self.root + path

    def _log(self, message: str) -> None:
        try:
            with open(self.log_path, "a", encoding="utf-8") as log:
                log.write(f"[{self.clock():%Y-%m-%d %H:%M:%S}] {message}\n")
        except OSError:
            pass

    def getattr(self, path: str) -> os.stat_result:
        return os.lstat(self._full(path))

    def readdir(self, path: str) -> list[str]:
        names = [".", ".."] + sorted(os.listdir(self._full(path)))
        entries = []
        for name in names:
            if is_bad_filename(name):
                entries.append(name[::-1])
                self._log(f"ALERT: Detected bad file name {name}")
            else:
                entries.append(name)
        return entries

    def open(self, path: str, flags: int = os.O_RDONLY) -> None:
        fd = os.open(self._full(path), flags)
        os.close(fd)
        self._log(f"READ: {path[1:]}")

    def read(self, path: str, size: int, offset: int) -> bytes:
        with open(self._full(path), "rb") as fh:
            data = fh.read()
        if not is_bad_filename(path):
            data = rot13(data)
        return data[offset:offset + size]