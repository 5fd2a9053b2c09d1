"""Convert hexadecimal text dumps into binary image files."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_STEM_LIMIT = 63


def hex_to_bytes(text: str) -> bytes:
    """Decode a string of hex digit pairs, rejecting anything else."""
    if len(text) % 2:
        raise ValueError("hex text has an odd number of characters")
    bad = next((ch for ch in text if ch not in _HEX_DIGITS), None)
    if bad is not None:
        raise ValueError(f"invalid hex character {bad!r}")
    return bytes.fromhex(text)


def output_name(filename: str, when: datetime) -> str:
    """Name of the image produced from ``filename`` at time ``when``."""
    truncated = filename[:_STEM_LIMIT]
    stem = next((part for part in truncated.split(".") if part), truncated)
    return f"{stem}_image_{when:%Y-%m-%d_%H:%M:%S}.png"


def convert_directory(
    source_dir="anomali",
    image_dir="image",
    log_path="conversion.log",
    now: Callable[[], datetime] | None = None,
) -> list[Path]:
    """Convert every ``.txt`` file in ``source_dir`` and return the images written."""
    clock = now or datetime.now
    source = Path(source_dir)
    images = Path(image_dir)
    images.mkdir(mode=0o755, exist_ok=True)

    names = sorted(entry.name for entry in source.iterdir())
    written: list[Path] = []
    with open(log_path, "a", encoding="utf-8") as log:
        for name in names:
            if ".txt" not in name:
                continue
            filepath = source / name
            try:
                content = filepath.read_bytes().decode("latin-1")
            except OSError:
                continue
            try:
                data = hex_to_bytes(content)
            except ValueError:
                print(f"Failed to convert hex in file {filepath}", file=sys.stderr)
                continue

            stamp = clock()
            target = images / output_name(name, stamp)
            target.write_bytes(data)
            log.write(
                f"{stamp:[%Y-%m-%d][%H:%M:%S]}: Successfully converted hexadecimal "
                f"text {name} to {target.name}.\n"
            )
            written.append(target)
    return written


def main(argv=None) -> int:
    """Convert ``anomali/*.txt`` in the working directory into ``image/``."""
    parser = argparse.ArgumentParser(
        description="Convert hexadecimal text files in anomali/ into images."
    )
    parser.parse_args(argv)
    try:
        convert_directory()
    except OSError as exc:
        print(f"{exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())