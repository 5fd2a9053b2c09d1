# relicfs

Three small tools around files that are not what they seem:

- **`relicfs.hexed`** turns text files full of hexadecimal digits back into
  the binary images they describe.
- **`relicfs.baymax`** provides `BaymaxFS`, the operations of a virtual
  filesystem that presents a file stored as numbered 1 KiB chunks
  (`Baymax.jpeg.000`, `Baymax.jpeg.001`, …) as one whole file, and stores
  new files the same chunked way.
- **`relicfs.antink`** provides `AntinkFS`, the operations of a read-only
  mirror of a directory that hides suspicious file names and scrambles the
  contents of everything else with ROT13.

The filesystem classes implement the operations (`getattr`, `readdir`,
`open`, `read`, …) as plain Python methods that you call directly.

## Installation

```
pip install relicfs
```

The package has no runtime dependencies. To run the tests:

```
pip install "relicfs[test]"
pytest
```

## Recovering images from hex dumps

Run the command in a directory that contains an `anomali/` directory:

```
relicfs-hexed
```

It takes no options apart from `--help`. The `image/` directory is created
if needed, then every file in `anomali/` whose name contains `.txt` is read
(in sorted order) as a string of hexadecimal digit pairs and decoded. The
result is written to `image/<name>_image_<YYYY-MM-DD_HH:MM:SS>.png`, where
`<name>` is the first non-empty dot-separated part of the file name. Each
conversion appends a line to `conversion.log`:

```
[2025-05-20][14:03:11]: Successfully converted hexadecimal text 1.txt to 1_image_2025-05-20_14:03:11.png.
```

Files that do not hold a valid, even-length hex string are reported on
standard error and skipped. If `anomali/` or the log cannot be opened, the
error is printed and the command exits with status 1.

The same work is available from Python:

```python
from datetime import datetime
from relicfs.hexed import convert_directory, hex_to_bytes, output_name

hex_to_bytes("89504e47")    # b"\x89PNG"; raises ValueError on odd length or non-hex
output_name("7.txt", datetime(2025, 5, 20, 14, 3, 11))
# "7_image_2025-05-20_14:03:11.png"

written = convert_directory("anomali", "image", "conversion.log", datetime.now)
# list of the image paths written; `now` is a callable returning a datetime
```

## BaymaxFS: a file kept in pieces

```python
from relicfs.baymax import BaymaxFS

fs = BaymaxFS(source_dir="relics", log_path="activity.log")

fs.readdir("/")                   # [".", "..", "Baymax.jpeg", other chunked files...]
fs.getattr("/Baymax.jpeg").size   # combined size of Baymax.jpeg.000 … .012
fs.total_size()                   # the same number
fs.open("/Baymax.jpeg")           # logged as READ
data = fs.read("/Baymax.jpeg", 4096, 0)
```

`getattr` returns a `FileAttributes` with `mode`, `nlink` and `size`. The
root is a directory; `/Baymax.jpeg` is a read-only file whose size is the sum
of up to 13 chunks; any other path that exists in the source directory is
reported as a regular file of size 0. `readdir` lists, besides the virtual
image, the base name of every file whose name contains `.000`.

Writing a file splits it into chunks of at most 1024 bytes named
`<file>.000`, `<file>.001`, … (the offset argument is ignored); deleting it
removes every consecutive chunk from `.000` on:

```python
fs.create("/notes.txt", 0o644)
fs.write("/notes.txt", b"x" * 2500, 0)       # notes.txt.000, .001, .002; returns 2500
fs.unlink("/notes.txt")
fs.flush("/Baymax.jpeg", "/tmp/copy.jpeg")   # logged as COPY
```

Activity is appended to the log file as lines such as:

```
[2025-05-20 14:03:11] WRITE: notes.txt -> notes.txt.000, notes.txt.001, notes.txt.002
[2025-05-20 14:03:12] DELETE: notes.txt - notes.txt.002
```

Paths that do not exist raise `FileNotFoundError` (`ENOENT`); a chunk that
cannot be written raises `OSError` with `EIO`. An optional `clock` callable
supplies the log timestamps.

## AntinkFS: a guarded mirror

```python
from relicfs.antink import AntinkFS, is_bad_filename, rot13

is_bad_filename("report_NAFIS.txt")  # True: names containing "nafis" or "kimcun", any case
rot13("Hello")                       # "Uryyb"; bytes are accepted too

fs = AntinkFS(root="/it24_host", log_path="it24.log")
fs.getattr("/notes.txt")        # os.stat_result from lstat
fs.readdir("/")                 # ".", "..", then sorted names; bad names appear reversed
fs.open("/notes.txt", 0)        # checks the file opens, logs READ
fs.read("/notes.txt", 1024, 0)  # ROT13 of the contents; bad files are returned unchanged
```

Opening a file logs `READ: <name>`, and each bad name seen while listing is
logged as `ALERT: Detected bad file name <name>`, each line prefixed with a
`[YYYY-MM-DD HH:MM:SS]` timestamp. Errors from the underlying directory are
raised as `OSError`.

## What this package does not do

`BaymaxFS` and `AntinkFS` only implement filesystem operations as methods;
the package has no command or layer that mounts them as a real filesystem.
To mount one, you must connect its methods to a mounting library yourself.