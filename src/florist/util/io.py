"""Reading of (possibly compressed) dataset files."""

import bz2
import functools
import gzip
import io
import lzma
import zipfile
from os import PathLike
from pathlib import Path, PurePath
from typing import IO, Callable, Optional, Union

from chardet import detect

PathType = Union[str, PathLike, PurePath]

# enough bytes for chardet to settle on an encoding
_DETECT_SIZE = 100


def _read_zip_member(path: Path) -> bytes:
    with zipfile.ZipFile(path) as archive:
        names = archive.namelist()
        if len(names) != 1:
            msg = f"{path.name} has {len(names)} members, expected 1"
            raise ValueError(msg)
        return archive.read(names[0])


def _reader(opener: Callable) -> Callable[[Path], bytes]:
    def read(path: Path) -> bytes:
        with opener(path, "rb") as infile:
            return infile.read()

    return read


_readers = {
    ".gz": _reader(gzip.open),
    ".bz2": _reader(bz2.open),
    ".xz": _reader(lzma.open),
    ".lzma": _reader(lzma.open),
    ".zip": _read_zip_member,
}


def compression_suffix(path: PathType) -> Optional[str]:
    """returns the compression suffix of path, without the period, or None"""
    suffix = Path(path).suffix.lower()
    return suffix[1:] if suffix in _readers else None


def open_(path: PathType, mode: str = "rt") -> IO:
    """opens a plain or compressed file for reading

    Parameters
    ----------
    path
        file path, a gz, bz2, xz, lzma or single member zip suffix selects
        the decompression
    mode
        'r', 'rt' or 'rb'

    Returns
    -------
    an in-memory file object, bytes for 'rb', otherwise text decoded with
    the encoding chardet detects from the leading bytes

    Raises
    ------
    ValueError for a write mode, an empty path or a zip with more than one
    member, UnicodeDecodeError if the contents do not match the detected
    encoding
    """
    if not path:
        raise ValueError(f"{path!r} not a valid file name")
    if mode not in ("r", "rt", "rb"):
        raise ValueError(f"files can only be read, not opened with {mode!r}")

    path = Path(path).expanduser()
    read = _readers.get(path.suffix.lower(), Path.read_bytes)
    data = read(path)
    if mode == "rb":
        return io.BytesIO(data)

    encoding = detect(data[:_DETECT_SIZE])["encoding"] or "utf-8"
    return io.StringIO(data.decode(encoding))


@functools.singledispatch
def read_text(path) -> str:
    """returns the contents of path with leading and trailing white space
    removed"""
    raise TypeError(f"cannot read from {type(path)}")


@read_text.register
def _(path: str) -> str:
    with open_(path) as infile:
        return infile.read().strip()


@read_text.register
def _(path: PurePath) -> str:
    return read_text(str(path))
