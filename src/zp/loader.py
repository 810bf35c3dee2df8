"""
Resolution of the various ways ZIP data can be specified (path, in-memory buffer, stream) into a readable stream.

Filesystem paths are checked before anything is opened, so that a missing file or a directory is reported with a
clear message naming the path. The decoder itself never touches the filesystem.
"""

from contextlib import contextmanager
from functools import singledispatch
from io import BytesIO, IOBase
from os import PathLike
from pathlib import Path
from typing import BinaryIO, ContextManager, Iterator, Union

from zp.errors import PathNotFoundError, NotAFileError, ArchiveIOError


"""
Data type for specifying ZIP data in interfaces, function parameters etc. It covers:

- `PathLike` | `str`: a file on the local filesystem
- `bytes` | `bytearray` | `memoryview`: an in-memory buffer containing the data
- `BinaryIO`: a binary stream, positioned at the start of the ZIP data
"""
ZipSource = Union[PathLike, str, bytes, bytearray, memoryview, BinaryIO]


def check_zip_path(path: Union[PathLike, str]) -> Path:
    """
    Checks that a path points to an existing regular file.

    Raises:
        PathNotFoundError: If nothing exists at the path.
        NotAFileError: If the path points to something other than a file (e.g. a directory).
    """
    resolved = Path(path)

    if not resolved.exists():
        raise PathNotFoundError(path)
    if not resolved.is_file():
        raise NotAFileError(path)

    return resolved


@contextmanager
def open_zip_path(path: Union[PathLike, str]) -> Iterator[BinaryIO]:
    """
    Opens a ZIP file for reading, after checking it with `check_zip_path`.

    Raises:
        PathNotFoundError: If nothing exists at the path.
        NotAFileError: If the path points to something other than a file (e.g. a directory).
        ArchiveIOError: If the file could not be opened (e.g. for lack of permissions).
    """
    resolved = check_zip_path(path)

    try:
        fileobj = resolved.open('rb')
    except OSError as e:
        raise ArchiveIOError(path, e) from e

    with fileobj:
        yield fileobj


@singledispatch
def open_zip_source(source: Union[bytes, bytearray, memoryview, BinaryIO]) -> ContextManager[BinaryIO]:
    """
    Returns a context manager providing a binary stream over some in-memory or streamed ZIP data.

    Streams passed in by the caller are used as-is, from their current position, and are not closed afterwards.
    Filesystem paths are handled by `open_zip_path` instead.
    """
    raise TypeError(f"Cannot read ZIP data from source of type {source.__class__.__name__}")


@open_zip_source.register(bytes)
@open_zip_source.register(bytearray)
@open_zip_source.register(memoryview)
def _(source) -> ContextManager[BinaryIO]:
    return BytesIO(source)


@open_zip_source.register
def _(source: IOBase) -> ContextManager[BinaryIO]:
    return _borrow_stream(source)


@contextmanager
def _borrow_stream(stream: BinaryIO) -> Iterator[BinaryIO]:
    yield stream
