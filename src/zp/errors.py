"""
Exceptions raised while loading, decoding and rendering ZIP metadata.

There are two families:

- `ZipParseError` and its subclasses signal that the data itself does not match the expected format (or cannot be
  rendered). These are terminal for the archive being processed.
- `ZipLoadError` and its subclasses signal that the data could not be obtained in the first place (e.g. a missing
  file). They always carry the offending path.
"""

from os import PathLike
from typing import Optional, Union


PathType = Union[str, PathLike]


class ZipParseError(Exception):
    """
    Base class for all errors signaling that ZIP data is malformed or otherwise cannot be processed.
    """


class TruncatedInputError(ZipParseError):
    position: int
    expected_length: int
    actual_length: int
    meaning: Optional[str]

    def __init__(self, position: int, expected_length: int, actual_length: int, meaning: Optional[str] = None):
        self.position = position
        self.expected_length = expected_length
        self.actual_length = actual_length
        self.meaning = meaning

        super().__init__(
            f"At position {position}, expected {expected_length} "
            f"bytes{f' for {meaning}' if meaning is not None else ''}"
            f", but only {actual_length} were found"
        )


class InvalidSignatureError(ZipParseError):
    position: int
    signature: bytes

    def __init__(self, position: int, signature: bytes):
        self.position = position
        self.signature = signature

        super().__init__(f"Invalid signature: `{signature.hex()}`")


class EmptyOrUnreadableError(ZipParseError):
    """
    Raised when not even a single record could be decoded from the data.
    """

    def __init__(self):
        super().__init__("Unexpected end of file")


class NonTextFieldError(ZipParseError):
    field_name: str
    data: bytes

    def __init__(self, field_name: str, data: bytes):
        self.field_name = field_name
        self.data = data

        super().__init__(f"Field {field_name} is not valid UTF-8 text: `{data.hex()}`")


class ZipLoadError(Exception):
    """
    Base class for errors encountered while obtaining the ZIP data from the filesystem.
    """

    path: PathType

    def __init__(self, message: str, path: PathType):
        self.path = path

        super().__init__(message)


class PathNotFoundError(ZipLoadError):
    def __init__(self, path: PathType):
        super().__init__(f"Path does not exist: `{path}`", path)


class NotAFileError(ZipLoadError):
    def __init__(self, path: PathType):
        super().__init__(f"Path is not a file: `{path}`", path)


class ArchiveIOError(ZipLoadError):
    error: OSError

    def __init__(self, path: PathType, error: OSError):
        self.error = error

        super().__init__(f"{error.strerror or error}: `{path}`", path)
