"""
This module contains the `BinaryReader` class, a wrapper for binary I/O streams that offers functions for extracting
the binary-encoded ints and byte strings that make up ZIP records.
"""

import struct

from typing import Union, BinaryIO, Optional
from io import BytesIO, IOBase, TextIOBase

from zp.errors import TruncatedInputError


class BinaryReader:
    """
    This class wraps a binary I/O file object and offers functions for extracting binary-encoded ints, byte strings
    and structures.

    Data is only ever consumed sequentially, so the underlying stream need not be seekable.
    """

    _fileobj: BinaryIO
    _big_endian: bool

    _position: int

    def __init__(self, data_or_fileobj: Union[bytes, BinaryIO], big_endian: bool = False):
        self._fileobj = _parse_main_input_arg(data_or_fileobj)
        self._big_endian = big_endian

        self._position = 0

    def tell(self) -> int:
        """
        The number of bytes consumed so far through this reader.
        """
        return self._position

    def read_at_most(self, n_bytes: int) -> bytes:
        """
        Try to read `n_bytes` of data, returning fewer only if the data is exhausted.

        Short reads, e.g. from a pipe, are handled.

        Args:
            n_bytes: The number of bytes to try to read.

        Returns:
            The read data, at most `n_bytes` in length. Note that the function never raises a format error.
        """

        if n_bytes < 0:
            raise ValueError("The number of bytes to read cannot be negative")
        if n_bytes == 0:
            return b''

        data = self._fileobj.read(n_bytes)
        self._position += len(data)

        while len(data) < n_bytes:
            new_data = self._fileobj.read(n_bytes - len(data))

            if len(new_data) == 0:
                break

            self._position += len(new_data)
            data += new_data

        return data

    def read_amount(self, n_bytes: int, meaning: Optional[str] = None) -> bytes:
        """
        Reads exactly `n_bytes` from the underlying stream.

        Args:
            n_bytes: The amount of bytes to read.
            meaning: An indication as to the meaning of the data being read (e.g. "file name"). It is used in the text
                of any exceptions that may be thrown.

        Returns:
            The data, as a `bytes` object `n_bytes` in length.

        Raises:
            TruncatedInputError: If the data ends before the full `n_bytes` could be read.
        """

        if n_bytes == 0:
            return b''

        original_pos = self._position

        data = self.read_at_most(n_bytes)

        if len(data) < n_bytes:
            raise TruncatedInputError(original_pos, n_bytes, len(data), meaning)

        return data

    def read_struct(self, struct_format: str, meaning: Optional[str] = None) -> tuple:
        """
        Reads structured data from the underlying stream.

        Args:
            struct_format: The format of the structured data, as per the Python `struct` package. There is no need to
                prepend an endianness specifier, as one will be added automatically in accordance to the
                `BinaryReader`'s setting, but if one is present, it will take precedence.
            meaning: An indication as to the meaning of the data being read (e.g. "central directory header"). It is
                used in the text of any exceptions that may be thrown.

        Returns:
           The data in the structure, as a tuple.

        Raises:
            TruncatedInputError: If the data ends before a complete structure could be read.
        """

        if struct_format == '':
            return ()
        if struct_format[0] not in '@=<>!':
            struct_format = ('>' if self._big_endian else '<') + struct_format

        meaning = meaning or f"struct ({struct_format})"

        data = self.read_amount(struct.calcsize(struct_format), meaning)

        return struct.unpack(struct_format, data)


def _parse_main_input_arg(input_: Union[bytes, BinaryIO]) -> BinaryIO:
    if isinstance(input_, (bytes, bytearray, memoryview)):
        return BytesIO(input_)

    if not isinstance(input_, IOBase):
        raise TypeError("Input to BinaryReader must be either bytes or a file object")
    if isinstance(input_, TextIOBase):
        raise TypeError("BinaryReader works on binary, not text file objects")

    return input_
