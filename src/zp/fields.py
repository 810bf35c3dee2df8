"""
Decoding of the primitive fields found in ZIP records: fixed-width ints and MS-DOS packed dates/times.

The date and time fields are stored in the standard MS-DOS format:

- time: bits 0-4 hold the seconds divided by 2, bits 5-10 the minute and bits 11-15 the hour
- date: bits 0-4 hold the day, bits 5-8 the month and bits 9-15 the number of years since 1980

No validation is performed on the decoded values. Corrupt fields will decode to nonsensical dates such as month 0 or
15, which is exactly what a diagnostic tool should show.
"""

from typing import Tuple

from zp.errors import TruncatedInputError


DosTime = Tuple[int, int, int]
"""A decoded MS-DOS time, as ``(hour, minute, second)``"""

DosDate = Tuple[int, int, int]
"""A decoded MS-DOS date, as ``(year, month, day)``"""


def u16_le(data: bytes) -> int:
    return _decode_uint(data, 2, 'little')


def u32_le(data: bytes) -> int:
    return _decode_uint(data, 4, 'little')


def u32_be(data: bytes) -> int:
    return _decode_uint(data, 4, 'big')


def _decode_uint(data: bytes, n_bytes: int, byteorder: str) -> int:
    if len(data) < n_bytes:
        raise TruncatedInputError(0, n_bytes, len(data), f"{n_bytes * 8}-bit int")

    return int.from_bytes(data[:n_bytes], byteorder=byteorder)


def mod_time(value: int) -> DosTime:
    """
    Unpacks an MS-DOS time. Note that the resolution is 2 seconds.
    """
    return (value >> 11) & 0x1f, (value >> 5) & 0x3f, 2 * (value & 0x1f)


def mod_date(value: int) -> DosDate:
    return 1980 + ((value >> 9) & 0x7f), (value >> 5) & 0x0f, value & 0x1f


def format_dos_timestamp(raw_date: int, raw_time: int) -> str:
    """
    Renders a packed MS-DOS date and time as ``YYYY-MM-DDThh:mm:ss``.
    """
    year, month, day = mod_date(raw_date)
    hour, minute, second = mod_time(raw_time)

    return f"{year:04}-{month:02}-{day:02}T{hour:02}:{minute:02}:{second:02}"
