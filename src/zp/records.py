"""
The records that make up a ZIP file, as decoded by `zp.decode`.

Each record type corresponds to one 4-byte signature. The records deliberately share no base fields: apart from the
signature, their binary layouts have nothing in common. Integer fields keep their raw values (in particular the packed
MS-DOS ``mod_time``/``mod_date``), with the decoded forms available as properties.
"""

from dataclasses import dataclass
from enum import IntFlag
from typing import Optional, Union

from zp.fields import DosDate, DosTime, mod_date, mod_time, format_dos_timestamp


LOCAL_FILE_HEADER_SIGNATURE = 0x504b0304
CENTRAL_DIRECTORY_FILE_HEADER_SIGNATURE = 0x504b0102
END_OF_CENTRAL_DIRECTORY_SIGNATURE = 0x504b0506


class ZipEntryFlags(IntFlag):
    ENCRYPTED = 1 << 0
    IMPLODE_8K_DICTIONARY = 1 << 1
    IMPLODE_3_SHANNON_TREES = 1 << 2
    DEFERRED_CRC32 = 1 << 3
    ENHANCED_DEFLATE = 1 << 4
    PATCHED_DATA = 1 << 5
    STRONG_ENCRYPTION = 1 << 6
    UTF8 = 1 << 11
    ENHANCED_COMPRESSION = 1 << 12
    LOCAL_HEADER_MASKED = 1 << 13


class _DosTimestampMixin:
    mod_time: int
    mod_date: int

    @property
    def mod_time_tuple(self) -> DosTime:
        return mod_time(self.mod_time)

    @property
    def mod_date_tuple(self) -> DosDate:
        return mod_date(self.mod_date)

    @property
    def modified(self) -> str:
        return format_dos_timestamp(self.mod_date, self.mod_time)


@dataclass(frozen=True)
class DataDescriptor:
    """
    Trailer following the data of an entry whose CRC and sizes were not known when its local header was written.

    It only ever appears inside a `LocalFileHeader`.
    """

    crc32: int
    compressed_size: int
    uncompressed_size: int


@dataclass(frozen=True)
class LocalFileHeader(_DosTimestampMixin):
    version: int
    flags: int
    compression: int
    mod_time: int
    mod_date: int
    crc32: int
    compressed_size: int
    uncompressed_size: int
    file_name: bytes
    extra_field: bytes
    file_data: bytes
    data_descriptor: Optional[DataDescriptor] = None

    signature = LOCAL_FILE_HEADER_SIGNATURE
    title = 'Local file header'

    @property
    def file_name_length(self) -> int:
        return len(self.file_name)

    @property
    def extra_field_length(self) -> int:
        return len(self.extra_field)

    @property
    def has_data_descriptor(self) -> bool:
        return bool(self.flags & ZipEntryFlags.DEFERRED_CRC32)


@dataclass(frozen=True)
class CentralDirectoryFileHeader(_DosTimestampMixin):
    version: int
    version_needed: int
    flags: int
    compression: int
    mod_time: int
    mod_date: int
    crc32: int
    compressed_size: int
    uncompressed_size: int
    disk_number_start: int
    internal_file_attributes: int
    external_file_attributes: int
    lfh_offset: int
    file_name: bytes
    extra_field: bytes
    file_comment: bytes

    signature = CENTRAL_DIRECTORY_FILE_HEADER_SIGNATURE
    title = 'Central directory file header'

    @property
    def file_name_length(self) -> int:
        return len(self.file_name)

    @property
    def extra_field_length(self) -> int:
        return len(self.extra_field)

    @property
    def file_comment_length(self) -> int:
        return len(self.file_comment)

    @property
    def is_directory(self) -> bool:
        return self.file_name.endswith(b'/')


@dataclass(frozen=True)
class EndOfCentralDirectoryRecord:
    disk_number: int
    disk_number_w_cd: int
    disk_entries: int
    total_entries: int
    cd_size: int
    cd_offset: int
    zip_file_comment: bytes

    signature = END_OF_CENTRAL_DIRECTORY_SIGNATURE
    title = 'End of central directory record'

    @property
    def comment_length(self) -> int:
        return len(self.zip_file_comment)


ZipRecord = Union[LocalFileHeader, CentralDirectoryFileHeader, EndOfCentralDirectoryRecord]
