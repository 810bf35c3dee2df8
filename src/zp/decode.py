"""
Sequential decoder for the records in a ZIP file.

The decoder walks the data from the very start, record by record, with each record introduced by a 4-byte signature.
Only local file headers (with their data and optional data descriptor), central directory file headers and the end of
central directory record are recognized. Anything else at a record boundary is an error: the decoder never scans
ahead or skips over unknown data.
"""

from logging import getLogger
from typing import BinaryIO, Callable, Dict, Iterator, List, Union

from zp.binary_reader import BinaryReader
from zp.errors import InvalidSignatureError, EmptyOrUnreadableError
from zp.fields import u32_be
from zp.records import ZipRecord, LocalFileHeader, DataDescriptor, CentralDirectoryFileHeader, \
    EndOfCentralDirectoryRecord, ZipEntryFlags, LOCAL_FILE_HEADER_SIGNATURE, CENTRAL_DIRECTORY_FILE_HEADER_SIGNATURE, \
    END_OF_CENTRAL_DIRECTORY_SIGNATURE


_log = getLogger(__name__)


ZipDataSource = Union[bytes, BinaryIO, BinaryReader]


def iter_zip_records(source: ZipDataSource) -> Iterator[ZipRecord]:
    """
    Lazily decodes the records in some ZIP data.

    The data is consumed strictly in order, starting at the current position of the source. Iteration stops normally
    when fewer than 4 bytes remain at a record boundary. Note that an empty sequence is not considered an error at this
    level; use `decode_zip_records` for that.

    Args:
        source: The ZIP data, as a `bytes` buffer, a binary file object or a `BinaryReader`.

    Returns:
        A generator yielding the records in the order they appear in the data. It can only be consumed once.

    Raises:
        InvalidSignatureError: If a record boundary does not start with any of the known signatures.
        TruncatedInputError: If the data ends in the middle of a record.
    """

    reader = source if isinstance(source, BinaryReader) else BinaryReader(source, big_endian=False)

    while True:
        position = reader.tell()
        raw_signature = reader.read_at_most(4)

        if len(raw_signature) < 4:
            _log.debug("End of records at offset %d (%d trailing bytes)", position, len(raw_signature))
            return

        parser = _PARSERS_BY_SIGNATURE.get(u32_be(raw_signature))
        if parser is None:
            raise InvalidSignatureError(position, raw_signature)

        record = parser(reader)
        _log.debug("Decoded %s at offset %d", record.title, position)

        yield record


def decode_zip_records(source: ZipDataSource) -> List[ZipRecord]:
    """
    Decodes all the records in some ZIP data (see `iter_zip_records`).

    Raises:
        EmptyOrUnreadableError: If the data ends before even a single record could be decoded.
        InvalidSignatureError: If a record boundary does not start with any of the known signatures.
        TruncatedInputError: If the data ends in the middle of a record.
    """

    records = list(iter_zip_records(source))

    if len(records) == 0:
        raise EmptyOrUnreadableError()

    return records


def _parse_local_file_header(reader: BinaryReader) -> LocalFileHeader:
    version, flags, compression, raw_time, raw_date, crc32, compressed_size, uncompressed_size, \
        file_name_length, extra_field_length = reader.read_struct('HHHHHIIIHH', 'local file header')

    file_name = reader.read_amount(file_name_length, 'file name')
    extra_field = reader.read_amount(extra_field_length, 'extra field')
    file_data = reader.read_amount(compressed_size, 'file data')

    data_descriptor = None
    if flags & ZipEntryFlags.DEFERRED_CRC32:
        data_descriptor = DataDescriptor(*reader.read_struct('III', 'data descriptor'))

    return LocalFileHeader(
        version=version,
        flags=flags,
        compression=compression,
        mod_time=raw_time,
        mod_date=raw_date,
        crc32=crc32,
        compressed_size=compressed_size,
        uncompressed_size=uncompressed_size,
        file_name=file_name,
        extra_field=extra_field,
        file_data=file_data,
        data_descriptor=data_descriptor,
    )


def _parse_central_directory_file_header(reader: BinaryReader) -> CentralDirectoryFileHeader:
    version, version_needed, flags, compression, raw_time, raw_date, crc32, compressed_size, uncompressed_size, \
        file_name_length, extra_field_length, file_comment_length, disk_number_start, internal_file_attributes, \
        external_file_attributes, lfh_offset = reader.read_struct('HHHHHHIIIHHHHHII', 'central directory file header')

    return CentralDirectoryFileHeader(
        version=version,
        version_needed=version_needed,
        flags=flags,
        compression=compression,
        mod_time=raw_time,
        mod_date=raw_date,
        crc32=crc32,
        compressed_size=compressed_size,
        uncompressed_size=uncompressed_size,
        disk_number_start=disk_number_start,
        internal_file_attributes=internal_file_attributes,
        external_file_attributes=external_file_attributes,
        lfh_offset=lfh_offset,
        file_name=reader.read_amount(file_name_length, 'file name'),
        extra_field=reader.read_amount(extra_field_length, 'extra field'),
        file_comment=reader.read_amount(file_comment_length, 'file comment'),
    )


def _parse_end_of_central_directory(reader: BinaryReader) -> EndOfCentralDirectoryRecord:
    disk_number, disk_number_w_cd, disk_entries, total_entries, cd_size, cd_offset, comment_length = \
        reader.read_struct('HHHHIIH', 'end of central directory record')

    return EndOfCentralDirectoryRecord(
        disk_number=disk_number,
        disk_number_w_cd=disk_number_w_cd,
        disk_entries=disk_entries,
        total_entries=total_entries,
        cd_size=cd_size,
        cd_offset=cd_offset,
        zip_file_comment=reader.read_amount(comment_length, 'ZIP file comment'),
    )


_PARSERS_BY_SIGNATURE: Dict[int, Callable[[BinaryReader], ZipRecord]] = {
    LOCAL_FILE_HEADER_SIGNATURE: _parse_local_file_header,
    CENTRAL_DIRECTORY_FILE_HEADER_SIGNATURE: _parse_central_directory_file_header,
    END_OF_CENTRAL_DIRECTORY_SIGNATURE: _parse_end_of_central_directory,
}
