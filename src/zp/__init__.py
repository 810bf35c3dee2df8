"""
Decoder for the metadata of ZIP files.

The data is walked from start to end, record by record, and rendered either as a complete field-by-field dump
(*verbose*) or as a tab-separated summary of the entries in the central directory. Example::

    from zp import process_file

    print(process_file('archive.zip', verbose=False))

For more control, use `ZipArchive` (an ordered list of decoded records) directly, or the lazy decoder in `zp.decode`.
Entry data is never decompressed and checksums are not validated.
"""

__version__ = '0.3.0'


from os import PathLike
from typing import Union

from zp.archive import ZipArchive
from zp.decode import iter_zip_records, decode_zip_records
from zp.errors import ZipParseError, TruncatedInputError, InvalidSignatureError, EmptyOrUnreadableError, \
    NonTextFieldError, ZipLoadError, PathNotFoundError, NotAFileError, ArchiveIOError
from zp.loader import ZipSource
from zp.records import ZipRecord, LocalFileHeader, DataDescriptor, CentralDirectoryFileHeader, \
    EndOfCentralDirectoryRecord, ZipEntryFlags


def process_file(path: Union[PathLike, str], verbose: bool) -> str:
    """
    Processes the ZIP file at a given path.

    Args:
        path: The location of the ZIP file.
        verbose: If True, returns a complete dump of all records. Otherwise, returns a summary of the entries in the
            central directory.

    Returns:
        The rendered text.
    """
    return ZipArchive.from_path(path).output(verbose)


def process(source: ZipSource, verbose: bool) -> str:
    """
    Like `process_file`, but also accepts ZIP data in an in-memory buffer or a binary stream.
    """
    return ZipArchive.from_source(source).output(verbose)
