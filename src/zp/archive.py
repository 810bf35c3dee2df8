from dataclasses import dataclass
from logging import getLogger
from os import PathLike
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from zp.decode import decode_zip_records
from zp.errors import ArchiveIOError
from zp.loader import ZipSource, open_zip_path, open_zip_source
from zp.records import ZipRecord, LocalFileHeader, CentralDirectoryFileHeader, EndOfCentralDirectoryRecord
from zp.render import render_verbose, render_summary


_log = getLogger(__name__)


@dataclass(frozen=True)
class ZipArchive:
    """
    The decoded records of a ZIP file, in the order in which they appear in the data.

    An archive always holds at least one record. Use `from_path` or `from_source` to obtain one.
    """

    records: Tuple[ZipRecord, ...]
    path: Optional[Path] = None

    @staticmethod
    def from_path(path: Union[PathLike, str]) -> 'ZipArchive':
        """
        Loads and decodes a ZIP file on the local filesystem.

        Raises:
            PathNotFoundError: If nothing exists at the path.
            NotAFileError: If the path points to something other than a file.
            ArchiveIOError: If the file could not be read.
            ZipParseError: If the data is not a well-formed ZIP file (see `zp.decode.decode_zip_records`).
        """
        _log.debug("Loading ZIP file %s", path)

        with open_zip_path(path) as fileobj:
            try:
                records = decode_zip_records(fileobj)
            except OSError as e:
                raise ArchiveIOError(path, e) from e

        return ZipArchive(tuple(records), Path(path))

    @staticmethod
    def from_source(source: ZipSource) -> 'ZipArchive':
        """
        Decodes ZIP data from a path, an in-memory buffer or a binary stream.
        """
        if isinstance(source, (str, PathLike)):
            return ZipArchive.from_path(source)

        with open_zip_source(source) as fileobj:
            return ZipArchive(tuple(decode_zip_records(fileobj)))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ZipRecord]:
        return iter(self.records)

    def local_file_headers(self) -> Iterator[LocalFileHeader]:
        return (record for record in self.records if isinstance(record, LocalFileHeader))

    def central_directory_headers(self) -> Iterator[CentralDirectoryFileHeader]:
        return (record for record in self.records if isinstance(record, CentralDirectoryFileHeader))

    def end_of_central_directory(self) -> Optional[EndOfCentralDirectoryRecord]:
        result = None

        for record in self.records:
            if isinstance(record, EndOfCentralDirectoryRecord):
                result = record

        return result

    def verbose(self) -> str:
        """
        Generates a complete, field-by-field dump of all the records.
        """
        return render_verbose(self.records)

    def summary(self) -> str:
        """
        Generates a summary of the entries in the central directory (file name, whether the entry is a directory,
        uncompressed size, modification date/time and comment), one per line.
        """
        return render_summary(self.records)

    def output(self, verbose: bool) -> str:
        return self.verbose() if verbose else self.summary()
