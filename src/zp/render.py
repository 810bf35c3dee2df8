"""
Text renderings of decoded ZIP records.

Two formats are available:

- *verbose*: a complete, field-by-field dump of every record, with each int shown in both hex and decimal, and each
  byte field in hex (plus its text, for the fields that are supposed to be human-readable)
- *summary*: one tab-separated line per central directory entry, giving the file name, whether it is a directory,
  its uncompressed size, its modification date/time and its comment

Both formats are meant to be diffed exactly, so every space and newline is significant.
"""

from functools import singledispatch
from typing import Iterable, List, Tuple

from zp.errors import NonTextFieldError
from zp.records import ZipRecord, LocalFileHeader, DataDescriptor, CentralDirectoryFileHeader, \
    EndOfCentralDirectoryRecord


RECORD_SEPARATOR = '---\n'
END_MARKER = '---\nEOF\n---\n'


def render(records: Iterable[ZipRecord], verbose: bool) -> str:
    return render_verbose(records) if verbose else render_summary(records)


def render_verbose(records: Iterable[ZipRecord]) -> str:
    parts = []

    for record in records:
        parts.append(RECORD_SEPARATOR)
        parts.append(render_record_verbose(record))

    parts.append(END_MARKER)

    return ''.join(parts)


def render_summary(records: Iterable[ZipRecord]) -> str:
    return ''.join(
        render_summary_line(record) for record in records if isinstance(record, CentralDirectoryFileHeader)
    )


def render_summary_line(header: CentralDirectoryFileHeader) -> str:
    return '\t'.join([
        decode_text_field('file_name', header.file_name),
        'true' if header.is_directory else 'false',
        str(header.uncompressed_size),
        header.modified,
        decode_text_field('file_comment', header.file_comment),
    ]) + '\n'


@singledispatch
def render_record_verbose(record) -> str:
    raise NotImplementedError(f"Don't know how to render record of type {record.__class__.__name__}")


@render_record_verbose.register
def _(record: LocalFileHeader) -> str:
    lines = [
        _signature_line(record),
        _u16_line('version', record.version),
        _u16_line('flags', record.flags),
        _u16_line('compression', record.compression),
        _u16_line('mod_time', record.mod_time, record.mod_time_tuple),
        _u16_line('mod_date', record.mod_date, record.mod_date_tuple),
        _u32_line('crc32', record.crc32),
        _u32_line('compressed_size', record.compressed_size),
        _u32_line('uncompressed_size', record.uncompressed_size),
        _u16_line('file_name_length', record.file_name_length),
        _u16_line('extra_field_length', record.extra_field_length),
        _text_line('file_name', record.file_name),
        _bytes_line('extra_field', record.extra_field),
        _bytes_line('file_data', record.file_data),
        'data_descriptor = ' + (
            'None' if record.data_descriptor is None else _render_data_descriptor(record.data_descriptor)
        ),
    ]

    return _join_lines(lines)


def _render_data_descriptor(descriptor: DataDescriptor) -> str:
    lines = [
        '{',
        '    ' + _u32_line('crc32', descriptor.crc32),
        '    ' + _u32_line('compressed_size', descriptor.compressed_size),
        '    ' + _u32_line('uncompressed_size', descriptor.uncompressed_size),
        '}',
    ]

    # The descriptor block is always followed by an empty line
    return _join_lines(lines)


@render_record_verbose.register
def _(record: CentralDirectoryFileHeader) -> str:
    lines = [
        _signature_line(record),
        _u16_line('version', record.version),
        _u16_line('version_needed', record.version_needed),
        _u16_line('flags', record.flags),
        _u16_line('compression', record.compression),
        _u16_line('mod_time', record.mod_time, record.mod_time_tuple),
        _u16_line('mod_date', record.mod_date, record.mod_date_tuple),
        _u32_line('crc32', record.crc32),
        _u32_line('compressed_size', record.compressed_size),
        _u32_line('uncompressed_size', record.uncompressed_size),
        _u16_line('file_name_length', record.file_name_length),
        _u16_line('extra_field_length', record.extra_field_length),
        _u16_line('file_comment_length', record.file_comment_length),
        _u16_line('disk_number_start', record.disk_number_start),
        _u16_line('internal_file_attributes', record.internal_file_attributes),
        _u32_line('external_file_attributes', record.external_file_attributes),
        _u32_line('lfh_offset', record.lfh_offset),
        _text_line('file_name', record.file_name),
        _bytes_line('extra_field', record.extra_field),
        _text_line('file_comment', record.file_comment),
    ]

    return _join_lines(lines)


@render_record_verbose.register
def _(record: EndOfCentralDirectoryRecord) -> str:
    lines = [
        _signature_line(record),
        _u16_line('disk_number', record.disk_number),
        _u16_line('disk_number_w_cd', record.disk_number_w_cd),
        _u16_line('disk_entries', record.disk_entries),
        _u16_line('total_entries', record.total_entries),
        _u32_line('cd_size', record.cd_size),
        _u32_line('cd_offset', record.cd_offset),
        _u16_line('comment_length', record.comment_length),
        _text_line('zip_file_comment', record.zip_file_comment),
    ]

    return _join_lines(lines)


def decode_text_field(field_name: str, data: bytes) -> str:
    """
    Decodes a field that is supposed to contain text (file name, comment).

    Only UTF-8 is accepted. Archives using other encodings (e.g. CP437 for entries without the UTF-8 flag) are
    reported as errors rather than guessed at.

    Raises:
        NonTextFieldError: If the data is not valid UTF-8.
    """
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise NonTextFieldError(field_name, data) from e


def _join_lines(lines: List[str]) -> str:
    return ''.join(line + '\n' for line in lines)


def _signature_line(record: ZipRecord) -> str:
    return f"sig = 0x{record.signature:08x} ({record.title})"


def _u16_line(name: str, value: int, decoded: Tuple[int, ...] = None) -> str:
    return _int_line(name, value, 4, decoded)


def _u32_line(name: str, value: int) -> str:
    return _int_line(name, value, 8)


def _int_line(name: str, value: int, width: int, decoded: Tuple[int, ...] = None) -> str:
    decoded_text = str(value) if decoded is None else f"({', '.join(str(part) for part in decoded)})"

    return f"{name} = 0x{value:0{width}x} ({decoded_text})"


def _bytes_line(name: str, data: bytes) -> str:
    return f'{name} = "{data.hex()}"'


def _text_line(name: str, data: bytes) -> str:
    return f'{_bytes_line(name, data)} ({_quote_text(decode_text_field(name, data))})'


_ESCAPES = {
    '\\': '\\\\',
    '"': '\\"',
    '\t': '\\t',
    '\r': '\\r',
    '\n': '\\n',
    '\0': '\\0',
}


def _quote_text(text: str) -> str:
    return '"' + ''.join(_escape_char(char) for char in text) + '"'


def _escape_char(char: str) -> str:
    escape = _ESCAPES.get(char)
    if escape is not None:
        return escape

    # Controls and non-space separators (e.g. U+2028)
    if not char.isprintable():
        return f"\\u{{{ord(char):x}}}"

    return char
