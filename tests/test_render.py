import unittest

from zp.decode import decode_zip_records
from zp.errors import NonTextFieldError
from zp.records import EndOfCentralDirectoryRecord
from zp.render import render, render_verbose, render_summary, render_record_verbose

from zip_builders import SAMPLE_ZIP, SAMPLE_VERBOSE, SAMPLE_SUMMARY, read_golden, local_file_header, \
    central_directory_header, end_of_central_directory


class GoldenRenderTest(unittest.TestCase):
    def setUp(self):
        self.records = decode_zip_records(SAMPLE_ZIP.read_bytes())

    def test_verbose(self):
        self.assertEqual(render_verbose(self.records), read_golden(SAMPLE_VERBOSE))

    def test_summary(self):
        self.assertEqual(render_summary(self.records), read_golden(SAMPLE_SUMMARY))

    def test_render_selects_mode(self):
        self.assertEqual(render(self.records, verbose=True), read_golden(SAMPLE_VERBOSE))
        self.assertEqual(render(self.records, verbose=False), read_golden(SAMPLE_SUMMARY))

    def test_summary_lines(self):
        self.assertEqual(
            render_summary(self.records).splitlines(),
            [
                "folder00/\ttrue\t0\t2022-05-19T10:51:38\t",
                "test00.txt\tfalse\t4\t2020-08-25T09:05:38\tA top level file",
            ]
        )


class VerboseRenderTest(unittest.TestCase):
    def test_ends_with_eof_marker(self):
        text = render_verbose(decode_zip_records(end_of_central_directory()))

        self.assertTrue(text.startswith('---\nsig = 0x504b0506 (End of central directory record)\n'))
        self.assertTrue(text.endswith('zip_file_comment = "" ("")\n---\nEOF\n---\n'))

    def test_no_data_descriptor(self):
        record, = decode_zip_records(local_file_header(name=b'x', data=b'\x00\xff'))

        text = render_record_verbose(record)

        self.assertIn('file_data = "00ff"\n', text)
        self.assertTrue(text.endswith('data_descriptor = None\n'))

    def test_data_descriptor_block(self):
        record, = decode_zip_records(local_file_header(data=b'z', flags=0x0008, descriptor=(0xabcdef01, 1, 2)))

        self.assertTrue(render_record_verbose(record).endswith(
            'data_descriptor = {\n'
            '    crc32 = 0xabcdef01 (2882400001)\n'
            '    compressed_size = 0x00000001 (1)\n'
            '    uncompressed_size = 0x00000002 (2)\n'
            '}\n'
            '\n'
        ))

    def test_time_fields_show_tuples(self):
        record, = decode_zip_records(local_file_header())

        text = render_record_verbose(record)

        self.assertIn('mod_time = 0x48b3 ((9, 5, 38))\n', text)
        self.assertIn('mod_date = 0x5119 ((2020, 8, 25))\n', text)

    def test_text_is_escaped(self):
        record = EndOfCentralDirectoryRecord(0, 0, 0, 0, 0, 0, b'say "hi"\n\\')

        self.assertIn(
            'zip_file_comment = "73617920226869220a5c" ("say \\"hi\\"\\n\\\\")\n',
            render_record_verbose(record)
        )

    def test_control_and_separator_characters_are_escaped(self):
        record = EndOfCentralDirectoryRecord(0, 0, 0, 0, 0, 0, 'a\tb\rc\0d\u0085e\u2028f'.encode('utf-8'))

        text = render_record_verbose(record)

        self.assertIn(
            'zip_file_comment = "6109620d630064c28565e280a866" ("a\\tb\\rc\\0d\\u{85}e\\u{2028}f")\n',
            text
        )
        self.assertEqual(text.splitlines()[-1], 'zip_file_comment = "6109620d630064c28565e280a866" '
                                               '("a\\tb\\rc\\0d\\u{85}e\\u{2028}f")')

    def test_non_utf8_name_fails(self):
        record, = decode_zip_records(local_file_header(name=b'\x80abc'))

        with self.assertRaises(NonTextFieldError) as cm:
            render_record_verbose(record)

        self.assertEqual(cm.exception.field_name, 'file_name')
        self.assertEqual(cm.exception.data, b'\x80abc')

    def test_non_utf8_extra_field_is_fine(self):
        record, = decode_zip_records(local_file_header(extra=b'\x80\x81'))

        self.assertIn('extra_field = "8081"\n', render_record_verbose(record))

    def test_unknown_record_type(self):
        with self.assertRaises(NotImplementedError):
            render_record_verbose(object())


class SummaryRenderTest(unittest.TestCase):
    def test_only_central_directory_entries(self):
        data = local_file_header(name=b'a.txt', data=b'abc') + \
            central_directory_header(name=b'a.txt', size=3, comment=b'note') + \
            end_of_central_directory(entries=1)

        self.assertEqual(
            render_summary(decode_zip_records(data)),
            "a.txt\tfalse\t3\t2020-08-25T09:05:38\tnote\n"
        )

    def test_order_follows_input(self):
        data = central_directory_header(name=b'z/') + central_directory_header(name=b'a')

        self.assertEqual(
            [line.split('\t')[0] for line in render_summary(decode_zip_records(data)).splitlines()],
            ['z/', 'a']
        )

    def test_no_entries(self):
        self.assertEqual(render_summary(decode_zip_records(end_of_central_directory())), '')

    def test_non_utf8_comment_fails(self):
        records = decode_zip_records(central_directory_header(comment=b'\xff'))

        with self.assertRaises(NonTextFieldError):
            render_summary(records)
