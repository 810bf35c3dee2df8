import unittest

from zp.errors import TruncatedInputError
from zp.fields import u16_le, u32_le, u32_be, mod_time, mod_date, format_dos_timestamp


class FixedIntTest(unittest.TestCase):
    def test_u16_le(self):
        self.assertEqual(u16_le(b'\x14\x00'), 20)
        self.assertEqual(u16_le(b'\xff\xff'), 0xffff)

    def test_u32_le(self):
        self.assertEqual(u32_le(b'\x0c\x7e\x7f\xd8'), 0xd87f7e0c)

    def test_u32_be(self):
        self.assertEqual(u32_be(b'PK\x03\x04'), 0x504b0304)
        self.assertEqual(u32_be(b'\x00\x00\x00\x01'), 1)

    def test_short_data(self):
        with self.assertRaises(TruncatedInputError):
            u16_le(b'\x01')
        with self.assertRaises(TruncatedInputError):
            u32_le(b'\x01\x02\x03')
        with self.assertRaises(TruncatedInputError):
            u32_be(b'')


class ModTimeTest(unittest.TestCase):
    def test_known_value(self):
        self.assertEqual(mod_time(0x48b3), (9, 5, 38))

    def test_zero(self):
        self.assertEqual(mod_time(0), (0, 0, 0))

    def test_two_second_resolution(self):
        self.assertEqual(mod_time(0x5673), (10, 51, 38))
        self.assertEqual(mod_time(0x001f), (0, 0, 62))

    def test_all_bits(self):
        self.assertEqual(mod_time(0xffff), (31, 63, 62))


class ModDateTest(unittest.TestCase):
    def test_known_value(self):
        self.assertEqual(mod_date(0x5119), (2020, 8, 25))

    def test_epoch(self):
        self.assertEqual(mod_date(0), (1980, 0, 0))

    def test_nonsense_passes_through(self):
        self.assertEqual(mod_date(0xffff), (2107, 15, 31))


class FormatDosTimestampTest(unittest.TestCase):
    def test_basic(self):
        self.assertEqual(format_dos_timestamp(0x5119, 0x48b3), '2020-08-25T09:05:38')

    def test_padding(self):
        self.assertEqual(format_dos_timestamp(0x0021, 0x0000), '1980-01-01T00:00:00')
