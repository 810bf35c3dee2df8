import io
import unittest

from contextlib import redirect_stderr

from zp.errors import InvalidSignatureError, PathNotFoundError
from zp.cli.errors import DescriptiveError, fail, descriptive_errors, pretty_unhandled


class DescriptiveErrorsTest(unittest.TestCase):
    def test_converts_listed_classes(self):
        with self.assertRaises(DescriptiveError) as cm:
            with descriptive_errors(PathNotFoundError):
                raise PathNotFoundError('a.zip')

        self.assertEqual(str(cm.exception), "Path does not exist: `a.zip`")
        self.assertIsInstance(cm.exception.__cause__, PathNotFoundError)

    def test_context_prefix(self):
        with self.assertRaises(DescriptiveError) as cm:
            with descriptive_errors(InvalidSignatureError, context='b.zip'):
                raise InvalidSignatureError(0, b'\x00\x00\x00\x01')

        self.assertEqual(str(cm.exception), "b.zip: Invalid signature: `00000001`")

    def test_other_classes_pass_through(self):
        with self.assertRaises(KeyError):
            with descriptive_errors(PathNotFoundError):
                raise KeyError('x')

    def test_fail_dedents(self):
        with self.assertRaises(DescriptiveError) as cm:
            fail("""
                Something
                went wrong
            """)

        self.assertEqual(str(cm.exception), "Something\nwent wrong")


def _run_main(main):
    stderr = io.StringIO()

    with redirect_stderr(stderr):
        try:
            main()
            exit_code = 0
        except SystemExit as e:
            exit_code = e.code

    return exit_code, stderr.getvalue()


class PrettyUnhandledTest(unittest.TestCase):
    def test_descriptive_error_has_no_trace(self):
        @pretty_unhandled(exit_code=3)
        def main():
            fail("No files provided.")

        code, err = _run_main(main)

        self.assertEqual(code, 3)
        self.assertIn("No files provided.", err)
        self.assertNotIn("Traceback", err)

    def test_bug_shows_trace(self):
        @pretty_unhandled()
        def main():
            raise ValueError("unexpected")

        code, err = _run_main(main)

        self.assertEqual(code, 1)
        self.assertIn("ValueError: unexpected", err)
        self.assertIn("Traceback:", err)
        self.assertIn("in main", err)

    def test_keyboard_interrupt(self):
        @pretty_unhandled()
        def main():
            raise KeyboardInterrupt()

        code, err = _run_main(main)

        self.assertEqual(code, 0)
        self.assertIn("Stopped by user", err)

    def test_passes_return_value(self):
        @pretty_unhandled()
        def main():
            return 42

        self.assertEqual(main(), 42)
