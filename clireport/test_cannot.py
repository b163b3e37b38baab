import errno
import unittest

from clireport.cannot import CannotError, cannot, quote


class TestCannotError(unittest.TestCase):
    def test_messages(self):
        missing = FileNotFoundError(
            errno.ENOENT, "No such file or directory", "/etc/frob.conf"
        )
        data = [
            (
                cannot("open", "config file", "/etc/frob.conf", True, "", missing),
                'cannot open config file "/etc/frob.conf": No such file or directory',
            ),
            (cannot("read", "", "line 3", False, "of input"), "cannot read line 3 of input"),
            (cannot("parse", "date", "31/02", True), 'cannot parse date "31/02"'),
            (
                cannot("load", "", "plugins", base_error=ValueError("bad name")),
                "cannot load plugins: bad name",
            ),
        ]
        for err, expected in data:
            with self.subTest(expected=expected):
                self.assertEqual(str(err), expected)

    def test_unwrap(self):
        base = ValueError("x")
        err = CannotError("use", "", "it", base_error=base)
        self.assertIs(err.unwrap(), base)
        self.assertIs(err.__cause__, base)
        self.assertIsNone(cannot("use", "", "it").unwrap())

    def test_quote(self):
        self.assertEqual(quote('say "hi"'), '"say \\"hi\\""')
        self.assertEqual(quote("a\\b\tc\n"), '"a\\\\b\\tc\\n"')
        self.assertEqual(quote("bell\x07"), '"bell\\x07"')
        self.assertEqual(quote("café"), '"café"')
