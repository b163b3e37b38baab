import io
import unittest

import clireport
from clireport import no_prefix


class TestDefaultReporter(unittest.TestCase):
    def setUp(self):
        self.out = io.StringIO()
        old = clireport.set_reporter(clireport.Reporter(prefix="prog", stream=self.out))
        self.addCleanup(clireport.set_reporter, old)

    def test_module_functions(self):
        clireport.write_message("starting")
        clireport.warn_with_tag("note", "odd input on line %d", 4)
        clireport.warn_if(None, "never")
        self.assertEqual(clireport.number_of_warnings(), 1)
        self.assertEqual(clireport.get_exit_status(), 3)
        self.assertEqual(
            self.out.getvalue(), "prog: starting\nprog note: odd input on line 4\n"
        )

    def test_prefix(self):
        self.assertEqual(clireport.get_prefix(), "prog")
        clireport.set_prefix("other")
        clireport.write_message_with_tag("BUG", "x")
        self.assertEqual(self.out.getvalue(), "other BUG: x\n")

    def test_exit_status(self):
        self.assertEqual(clireport.set_exit_status(6), 2)
        with self.assertRaises(SystemExit) as cm:
            clireport.die_if(ValueError("no"))
        self.assertEqual(cm.exception.code, 6)
        with self.assertRaises(clireport.PanicError):
            clireport.set_exit_status(125)

    def test_panic(self):
        with self.assertRaises(clireport.PanicError) as cm:
            clireport.panic_with_tag("BUG", "%s", "oops")
        self.assertEqual(str(cm.exception), "prog BUG: oops")

    def test_no_prefix_forwards(self):
        self.assertEqual(
            sorted(no_prefix.__all__),
            sorted(
                [
                    "warn",
                    "warn_with_tag",
                    "warn_if",
                    "warn_if_with_tag",
                    "die",
                    "die_with_tag",
                    "die_if",
                    "die_if_with_tag",
                ]
            ),
        )
        no_prefix.warn("a %s", "b")
        no_prefix.warn_if_with_tag(KeyError("k"), "t")
        no_prefix.die_if(None)
        with self.assertRaises(SystemExit) as cm:
            no_prefix.die_with_tag("fatal", "%d", 1)
        self.assertEqual(cm.exception.code, 3)
        self.assertEqual(self.out.getvalue(), "prog: a b\nprog t: 'k'\nprog fatal: 1\n")
        self.assertEqual(clireport.number_of_warnings(), 2)
