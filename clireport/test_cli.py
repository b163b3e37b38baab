import importlib.metadata
import io
import unittest
from unittest import mock

from clireport.cli import main


class TestMain(unittest.TestCase):
    def run_main(self, argv: list[str]) -> str:
        with mock.patch("sys.stderr", new_callable=io.StringIO) as err, mock.patch(
            "warnings.showwarning"
        ):
            main(argv)
        return err.getvalue()

    def test_info(self):
        out = self.run_main(
            ["--prefix", "backup", "--tag", "summary", "--level", "info", "3", "files"]
        )
        self.assertEqual(out, "backup summary: 3 files\n")

    def test_warn_is_default(self):
        self.assertEqual(self.run_main(["--prefix", "backup", "50% full"]), "backup: 50% full\n")

    def test_default_prefix(self):
        self.assertEqual(self.run_main(["hello"]), "clireport: hello\n")

    def test_die(self):
        for argv, status in [([], 2), (["--exit-status", "40"], 40)]:
            with self.subTest(argv=argv):
                with self.assertRaises(SystemExit) as cm:
                    self.run_main(argv + ["--prefix", "p", "--level", "die", "gone"])
                self.assertEqual(cm.exception.code, status)

    def test_bad_exit_status(self):
        for value in ["1", "125", "lots"]:
            with self.subTest(value=value):
                with self.assertRaises(SystemExit) as cm:
                    self.run_main(["--exit-status", value, "msg"])
                self.assertEqual(cm.exception.code, 2)

    def test_runs_without_installed_metadata(self):
        missing = importlib.metadata.PackageNotFoundError("clireport")
        with mock.patch("importlib.metadata.version", side_effect=missing):
            self.assertEqual(self.run_main(["hello"]), "clireport: hello\n")

    def test_version_without_installed_metadata(self):
        missing = importlib.metadata.PackageNotFoundError("clireport")
        with mock.patch("sys.stdout", new_callable=io.StringIO) as out, mock.patch(
            "importlib.metadata.version", side_effect=missing
        ):
            with self.assertRaises(SystemExit) as cm:
                main(["--version"])
        self.assertEqual(cm.exception.code, 0)
        self.assertTrue(out.getvalue().startswith("clireport (not installed)\n"))
