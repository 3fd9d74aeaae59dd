import os
import tempfile
import unittest
from pathlib import Path

from seleniumrun.utils.file_handler import clean_filename, ensure_directory_exists


class FileHandlerTest(unittest.TestCase):
    def test_clean_filename(self) -> None:
        self.assertEqual("Screenshot", clean_filename(None, "Screenshot"))
        self.assertEqual("Screenshot", clean_filename("  ", "Screenshot"))
        self.assertEqual("Screenshot", clean_filename("...", "Screenshot"))
        self.assertEqual("login page", clean_filename("login page", "x"))
        self.assertEqual("a_b_c", clean_filename("a<b>|c", "x"))
        self.assertEqual("22-10-19_14-05", clean_filename("22-10-19_14-05", "x"))

    def test_ensure_directory_exists(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "a" / "b"
            ensure_directory_exists(target)
            self.assertTrue(target.is_dir())
            ensure_directory_exists(target)

            blocker = Path(tmpdir) / "file"
            blocker.write_text("x", encoding="utf-8")
            with self.assertRaises(NotADirectoryError):
                ensure_directory_exists(blocker)
            self.assertTrue(os.path.isfile(blocker))


if __name__ == "__main__":
    unittest.main()
