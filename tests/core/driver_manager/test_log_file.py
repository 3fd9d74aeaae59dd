import os
import tempfile
import unittest

from seleniumrun.core.driver_manager.constants import DEBUG_LOG_HEADER, MAX_PATH_LENGTH
from seleniumrun.core.driver_manager.log_file import fit_path_length, prepare_debug_log_file
from seleniumrun.core.errors import DebugLogFileError, ErrorKind, PathTooLong


def _computed_length(path):
    folder = os.path.dirname(path)
    name, ext = os.path.splitext(os.path.basename(path))
    return len(folder) + len(name) + len(ext) + 2


class PrepareDebugLogFileTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = os.path.abspath(self._tmp.name)
        self._old_cwd = os.getcwd()

    def tearDown(self) -> None:
        os.chdir(self._old_cwd)
        self._tmp.cleanup()

    def test_empty_path_means_console(self) -> None:
        for raw in (None, "", "   "):
            self.assertIsNone(prepare_debug_log_file(raw))

    def test_absolute_path_creates_folder_and_header(self) -> None:
        raw = os.path.join(self.tmpdir, "logs", "nested", "selenium.log")
        path = prepare_debug_log_file(raw)
        self.assertEqual(raw, path)
        with open(path, encoding="utf-8") as f:
            self.assertEqual(DEBUG_LOG_HEADER + "\n", f.read())

    def test_second_resolution_is_idempotent(self) -> None:
        raw = os.path.join(self.tmpdir, "selenium.log")
        first = prepare_debug_log_file(raw)
        with open(first, "a", encoding="utf-8") as f:
            f.write("driver output\n")
        second = prepare_debug_log_file(raw)
        self.assertEqual(first, second)
        with open(second, encoding="utf-8") as f:
            self.assertEqual(DEBUG_LOG_HEADER + "\n", f.read())

    def test_spaces_removed_from_file_name(self) -> None:
        path = prepare_debug_log_file(os.path.join(self.tmpdir, "my debug log.txt"))
        self.assertEqual(os.path.join(self.tmpdir, "mydebuglog.txt"), path)

    def test_leading_dot_path_resolves_to_parent_of_named_directory(self) -> None:
        work = os.path.join(self.tmpdir, "work")
        os.makedirs(work)
        os.chdir(work)
        cwd = os.getcwd()
        path = prepare_debug_log_file("./logs/selenium.log")
        self.assertEqual(os.path.join(cwd, "selenium.log"), path)
        self.assertTrue(os.path.isfile(path))
        self.assertFalse(os.path.exists(os.path.join(cwd, "logs")))

    def test_plain_relative_path_resolves_against_cwd(self) -> None:
        os.chdir(self.tmpdir)
        cwd = os.getcwd()
        self.assertEqual(os.path.join(cwd, "logs", "sel.log"), prepare_debug_log_file("logs/sel.log"))
        self.assertEqual(os.path.join(cwd, "bare.log"), prepare_debug_log_file("bare.log"))

    def test_truncates_file_name_to_fit_limit(self) -> None:
        name_length, ext = 40, ".log"
        folder_length = 260 - name_length - len(ext) - 2
        padding = folder_length - len(self.tmpdir) - 1
        if padding < 1:
            self.skipTest("temporary directory path too long for this layout")
        folder = os.path.join(self.tmpdir, "f" * padding)
        self.assertEqual(folder_length, len(folder))

        path = prepare_debug_log_file(os.path.join(folder, "n" * name_length + ext))

        name, resolved_ext = os.path.splitext(os.path.basename(path))
        self.assertEqual(name_length - 12, len(name))
        self.assertEqual(ext, resolved_ext)
        self.assertEqual(MAX_PATH_LENGTH, _computed_length(path))
        self.assertTrue(os.path.isfile(path))

    def test_folder_longer_than_limit_always_fails(self) -> None:
        folder = os.path.join(self.tmpdir, "a" * 120, "b" * 130)
        self.assertGreater(len(folder), MAX_PATH_LENGTH)
        for file_name in ("x.log", "a-much-longer-debug-file-name.log", "noext", "n" * 200 + ".txt"):
            with self.assertRaises(PathTooLong) as ctx:
                prepare_debug_log_file(os.path.join(folder, file_name))
            self.assertEqual(ErrorKind.PATH_TOO_LONG, ctx.exception.kind)
        self.assertFalse(os.path.exists(os.path.join(self.tmpdir, "a" * 120)))

    def test_io_failure_is_wrapped_with_path(self) -> None:
        blocker = os.path.join(self.tmpdir, "not-a-folder")
        with open(blocker, "w", encoding="utf-8") as f:
            f.write("x")
        raw = os.path.join(blocker, "sub", "selenium.log")
        with self.assertRaises(DebugLogFileError) as ctx:
            prepare_debug_log_file(raw)
        self.assertEqual(raw, ctx.exception.path)
        self.assertIsInstance(ctx.exception.__cause__, OSError)
        self.assertTrue(ctx.exception.fatal)


class FitPathLengthTest(unittest.TestCase):
    def test_within_limit_unchanged(self) -> None:
        self.assertEqual("selenium", fit_path_length("/tmp/logs", "selenium", ".log"))

    def test_exactly_at_limit_unchanged(self) -> None:
        folder = "/" + "d" * 199
        name = "n" * 42
        self.assertEqual(name, fit_path_length(folder, name, ".log"))

    def test_truncates_by_excess(self) -> None:
        folder = "/" + "d" * 199
        name = fit_path_length(folder, "n" * 50, ".log")
        self.assertEqual(50 - 8, len(name))

    def test_no_room_for_name_fails(self) -> None:
        folder = "/" + "d" * 241
        with self.assertRaises(PathTooLong):
            fit_path_length(folder, "abc", ".log")


if __name__ == "__main__":
    unittest.main()
