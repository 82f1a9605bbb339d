"""End-to-end REPL behavior over in-memory streams.

Each test drives ``ExplorerRepl.run`` with scripted input and checks what
lands on stdout/stderr and on disk.
"""

from __future__ import annotations

import io
import os
import stat
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fileexplorer.repl import ExplorerRepl, ReplState
from fileexplorer.session import Session


class ReplTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def run_script(self, *lines: str, **options) -> tuple[str, str, ExplorerRepl]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        repl = ExplorerRepl(Session(self.root), stdout=stdout, stderr=stderr, **options)
        exit_code = repl.run(io.StringIO("".join(line + "\n" for line in lines)))
        self.assertEqual(exit_code, 0)
        self.assertIs(repl.state, ReplState.TERMINATED)
        return stdout.getvalue(), stderr.getvalue(), repl


class ReplControlFlowTests(ReplTestCase):
    def test_end_of_input_terminates_cleanly(self) -> None:
        stdout, stderr, _repl = self.run_script()

        self.assertEqual(stdout, "")
        self.assertEqual(stderr, "")

    def test_exit_stops_reading_further_lines(self) -> None:
        stdout, _stderr, _repl = self.run_script("exit", "pwd")

        self.assertEqual(stdout, "")

    def test_blank_lines_are_ignored(self) -> None:
        stdout, stderr, _repl = self.run_script("", "   ", "pwd")

        self.assertEqual(stdout, f"{self.root}\n")
        self.assertEqual(stderr, "")

    def test_unknown_command_is_reported_and_loop_continues(self) -> None:
        stdout, stderr, _repl = self.run_script("frobnicate now", "pwd")

        self.assertEqual(stderr, "Unknown command: frobnicate (type 'help')\n")
        self.assertEqual(stdout, f"{self.root}\n")

    def test_missing_arguments_print_usage(self) -> None:
        _stdout, stderr, _repl = self.run_script("cp onlyone", "search", "cd")

        self.assertEqual(
            stderr.splitlines(),
            [
                "cp: usage: cp <src> <dst>",
                "search: usage: search <root> <regex>",
                "cd: usage: cd <path>",
            ],
        )

    def test_banner_and_prompt_when_interactive(self) -> None:
        stdout, _stderr, _repl = self.run_script("exit", prompt="> ", banner=True)

        self.assertEqual(stdout, "Type 'help' for menu.\n> ")

    def test_help_prints_menu(self) -> None:
        stdout, _stderr, _repl = self.run_script("help")

        self.assertIn("===== File Explorer =====", stdout)


class ReplNavigationTests(ReplTestCase):
    def test_cd_to_missing_path_keeps_directory(self) -> None:
        stdout, stderr, _repl = self.run_script("cd nowhere", "pwd")

        self.assertEqual(stderr, f"cd: {os.strerror(2)}\n")
        self.assertEqual(stdout, f"{self.root}\n")

    def test_cd_to_file_is_rejected(self) -> None:
        (self.root / "plain.txt").write_text("", encoding="utf-8")

        stdout, stderr, _repl = self.run_script("cd plain.txt", "pwd")

        self.assertEqual(stderr, "cd: Not a directory\n")
        self.assertEqual(stdout, f"{self.root}\n")

    def test_cd_changes_relative_resolution(self) -> None:
        (self.root / "sub").mkdir()
        (self.root / "sub" / "inner.txt").write_text("hello\n", encoding="utf-8")

        stdout, stderr, repl = self.run_script("cd sub", "pwd", "cathead inner.txt 1", "cd ..", "pwd")

        self.assertEqual(stderr, "")
        self.assertEqual(stdout.splitlines(), [str(self.root / "sub"), "hello", str(self.root)])
        self.assertEqual(repl.session.cwd, self.root)

    def test_ls_lists_working_directory_by_default(self) -> None:
        (self.root / "a.txt").write_bytes(b"0123456789")
        (self.root / "sub").mkdir()

        stdout, stderr, _repl = self.run_script("ls")

        rows = stdout.splitlines()
        self.assertEqual(stderr, "")
        self.assertTrue(rows[0].startswith("Name"))
        self.assertEqual(len(rows), 3)
        self.assertTrue(any(row.startswith("a.txt") and "FILE" in row and " 10 " in row for row in rows))
        self.assertTrue(any(row.startswith("sub") and "DIR" in row for row in rows))

    def test_ls_accepts_path_with_spaces(self) -> None:
        (self.root / "my dir").mkdir()
        (self.root / "my dir" / "inside.txt").write_text("", encoding="utf-8")

        stdout, stderr, _repl = self.run_script("ls my dir")

        self.assertEqual(stderr, "")
        self.assertIn("inside.txt", stdout)

    def test_ls_unreadable_directory_reports_and_prints_empty_table(self) -> None:
        stdout, stderr, _repl = self.run_script("ls missing")

        self.assertEqual(stderr, f"ls: cannot access 'missing': {os.strerror(2)}\n")
        self.assertEqual(len(stdout.splitlines()), 1)


class ReplFileCommandTests(ReplTestCase):
    def test_create_copy_move_remove_round(self) -> None:
        _stdout, stderr, _repl = self.run_script(
            "mkdir a/b",
            "mkfile a/b/new.txt",
            "cp a copy",
            "mv copy moved",
            "rm a",
        )

        self.assertEqual(stderr, "")
        self.assertFalse((self.root / "a").exists())
        self.assertFalse((self.root / "copy").exists())
        self.assertTrue((self.root / "moved" / "b" / "new.txt").is_file())

    def test_cathead_and_cattail(self) -> None:
        (self.root / "five.txt").write_text("1\n2\n3\n4\n5\n", encoding="utf-8")

        stdout, stderr, _repl = self.run_script("cathead five.txt 3", "cattail five.txt 3")

        self.assertEqual(stderr, "")
        self.assertEqual(stdout.splitlines(), ["1", "2", "3", "3", "4", "5"])

    def test_cathead_reports_missing_file_and_bad_count(self) -> None:
        stdout, stderr, _repl = self.run_script("cathead missing.txt 2", "cattail x.txt many")

        self.assertEqual(stdout, "")
        errors = stderr.splitlines()
        self.assertEqual(errors[0], f"cathead: cannot open {self.root / 'missing.txt'}: {os.strerror(2)}")
        self.assertTrue(errors[1].startswith("cattail: usage: cattail <file> <n>"))

    def test_colored_preview_uses_highlighting(self) -> None:
        (self.root / "code.py").write_text("def f():\n    return 1\n", encoding="utf-8")

        stdout, _stderr, _repl = self.run_script("cathead code.py 1", color=True)

        self.assertIn("\x1b[", stdout)
        self.assertEqual(len(stdout.splitlines()), 1)

    def test_search_prints_matches_one_per_line(self) -> None:
        (self.root / "Apple.txt").write_text("", encoding="utf-8")
        (self.root / "xyz.txt").write_text("", encoding="utf-8")

        stdout, stderr, _repl = self.run_script("search . apple")

        self.assertEqual(stderr, "")
        self.assertEqual(stdout.splitlines(), [str(self.root / "Apple.txt")])

    def test_search_reports_invalid_pattern_and_missing_root(self) -> None:
        stdout, stderr, _repl = self.run_script("search . (oops", "search missing a")

        self.assertEqual(stdout, "")
        errors = stderr.splitlines()
        self.assertTrue(errors[0].startswith("search: invalid regex: "))
        self.assertEqual(errors[1], f"search: {os.strerror(2)}")

    def test_chmod_applies_mode_and_rejects_invalid(self) -> None:
        (self.root / "run.sh").write_text("", encoding="utf-8")

        _stdout, stderr, _repl = self.run_script("chmod run.sh 700", "chmod run.sh 99")

        self.assertEqual(stat.S_IMODE((self.root / "run.sh").stat().st_mode), 0o700)
        self.assertEqual(stderr, "chmod: mode should be 3 digits like 755\n")

    def test_failed_command_does_not_stop_loop(self) -> None:
        stdout, stderr, _repl = self.run_script("rm", "cp missing elsewhere", "pwd")

        self.assertEqual(len(stderr.splitlines()), 2)
        self.assertEqual(stdout, f"{self.root}\n")


class ReplUnusualPathTests(ReplTestCase):
    def test_null_byte_paths_are_reported_and_loop_continues(self) -> None:
        stdout, stderr, repl = self.run_script(
            "cd a\x00b",
            "pwd",
            "ls a\x00b",
            "pwd",
            "search a\x00b x",
            "pwd",
        )

        errors = stderr.splitlines()
        self.assertEqual(len(errors), 3)
        self.assertEqual(errors[0], "cd: embedded null byte")
        self.assertTrue(errors[1].startswith("ls: cannot access "))
        self.assertTrue(errors[1].endswith(": embedded null byte"))
        self.assertEqual(errors[2], "search: embedded null byte")
        rows = stdout.splitlines()
        self.assertEqual(rows[0], str(self.root))
        self.assertTrue(rows[1].startswith("Name"))
        self.assertEqual(rows[2:], [str(self.root), str(self.root)])
        self.assertEqual(repl.session.cwd, self.root)

    def test_unknown_working_directory_does_not_stop_loop(self) -> None:
        with mock.patch.object(Path, "cwd", side_effect=FileNotFoundError(2, "No such file or directory")):
            session = Session()
        self.assertIsNone(session.cwd)
        stdout = io.StringIO()
        stderr = io.StringIO()
        repl = ExplorerRepl(session, stdout=stdout, stderr=stderr)

        exit_code = repl.run(io.StringIO("ls\nsearch . x\nhelp\n"))

        self.assertEqual(exit_code, 0)
        self.assertIs(repl.state, ReplState.TERMINATED)
        self.assertEqual(
            stderr.getvalue().splitlines(),
            [
                "ls: cannot access '': current directory is unavailable",
                "search: current directory is unavailable",
            ],
        )
        self.assertIn("===== File Explorer =====", stdout.getvalue())

    def test_absolute_paths_still_work_without_working_directory(self) -> None:
        (self.root / "kept.txt").write_text("", encoding="utf-8")
        with mock.patch.object(Path, "cwd", side_effect=FileNotFoundError(2, "No such file or directory")):
            session = Session()
        stdout = io.StringIO()
        stderr = io.StringIO()
        repl = ExplorerRepl(session, stdout=stdout, stderr=stderr)

        repl.run(io.StringIO(f"ls {self.root}\ncd {self.root}\npwd\n"))

        self.assertEqual(stderr.getvalue(), "")
        self.assertIn("kept.txt", stdout.getvalue())
        self.assertEqual(stdout.getvalue().splitlines()[-1], str(self.root))


class SessionIsolationTests(unittest.TestCase):
    def test_two_sessions_do_not_share_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "left").mkdir()
            process_cwd = os.getcwd()
            first = ExplorerRepl(Session(root), stdout=io.StringIO(), stderr=io.StringIO())
            second = ExplorerRepl(Session(root), stdout=io.StringIO(), stderr=io.StringIO())

            first.execute("cd left")

            self.assertEqual(first.session.cwd, root / "left")
            self.assertEqual(second.session.cwd, root)
            self.assertEqual(os.getcwd(), process_cwd)


if __name__ == "__main__":
    unittest.main()
