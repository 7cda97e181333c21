import os
import sys
import shutil
import tempfile
import unittest

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))

from ls_override import config
from ls_override.ansi import strip_ansi
from ls_override.recolor import recolor_entries, recolor_entry

DOTDIR = config.NAME_COLORS["dotdir"]
DOTFILE = config.NAME_COLORS["dotfile"]
RESET = config.RESET


class TestRecolor(unittest.TestCase):
    def setUp(self):
        # /tmp/
        #   - .cdir/
        #   - .a
        #   - b
        #   - visible/
        self.test_dir = tempfile.mkdtemp()
        os.makedirs(os.path.join(self.test_dir, ".cdir"))
        os.makedirs(os.path.join(self.test_dir, "visible"))
        for name in (".a", "b"):
            with open(os.path.join(self.test_dir, name), "w") as f:
                f.write("x")

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_hidden_directory_gets_dotdir_color(self):
        self.assertEqual(
            recolor_entry(".cdir", self.test_dir),
            DOTDIR + ".cdir" + RESET,
        )

    def test_hidden_directory_with_type_indicator(self):
        """ls -F appends '/' to directories; the lookup still resolves."""
        self.assertEqual(
            recolor_entry(".cdir/", self.test_dir),
            DOTDIR + ".cdir/" + RESET,
        )

    def test_hidden_directory_overrides_ls_color(self):
        raw = "\x1b[0m\x1b[01;34m.cdir\x1b[0m/"
        self.assertEqual(recolor_entry(raw, self.test_dir), DOTDIR + ".cdir/" + RESET)

    def test_uncolored_hidden_file_gets_dotfile_color(self):
        self.assertEqual(recolor_entry(".a", self.test_dir), DOTFILE + ".a" + RESET)

    def test_colored_hidden_file_is_untouched(self):
        raw = "\x1b[01;32m.a\x1b[0m*"
        self.assertEqual(recolor_entry(raw, self.test_dir), raw)

    def test_vanished_entry_is_treated_as_file(self):
        self.assertEqual(recolor_entry(".gone", self.test_dir), DOTFILE + ".gone" + RESET)
        colored = "\x1b[01;36m.gone\x1b[0m"
        self.assertEqual(recolor_entry(colored, self.test_dir), colored)

    def test_visible_entries_untouched(self):
        self.assertEqual(recolor_entry("b", self.test_dir), "b")
        raw = "\x1b[01;34mvisible\x1b[0m/"
        self.assertEqual(recolor_entry(raw, self.test_dir), raw)

    def test_lookup_is_relative_to_root(self):
        """Without a root, names resolve from the CWD."""
        cwd = os.getcwd()
        os.chdir(self.test_dir)
        try:
            self.assertEqual(recolor_entry(".cdir"), DOTDIR + ".cdir" + RESET)
        finally:
            os.chdir(cwd)

    def test_name_missing_under_root_falls_back_to_cwd(self):
        """A root that does not hold the entry does not hide a CWD directory."""
        other = os.path.join(self.test_dir, "visible")
        cwd = os.getcwd()
        os.chdir(self.test_dir)
        try:
            self.assertEqual(recolor_entry(".cdir/", other), DOTDIR + ".cdir/" + RESET)
        finally:
            os.chdir(cwd)

    def test_root_wins_when_it_holds_the_entry(self):
        # visible/.cdir is a plain file, ./.cdir is a directory
        with open(os.path.join(self.test_dir, "visible", ".cdir"), "w") as f:
            f.write("x")
        cwd = os.getcwd()
        os.chdir(self.test_dir)
        try:
            other = os.path.join(self.test_dir, "visible")
            self.assertEqual(recolor_entry(".cdir", other), DOTFILE + ".cdir" + RESET)
        finally:
            os.chdir(cwd)

    def test_recolor_entries_keeps_length_order_and_visible_text(self):
        entries = [
            "\x1b[01;34m.cdir\x1b[0m/",
            "\x1b[01;34mvisible\x1b[0m/",
            ".a",
            "\x1b[01;32m.run\x1b[0m*",
            "b",
        ]
        result = recolor_entries(entries, self.test_dir)

        self.assertEqual(len(result), len(entries))
        self.assertEqual([strip_ansi(e) for e in result], [strip_ansi(e) for e in entries])
        self.assertEqual(result[0], DOTDIR + ".cdir/" + RESET)
        self.assertEqual(result[1], entries[1])
        self.assertEqual(result[2], DOTFILE + ".a" + RESET)
        self.assertEqual(result[3], entries[3])
        self.assertEqual(result[4], "b")

    def test_empty_listing(self):
        self.assertEqual(recolor_entries([]), [])


if __name__ == '__main__':
    unittest.main()
