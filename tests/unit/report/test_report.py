"""Report formatting tests.

Covers size/path formatting helpers, parent-relative percentages, and the
depth-first line order of rendered reports.
"""

from __future__ import annotations

import io
import unittest
from pathlib import Path

from sizetree.report import (
    MIN_PATH_CHARS,
    format_path,
    format_size,
    iter_report_rows,
    percent_of_parent,
    render_report,
    write_report,
)
from sizetree.size_tree_model import DirectoryEntry, FileEntry


def _scenario_tree() -> DirectoryEntry:
    sub = DirectoryEntry(Path("A/B"), 10, (FileEntry(Path("A/B/f3"), 10),))
    return DirectoryEntry(
        Path("A"),
        160,
        (sub, FileEntry(Path("A/f1"), 100), FileEntry(Path("A/f2"), 50)),
    )


class FormatHelpersTests(unittest.TestCase):
    def test_format_size_picks_binary_units(self) -> None:
        self.assertEqual(format_size(0), "0 Bytes")
        self.assertEqual(format_size(1023), "1023 Bytes")
        self.assertEqual(format_size(1536), "1.50 KB")
        self.assertEqual(format_size(2 * 1024 * 1024), "2.00 MB")
        self.assertEqual(format_size(3 * 1024**3), "3.00 GB")
        self.assertEqual(format_size(5 * 1024**4), "5.00 TB")

    def test_format_path_keeps_short_paths(self) -> None:
        self.assertEqual(format_path(Path("src/pkg/module.py")), "src/pkg/module.py")

    def test_format_path_shortens_long_paths(self) -> None:
        text = "a" * 30 + "/" + "b" * 30
        shortened = format_path(Path(text))

        self.assertEqual(shortened, "a" * 20 + "..." + "b" * 20)
        self.assertEqual(format_path(Path(text), max_chars=100), text)

    def test_format_path_keeps_path_at_exact_limit(self) -> None:
        text = "c" * 25 + "/" + "d" * 24

        self.assertEqual(len(text), 50)
        self.assertEqual(format_path(Path(text)), text)
        self.assertEqual(format_path(Path(text + "e")), "c" * 20 + "..." + "d" * 19 + "e")

    def test_format_path_never_grows_beyond_small_limits(self) -> None:
        short = "x" * MIN_PATH_CHARS
        long = "y" * 60

        self.assertEqual(format_path(Path(short), max_chars=10), short)
        self.assertEqual(len(format_path(Path(long), max_chars=10)), MIN_PATH_CHARS)

    def test_percent_of_parent_handles_empty_parent(self) -> None:
        self.assertEqual(percent_of_parent(0, 0), 0.0)
        self.assertEqual(percent_of_parent(10, 160), 6.25)
        self.assertEqual(percent_of_parent(160, 160), 100.0)


class RenderReportTests(unittest.TestCase):
    def test_scenario_tree_renders_depth_first_with_parent_percentages(self) -> None:
        self.assertEqual(
            render_report(_scenario_tree()),
            [
                "FOLDER 160 Bytes [100.00%] A",
                "FOLDER 10 Bytes [6.25%] ->A/B",
                "FILE   10 Bytes [100.00%] ->->A/B/f3",
                "FILE   100 Bytes [62.50%] ->A/f1",
                "FILE   50 Bytes [31.25%] ->A/f2",
            ],
        )

    def test_empty_directory_prints_only_its_own_line(self) -> None:
        self.assertEqual(render_report(DirectoryEntry(Path("empty"), 0, ())), ["FOLDER 0 Bytes [0.00%] empty"])

    def test_children_of_empty_parent_show_zero_percent(self) -> None:
        tree = DirectoryEntry(Path("root"), 0, (FileEntry(Path("root/zero"), 0),))

        rows = list(iter_report_rows(tree))

        self.assertEqual([(row.depth, row.percent) for row in rows], [(0, 0.0), (1, 0.0)])

    def test_percentages_stay_within_bounds(self) -> None:
        for row in iter_report_rows(_scenario_tree()):
            self.assertGreaterEqual(row.percent, 0.0)
            self.assertLessEqual(row.percent, 100.0)

    def test_write_report_streams_newline_terminated_lines(self) -> None:
        stream = io.StringIO()

        write_report(_scenario_tree(), stream)

        self.assertEqual(stream.getvalue(), "\n".join(render_report(_scenario_tree())) + "\n")


if __name__ == "__main__":
    unittest.main()
