# --- tests/test_transcript.py ---

import os
import sys
import tempfile
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from transcript import (
    ChangeDirectory, DirectoryEntry, FileEntry, ListMarker, TranscriptParseError,
    parse_line, parse_transcript, read_transcript
)


class TestParseLine(unittest.TestCase):
    """Tests for transcript.parse_line"""

    def test_commands(self):
        print("\nTesting: transcript.parse_line commands...")
        self.assertEqual(parse_line("$ cd /"), ChangeDirectory("/"))
        self.assertEqual(parse_line("$ cd .."), ChangeDirectory(".."))
        self.assertEqual(parse_line("$ cd a", 7), ChangeDirectory("a", 7))
        self.assertEqual(parse_line("$ ls"), ListMarker())
        print("PASS: commands")

    def test_listing_rows(self):
        print("Testing: transcript.parse_line listing rows...")
        self.assertEqual(parse_line("dir a"), DirectoryEntry("a"))
        self.assertEqual(parse_line("14848514 b.txt"), FileEntry("b.txt", 14848514))
        self.assertEqual(parse_line("12 my file.txt"), FileEntry("my file.txt", 12))
        self.assertEqual(parse_line("  584 i  \n"), FileEntry("i", 584))
        print("PASS: listing rows")

    def test_malformed_lines(self):
        for line in ["", "   ", "$", "$ cd", "$ rm -rf /", "abc def", "-5 f", "42"]:
            with self.subTest(line=line):
                with self.assertRaises(TranscriptParseError):
                    parse_line(line, 3)

    def test_error_carries_line_number(self):
        with self.assertRaises(TranscriptParseError) as ctx:
            parse_line("x y", 12)
        self.assertEqual(ctx.exception.line_number, 12)
        self.assertIn("Line 12", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)


class TestParseTranscript(unittest.TestCase):

    def test_line_numbers_start_at_one(self):
        records = list(parse_transcript(["$ cd /", "$ ls", "dir a"]))
        self.assertEqual([r.line_number for r in records], [1, 2, 3])

    def test_read_transcript_ignores_trailing_newline(self):
        print("Testing: transcript.read_transcript...")
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "log.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("$ cd /\n$ ls\n10 a\n")
            records = list(read_transcript(path))
        self.assertEqual(records, [ChangeDirectory("/", 1), ListMarker(2), FileEntry("a", 10, 3)])
        print("PASS: transcript.read_transcript")

    def test_read_invalid_utf8_reports_line(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "log.txt")
            with open(path, "wb") as f:
                f.write(b"$ cd /\n$ ls\n10 \xff\xfe.bin\n")
            with self.assertRaises(TranscriptParseError) as ctx:
                list(read_transcript(path))
        self.assertEqual(ctx.exception.line_number, 3)
        self.assertIn(".bin", ctx.exception.line)

    def test_read_missing_file(self):
        with self.assertRaises(OSError):
            list(read_transcript("/nonexistent/transcript.txt"))


if __name__ == "__main__":
    unittest.main()
