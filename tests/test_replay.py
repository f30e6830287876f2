# --- tests/test_replay.py ---

import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from navigator import DirectoryNotFoundError, NoParentError
from replay import ReplayState, TranscriptReplayer, replay_records, replay_transcript
from transcript import ChangeDirectory, DirectoryEntry, FileEntry, ListMarker, parse_transcript

SAMPLE_PATH = os.path.join(os.path.dirname(__file__), 'data', 'sample_transcript.txt')


class TestReplay(unittest.TestCase):
    """Tests for the command state machine in replay.py"""

    def test_sample_summary(self):
        print("\nTesting: replay of the sample transcript...")
        result = replay_transcript(SAMPLE_PATH)
        self.assertEqual(result.total_size_bytes, 48381165)
        self.assertEqual(result.total_dirs_count, 4)
        self.assertEqual(result.total_files_count, 10)
        self.assertEqual(result.skipped_entries, [])
        self.assertEqual(len(result.tree), 14)
        print("PASS: sample replay")

    def test_state_transitions(self):
        replayer = TranscriptReplayer()
        self.assertIs(replayer.state, ReplayState.AWAITING_COMMAND)
        replayer.apply(ListMarker())
        self.assertIs(replayer.state, ReplayState.LISTING)
        replayer.apply(DirectoryEntry("a"))
        self.assertIs(replayer.state, ReplayState.LISTING)
        replayer.apply(ChangeDirectory("a"))
        self.assertIs(replayer.state, ReplayState.AWAITING_COMMAND)
        self.assertEqual(replayer.navigator.current_path, "/a")

    def test_entries_outside_listing_are_skipped(self):
        print("Testing: listing rows without a preceding ls...")
        records = parse_transcript(["$ cd /", "100 stray", "$ ls", "5 kept", "$ cd /", "7 stray2"])
        with self.assertLogs("replay", level="WARNING"):
            result = replay_records(records)
        self.assertEqual(result.total_size_bytes, 5)
        self.assertEqual(result.skipped_entries, [2, 6])
        print("PASS: stray rows skipped")

    def test_unknown_directory_propagates(self):
        with self.assertRaises(DirectoryNotFoundError):
            replay_records(parse_transcript(["$ cd /", "$ cd nowhere"]))

    def test_cd_up_from_root_propagates(self):
        with self.assertRaises(NoParentError):
            replay_records([ChangeDirectory("..")])

    def test_progress_reports_current_path(self):
        seen = []
        records = [ListMarker(), DirectoryEntry("a"), ChangeDirectory("a"), ChangeDirectory("/")]
        replay_records(records, on_progress=seen.append)
        self.assertEqual(seen, ["/a", "/"])

    def test_empty_transcript_is_root_only(self):
        result = replay_records([])
        self.assertEqual(result.total_size_bytes, 0)
        self.assertEqual(result.total_dirs_count, 1)
        self.assertEqual(len(result.tree), 1)

    def test_file_entries_accumulate(self):
        result = replay_records([ListMarker(), FileEntry("x", 3), FileEntry("y", 4)])
        self.assertEqual(result.tree.root.size_bytes, 7)
        self.assertEqual(result.total_files_count, 2)


if __name__ == "__main__":
    unittest.main()
