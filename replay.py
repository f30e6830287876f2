# --- replay.py ---

import logging
from enum import Enum
from typing import Callable, Iterable, Optional

from models import FileTree, NodeKind, ReplayResult
from navigator import Navigator
from transcript import (
    ChangeDirectory, DirectoryEntry, FileEntry, ListMarker, Record, read_transcript
)

logger = logging.getLogger(__name__)


class ReplayState(Enum):
    AWAITING_COMMAND = "awaiting_command"
    LISTING = "listing"


class TranscriptReplayer:
    """
    Rebuilds a FileTree by feeding transcript records to a Navigator.

    A `$ ls` record switches to LISTING, where entries are inserted under
    the current directory; any `$ cd` switches back to AWAITING_COMMAND.
    Navigation errors propagate to the caller.
    """

    def __init__(self, on_progress: Optional[Callable[[str], None]] = None):
        self.on_progress = on_progress
        self.navigator = Navigator(FileTree())
        self.state = ReplayState.AWAITING_COMMAND
        self.result = ReplayResult(tree=self.navigator.tree, total_dirs_count=1)

    def replay(self, records: Iterable[Record]) -> ReplayResult:
        for record in records:
            self.apply(record)

        tree = self.navigator.tree
        self.result.total_size_bytes = tree.root.size_bytes
        logger.info(
            "Replayed transcript: %d directories, %d files, %d bytes",
            self.result.total_dirs_count,
            self.result.total_files_count,
            self.result.total_size_bytes,
        )
        return self.result

    def apply(self, record: Record):
        if isinstance(record, ChangeDirectory):
            self.state = ReplayState.AWAITING_COMMAND
            self._change_directory(record.target)
            if self.on_progress:
                self.on_progress(self.navigator.current_path)
        elif isinstance(record, ListMarker):
            self.state = ReplayState.LISTING
        elif isinstance(record, (DirectoryEntry, FileEntry)):
            if self.state is not ReplayState.LISTING:
                logger.warning("Line %d: listing entry '%s' outside of ls, skipped",
                               record.line_number, record.name)
                self.result.skipped_entries.append(record.line_number)
                return
            self._insert_entry(record)
        else:
            raise TypeError(f"Unsupported record: {record!r}")

    def _change_directory(self, target: str):
        if target == "/":
            self.navigator.go_to_root()
        elif target == "..":
            self.navigator.go_up()
        else:
            self.navigator.go_into(target)

    def _insert_entry(self, record):
        if isinstance(record, DirectoryEntry):
            self.navigator.insert(record.name, NodeKind.DIRECTORY)
            self.result.total_dirs_count += 1
        else:
            self.navigator.insert(record.name, NodeKind.FILE, record.size)
            self.result.total_files_count += 1


def replay_records(records: Iterable[Record],
                   on_progress: Optional[Callable[[str], None]] = None) -> ReplayResult:
    return TranscriptReplayer(on_progress=on_progress).replay(records)


def replay_transcript(path: str,
                      on_progress: Optional[Callable[[str], None]] = None) -> ReplayResult:
    """Reads, parses and replays the transcript at `path`."""
    return replay_records(read_transcript(path), on_progress=on_progress)
