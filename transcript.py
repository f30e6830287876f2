# --- transcript.py ---

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

COMMAND_PREFIX = "$"
DIRECTORY_PREFIX = "dir"


class TranscriptParseError(ValueError):
    """Raised when a transcript line is neither a known command nor a listing row."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Line {line_number}: {reason}: {line!r}")


# --- Records ---

@dataclass(frozen=True)
class ChangeDirectory:
    target: str
    line_number: int = 0


@dataclass(frozen=True)
class ListMarker:
    line_number: int = 0


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    line_number: int = 0


@dataclass(frozen=True)
class FileEntry:
    name: str
    size: int
    line_number: int = 0


Record = Union[ChangeDirectory, ListMarker, DirectoryEntry, FileEntry]

# --- Parsing ---

def parse_line(line: str, line_number: int = 0) -> Record:
    """
    Signature: `parse_line(line: str, line_number: int = 0) -> Record`

    Turns one transcript line into a record:
        $ cd <target>   -> ChangeDirectory
        $ ls            -> ListMarker
        dir <name>      -> DirectoryEntry
        <size> <name>   -> FileEntry
    Names may contain spaces.
    """
    text = line.strip()
    if not text:
        raise TranscriptParseError(line_number, line, "blank line")

    if text.startswith(COMMAND_PREFIX):
        parts = text[len(COMMAND_PREFIX):].split(maxsplit=1)
        if not parts:
            raise TranscriptParseError(line_number, line, "missing command")
        command = parts[0]
        if command == "cd":
            if len(parts) < 2:
                raise TranscriptParseError(line_number, line, "cd without a target")
            return ChangeDirectory(target=parts[1].strip(), line_number=line_number)
        if command == "ls":
            return ListMarker(line_number=line_number)
        raise TranscriptParseError(line_number, line, f"unknown command '{command}'")

    parts = text.split(maxsplit=1)
    if len(parts) < 2:
        raise TranscriptParseError(line_number, line, "listing row without a name")
    head, name = parts
    if head == DIRECTORY_PREFIX:
        return DirectoryEntry(name=name, line_number=line_number)
    try:
        size = int(head)
    except ValueError:
        raise TranscriptParseError(line_number, line, f"invalid size '{head}'") from None
    if size < 0:
        raise TranscriptParseError(line_number, line, f"negative size {size}")
    return FileEntry(name=name, size=size, line_number=line_number)


def parse_transcript(lines: Iterable[str]) -> Iterator[Record]:
    """Parses lines lazily; line numbers start at 1."""
    for line_number, line in enumerate(lines, start=1):
        yield parse_line(line, line_number)


def read_transcript(path: str) -> Iterator[Record]:
    """
    Reads a transcript file and yields its records.
    A trailing newline at the end of the file is not treated as a blank line.
    Bytes that are not UTF-8 raise TranscriptParseError for the offending line.
    """
    with open(path, "rb") as f:
        raw = f.read()
    try:
        contents = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        line_number = raw.count(b"\n", 0, e.start) + 1
        bad_line = raw.split(b"\n")[line_number - 1].decode("utf-8", errors="replace")
        raise TranscriptParseError(line_number, bad_line, "not valid UTF-8") from None
    yield from parse_transcript(contents.splitlines())
