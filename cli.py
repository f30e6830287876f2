# --- cli.py ---

"""
Command-line entry point.

Replays a transcript and prints the two directory-size answers:
the sum of small directories and the smallest directory whose deletion
frees enough space.
"""

import argparse
import logging
import sys
from typing import List, Optional

import aggregator
import utils
from navigator import TreeError
from replay import replay_transcript
from transcript import TranscriptParseError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dirsize",
        description="Rebuild a directory tree from a cd/ls transcript and report directory sizes.",
    )
    p.add_argument("transcript", help="Path to the transcript file.")

    # --- Query Settings ---
    p.add_argument(
        "--threshold",
        type=int,
        default=aggregator.SMALL_DIRECTORY_THRESHOLD,
        help="Largest size counted as a small directory (default: %(default)s).",
    )
    p.add_argument(
        "--capacity",
        type=int,
        default=aggregator.TOTAL_DISK_CAPACITY,
        help="Total disk capacity in bytes (default: %(default)s).",
    )
    p.add_argument(
        "--required",
        type=int,
        default=aggregator.REQUIRED_FREE_SPACE,
        help="Free space needed in bytes (default: %(default)s).",
    )

    # --- Output ---
    p.add_argument(
        "--human",
        action="store_true",
        help="Print sizes in KB/MB/GB instead of raw bytes.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return p


def run(args: argparse.Namespace, out=None) -> int:
    if out is None:
        out = sys.stdout
    try:
        result = replay_transcript(args.transcript)
    except (TreeError, TranscriptParseError, OSError) as e:
        logger.debug("Replay failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    tree = result.tree
    small_total = aggregator.sum_small_directories(tree, args.threshold)
    target = aggregator.smallest_directory_to_free_space(
        aggregator.collect_directory_sizes(tree),
        args.capacity,
        args.required,
        used_space=tree.root.size_bytes,
    )

    used_percent = utils.calculate_percentage(tree.root.size_bytes, args.capacity)
    print(f"Total used: {utils.format_size(tree.root.size_bytes, args.human)} "
          f"({used_percent:.2f}% of disk)", file=out)
    print(f"Sum of small directories: {utils.format_size(small_total, args.human)}", file=out)

    if target is None:
        print("Smallest directory to delete: none is large enough", file=out)
    elif target == 0:
        print("Smallest directory to delete: 0 (enough space is already free)", file=out)
    else:
        node = aggregator.find_directory_to_delete(tree, args.capacity, args.required)
        where = f" ({tree.path_of(node)})" if node is not None else ""
        print(f"Smallest directory to delete: {utils.format_size(target, args.human)}{where}", file=out)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
