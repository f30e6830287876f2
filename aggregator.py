# --- aggregator.py ---

from typing import Iterable, List, Optional

from models import FileNode, FileTree

# --- Default Query Settings ---
# (Overridable from the command line, see cli.py)

SMALL_DIRECTORY_THRESHOLD = 100_000
TOTAL_DISK_CAPACITY = 70_000_000
REQUIRED_FREE_SPACE = 30_000_000

# --- Aggregate Queries ---

def sum_small_directories(tree: FileTree, threshold: int = SMALL_DIRECTORY_THRESHOLD) -> int:
    """
    Sums the sizes of every directory (root included) whose cumulative
    size is at most `threshold`. Nested qualifying directories are counted
    once for themselves and again inside each qualifying ancestor.
    """
    return sum(
        node.size_bytes for node in tree.walk()
        if node.is_dir and node.size_bytes <= threshold
    )


def collect_directory_sizes(tree: FileTree) -> List[int]:
    """
    Lists the size of every directory in pre-order. Duplicates are kept,
    since distinct directories may share a size.
    """
    return [node.size_bytes for node in tree.walk() if node.is_dir]


def smallest_directory_to_free_space(
    sizes: Iterable[int],
    total_disk_capacity: int = TOTAL_DISK_CAPACITY,
    required_free_space: int = REQUIRED_FREE_SPACE,
    used_space: Optional[int] = None,
) -> Optional[int]:
    """
    Finds the smallest directory size that frees enough space to reach
    `required_free_space`.

    `used_space` defaults to the largest size, which is the root's.
    Returns 0 when enough space is already free and None when no
    directory is large enough.
    """
    sizes = list(sizes)
    if used_space is None:
        used_space = max(sizes, default=0)

    deficit = required_free_space - (total_disk_capacity - used_space)
    if deficit <= 0:
        return 0

    candidates = [size for size in sizes if size >= deficit]
    if not candidates:
        return None
    return min(candidates)

# --- Node Queries (for presentation) ---

def get_small_directories(tree: FileTree, threshold: int = SMALL_DIRECTORY_THRESHOLD) -> List[FileNode]:
    """
    Returns the directories counted by sum_small_directories.
    Sorts the result from largest to smallest.
    """
    small_dirs = [
        node for node in tree.walk()
        if node.is_dir and node.size_bytes <= threshold
    ]
    small_dirs.sort(key=lambda x: x.size_bytes, reverse=True)
    return small_dirs


def find_directory_to_delete(
    tree: FileTree,
    total_disk_capacity: int = TOTAL_DISK_CAPACITY,
    required_free_space: int = REQUIRED_FREE_SPACE,
) -> Optional[FileNode]:
    """
    Returns the node behind smallest_directory_to_free_space, or None when
    nothing has to be deleted or nothing is large enough.
    On ties the directory visited first in pre-order wins.
    """
    target = smallest_directory_to_free_space(
        collect_directory_sizes(tree),
        total_disk_capacity,
        required_free_space,
        used_space=tree.root.size_bytes,
    )
    if not target:
        return None
    for node in tree.walk():
        if node.is_dir and node.size_bytes == target:
            return node
    return None
