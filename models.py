# --- models.py ---

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

ROOT_NAME = "/"


class NodeKind(Enum):
    DIRECTORY = "dir"
    FILE = "file"


@dataclass
class FileNode:
    """
    Represents a single file or directory rebuilt from a transcript.
    This is a pure data class; links to other nodes are arena indices
    resolved through the owning FileTree.
    """
    index: int
    name: str
    kind: NodeKind

    # For files: fixed at creation. For directories: sum of all descendants.
    size_bytes: int = 0

    # Tree structure (indices into FileTree.nodes)
    parent_index: Optional[int] = None
    child_indices: List[int] = field(default_factory=list)

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_root(self) -> bool:
        return self.parent_index is None


class FileTree:
    """
    Owns every node of one reconstructed filesystem.

    Nodes live in a flat list and refer to each other by index, so the
    parent link is a plain lookup key rather than a second owner.
    The root directory is created together with the tree.
    """

    def __init__(self, root_name: str = ROOT_NAME):
        self.nodes: List[FileNode] = [
            FileNode(index=0, name=root_name, kind=NodeKind.DIRECTORY)
        ]

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def root(self) -> FileNode:
        return self.nodes[0]

    def node(self, index: int) -> FileNode:
        if index < 0:
            raise IndexError(f"Invalid node index: {index}")
        return self.nodes[index]

    def parent_of(self, node: FileNode) -> Optional[FileNode]:
        if node.parent_index is None:
            return None
        return self.nodes[node.parent_index]

    def children_of(self, node: FileNode) -> List[FileNode]:
        """Returns the children in insertion order (an empty list for files)."""
        return [self.nodes[i] for i in node.child_indices]

    def attach_child(self, parent_index: int, child: FileNode) -> FileNode:
        """
        Stores `child` in the arena under `parent_index` and adds its size to
        the parent and to every ancestor up to the root.
        """
        parent = self.node(parent_index)
        if not parent.is_dir:
            raise ValueError(f"Cannot attach '{child.name}' to file '{parent.name}'")

        child.index = len(self.nodes)
        child.parent_index = parent.index
        self.nodes.append(child)
        parent.child_indices.append(child.index)

        delta = child.size_bytes
        ancestor: Optional[FileNode] = parent
        while ancestor is not None:
            ancestor.size_bytes += delta
            ancestor = self.parent_of(ancestor)
        return child

    def path_of(self, node: FileNode) -> str:
        if node.is_root:
            return ROOT_NAME
        names = []
        current: Optional[FileNode] = node
        while current is not None and not current.is_root:
            names.append(current.name)
            current = self.parent_of(current)
        return ROOT_NAME + "/".join(reversed(names))

    def walk(self, node: Optional[FileNode] = None) -> Iterator[FileNode]:
        """Pre-order traversal starting at `node` (the root by default)."""
        stack = [node if node is not None else self.root]
        while stack:
            current = stack.pop()
            yield current
            # Reversed so children come out in insertion order
            stack.extend(self.nodes[i] for i in reversed(current.child_indices))

    def iter_nodes(self) -> Iterator[FileNode]:
        return iter(self.nodes)

    def directories(self) -> List[FileNode]:
        return [n for n in self.nodes if n.is_dir]

    def files(self) -> List[FileNode]:
        return [n for n in self.nodes if not n.is_dir]


@dataclass
class ReplayResult:
    """
    Holds the complete result of replaying a transcript.
    """
    tree: FileTree

    # Summary statistics
    total_size_bytes: int = 0
    total_files_count: int = 0
    total_dirs_count: int = 0

    # Listing lines seen outside of an `ls` block (line numbers when known)
    skipped_entries: List[int] = field(default_factory=list)
