# --- navigator.py ---

import logging
from typing import Optional

from models import FileNode, FileTree, NodeKind

logger = logging.getLogger(__name__)


class TreeError(Exception):
    """Base class for navigation errors raised by Navigator."""


class NoRootError(TreeError):
    def __init__(self):
        super().__init__("Navigator has no root directory")


class NoParentError(TreeError):
    def __init__(self):
        super().__init__("Cannot go up from the root directory")


class DirectoryNotFoundError(TreeError):
    def __init__(self, name: str, current_path: str):
        self.name = name
        self.current_path = current_path
        super().__init__(f"No directory named '{name}' in {current_path}")


class Navigator:
    """
    Keeps a "current directory" cursor into a FileTree and applies
    cd-style moves and insertions at that cursor.

    Failed moves leave the cursor where it was.
    """

    def __init__(self, tree: Optional[FileTree] = None):
        self.tree = tree
        self._current_index: Optional[int] = tree.root.index if tree is not None else None

    def _require_tree(self) -> FileTree:
        if self.tree is None or self._current_index is None:
            raise NoRootError()
        return self.tree

    @property
    def current(self) -> FileNode:
        tree = self._require_tree()
        return tree.node(self._current_index)

    @property
    def current_path(self) -> str:
        return self._require_tree().path_of(self.current)

    def go_to_root(self):
        tree = self._require_tree()
        self._current_index = tree.root.index
        logger.debug("cd / -> %s", tree.root.name)

    def go_up(self):
        tree = self._require_tree()
        parent = tree.parent_of(self.current)
        if parent is None:
            raise NoParentError()
        self._current_index = parent.index
        logger.debug("cd .. -> %s", tree.path_of(parent))

    def go_into(self, name: str):
        tree = self._require_tree()
        current = self.current
        for child in tree.children_of(current):
            if child.is_dir and child.name == name:
                self._current_index = child.index
                logger.debug("cd %s -> %s", name, tree.path_of(child))
                return
        raise DirectoryNotFoundError(name, tree.path_of(current))

    def insert(self, name: str, kind: NodeKind, size: int = 0):
        """
        Creates a new entry under the current directory.

        Directories always start at size 0 and grow as entries are inserted
        beneath them. Duplicate names are not rejected.
        """
        tree = self._require_tree()
        if kind is NodeKind.DIRECTORY and size != 0:
            raise ValueError(f"Directory '{name}' must be created with size 0, got {size}")
        if size < 0:
            raise ValueError(f"File '{name}' has a negative size: {size}")

        node = FileNode(index=-1, name=name, kind=kind, size_bytes=size)
        tree.attach_child(self._current_index, node)
        logger.debug("Inserted %s %s (%d bytes) under %s",
                     kind.value, name, size, self.current_path)
