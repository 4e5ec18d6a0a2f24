"""
In-memory namespace nodes: directories, files and path resolution
"""

from enum import Enum
from typing import Iterator, List, Optional, Tuple

from ..exceptions import (
    FileSystemError, FileNotFound, NotADirectory,
    EntryExists, InvalidName
)

SEPARATOR = '/'

class NodeKind(Enum):
    """Node variants"""
    DIRECTORY = 'directory'
    FILE = 'file'

class Node:
    """Common part of every entry in the namespace tree"""

    kind: NodeKind

    def __init__(self, name: str):
        self.name = name
        # Set by Directory.add_child; only read when walking upwards
        self.parent: Optional['Directory'] = None

    def is_directory(self) -> bool:
        """True for directories, False for files"""
        return self.kind is NodeKind.DIRECTORY

    def ancestors(self) -> Iterator['Directory']:
        """Enclosing directories from the parent up to the root"""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def root(self) -> 'Directory':
        """Walk up the parent chain to the top of the tree"""
        node = self
        for node in self.ancestors():
            pass
        return node

    def full_path(self) -> str:
        """
        Absolute path from the root to this node.

        The root's empty name contributes no segment, so the root maps to
        '/' and its children to '/name'.
        """
        segments = [node.name for node in self.ancestors() if node.name]
        segments.reverse()
        if self.name:
            segments.append(self.name)
        return SEPARATOR + SEPARATOR.join(segments)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_path()!r})"

class File(Node):
    """Terminal node holding immutable text"""

    kind = NodeKind.FILE

    def __init__(self, name: str, content: str = ''):
        super().__init__(name)
        self._content = content

    @property
    def content(self) -> str:
        """Text given at construction"""
        return self._content

class Directory(Node):
    """Node owning an ordered list of children"""

    kind = NodeKind.DIRECTORY

    def __init__(self, name: str = ''):
        super().__init__(name)
        self.children: List[Node] = []

    def add_child(self, node: Node) -> None:
        """Attach node as the last child of this directory"""
        if not node.name or SEPARATOR in node.name:
            raise InvalidName(f"Invalid entry name: {node.name!r}")
        if node.parent is not None:
            raise FileSystemError(f"{node.name} is already attached to {node.parent.full_path()}")
        if node is self or any(node is ancestor for ancestor in self.ancestors()):
            raise FileSystemError(f"Cannot attach {node.name} below itself")
        if self.child(node.name) is not None:
            raise EntryExists(f"{self.full_path()} already contains {node.name}")
        node.parent = self
        self.children.append(node)

    def child(self, name: str) -> Optional[Node]:
        """Direct child with the given name"""
        for node in self.children:
            if node.name == name:
                return node
        return None

    def names(self) -> List[str]:
        """Child names in insertion order"""
        return [node.name for node in self.children]

    def resolve(self, path: str) -> Optional[Node]:
        """Resolve a relative or absolute path, returning None on failure"""
        try:
            return self.lookup(path)
        except FileSystemError:
            return None

    def lookup(self, path: str) -> Node:
        """
        Resolve a path expression against this directory.

        A leading '/' restarts resolution at the root. Segments are matched
        literally against child names in insertion order, so '.' and '..'
        only match children with those names.

        Raises:
            FileNotFound: the path is empty or a segment has no matching child
            NotADirectory: the path continues below a file
        """
        if not path:
            raise FileNotFound("Empty path")

        if path.startswith(SEPARATOR):
            return self.root().lookup(path[1:])

        head, tail = _split_first(path)
        node = self.child(head)
        if node is None:
            raise FileNotFound(f"No such entry: {head} in {self.full_path()}")
        if not tail:
            return node
        if not isinstance(node, Directory):
            raise NotADirectory(f"{node.full_path()} is not a directory")
        return node.lookup(tail)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

def _split_first(path: str) -> Tuple[str, str]:
    """Split a path on its first separator into head and tail"""
    head, _, tail = path.partition(SEPARATOR)
    return head, tail
