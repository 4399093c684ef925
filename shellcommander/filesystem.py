#!/usr/bin/env python3
"""
Folder Tree - In-memory directory hierarchy backing the shell
"""

import logging
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)

# Default layout, in display order
ROOT_FOLDERS = [
    'bin', 'sbin', 'etc', 'dev', 'proc', 'var', 'tmp', 'usr', 'home',
    'boot', 'lib', 'opt', 'mnt', 'media', 'srv'
]
HOME_USER = 'user'
USER_FOLDERS = ['.config', '.local', 'Documents', 'Pictures', 'Videos']


class FolderNode:
    """Represents one directory in the folder tree"""

    def __init__(self, index: int, name: str, full_path: str,
                 parent: Optional[int] = None):
        self.index = index
        self.name = name
        self.full_path = full_path
        self.parent = parent
        self.children: List[int] = []

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __repr__(self) -> str:
        return f"FolderNode({self.full_path!r})"


class FolderTree:
    """Owns every folder node and resolves paths against them.

    Nodes live in a flat list; parent and child links are list indices,
    so a node never holds a reference to another node.
    """

    def __init__(self, populate: bool = True):
        self.nodes: List[FolderNode] = [FolderNode(0, '', '/')]
        if populate:
            self._init_skeleton()

    def _init_skeleton(self):
        """Create the default directory layout"""
        for name in ROOT_FOLDERS:
            folder = self.add_folder(self.root, name)
            if name == 'home':
                user = self.add_folder(folder, HOME_USER)
                for child in USER_FOLDERS:
                    self.add_folder(user, child)

    @property
    def root(self) -> FolderNode:
        return self.nodes[0]

    def parent_of(self, node: FolderNode) -> Optional[FolderNode]:
        """Get a node's parent, None for root"""
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def children_of(self, node: FolderNode) -> Iterator[FolderNode]:
        """Iterate over a node's children in insertion order"""
        for index in node.children:
            yield self.nodes[index]

    def add_folder(self, parent: FolderNode, name: str) -> FolderNode:
        """Append a new folder under parent and return it.

        Names are not validated and duplicates are allowed.
        """
        prefix = '' if parent.is_root else parent.full_path
        node = FolderNode(
            index=len(self.nodes),
            name=name,
            full_path=f"{prefix}/{name}",
            parent=parent.index
        )
        self.nodes.append(node)
        parent.children.append(node.index)
        logger.debug(f"Created folder {node.full_path}")
        return node

    def get_child_by_name(self, node: FolderNode, name: str) -> Optional[FolderNode]:
        """Get the first child with an exact name match"""
        for child in self.children_of(node):
            if child.name == name:
                return child
        return None

    def resolve(self, path: str) -> Optional[FolderNode]:
        """Resolve an absolute path to a node, None if any segment is missing"""
        if not path.startswith('/'):
            return None
        if path == '/':
            return self.root
        return self.walk(self.root, path.split('/')[1:])

    def walk(self, start: FolderNode, segments: List[str]) -> Optional[FolderNode]:
        """Follow child names from start, None on the first missing one"""
        node = start
        for segment in segments:
            logger.debug(f"Attempting to find {segment!r} under {node.full_path}")
            node = self.get_child_by_name(node, segment)
            if node is None:
                return None
        return node
