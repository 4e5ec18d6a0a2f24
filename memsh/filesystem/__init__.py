"""
Namespace module initialization
"""
from ..exceptions import (
    FileSystemError, FileNotFound, NotADirectory,
    IsADirectory, EntryExists, InvalidName
)
from .nodes import Node, NodeKind, Directory, File, SEPARATOR
from .builder import build_tree, build_default_tree, default_layout, HOME_DIRECTORY

__all__ = [
    'Node', 'NodeKind', 'Directory', 'File', 'SEPARATOR',
    'build_tree', 'build_default_tree', 'default_layout', 'HOME_DIRECTORY',
    'FileSystemError', 'FileNotFound', 'NotADirectory',
    'IsADirectory', 'EntryExists', 'InvalidName',
]
