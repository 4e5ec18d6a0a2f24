"""
Build namespace trees from nested layout mappings
"""

from typing import Any, Dict, Mapping

from ..exceptions import ConfigError, FileSystemError
from .nodes import Directory, File

HOME_DIRECTORY = '/home/user'

def default_layout() -> Dict[str, Any]:
    """Layout of the stock session: /home/user with three text files"""
    files = {name: f"Содержимое файла {name}" for name in ('text1.txt', 'text2.txt', 'text3.txt')}
    return {'home': {'user': files}}

def build_tree(layout: Mapping[str, Any]) -> Directory:
    """
    Build a tree from a layout and return its root.

    Mapping values become directories and string values become files,
    in the mapping's iteration order.
    """
    root = Directory('')
    _populate(root, layout)
    return root

def build_default_tree() -> Directory:
    return build_tree(default_layout())

def _populate(directory: Directory, layout: Mapping[str, Any]) -> None:
    if not isinstance(layout, Mapping):
        raise ConfigError(f"Layout for {directory.full_path()} must be a mapping, got {type(layout).__name__}")

    for name, value in layout.items():
        if isinstance(value, Mapping):
            node = Directory(str(name))
        elif isinstance(value, str):
            node = File(str(name), value)
        else:
            raise ConfigError(f"Unsupported entry {name!r} in {directory.full_path()}: {type(value).__name__}")

        try:
            directory.add_child(node)
        except FileSystemError as e:
            raise ConfigError(f"Invalid layout: {e}") from e

        if isinstance(node, Directory):
            _populate(node, value)
