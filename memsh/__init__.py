"""
memsh - a single-user shell over an in-memory directory tree

The namespace is built once at start-up and stays read-only for the whole
session. The shell understands pwd, ls, cat, date and exit and records every
command in an append-only CSV audit log.

Example Usage:

    from memsh import Session, ShellConfig, MemShell

    session = Session.from_config(ShellConfig())
    session.current_directory.resolve('text2.txt').content
    MemShell(session).cmdloop()
"""

from .filesystem import Node, NodeKind, Directory, File, build_tree, build_default_tree
from .config import ShellConfig, load_config
from .session import Session
from .audit import AuditLog, AuditRecord, read_records
from .shell import MemShell

__version__ = "1.0.0"

__all__ = [
    'Node',
    'NodeKind',
    'Directory',
    'File',
    'build_tree',
    'build_default_tree',
    'ShellConfig',
    'load_config',
    'Session',
    'AuditLog',
    'AuditRecord',
    'read_records',
    'MemShell',
]
