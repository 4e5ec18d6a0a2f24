"""memsh shell commands"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from . import clock
from .exceptions import FileSystemError, IsADirectory
from .filesystem import Directory, NodeKind
from .session import Session

FILE_NOT_FOUND = 'File not found.'
IS_A_DIRECTORY = 'Cannot display content of a directory.'
COMMAND_NOT_FOUND = 'Command not found.'

@dataclass(frozen=True)
class CommandResult:
    """Text produced by a command and whether it succeeded"""
    output: str
    ok: bool = True

    @classmethod
    def error(cls, message: str) -> 'CommandResult':
        return cls(message, ok=False)

def read_file(directory: Directory, path: str) -> str:
    """
    Content of the file at path, resolved against directory.

    Raises:
        FileNotFound: nothing exists at path
        NotADirectory: path continues below a file
        IsADirectory: path names a directory
    """
    node = directory.lookup(path)
    if node.kind is NodeKind.DIRECTORY:
        raise IsADirectory(f"{node.full_path()} is a directory")
    if node.kind is NodeKind.FILE:
        return node.content
    raise TypeError(f"Unknown node kind: {node.kind}")

def pwd(session: Session) -> CommandResult:
    return CommandResult(session.current_directory.full_path())

def ls(session: Session) -> CommandResult:
    """Names of the current directory's children, one per line"""
    return CommandResult('\n'.join(session.current_directory.names()))

def cat(session: Session, path: str) -> CommandResult:
    try:
        return CommandResult(read_file(session.current_directory, path))
    except IsADirectory:
        return CommandResult.error(IS_A_DIRECTORY)
    except FileSystemError:
        return CommandResult.error(FILE_NOT_FOUND)

def date(now: Optional[datetime] = None) -> CommandResult:
    return CommandResult(clock.now_display(now))
