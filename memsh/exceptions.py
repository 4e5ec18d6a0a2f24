class MemshError(Exception):
    """Base exception for memsh"""
    pass

class FileSystemError(MemshError):
    """Base exception for namespace operations"""
    pass

class FileNotFound(FileSystemError):
    """Raised when a path does not name any entry"""
    pass

class NotADirectory(FileSystemError):
    """Raised when a path descends through a file"""
    pass

class IsADirectory(FileSystemError):
    """Raised when path is a directory but file operation is attempted"""
    pass

class EntryExists(FileSystemError):
    """Raised when a directory already holds a child with the same name"""
    pass

class InvalidName(FileSystemError):
    """Raised when a node name is empty or contains a path separator"""
    pass

class ConfigError(MemshError):
    """Raised when the configuration file or tree layout is invalid"""
    pass

class AuditLogError(MemshError):
    """Raised when the audit log cannot be opened"""
    pass
