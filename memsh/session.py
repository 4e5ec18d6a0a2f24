"""
Session state for one interactive run
"""

import logging
from dataclasses import dataclass

from .config import ShellConfig
from .exceptions import ConfigError
from .filesystem import Directory, build_tree

logger = logging.getLogger('memsh.session')

@dataclass
class Session:
    """Tree root, current directory and user of one shell session"""
    root: Directory
    current_directory: Directory
    user: str = 'user'

    @classmethod
    def from_config(cls, config: ShellConfig) -> 'Session':
        """Build the tree described by config and enter its start directory"""
        root = build_tree(config.tree)

        if config.start_directory == '/':
            start = root
        else:
            start = root.resolve(config.start_directory)
        if not isinstance(start, Directory):
            raise ConfigError(f"Start directory {config.start_directory} is not a directory in the tree")

        logger.debug(f"Session for {config.user} starts in {start.full_path()}")
        return cls(root=root, current_directory=start, user=config.user)

    @property
    def cwd(self) -> str:
        return self.current_directory.full_path()

    @property
    def prompt(self) -> str:
        return f"{self.user}@{self.cwd}# "
