#!/usr/bin/env python
"""
memsh Command Line Interface

This module provides the command-line entry point for memsh when installed as a pip package.
"""

import os
import sys
import argparse
import logging
from typing import List, Optional

from . import __version__
from .audit import AuditLog
from .config import load_config, dump_config
from .exceptions import MemshError
from .session import Session
from .shell import MemShell

logger = logging.getLogger('memsh.cli')

def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog='memsh',
        description='memsh - single-user shell over an in-memory directory tree',
    )

    parser.add_argument(
        '-c', '--command',
        help='Execute a single command and exit',
        type=str
    )

    parser.add_argument(
        '-f', '--file',
        help='Execute commands from a file',
        type=str
    )

    parser.add_argument(
        '-i', '--interactive',
        help='Start in interactive mode even after executing commands',
        action='store_true'
    )

    parser.add_argument(
        '--config',
        help='YAML configuration file',
        type=str
    )

    parser.add_argument(
        '--audit-log',
        help='CSV file receiving one record per command',
        type=str
    )

    parser.add_argument(
        '--user',
        help='User name shown in the prompt and audit records',
        type=str
    )

    parser.add_argument(
        '--log-file',
        help='Also write diagnostic logs to this file',
        type=str
    )

    parser.add_argument(
        '--print-config',
        help='Print the effective configuration as YAML and exit',
        action='store_true'
    )

    parser.add_argument(
        '-d', '--debug',
        help='Enable debug logging',
        action='store_true'
    )

    parser.add_argument(
        '-v', '--version',
        help='Show version and exit',
        action='store_true'
    )

    return parser.parse_args(args)

def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """Configure diagnostic logging for the process"""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )

def read_script(path: str) -> List[str]:
    """Command lines of a script, without blank lines and comments"""
    with open(path, 'r', encoding='utf-8') as f:
        lines = [line.strip() for line in f]
    return [line for line in lines if line and not line.startswith('#')]

def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the memsh CLI"""
    parsed_args = parse_args(args)
    setup_logging(parsed_args.debug, parsed_args.log_file)

    # Show version and exit if requested
    if parsed_args.version:
        print(f"memsh version {__version__}")
        return 0

    try:
        config = load_config(parsed_args.config).with_overrides(
            audit_log=parsed_args.audit_log,
            user=parsed_args.user,
        )
        if parsed_args.print_config:
            print(dump_config(config), end='')
            return 0
        session = Session.from_config(config)
    except MemshError as e:
        logger.error(f"Failed to start memsh: {e}")
        return 1

    script = None
    if parsed_args.file:
        if not os.path.exists(parsed_args.file):
            print(f"Error: File '{parsed_args.file}' not found", file=sys.stderr)
            return 1
        script = read_script(parsed_args.file)

    try:
        with AuditLog(config.audit_log) as audit:
            shell = MemShell(session, audit=audit, intro=config.intro)

            # Execute a single command if provided
            if parsed_args.command:
                if shell.run_commands([parsed_args.command]):
                    return 0
                if not parsed_args.interactive and not script:
                    return 0

            # Execute commands from a file if provided
            if script:
                if shell.run_commands(script):
                    return 0
                if not parsed_args.interactive:
                    return 0

            # Start interactive shell
            shell.cmdloop()
    except MemshError as e:
        logger.error(f"memsh error: {e}")
        return 1

    return 0

if __name__ == '__main__':
    sys.exit(main())
