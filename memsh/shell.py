"""
memsh Shell
Interactive command loop over a session's in-memory namespace
"""

import cmd
import io
import logging
from typing import Iterable, Optional

from rich.console import Console

from . import commands
from .audit import AuditLog
from .commands import CommandResult
from .session import Session

logger = logging.getLogger('memsh.shell')

class MemShell(cmd.Cmd):
    """Read-eval-print loop with one audit record per command"""

    intro = None

    ARGUMENT_COMMANDS = ('cat',)

    def __init__(self, session: Session, audit: Optional[AuditLog] = None,
                 console: Optional[Console] = None, err_console: Optional[Console] = None,
                 intro: Optional[str] = None):
        super().__init__()
        self.session = session
        self.audit = audit
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        if intro is not None:
            self.intro = intro
        self.prompt = session.prompt

    # Loop plumbing

    def cmdloop(self, intro=None):
        """Run until exit or end of input, surviving Ctrl-C and command errors"""
        self.preloop()
        if intro is not None:
            self.intro = intro
        if self.intro:
            self._print(self.intro)

        stop = None
        while not stop:
            try:
                if self.cmdqueue:
                    line = self.cmdqueue.pop(0)
                else:
                    line = input(self.prompt)
            except EOFError:
                line = 'EOF'
            except KeyboardInterrupt:
                self._print('^C')
                continue

            try:
                line = self.precmd(line)
                stop = self.onecmd(line)
                stop = self.postcmd(stop, line)
            except Exception as e:
                logger.error(f"Error processing command: {e}", exc_info=True)
                self.err_console.print(f"Error: {e}", style='red', markup=False, highlight=False)
        self.postloop()

    def run_commands(self, lines: Iterable[str]) -> bool:
        """Execute lines non-interactively; True if one of them ended the session"""
        for line in lines:
            line = self.precmd(line)
            stop = self.postcmd(self.onecmd(line), line)
            if stop:
                return True
        return False

    def parseline(self, line):
        """
        Split a line into command and argument.

        The command word must start the line and be followed by a space or
        the end of the line; commands listed in ARGUMENT_COMMANDS also need
        the space. Anything else is returned without a command so that it
        reaches default().
        """
        if not line.strip():
            return None, None, ''
        command, arg, stripped = super().parseline(line)
        if command and line.startswith(command):
            rest = line[len(command):]
            if rest[:1] not in ('', ' ') or (command in self.ARGUMENT_COMMANDS and not rest):
                return None, None, line
        elif line[:1].isspace():
            return None, None, line
        return command, arg, stripped

    def postcmd(self, stop, line):
        self.prompt = self.session.prompt
        return stop

    def emptyline(self):
        """Do nothing on empty line"""
        return False

    def default(self, line):
        """Handle unknown commands"""
        logger.debug(f"Unknown command: {line}")
        self._finish(f"unknown command: {line}", CommandResult.error(commands.COMMAND_NOT_FOUND))

    # Commands

    def do_pwd(self, arg):
        """Print the current directory"""
        if arg:
            return self.default(self.lastcmd)
        self._finish('pwd', commands.pwd(self.session))

    def do_ls(self, arg):
        """List the current directory"""
        if arg:
            return self.default(self.lastcmd)
        self._finish('ls', commands.ls(self.session))

    def do_cat(self, arg):
        """Show file contents
        Usage: cat <path>"""
        self._finish(self.lastcmd, commands.cat(self.session, arg))

    def do_date(self, arg):
        """Show the current date and time"""
        if arg:
            return self.default(self.lastcmd)
        self._finish('date', commands.date())

    def do_exit(self, arg):
        """Leave the shell"""
        if arg:
            return self.default(self.lastcmd)
        self._record('exit')
        return True

    def do_EOF(self, arg):
        """Leave the shell on end of input"""
        self._print('')
        self._record('exit')
        return True

    def do_help(self, arg):
        """Show help for commands"""
        buffer = io.StringIO()
        self.stdout, saved = buffer, self.stdout
        try:
            super().do_help(arg)
        finally:
            self.stdout = saved
        action = f"help {arg}" if arg else 'help'
        self._finish(action, CommandResult(buffer.getvalue().rstrip('\n')))

    # Output and audit

    def _finish(self, action: str, result: CommandResult) -> None:
        if result.output:
            if result.ok:
                self._print(result.output)
            else:
                self.err_console.print(result.output, style='red', markup=False, highlight=False,
                                       emoji=False, soft_wrap=True)
        self._record(action, result.output)

    def _record(self, action: str, output: str = '') -> None:
        logger.debug(f"{self.session.user}: {action}")
        if self.audit is not None:
            self.audit.record(self.session.user, action, output)

    def _print(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
