"""Command handler for parsing and executing shell commands."""

import logging
from typing import TYPE_CHECKING, Callable, Dict

from ..constants import COMMAND_ALIASES, MESSAGES, CommandPrefix, Severity
from ..domain import find_cn
from ..errors import ADSPathError

if TYPE_CHECKING:
    from ..cli import PathShell

logger = logging.getLogger(__name__)


class CommandHandler:
    """Handles command parsing and execution."""

    def __init__(self, shell: 'PathShell'):
        """Initialize command handler.

        Args:
            shell: The interactive shell holding the current ADSPath
        """
        self.shell = shell
        self.commands = self._build_command_registry()

    def _build_command_registry(self) -> Dict[str, Callable[[str], None]]:
        """Build the command registry mapping command names to handlers."""
        return {
            'cd': self._handle_cd,
            'up': self._handle_up,
            'child': self._handle_child,
            'short': self._handle_short,
            'cn': self._handle_cn,
            'domain': self._handle_domain,
            'show': self._handle_show,
            'help': self._handle_help,
            'quit': self._handle_quit,
        }

    def execute(self, command_str: str) -> None:
        """Parse and execute a command.

        Args:
            command_str: The command string from user input
        """
        command_str = command_str.strip()
        if not command_str:
            return

        # Remove colon prefix if present
        if command_str.startswith(CommandPrefix.COLON.value):
            command_str = command_str[1:]

        # Split into command and arguments (preserve spaces in args)
        parts = command_str.split(maxsplit=1)
        if not parts:
            return

        command = COMMAND_ALIASES.get(parts[0].lower(), parts[0].lower())
        args = parts[1].strip() if len(parts) > 1 else ''

        handler = self.commands.get(command)
        if not handler:
            self.shell.notify(MESSAGES['UNKNOWN_COMMAND'].format(command=command), Severity.WARNING)
            return

        logger.info(f"Executing command '{command}' with args '{args}'")
        try:
            handler(args)
        except ADSPathError as e:
            self.shell.notify(str(e), Severity.ERROR)

    def _handle_cd(self, args: str) -> None:
        """Handle cd command."""
        if not args:
            self.shell.notify(MESSAGES['PATH_REQUIRED'], Severity.WARNING)
            return
        self.shell.current = self.shell.path_service.resolve_path(args)
        self._handle_show('')

    def _handle_up(self, args: str) -> None:
        """Handle up command."""
        parent = self.shell.current.get_parent()
        if parent.path == self.shell.current.path:
            self.shell.notify(MESSAGES['ALREADY_AT_ROOT'], Severity.WARNING)
            return
        self.shell.current = parent
        self._handle_show('')

    def _handle_child(self, args: str) -> None:
        """Handle child command."""
        if not args:
            self.shell.notify(MESSAGES['CHILD_REQUIRED'], Severity.WARNING)
            return
        self.shell.current = self.shell.current.new_child_ads_path(args)
        self._handle_show('')

    def _handle_short(self, args: str) -> None:
        """Handle short name command."""
        self.shell.notify(self.shell.current.short_name())

    def _handle_cn(self, args: str) -> None:
        """Handle cn command."""
        cn = find_cn(args or self.shell.current.path)
        self.shell.notify(cn or MESSAGES['NO_CN'])

    def _handle_domain(self, args: str) -> None:
        """Handle domain command."""
        domain = self.shell.current.domain_name()
        self.shell.notify(domain or MESSAGES['NO_DOMAIN'])

    def _handle_show(self, args: str) -> None:
        """Handle show command."""
        current = self.shell.current
        self.shell.notify(f"path:   {current.path}")
        self.shell.notify(f"prefix: {current.prefix}")
        self.shell.notify(f"dn:     {current.dn}")
        self.shell.notify(f"suffix: {current.suffix}")
        self.shell.notify(f"ou:     {self.shell.path_service.ads_path_to_path(current)}")

    def _handle_help(self, args: str) -> None:
        """Handle help command."""
        help_text = """Commands:
  :cd <path>        Go to an ADSPath, DN or OU path (Departments/IT)
  :up, :..          Go to the parent
  :child <ou=name>  Go to a child container
  :short, :sn       Show the short name
  :cn [path]        Show the cn= value
  :domain           Show the domain name of the suffix
  :show, :ls        Show the parts of the current path
  :quit, :q         Leave the shell"""
        self.shell.notify(help_text)

    def _handle_quit(self, args: str) -> None:
        """Handle quit command."""
        self.shell.exit()
