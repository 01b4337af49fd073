"""Command line entry point and interactive ADSPath shell."""

import argparse
import logging
import os
import sys
from typing import Callable, List, Optional

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory

from .ads_path import ADSPath
from .commands import CommandHandler
from .constants import COMMAND_ALIASES, PATHS, CommandPrefix, Severity
from .services import ConfigService, PathService

logger = logging.getLogger(__name__)

# Root used when no configured domain applies
LDAP_ROOT = "LDAP:"

SEVERITY_STYLES = {
    Severity.INFORMATION: "{}",
    Severity.WARNING: "<ansiyellow>{}</ansiyellow>",
    Severity.ERROR: "<ansired>{}</ansired>",
}


def _print_message(message: str, severity: Severity) -> None:
    print_formatted_text(HTML(SEVERITY_STYLES[severity]).format(message))


class PathShell:
    """Interactive shell navigating ADSPaths from a root path."""

    def __init__(self, root: ADSPath, printer: Optional[Callable[[str, Severity], None]] = None):
        self.root = root
        self.current = root
        self.path_service = PathService(root)
        self.handler = CommandHandler(self)
        self.printer = printer or _print_message
        self.running = False

    def notify(self, message: str, severity: Severity = Severity.INFORMATION) -> None:
        """Show a message to the user."""
        self.printer(message, severity)

    def exit(self) -> None:
        """Stop the prompt loop."""
        self.running = False

    def run(self) -> None:
        """Read and execute commands until :quit or end of input."""
        completer = WordCompleter([CommandPrefix.COLON.value + alias for alias in COMMAND_ALIASES])
        session = PromptSession(completer=completer, history=InMemoryHistory())
        self.running = True

        while self.running:
            try:
                text = session.prompt(f"{self.current} > ")
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            self.handler.execute(text)


def show_paths(paths: List[str], printer: Optional[Callable[[str, Severity], None]] = None) -> PathShell:
    """Print the prefix, DN and suffix of each path."""
    shell = PathShell(ADSPath(LDAP_ROOT), printer)
    for path in paths:
        shell.current = ADSPath(path)
        shell.handler.execute("show")
    return shell


def load_root(config_file: str, domain: Optional[str] = None) -> ADSPath:
    """Load the root ADSPath for a domain from the configuration file.

    Raises:
        FileNotFoundError: If the configuration file does not exist
        ValueError: If the configuration is invalid or the domain is unknown
    """
    config_service = ConfigService(config_file)

    is_valid, issues = config_service.validate_config()
    if not is_valid:
        raise ValueError("; ".join(issues))

    domain = domain or config_service.get_default_domain()
    ad_config = config_service.get_config(domain)
    if ad_config is None:
        raise ValueError(f"Domain {domain} is not configured")
    return ad_config.root_path


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for application."""
    parser = argparse.ArgumentParser(prog="adspath", description="Parse and navigate LDAP ADSPaths")
    parser.add_argument("paths", nargs="*", help="ADSPaths to split into prefix, DN and suffix")
    parser.add_argument("-c", "--config", help=f"configuration file (default: {PATHS['CONFIG_FILE']})")
    parser.add_argument("-d", "--domain", help="configured domain to start the shell in")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.paths:
        show_paths(args.paths)
        return 0

    config_file = args.config or PATHS['CONFIG_FILE']
    root = ADSPath(LDAP_ROOT)
    if args.config or os.path.exists(config_file):
        try:
            root = load_root(config_file, args.domain)
        except Exception as e:
            print(f"Failed to load configuration: {e}")
            return 1

    logger.info(f"Starting shell at {root}")
    PathShell(root).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
