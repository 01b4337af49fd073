"""Constants and enumerations for ADSPath."""

from enum import Enum


class Marker(str, Enum):
    """RDN type tokens recognised inside an ADSPath."""
    CN = "cn="
    OU = "ou="
    O = "o="
    DC = "dc="


# Marker sets are priority ordered: the first one found anywhere wins.
PATH_MARKERS = ("/cn=", "/ou=", "/o=", "/dc=")
BARE_MARKERS = ("cn=", "ou=", "o=")
RDN_MARKERS = (",ou=", ",cn=", ",o=")
SUFFIX_MARKERS = ("/dc=", ",dc=")

# Only this prefix is followed by a double slash when a path is rebuilt
LDAP_SCHEME = "ldap:"

# Port used when a configuration asks for SSL without naming a port
LDAPS_PORT = 636

CHILD_MARKERS = (Marker.OU.value, Marker.O.value)


class CommandPrefix(str, Enum):
    """Command prefixes."""
    COLON = ":"


class Severity(str, Enum):
    """Message severity levels."""
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


# Command aliases mapping
COMMAND_ALIASES = {
    'cd': 'cd',
    'up': 'up',
    '..': 'up',
    'child': 'child',
    'mk': 'child',
    'short': 'short',
    'sn': 'short',
    'cn': 'cn',
    'domain': 'domain',
    'show': 'show',
    'ls': 'show',
    'help': 'help',
    '?': 'help',
    'q': 'quit',
    'quit': 'quit',
    'exit': 'quit',
}


MESSAGES = {
    'INVALID_CHILD': "Invalid child part '{child}'. Child part must start with OU= or O=; a child cannot be addressed with cn=.",
    'NO_NEXT_RDN': "Trying to skip cn=, could not find the next RDN marker in '{dn}'",
    'NO_NAME_START': "Could not locate the start of the name in '{dn}'",
    'INVALID_DN': "Invalid distinguished name '{dn}': {error}",
    'CHILD_REQUIRED': "Child part not specified. Usage: :child ou=<name>",
    'PATH_REQUIRED': "Path not specified. Usage: :cd <ADSPath or OU path>",
    'ALREADY_AT_ROOT': "Already at the top of the path",
    'UNKNOWN_COMMAND': "Unknown command: {command}",
    'NO_CN': "No cn= component in path",
    'NO_DOMAIN': "No domain components in path",
}


PATHS = {
    'CONFIG_FILE': 'config.ini',
}
