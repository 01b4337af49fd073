"""ADSPath - parsed representation of an LDAP ADSPath string."""

import logging
from dataclasses import dataclass, field
from typing import Tuple

from .builder import build_full_path
from .constants import (
    BARE_MARKERS,
    CHILD_MARKERS,
    MESSAGES,
    PATH_MARKERS,
    RDN_MARKERS,
    SUFFIX_MARKERS,
    Marker,
)
from .errors import InvalidArgumentError, MalformedInputError
from .scanner import ascii_lower, first_marker_index

logger = logging.getLogger(__name__)


def _get_prefix(path: str, path_lower: str) -> Tuple[str, int]:
    """Return the prefix and the position where the DN starts."""
    end = first_marker_index(path_lower, PATH_MARKERS)
    if end != -1:
        # Skip the leading slash
        return path[:end].rstrip("/"), end + 1

    # Only domain components, no server part
    if path_lower.startswith(Marker.DC.value):
        return "", 0

    # Maybe an ADSPath without a server component
    start = first_marker_index(path_lower, BARE_MARKERS)
    if start == -1:
        return path, len(path)
    return "", start


def _get_suffix(path: str, path_lower: str) -> Tuple[str, int]:
    """Return the suffix and the position where the DN ends."""
    if path_lower.startswith(Marker.DC.value):
        return path, 0

    start = first_marker_index(path_lower, SUFFIX_MARKERS)
    if start == -1:
        return "", len(path)

    # Skip the separator
    return path[start + 1:], start


def split_path(path: str) -> Tuple[str, str, str]:
    """Split an ADSPath into prefix, distinguished name and suffix.

    Markers are matched case-insensitively; the returned parts keep the
    casing of ``path``.

    Examples:
        >>> split_path("LDAP://server:65000/OU=people,dc=some,dc=local")
        ('LDAP://server:65000', 'OU=people', 'dc=some,dc=local')
    """
    path_lower = ascii_lower(path)
    prefix, dn_start = _get_prefix(path, path_lower)
    suffix, dn_end = _get_suffix(path, path_lower)
    dn = path[dn_start:dn_end] if dn_end > dn_start else ""
    return prefix, dn, suffix


def get_parent_dn(dn: str) -> str:
    """Drop the leftmost RDN of a distinguished name.

    Returns "" when the DN has a single RDN or none.

    Examples:
        >>> get_parent_dn("cn=User,ou=IT,dc=example,dc=com")
        'ou=IT,dc=example,dc=com'
    """
    start = first_marker_index(dn, RDN_MARKERS)
    if start == -1:
        return ""
    # Skip comma
    return dn[start + 1:]


@dataclass(frozen=True)
class ADSPath:
    """Represents an Active Directory LDAP ADSPath.

    The path is split once, at construction, into:

    * ``prefix`` - everything before the first RDN, e.g. ``LDAP://server``
    * ``dn`` - the distinguished name body, e.g. ``cn=User,ou=IT``
    * ``suffix`` - the trailing domain components, e.g. ``dc=example,dc=com``

    Values never change; parent and child operations return new values.
    """
    path: str
    prefix: str = field(init=False)
    dn: str = field(init=False)
    suffix: str = field(init=False)

    def __post_init__(self):
        prefix, dn, suffix = split_path(self.path)
        object.__setattr__(self, "prefix", prefix)
        object.__setattr__(self, "dn", dn)
        object.__setattr__(self, "suffix", suffix)
        logger.debug(f"Parsed ADSPath '{self.path}': prefix='{prefix}' dn='{dn}' suffix='{suffix}'")

    def __str__(self) -> str:
        return self.path

    def build_full_path(self) -> str:
        """Build the complete path from this value's own parts."""
        return build_full_path(self.prefix, self.dn, self.suffix)

    def get_parent_dn(self) -> str:
        """Get the parent distinguished name (the DN without its leftmost RDN).

        Returns:
            Parent DN, or an empty string when the DN has a single RDN or none

        Examples:
            >>> ADSPath("cn=User,ou=IT,dc=example,dc=com").get_parent_dn()
            "ou=IT"
        """
        return get_parent_dn(self.dn)

    def get_parent(self) -> "ADSPath":
        """Get the ADSPath of the parent object, keeping prefix and suffix."""
        parent = ADSPath(build_full_path(self.prefix, self.get_parent_dn(), self.suffix))
        logger.debug(f"Parent of '{self.path}' is '{parent.path}'")
        return parent

    def short_name(self) -> str:
        """Get the name portion of the leftmost RDN, skipping a leading cn=.

        For ``OU=Tampa,OU=Florida,dc=some,dc=local`` this is ``Tampa``.

        Raises:
            MalformedInputError: If the DN does not follow the RDN grammar
        """
        if not self.dn:
            return ""

        start = 0
        if ascii_lower(self.dn).startswith(Marker.CN.value):
            boundary = first_marker_index(self.dn, RDN_MARKERS)
            if boundary == -1:
                raise MalformedInputError(MESSAGES['NO_NEXT_RDN'].format(dn=self.dn))
            start = boundary + 1

        equals = self.dn.find("=", start)
        if equals == -1:
            raise MalformedInputError(MESSAGES['NO_NAME_START'].format(dn=self.dn))

        end = first_marker_index(self.dn, RDN_MARKERS, equals)
        if end == -1:
            return self.dn[equals + 1:]
        return self.dn[equals + 1:end]

    def new_child_ads_path(self, child_part: str) -> "ADSPath":
        """Build the ADSPath of a child container of this object.

        A leading cn= of the current DN is dropped when an ou= follows it.

        Args:
            child_part: Child container like "OU=child" or "OU=grandchild,OU=child"

        Returns:
            New ADSPath, e.g. "LDAP://ou=New Jersey,ou=office,dc=some,dc=local"
            for "ou=New Jersey" under "LDAP://ou=office,dc=some,dc=local"

        Raises:
            InvalidArgumentError: If child_part does not start with ou= or o=
        """
        if not ascii_lower(child_part).startswith(CHILD_MARKERS):
            raise InvalidArgumentError(MESSAGES['INVALID_CHILD'].format(child=child_part))

        if child_part.endswith(","):
            child_part = child_part[:-1]

        attach_dn = self.dn
        dn_lower = ascii_lower(self.dn)
        if dn_lower.startswith(Marker.CN.value):
            # TODO: also strip cn= when only o= or dc= follows it
            start = dn_lower.find("," + Marker.OU.value)
            if start > 0:
                attach_dn = self.dn[start:]

        if not attach_dn:
            child_dn = child_part
        elif attach_dn.startswith(","):
            child_dn = child_part + attach_dn
        else:
            child_dn = child_part + "," + attach_dn

        child = ADSPath(build_full_path(self.prefix, child_dn, self.suffix))
        logger.debug(f"Child '{child_part}' of '{self.path}' is '{child.path}'")
        return child

    def domain_name(self) -> str:
        """Get the dotted domain name of the suffix, e.g. "example.com"."""
        from .domain import to_domain_name
        return to_domain_name(self.suffix)

    @staticmethod
    def find_cn(path: str) -> str:
        """Get the value of the cn= RDN of a raw path string ("" when absent)."""
        from .domain import find_cn
        return find_cn(path)

    @staticmethod
    def from_domain_name(domain: str) -> "ADSPath":
        """Build an ADSPath of domain components from a name like "example.com"."""
        from .domain import from_domain_name
        return from_domain_name(domain)
