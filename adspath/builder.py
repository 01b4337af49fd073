"""Builder - reassembles an ADSPath from its three zones."""

from .constants import LDAP_SCHEME
from .scanner import ascii_lower


def build_full_path(prefix: str, dn: str, suffix: str) -> str:
    """Build a complete ADSPath from prefix, distinguished name and suffix.

    Args:
        prefix: Scheme/server part, e.g. "LDAP://server:389" or "LDAP:"
        dn: Distinguished name body, e.g. "cn=User,ou=IT"
        suffix: Domain components, e.g. "dc=example,dc=com"

    Returns:
        Full path like "LDAP://server:389/cn=User,ou=IT,dc=example,dc=com"
    """
    parts = []

    if prefix:
        parts.append(prefix)
        if not dn and not suffix:
            return prefix

        if ascii_lower(prefix) == LDAP_SCHEME:
            parts.append("//")
        elif dn or suffix:
            parts.append("/")

    if dn:
        parts.append(dn)

    if suffix:
        if dn:
            parts.append(",")
        parts.append(suffix)

    return "".join(parts)
