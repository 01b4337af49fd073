"""Domain Converter and CN extractor."""

import logging

from ldap3.core.exceptions import LDAPInvalidDnError
from ldap3.utils.dn import parse_dn

from .ads_path import ADSPath
from .constants import MESSAGES, RDN_MARKERS, Marker
from .errors import MalformedInputError
from .scanner import ascii_lower, first_marker_index

logger = logging.getLogger(__name__)


def from_domain_name(domain: str) -> ADSPath:
    """Convert a dotted domain name into an ADSPath of domain components.

    >>> from_domain_name("some.corp.com").path
    'dc=some,dc=corp,dc=com'
    """
    dn = Marker.DC.value + domain.replace(".", "," + Marker.DC.value)
    logger.debug(f"Domain '{domain}' converted to '{dn}'")
    return ADSPath(dn)


def to_domain_name(dn: str) -> str:
    """Convert the domain components of a distinguished name into a domain name.

    >>> to_domain_name("DC=some,DC=corp,DC=com")
    'some.corp.com'

    Raises:
        MalformedInputError: If dn cannot be parsed as a distinguished name
    """
    if not dn:
        return ""

    try:
        rdns = parse_dn(dn, strip=True)
    except LDAPInvalidDnError as e:
        raise MalformedInputError(MESSAGES['INVALID_DN'].format(dn=dn, error=e)) from e

    return ".".join(value for attr, value, _ in rdns if attr.lower() == "dc")


def find_cn(path: str) -> str:
    """Return the value of the cn= RDN in a raw path string.

    Looks for cn= at the very start, then for the first /cn=. The value runs
    up to the next RDN boundary or the end of the string.

    >>> find_cn("LDAP://server/cn=mary smith,OU=people,dc=some,dc=local")
    'mary smith'
    """
    path_lower = ascii_lower(path)
    if path_lower.startswith(Marker.CN.value):
        start = len(Marker.CN.value)
    else:
        slash_cn = path_lower.find("/" + Marker.CN.value)
        if slash_cn == -1:
            return ""
        start = slash_cn + len(Marker.CN.value) + 1

    end = first_marker_index(path, RDN_MARKERS, start + 1)
    if end == -1:
        end = len(path)
    return path[start:end]
