"""Path Service - Handles conversions between OU paths and ADSPaths."""

import logging

from ..ads_path import ADSPath
from ..constants import Marker
from ..scanner import ascii_lower

logger = logging.getLogger(__name__)


class PathService:
    """Handles conversion between human-readable OU paths and ADSPath values."""

    def __init__(self, root: ADSPath):
        """Initialize path service.

        Args:
            root: ADSPath of the directory root, e.g. "LDAP://server/dc=example,dc=com"
        """
        self.root = root

    def ads_path_to_path(self, ads_path: ADSPath) -> str:
        """Convert an ADSPath to a human-readable path of its OU components.

        Args:
            ads_path: ADSPath like "LDAP://cn=User,ou=IT,ou=Departments,dc=example,dc=com"

        Returns:
            Human path like "Departments/IT"
        """
        ou_parts = []
        current = ads_path

        while current.dn:
            if ascii_lower(current.dn).startswith(Marker.OU.value):
                ou_parts.append(current.short_name())
            parent = current.get_parent()
            if parent.dn == current.dn:
                break
            current = parent

        # Reverse to get top-down path
        ou_parts.reverse()
        return "/".join(ou_parts)

    def path_to_ads_path(self, path: str) -> ADSPath:
        """Convert a human-readable path to an ADSPath under the root.

        Args:
            path: Human path like "Departments/IT" or a full ADSPath

        Returns:
            ADSPath like "LDAP://server/ou=IT,ou=Departments,dc=example,dc=com"

        Examples:
            >>> path_service.path_to_ads_path("Departments/IT").dn
            "ou=IT,ou=Departments"
        """
        # Already an ADSPath or DN
        if "=" in path:
            return ADSPath(path.strip())

        path = path.strip().strip("/")
        if not path:
            return self.root

        # Split by / and reverse to get DN order
        parts = [p.strip() for p in path.split("/") if p.strip()]
        parts.reverse()

        child_part = ",".join(f"{Marker.OU.value}{part}" for part in parts)
        ads_path = self.root.new_child_ads_path(child_part)
        logger.debug(f"Resolved '{path}' to '{ads_path}'")
        return ads_path

    def resolve_path(self, path: str) -> ADSPath:
        """Resolve a path to an ADSPath (alias for path_to_ads_path)."""
        return self.path_to_ads_path(path)

