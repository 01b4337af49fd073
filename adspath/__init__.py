"""ADSPath - parsing and navigation of LDAP ADSPath strings."""

# Version is read from package metadata (set in setup.py)
try:
    from importlib.metadata import version, PackageNotFoundError
    try:
        __version__ = version("adspath")
    except PackageNotFoundError:
        # Package not installed (development mode)
        __version__ = "0.0.0-dev"
except ImportError:
    __version__ = "0.0.0-dev"

from .ads_path import ADSPath, get_parent_dn, split_path
from .builder import build_full_path
from .domain import find_cn, from_domain_name, to_domain_name
from .errors import ADSPathError, InvalidArgumentError, MalformedInputError
from .scanner import first_marker_index

__all__ = [
    "ADSPath",
    "split_path",
    "get_parent_dn",
    "build_full_path",
    "find_cn",
    "from_domain_name",
    "to_domain_name",
    "first_marker_index",
    "ADSPathError",
    "InvalidArgumentError",
    "MalformedInputError",
    "__version__",
]
