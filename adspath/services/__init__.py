"""Services module for ADSPath."""

from .path_service import PathService
from .config_service import ConfigService, ADConfig

__all__ = ['PathService', 'ConfigService', 'ADConfig']
