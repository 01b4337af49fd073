"""Configuration Service - Handles multi-domain configuration loading."""

import configparser
import logging
import os
from typing import Dict, List, Optional, Tuple

from ..ads_path import ADSPath
from ..builder import build_full_path
from ..constants import LDAPS_PORT
from ..domain import from_domain_name

logger = logging.getLogger(__name__)


class ADConfig:
    """Represents a single directory configuration."""

    def __init__(self, domain: str, server: str, port: Optional[int] = None,
                 base_dn: str = "", use_ssl: bool = False):
        self.domain = domain
        self.server = server
        self.port = port
        self.base_dn = base_dn
        self.use_ssl = use_ssl

    @property
    def prefix(self) -> str:
        """Server part of the root ADSPath, e.g. "LDAP://server:636"."""
        if not self.server:
            return "LDAP:"
        port = self.port or (LDAPS_PORT if self.use_ssl else None)
        if port:
            return f"LDAP://{self.server}:{port}"
        return f"LDAP://{self.server}"

    @property
    def root_path(self) -> ADSPath:
        """ADSPath of the directory root for this configuration."""
        suffix = self.base_dn or from_domain_name(self.domain).path
        return ADSPath(build_full_path(self.prefix, "", suffix))

    def __str__(self) -> str:
        return f"{self.domain} ({self.server})"


class ConfigService:
    """Service for loading and managing directory configurations."""

    def __init__(self, config_file: str = "config.ini"):
        self.config_file = config_file
        self.config = configparser.ConfigParser()
        self.ad_configs: Dict[str, ADConfig] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file."""
        if not os.path.exists(self.config_file):
            raise FileNotFoundError(f"Configuration file '{self.config_file}' not found")

        self.config.read(self.config_file)

        # Try to load multi-domain configuration first
        if self._has_multi_ad_config():
            self._load_multi_ad_config()
        else:
            # Fall back to legacy single domain configuration
            self._load_legacy_config()

        logger.info(f"Loaded {len(self.ad_configs)} domain(s) from {self.config_file}")

    def _has_multi_ad_config(self) -> bool:
        """Check if config file has multi-domain configuration."""
        return 'ad_domains' in self.config and 'domains' in self.config['ad_domains']

    def _read_section(self, domain: str, section: configparser.SectionProxy) -> ADConfig:
        return ADConfig(
            domain=section.get('domain', domain),
            server=section.get('server', ''),
            port=section.getint('port', fallback=None),
            base_dn=section.get('base_dn', ''),
            use_ssl=section.getboolean('use_ssl', fallback=False)
        )

    def _load_multi_ad_config(self) -> None:
        """Load multi-domain configuration."""
        domains_str = self.config['ad_domains']['domains']
        domains = [d.strip() for d in domains_str.split(',') if d.strip()]

        for domain in domains:
            section_name = f'ad_{domain}'
            if section_name in self.config:
                self.ad_configs[domain] = self._read_section(domain, self.config[section_name])
            else:
                logger.warning(f"Domain {domain} listed but section [{section_name}] is missing")

    def _load_legacy_config(self) -> None:
        """Load legacy single domain configuration."""
        if 'ldap' in self.config:
            ldap_config = self.config['ldap']
            domain = ldap_config.get('domain', 'DEFAULT')
            self.ad_configs[domain] = self._read_section(domain, ldap_config)

    def get_available_domains(self) -> List[str]:
        """Get list of available domains."""
        return list(self.ad_configs.keys())

    def get_config(self, domain: str) -> Optional[ADConfig]:
        """Get configuration for specified domain."""
        return self.ad_configs.get(domain)

    def get_default_domain(self) -> Optional[str]:
        """Get the default domain (first in list)."""
        domains = self.get_available_domains()
        return domains[0] if domains else None

    def validate_config(self) -> Tuple[bool, List[str]]:
        """Validate configuration and return any issues."""
        issues = []

        if not self.ad_configs:
            issues.append("No domain configurations found")
            return False, issues

        for name, config in self.ad_configs.items():
            if not config.server:
                issues.append(f"Domain {name}: Missing server")
            if not config.domain and not config.base_dn:
                issues.append(f"Domain {name}: Missing domain or base_dn")

        return len(issues) == 0, issues
