#!/usr/bin/env python3

"""Tests for configuration loading and root path construction."""

import pytest

from adspath.services import ADConfig, ConfigService

LEGACY_CONFIG = """
[ldap]
server = dc01.example.com
domain = example.com
"""

MULTI_CONFIG = """
[ad_domains]
domains = corp, lab, missing

[ad_corp]
server = dc01.corp.example.com
domain = corp.example.com
port = 636
use_ssl = true

[ad_lab]
server = lab-dc.example.com
base_dn = ou=Lab,dc=example,dc=com
"""


def write_config(tmp_path, content):
    config_file = tmp_path / "config.ini"
    config_file.write_text(content)
    return str(config_file)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigService(str(tmp_path / "nope.ini"))


def test_legacy_config(tmp_path):
    service = ConfigService(write_config(tmp_path, LEGACY_CONFIG))

    assert service.get_available_domains() == ["example.com"]
    assert service.validate_config() == (True, [])

    root = service.get_config(service.get_default_domain()).root_path
    assert root.path == "LDAP://dc01.example.com/dc=example,dc=com"
    assert root.prefix == "LDAP://dc01.example.com"
    assert root.dn == ""
    assert root.suffix == "dc=example,dc=com"


def test_multi_domain_config(tmp_path):
    service = ConfigService(write_config(tmp_path, MULTI_CONFIG))

    assert service.get_available_domains() == ["corp", "lab"]

    corp = service.get_config("corp")
    assert corp.port == 636
    assert corp.use_ssl
    assert corp.root_path.path == "LDAP://dc01.corp.example.com:636/dc=corp,dc=example,dc=com"

    lab = service.get_config("lab")
    assert lab.root_path.dn == "ou=Lab"
    assert lab.root_path.suffix == "dc=example,dc=com"
    assert lab.root_path.domain_name() == "example.com"


def test_empty_config_is_invalid(tmp_path):
    service = ConfigService(write_config(tmp_path, ""))
    assert service.get_default_domain() is None
    assert service.validate_config() == (False, ["No domain configurations found"])


def test_validate_reports_missing_server(tmp_path):
    service = ConfigService(write_config(tmp_path, "[ldap]\ndomain = example.com\n"))
    is_valid, issues = service.validate_config()
    assert not is_valid
    assert issues == ["Domain example.com: Missing server"]


def test_config_without_server_uses_bare_scheme():
    config = ADConfig(domain="some.local", server="")
    assert config.root_path.path == "LDAP://dc=some,dc=local"
    assert str(config) == "some.local ()"


def test_ssl_without_port_uses_ldaps_port():
    config = ADConfig(domain="example.com", server="dc01", use_ssl=True)
    assert config.root_path.path == "LDAP://dc01:636/dc=example,dc=com"


def test_explicit_port_wins_over_ssl_default():
    config = ADConfig(domain="example.com", server="dc01", port=3269, use_ssl=True)
    assert config.prefix == "LDAP://dc01:3269"


def test_no_ssl_no_port():
    assert ADConfig(domain="example.com", server="dc01").prefix == "LDAP://dc01"
