"""Tests for endpoint validation and YAML settings."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pubmed_client.config import EUTILS_URL, IDCONV_URL, ConfigManager, Endpoints
from pubmed_client.errors import ConfigurationError
from pubmed_client.extract.api_client import PubMedAPIClient


def write_settings(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(text)
    return path


def test_default_endpoints():
    endpoints = Endpoints()

    assert endpoints.eutils("efetch.fcgi") == f"{EUTILS_URL}/efetch.fcgi"
    assert endpoints.idconv() == f"{IDCONV_URL}/"


@pytest.mark.parametrize("url", ["", "eutils.ncbi.nlm.nih.gov", "ftp://ftp.ncbi.nlm.nih.gov", "https://", None])
def test_endpoints_reject_malformed_urls(url):
    with pytest.raises(ConfigurationError):
        Endpoints(eutils_url=url)


def test_endpoints_are_immutable():
    endpoints = Endpoints()

    with pytest.raises(AttributeError):
        endpoints.eutils_url = "http://example.org"


def test_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager(str(tmp_path / "missing.yaml"))


def test_config_empty_file(tmp_path):
    with pytest.raises(ValueError):
        ConfigManager(str(write_settings(tmp_path, "")))


def test_config_loads_values(tmp_path):
    path = write_settings(tmp_path, """
pubmed:
  email: dev@example.org
  tool: lit-tool
  api_key: ""
  timeout: 30
endpoints:
  eutils_url: http://localhost:9000/eutils
""")

    config = ConfigManager(str(path))

    assert config.pubmed_email == "dev@example.org"
    assert config.pubmed_tool == "lit-tool"
    assert config.pubmed_api_key is None
    assert config.request_timeout == 30
    assert config.endpoints == Endpoints(eutils_url="http://localhost:9000/eutils", idconv_url=IDCONV_URL)
    assert config.get("pubmed.missing", "fallback") == "fallback"


def test_config_rejects_placeholder_email(tmp_path):
    path = write_settings(tmp_path, "pubmed:\n  email: your.email@example.com\n")

    with pytest.raises(ConfigurationError):
        ConfigManager(str(path))


@pytest.mark.parametrize("timeout", ["soon", "true", "0", "-5"])
def test_config_rejects_bad_timeout(tmp_path, timeout):
    path = write_settings(tmp_path, f"pubmed:\n  timeout: {timeout}\n")

    with pytest.raises(ConfigurationError):
        ConfigManager(str(path))


def test_config_rejects_bad_endpoint(tmp_path):
    path = write_settings(tmp_path, "endpoints:\n  idconv_url: not-a-url\n")

    with pytest.raises(ConfigurationError):
        ConfigManager(str(path))


def test_client_from_config(tmp_path):
    path = write_settings(tmp_path, """
pubmed:
  email: dev@example.org
  tool: lit-tool
  api_key: abc123
  timeout: 12.5
""")
    session = MagicMock()
    session.headers = {}

    client = PubMedAPIClient.from_config(ConfigManager(str(path)), session=session)

    assert client.email == "dev@example.org"
    assert client.tool == "lit-tool"
    assert client.api_key == "abc123"
    assert client.timeout == 12.5
    assert client.endpoints == Endpoints()
    assert client.session is session
