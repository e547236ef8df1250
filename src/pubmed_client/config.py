"""Configuration management: endpoint URLs and optional settings loaded from YAML."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlsplit

import yaml

from .errors import ConfigurationError

EUTILS_URL = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
IDCONV_URL = "https://www.ncbi.nlm.nih.gov/pmc/utils/idconv/v1.0"


@dataclass(frozen=True)
class Endpoints:
    """Base URLs for the E-utilities and ID Converter services."""

    eutils_url: str = EUTILS_URL
    idconv_url: str = IDCONV_URL

    def __post_init__(self):
        for name in ("eutils_url", "idconv_url"):
            _check_url(name, getattr(self, name))

    def eutils(self, tool: str) -> str:
        return f"{self.eutils_url.rstrip('/')}/{tool}"

    def idconv(self) -> str:
        return f"{self.idconv_url.rstrip('/')}/"


def _check_url(name: str, url: str) -> None:
    if not isinstance(url, str):
        raise ConfigurationError(f"{name} must be a string, got {type(url).__name__}")
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigurationError(f"{name} is not an absolute http(s) URL: {url!r}")


class ConfigManager:

    PLACEHOLDER_EMAIL = "your.email@example.com"

    def __init__(self, config_path: str = "settings.yaml"):
        self.config_path = Path(config_path)
        self.config = {}
        self.load()
        self.validate()

    def load(self) -> None:
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Please copy settings-template.yaml to settings.yaml and configure your values."
            )

        with open(self.config_path, 'r') as f:
            self.config = yaml.safe_load(f)

        if not self.config:
            raise ValueError(f"Configuration file is empty: {self.config_path}")

        # An empty api_key in the template means "no key"
        if self.get("pubmed.api_key") == "":
            self.set("pubmed.api_key", None)

    def validate(self) -> None:
        email = self.get("pubmed.email")
        if email == self.PLACEHOLDER_EMAIL:
            raise ConfigurationError(
                f"Field 'pubmed.email' still holds the template placeholder.\n"
                f"Please update {self.config_path} or remove the field"
            )

        timeout = self.request_timeout
        if timeout is not None and (
            isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0
        ):
            raise ConfigurationError(f"pubmed.timeout must be a positive number, got {timeout!r}")

        for field in ("eutils_url", "idconv_url"):
            value = self.get(f"endpoints.{field}")
            if value is not None:
                _check_url(f"endpoints.{field}", value)

    def get(self, key_path: str, default: Any = None) -> Any:
        keys = key_path.split('.')
        value = self.config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, key_path: str, value: Any) -> None:
        keys = key_path.split('.')
        config = self.config
        for key in keys[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]
        config[keys[-1]] = value

    @property
    def pubmed_email(self) -> Optional[str]:
        return self.get("pubmed.email")

    @property
    def pubmed_api_key(self) -> Optional[str]:
        return self.get("pubmed.api_key")

    @property
    def pubmed_tool(self) -> Optional[str]:
        return self.get("pubmed.tool")

    @property
    def request_timeout(self) -> Optional[float]:
        """Seconds to wait on the server; None leaves the transport default."""
        return self.get("pubmed.timeout")

    @property
    def endpoints(self) -> Endpoints:
        return Endpoints(
            eutils_url=self.get("endpoints.eutils_url", EUTILS_URL),
            idconv_url=self.get("endpoints.idconv_url", IDCONV_URL),
        )
