"""
Client for NCBI's literature APIs: ESearch, EFetch and the PMC ID Converter.

- extract: PubMedAPIClient (URL building, transport, one method per operation)
- transform: JSON and XML response decoders
"""

from .config import ConfigManager, Endpoints
from .errors import (
    BadResponseError,
    ConfigurationError,
    IDConvertError,
    InvalidParameterError,
    MalformedResponseError,
    NoRecordsError,
    PubMedClientError,
    RecordStatusError,
)
from .extract import PubMedAPIClient
from .models import (
    Database,
    FetchFormat,
    FetchResult,
    IdentifierMapping,
    PlainText,
    PmcArticle,
    PmcArticleSet,
    PmcAuthor,
    PmcPubDate,
    PubmedArticle,
    PubmedArticleSet,
    PubmedAuthor,
    RetMode,
    SearchResult,
    resolve_fetch_format,
)

__version__ = "0.1.0"

__all__ = [
    "PubMedAPIClient",
    "ConfigManager",
    "Endpoints",
    "Database",
    "RetMode",
    "FetchFormat",
    "FetchResult",
    "resolve_fetch_format",
    "SearchResult",
    "PubmedAuthor",
    "PubmedArticle",
    "PubmedArticleSet",
    "PmcAuthor",
    "PmcPubDate",
    "PmcArticle",
    "PmcArticleSet",
    "PlainText",
    "IdentifierMapping",
    "PubMedClientError",
    "ConfigurationError",
    "InvalidParameterError",
    "MalformedResponseError",
    "IDConvertError",
    "NoRecordsError",
    "BadResponseError",
    "RecordStatusError",
]
