"""Records decoded from E-utilities and ID Converter responses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from .errors import InvalidParameterError


class Database(str, Enum):
    PUBMED = "pubmed"
    PMC = "pmc"


class RetMode(str, Enum):
    TEXT = "text"
    XML = "xml"


class FetchFormat(Enum):
    """Which decoder handles an EFetch response."""

    PLAIN_TEXT = "plain_text"
    PUBMED_XML = "pubmed_xml"
    PMC_XML = "pmc_xml"


def resolve_fetch_format(db: Union[str, Database], retmode: Optional[Union[str, RetMode]]) -> FetchFormat:
    """
    Validate an EFetch (db, retmode) pair and pick the response format.

    PMC serves XML by default, so an empty retmode is accepted for it.
    """
    try:
        database = Database(db)
    except ValueError:
        raise InvalidParameterError(f"Unsupported database: {db!r} (expected 'pubmed' or 'pmc')") from None

    if not retmode and database is Database.PMC:
        return FetchFormat.PMC_XML

    try:
        mode = RetMode(retmode)
    except ValueError:
        raise InvalidParameterError(f"Unsupported retmode: {retmode!r} (expected 'text' or 'xml')") from None

    if mode is RetMode.TEXT:
        return FetchFormat.PLAIN_TEXT
    if database is Database.PUBMED:
        return FetchFormat.PUBMED_XML
    return FetchFormat.PMC_XML


# ESearch

@dataclass(frozen=True)
class SearchResult:
    count: str
    retmax: str
    retstart: str
    idlist: list[str] = field(default_factory=list)
    translationset: list[Any] = field(default_factory=list)
    translationstack: list[Any] = field(default_factory=list)
    querytranslation: str = ""
    webenv: Optional[str] = None
    querykey: Optional[str] = None
    header: dict[str, str] = field(default_factory=dict)


# EFetch, PubMed XML

@dataclass(frozen=True)
class PubmedAuthor:
    last_name: str = ""
    fore_name: str = ""
    initials: str = ""
    collective_name: str = ""


@dataclass(frozen=True)
class PubmedArticle:
    title: str
    abstract: str = ""
    authors: list[PubmedAuthor] = field(default_factory=list)
    year: str = ""
    month: str = ""
    day: str = ""
    pmid: str = ""
    medline_date: str = ""


@dataclass(frozen=True)
class PubmedArticleSet:
    articles: list[PubmedArticle] = field(default_factory=list)


# EFetch, PMC (JATS) XML

@dataclass(frozen=True)
class PmcAuthor:
    contrib_type: str = ""
    surname: str = ""
    given_names: str = ""


@dataclass(frozen=True)
class PmcPubDate:
    pub_type: str = ""
    year: str = ""
    month: str = ""
    day: str = ""


@dataclass(frozen=True)
class PmcArticle:
    title: str
    abstract: str = ""
    authors: list[PmcAuthor] = field(default_factory=list)
    pub_dates: list[PmcPubDate] = field(default_factory=list)
    pmcid: str = ""

    def pub_date(self, pub_type: str) -> Optional[PmcPubDate]:
        """Return the first publication date of the given type (e.g. "ppub", "epub")."""
        for date in self.pub_dates:
            if date.pub_type == pub_type:
                return date
        return None


@dataclass(frozen=True)
class PmcArticleSet:
    articles: list[PmcArticle] = field(default_factory=list)


@dataclass(frozen=True)
class PlainText:
    text: str


FetchResult = Union[PlainText, PubmedArticleSet, PmcArticleSet]


# ID Converter

@dataclass(frozen=True)
class IdentifierMapping:
    pmid: str = ""
    pmcid: str = ""
    doi: str = ""
    requested_id: str = ""
    status: Optional[str] = None
    errmsg: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.status == "error"
