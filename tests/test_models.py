"""Tests for EFetch argument validation and record helpers."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pubmed_client.errors import InvalidParameterError
from pubmed_client.models import (
    Database,
    FetchFormat,
    IdentifierMapping,
    PmcArticle,
    PmcPubDate,
    RetMode,
    resolve_fetch_format,
)


@pytest.mark.parametrize("db, retmode, expected", [
    ("pubmed", "text", FetchFormat.PLAIN_TEXT),
    ("pubmed", "xml", FetchFormat.PUBMED_XML),
    ("pmc", "text", FetchFormat.PLAIN_TEXT),
    ("pmc", "xml", FetchFormat.PMC_XML),
    ("pmc", "", FetchFormat.PMC_XML),
    ("pmc", None, FetchFormat.PMC_XML),
    (Database.PUBMED, RetMode.XML, FetchFormat.PUBMED_XML),
])
def test_resolve_fetch_format(db, retmode, expected):
    assert resolve_fetch_format(db, retmode) is expected


@pytest.mark.parametrize("db, retmode", [
    ("pubmed", ""),
    ("pubmed", "asn.1"),
    ("gene", "xml"),
    (None, "xml"),
])
def test_resolve_fetch_format_rejects(db, retmode):
    with pytest.raises(InvalidParameterError):
        resolve_fetch_format(db, retmode)


def test_invalid_parameter_is_value_error():
    with pytest.raises(ValueError):
        resolve_fetch_format("pubmed", "html")


def test_pmc_pub_date_lookup_returns_first_match():
    article = PmcArticle(title="t", pub_dates=[
        PmcPubDate(pub_type="epub", year="2012"),
        PmcPubDate(pub_type="epub", year="2013"),
    ])

    assert article.pub_date("epub").year == "2012"
    assert article.pub_date("ppub") is None


def test_identifier_mapping_error_flag():
    assert IdentifierMapping(status="error").is_error
    assert not IdentifierMapping(pmid="1", pmcid="PMC1").is_error
