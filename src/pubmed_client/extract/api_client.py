"""PubMed API client for ESearch, EFetch and the PMC ID Converter."""

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import requests

from ..config import ConfigManager, Endpoints
from ..errors import NoRecordsError, RecordStatusError
from ..models import (
    Database,
    FetchFormat,
    FetchResult,
    IdentifierMapping,
    PlainText,
    RetMode,
    SearchResult,
    resolve_fetch_format,
)
from ..transform.json_parser import parse_esearch, parse_idconv
from ..transform.xml_parser import parse_pmc_xml, parse_pubmed_xml


class PubMedAPIClient:
    """
    Client for NCBI E-utilities (ESearch, EFetch) and the PMC ID Converter.

    Every call is a single GET whose response is closed before the call
    returns. Nothing is retried or cached, and the client keeps no per-call
    state, so one instance can serve several threads if its session can.
    """

    def __init__(
        self,
        endpoints: Optional[Endpoints] = None,
        session: Optional[requests.Session] = None,
        email: Optional[str] = None,
        api_key: Optional[str] = None,
        tool: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        self.endpoints = endpoints or Endpoints()
        self.email = email
        self.api_key = api_key
        self.tool = tool
        self.timeout = timeout

        self.session = session if session is not None else requests.Session()
        self.logger = logging.getLogger(__name__)

        user_agent = f"{tool or 'pubmed-client'}/0.1.0 (Python"
        user_agent += f"; mailto:{email})" if email else ")"
        self.session.headers.update({"User-Agent": user_agent})

    @classmethod
    def from_config(cls, config: ConfigManager, session: Optional[requests.Session] = None) -> "PubMedAPIClient":
        return cls(
            endpoints=config.endpoints,
            session=session,
            email=config.pubmed_email,
            api_key=config.pubmed_api_key,
            tool=config.pubmed_tool,
            timeout=config.request_timeout
        )

    def search(self, query: str, **params) -> SearchResult:
        """
        Run ESearch against PubMed.

        Extra ESearch parameters (retmax, retstart, mindate, maxdate, sort, ...)
        are passed through as keyword arguments.
        """
        url = self.endpoints.eutils("esearch.fcgi")
        params = self._build_params(
            {**params, "db": Database.PUBMED.value, "retmode": "json", "term": query},
            eutils=True
        )

        self.logger.info(f"Executing ESearch: {query}")
        with self._get(url, params) as response:
            result = parse_esearch(response.content)

        self.logger.info(f"ESearch found {result.count} total results")
        return result

    def fetch(
        self,
        ids: Union[str, int, Iterable[Union[str, int]]],
        db: Union[str, Database],
        rettype: str = "",
        retmode: Optional[Union[str, RetMode]] = RetMode.XML
    ) -> FetchResult:
        """
        Run EFetch for one identifier (or several) in db.

        Returns PlainText for retmode "text", otherwise a PubmedArticleSet or
        PmcArticleSet depending on db. For db "pmc" retmode may be left empty,
        as the service answers with XML by default. Invalid db/retmode values
        raise InvalidParameterError before any request is made.
        """
        fetch_format = resolve_fetch_format(db, retmode)
        database = Database(db)

        id_str = _join_ids(ids)
        url = self.endpoints.eutils("efetch.fcgi")
        params = self._build_params(
            {
                "db": database.value,
                "rettype": rettype or None,
                "retmode": RetMode.TEXT.value if fetch_format is FetchFormat.PLAIN_TEXT else RetMode.XML.value,
                "id": id_str,
            },
            eutils=True
        )

        self.logger.info(f"Fetching {id_str} from {database.value} as {fetch_format.value}")
        with self._get(url, params) as response:
            body = response.content

        if fetch_format is FetchFormat.PLAIN_TEXT:
            # Invalid bytes survive as surrogates; encode with surrogateescape to recover them
            return PlainText(text=body.decode("utf-8", errors="surrogateescape"))
        if fetch_format is FetchFormat.PUBMED_XML:
            return parse_pubmed_xml(body)
        return parse_pmc_xml(body)

    def id_convert_records(self, ids: Union[str, int, Iterable[Union[str, int]]]) -> List[IdentifierMapping]:
        """Run the ID Converter and return every record, status flags included."""
        id_str = _join_ids(ids)
        url = self.endpoints.idconv()
        params = self._build_params({"format": "json", "ids": id_str})

        self.logger.info(f"Converting IDs: {id_str}")
        with self._get(url, params) as response:
            return parse_idconv(response.content)

    def id_convert(self, identifier: str) -> Tuple[str, str]:
        """
        Convert between PMID and PMCID; identifier may be either.

        Returns (pmid, pmcid) of the first record. Raises BadResponseError if
        the body cannot be decoded, NoRecordsError if there are no records and
        RecordStatusError if the service flags the first record as an error.
        """
        records = self.id_convert_records(identifier)

        if not records:
            raise NoRecordsError(f"IDConvert: no records in response for {identifier}")

        first = records[0]
        if first.is_error:
            raise RecordStatusError(first.requested_id or identifier, first.errmsg)

        if len(records) > 1:
            self.logger.debug(f"IDConvert returned {len(records)} records, using the first")

        return first.pmid, first.pmcid

    def _build_params(self, query: dict, eutils: bool = False) -> dict:
        params = {key: value for key, value in query.items() if value is not None}
        if self.tool:
            params["tool"] = self.tool
        if self.email:
            params["email"] = self.email
        if eutils and self.api_key:
            params["api_key"] = self.api_key
        return params

    @contextmanager
    def _get(self, url: str, params: dict) -> Iterator[requests.Response]:
        """One GET; the response is closed on every exit path."""
        self.logger.debug(f"GET {url}")
        response = self.session.get(url, params=params, timeout=self.timeout)
        try:
            response.raise_for_status()
            yield response
        finally:
            response.close()

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"PubMedAPIClient(eutils={self.endpoints.eutils_url}, idconv={self.endpoints.idconv_url})"


def _join_ids(ids: Union[str, int, Iterable[Union[str, int]]]) -> str:
    """A single id as-is, several ids comma-separated."""
    if isinstance(ids, (str, int)):
        return str(ids)
    return ",".join(str(uid) for uid in ids)
