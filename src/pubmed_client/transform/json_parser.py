"""ESearch and ID Converter JSON decoding using pure functions."""

import json
import logging
from typing import Any, List, Union

from ..errors import BadResponseError, MalformedResponseError
from ..models import IdentifierMapping, SearchResult

logger = logging.getLogger(__name__)


def parse_esearch(body: Union[bytes, str]) -> SearchResult:
    """
    Decode an ESearch ``retmode=json`` response.

    Invalid JSON raises the decoder's ValueError unchanged; a document without
    an ``esearchresult`` object raises MalformedResponseError.
    """
    data = json.loads(body)

    if not isinstance(data, dict) or not isinstance(data.get("esearchresult"), dict):
        raise MalformedResponseError(f"Malformed ESearch response: {str(data)[:200]}")

    result = data["esearchresult"]
    # An empty term comes back as {"ERROR": ...} with no count; it still means zero hits
    if "ERROR" in result:
        logger.warning(f"ESearch reported: {result['ERROR']}")

    search_result = SearchResult(
        count=str(result.get("count", "0")),
        retmax=str(result.get("retmax", "0")),
        retstart=str(result.get("retstart", "0")),
        idlist=[str(uid) for uid in result.get("idlist", [])],
        translationset=list(result.get("translationset", [])),
        translationstack=list(result.get("translationstack", [])),
        querytranslation=result.get("querytranslation", ""),
        webenv=result.get("webenv"),
        querykey=result.get("querykey"),
        header=dict(data.get("header") or {}),
    )

    logger.debug(f"ESearch decoded: count={search_result.count}, ids={len(search_result.idlist)}")
    return search_result


def parse_idconv(body: Union[bytes, str]) -> List[IdentifierMapping]:
    """
    Decode an ID Converter ``format=json`` response into mapping records.

    Any decode or shape failure is raised as BadResponseError.
    """
    try:
        data = json.loads(body)
        records = data["records"]
        if not isinstance(records, list):
            raise TypeError(f"'records' is {type(records).__name__}, expected list")
        mappings = [_parse_record(record) for record in records]
    except (ValueError, KeyError, TypeError) as e:
        raise BadResponseError(f"IDConvert: failed decoding of response: {e}") from e

    for mapping in mappings:
        if mapping.is_error:
            logger.warning(f"IDConvert flagged {mapping.requested_id}: {mapping.errmsg}")

    return mappings


def _parse_record(record: Any) -> IdentifierMapping:
    if not isinstance(record, dict):
        raise TypeError(f"record is {type(record).__name__}, expected object")

    return IdentifierMapping(
        pmid=str(record.get("pmid") or ""),
        pmcid=record.get("pmcid") or "",
        doi=record.get("doi") or "",
        requested_id=str(record.get("requested-id") or ""),
        status=record.get("status"),
        errmsg=record.get("errmsg"),
    )
