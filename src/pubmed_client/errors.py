"""Exceptions raised by the PubMed client.

Transport failures are not wrapped: they surface as ``requests`` exceptions.
"""

from typing import Optional


class PubMedClientError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(PubMedClientError, ValueError):
    """Malformed endpoint URL or settings value."""


class InvalidParameterError(PubMedClientError, ValueError):
    """Caller-supplied argument outside the accepted set. Raised before any request."""


class MalformedResponseError(PubMedClientError, ValueError):
    """Response decoded fine but does not have the expected shape."""


class IDConvertError(PubMedClientError):
    """Base class for ID Converter failures after a successful request."""


class NoRecordsError(IDConvertError):
    """The ID Converter returned no records for the identifier."""


class BadResponseError(IDConvertError):
    """The ID Converter response could not be decoded."""


class RecordStatusError(IDConvertError):
    """The first ID Converter record is flagged with ``status: error``."""

    def __init__(self, requested_id: str, errmsg: Optional[str] = None):
        self.requested_id = requested_id
        self.errmsg = errmsg
        super().__init__(f"IDConvert: {requested_id}: {errmsg or 'error status in record'}")
