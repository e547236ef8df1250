"""
Extract module - NCBI API interaction

Components for requesting data from the E-utilities and the PMC ID Converter:
- PubMedAPIClient: ESearch, EFetch and ID conversion, one GET per call
"""

from .api_client import PubMedAPIClient

__all__ = [
    "PubMedAPIClient",
]
