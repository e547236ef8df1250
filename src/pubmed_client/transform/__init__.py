from .json_parser import parse_esearch, parse_idconv
from .xml_parser import parse_pubmed_xml, parse_pmc_xml, parse_pubmed_article, parse_pmc_article

__all__ = [
    "parse_esearch",
    "parse_idconv",
    "parse_pubmed_xml",
    "parse_pmc_xml",
    "parse_pubmed_article",
    "parse_pmc_article",
]
