"""EFetch XML parsers using pure functions (functional programming approach).

Two document shapes are handled: PubMed's ``<PubmedArticleSet>`` and PMC's
JATS ``<pmc-articleset>``. Missing elements decode to empty strings; dates are
kept exactly as the record spells them.
"""

import logging
from typing import List, Optional, Union

from lxml import etree

from ..models import (
    PmcArticle,
    PmcArticleSet,
    PmcAuthor,
    PmcPubDate,
    PubmedArticle,
    PubmedArticleSet,
    PubmedAuthor,
)

logger = logging.getLogger(__name__)


def parse_pubmed_xml(xml_data: Union[bytes, str]) -> PubmedArticleSet:
    """Parse a PubMed EFetch XML document into a PubmedArticleSet."""
    root = _parse(xml_data)
    articles = [parse_pubmed_article(elem) for elem in root.iter('PubmedArticle')]

    logger.debug(f"Parsed {len(articles)} PubMed articles")
    return PubmedArticleSet(articles=articles)


def parse_pubmed_article(article_elem: etree._Element) -> PubmedArticle:
    """Parse single <PubmedArticle> element."""
    citation = article_elem.find('MedlineCitation')
    article = citation.find('Article') if citation is not None else None

    # Abstract may be split into labelled sections
    abstract_parts = []
    if article is not None:
        for abstract_text in article.findall('Abstract/AbstractText'):
            label = abstract_text.get('Label')
            text = _text_content(abstract_text)
            if label:
                abstract_parts.append(f"{label}: {text}")
            else:
                abstract_parts.append(text)

    pub_date = article.find('Journal/JournalIssue/PubDate') if article is not None else None

    return PubmedArticle(
        pmid=_get_text(citation, 'PMID'),
        title=_get_text(article, 'ArticleTitle'),
        abstract=' '.join(abstract_parts).strip(),
        authors=parse_pubmed_authors(article),
        year=_get_text(pub_date, 'Year'),
        month=_get_text(pub_date, 'Month'),
        day=_get_text(pub_date, 'Day'),
        medline_date=_get_text(pub_date, 'MedlineDate'),
    )


def parse_pubmed_authors(article_elem: Optional[etree._Element]) -> List[PubmedAuthor]:
    """Parse <AuthorList> in document order, group authors included."""
    if article_elem is None:
        return []

    authors = []
    for author_elem in article_elem.findall('AuthorList/Author'):
        author = PubmedAuthor(
            last_name=_get_text(author_elem, 'LastName'),
            fore_name=_get_text(author_elem, 'ForeName'),
            initials=_get_text(author_elem, 'Initials'),
            collective_name=_get_text(author_elem, 'CollectiveName'),
        )
        if not author.last_name and not author.collective_name:
            logger.warning("Author without LastName or CollectiveName")
        authors.append(author)

    return authors


def parse_pmc_xml(xml_data: Union[bytes, str]) -> PmcArticleSet:
    """Parse a PMC EFetch (JATS) XML document into a PmcArticleSet."""
    root = _parse(xml_data)
    if root.tag == 'article':
        elems = [root]
    else:
        elems = root.findall('article')

    articles = [parse_pmc_article(elem) for elem in elems]

    logger.debug(f"Parsed {len(articles)} PMC articles")
    return PmcArticleSet(articles=articles)


def parse_pmc_article(article_elem: etree._Element) -> PmcArticle:
    """Parse single JATS <article> element."""
    meta = article_elem.find('front/article-meta')
    if meta is None:
        logger.warning("PMC article without <front>/<article-meta>")
        return PmcArticle(title="")

    authors = [
        PmcAuthor(
            contrib_type=contrib.get('contrib-type', ''),
            surname=_get_text(contrib, 'name/surname'),
            given_names=_get_text(contrib, 'name/given-names'),
        )
        for contrib in meta.findall('contrib-group/contrib')
    ]

    pub_dates = [
        PmcPubDate(
            pub_type=date.get('pub-type') or date.get('date-type', ''),
            year=_get_text(date, 'year'),
            month=_get_text(date, 'month'),
            day=_get_text(date, 'day'),
        )
        for date in meta.findall('pub-date')
    ]

    abstract_elem = _main_abstract(meta)

    return PmcArticle(
        pmcid=_pmcid(meta),
        title=_get_text(meta, 'title-group/article-title'),
        abstract=_inner_xml(abstract_elem) if abstract_elem is not None else '',
        authors=authors,
        pub_dates=pub_dates,
    )


# Helper functions

def _parse(xml_data: Union[bytes, str]) -> etree._Element:
    if isinstance(xml_data, str):
        xml_data = xml_data.encode('utf-8')
    # Parser objects are not shared between threads
    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)
    return etree.fromstring(xml_data, parser)


def _get_text(element: Optional[etree._Element], path: str) -> str:
    """Text content of the first match of path, '' when absent."""
    if element is None:
        return ''

    child = element.find(path)
    if child is None:
        return ''
    return _text_content(child)


def _text_content(element: etree._Element) -> str:
    # itertext keeps text inside inline markup such as <i> or <sup>
    return ''.join(element.itertext()).strip()


def _inner_xml(element: etree._Element) -> str:
    """Serialize the children of element verbatim, without the element's own tags."""
    if element.text is None and len(element) == 0:
        return ''

    # Inherited namespace declarations land on the outer tag, which is cut off
    markup = etree.tostring(element, encoding='unicode', with_tail=False)
    return markup[markup.index('>') + 1:markup.rindex('</')]


def _main_abstract(meta: etree._Element) -> Optional[etree._Element]:
    """First untyped <abstract>, else the first of any type (teaser, graphical, ...)."""
    abstracts = meta.findall('abstract')
    for abstract in abstracts:
        if abstract.get('abstract-type') is None:
            return abstract
    return abstracts[0] if abstracts else None


def _pmcid(meta: etree._Element) -> str:
    for article_id in meta.findall('article-id'):
        id_type = article_id.get('pub-id-type')
        value = (article_id.text or '').strip()
        if id_type == 'pmcid':
            return value
        if id_type == 'pmc' and value:
            return value if value.startswith('PMC') else f"PMC{value}"
    return ''
