"""
Wiki Page Content Classifier

Turns the raw HTML of a scraped wiki article into a Document: the page title
plus a flat, ordered list of content blocks.

Main entry point: classify(html_content) -> Document

Classification Rules:
- Title is the inner markup of the first #firstHeading or #section_0 element,
  or "UNKNOWN" when the page has neither
- Body comes from the direct children of the .mw-parser-output container only;
  pages without that container yield no blocks
- h2 and h3 become level 1 and level 2 headers (text of their first span)
- p becomes a paragraph, flagged plain when it holds nothing but text nodes
- section becomes a list of the li items found under its ul elements
- Every other element is ignored
"""

import logging

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from ..models import UNKNOWN_TITLE, ContentBlock, Document, Header, ListBlock, Paragraph

logger = logging.getLogger(__name__)

TITLE_SELECTOR = "#firstHeading, #section_0"
CONTAINER_SELECTOR = ".mw-parser-output"
LIST_ITEM_SELECTOR = "ul > li"

HEADER_LEVELS = {
    "h2": 1,
    "h3": 2,
}


def parse_html(html_content: str) -> BeautifulSoup:
    """Parse a page with the html5lib tree builder (browser error recovery)."""
    return BeautifulSoup(html_content, "html5lib")


def inner_html(element: Tag) -> str:
    """Markup of an element's children, without the element's own tag."""
    return element.decode_contents()


def is_text_node(node) -> bool:
    # Comments, CDATA, doctypes etc. are NavigableString subclasses too
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def extract_title(soup: BeautifulSoup) -> str:
    """Return the page title, or UNKNOWN when no heading element matches."""
    heading = soup.select_one(TITLE_SELECTOR)
    if heading is None:
        return UNKNOWN_TITLE
    return inner_html(heading)


def header_from_element(element: Tag) -> Header:
    """Build a header from the first span inside an h2/h3 element."""
    level = HEADER_LEVELS[element.name]
    span = element.find("span")
    if span is None:
        logger.warning("<%s> without an inner <span>, emitting an empty heading", element.name)
        return Header(text="", level=level)
    return Header(text=inner_html(span), level=level)


def paragraph_from_element(element: Tag) -> Paragraph:
    return Paragraph(
        text=inner_html(element),
        is_plain_text=all(is_text_node(child) for child in element.children),
    )


def list_from_section(element: Tag) -> ListBlock:
    return ListBlock(items=[inner_html(li) for li in element.select(LIST_ITEM_SELECTOR)])


def classify_element(element: Tag) -> ContentBlock | None:
    """Map one direct child of the content container to a block, if any."""
    if element.name in HEADER_LEVELS:
        return header_from_element(element)
    if element.name == "p":
        return paragraph_from_element(element)
    if element.name == "section":
        return list_from_section(element)
    return None


def extract_blocks(soup: BeautifulSoup) -> list[ContentBlock]:
    """Classify the direct element children of the content container."""
    container = soup.select_one(CONTAINER_SELECTOR)
    if container is None:
        logger.debug("No %s container, page has no convertible body", CONTAINER_SELECTOR)
        return []

    blocks = []
    for element in container.find_all(True, recursive=False):
        block = classify_element(element)
        if block is not None:
            blocks.append(block)
    return blocks


def classify(html_content: str) -> Document:
    """Extract the title and content blocks of a wiki page.

    Args:
        html_content: Raw HTML of the page; malformed markup is tolerated

    Returns:
        Document with the title and the blocks in document order
    """
    soup = parse_html(html_content)
    return Document(title=extract_title(soup), blocks=extract_blocks(soup))
