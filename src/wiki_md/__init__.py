"""wiki-md - Batch conversion of scraped wiki pages to Markdown.

Reads MediaWiki-style HTML articles and writes one Markdown file per page,
keeping the page's section headings, plain paragraphs and lists.

Key Features:
- Title extracted into a +++ front matter block
- Headings, plain-text paragraphs and section lists kept in page order
- Footer linking each Markdown file back to its source page
- Pages converted in parallel, one failing page never stops the others
"""

__version__ = "0.1.0"
__author__ = "wiki-md Contributors"
__license__ = "MIT"

# Public API exports
from .config import Settings
from .converter import convert_all, convert_file
from .models import BatchSummary, ConversionResult, ConversionTask, Document, Header, ListBlock, Paragraph
from .utils.content_classifier import classify
from .utils.file_collector import collect_files
from .utils.markdown_emitter import quote_title, render_document

__all__ = [
    "BatchSummary",
    "ConversionResult",
    "ConversionTask",
    "Document",
    "Header",
    "ListBlock",
    "Paragraph",
    "Settings",
    "classify",
    "collect_files",
    "convert_all",
    "convert_file",
    "quote_title",
    "render_document",
    "__version__",
]
