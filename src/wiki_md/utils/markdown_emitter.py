"""
Markdown Emitter

Serializes a classified Document into the Markdown layout:

    +++
    title= "<quoted title>"
    +++

    <blocks separated by blank lines>

    generated from [**<output file name>**](<link to the source page>)

Text is written exactly as extracted; nothing is escaped apart from the title
inside the front matter. Rendering is a pure function of its inputs, so
converting an unchanged page twice produces identical files.
"""

import logging
import os
import re
from pathlib import Path
from urllib.parse import quote_from_bytes

from ..errors import OutputWriteError, QuotingError
from ..models import ContentBlock, Document, Header, ListBlock, Paragraph

logger = logging.getLogger(__name__)

FRONT_MATTER_FENCE = "+++"
LIST_MARKER = "* "
NEEDS_QUOTING = frozenset(b'"\\')
LINK_TEXT_SPECIALS = re.compile(r"([\\*\[\]])")


def quote_title(title: str) -> str:
    """Quote a title with the minimal quoted-string rule.

    The title is classified byte by byte: ``"`` and ``\\`` are escaped with a
    backslash and every other byte passes through unchanged.

    Raises:
        QuotingError: If the title has no UTF-8 byte form
    """
    try:
        raw = title.encode("utf-8")
    except UnicodeEncodeError as e:
        raise QuotingError(title, e.reason) from e

    quoted = bytearray(b'"')
    for byte in raw:
        if byte in NEEDS_QUOTING:
            quoted.append(ord("\\"))
        quoted.append(byte)
    quoted.append(ord('"'))
    return quoted.decode("utf-8")


def render_front_matter(title: str) -> str:
    try:
        value = quote_title(title)
    except QuotingError as e:
        logger.warning("%s, writing the title unquoted", e)
        value = title
    return f"{FRONT_MATTER_FENCE}\ntitle= {value}\n{FRONT_MATTER_FENCE}"


def render_block(block: ContentBlock) -> str:
    """Render one block; paragraphs with nested markup render to nothing."""
    if isinstance(block, Header):
        return f"{'#' * block.level} {block.text}"
    if isinstance(block, Paragraph):
        # TODO: decide between stripping and inline conversion for mixed paragraphs
        return block.text if block.is_plain_text else ""
    if isinstance(block, ListBlock):
        return "\n".join(f"{LIST_MARKER}{item}" for item in block.items)
    raise TypeError(f"Unsupported content block: {block!r}")


def footer_link(input_path: Path, output_path: Path) -> str:
    """Percent-encoded path from the output file's folder to the input file.

    Pure path algebra, nothing is read from disk. The raw filesystem bytes
    are encoded, so names that are not valid UTF-8 still get a link. Every
    reserved character, path separators included, is encoded.
    """
    relative = os.path.relpath(input_path, output_path.parent)
    return quote_from_bytes(os.fsencode(relative), safe="")


def escape_link_text(text: str) -> str:
    """Backslash-escape the characters that would end the bold link text."""
    return LINK_TEXT_SPECIALS.sub(r"\\\1", text)


def render_footer(input_path: Path, output_path: Path) -> str:
    link = footer_link(input_path, output_path)
    return f"generated from [**{escape_link_text(output_path.name)}**]({link})"


def render_document(document: Document, input_path: Path, output_path: Path) -> str:
    """Render the complete Markdown text for one page.

    Blocks that render to nothing (empty lists, empty or mixed paragraphs)
    add no lines and no blank-line separator.
    """
    parts = [render_front_matter(document.title)]
    for block in document.blocks:
        rendered = render_block(block)
        if rendered:
            parts.append(rendered)
    parts.append(render_footer(input_path, output_path))
    return "\n\n".join(parts) + "\n"


def write_markdown(markdown: str, output_path: Path) -> Path:
    """Create (or overwrite) the Markdown file.

    Undecodable file-name bytes carried into the text are written back as
    the same raw bytes.

    Raises:
        OutputWriteError: If the file cannot be created or written
    """
    try:
        with open(output_path, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
            f.write(markdown)
    except (OSError, UnicodeEncodeError) as e:
        raise OutputWriteError(output_path, str(e)) from e
    return output_path
