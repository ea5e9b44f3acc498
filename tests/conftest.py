"""Pytest configuration and shared fixtures for wiki-md tests."""

from pathlib import Path

import pytest

from wiki_md.config import Settings


SAMPLE_PAGE = """<!DOCTYPE html>
<html>
<head><title>Sample</title></head>
<body>
<h1 id="firstHeading">Sample Article</h1>
<div class="mw-parser-output">
<h2><span class="mw-headline">Intro</span><span class="mw-editsection">edit</span></h2>
<p>Hello world</p>
<p>Hello <b>world</b></p>
<h3><span>Details</span></h3>
<section><ul><li>A</li><li>B</li></ul></section>
<div><p>Nested paragraph</p></div>
</div>
</body>
</html>
"""


@pytest.fixture
def test_settings() -> Settings:
    """Create test configuration settings."""
    return Settings(
        debug=True,
        max_workers=2,
        log_level="DEBUG",
    )


@pytest.fixture
def sample_page_html() -> str:
    """A small wiki page covering every content block type."""
    return SAMPLE_PAGE


@pytest.fixture
def input_dir(tmp_path: Path) -> Path:
    """Input tree with pages at two depths, a skipped page and a non-HTML file."""
    root = tmp_path / "pages"
    (root / "nested" / "deeper").mkdir(parents=True)

    (root / "Sample.html").write_text(SAMPLE_PAGE, encoding="utf-8")
    (root / "nested" / "Other Page.html").write_text(
        '<h1 id="section_0">Other</h1><div class="mw-parser-output"><p>Second</p></div>',
        encoding="utf-8",
    )
    (root / "nested" / "deeper" / "_Template.html").write_text(SAMPLE_PAGE, encoding="utf-8")
    (root / "nested" / "notes.txt").write_text("not a page", encoding="utf-8")

    return root


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output folder (not created up front)."""
    return tmp_path / "markdown"
