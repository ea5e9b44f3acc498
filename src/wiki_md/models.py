"""Data models for wiki-md.

Pydantic models for the content extracted from a wiki page, the unit of
work handed to the converter, and the per-file results it reports back.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field

UNKNOWN_TITLE = "UNKNOWN"
SKIP_PREFIX = "_"


class Header(BaseModel):
    """Section heading; level 1 comes from h2, level 2 from h3."""

    kind: Literal["header"] = "header"
    text: str = Field(..., description="Inner markup of the heading span")
    level: Literal[1, 2] = Field(..., description="Markdown heading level")


class Paragraph(BaseModel):
    """Paragraph with its raw inner markup."""

    kind: Literal["paragraph"] = "paragraph"
    text: str = Field(..., description="Inner markup of the paragraph")
    is_plain_text: bool = Field(..., description="True when every child node is a text node")


class ListBlock(BaseModel):
    """Unordered list built from the li elements of a section."""

    kind: Literal["list"] = "list"
    items: list[str] = Field(default_factory=list, description="Inner markup of each list item")


ContentBlock = Annotated[Header | Paragraph | ListBlock, Field(discriminator="kind")]


class Document(BaseModel):
    """Title and ordered content blocks of one page."""

    title: str = Field(default=UNKNOWN_TITLE, description="Page title (inner markup)")
    blocks: list[ContentBlock] = Field(default_factory=list, description="Content blocks in document order")


class ConversionTask(BaseModel):
    """One input file and the folder its Markdown goes to."""

    input_path: Path = Field(..., description="HTML file to convert")
    output_folder: Path = Field(..., description="Folder receiving the Markdown file")

    @property
    def file_name(self) -> str:
        return self.input_path.name

    @property
    def output_path(self) -> Path:
        """Flat output location: the input name with a .md extension."""
        return self.output_folder / Path(self.file_name).with_suffix(".md").name

    @property
    def is_skipped(self) -> bool:
        """Pages whose name starts with an underscore are not converted."""
        return self.file_name.startswith(SKIP_PREFIX)


class ConversionStatus(str, Enum):
    CONVERTED = "converted"
    SKIPPED = "skipped"
    FAILED = "failed"


class ConversionResult(BaseModel):
    """Outcome of a single conversion task."""

    input_path: Path = Field(..., description="HTML file the task worked on")
    output_path: Path | None = Field(None, description="Markdown file written, if any")
    status: ConversionStatus = Field(..., description="Task outcome")
    error: str | None = Field(None, description="Failure reason for failed tasks")

    @property
    def ok(self) -> bool:
        return self.status != ConversionStatus.FAILED


class BatchSummary(BaseModel):
    """Aggregate of all task results in a run."""

    results: list[ConversionResult] = Field(default_factory=list, description="Per-file results")

    def _with_status(self, status: ConversionStatus) -> list[ConversionResult]:
        return [result for result in self.results if result.status == status]

    @property
    def converted(self) -> list[ConversionResult]:
        return self._with_status(ConversionStatus.CONVERTED)

    @property
    def skipped(self) -> list[ConversionResult]:
        return self._with_status(ConversionStatus.SKIPPED)

    @property
    def failed(self) -> list[ConversionResult]:
        return self._with_status(ConversionStatus.FAILED)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def exit_code(self) -> int:
        """0 when no task failed, 1 otherwise."""
        return 0 if all(result.ok for result in self.results) else 1
