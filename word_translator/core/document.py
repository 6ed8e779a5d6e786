"""
Document host capability.

The translator only needs to read selection text, enumerate paragraphs and
table cells, replace text, and read/write font attributes. Any host exposing
the protocols below can be driven; the in-memory implementations back the
CLI and the tests.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

BLANK_LINE = re.compile(r"\n\s*\n")


@dataclass(frozen=True)
class Font:
    """Font attributes captured before overwriting text."""
    name: Optional[str] = None
    size: Optional[float] = None
    bold: bool = False
    italic: bool = False
    underline: Optional[str] = None
    color: Optional[str] = None


DEFAULT_FONT = Font(name="Calibri", size=11.0, color="#000000")


class TextTarget(Protocol):
    text: str

    def replace_text(self, text: str) -> None:
        ...


class Paragraph(TextTarget, Protocol):
    font: Font

    def apply_font(self, font: Font) -> None:
        ...


class TableCell(TextTarget, Protocol):
    pass


class Table(Protocol):
    rows: List[List[TableCell]]


class Selection(TextTarget, Protocol):
    def paragraphs(self) -> List[Paragraph]:
        ...

    def tables(self) -> List[Table]:
        ...


@dataclass
class MemoryParagraph:
    text: str
    font: Font = DEFAULT_FONT

    def replace_text(self, text: str) -> None:
        # Inserted text takes the host default formatting
        self.text = text
        self.font = DEFAULT_FONT

    def apply_font(self, font: Font) -> None:
        self.font = font


@dataclass
class MemoryCell:
    text: str

    def replace_text(self, text: str) -> None:
        self.text = text


@dataclass
class MemoryTable:
    rows: List[List[MemoryCell]] = field(default_factory=list)

    @classmethod
    def from_rows(cls, rows: List[List[str]]) -> "MemoryTable":
        return cls(rows=[[MemoryCell(text) for text in row] for row in rows])

    def texts(self) -> List[List[str]]:
        return [[cell.text for cell in row] for row in self.rows]


@dataclass
class MemorySelection:
    """A selection held entirely in memory."""
    paragraph_items: List[MemoryParagraph] = field(default_factory=list)
    table_items: List[MemoryTable] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str, font: Font = DEFAULT_FONT) -> "MemorySelection":
        """Build a selection with one paragraph per blank-line separated block."""
        blocks = [block.strip() for block in BLANK_LINE.split(text or "")]
        return cls(paragraph_items=[MemoryParagraph(block, font) for block in blocks if block])

    @property
    def text(self) -> str:
        return "\n".join(paragraph.text for paragraph in self.paragraph_items)

    def replace_text(self, text: str) -> None:
        self.paragraph_items = [MemoryParagraph(text)]

    def paragraphs(self) -> List[MemoryParagraph]:
        return list(self.paragraph_items)

    def tables(self) -> List[MemoryTable]:
        return list(self.table_items)
