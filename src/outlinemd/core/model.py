from __future__ import annotations
from dataclasses import dataclass, field
from typing import Union

DocumentId = str


# Inline nodes


@dataclass
class Plain:
    text: str


@dataclass
class Escaped:
    text: str  # the escaped character, without the backslash


@dataclass
class Emoji:
    text: str  # ":name:" shortcode


@dataclass
class Strong:
    children: list[Inline] = field(default_factory=list)


@dataclass
class Emph:
    children: list[Inline] = field(default_factory=list)


@dataclass
class Link:
    url: str
    children: list[Inline] = field(default_factory=list)
    title: str | None = None


@dataclass
class LineBreak:
    hard: bool = False


@dataclass
class RawInline:
    """Inline node kept as canonical Markdown (code spans, images, HTML...)."""
    text: str


Inline = Union[Plain, Escaped, Emoji, Strong, Emph, Link, LineBreak, RawInline]


# Block nodes


@dataclass
class Heading:
    level: int
    inlines: list[Inline] = field(default_factory=list)


@dataclass
class Paragraph:
    inlines: list[Inline] = field(default_factory=list)


@dataclass
class TextBlock:
    """Paragraph content of a tight list item."""
    inlines: list[Inline] = field(default_factory=list)


@dataclass
class Item:
    blocks: list[Block] = field(default_factory=list)


@dataclass
class ListBlock:
    items: list[Item] = field(default_factory=list)
    ordered: bool = False
    start: int = 1
    bullet: str = "-"
    tight: bool = True


@dataclass
class Quote:
    blocks: list[Block] = field(default_factory=list)


@dataclass
class RawBlock:
    """Block kept as canonical Markdown (code, thematic breaks, HTML...)."""
    text: str


Block = Union[Heading, Paragraph, TextBlock, Item, ListBlock, Quote, RawBlock]


@dataclass
class Document:
    blocks: list[Block] = field(default_factory=list)


@dataclass(frozen=True)
class FetchedDocument:
    title: str
    text: str
