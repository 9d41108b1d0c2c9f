"""Heading-driven document normalization and anchor link rewriting."""

import logging
from collections.abc import Iterable

from .model import (
    Block,
    Document,
    Emph,
    Heading,
    Inline,
    Item,
    Link,
    ListBlock,
    Paragraph,
    Quote,
    Strong,
    TextBlock,
)
from .text import inline_text
from .utils import slug_outline, slug_regular

logger = logging.getLogger(__name__)


def doc_title(doc: Document) -> str:
    """Return the text of the first top-level heading, or "" if there is none."""
    for block in doc.blocks:
        if isinstance(block, Heading):
            return inline_text(block.inlines)
    return ""


def drop_leading_h1(doc: Document) -> bool:
    """Remove the first block when it is a level-1 heading; True if removed."""
    if not doc.blocks:
        return False
    first = doc.blocks[0]
    if isinstance(first, Heading) and first.level == 1:
        del doc.blocks[0]
        return True
    return False


def build_slug_catalog(doc: Document) -> dict[str, str]:
    """
    Map regular heading fragments to Outline heading fragments.

    Only top-level headings are considered. When two headings share a
    regular slug the later one wins.
    """
    catalog: dict[str, str] = {}
    for block in doc.blocks:
        if not isinstance(block, Heading):
            continue
        text = inline_text(block.inlines)
        key = "#" + slug_regular(text)
        catalog[key] = "#" + slug_outline(text)
        logger.debug("heading %r: %s -> %s", text, key, catalog[key])
    return catalog


def _rewrite_inlines(inlines: Iterable[Inline], catalog: dict[str, str]) -> int:
    count = 0
    for node in inlines:
        if isinstance(node, (Strong, Emph)):
            count += _rewrite_inlines(node.children, catalog)
        elif isinstance(node, Link):
            target = catalog.get(node.url)
            if target is not None:
                node.url = target
                count += 1
    return count


def _rewrite_block(block: Block, catalog: dict[str, str]) -> int:
    if isinstance(block, (Item, Quote)):
        return sum(_rewrite_block(b, catalog) for b in block.blocks)
    if isinstance(block, ListBlock):
        return sum(_rewrite_block(item, catalog) for item in block.items)
    if isinstance(block, (Paragraph, TextBlock)):
        return _rewrite_inlines(block.inlines, catalog)
    # headings and raw blocks keep their links as written
    return 0


def rewrite_links(doc: Document, catalog: dict[str, str]) -> int:
    """
    Point in-document links at the fragments given by `catalog`, in place.

    Links whose target is not a catalog key are left alone. Returns the
    number of links rewritten.
    """
    if not catalog:
        return 0
    return sum(_rewrite_block(block, catalog) for block in doc.blocks)


def rewrite_heading_links(doc: Document) -> int:
    """Rewrite GitHub-style heading links in `doc` to Outline-style ones."""
    return rewrite_links(doc, build_slug_catalog(doc))
