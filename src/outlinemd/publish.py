"""Conversion between local Markdown files and Outline documents."""

import logging
from dataclasses import dataclass

from .core.headings import doc_title, drop_leading_h1, rewrite_heading_links
from .core.model import DocumentId, FetchedDocument
from .core.ports import FormatterStrategy, ParserStrategy

logger = logging.getLogger(__name__)


@dataclass
class PreparedUpdate:
    """Result of turning a local file into an update request."""

    title: str
    text: str
    links_rewritten: int = 0


def parse_url_id(value: str) -> DocumentId:
    """
    Extract the url-id from a document URL or url-id.

    Outline document URLs end in "<slug>-<urlid>", so everything after the
    last "-" is the id. Values without "-" are returned unchanged.

    Examples:
        >>> parse_url_id("https://app.getoutline.com/doc/release-notes-Ab12Cd34")
        'Ab12Cd34'
        >>> parse_url_id("Ab12Cd34")
        'Ab12Cd34'
    """
    value = value.strip().rstrip("/")
    _, _, tail = value.rpartition("-")
    return tail


def prepare_update(
    source: str,
    parser: ParserStrategy,
    formatter: FormatterStrategy,
) -> PreparedUpdate:
    """
    Normalize a local Markdown document for upload.

    - Title is the first top-level heading (taken before anything is removed)
    - A leading level-1 heading is dropped from the body
    - Links to headings are rewritten to Outline anchors
    """
    doc = parser.parse(source)
    title = doc_title(doc)
    if drop_leading_h1(doc):
        logger.debug("dropped leading title heading %r", title)
    count = rewrite_heading_links(doc)
    logger.debug("rewrote %d heading link(s)", count)
    return PreparedUpdate(title=title, text=formatter.format(doc), links_rewritten=count)


def render_fetched(doc: FetchedDocument) -> str:
    """Render a fetched document as a local file; the body is kept verbatim."""
    return f"# {doc.title}\n\n{doc.text}\n"
