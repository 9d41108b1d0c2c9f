"""Tests for preparing uploads and rendering downloads."""

from outlinemd.adapters.markdown_formatter import MarkdownFormatter
from outlinemd.adapters.markdown_parser import MarkdownParser
from outlinemd.core.model import FetchedDocument
from outlinemd.publish import parse_url_id, prepare_update, render_fetched

SOURCE = """# Guide

Jump to [setup](#getting-started-) or [the FAQ](#faq).

## Getting Started!

- see *[faq](#faq)*
- external [site](https://example.com)

## FAQ

> back to [**start**](#getting-started-)
"""


def prepare(text):
    return prepare_update(text, MarkdownParser(), MarkdownFormatter())


def test_prepare_update_title_and_body():
    """Test title comes from the H1 and the H1 leaves the body."""
    prepared = prepare(SOURCE)
    assert prepared.title == "Guide"
    assert not prepared.text.startswith("# Guide")
    assert prepared.text.startswith("Jump to ")


def test_prepare_update_rewrites_links():
    """Test heading links point at Outline anchors everywhere."""
    prepared = prepare(SOURCE)
    assert prepared.links_rewritten == 4
    assert "[setup](#h-getting-started)" in prepared.text
    assert "[the FAQ](#h-faq)" in prepared.text
    assert "*[faq](#h-faq)*" in prepared.text
    assert "[**start**](#h-getting-started)" in prepared.text
    assert "[site](https://example.com)" in prepared.text
    assert "#getting-started-)" not in prepared.text


def test_prepare_update_keeps_headings():
    """Test section headings stay in the body unchanged."""
    prepared = prepare(SOURCE)
    assert "## Getting Started!\n" in prepared.text
    assert "## FAQ\n" in prepared.text


def test_prepare_update_exact_output():
    """Test complete output for a small document."""
    prepared = prepare("# Title\n\n## Sub\n\nBody [x](#sub).\n")
    assert prepared.title == "Title"
    assert prepared.text == "## Sub\n\nBody [x](#h-sub).\n"


def test_prepare_update_title_from_h2():
    """Test a document without H1 keeps its first heading in the body."""
    prepared = prepare("## Notes\n\ntext\n")
    assert prepared.title == "Notes"
    assert prepared.text == "## Notes\n\ntext\n"


def test_prepare_update_no_headings():
    """Test documents without headings get no title and no rewrites."""
    prepared = prepare("Plain [link](#intro).\n")
    assert prepared.title == ""
    assert prepared.links_rewritten == 0
    assert prepared.text == "Plain [link](#intro).\n"


def test_parse_url_id():
    """Test url-ids are taken from the end of document URLs."""
    assert parse_url_id("https://app.getoutline.com/doc/release-notes-Ab12Cd34") == "Ab12Cd34"
    assert parse_url_id("https://app.getoutline.com/doc/notes-Ab12Cd34/") == "Ab12Cd34"
    assert parse_url_id("notes-Ab12Cd34") == "Ab12Cd34"
    assert parse_url_id("Ab12Cd34") == "Ab12Cd34"


def test_render_fetched():
    """Test fetched documents get their title back as an H1."""
    doc = FetchedDocument(title="Guide", text="Some *text* [x](#h-intro)")
    assert render_fetched(doc) == "# Guide\n\nSome *text* [x](#h-intro)\n"


def test_prepare_update_ordered_lists():
    """Test ordered list numbering and delimiters are preserved."""
    prepared = prepare("# T\n\n3) a\n4) b\n")
    assert prepared.text == "3) a\n4) b\n"

    prepared = prepare("1. one\n2. [two](#intro)\n\n## Intro\n")
    assert prepared.text == "1. one\n2. [two](#h-intro)\n\n## Intro\n"
