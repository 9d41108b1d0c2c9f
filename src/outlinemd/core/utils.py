"""Heading slug functions."""

import unicodedata

# Characters Outline removes from heading text before building an anchor.
OUTLINE_DROPPED = frozenset("[!\"#$%&'.()*+,\\/:;<=>?@[]\\^_`{|}~]")


def _lower(ch: str) -> str:
    # keep one character per input character ("\u0130" -> "i")
    return ch.lower()[0]


def slug_regular(text: str) -> str:
    """
    Build a heading anchor the way GitHub and VS Code preview do.

    Letters and decimal digits are lowercased, every other character
    becomes `-`. Runs of `-` are kept as they are.

    Examples:
        >>> slug_regular("Parallel transport")
        'parallel-transport'
        >>> slug_regular("Hello, World")
        'hello--world'
    """
    return "".join(
        _lower(ch) if ch.isalpha() or ch.isdecimal() else "-"
        for ch in text
    )


def _is_separator(ch: str) -> bool:
    return ch.isspace() or unicodedata.category(ch).startswith("P")


def slug_outline(text: str) -> str:
    """
    Build a heading anchor the way Outline does.

    - Drop characters from `OUTLINE_DROPPED`
    - Whitespace and other punctuation become a single `-`
    - Lowercase everything else
    - Strip trailing `-` and prefix with `h-`

    Examples:
        >>> slug_outline("Getting Started!")
        'h-getting-started'
        >>> slug_outline("C++ & Rust")
        'h-c-rust'
    """
    out = []
    prev_dash = False
    for ch in text:
        if ch in OUTLINE_DROPPED:
            continue
        if _is_separator(ch):
            if not prev_dash:
                prev_dash = True
                out.append("-")
            continue
        prev_dash = False
        out.append(_lower(ch))
    return "h-" + "".join(out).rstrip("-")
