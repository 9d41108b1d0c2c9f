"""Plain-text flattening of inline content."""

from collections.abc import Iterable

from .model import Emoji, Emph, Escaped, Inline, Plain, Strong


def inline_text(inlines: Iterable[Inline]) -> str:
    """
    Concatenate the visible text of an inline sequence.

    Plain text, escaped characters and emoji contribute their text; strong
    and emphasis spans are flattened recursively in document order. Every
    other inline (links, code, breaks, raw markup) contributes nothing.
    """
    parts = []
    for node in inlines:
        if isinstance(node, (Plain, Escaped, Emoji)):
            parts.append(node.text)
        elif isinstance(node, (Strong, Emph)):
            parts.append(inline_text(node.children))
    return "".join(parts)
