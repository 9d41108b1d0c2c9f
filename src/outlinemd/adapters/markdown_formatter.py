from collections.abc import Iterable

from ..core.model import (
    Block,
    Document,
    Emoji,
    Emph,
    Escaped,
    Heading,
    Inline,
    Item,
    LineBreak,
    Link,
    ListBlock,
    Paragraph,
    Plain,
    Quote,
    RawBlock,
    RawInline,
    Strong,
    TextBlock,
)
from ..core.ports import FormatterStrategy


def _link_destination(url: str) -> str:
    if not url or " " in url or url.count("(") != url.count(")"):
        return f"<{url}>"
    return url


def _indent(lines: list[str], first: str, rest: str) -> list[str]:
    out = []
    for i, line in enumerate(lines):
        prefix = first if i == 0 else rest
        # no trailing whitespace on blank lines
        out.append(prefix + line if line else prefix.rstrip())
    return out


class MarkdownFormatter(FormatterStrategy):
    """
    Serialize a Document back to Markdown.

    Output is canonical rather than byte-for-byte faithful: ATX headings,
    `*`/`**` emphasis, inline links and a blank line between blocks.
    """

    def format(self, doc: Document) -> str:
        if not doc.blocks:
            return ""
        return "\n".join(self._join_blocks(doc.blocks, loose=True)) + "\n"

    def format_inlines(self, inlines: Iterable[Inline]) -> str:
        return "".join(self._inline(node) for node in inlines)

    def _join_blocks(self, blocks: list[Block], loose: bool) -> list[str]:
        lines: list[str] = []
        for i, b in enumerate(blocks):
            if i and loose:
                lines.append("")
            lines.extend(self._block(b))
        return lines

    def _block(self, b: Block) -> list[str]:
        if isinstance(b, Heading):
            return ["#" * b.level + " " + self.format_inlines(b.inlines)]
        if isinstance(b, (Paragraph, TextBlock)):
            return self.format_inlines(b.inlines).split("\n")
        if isinstance(b, ListBlock):
            return self._list(b)
        if isinstance(b, Item):
            return self._join_blocks(b.blocks, loose=True)
        if isinstance(b, Quote):
            return _indent(self._join_blocks(b.blocks, loose=True), "> ", "> ")
        if isinstance(b, RawBlock):
            return b.text.split("\n")
        return []

    def _list(self, b: ListBlock) -> list[str]:
        lines: list[str] = []
        for n, item in enumerate(b.items, b.start):
            marker = f"{n}{b.bullet} " if b.ordered else f"{b.bullet} "
            body = self._join_blocks(item.blocks, loose=not b.tight) or [""]
            if n != b.start and not b.tight:
                lines.append("")
            lines.extend(_indent(body, marker, " " * len(marker)))
        return lines

    def _inline(self, node: Inline) -> str:
        if isinstance(node, (Plain, Emoji, RawInline)):
            return node.text
        if isinstance(node, Escaped):
            return "\\" + node.text
        if isinstance(node, Strong):
            return "**" + self.format_inlines(node.children) + "**"
        if isinstance(node, Emph):
            return "*" + self.format_inlines(node.children) + "*"
        if isinstance(node, Link):
            title = ""
            if node.title:
                title = ' "{}"'.format(node.title.replace('"', '\\"'))
            text = self.format_inlines(node.children)
            return f"[{text}]({_link_destination(node.url)}{title})"
        if isinstance(node, LineBreak):
            return "\\\n" if node.hard else "\n"
        return ""
