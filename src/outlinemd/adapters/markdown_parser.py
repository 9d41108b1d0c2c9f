import re

import marko
from marko import block, inline
from marko.helpers import MarkoExtension
from marko.md_renderer import MarkdownRenderer

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
from ..core.ports import ParserStrategy


class EmojiShortcode(inline.InlineElement):
    """`:name:` emoji shortcode."""

    pattern = re.compile(r":([a-z][a-z0-9_+-]*):")
    parse_children = False
    # loses any overlap with links, code and emphasis
    priority = 1

    def __init__(self, match: re.Match) -> None:
        self.text = match.group(0)


class EmojiRendererMixin:
    def render_emoji_shortcode(self, element: EmojiShortcode) -> str:
        return element.text


EMOJI = MarkoExtension(
    elements=[EmojiShortcode],
    renderer_mixins=[EmojiRendererMixin],
)


class _Converter:
    """Walks one marko tree and builds the matching Document tree."""

    def __init__(self, md: marko.Markdown, root: block.Document):
        self.md = md
        self.root = root

    def markdown(self, element) -> str:
        # marko's own Markdown output for nodes we keep verbatim
        with self.md.renderer as r:
            r.root_node = self.root
            return r.render(element)

    def blocks(self, elements, tight: bool = False) -> list[Block]:
        out = []
        for el in elements:
            converted = self.block(el, tight)
            if converted is not None:
                out.append(converted)
        return out

    def block(self, el, tight: bool) -> Block | None:
        if isinstance(el, (block.BlankLine, block.LinkRefDef)):
            return None
        if isinstance(el, (block.Heading, block.SetextHeading)):
            return Heading(level=el.level, inlines=self.inlines(el.children))
        if isinstance(el, block.Paragraph):
            inlines = self.inlines(el.children)
            return TextBlock(inlines) if tight else Paragraph(inlines)
        if isinstance(el, block.List):
            items = [
                Item(self.blocks(li.children, tight=el.tight))
                for li in el.children
                if isinstance(li, block.ListItem)
            ]
            return ListBlock(
                items=items,
                ordered=el.ordered,
                start=el.start if el.ordered else 1,
                # marko keeps the whole first marker ("3)") for ordered lists
                bullet=el.bullet[-1] if el.ordered else el.bullet,
                tight=el.tight,
            )
        if isinstance(el, block.Quote):
            return Quote(self.blocks(el.children))
        return RawBlock(self.markdown(el).rstrip("\n"))

    def inlines(self, elements) -> list[Inline]:
        if isinstance(elements, str):
            return [Plain(elements)] if elements else []
        return [self.inline(el) for el in elements]

    def inline(self, el) -> Inline:
        if isinstance(el, inline.Literal):
            return Escaped(el.children)
        if isinstance(el, inline.RawText):
            return Plain(el.children)
        if isinstance(el, EmojiShortcode):
            return Emoji(el.text)
        if isinstance(el, inline.StrongEmphasis):
            return Strong(self.inlines(el.children))
        if isinstance(el, inline.Emphasis):
            return Emph(self.inlines(el.children))
        if isinstance(el, inline.Image):
            return RawInline(self.markdown(el))
        if isinstance(el, inline.Link):
            return Link(
                url=el.dest,
                children=self.inlines(el.children),
                title=el.title or None,
            )
        if isinstance(el, inline.LineBreak):
            return LineBreak(hard=not el.soft)
        return RawInline(self.markdown(el))


class MarkdownParser(ParserStrategy):
    """CommonMark parser backed by marko."""

    def parse(self, text: str) -> Document:
        md = marko.Markdown(renderer=MarkdownRenderer, extensions=[EMOJI])
        root = md.parse(text)
        conv = _Converter(md, root)
        return Document(blocks=conv.blocks(root.children))
