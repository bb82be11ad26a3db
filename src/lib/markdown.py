"""
Markdown front end: mistune block tree in, slides out

Two entry points share the same segmentation core:

    slides_fromTree(blocks)  - block tokens already parsed by mistune;
                               slide content stays a list of tokens
    slides_fromText(text)    - raw markdown; slide content is rendered HTML

Comment blocks never appear in slide content from either entry point.
Comments carrying directives are consumed; any other comment is kept as a
speaker note on its slide.
"""

from dataclasses import replace
from typing import List, Optional, Tuple

import mistune
from mistune.core import BlockState
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

from ..config import appsettings
from ..models.presentation import PresentationMeta
from ..models.slide import Block, Slide
from .frontmatter import frontMatter_split
from .segmenter import Segmenter
from .log import LOG


class HtmlRenderer(mistune.HTMLRenderer):
    """
    mistune HTML renderer with pygments-highlighted fenced code

    Raw HTML passes through unescaped; slide authors mix HTML into decks.
    """

    def __init__(self, pygments_style: str = "") -> None:
        super().__init__(escape=False)
        self.pygments_style = pygments_style or appsettings.pygments_style

    def block_code(self, code: str, info: Optional[str] = None) -> str:
        language = info.strip().split(None, 1)[0] if info and info.strip() else 'text'

        lexer: Lexer
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound:
            LOG(f"No lexer for '{language}', using plain text", level=3)
            lexer = TextLexer()

        formatter = HtmlFormatter(style=self.pygments_style, noclasses=True)
        return highlight(code, lexer, formatter)


_markdown = mistune.create_markdown(renderer='ast')


def markdown_parse(text: str) -> List[Block]:
    """
    Parse markdown into top-level mistune block tokens.

    Example:
        >>> [b['type'] for b in markdown_parse("# A\\n\\n---\\n")]
        ['heading', 'blank_line', 'thematic_break']
    """
    return _markdown(text)


def blocks_render(blocks: List[Block], renderer: Optional[HtmlRenderer] = None) -> str:
    """Render block tokens (as produced by markdown_parse) to HTML"""
    renderer = renderer or HtmlRenderer()
    return renderer(blocks, BlockState())


def slides_fromTree(blocks: List[Block]) -> List[Slide]:
    """
    Split a parsed block tree into slides.

    Args:
        blocks: Top-level mistune block tokens of one document

    Returns:
        Slides whose content is the list of their block tokens
    """
    return Segmenter(blocks).slides_split()


def slides_fromText(text: str, renderer: Optional[HtmlRenderer] = None) -> List[Slide]:
    """
    Split raw markdown into slides with rendered HTML content.

    The text is parsed as a whole, so a `---` inside a fenced code block
    is never mistaken for a divider.

    Example:
        >>> slides = slides_fromText("# A\\n\\n<!-- paginate: true -->\\n\\n---\\n\\n# B\\n")
        >>> [(s.content, s.directives) for s in slides]
        [('<h1>A</h1>\\n', DirectiveSet({'paginate': True})), ('<h1>B</h1>\\n', DirectiveSet({'paginate': True}))]
    """
    renderer = renderer or HtmlRenderer()
    return [
        replace(slide, content=blocks_render(slide.content, renderer))
        for slide in slides_fromTree(markdown_parse(text))
    ]


def deck_parse(text: str) -> Tuple[PresentationMeta, List[Slide]]:
    """
    Parse a complete deck: front matter, then slides from the body.

    Returns:
        (PresentationMeta, slides with block-list content)

    Raises:
        FrontMatterError: If the front matter is present but invalid
    """
    meta, body = frontMatter_split(text)
    LOG(f"Front matter: title={meta.title!r} theme={meta.theme!r}", level=2)
    return meta, slides_fromTree(markdown_parse(body))
