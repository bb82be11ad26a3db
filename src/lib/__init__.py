"""
sherp core library

Markdown deck segmentation, directive parsing and inheritance, and HTML
page assembly.
"""

from .directives import directives_parse, value_coerce
from .inheritance import DirectiveScope
from .segmenter import Segmenter, BlockKind, block_kind
from .frontmatter import FrontMatterError, frontMatter_split
from .markdown import (
    HtmlRenderer,
    markdown_parse,
    blocks_render,
    slides_fromTree,
    slides_fromText,
    deck_parse,
)
from .styles import slideStyles_get, slideClasses_get, slidePaginate_is
from .compiler import Compiler
from .log import LOG, state_connectToLogger

__all__ = [
    "directives_parse",
    "value_coerce",
    "DirectiveScope",
    "Segmenter",
    "BlockKind",
    "block_kind",
    "FrontMatterError",
    "frontMatter_split",
    "HtmlRenderer",
    "markdown_parse",
    "blocks_render",
    "slides_fromTree",
    "slides_fromText",
    "deck_parse",
    "slideStyles_get",
    "slideClasses_get",
    "slidePaginate_is",
    "Compiler",
    "LOG",
    "state_connectToLogger",
]
