"""
Slide segmentation over a markdown block tree

Splits an ordered list of mistune block tokens into slides at every
thematic break, while feeding comment blocks to the directive parser.

The scan is a single left-to-right pass with one accumulator:

    thematic_break  -> close the slide in progress (if it has content)
    comment         -> parse directives / collect speaker notes
    blank_line      -> ignored
    anything else   -> appended to the slide in progress

A run of blocks with no content (only comments, or two dividers in a row)
produces no slide, and whatever directives or notes it declared are
dropped along with it.

Example:
    >>> from sherp.lib.markdown import markdown_parse
    >>> blocks = markdown_parse("# A\\n\\n---\\n\\n# B\\n")
    >>> [s.index for s in Segmenter(blocks).slides_split()]
    [1, 2]
"""

from enum import Enum
from typing import Iterable, List

from ..models.slide import Block, Slide
from .directives import commentBody_extract, directives_parse
from .inheritance import DirectiveScope
from .log import LOG


class BlockKind(Enum):
    """How the segmenter treats a block token"""
    DIVIDER = "divider"
    COMMENT = "comment"
    BLANK = "blank"
    CONTENT = "content"


def block_kind(block: Block) -> BlockKind:
    """
    Classify a mistune block token.

    Any raw HTML block containing a comment opener counts as a comment,
    terminated or not.
    """
    block_type = block.get('type')
    if block_type == 'thematic_break':
        return BlockKind.DIVIDER
    if block_type == 'blank_line':
        return BlockKind.BLANK
    if block_type == 'block_html' and '<!--' in block.get('raw', ''):
        return BlockKind.COMMENT
    return BlockKind.CONTENT


class Segmenter:
    """
    Builds the slide list for one document

    Each instance owns its accumulators; build a new one per document.

    Attributes:
        blocks: Block tokens of the document, in order
        slides: Slides completed so far
        scope: Directive inheritance state
        content: Blocks of the slide in progress
        notes: Speaker notes of the slide in progress
    """

    def __init__(self, blocks: Iterable[Block]) -> None:
        self.blocks: List[Block] = list(blocks)
        self.slides: List[Slide] = []
        self.scope = DirectiveScope()
        self.content: List[Block] = []
        self.notes: List[str] = []

    def slides_split(self) -> List[Slide]:
        """
        Run the scan and return the slides in document order.

        Each call rescans the blocks from scratch.

        Returns:
            List of Slide with block-list content, 1-based indices
        """
        self.slides = []
        self.scope = DirectiveScope()
        self.content = []
        self.notes = []

        handlers = {
            BlockKind.DIVIDER: self.divider_handle,
            BlockKind.COMMENT: self.comment_handle,
            BlockKind.BLANK: lambda block: None,
            BlockKind.CONTENT: self.content_handle,
        }
        for block in self.blocks:
            handlers[block_kind(block)](block)

        if self.content:
            self.slide_flush()

        LOG(f"Segmented {len(self.blocks)} blocks into {len(self.slides)} slides", level=2)
        return self.slides

    def divider_handle(self, block: Block) -> None:
        if self.content:
            self.slide_flush()
        else:
            LOG("Empty run before divider; no slide emitted", level=3)
            self.scope.run_discard()
            self.notes = []

    def content_handle(self, block: Block) -> None:
        self.content.append(block)

    def comment_handle(self, block: Block) -> None:
        raw = block.get('raw', '')
        directives = directives_parse(raw)
        if directives:
            LOG(f"Directives {directives.to_dict()}", level=3)
            self.scope.directives_apply(directives)
            return

        body = commentBody_extract(raw)
        if body:
            self.notes.append(body)

    def slide_flush(self) -> None:
        """Close the slide in progress and start the next one"""
        slide = Slide(
            content=self.content,
            directives=self.scope.slide_close(),
            index=len(self.slides) + 1,
            notes=self.notes,
        )
        self.slides.append(slide)
        self.content = []
        self.notes = []
