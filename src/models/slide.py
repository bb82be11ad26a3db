"""
Slide model

A Slide is the unit handed to the renderer: the content blocks of one
divider-delimited run plus the directives resolved for it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from .directives import DirectiveSet


# A mistune block token, e.g. {"type": "heading", "attrs": {"level": 1}, ...}
Block = Dict[str, Any]


@dataclass
class Slide:
    """
    One slide of the deck

    Attributes:
        content: Block tokens for the slide (tree entry point) or the
                 rendered HTML string (text entry point)
        directives: Snapshot of the directives in effect on this slide
        index: 1-based position in the deck
        notes: Bodies of comments that carried no directives, in order
    """
    content: Union[List[Block], str]
    directives: DirectiveSet = field(default_factory=DirectiveSet)
    index: int = 0
    notes: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form (slides.json)"""
        return {
            "index": self.index,
            "content": self.content,
            "directives": self.directives.to_dict(),
            "notes": list(self.notes),
        }
