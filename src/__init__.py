"""
sherp - Marp-style presentations from markdown

Splits one markdown document into slides at `---` dividers and resolves
the `<!-- key: value -->` directives that style each slide.
"""

__version__ = "1.0.0"

from .models import DirectiveName, DirectiveSet, Slide, directive_resolve
from .lib import (
    Compiler,
    LOG,
    deck_parse,
    directives_parse,
    slides_fromText,
    slides_fromTree,
    state_connectToLogger,
)

__all__ = [
    "DirectiveName",
    "DirectiveSet",
    "Slide",
    "directive_resolve",
    "Compiler",
    "LOG",
    "deck_parse",
    "directives_parse",
    "slides_fromText",
    "slides_fromTree",
    "state_connectToLogger",
    "__version__",
]
