"""
Models package for sherp

Data structures shared by the segmenter, the compiler and the CLI pipeline.
"""

from .state import ProgramState, pipeline
from .directives import (
    SCOPE_PREFIX,
    DirectiveKey,
    DirectiveName,
    DirectiveSet,
    DirectiveValue,
    directive_resolve,
)
from .slide import Block, Slide
from .presentation import PresentationMeta

__all__ = [
    "ProgramState",
    "pipeline",
    "SCOPE_PREFIX",
    "DirectiveKey",
    "DirectiveName",
    "DirectiveSet",
    "DirectiveValue",
    "directive_resolve",
    "Block",
    "Slide",
    "PresentationMeta",
]
