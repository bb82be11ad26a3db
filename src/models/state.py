"""
Program state model and pipeline helper

Defines the ProgramState dataclass threaded through the CLI stages and
the pipeline() helper that composes them.
"""

import dataclasses
from functools import reduce
from pathlib import Path
from argparse import Namespace
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    State bus for the compile pipeline.

    Each stage copies the incoming state and fills in its own fields:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputSubdir, json
        - env_check: inputSourceFile, htmlOutputdir, envOK
        - source_parse: presentationMeta, slides
        - html_compile: compileResult
        - results_report: (terminal stage)

    Attributes:
        inputdir: Directory containing the markdown deck
        outputdir: Base output directory
        verbosity: Logging verbosity level (1-3)
        inputFile: Deck filename relative to inputdir
        outputSubdir: Subdirectory within outputdir for the built deck
        json: Also write slides.json next to the HTML
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the deck
        htmlOutputdir: Final output directory (outputdir / outputSubdir)
        presentationMeta: Front matter of the deck (PresentationMeta)
        slides: Slide list produced by the segmenter
        compileResult: Compiler result dict (output_file, slide_count, ...)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputSubdir: str = field(default=".")
    json: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    htmlOutputdir: Path = field(default=Path("/"))
    presentationMeta: Optional[Any] = field(default=None)
    slides: Optional[List[Any]] = field(default=None)  # List[Slide] at runtime
    compileResult: Optional[Dict] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Options that are not ProgramState fields are ignored.
        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}
        return cls(**{**filtered_options, "inputdir": inputdir, "outputdir": outputdir})

    def copy(self: PS) -> PS:
        """Shallow copy of the state"""
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Run ProgramState through each stage in order.

    pipeline(s, a, b, c) is c(b(a(s))), written left to right.
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
