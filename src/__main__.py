#!/usr/bin/env python3
"""
sherp - Marp-style presentations from markdown

Compiles one markdown deck into a standalone HTML presentation.

As with other ChRIS-style apps, the CLI is a "plugin": positional input and
output directories, with the deck named relative to the input directory.

Deck format:
    - YAML front matter (optional): title, theme, paginate, ...
    - `---` on its own line starts a new slide
    - `<!-- key: value -->` comments set directives; they carry over to
      later slides unless the key is prefixed with `_`

Usage:
    sherp inputdir/ outputdir/ --inputFile deck.md

Examples:
    # Basic compilation
    sherp . output/ --inputFile talk.md

    # Into a subdirectory, also dumping the slide list
    sherp . output/ --inputFile talk.md --outputSubdir talk/ --json

    # Verbose output
    sherp . output/ --inputFile talk.md -vv
"""

import sys
import traceback
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from . import __version__
from .config import appsettings
from .lib import Compiler, FrontMatterError, LOG, deck_parse, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
      _
  ___| |__   ___ _ __ _ __
 / __| '_ \ / _ \ '__| '_ \
 \__ \ | | |  __/ |  | |_) |
 |___/_| |_|\___|_|  | .__/
                     |_|
  Marp-style presentations made simple
"""

parser = ArgumentParser(
    description="sherp - compile a markdown deck into an HTML presentation",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Markdown deck (relative to inputdir)"
)

parser.add_argument(
    "--outputSubdir",
    default=".",
    type=str,
    help="Subdirectory within outputdir for the compiled deck",
)

parser.add_argument(
    "--json",
    default=False,
    action="store_true",
    help="Also write the slide list with resolved directives as JSON",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate the input deck and create the output directory.

    Returns:
        ProgramState with inputSourceFile, htmlOutputdir and envOK set

    Exits:
        1 if the input deck does not exist
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.htmlOutputdir = state.outputdir / state.outputSubdir
    state.htmlOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.htmlOutputdir}", level=2)

    state.envOK = True
    return state


def source_parse(inputstate: ProgramState) -> ProgramState:
    """
    Read the deck and split it into slides.

    Returns:
        ProgramState with presentationMeta and slides set

    Exits:
        1 if the file cannot be read or its front matter is invalid
    """
    state = inputstate.copy()

    LOG("Reading source file...", level=1)
    try:
        source = state.inputSourceFile.read_text(encoding="utf-8")
        LOG(f"Read {len(source)} characters from {state.inputSourceFile.name}", level=2)
    except OSError as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG("Splitting deck into slides...", level=1)
    try:
        state.presentationMeta, state.slides = deck_parse(source)
    except FrontMatterError as e:
        print(f"Front matter error: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Found {len(state.slides)} slides", level=2)
    return state


def html_compile(inputstate: ProgramState) -> ProgramState:
    """
    Compile the slide list to a standalone HTML presentation.

    Returns:
        ProgramState with compileResult set (status, output_file,
        slide_count, json_file)

    Exits:
        1 if there are no slides or compilation fails
    """
    state = inputstate.copy()

    LOG("Compiling slides to HTML...", level=1)

    if not state.slides:
        print("Error: Deck contains no slides", file=sys.stderr)
        sys.exit(1)

    try:
        compiler = Compiler(
            slides=state.slides,
            output_dir=str(state.htmlOutputdir),
            meta=state.presentationMeta,
            verbosity=state.verbosity,
            write_json=state.json,
        )
        state.compileResult = compiler.compile()
        LOG(f"Compilation complete: {state.compileResult['slide_count']} slides", level=2)
    except Exception as e:
        print(f"Compilation error: {e}", file=sys.stderr)
        if state.verbosity >= 3 or appsettings.debug_mode:
            traceback.print_exc()
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Report where the compiled deck was written.

    Exits:
        1 if compileResult is missing
    """
    state: ProgramState = inputstate.copy()
    if not state.compileResult:
        print("Error: Compilation failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Compilation successful!", level=1)
    LOG(f"  Output: {state.compileResult['output_file']}", level=1)
    if state.compileResult.get('json_file'):
        LOG(f"  Slide list: {state.compileResult['json_file']}", level=1)
    LOG(f"  Slides: {state.compileResult['slide_count']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="sherp - Marp-style presentations from markdown",
    category="Visualization",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Compile a markdown deck to HTML.

    Pipeline:
        1. env_check: Validate paths
        2. source_parse: Front matter + slide segmentation
        3. html_compile: Page assembly
        4. results_report: Summary

    Args:
        options: CLI arguments (inputFile, outputSubdir, json, verbosity)
        inputdir: Directory containing the deck
        outputdir: Directory where the compiled deck is written
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, source_parse, html_compile, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
