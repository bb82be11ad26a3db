"""
Centralized logging using Loguru with context-aware verbosity.

LOG() checks the verbosity of the ProgramState bound to the current
context, so library code (segmenter, directive parser, compiler) can log
without being handed the state. With no state bound, LOG() is silent,
which keeps library use and tests quiet.

Usage:
    from sherp.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)
    LOG("Slides: 12", level=1)                       # default
    LOG("Segmented 40 blocks into 12 slides", level=2)  # -v
    LOG("Directives {'_color': 'blue'}", level=3)       # -vv
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <12}</cyan>:<cyan>{function: <16}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Bind a ProgramState (anything with a `verbosity` attribute) to the
    current logging context.
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the bound state's verbosity is at least `level`.

    Args:
        message: Log message to display
        level: 1=normal, 2=verbose (-v), 3=trace (-vv)
        **kwargs: Passed through to loguru
    """
    state = _program_state.get()

    if state is not None and getattr(state, 'verbosity', 0) >= level:
        logger.opt(depth=1).debug(message, **kwargs)
