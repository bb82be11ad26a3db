"""
YAML front matter for decks.

A deck may open with a YAML block fenced by `---` lines:

    ---
    title: Quarterly review
    theme: gaia
    paginate: true
    ---

    # First slide

The block is parsed into PresentationMeta and removed before the body is
handed to the segmenter, so its fences are never read as slide dividers.
"""

import re
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import ValidationError

from ..models.presentation import PresentationMeta
from .log import LOG


class FrontMatterError(Exception):
    """Raised when a deck's front matter cannot be parsed or validated"""
    pass


FRONT_MATTER_PATTERN = re.compile(
    r'\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE
)


def frontMatter_load(block: str) -> Optional[PresentationMeta]:
    """
    Parse the YAML text between the fences into PresentationMeta.

    Only a mapping, or a blank block, counts as front matter. Anything
    else (a list, a scalar, or markdown such as `# Title` that YAML reads
    as a comment) means the opening `---` was a slide divider.

    Returns:
        PresentationMeta, or None if the block is not front matter

    Raises:
        FrontMatterError: On YAML syntax errors or field values pydantic
                          rejects
    """
    try:
        data: Any = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Failed to parse front matter: {e}")

    if data is None and not block.strip():
        data = {}
    if not isinstance(data, dict):
        LOG(
            f"Leading '---' block is not front matter ({type(data).__name__}); "
            "reading it as slides",
            level=2,
        )
        return None

    fields: Dict[str, Any] = {str(k): v for k, v in data.items()}
    try:
        return PresentationMeta(**fields)
    except ValidationError as e:
        raise FrontMatterError(f"Invalid front matter: {e}")


def frontMatter_split(text: str) -> Tuple[PresentationMeta, str]:
    """
    Separate front matter from the deck body.

    Returns:
        (metadata, body). Without front matter the metadata holds the
        configured defaults and body is the text unchanged.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return PresentationMeta(), text
    meta = frontMatter_load(match.group(1))
    if meta is None:
        return PresentationMeta(), text
    return meta, text[match.end():]
