"""
Directive extraction from HTML comments

A directive comment is an HTML comment whose lines read `key: value`:

    <!--
    paginate: true
    _backgroundColor: "#202228"
    -->

Each recognized line contributes one entry to a DirectiveSet. This is a
line scanner, not a YAML parser: lines of any other shape are skipped
without complaint, and nothing here raises on malformed input.
"""

import re
from typing import Dict, List, Optional, Tuple

from ..models.directives import DirectiveSet, DirectiveValue
from .log import LOG


# First complete comment in a raw HTML block
COMMENT_PATTERN = re.compile(r'<!--\s*([\s\S]*?)\s*-->')

# One directive line: optional scope prefix, ASCII letters, colon, value
LINE_PATTERN = re.compile(r'^\s*(_?[a-zA-Z]+)\s*:\s*(.+?)\s*$')

_QUOTES: Tuple[str, ...] = ('"', "'")
_BOOLEANS: Dict[str, bool] = {'true': True, 'false': False}


def commentBody_extract(raw: str) -> Optional[str]:
    """
    Get the trimmed body of the first complete HTML comment in raw.

    Returns:
        Comment body, or None if no `<!-- ... -->` pair is present
        (e.g. an unterminated comment)

    Example:
        >>> commentBody_extract("<!-- paginate: true -->\\n")
        'paginate: true'
        >>> commentBody_extract("<!-- never closed") is None
        True
    """
    match = COMMENT_PATTERN.search(raw)
    if not match:
        return None
    return match.group(1).strip()


def value_coerce(text: str) -> DirectiveValue:
    """
    Coerce a directive value.

    In priority order:
        1. One layer of matching quotes is stripped; the result stays a str
        2. Exactly `true` / `false` become bool
        3. Anything else is kept verbatim (already trimmed)

    Example:
        >>> value_coerce('"#ff0000"')
        '#ff0000'
        >>> value_coerce('true')
        True
        >>> value_coerce("'true'")
        'true'
    """
    value = text.strip()
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    if value in _BOOLEANS:
        return _BOOLEANS[value]
    return value


def directiveLines_scan(body: str) -> List[Tuple[str, DirectiveValue]]:
    """
    Scan comment body text line by line for `key: value` pairs.

    Returns:
        (key, coerced value) pairs in source order; repeated keys are kept
    """
    pairs: List[Tuple[str, DirectiveValue]] = []
    for line in body.split('\n'):
        match = LINE_PATTERN.match(line)
        if not match:
            if line.strip():
                LOG(f"Skipping non-directive line: {line.strip()!r}", level=3)
            continue
        key, value = match.groups()
        pairs.append((key, value_coerce(value)))
    return pairs


def directives_parse(raw: str) -> DirectiveSet:
    """
    Parse the directives carried by a raw HTML comment block.

    Args:
        raw: Raw HTML including the comment delimiters

    Returns:
        DirectiveSet of every recognized line (last occurrence of a key
        wins). Empty if the comment is unterminated or has no
        directive lines.

    Example:
        >>> directives_parse("<!--\\npaginate: true\\n_color: 'blue'\\n-->")
        DirectiveSet({'paginate': True, '_color': 'blue'})
    """
    body = commentBody_extract(raw)
    if body is None:
        LOG("Unterminated comment block; no directives read", level=3)
        return DirectiveSet()
    return DirectiveSet(dict(directiveLines_scan(body)))
