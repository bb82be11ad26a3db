"""
Slide styling derived from directives

Turns a slide's effective directive values into the inline CSS, class
list, and pagination flag the compiler writes onto each <section>.
"""

from typing import List, Mapping, Tuple

from ..models.directives import DirectiveName, DirectiveValue, directive_resolve


# Directives emitted as inline CSS, in output order
STYLE_PROPERTIES: Tuple[Tuple[DirectiveName, str], ...] = (
    (DirectiveName.BACKGROUND_COLOR, 'background-color'),
    (DirectiveName.BACKGROUND_IMAGE, 'background-image'),
    (DirectiveName.BACKGROUND_POSITION, 'background-position'),
    (DirectiveName.BACKGROUND_REPEAT, 'background-repeat'),
    (DirectiveName.BACKGROUND_SIZE, 'background-size'),
    (DirectiveName.COLOR, 'color'),
)


def cssValue_format(value: DirectiveValue) -> str:
    """CSS text for a directive value; booleans render lowercase"""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return value


def slideStyles_get(directives: Mapping[str, DirectiveValue]) -> str:
    """
    Build the inline style attribute value for a slide.

    Scoped values win over inherited ones. Unset or falsy values are
    skipped.

    Example:
        >>> slideStyles_get({"backgroundColor": "#000", "color": "red", "_color": "blue"})
        'background-color: #000; color: blue'
    """
    styles: List[str] = []
    for name, css_property in STYLE_PROPERTIES:
        value = directive_resolve(directives, name)
        if value:
            styles.append(f"{css_property}: {cssValue_format(value)}")
    return '; '.join(styles)


def slideClasses_get(directives: Mapping[str, DirectiveValue]) -> List[str]:
    """CSS classes for a slide: 'slide' plus the effective `class` directive"""
    classes = ['slide']
    value = directive_resolve(directives, DirectiveName.CLASS)
    if isinstance(value, str):
        classes.extend(value.split())
    return classes


def slidePaginate_is(directives: Mapping[str, DirectiveValue], default: bool = False) -> bool:
    """
    Whether a slide shows its page number.

    Falls back to the document default when no paginate directive applies.
    A string value counts only if it reads 'true'.
    """
    value = directive_resolve(directives, DirectiveName.PAGINATE)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return value.strip().lower() == 'true'
