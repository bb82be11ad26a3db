"""
Directive vocabulary and directive set models

Defines the closed set of directive names understood by the renderer,
the scoped/unscoped key split, and the DirectiveSet mapping that carries
a slide's resolved directives.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Optional, Union


DirectiveValue = Union[bool, str]

# Prefix marking a directive as scoped to the slide that declares it
SCOPE_PREFIX: str = '_'


class DirectiveName(str, Enum):
    """
    Directive names interpreted downstream

    Any other `key: value` line is still accepted and stored, but lands
    in the unknown bucket of a DirectiveSet.
    """
    PAGINATE = "paginate"
    HEADER = "header"
    FOOTER = "footer"
    CLASS = "class"
    BACKGROUND_COLOR = "backgroundColor"
    BACKGROUND_IMAGE = "backgroundImage"
    BACKGROUND_POSITION = "backgroundPosition"
    BACKGROUND_REPEAT = "backgroundRepeat"
    BACKGROUND_SIZE = "backgroundSize"
    COLOR = "color"


@dataclass(frozen=True)
class DirectiveKey:
    """
    A raw directive key split into its name and scope

    Attributes:
        name: Directive name without the scope prefix (e.g., "color")
        scoped: True if the raw key carried the scope prefix ("_color")

    Example:
        >>> DirectiveKey.fromRaw("_backgroundColor")
        DirectiveKey(name='backgroundColor', scoped=True)
    """
    name: str
    scoped: bool = False

    @classmethod
    def fromRaw(cls, raw: str) -> "DirectiveKey":
        if raw.startswith(SCOPE_PREFIX):
            return cls(name=raw[len(SCOPE_PREFIX):], scoped=True)
        return cls(name=raw, scoped=False)

    @property
    def raw(self) -> str:
        return f"{SCOPE_PREFIX}{self.name}" if self.scoped else self.name

    @property
    def known(self) -> Optional[DirectiveName]:
        """The DirectiveName for this key, or None if outside the vocabulary"""
        try:
            return DirectiveName(self.name)
        except ValueError:
            return None


class DirectiveSet(Mapping[str, DirectiveValue]):
    """
    Immutable mapping of raw directive keys to coerced values

    Keys are stored exactly as written in the comment (including the
    scope prefix), in first-seen order. Instances compare equal to plain
    dicts holding the same items, which keeps test assertions readable.

    Example:
        >>> ds = DirectiveSet({"paginate": True, "_color": "blue"})
        >>> ds.unscoped()
        DirectiveSet({'paginate': True})
        >>> ds.merged({"paginate": False})["paginate"]
        False
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[str, DirectiveValue]] = None) -> None:
        self._values: Dict[str, DirectiveValue] = dict(values or {})

    def __getitem__(self, key: str) -> DirectiveValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DirectiveSet):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._values.items()))

    def __repr__(self) -> str:
        return f"DirectiveSet({self._values!r})"

    def merged(self, other: Mapping[str, DirectiveValue]) -> "DirectiveSet":
        """Return a new set where every key of `other` overwrites this one"""
        values = dict(self._values)
        values.update(other)
        return DirectiveSet(values)

    def unscoped(self) -> "DirectiveSet":
        """Return a copy with every scoped (prefixed) key removed"""
        return DirectiveSet(
            {k: v for k, v in self._values.items() if not k.startswith(SCOPE_PREFIX)}
        )

    def known(self) -> Dict[DirectiveKey, DirectiveValue]:
        """Entries whose name belongs to the DirectiveName vocabulary"""
        result: Dict[DirectiveKey, DirectiveValue] = {}
        for raw, value in self._values.items():
            key = DirectiveKey.fromRaw(raw)
            if key.known is not None:
                result[key] = value
        return result

    def unknown(self) -> Dict[str, DirectiveValue]:
        """Entries outside the vocabulary, keyed by their raw key"""
        return {
            raw: value
            for raw, value in self._values.items()
            if DirectiveKey.fromRaw(raw).known is None
        }

    def to_dict(self) -> Dict[str, DirectiveValue]:
        return dict(self._values)


def directive_resolve(
    directives: Mapping[str, DirectiveValue], name: Union[DirectiveName, str]
) -> Optional[DirectiveValue]:
    """
    Get the effective value of a directive for one slide

    The scoped variant wins when present and defined; otherwise the
    regular key is used. Read-only: inheritance is unaffected.

    Args:
        directives: A slide's DirectiveSet (or any mapping of raw keys)
        name: Directive name without scope prefix

    Returns:
        The effective value, or None if neither key is set

    Example:
        >>> directive_resolve({"color": "red", "_color": "blue"}, "color")
        'blue'
        >>> directive_resolve({"color": "red"}, DirectiveName.COLOR)
        'red'
    """
    base = name.value if isinstance(name, DirectiveName) else name
    scoped = directives.get(f"{SCOPE_PREFIX}{base}")
    if scoped is not None:
        return scoped
    return directives.get(base)
