"""
Directive inheritance across slides

Regular directives carry forward from the slide that sets them to every
later slide until overwritten. Scoped directives (`_name`) apply to the
slide that declares them and are dropped at the slide boundary.
"""

from typing import Mapping

from ..models.directives import DirectiveSet, DirectiveValue


class DirectiveScope:
    """
    Tracks the inherited baseline and the directives of the slide in progress

    Attributes:
        inherited: Baseline carried into the next slide (never scoped)
        current: Directives in effect on the slide being built

    Example:
        >>> scope = DirectiveScope()
        >>> scope.directives_apply({"paginate": True, "_color": "blue"})
        >>> scope.slide_close()
        DirectiveSet({'paginate': True, '_color': 'blue'})
        >>> scope.current
        DirectiveSet({'paginate': True})
    """

    def __init__(self) -> None:
        self.inherited: DirectiveSet = DirectiveSet()
        self.current: DirectiveSet = self.inherited

    def directives_apply(self, directives: Mapping[str, DirectiveValue]) -> None:
        """
        Merge newly parsed directives into the current slide.

        Every key overwrites, scoped or not; scope only decides what
        survives slide_close().
        """
        self.current = self.current.merged(directives)

    def slide_close(self) -> DirectiveSet:
        """
        Finish the current slide.

        Returns:
            Snapshot of the directives for the finished slide. The next
            slide starts from that snapshot minus its scoped keys.
        """
        snapshot = self.current
        self.inherited = snapshot.unscoped()
        self.current = self.inherited
        return snapshot

    def run_discard(self) -> None:
        """Drop directives gathered for a run that produced no slide"""
        self.current = self.inherited
