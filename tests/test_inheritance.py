"""
Directive inheritance tests

Regular directives persist across slide boundaries; scoped ones do not.
"""

from sherp.lib.inheritance import DirectiveScope


class TestDirectiveScope:
    """Test the inherited/current bookkeeping"""

    def test_starts_empty(self):
        scope = DirectiveScope()
        assert scope.inherited == {}
        assert scope.current == {}

    def test_regular_directive_carries_forward(self):
        scope = DirectiveScope()
        scope.directives_apply({"paginate": True})
        assert scope.slide_close() == {"paginate": True}
        assert scope.slide_close() == {"paginate": True}

    def test_scoped_directive_applies_once(self):
        scope = DirectiveScope()
        scope.directives_apply({"_color": "blue"})
        assert scope.slide_close() == {"_color": "blue"}
        assert scope.slide_close() == {}

    def test_scoped_and_regular_same_name(self):
        scope = DirectiveScope()
        scope.directives_apply({"color": "red"})
        scope.directives_apply({"_color": "blue"})
        assert scope.slide_close() == {"color": "red", "_color": "blue"}
        assert scope.slide_close() == {"color": "red"}

    def test_later_value_supersedes(self):
        scope = DirectiveScope()
        scope.directives_apply({"header": "One"})
        scope.slide_close()
        scope.directives_apply({"header": "Two"})
        assert scope.slide_close() == {"header": "Two"}
        assert scope.slide_close() == {"header": "Two"}

    def test_snapshot_not_affected_by_later_merges(self):
        scope = DirectiveScope()
        scope.directives_apply({"color": "red"})
        first = scope.slide_close()
        scope.directives_apply({"color": "blue"})
        assert first == {"color": "red"}

    def test_run_discard_restores_baseline(self):
        scope = DirectiveScope()
        scope.directives_apply({"paginate": True})
        scope.slide_close()
        scope.directives_apply({"color": "red", "_class": "lead"})
        scope.run_discard()
        assert scope.current == {"paginate": True}
