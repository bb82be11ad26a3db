"""
DirectiveSet, DirectiveKey and effective-value resolution tests
"""

import pytest

from sherp.models.directives import (
    DirectiveKey,
    DirectiveName,
    DirectiveSet,
    directive_resolve,
)


class TestDirectiveKey:
    """Test raw key splitting"""

    def test_regular_key(self):
        key = DirectiveKey.fromRaw("color")
        assert key == DirectiveKey(name="color", scoped=False)
        assert key.known is DirectiveName.COLOR
        assert key.raw == "color"

    def test_scoped_key(self):
        key = DirectiveKey.fromRaw("_backgroundColor")
        assert key.scoped is True
        assert key.known is DirectiveName.BACKGROUND_COLOR
        assert key.raw == "_backgroundColor"

    def test_unknown_key(self):
        assert DirectiveKey.fromRaw("theme").known is None


class TestDirectiveSet:
    """Test mapping behaviour and merge/scope helpers"""

    def test_equals_plain_dict(self):
        assert DirectiveSet({"paginate": True}) == {"paginate": True}
        assert DirectiveSet() == {}

    def test_merged_overwrites_and_keeps_original(self):
        base = DirectiveSet({"color": "red", "paginate": True})
        merged = base.merged({"color": "blue", "_class": "lead"})
        assert merged == {"color": "blue", "paginate": True, "_class": "lead"}
        assert base == {"color": "red", "paginate": True}

    def test_unscoped_drops_prefixed_keys(self):
        ds = DirectiveSet({"color": "red", "_color": "blue", "_theme": "x"})
        assert ds.unscoped() == {"color": "red"}

    def test_known_and_unknown_partition(self):
        ds = DirectiveSet({"color": "red", "_header": "Hi", "theme": "gaia", "_size": "4:3"})
        assert ds.known() == {
            DirectiveKey("color"): "red",
            DirectiveKey("header", scoped=True): "Hi",
        }
        assert ds.unknown() == {"theme": "gaia", "_size": "4:3"}

    def test_read_only(self):
        ds = DirectiveSet({"color": "red"})
        with pytest.raises(TypeError):
            ds["color"] = "blue"  # type: ignore[index]

    def test_to_dict_is_a_copy(self):
        ds = DirectiveSet({"color": "red"})
        d = ds.to_dict()
        d["color"] = "blue"
        assert ds["color"] == "red"


class TestDirectiveResolve:
    """Test effective-value lookup"""

    def test_scoped_wins(self):
        assert directive_resolve({"color": "red", "_color": "blue"}, "color") == "blue"

    def test_regular_when_no_scoped(self):
        assert directive_resolve({"color": "red"}, "color") == "red"

    def test_enum_name_accepted(self):
        ds = DirectiveSet({"_paginate": False, "paginate": True})
        assert directive_resolve(ds, DirectiveName.PAGINATE) is False

    def test_missing_is_none(self):
        assert directive_resolve({}, DirectiveName.HEADER) is None

    def test_does_not_mutate(self):
        ds = {"color": "red", "_color": "blue"}
        directive_resolve(ds, "color")
        assert ds == {"color": "red", "_color": "blue"}
