"""
Style materialization tests
"""

from sherp.lib.styles import slideClasses_get, slidePaginate_is, slideStyles_get


class TestSlideStyles:
    """Test inline CSS generation"""

    def test_empty(self):
        assert slideStyles_get({}) == ""

    def test_property_order(self):
        directives = {
            "color": "white",
            "backgroundSize": "cover",
            "backgroundColor": "#000",
            "backgroundImage": "url(bg.png)",
        }
        assert slideStyles_get(directives) == (
            "background-color: #000; background-image: url(bg.png); "
            "background-size: cover; color: white"
        )

    def test_scoped_overrides_inherited(self):
        directives = {"backgroundColor": "#fff", "_backgroundColor": "#222"}
        assert slideStyles_get(directives) == "background-color: #222"

    def test_scoped_alone(self):
        assert slideStyles_get({"_color": "blue"}) == "color: blue"

    def test_false_skipped_true_lowercase(self):
        assert slideStyles_get({"color": False}) == ""
        assert slideStyles_get({"color": True}) == "color: true"

    def test_non_style_directives_ignored(self):
        assert slideStyles_get({"header": "Hi", "paginate": True, "theme": "x"}) == ""


class TestSlideClasses:
    """Test class list"""

    def test_default(self):
        assert slideClasses_get({}) == ["slide"]

    def test_multiple_classes(self):
        assert slideClasses_get({"class": "lead invert"}) == ["slide", "lead", "invert"]

    def test_scoped_class_wins(self):
        assert slideClasses_get({"class": "lead", "_class": "title"}) == ["slide", "title"]

    def test_boolean_class_ignored(self):
        assert slideClasses_get({"class": True}) == ["slide"]


class TestSlidePaginate:
    """Test pagination flag"""

    def test_default_used_when_unset(self):
        assert slidePaginate_is({}) is False
        assert slidePaginate_is({}, default=True) is True

    def test_boolean_directive(self):
        assert slidePaginate_is({"paginate": True}) is True
        assert slidePaginate_is({"paginate": False}, default=True) is False

    def test_scoped_false_hides_one_slide(self):
        assert slidePaginate_is({"paginate": True, "_paginate": False}) is False

    def test_quoted_true_string(self):
        assert slidePaginate_is({"paginate": "true"}) is True
        assert slidePaginate_is({"paginate": "yes"}) is False
