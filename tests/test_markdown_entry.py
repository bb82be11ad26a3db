"""
Markdown entry point tests

Runs real markdown through mistune and the segmenter, checking that the
tree and text entry points agree.
"""

from sherp.lib.markdown import (
    blocks_render,
    deck_parse,
    markdown_parse,
    slides_fromText,
    slides_fromTree,
)


SCENARIO = (
    "# A\n\n<!-- paginate: true -->\n\n---\n\n"
    "# B\n\n<!-- _color: 'blue' -->\n\n---\n\n"
    "# C\n"
)


class TestScenario:
    """Test the three-slide paginate/scoped-color deck"""

    def test_text_entry_point(self):
        slides = slides_fromText(SCENARIO)
        assert len(slides) == 3
        assert slides[0].directives == {"paginate": True}
        assert slides[1].directives == {"paginate": True, "_color": "blue"}
        assert slides[2].directives == {"paginate": True}

    def test_text_entry_renders_html(self):
        slides = slides_fromText(SCENARIO)
        assert "<h1>A</h1>" in slides[0].content
        assert "<h1>B</h1>" in slides[1].content
        assert "<h1>C</h1>" in slides[2].content
        assert all("<!--" not in s.content for s in slides)

    def test_tree_entry_point_matches_text(self):
        tree_slides = slides_fromTree(markdown_parse(SCENARIO))
        text_slides = slides_fromText(SCENARIO)
        assert [s.directives for s in tree_slides] == [s.directives for s in text_slides]
        assert [blocks_render(s.content) for s in tree_slides] == [s.content for s in text_slides]

    def test_tree_content_is_blocks(self):
        slides = slides_fromTree(markdown_parse(SCENARIO))
        assert [b["type"] for b in slides[0].content] == ["heading"]


class TestMarkdownEdgeCases:
    """Test markdown constructs around dividers and comments"""

    def test_divider_inside_code_fence_ignored(self):
        source = "# Code\n\n```\nbefore\n---\nafter\n```\n"
        slides = slides_fromText(source)
        assert len(slides) == 1
        assert "before" in slides[0].content and "after" in slides[0].content

    def test_asterisk_divider(self):
        slides = slides_fromText("# A\n\n***\n\n# B\n")
        assert len(slides) == 2

    def test_adjacent_dividers(self):
        slides = slides_fromText("# A\n\n---\n\n---\n\n# B\n")
        assert len(slides) == 2

    def test_directive_only_slide_dropped(self):
        slides = slides_fromText("# A\n\n---\n\n<!-- color: red -->\n\n---\n\n# B\n")
        assert len(slides) == 2
        assert slides[1].directives == {}

    def test_multiline_directive_comment(self):
        source = "<!--\nheader: Intro\nfooter: ACME\n_class: lead\n-->\n\n# Title\n"
        slides = slides_fromText(source)
        assert slides[0].directives == {"header": "Intro", "footer": "ACME", "_class": "lead"}

    def test_scoped_directive_redeclared_on_next_slide(self):
        source = (
            "<!-- _color: blue -->\n\n# A\n\n---\n\n"
            "<!-- _color: green -->\n\n# B\n\n---\n\n"
            "# C\n"
        )
        slides = slides_fromText(source)
        assert [s.directives for s in slides] == [
            {"_color": "blue"},
            {"_color": "green"},
            {},
        ]

    def test_leading_divider_keeps_first_slide(self):
        _, slides = deck_parse("---\n\n# A\n\n---\n\n# B\n")
        assert len(slides) == 2
        assert slides[0].content[0]["type"] == "heading"

    def test_plain_comment_kept_as_note(self):
        slides = slides_fromText("# A\n\n<!-- speak slowly -->\n")
        assert slides[0].notes == ["speak slowly"]
        assert "speak slowly" not in slides[0].content

    def test_fenced_code_highlighted(self):
        slides = slides_fromText("```python\ndef f():\n    return 1\n```\n")
        assert "<pre" in slides[0].content
        assert "style=" in slides[0].content

    def test_unknown_language_falls_back(self):
        slides = slides_fromText("```no-such-language\nhello\n```\n")
        assert "hello" in slides[0].content


class TestDeckParse:
    """Test front matter + body"""

    def test_front_matter_not_a_divider(self):
        source = "---\ntitle: Talk\npaginate: true\n---\n\n# A\n\n---\n\n# B\n"
        meta, slides = deck_parse(source)
        assert meta.title == "Talk"
        assert meta.paginate is True
        assert len(slides) == 2

    def test_front_matter_not_merged_into_directives(self):
        source = "---\ntitle: Talk\npaginate: true\n---\n\n# A\n"
        _, slides = deck_parse(source)
        assert slides[0].directives == {}
