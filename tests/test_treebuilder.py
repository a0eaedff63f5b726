"""Tests for tree construction."""

import unittest

from minihtml import TagMetadata, TreeBuilder, parse
from minihtml.metadata import EMPTY_METADATA

VOIDS = TagMetadata(void_tags=["img", "br", "input"])


def _shape(node):
    return (node.name, [_shape(child) for child in node.children])


class TestTreeBuilder(unittest.TestCase):
    def test_simple_tree(self):
        root = parse("<div><p>y</p></div>", VOIDS)
        assert root.name == "div"
        assert root.parent is None
        assert len(root.children) == 1
        p = root.children[0]
        assert p.name == "p"
        assert p.text == "y"
        assert p.parent is root

    def test_comment_stripping_is_transparent(self):
        with_comment = parse("<div><!-- x --><p>y</p></div>", VOIDS)
        without = parse("<div><p>y</p></div>", VOIDS)
        assert _shape(with_comment) == _shape(without)
        assert with_comment.children[0].text == without.children[0].text

    def test_no_tags_gives_no_root(self):
        assert parse("just text", VOIDS) is None
        assert parse("", VOIDS) is None
        assert parse("<!-- only a comment -->", VOIDS) is None

    def test_void_tag_never_gets_children(self):
        root = parse('<div><img src="a.png"><p>after</p></div>', VOIDS)
        img, p = root.children
        assert img.name == "img"
        assert img.children == []
        assert p.parent is root
        assert img.attributes == {"src": "a.png"}

    def test_explicit_self_closing_never_gets_children(self):
        root = parse("<div><widget/><span>x</span></div>", EMPTY_METADATA)
        assert [c.name for c in root.children] == ["widget", "span"]
        assert root.children[0].children == []

    def test_void_tag_without_metadata_swallows_siblings(self):
        root = parse("<div><img><p>x</p></div>", EMPTY_METADATA)
        assert root.children[0].name == "img"
        assert root.children[0].children[0].name == "p"

    def test_text_accumulates_space_joined(self):
        root = parse("<p>one<b>bold</b>two</p>", VOIDS)
        assert root.text == "one two"
        assert root.children[0].text == "bold"

    def test_text_before_root_is_discarded(self):
        root = parse("lead<p>x</p>", VOIDS)
        assert root.text == "x"

    def test_ids_increase_in_document_order(self):
        root = parse("<a><b></b><c><d></d></c></a>", VOIDS)
        ids = [node.id for node in root.iter()]
        assert ids == [1, 2, 3, 4]

    def test_mismatched_close_pops_unconditionally(self):
        root = parse("<div><p>a</span><i>b</i></div>", VOIDS)
        # </span> closed the <p>, so <i> is a sibling of <p>
        assert [c.name for c in root.children] == ["p", "i"]

    def test_stray_close_with_empty_stack_is_ignored(self):
        root = parse("</p></div><section>x</section>", VOIDS)
        assert root.name == "section"
        assert root.text == "x"

    def test_unclosed_elements(self):
        root = parse("<ul><li>one<li>two", VOIDS)
        assert _shape(root) == ("ul", [("li", [("li", [])])])

    def test_first_top_level_element_stays_root(self):
        root = parse("<p>a</p><div>b</div>", VOIDS)
        assert root.name == "p"
        assert root.children == []

    def test_attributes_and_classes(self):
        root = parse('<div id="main" class="container big" hidden></div>', VOIDS)
        assert root.attributes == {"id": "main", "class": "container big", "hidden": ""}
        assert root.classes == ["container", "big"]

    def test_duplicate_attribute_last_wins(self):
        root = parse('<a href="x" href="y">link</a>', VOIDS)
        assert root.attributes["href"] == "y"

    def test_parent_chain_is_acyclic(self):
        root = parse("<html><body><div><p><span>deep</span></p></div></body></html>", VOIDS)
        for node in root.iter():
            seen = set()
            steps = 0
            current = node
            while current.parent is not None:
                assert id(current) not in seen
                seen.add(id(current))
                current = current.parent
                steps += 1
            assert current is root
            assert steps == node.depth

    def test_each_child_has_one_owner(self):
        root = parse("<div><p><b>x</b></p><p>y</p></div>", VOIDS)
        owners = {}
        for node in root.iter():
            for child in node.children:
                assert child.parent is node
                assert id(child) not in owners
                owners[id(child)] = node


class TestIdentityCounter(unittest.TestCase):
    def test_separate_builders_are_independent(self):
        first = TreeBuilder(VOIDS).build("<a><b></b></a>")
        second = TreeBuilder(VOIDS).build("<a><b></b></a>")
        assert [n.id for n in first.iter()] == [1, 2]
        assert [n.id for n in second.iter()] == [1, 2]

    def test_reused_builder_keeps_counting(self):
        builder = TreeBuilder(VOIDS)
        first = builder.build("<a><b></b></a>")
        second = builder.build("<a></a>")
        assert [n.id for n in first.iter()] == [1, 2]
        assert second.id == 3

    def test_build_leaves_no_open_elements(self):
        builder = TreeBuilder(VOIDS)
        builder.build("<div><p>")
        assert builder.open_elements == []
        assert builder.root is None

    def test_default_metadata_knows_html_void_tags(self):
        root = TreeBuilder().build("<div><br><hr><input><p>x</p></div>")
        assert [c.name for c in root.children] == ["br", "hr", "input", "p"]
