import pytest

from zettelstore.attributes import Attributes
from zettelstore.nodes import (
    Alignment,
    BLOBNode,
    BlockNode,
    BreakNode,
    CiteNode,
    DescriptionListNode,
    DescriptionNode,
    FootnoteNode,
    FormatCode,
    FormatNode,
    HeadingNode,
    HRuleNode,
    ImageNode,
    InlineNode,
    ItemNode,
    LinkNode,
    LiteralCode,
    LiteralNode,
    MarkNode,
    NestedListNode,
    Node,
    ParaNode,
    ParsedZettel,
    RegionNode,
    SpaceNode,
    TableCell,
    TableNode,
    TagNode,
    TextNode,
    VerbatimCode,
    VerbatimNode,
)
from zettelstore.reference import parse_reference
from zettelstore.zettel import INVALID_ZETTEL_ID

_CATEGORIES = (BlockNode, ItemNode, DescriptionNode, InlineNode)


def _categories_of(node):
    return {base for base in _CATEGORIES if isinstance(node, base)}


class _Recorder:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if not name.startswith("visit_"):
            raise AttributeError(name)
        return lambda node: self.calls.append((name, node))


@pytest.mark.parametrize(
    "node, method",
    [
        (ParaNode(), "visit_para"),
        (VerbatimNode(), "visit_verbatim"),
        (RegionNode(), "visit_region"),
        (HeadingNode(), "visit_heading"),
        (HRuleNode(), "visit_hrule"),
        (NestedListNode(), "visit_nested_list"),
        (DescriptionListNode(), "visit_description_list"),
        (TableNode(), "visit_table"),
        (BLOBNode(), "visit_blob"),
        (TextNode(), "visit_text"),
        (TagNode(), "visit_tag"),
        (SpaceNode(), "visit_space"),
        (BreakNode(), "visit_break"),
        (LinkNode(), "visit_link"),
        (ImageNode(), "visit_image"),
        (CiteNode(), "visit_cite"),
        (FootnoteNode(), "visit_footnote"),
        (MarkNode(), "visit_mark"),
        (FormatNode(), "visit_format"),
        (LiteralNode(), "visit_literal"),
    ],
)
def test_accept_dispatches_once_to_matching_method(node, method):
    recorder = _Recorder()
    node.accept(recorder)
    assert recorder.calls == [(method, node)]


def test_node_is_abstract():
    with pytest.raises(TypeError):
        Node()


@pytest.mark.parametrize(
    "node_class, expected",
    [
        (ParaNode, {BlockNode, ItemNode, DescriptionNode}),
        (VerbatimNode, {BlockNode, ItemNode}),
        (TableNode, {BlockNode}),
        (DescriptionListNode, {BlockNode}),
        (BLOBNode, {BlockNode}),
        (TextNode, {InlineNode}),
    ],
)
def test_node_categories(node_class, expected):
    node = node_class()
    assert _categories_of(node) == expected


def test_parsed_zettel_defaults_are_empty_and_independent():
    first = ParsedZettel()
    second = ParsedZettel()
    assert first.zid == INVALID_ZETTEL_ID
    assert first.ast == [] and first.title == []
    first.ast.append(ParaNode())
    assert second.ast == []


def test_enum_values_start_at_one():
    assert VerbatimCode(1) is VerbatimCode.PROG
    assert FormatCode(1) is FormatCode.ITALIC
    assert LiteralCode(1) is LiteralCode.PROG
    assert Alignment(1) is Alignment.DEFAULT
    assert min(code.value for code in FormatCode) == 1


def test_nodes_hold_their_content():
    ref = parse_reference("12345678901234")
    attrs = Attributes({"-": "x"})
    link = LinkNode(ref=ref, inlines=[TextNode("t")], attrs=attrs)
    assert link.ref is ref
    assert link.inlines == [TextNode("t")]
    assert link.attrs.has_default() is True
    table = TableNode(header=[TableCell(Alignment.LEFT, [TextNode("h")])])
    assert table.header[0].align is Alignment.LEFT
    assert table.rows == []


def test_node_equality_compares_fields():
    assert ParaNode([TextNode("a")]) == ParaNode([TextNode("a")])
    assert not ParaNode([TextNode("a")]) == ParaNode([TextNode("b")])