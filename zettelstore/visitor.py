"""Visitors over the zettel syntax tree and a top-down traverser."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .nodes import (
        BLOBNode,
        BreakNode,
        CiteNode,
        DescriptionListNode,
        FootnoteNode,
        FormatNode,
        HeadingNode,
        HRuleNode,
        ImageNode,
        LinkNode,
        LiteralNode,
        MarkNode,
        NestedListNode,
        Node,
        ParaNode,
        RegionNode,
        SpaceNode,
        TableNode,
        TagNode,
        TextNode,
        VerbatimNode,
    )


class Visitor:
    """Base visitor; every visit method does nothing unless overridden."""

    # Block nodes

    def visit_verbatim(self, node: VerbatimNode) -> None:
        """Visit a verbatim block."""

    def visit_region(self, node: RegionNode) -> None:
        """Visit a region."""

    def visit_heading(self, node: HeadingNode) -> None:
        """Visit a heading."""

    def visit_hrule(self, node: HRuleNode) -> None:
        """Visit a horizontal rule."""

    def visit_nested_list(self, node: NestedListNode) -> None:
        """Visit a nested list."""

    def visit_description_list(self, node: DescriptionListNode) -> None:
        """Visit a description list."""

    def visit_para(self, node: ParaNode) -> None:
        """Visit a paragraph."""

    def visit_table(self, node: TableNode) -> None:
        """Visit a table."""

    def visit_blob(self, node: BLOBNode) -> None:
        """Visit a BLOB."""

    # Inline nodes

    def visit_text(self, node: TextNode) -> None:
        """Visit text."""

    def visit_tag(self, node: TagNode) -> None:
        """Visit a tag."""

    def visit_space(self, node: SpaceNode) -> None:
        """Visit a space."""

    def visit_break(self, node: BreakNode) -> None:
        """Visit a line break."""

    def visit_link(self, node: LinkNode) -> None:
        """Visit a link."""

    def visit_image(self, node: ImageNode) -> None:
        """Visit an image."""

    def visit_cite(self, node: CiteNode) -> None:
        """Visit a citation."""

    def visit_footnote(self, node: FootnoteNode) -> None:
        """Visit a footnote."""

    def visit_mark(self, node: MarkNode) -> None:
        """Visit a mark."""

    def visit_format(self, node: FormatNode) -> None:
        """Visit formatted text."""

    def visit_literal(self, node: LiteralNode) -> None:
        """Visit literal text."""


class TopDownTraverser(Visitor):
    """Walks the tree, handing each node to a visitor before its children."""

    def __init__(self, visitor: Visitor) -> None:
        self._visitor = visitor

    def _visit_all(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            node.accept(self)

    def visit_block_slice(self, blocks: Iterable[Node]) -> None:
        """Traverse a sequence of block nodes."""
        self._visit_all(blocks)

    def visit_verbatim(self, node: VerbatimNode) -> None:
        self._visitor.visit_verbatim(node)

    def visit_region(self, node: RegionNode) -> None:
        self._visitor.visit_region(node)
        self.visit_block_slice(node.blocks)
        self._visit_all(node.inlines)

    def visit_heading(self, node: HeadingNode) -> None:
        self._visitor.visit_heading(node)
        self._visit_all(node.inlines)

    def visit_hrule(self, node: HRuleNode) -> None:
        self._visitor.visit_hrule(node)

    def visit_nested_list(self, node: NestedListNode) -> None:
        self._visitor.visit_nested_list(node)
        for item in node.items:
            self._visit_all(item)

    def visit_description_list(self, node: DescriptionListNode) -> None:
        self._visitor.visit_description_list(node)
        for description in node.descriptions:
            self._visit_all(description.term)
            for part in description.descriptions:
                self._visit_all(part)

    def visit_para(self, node: ParaNode) -> None:
        self._visitor.visit_para(node)
        self._visit_all(node.inlines)

    def visit_table(self, node: TableNode) -> None:
        self._visitor.visit_table(node)
        for cell in node.header:
            self._visit_all(cell.inlines)
        for row in node.rows:
            for cell in row:
                self._visit_all(cell.inlines)

    def visit_blob(self, node: BLOBNode) -> None:
        self._visitor.visit_blob(node)

    def visit_text(self, node: TextNode) -> None:
        self._visitor.visit_text(node)

    def visit_tag(self, node: TagNode) -> None:
        self._visitor.visit_tag(node)

    def visit_space(self, node: SpaceNode) -> None:
        self._visitor.visit_space(node)

    def visit_break(self, node: BreakNode) -> None:
        self._visitor.visit_break(node)

    def visit_link(self, node: LinkNode) -> None:
        self._visitor.visit_link(node)
        self._visit_all(node.inlines)

    def visit_image(self, node: ImageNode) -> None:
        self._visitor.visit_image(node)
        self._visit_all(node.inlines)

    def visit_cite(self, node: CiteNode) -> None:
        self._visitor.visit_cite(node)
        self._visit_all(node.inlines)

    def visit_footnote(self, node: FootnoteNode) -> None:
        self._visitor.visit_footnote(node)
        self._visit_all(node.inlines)

    def visit_mark(self, node: MarkNode) -> None:
        self._visitor.visit_mark(node)

    def visit_format(self, node: FormatNode) -> None:
        self._visitor.visit_format(node)
        self._visit_all(node.inlines)

    def visit_literal(self, node: LiteralNode) -> None:
        self._visitor.visit_literal(node)