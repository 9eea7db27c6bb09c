"""Node types of the zettel syntax tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

from .attributes import Attributes
from .meta import Meta
from .reference import Reference
from .zettel import INVALID_ZETTEL_ID, ZettelID

if TYPE_CHECKING:
    from .visitor import Visitor


class Node(ABC):
    """Base of all syntax tree nodes."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Let the visitor visit this node."""


class BlockNode(Node):
    """A node at block level."""


class ItemNode(BlockNode):
    """A block node that can be a list item."""


class DescriptionNode(ItemNode):
    """An item node that holds only textual description."""


class InlineNode(Node):
    """A node at inline level."""


@dataclass
class ParsedZettel:
    """Root of a parsed zettel; not itself a visitable node."""

    zid: ZettelID = INVALID_ZETTEL_ID
    meta: Optional[Meta] = None
    content: str = ""
    title: list[InlineNode] = field(default_factory=list)
    ast: list[BlockNode] = field(default_factory=list)


# ---------- block nodes ----------


@dataclass
class ParaNode(DescriptionNode):
    """A paragraph: a sequence of inline nodes."""

    inlines: list[InlineNode] = field(default_factory=list)

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_para(self)


class VerbatimCode(IntEnum):
    """Kind of verbatim block."""

    PROG = 1
    COMMENT = 2
    HTML = 3


@dataclass
class VerbatimNode(ItemNode):
    """Lines of uninterpreted text."""

    code: VerbatimCode = VerbatimCode.PROG
    attrs: Optional[Attributes] = None
    lines: list[str] = field(default_factory=list)

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_verbatim(self)


class RegionCode(IntEnum):
    """Kind of region."""

    SPAN = 1
    QUOTE = 2
    VERSE = 3


@dataclass
class RegionNode(ItemNode):
    """A region of block nodes with optional trailing text."""

    code: RegionCode = RegionCode.SPAN
    attrs: Optional[Attributes] = None
    blocks: list[BlockNode] = field(default_factory=list)
    inlines: list[InlineNode] = field(default_factory=list)

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_region(self)


@dataclass
class HeadingNode(ItemNode):
    """A heading with its level and text."""

    level: int = 1
    inlines: list[InlineNode] = field(default_factory=list)
    attrs: Optional[Attributes] = None

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_heading(self)


@dataclass
class HRuleNode(ItemNode):
    """A horizontal rule."""

    attrs: Optional[Attributes] = None

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_hrule(self)


class NestedListCode(IntEnum):
    """Kind of nested list."""

    ORDERED = 1
    UNORDERED = 2
    QUOTE = 3


@dataclass
class NestedListNode(ItemNode):
    """A nestable list; each item is a sequence of item nodes."""

    code: NestedListCode = NestedListCode.UNORDERED
    items: list[list[ItemNode]] = field(default_factory=list)
    attrs: Optional[Attributes] = None

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_nested_list(self)


@dataclass
class Description:
    """One term of a description list with its descriptions."""

    term: list[InlineNode] = field(default_factory=list)
    descriptions: list[list[DescriptionNode]] = field(default_factory=list)


@dataclass
class DescriptionListNode(BlockNode):
    """A description list."""

    descriptions: list[Description] = field(default_factory=list)

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_description_list(self)


class Alignment(IntEnum):
    """Text alignment of table cells."""

    DEFAULT = 1
    LEFT = 2
    CENTER = 3
    RIGHT = 4


@dataclass
class TableCell:
    """One cell of a table."""

    align: Alignment = Alignment.DEFAULT
    inlines: list[InlineNode] = field(default_factory=list)


@dataclass
class TableNode(BlockNode):
    """A table with header, column alignment and rows."""

    header: list[TableCell] = field(default_factory=list)
    align: list[Alignment] = field(default_factory=list)
    rows: list[list[TableCell]] = field(default_factory=list)

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_table(self)


@dataclass
class BLOBNode(BlockNode):
    """Binary data to be interpreted according to a syntax."""

    title: str = ""
    syntax: str = ""
    blob: bytes = b""

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_blob(self)


# ---------- inline nodes ----------


@dataclass
class TextNode(InlineNode):
    """Plain text."""

    text: str = ""

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_text(self)


@dataclass
class TagNode(InlineNode):
    """A tag."""

    tag: str = ""

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_tag(self)


@dataclass
class SpaceNode(InlineNode):
    """Inter-word space."""

    lexeme: str = " "

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_space(self)


@dataclass
class BreakNode(InlineNode):
    """A line break, hard or soft."""

    hard: bool = False

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_break(self)


@dataclass
class LinkNode(InlineNode):
    """A link with its text."""

    ref: Optional[Reference] = None
    inlines: list[InlineNode] = field(default_factory=list)
    attrs: Optional[Attributes] = None

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_link(self)


@dataclass
class ImageNode(InlineNode):
    """An image, given by reference or as embedded data."""

    ref: Optional[Reference] = None
    blob: bytes = b""
    syntax: str = ""
    inlines: list[InlineNode] = field(default_factory=list)
    attrs: Optional[Attributes] = None

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_image(self)


@dataclass
class CiteNode(InlineNode):
    """A citation."""

    key: str = ""
    inlines: list[InlineNode] = field(default_factory=list)
    attrs: Optional[Attributes] = None

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_cite(self)


@dataclass
class MarkNode(InlineNode):
    """A marked position."""

    text: str = ""

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_mark(self)


@dataclass
class FootnoteNode(InlineNode):
    """A footnote."""

    inlines: list[InlineNode] = field(default_factory=list)
    attrs: Optional[Attributes] = None

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_footnote(self)


class FormatCode(IntEnum):
    """Kind of inline formatting."""

    ITALIC = 1
    EMPH = 2
    BOLD = 3
    STRONG = 4
    UNDER = 5
    INSERT = 6
    STRIKE = 7
    DELETE = 8
    SUPER = 9
    SUB = 10
    QUOTE = 11
    QUOTATION = 12
    SMALL = 13
    SPAN = 14
    MONOSPACE = 15


@dataclass
class FormatNode(InlineNode):
    """Formatted inline text."""

    code: FormatCode = FormatCode.SPAN
    attrs: Optional[Attributes] = None
    inlines: list[InlineNode] = field(default_factory=list)

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_format(self)


class LiteralCode(IntEnum):
    """Kind of literal inline text."""

    PROG = 1
    KEYB = 2
    OUTPUT = 3
    COMMENT = 4
    HTML = 5


@dataclass
class LiteralNode(InlineNode):
    """Uninterpreted inline text."""

    code: LiteralCode = LiteralCode.PROG
    attrs: Optional[Attributes] = None
    text: str = ""

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_literal(self)