"""Collect items such as references from a parsed zettel."""

from __future__ import annotations

from typing import Optional

from .nodes import ImageNode, LinkNode, ParsedZettel
from .reference import Reference
from .visitor import TopDownTraverser, Visitor


class _ReferenceCollector(Visitor):
    def __init__(self) -> None:
        self.links: list[Optional[Reference]] = []
        self.images: list[Reference] = []

    def visit_link(self, node: LinkNode) -> None:
        self.links.append(node.ref)

    def visit_image(self, node: ImageNode) -> None:
        if node.ref is not None:
            self.images.append(node.ref)


def references(
    zettel: ParsedZettel,
) -> tuple[list[Optional[Reference]], list[Reference]]:
    """Return the link and image references found in the zettel's tree."""
    collector = _ReferenceCollector()
    TopDownTraverser(collector).visit_block_slice(zettel.ast)
    return collector.links, collector.images