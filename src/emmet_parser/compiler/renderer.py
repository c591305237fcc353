"""Renderer - converts Element trees to final markup text."""

import logging
from typing import Iterable, List, Optional, Tuple

from emmet_parser.ast.node import Element
from emmet_parser.config import EmmetConfig

log = logging.getLogger(__name__)


class Renderer:
    """Renders Element trees to a flat markup string.

    No whitespace is inserted between or inside elements, and text and
    attribute values are written as-is without escaping.
    """

    def __init__(self, config: Optional[EmmetConfig] = None):
        self.config = config or EmmetConfig()
        self.self_closing_tags = frozenset(self.config.self_closing_tags)

    def render(self, elements: Iterable[Element]) -> str:
        """Render a list of sibling elements.

        Args:
            elements: Top-level elements, as returned by the parser.

        Returns:
            The concatenated markup of every element.
        """
        html = "".join(self.render_node(element) for element in elements)
        log.debug("Rendered %d character(s) of markup", len(html))
        return html

    def render_node(self, element: Element) -> str:
        """Render one element, repeated according to its multiplier.

        A multiplier of 0 yields an empty string for the element and its
        whole subtree. The tree is walked with explicit stacks, so deep
        nesting does not hit the interpreter's recursion limit.
        """
        # (element, children_done) pairs still to visit
        pending: List[Tuple[Element, bool]] = [(element, False)]
        # full renderings of finished elements, in document order
        done: List[str] = []

        while pending:
            node, children_done = pending.pop()

            if node.count == 0:
                done.append("")
                continue

            # Self-closing tags never carry text or children
            if node.tag in self.self_closing_tags:
                done.append(f"{self._start_tag(node)} />" * node.count)
                continue

            if not children_done:
                pending.append((node, True))
                pending.extend((child, False) for child in reversed(node.children))
                continue

            first = len(done) - len(node.children)
            inner = "".join(done[first:])
            del done[first:]

            instance = f"{self._start_tag(node)}>{node.text or ''}{inner}</{node.tag}>"
            done.append(instance * node.count)

        return done[0]

    def _start_tag(self, element: Element) -> str:
        """`<tag` plus id, class and attributes, without the closing `>`."""
        parts: List[str] = [f"<{element.tag}"]

        if element.id is not None:
            parts.append(f' id="{element.id}"')

        if element.classes:
            parts.append(f' class="{" ".join(element.classes)}"')

        for attr in element.attributes:
            if attr.value is not None:
                parts.append(f' {attr.name}="{attr.value}"')
            else:
                parts.append(f" {attr.name}")

        return "".join(parts)
