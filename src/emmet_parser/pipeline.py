"""Public entry points: abbreviation -> Element trees -> markup."""

from __future__ import annotations

from typing import List

from emmet_parser.ast.node import Element
from emmet_parser.ast.parser import Parser
from emmet_parser.compiler.renderer import Renderer
from emmet_parser.config import EmmetConfig


def parse_emmet(text: str, config: EmmetConfig | None = None) -> List[Element]:
    """Parse an abbreviation into its top-level sibling elements.

    Empty or whitespace-only input yields an empty list. The first error
    aborts the parse; no partial tree is returned.

    Raises:
        EmmetError: One of InvalidSyntax, UnclosedBracket, InvalidAttribute.

    Example:
        >>> [e.tag for e in parse_emmet("div+p")]
        ['div', 'p']
    """
    return Parser(text, config).parse()


def emmet_to_html(text: str, config: EmmetConfig | None = None) -> str:
    """Expand an abbreviation straight to markup.

    Example:
        >>> emmet_to_html("ul>li.item*2")
        '<ul><li class="item"></li><li class="item"></li></ul>'
    """
    elements = parse_emmet(text, config)
    return Renderer(config).render(elements)
