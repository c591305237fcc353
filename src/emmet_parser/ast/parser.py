"""Parser - turns an abbreviation string into Element trees.

A single forward-only cursor reads the input. Every element is read as a
fixed chain of optional suffixes:

    tag  #id  .class*  [attrs]*  {text}  *N  >children

Matching stops at the first character that does not begin the next suffix
in the chain. Whatever is left over is not consumed and does not raise.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

import msgspec

from emmet_parser.ast.node import Attribute, Element
from emmet_parser.config import EmmetConfig
from emmet_parser.exceptions import InvalidAttribute, InvalidSyntax, UnclosedBracket

log = logging.getLogger(__name__)

TAG_NAME = re.compile(r"[A-Za-z0-9-]*")
IDENTIFIER = re.compile(r"[A-Za-z0-9_-]*")
NUMBER = re.compile(r"[0-9]*")
WHITESPACE = re.compile(r"\s*")
# A space belongs to an unquoted value unless it is followed by `name=`,
# which starts the next attribute: [min=4 max=6] vs [placeholder=Enter name]
UNQUOTED_VALUE = re.compile(r"(?:[A-Za-z0-9_.-]|[ ](?![ ]*[A-Za-z0-9_-]+=))*")
# Multipliers are unsigned 32-bit counts
MAX_COUNT = 2**32 - 1


class Parser:
    """Parses a single abbreviation. Instances are single-use.

    Usage:
        elements = Parser("ul>li.item*3").parse()
    """

    def __init__(self, text: str, config: Optional[EmmetConfig] = None):
        self.text = text
        self.pos = 0
        self.config = config or EmmetConfig()

    def parse(self) -> List[Element]:
        """Parse the whole input into a list of top-level siblings.

        Raises:
            InvalidSyntax: a required identifier or number is missing.
            UnclosedBracket: `[`, `{` or `"` is never closed.
            InvalidAttribute: an attribute list entry is malformed.
        """
        elements = self._parse_tree()

        self._skip_whitespace()
        if not self._at_end():
            log.debug(
                "Ignoring unparsed input at position %d: %r",
                self.pos,
                self.text[self.pos :],
            )

        log.debug("Parsed %d top-level element(s) from %r", len(elements), self.text)
        return elements

    # Structure

    def _parse_tree(self) -> List[Element]:
        """Read elements joined by `+` (or simply adjacent) until input runs out.

        A `>` opens a child list that stays open to the end of input, so a `+`
        always attaches to the innermost open list. Open lists are kept on an
        explicit stack; nesting depth is not limited by the interpreter stack.
        """
        # levels[i] holds the finished siblings at depth i; parents[i] is the
        # element whose `>` opened levels[i + 1]
        levels: List[List[Element]] = [[]]
        parents: List[Element] = []

        while True:
            self._skip_whitespace()
            if self._at_end():
                break

            start = self.pos
            element = self._parse_element()

            if self._peek() == ">":
                self.pos += 1
                parents.append(element)
                levels.append([])
                continue

            if self.pos == start:
                # nothing here starts an element
                break
            levels[-1].append(element)

            self._skip_whitespace()
            if self._peek() == "+":
                self.pos += 1

        # A parent is always the last element of its level, so closing the
        # lists innermost first keeps sibling order.
        while parents:
            children = levels.pop()
            parent = msgspec.structs.replace(parents.pop(), children=children)
            levels[-1].append(parent)

        return levels[0]

    def _parse_element(self) -> Element:
        """Read one element's suffix chain, up to but excluding `>`."""
        tag = self._match(TAG_NAME) or self.config.default_tag

        element_id = None
        if self._peek() == "#":
            self.pos += 1
            element_id = self._parse_identifier("id")

        classes: List[str] = []
        while self._peek() == ".":
            self.pos += 1
            classes.append(self._parse_identifier("class name"))
        self._reject_second_id(element_id)

        attributes: List[Attribute] = []
        while self._peek() == "[":
            attributes.extend(self._parse_attributes())
        self._reject_second_id(element_id)

        text = None
        if self._peek() == "{":
            text = self._parse_text()
            self._reject_second_id(element_id)

        multiplier = None
        if self._peek() == "*":
            self.pos += 1
            multiplier = self._parse_number()
            self._reject_second_id(element_id)

        return Element(
            tag=tag,
            id=element_id,
            classes=classes,
            attributes=attributes,
            text=text,
            multiplier=multiplier,
        )

    def _reject_second_id(self, element_id: Optional[str]) -> None:
        if element_id is not None and self._peek() == "#":
            raise InvalidSyntax(
                f"Element already has id '{element_id}' at position {self.pos}",
                self.pos,
            )

    # Suffixes

    def _parse_identifier(self, what: str) -> str:
        start = self.pos
        name = self._match(IDENTIFIER)
        if not name:
            raise InvalidSyntax(f"Expected {what} at position {start}", start)
        return name

    def _parse_attributes(self) -> List[Attribute]:
        opened_at = self.pos
        if self._peek() != "[":
            raise InvalidAttribute(f"expected '[' at position {self.pos}", self.pos)
        self.pos += 1

        attributes: List[Attribute] = []
        while True:
            self._skip_whitespace()
            if self._at_end():
                raise UnclosedBracket("[", opened_at)

            if self._peek() == "]":
                self.pos += 1
                return attributes

            start = self.pos
            name = self._match(IDENTIFIER)
            if not name:
                raise InvalidAttribute(
                    f"expected attribute name at position {start}", start
                )

            value = None
            if self._peek() == "=":
                self.pos += 1
                value = self._parse_attribute_value(name, opened_at)
            attributes.append(Attribute(name=name, value=value))

            self._skip_whitespace()
            if self._peek() == ",":
                self.pos += 1

    def _parse_attribute_value(self, name: str, opened_at: int) -> str:
        """Read a quoted value verbatim, or an unquoted run.

        Leading and trailing spaces of an unquoted run are trimmed, so
        `[title=Hi ]` gives `Hi`. Quoted values are never trimmed.
        """
        if self._peek() == '"':
            quote_at = self.pos
            end = self.text.find('"', quote_at + 1)
            if end == -1:
                raise UnclosedBracket('"', quote_at)
            self.pos = end + 1
            return self.text[quote_at + 1 : end]

        if self._at_end():
            raise UnclosedBracket("[", opened_at)

        start = self.pos
        value = self._match(UNQUOTED_VALUE).strip()
        if not value:
            raise InvalidAttribute(
                f"missing value for '{name}' at position {start}", start
            )
        return value

    def _parse_text(self) -> str:
        opened_at = self.pos
        end = self.text.find("}", opened_at + 1)
        if end == -1:
            raise UnclosedBracket("{", opened_at)
        self.pos = end + 1
        return self.text[opened_at + 1 : end]

    def _parse_number(self) -> int:
        start = self.pos
        digits = self._match(NUMBER)
        if not digits:
            if self._at_end():
                raise InvalidSyntax("Expected number after '*'", start)
            raise InvalidSyntax(f"Invalid number at position {start}", start)

        # length check first keeps int() away from huge digit runs
        significant = digits.lstrip("0") or "0"
        count = int(significant) if len(significant) <= 10 else MAX_COUNT + 1
        if count > MAX_COUNT:
            raise InvalidSyntax(f"Invalid number at position {start}", start)

        limit = self.config.max_multiplier
        if limit is not None and count > limit:
            raise InvalidSyntax(
                f"Multiplier {count} exceeds the limit of {limit}", start
            )
        return count

    # Cursor

    def _match(self, pattern: re.Pattern[str]) -> str:
        """Consume the match of `pattern` at the cursor (possibly empty)."""
        m = pattern.match(self.text, self.pos)
        if m is None:
            return ""
        self.pos = m.end()
        return m.group()

    def _peek(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def _at_end(self) -> bool:
        return self.pos >= len(self.text)

    def _skip_whitespace(self) -> None:
        self._match(WHITESPACE)
