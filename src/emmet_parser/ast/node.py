from __future__ import annotations

from typing import List, Optional

import msgspec

DEFAULT_TAG = "div"


class Attribute(msgspec.Struct):
    """A single `name` or `name=value` entry from an attribute list."""

    name: str
    value: Optional[str] = None


class Element(msgspec.Struct):
    """One node of a parsed abbreviation.

    `children` are owned by this element; siblings live in the list that
    holds it. A missing multiplier means the element is emitted once.
    """

    tag: str = DEFAULT_TAG
    id: Optional[str] = None
    classes: List[str] = msgspec.field(default_factory=list)
    attributes: List[Attribute] = msgspec.field(default_factory=list)
    text: Optional[str] = None
    children: List[Element] = msgspec.field(default_factory=list)
    multiplier: Optional[int] = None

    @property
    def count(self) -> int:
        return 1 if self.multiplier is None else self.multiplier


def to_json(elements: List[Element]) -> str:
    """Encode a parsed sibling list as a JSON array."""

    return msgspec.json.encode(elements).decode("utf-8")
