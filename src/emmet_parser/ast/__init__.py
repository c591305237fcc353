"""Abbreviation AST - element records and the parser that builds them."""

from emmet_parser.ast.node import DEFAULT_TAG, Attribute, Element, to_json
from emmet_parser.ast.parser import Parser

__all__ = ["DEFAULT_TAG", "Attribute", "Element", "Parser", "to_json"]
