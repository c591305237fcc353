"""emmet_parser - Emmet abbreviation expander

Parses abbreviations like `div#main>p.lead{Hi}+ul>li*3` into element trees
and renders them to markup.
"""

from emmet_parser._version import __version__

# Re-export from ast
from emmet_parser.ast import Attribute, Element, Parser, to_json

# Re-export from compiler
from emmet_parser.compiler import Renderer
from emmet_parser.config import EmmetConfig
from emmet_parser.exceptions import (
    ConfigError,
    EmmetError,
    InvalidAttribute,
    InvalidSyntax,
    UnclosedBracket,
)
from emmet_parser.pipeline import emmet_to_html, parse_emmet

__all__ = [
    "__version__",
    # pipeline
    "parse_emmet",
    "emmet_to_html",
    # ast
    "Attribute",
    "Element",
    "Parser",
    "to_json",
    # compiler
    "Renderer",
    # config
    "EmmetConfig",
    # errors
    "EmmetError",
    "InvalidSyntax",
    "UnclosedBracket",
    "InvalidAttribute",
    "ConfigError",
]
