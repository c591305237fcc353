"""Emmet Compiler - serializes parsed Element trees to markup."""

from emmet_parser.compiler.renderer import Renderer

__all__ = ["Renderer"]
