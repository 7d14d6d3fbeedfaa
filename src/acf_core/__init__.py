"""ACF Core — parser for Valve's ACF/VDF text format."""

from .document import Document
from .model import Block, Span
from .options import ParseOptions
from .errors import (
    AcfError,
    GrammarError,
    ParseError,
    ParseErrorKind,
    ReadError,
)
from .loader import load, loads, parse_acf

__all__ = [
    "loads",
    "load",
    "parse_acf",
    "Document",
    "Block",
    "Span",
    "ParseOptions",
    "AcfError",
    "GrammarError",
    "ParseError",
    "ParseErrorKind",
    "ReadError",
]
