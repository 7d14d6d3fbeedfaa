"""Cursor over ACF source text: whitespace, punctuation and string literals."""

from __future__ import annotations

import re

from .errors import GrammarError, ParseErrorKind
from .model import Span


# Unicode White_Space; \s would also match the \x1c-\x1f separators.
_WHITESPACE_RE = re.compile(r"[^\S\x1c-\x1f]*")


class Cursor:
    """Read position into an in-memory source string.

    Whitespace between tokens is insignificant; every ``scan_*`` / ``eat``
    call skips it on both sides of the token it consumes.
    """

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    # -- Primitives -----------------------------------------------------

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Current character, or ``""`` at end of input."""
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip_whitespace(self) -> None:
        self.pos = _WHITESPACE_RE.match(self.text, self.pos).end()

    def describe(self) -> str:
        """Human-readable name of the current character for diagnostics."""
        ch = self.peek()
        return "end of input" if not ch else repr(ch)

    def eat(self, ch: str) -> bool:
        """Consume *ch* if it is the next token."""
        self.skip_whitespace()
        if self.peek() != ch:
            return False
        self.pos += 1
        self.skip_whitespace()
        return True

    # -- Lookahead ------------------------------------------------------

    def at_literal(self) -> bool:
        self.skip_whitespace()
        return self.peek() == '"'

    def at_block_start(self) -> bool:
        """True when a terminated literal followed by ``{`` comes next."""
        if not self.at_literal():
            return False
        close = self.text.find('"', self.pos + 1)
        if close == -1:
            return False
        after = _WHITESPACE_RE.match(self.text, close + 1).end()
        return self.text.startswith("{", after)

    # -- Literal scanner ------------------------------------------------

    def scan_literal(self) -> tuple[str, Span]:
        """Consume one ``"..."`` literal and return its text and span.

        Everything up to the next double quote is captured verbatim,
        backslashes and line breaks included.
        """
        self.skip_whitespace()
        start = self.pos
        if self.peek() != '"':
            raise GrammarError(
                ParseErrorKind.EXPECTED_LITERAL,
                Span(start, min(start + 1, len(self.text))),
                f"expected a string literal but found {self.describe()}",
            )
        close = self.text.find('"', start + 1)
        if close == -1:
            raise GrammarError(
                ParseErrorKind.UNTERMINATED_LITERAL,
                Span(start, len(self.text)),
                "string literal is missing its closing quote",
            )
        self.pos = close + 1
        self.skip_whitespace()
        return self.text[start + 1 : close], Span(start, close + 1)
