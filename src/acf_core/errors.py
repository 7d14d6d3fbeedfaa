"""Error taxonomy for ACF reading and parsing.

Callers see three outcomes besides success:

- :class:`ReadError` — the source text could not be obtained.
- :class:`ParseError` — the grammar rejected the text.  The located
  :class:`GrammarError` diagnostic is attached as ``cause``.
- :class:`AcfError` itself — uncategorised fallback, never raised by the parser.
"""

from __future__ import annotations

from enum import Enum, auto

from .model import Span


# ---------------------------------------------------------------------------
# Grammar diagnostics
# ---------------------------------------------------------------------------

class ParseErrorKind(Enum):
    EXPECTED_CLOSING_BRACE = auto()
    EXPRESSION_AFTER_CHILD = auto()
    EXPECTED_LITERAL = auto()
    UNTERMINATED_LITERAL = auto()
    EXPECTED_OPENING_BRACE = auto()
    NESTING_TOO_DEEP = auto()
    MULTIPLE_ROOTS = auto()
    UNKNOWN = auto()


class GrammarError(Exception):
    """A located grammar violation raised by the scanner and parser."""

    def __init__(
        self,
        kind: ParseErrorKind = ParseErrorKind.UNKNOWN,
        span: Span | None = None,
        message: str = "an unknown parsing error occurred",
    ) -> None:
        span = span if span is not None else Span(0, 0)
        super().__init__(kind, span, message)
        self.kind = kind
        self.span = span
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"GrammarError({self.kind.name}, {self.span}, {self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GrammarError):
            return NotImplemented
        return (self.kind, self.span, self.message) == (other.kind, other.span, other.message)

    def __hash__(self) -> int:
        return hash((self.kind, self.span, self.message))


# ---------------------------------------------------------------------------
# Public errors
# ---------------------------------------------------------------------------

class AcfError(Exception):
    """Base class; a bare instance stands for an unknown error."""

    def __str__(self) -> str:
        return "an unknown error occurred"

    @property
    def cause(self) -> Exception | None:
        return None

    def _key(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AcfError):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))


class ReadError(AcfError):
    """The named source could not be read."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"failed to read '{self.path}'"

    def __repr__(self) -> str:
        return f"ReadError({self.path!r})"

    def _key(self) -> tuple:
        return (self.path,)


class ParseError(AcfError):
    """The input could not be parsed; wraps the underlying diagnostic."""

    def __init__(self, diagnostic: GrammarError | None = None) -> None:
        diagnostic = diagnostic if diagnostic is not None else GrammarError()
        super().__init__(diagnostic)
        self.diagnostic = diagnostic
        self.__cause__ = diagnostic

    @property
    def cause(self) -> GrammarError:
        return self.diagnostic

    @property
    def kind(self) -> ParseErrorKind:
        return self.diagnostic.kind

    @property
    def span(self) -> Span:
        return self.diagnostic.span

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return f"the provided input could not be parsed: {self.diagnostic}"

    def __repr__(self) -> str:
        return f"ParseError({self.diagnostic!r})"

    def _key(self) -> tuple:
        return (self.diagnostic,)
