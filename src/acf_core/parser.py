"""Recursive-descent parser: expressions, blocks and whole documents.

Grammar::

    document   := block* EOF
    block      := literal '{' expression* block* '}'
    expression := literal literal
    literal    := '"' (any char except '"')* '"'

Within a block every expression must come before the first child block.
"""

from __future__ import annotations

from dataclasses import dataclass

from .document import Document
from .errors import GrammarError, ParseErrorKind
from .model import Block, Span
from .options import ParseOptions
from .scanner import Cursor


@dataclass(slots=True)
class Expression:
    """One key/value pair; folded into its block's mapping."""

    name: str
    value: str
    span: Span


# ---------------------------------------------------------------------------
# Expression
# ---------------------------------------------------------------------------

def parse_expression(cur: Cursor) -> Expression:
    """Consume two consecutive literals as a key/value pair."""
    name, key_span = cur.scan_literal()
    value, value_span = cur.scan_literal()
    return Expression(name=name, value=value, span=Span(key_span.start, value_span.end))


# ---------------------------------------------------------------------------
# Block
# ---------------------------------------------------------------------------

def parse_block(cur: Cursor, options: ParseOptions | None = None, depth: int = 1) -> Block:
    """Parse ``"name" { expression* block* }`` at the cursor.

    Raises :class:`GrammarError` on the first violation; nothing is
    recovered or retried.
    """
    options = options or ParseOptions()

    name, name_span = cur.scan_literal()
    open_pos = cur.pos
    if not cur.eat("{"):
        raise GrammarError(
            ParseErrorKind.EXPECTED_OPENING_BRACE,
            Span(open_pos, min(open_pos + 1, len(cur.text))),
            f"expected '{{' after block name {name!r} but found {cur.describe()}",
        )
    if depth > options.max_depth:
        raise GrammarError(
            ParseErrorKind.NESTING_TOO_DEEP,
            Span(name_span.start, cur.pos),
            f"block {name!r} exceeds the maximum nesting depth of {options.max_depth}",
        )

    expressions: list[Expression] = []
    while cur.at_literal() and not cur.at_block_start():
        expressions.append(parse_expression(cur))

    children: list[Block] = []
    while cur.at_block_start():
        children.append(parse_block(cur, options, depth + 1))

    if children and cur.at_literal():
        stray = parse_expression(cur)
        raise GrammarError(
            ParseErrorKind.EXPRESSION_AFTER_CHILD,
            stray.span,
            f"key {stray.name!r} in block {name!r} follows a child block;"
            " expressions must precede child blocks",
        )

    if not cur.eat("}"):
        span = Span(open_pos, max(cur.pos, open_pos + 1))
        raise GrammarError(
            ParseErrorKind.EXPECTED_CLOSING_BRACE,
            span,
            f"expected a closing brace within '{span}' but found {cur.describe()}",
        )

    mapping: dict[str, str] = {}
    for expr in expressions:
        mapping[expr.name] = expr.value

    return Block(name=name, expressions=mapping, children=tuple(children))


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

def parse_document(text: str, options: ParseOptions | None = None) -> Document:
    """Parse top-level blocks until the input is exhausted."""
    options = options or ParseOptions()
    cur = Cursor(text)
    blocks: list[Block] = []

    cur.skip_whitespace()
    while not cur.at_end():
        if blocks and not options.allow_multiple_roots:
            raise GrammarError(
                ParseErrorKind.MULTIPLE_ROOTS,
                Span(cur.pos, len(text)),
                f"unexpected second top-level block after {blocks[0].name!r}",
            )
        start = cur.pos
        try:
            blocks.append(parse_block(cur, options))
        except RecursionError:
            raise GrammarError(
                ParseErrorKind.NESTING_TOO_DEEP,
                Span(start, len(text)),
                "block nesting exceeds the interpreter recursion limit",
            ) from None
        cur.skip_whitespace()

    return Document(blocks=tuple(blocks))
