"""Data model for parsed ACF content: spans and blocks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


# ---------------------------------------------------------------------------
# Span
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Span:
    """Half-open character range ``[start, end)`` into the source text."""

    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"

    def location(self, text: str) -> tuple[int, int]:
        """Return the 1-based ``(line, column)`` of ``start`` within *text*."""
        head = text[: self.start]
        line = head.count("\n") + 1
        column = self.start - (head.rfind("\n") + 1) + 1
        return line, column


# ---------------------------------------------------------------------------
# Block
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Block:
    """A named ``{ ... }`` unit.

    ``expressions`` maps key to value (a repeated key keeps its last
    value) and is read-only; ``children`` keeps nested blocks in source
    order.
    """

    name: str
    expressions: Mapping[str, str] = field(default_factory=dict)
    children: tuple[Block, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "expressions", MappingProxyType(dict(self.expressions)))
        object.__setattr__(self, "children", tuple(self.children))

    def __hash__(self) -> int:
        return hash((self.name, frozenset(self.expressions.items()), self.children))

    # -- Expression access ----------------------------------------------

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.expressions.get(key, default)

    def __getitem__(self, key: str) -> str:
        return self.expressions[key]

    def __contains__(self, key: object) -> bool:
        return key in self.expressions

    # -- Child access ---------------------------------------------------

    def find(self, name: str) -> Block | None:
        """First direct child called *name*, or ``None``."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def find_all(self, name: str) -> list[Block]:
        return [child for child in self.children if child.name == name]

    def to_dict(self) -> dict[str, object]:
        """Plain nested dict; children are keyed by name after the expressions."""
        result: dict[str, object] = dict(self.expressions)
        for child in self.children:
            result[child.name] = child.to_dict()
        return result
