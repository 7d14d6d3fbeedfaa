"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Knobs accepted by :func:`acf_core.loads` and friends.

    ``max_depth`` bounds block nesting so hostile input fails with a
    parse error rather than exhausting the interpreter stack.
    """

    max_depth: int = 256
    allow_multiple_roots: bool = True
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

    @classmethod
    def strict(cls) -> ParseOptions:
        """Preset that rejects documents with more than one top-level block."""
        return cls(allow_multiple_roots=False)
