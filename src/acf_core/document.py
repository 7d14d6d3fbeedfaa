"""Document — the final output of ACF parsing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .model import Block


@dataclass(frozen=True)
class Document:
    """Ordered top-level blocks of one ACF source.

    Steam manifests carry a single ``AppState`` root, but several roots
    are structurally legal and kept in file order.
    """

    blocks: tuple[Block, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "blocks", tuple(self.blocks))

    # -- Convenience accessors ------------------------------------------

    @property
    def root(self) -> Block | None:
        return self.blocks[0] if self.blocks else None

    def find(self, name: str) -> Block | None:
        for block in self.blocks:
            if block.name == name:
                return block
        return None

    def to_dict(self) -> dict[str, object]:
        return {block.name: block.to_dict() for block in self.blocks}

    # -- Sequence protocol ----------------------------------------------

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __getitem__(self, index: int) -> Block:
        return self.blocks[index]
