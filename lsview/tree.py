"""Tree-drawing characters for the tree view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class TreePart(Enum):
    """One column of tree-drawing characters."""

    EDGE = "├──"
    LINE = "│  "
    CORNER = "└──"
    BLANK = "   "

    def ascii_art(self) -> str:
        return self.value


@dataclass(frozen=True)
class TreeDepth:
    """How many directories deep an entry is; the top level is 0."""

    level: int

    @classmethod
    def root(cls) -> TreeDepth:
        return cls(0)

    def deeper(self) -> TreeDepth:
        return TreeDepth(self.level + 1)

    def iterate_over(self, items: Iterable[T]) -> Iterator[tuple[TreeParams, T]]:
        """Yield each item with tree parameters marking whether it is the last."""
        iterator = iter(items)
        sentinel = object()
        current = next(iterator, sentinel)
        if current is sentinel:
            return
        for following in iterator:
            yield TreeParams(self, False), current
            current = following
        yield TreeParams(self, True), current


@dataclass(frozen=True)
class TreeParams:
    """The depth of a row and whether it is the last in its directory."""

    depth: TreeDepth
    last: bool

    def is_at_root(self) -> bool:
        return self.depth.level == 0


class TreeTrunk:
    """Builds the tree parts for successive rows."""

    def __init__(self) -> None:
        self._stack: list[TreePart] = []
        self._last_params: Optional[TreeParams] = None

    def new_row(self, params: TreeParams) -> list[TreePart]:
        """Return the tree parts to draw before a row with these parameters."""
        previous = self._last_params
        if previous is not None:
            self._stack[previous.depth.level] = TreePart.BLANK if previous.last else TreePart.LINE

        level = params.depth.level
        del self._stack[level + 1:]
        self._stack.extend([TreePart.EDGE] * (level + 1 - len(self._stack)))
        self._stack[level] = TreePart.CORNER if params.last else TreePart.EDGE

        self._last_params = params
        # The zeroth level is skipped so unrelated top-level entries are not joined.
        return self._stack[1:]