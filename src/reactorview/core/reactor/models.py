from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from reactorview.core.view.models import Component, ExecutionContext


@dataclass(frozen=True)
class Reactor:
    """The ordered component list of a multi-project build plus its host context."""

    components: Tuple[Component, ...]
    context: ExecutionContext

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)


__all__ = ["Reactor"]
