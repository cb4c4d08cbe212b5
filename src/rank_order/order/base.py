"""Graph protocol consumed by the ordering pass."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from rank_order.ir.graph import EdgeRef

Layer = list[str]
Layering = list[Layer]


class OrderableNode(Protocol):
    """Node attributes read while ordering."""

    rank: int | None
    order: int | None
    edge_obj: EdgeRef | None


class OrderableGraph(Protocol):
    """Protocol that any graph handed to ``init_order`` must implement."""

    def nodes(self) -> Iterable[str]:
        """All node ids, in the graph's native enumeration order."""
        ...

    def node(self, node_id: str) -> OrderableNode:
        """The attribute record of a node."""
        ...

    def children(self, node_id: str) -> Sequence[str]:
        """Compound children of a node; empty for simple nodes."""
        ...

    def successors(self, node_id: str) -> Iterable[str]:
        """Direct successors of a node, in native order."""
        ...
