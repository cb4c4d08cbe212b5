"""rank-order: initial per-rank node ordering for layered graph layout."""

from rank_order.config import OrderConfig
from rank_order.errors import GraphFormatError, LayeringError, MissingRankError, RankOrderError
from rank_order.ir.graph import EdgeRef, NodeData, RankedGraph
from rank_order.order import (
    Layering,
    OrderableGraph,
    align_layers,
    check_layering,
    compute_initial_order,
    count_crossings,
    dfs_layers,
    init_order,
)

__all__ = [
    "EdgeRef",
    "GraphFormatError",
    "Layering",
    "LayeringError",
    "MissingRankError",
    "NodeData",
    "OrderConfig",
    "OrderableGraph",
    "RankOrderError",
    "RankedGraph",
    "align_layers",
    "check_layering",
    "compute_initial_order",
    "count_crossings",
    "dfs_layers",
    "init_order",
    "order_json",
]


def order_json(src: str, align: bool = True, missing_order: int | None = None) -> Layering:
    """Parse a JSON graph document and compute its initial layering.

    Args:
        src: JSON text with ``nodes`` and ``edges`` lists.
        align: False to skip the alternating-layer alignment pass.
        missing_order: Order used for entity nodes without one; None sorts them last.

    Returns:
        One list of node ids per rank.

    Raises:
        GraphFormatError: If the document is not a valid graph.
        MissingRankError: If a simple node has no valid rank.
    """
    graph = RankedGraph.from_json(src)
    return init_order(graph, OrderConfig(align=align, missing_order=missing_order))
