"""Initial node ordering for layered (Sugiyama-style) layout.

Two passes, run in sequence:
  1. Rank-DFS: walk simple nodes in increasing rank order, depth-first over
     successor edges, appending each node to its rank's layer on first visit
     (Gansner et al., "A Technique for Drawing Directed Graphs").
  2. Alternating-layer alignment: entity layers (even indices) are resorted by
     their pre-existing ``order``; interaction layers (odd indices) are
     regrouped to follow the entity node each interaction points at.
"""

from __future__ import annotations

import logging

from rank_order.config import OrderConfig
from rank_order.errors import MissingRankError
from rank_order.order.base import Layer, Layering, OrderableGraph

logger = logging.getLogger(__name__)


# ─── Rank-DFS ────────────────────────────────────────────────────────────────


def simple_node_ranks(graph: OrderableGraph) -> dict[str, int]:
    """Map every simple (childless) node to its rank, in enumeration order.

    Raises MissingRankError if a simple node has no non-negative integer rank.
    """
    ranks: dict[str, int] = {}
    for node_id in graph.nodes():
        if graph.children(node_id):
            continue
        rank = getattr(graph.node(node_id), "rank", None)
        if isinstance(rank, bool) or not isinstance(rank, int) or rank < 0:
            raise MissingRankError(node_id, rank)
        ranks[node_id] = rank
    return ranks


def dfs_layers(graph: OrderableGraph) -> Layering:
    """Build one layer per rank, each ordered by DFS first-visit time."""
    ranks = simple_node_ranks(graph)
    if not ranks:
        return []

    layers: Layering = [[] for _ in range(max(ranks.values()) + 1)]
    visited: set[str] = set()

    # sorted() is stable: equal ranks keep the graph's enumeration order
    for start in sorted(ranks, key=ranks.__getitem__):
        _dfs(graph, start, ranks, visited, layers)

    logger.debug("rank-dfs placed %d nodes into %d layers", len(visited), len(layers))
    return layers


def _dfs(
    graph: OrderableGraph,
    start: str,
    ranks: dict[str, int],
    visited: set[str],
    layers: Layering,
) -> None:
    # Successors are pushed reversed so they pop in native order; the visited
    # check happens at pop time, which reproduces recursive pre-order exactly.
    stack: list[str] = [start]
    while stack:
        node_id = stack.pop()
        if node_id in visited or node_id not in ranks:
            continue
        visited.add(node_id)
        layers[ranks[node_id]].append(node_id)
        stack.extend(reversed(list(graph.successors(node_id))))


# ─── Alternating-Layer Alignment ─────────────────────────────────────────────


def align_layers(graph: OrderableGraph, layers: Layering, missing_order: int | None = None) -> Layering:
    """Realign interaction layers with their neighbouring entity layers.

    Even layers are stable-sorted by each node's ``order`` (see
    ``OrderConfig.missing_order`` for nodes without one). An odd layer at
    index ``i`` then follows the next layer, matching on ``edge_obj.w``, when
    ``i > len(layers) // 2``, and the previous layer, matching on
    ``edge_obj.v``, otherwise. Interaction nodes that match nothing keep their
    relative order at the end of the layer.

    With fewer than two layers the input is returned unchanged.
    """
    mid_layer_count = len(layers) // 2
    if not mid_layer_count:
        return layers

    node_sorted: Layering = [
        _sort_by_order(graph, layer, missing_order) if index % 2 == 0 else list(layer)
        for index, layer in enumerate(layers)
    ]

    result: Layering = []
    for index, layer in enumerate(node_sorted):
        if index % 2 == 0:
            result.append(layer)
        elif index > mid_layer_count:
            reference = node_sorted[index + 1] if index + 1 < len(node_sorted) else []
            result.append(_follow_reference(graph, index, layer, reference, "w"))
        else:
            result.append(_follow_reference(graph, index, layer, node_sorted[index - 1], "v"))
    return result


def _sort_by_order(graph: OrderableGraph, layer: Layer, missing_order: int | None) -> Layer:
    def key(node_id: str) -> tuple[int, int]:
        order = getattr(graph.node(node_id), "order", None)
        if order is not None:
            return (0, order)
        if missing_order is not None:
            return (0, missing_order)
        return (1, 0)

    return sorted(layer, key=key)


def _follow_reference(graph: OrderableGraph, index: int, layer: Layer, reference: Layer, endpoint: str) -> Layer:
    buckets: dict[str, list[str]] = {}
    for node_id in layer:
        edge_obj = getattr(graph.node(node_id), "edge_obj", None)
        if edge_obj is None:
            continue
        buckets.setdefault(getattr(edge_obj, endpoint), []).append(node_id)

    matched: Layer = []
    for ref_id in reference:
        matched.extend(buckets.pop(ref_id, []))

    claimed = set(matched)
    unmatched = [node_id for node_id in layer if node_id not in claimed]
    if unmatched:
        logger.debug("layer %d: %d interaction node(s) left unmatched on '%s'", index, len(unmatched), endpoint)
    return matched + unmatched


# ─── Entry Point ─────────────────────────────────────────────────────────────


def init_order(graph: OrderableGraph, config: OrderConfig | None = None) -> Layering:
    """Compute the initial layering of a ranked graph.

    Args:
        graph: Any object implementing ``OrderableGraph``.
        config: Ordering options; defaults to ``OrderConfig()``.

    Returns:
        One list of node ids per rank, in initial left-to-right order.
        Compound nodes are left out; an empty or all-compound graph yields [].

    Raises:
        MissingRankError: If a simple node has no valid rank.
    """
    cfg = config if config is not None else OrderConfig()
    layers = dfs_layers(graph)
    if not cfg.align:
        return layers
    return align_layers(graph, layers, cfg.missing_order)


compute_initial_order = init_order
