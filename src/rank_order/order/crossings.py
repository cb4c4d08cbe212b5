"""Layering diagnostics: crossing count and structural checks."""

from __future__ import annotations

from collections import Counter

from rank_order.errors import LayeringError
from rank_order.order.base import Layering, OrderableGraph
from rank_order.order.init_order import simple_node_ranks


def count_crossings(layering: Layering, graph: OrderableGraph) -> int:
    """Count pairwise crossings of successor edges between adjacent layers."""
    total = 0
    for l_idx in range(len(layering) - 1):
        tgt_pos: dict[str, int] = {nid: i for i, nid in enumerate(layering[l_idx + 1])}
        edges: list[tuple[int, int]] = []
        for sp, src_id in enumerate(layering[l_idx]):
            for nb in graph.successors(src_id):
                if nb in tgt_pos:
                    edges.append((sp, tgt_pos[nb]))
        for i in range(len(edges)):
            for j in range(i + 1, len(edges)):
                ei, ej = edges[i], edges[j]
                if (ei[0] < ej[0] and ei[1] > ej[1]) or (ei[0] > ej[0] and ei[1] < ej[1]):
                    total += 1
    return total


def check_layering(layering: Layering, graph: OrderableGraph) -> None:
    """Raise LayeringError unless every simple node sits exactly once in its rank's layer."""
    ranks = simple_node_ranks(graph)

    counts = Counter(nid for layer in layering for nid in layer)
    duplicated = sorted(nid for nid, n in counts.items() if n > 1)
    if duplicated:
        raise LayeringError(f"nodes placed more than once: {', '.join(duplicated)}")

    for layer_idx, layer in enumerate(layering):
        for nid in layer:
            if nid not in ranks:
                raise LayeringError(f"layer {layer_idx} holds '{nid}', which is not a simple node")
            if ranks[nid] != layer_idx:
                raise LayeringError(f"node '{nid}' has rank {ranks[nid]} but sits in layer {layer_idx}")

    missing = [nid for nid in ranks if nid not in counts]
    if missing:
        raise LayeringError(f"nodes missing from layering: {', '.join(missing)}")
