"""Ordering phase: initial per-rank node order and its diagnostics."""

from __future__ import annotations

from rank_order.order.base import Layer, Layering, OrderableGraph, OrderableNode
from rank_order.order.crossings import check_layering, count_crossings
from rank_order.order.init_order import (
    align_layers,
    compute_initial_order,
    dfs_layers,
    init_order,
    simple_node_ranks,
)

__all__ = [
    "Layer",
    "Layering",
    "OrderableGraph",
    "OrderableNode",
    "align_layers",
    "check_layering",
    "compute_initial_order",
    "count_crossings",
    "dfs_layers",
    "init_order",
    "simple_node_ranks",
]
