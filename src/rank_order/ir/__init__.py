"""Intermediate representation: the ranked graph model."""

from rank_order.ir.graph import EdgeRef, NodeData, RankedGraph

__all__ = [
    "EdgeRef",
    "NodeData",
    "RankedGraph",
]
