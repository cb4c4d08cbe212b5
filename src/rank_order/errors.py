"""Exceptions raised by rank-order.

All errors derive from ValueError so callers that only guard against bad
input keep working.
"""

from __future__ import annotations


class RankOrderError(ValueError):
    """Base class for rank-order errors."""


class MissingRankError(RankOrderError):
    """A simple node has no usable rank."""

    def __init__(self, node_id: str, rank: object) -> None:
        self.node_id = node_id
        self.rank = rank
        super().__init__(f"node '{node_id}' has no valid rank (got {rank!r})")


class GraphFormatError(RankOrderError):
    """A graph document could not be turned into a RankedGraph."""


class LayeringError(RankOrderError):
    """A layering does not match the graph it was computed from."""
