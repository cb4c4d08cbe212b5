"""Centralized configuration for rank-order."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class OrderConfig:
    """Configuration for the initial ordering pass.

    ``missing_order`` decides where entity nodes without an ``order`` attribute
    land when entity layers are resorted: ``None`` places them after every
    ordered node (keeping their DFS order), an integer is used as their order.
    """

    align: bool = True
    missing_order: int | None = None
