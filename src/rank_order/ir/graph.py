"""Ranked graph model — a networkx-backed graph the ordering pass can consume.

The graph keeps two networkx DiGraphs: ``digraph`` holds the layout edges
(successor relation) and ``tree`` holds the compound hierarchy (parent ->
child). Node attributes live in a ``NodeData`` stored under the ``data`` key
of each ``digraph`` node, the same way the rest of the pipeline stores them.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import networkx as nx

from rank_order.errors import GraphFormatError


@dataclass(frozen=True)
class EdgeRef:
    """The entity endpoints of an interaction node: source ``v``, target ``w``."""

    v: str
    w: str


@dataclass
class NodeData:
    id: str
    rank: int | None = None
    order: int | None = None
    edge_obj: EdgeRef | None = None
    parent: str | None = None
    label: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            self.label = self.id


class RankedGraph:
    """A directed graph whose nodes carry rank/order data and an optional parent.

    Satisfies the ``OrderableGraph`` protocol used by ``rank_order.order``.
    """

    def __init__(self, digraph: nx.DiGraph | None = None, tree: nx.DiGraph | None = None) -> None:
        self.digraph: nx.DiGraph = digraph if digraph is not None else nx.DiGraph()
        self.tree: nx.DiGraph = tree if tree is not None else nx.DiGraph()

    # ─── OrderableGraph protocol ─────────────────────────────────────────────

    def nodes(self) -> list[str]:
        return list(self.digraph.nodes)

    def node(self, node_id: str) -> NodeData:
        return self.digraph.nodes[node_id]["data"]

    def children(self, node_id: str) -> list[str]:
        if node_id not in self.tree:
            return []
        return list(self.tree.successors(node_id))

    def successors(self, node_id: str) -> list[str]:
        return list(self.digraph.successors(node_id))

    # ─── Construction ────────────────────────────────────────────────────────

    def add_node(
        self,
        node_id: str,
        rank: int | None = None,
        order: int | None = None,
        edge_obj: EdgeRef | None = None,
        parent: str | None = None,
        label: str = "",
    ) -> NodeData:
        """Add a node, or replace the data of an existing one."""
        data = NodeData(id=node_id, rank=rank, order=order, edge_obj=edge_obj, parent=parent, label=label)
        self.digraph.add_node(node_id, data=data)
        if parent is not None:
            self.set_parent(node_id, parent)
        return data

    def add_edge(self, src: str, tgt: str) -> None:
        _ensure_node(self.digraph, src)
        _ensure_node(self.digraph, tgt)
        self.digraph.add_edge(src, tgt)

    def set_parent(self, node_id: str, parent: str) -> None:
        _ensure_node(self.digraph, node_id)
        _ensure_node(self.digraph, parent)
        if node_id in self.tree:
            for old_parent in list(self.tree.predecessors(node_id)):
                self.tree.remove_edge(old_parent, node_id)
        self.tree.add_edge(parent, node_id)
        self.node(node_id).parent = parent

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def simple_nodes(self) -> list[str]:
        return [v for v in self.digraph.nodes if not self.children(v)]

    @classmethod
    def from_dict(cls, doc: Mapping[str, object]) -> RankedGraph:
        """Build a RankedGraph from a ``{"nodes": [...], "edges": [...]}`` document."""
        if not isinstance(doc, Mapping):
            raise GraphFormatError(f"graph document must be an object, got {type(doc).__name__}")

        graph = cls()
        pending_children: list[tuple[str, list[object]]] = []

        for entry in _as_list(doc.get("nodes", []), "nodes"):
            if not isinstance(entry, Mapping):
                raise GraphFormatError(f"node entry must be an object, got {entry!r}")
            node_id = _as_id(entry.get("id"), "node id")
            parent = entry.get("parent")
            graph.add_node(
                node_id,
                rank=_as_optional_int(entry.get("rank"), node_id, "rank"),
                order=_as_optional_int(entry.get("order"), node_id, "order"),
                edge_obj=_as_edge_ref(entry.get("edge"), node_id),
                parent=_as_id(parent, "parent") if parent is not None else None,
                label=str(entry.get("label") or ""),
            )
            if "children" in entry:
                pending_children.append((node_id, _as_list(entry["children"], "children")))

        for parent_id, children in pending_children:
            for child in children:
                graph.set_parent(_as_id(child, "child id"), parent_id)

        for entry in _as_list(doc.get("edges", []), "edges"):
            src, tgt = _as_endpoints(entry)
            graph.add_edge(src, tgt)

        return graph

    @classmethod
    def from_json(cls, text: str) -> RankedGraph:
        try:
            doc = json.loads(text)
        except json.JSONDecodeError as e:
            raise GraphFormatError(f"invalid JSON: {e}") from e
        return cls.from_dict(doc)


def _ensure_node(digraph: nx.DiGraph, node_id: str) -> None:
    if node_id not in digraph:
        digraph.add_node(node_id, data=NodeData(id=node_id))


def _as_list(value: object, what: str) -> list[object]:
    if not isinstance(value, list):
        raise GraphFormatError(f"'{what}' must be a list, got {type(value).__name__}")
    return value


def _as_id(value: object, what: str) -> str:
    # bool is an int subclass; true/false are not identifiers
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise GraphFormatError(f"{what} must be a string or integer, got {value!r}")
    return str(value)


def _as_optional_int(value: object, node_id: str, field_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise GraphFormatError(f"node '{node_id}': {field_name} must be an integer, got {value!r}")
    return value


def _as_edge_ref(value: object, node_id: str) -> EdgeRef | None:
    if value is None:
        return None
    if not isinstance(value, Mapping) or "v" not in value or "w" not in value:
        raise GraphFormatError(f"node '{node_id}': edge must be an object with 'v' and 'w'")
    return EdgeRef(v=_as_id(value["v"], "edge v"), w=_as_id(value["w"], "edge w"))


def _as_endpoints(entry: object) -> tuple[str, str]:
    if isinstance(entry, Mapping):
        src = entry.get("source", entry.get("v"))
        tgt = entry.get("target", entry.get("w"))
    elif isinstance(entry, Iterable) and not isinstance(entry, str):
        pair = list(entry)
        if len(pair) != 2:
            raise GraphFormatError(f"edge must have exactly two endpoints, got {entry!r}")
        src, tgt = pair
    else:
        raise GraphFormatError(f"edge must be a pair or an object, got {entry!r}")
    return _as_id(src, "edge source"), _as_id(tgt, "edge target")
