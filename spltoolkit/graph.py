"""Directed graphs of named nodes joined by arcs with costs."""

from __future__ import annotations

from functools import cmp_to_key
from itertools import count
from typing import Any, Callable, Iterable, Iterator

CompareFn = Callable[[Any, Any], int]


def _string_compare(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _default_node_ordering(n1: Node, n2: Node) -> int:
    return _string_compare(n1.name, n2.name)


def _default_arc_ordering(a1: Arc, a2: Arc) -> int:
    cmp = _string_compare(a1.start.name, a2.start.name)
    if cmp:
        return cmp
    cmp = _string_compare(a1.end.name, a2.end.name)
    if cmp:
        return cmp
    if a1.cost != a2.cost:
        return -1 if a1.cost < a2.cost else 1
    return (a1._sequence > a2._sequence) - (a1._sequence < a2._sequence)


class Node:
    """A named node in a graph."""

    def __init__(self, name: str, graph: Graph) -> None:
        self.name = name
        self.graph = graph
        self._arcs: list[Arc] = []

    @property
    def arcs(self) -> list[Arc]:
        """The arcs leaving this node, in the graph's arc ordering."""
        return self.graph._sort_arcs(self._arcs)

    def is_connected(self, other: Node) -> bool:
        """Return True if an arc leads from this node to other."""
        return any(arc.end is other for arc in self._arcs)

    def neighbors(self) -> list[Node]:
        """Return the distinct nodes reached by arcs from this node."""
        unique = {id(arc.end): arc.end for arc in self._arcs}
        return self.graph._sort_nodes(unique.values())

    def __repr__(self) -> str:
        return f"Node({self.name!r})"


class Arc:
    """A directed arc from one node to another, carrying a cost."""

    def __init__(self, start: Node, end: Node, graph: Graph, sequence: int) -> None:
        self.start = start
        self.end = end
        self.graph = graph
        self.cost = 0.0
        self._sequence = sequence

    def __str__(self) -> str:
        return f"{self.start.name} -> {self.end.name}"

    def __repr__(self) -> str:
        return f"Arc({self.start.name!r} -> {self.end.name!r}, cost={self.cost!r})"


class Graph:
    """A directed graph; iterating it yields its nodes in node ordering.

    Nodes are ordered by name and arcs by start name, end name and cost
    unless other comparison functions are installed.
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._arcs: list[Arc] = []
        self._names: dict[str, Node] = {}
        self._node_cmp: CompareFn = _default_node_ordering
        self._arc_cmp: CompareFn = _default_arc_ordering
        self._arc_sequence = count()

    def _sort_nodes(self, nodes: Iterable[Node]) -> list[Node]:
        return sorted(nodes, key=cmp_to_key(self._node_cmp))

    def _sort_arcs(self, arcs: Iterable[Arc]) -> list[Arc]:
        return sorted(arcs, key=cmp_to_key(self._arc_cmp))

    @property
    def nodes(self) -> list[Node]:
        """All nodes of the graph, in node ordering."""
        return self._sort_nodes(self._nodes)

    @property
    def arcs(self) -> list[Arc]:
        """All arcs of the graph, in arc ordering."""
        return self._sort_arcs(self._arcs)

    def add_node(self, name: str) -> Node:
        """Create a node with the given name and add it to the graph."""
        if name in self._names:
            raise ValueError(f"addNode: Duplicate node {name}")
        node = Node(name, self)
        self._nodes.append(node)
        self._names[name] = node
        return node

    def remove_node(self, node: Node) -> None:
        """Remove a node together with every arc that touches it."""
        if self._names.get(node.name) is not node:
            raise ValueError(f"removeNode: {node.name} is not in the graph")
        for arc in list(self._arcs):
            if arc.start is node or arc.end is node:
                self.remove_arc(arc)
        self._nodes.remove(node)
        del self._names[node.name]

    def get_node(self, name: str) -> Node | None:
        """Return the node with the given name, or None."""
        return self._names.get(name)

    def add_arc(self, start: Node, end: Node) -> Arc:
        """Create an arc from start to end with cost zero."""
        if start.graph is not self or end.graph is not self:
            raise ValueError("addArc: node does not belong to this graph")
        arc = Arc(start, end, self, next(self._arc_sequence))
        self._arcs.append(arc)
        start._arcs.append(arc)
        return arc

    def remove_arc(self, arc: Arc) -> None:
        """Remove an arc from the graph."""
        if arc not in self._arcs:
            raise ValueError("removeArc: arc is not in the graph")
        self._arcs.remove(arc)
        arc.start._arcs.remove(arc)

    def arcs_from(self, node: Node) -> list[Arc]:
        """Return the arcs leaving node, in arc ordering."""
        return self._sort_arcs(node._arcs)

    def set_node_ordering(self, cmp: CompareFn) -> None:
        """Order nodes with cmp, a function returning <0, 0 or >0."""
        self._node_cmp = cmp

    def set_arc_ordering(self, cmp: CompareFn) -> None:
        """Order arcs with cmp, a function returning <0, 0 or >0."""
        self._arc_cmp = cmp

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={[n.name for n in self.nodes]!r})"