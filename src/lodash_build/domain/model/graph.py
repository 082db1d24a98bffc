"""Immutable directed graph with O(1) bidirectional lookups.

Includes a visited-set reachability walk and cycle detection using
stdlib graphlib.TopologicalSorter.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from graphlib import CycleError, TopologicalSorter
from types import MappingProxyType
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DiGraph(Generic[T]):
    """Immutable directed graph.

    Invariants (FAIL-FIRST):
    - forward[a] contains b ⟺ reverse[b] contains a
    - All nodes in edges must be in nodes set

    Attributes:
        forward: Node → set of successors (outgoing edges)
        reverse: Node → set of predecessors (incoming edges)
        nodes: All nodes in graph (including isolated)
    """

    forward: Mapping[T, frozenset[T]]
    reverse: Mapping[T, frozenset[T]]
    nodes: frozenset[T]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for node, successors in self.forward.items():
            if node not in self.nodes:
                raise ValueError(f"forward key '{node}' not in nodes")
            for succ in successors:
                if succ not in self.nodes:
                    raise ValueError(f"successor '{succ}' of '{node}' not in nodes")
                if node not in self.reverse.get(succ, frozenset()):
                    raise ValueError(
                        f"inconsistent: {node}→{succ} in forward but {node} not in reverse[{succ}]"
                    )

        for node, predecessors in self.reverse.items():
            if node not in self.nodes:
                raise ValueError(f"reverse key '{node}' not in nodes")
            for pred in predecessors:
                if pred not in self.nodes:
                    raise ValueError(f"predecessor '{pred}' of '{node}' not in nodes")
                if node not in self.forward.get(pred, frozenset()):
                    raise ValueError(
                        f"inconsistent: {pred}→{node} in reverse but {node} not in forward[{pred}]"
                    )

    def successors(self, node: T) -> frozenset[T]:
        """Get direct successors (outgoing edges). O(1)."""
        return self.forward.get(node, frozenset())

    def predecessors(self, node: T) -> frozenset[T]:
        """Get direct predecessors (incoming edges). O(1)."""
        return self.reverse.get(node, frozenset())

    @property
    def edge_count(self) -> int:
        """Get total number of edges."""
        return sum(len(succs) for succs in self.forward.values())

    @property
    def node_count(self) -> int:
        """Get total number of nodes."""
        return len(self.nodes)

    def reachable(
        self,
        starts: Iterable[T],
        blocked: frozenset[T] = frozenset(),
    ) -> frozenset[T]:
        """Collect every node reachable from starts, starts included.

        Breadth-first walk guarded by a visited set, so cycles terminate.
        Blocked nodes are never entered, even as starts, and their
        successors are only reached through other paths.

        Args:
            starts: Nodes to walk from. Unknown nodes are kept as-is.
            blocked: Nodes that must not appear in the result

        Returns:
            Reachable nodes

        Time: O(V + E) over the reachable subgraph
        """
        visited: set[T] = set()
        queue: deque[T] = deque()

        for start in starts:
            if start not in blocked and start not in visited:
                visited.add(start)
                queue.append(start)

        while queue:
            node = queue.popleft()
            for succ in self.successors(node):
                if succ not in blocked and succ not in visited:
                    visited.add(succ)
                    queue.append(succ)

        return frozenset(visited)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        extra_nodes: frozenset[T] | None = None,
    ) -> DiGraph[T]:
        """Build graph from edge iterable.

        Args:
            edges: Iterable of (from, to) tuples (list, set, frozenset, generator)
            extra_nodes: Additional isolated nodes to include

        Returns:
            DiGraph with all edges and nodes

        Time: O(E) where E is number of edges
        """
        forward: dict[T, set[T]] = {}
        reverse: dict[T, set[T]] = {}
        nodes: set[T] = set()

        for from_node, to_node in edges:
            nodes.add(from_node)
            nodes.add(to_node)
            forward.setdefault(from_node, set()).add(to_node)
            reverse.setdefault(to_node, set()).add(from_node)

        if extra_nodes is not None:
            nodes.update(extra_nodes)

        return cls(
            forward=MappingProxyType({k: frozenset(v) for k, v in forward.items()}),
            reverse=MappingProxyType({k: frozenset(v) for k, v in reverse.items()}),
            nodes=frozenset(nodes),
        )

    @classmethod
    def empty(cls) -> DiGraph[T]:
        """Create empty graph with no nodes or edges."""
        return cls(forward=MappingProxyType({}), reverse=MappingProxyType({}), nodes=frozenset())


def detect_cycles(graph: DiGraph[T]) -> tuple[frozenset[T], ...]:
    """Detect cycles in directed graph using graphlib.TopologicalSorter.

    Args:
        graph: Directed graph to check

    Returns:
        Empty tuple if no cycles.
        Tuple of frozensets, each containing nodes in a cycle.

    Note:
        graphlib.TopologicalSorter only reports ONE cycle when several exist.
        Cycles are legal in dependency tables; this is informational.
    """
    if graph.node_count == 0:
        return ()

    adjacency: dict[T, set[T]] = {node: set(graph.successors(node)) for node in graph.nodes}

    ts: TopologicalSorter[T] = TopologicalSorter(adjacency)
    try:
        tuple(ts.static_order())
    except CycleError as e:
        # e.args[1] is the cycle path: [a, b, c, a]
        return (frozenset(e.args[1]),)
    return ()
