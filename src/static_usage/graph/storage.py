"""Static usage graph storage using NetworkX."""

import logging
import threading
from collections.abc import Iterator

import networkx as nx

from .entities import AnyEdge, EdgeType, FieldReadEdge, MethodCallEdge, to_dotted_name

logger = logging.getLogger(__name__)


class UsageGraph:
    """Deduplicated store of static field reads and static method calls.

    Nodes are ``(class, member)`` tuples in internal form. Every edge is keyed
    by its ``EdgeType`` so a field read and a method call between the same
    endpoints are kept apart, and re-adding a known fact leaves the graph
    unchanged. The graph only ever grows.
    """

    def __init__(self, announce_duplicates: bool = True):
        """Initialize an empty graph.

        Args:
            announce_duplicates: Log every add call, including ones that
                                 re-add a known edge. When False, only new
                                 edges are logged at INFO.
        """
        self._graph = nx.MultiDiGraph()
        self._lock = threading.RLock()
        self._announce_duplicates = announce_duplicates

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Read-only snapshot of the underlying NetworkX graph.

        Returns:
            A frozen copy; later adds are not reflected in it
        """
        with self._lock:
            return nx.freeze(self._graph.copy())

    def has_static_field_read(
        self, owner: str, method: str, target_class: str, target_field: str
    ) -> bool:
        """Check for a static field read edge (GETSTATIC).

        Args:
            owner: Class containing the read (internal form)
            method: Method containing the read
            target_class: Class owning the field (internal form)
            target_field: Name of the field

        Returns:
            True if the edge has been added before
        """
        read = FieldReadEdge(
            source_class=owner,
            source_method=method,
            target_class=target_class,
            target_field=target_field,
        )
        return read in self

    def add_static_field_read(
        self, owner: str, method: str, target_class: str, target_field: str
    ) -> None:
        """Add a static field read (GETSTATIC) to the graph."""
        self.add_edge(
            FieldReadEdge(
                source_class=owner,
                source_method=method,
                target_class=target_class,
                target_field=target_field,
            )
        )

    def has_static_method_call(
        self, owner: str, method: str, target_class: str, target_method: str
    ) -> bool:
        """Check for a static method call edge (INVOKESTATIC).

        Args:
            owner: Class containing the call (internal form)
            method: Method containing the call
            target_class: Class owning the invoked method (internal form)
            target_method: Name of the invoked method

        Returns:
            True if the edge has been added before
        """
        call = MethodCallEdge(
            source_class=owner,
            source_method=method,
            target_class=target_class,
            target_method=target_method,
        )
        return call in self

    def add_static_method_call(
        self, owner: str, method: str, target_class: str, target_method: str
    ) -> None:
        """Add a static method call (INVOKESTATIC) to the graph."""
        self.add_edge(
            MethodCallEdge(
                source_class=owner,
                source_method=method,
                target_class=target_class,
                target_method=target_method,
            )
        )

    def add_edge(self, edge: AnyEdge) -> bool:
        """Add a prebuilt edge to the graph.

        Args:
            edge: The field read or method call to record

        Returns:
            True if the edge was not already present
        """
        if not isinstance(edge, (FieldReadEdge, MethodCallEdge)):
            raise TypeError(
                f"Expected FieldReadEdge or MethodCallEdge, got {type(edge).__name__}"
            )

        kind = "field read" if edge.edge_type is EdgeType.FIELD_READ else "method call"
        with self._lock:
            if self._announce_duplicates:
                logger.info(f"Adding new static {kind}: {edge}")

            if edge in self:
                if not self._announce_duplicates:
                    logger.debug(f"Ignoring duplicate static {kind}: {edge}")
                return False

            if not self._announce_duplicates:
                logger.info(f"Adding new static {kind}: {edge}")

            self._graph.add_node(
                edge.source, class_name=edge.source_class, member=edge.source_method
            )
            self._graph.add_node(
                edge.target, class_name=edge.target_class, member=edge.target_member
            )
            self._graph.add_edge(edge.source, edge.target, key=edge.edge_type.value, edge=edge)
            return True

    def update(self, other: "UsageGraph") -> None:
        """Add every edge of another graph to this one.

        Args:
            other: Graph whose edges are merged in (e.g. from a worker thread)
        """
        for edge in list(other):
            self.add_edge(edge)

    def _edges(self, edge_type: EdgeType | None = None) -> list[AnyEdge]:
        with self._lock:
            return [
                edge
                for _, _, key, edge in self._graph.edges(keys=True, data="edge")
                if edge_type is None or key == edge_type.value
            ]

    @property
    def field_reads(self) -> frozenset[FieldReadEdge]:
        """Snapshot of all recorded static field reads."""
        return frozenset(self._edges(EdgeType.FIELD_READ))

    @property
    def method_calls(self) -> frozenset[MethodCallEdge]:
        """Snapshot of all recorded static method calls."""
        return frozenset(self._edges(EdgeType.METHOD_CALL))

    def get_source_classes(self) -> set[str]:
        """Get the dotted names of classes that are the source of at least one edge."""
        return {to_dotted_name(edge.source_class) for edge in self._edges()}

    def get_target_classes(self) -> set[str]:
        """Get the dotted names of classes that are the target of at least one edge."""
        return {to_dotted_name(edge.target_class) for edge in self._edges()}

    def get_static_fields(self) -> dict[str, set[str]]:
        """Map each dotted class name to the static fields read on it.

        Returns:
            Dictionary of class name -> field names. Classes with no
            recorded reads are absent.
        """
        static_fields: dict[str, set[str]] = {}
        for read in self._edges(EdgeType.FIELD_READ):
            class_name = to_dotted_name(read.target_class)
            static_fields.setdefault(class_name, set()).add(read.target_field)
        return static_fields

    def get_statistics(self) -> dict[str, int]:
        """Get graph statistics.

        Returns:
            Dictionary with counts of edges by kind, participating classes and
            nodes. Nodes are (class, member) locations, so a field and a method
            of the same name on one class count as a single node.
        """
        with self._lock:
            edges = self._edges()
            return {
                "field_reads": sum(1 for e in edges if e.edge_type is EdgeType.FIELD_READ),
                "method_calls": sum(1 for e in edges if e.edge_type is EdgeType.METHOD_CALL),
                "source_classes": len({e.source_class for e in edges}),
                "target_classes": len({e.target_class for e in edges}),
                "nodes": self._graph.number_of_nodes(),
            }

    def __contains__(self, edge: object) -> bool:
        if not isinstance(edge, (FieldReadEdge, MethodCallEdge)):
            return False
        with self._lock:
            return self._graph.has_edge(edge.source, edge.target, key=edge.edge_type.value)

    def __iter__(self) -> Iterator[AnyEdge]:
        return iter(self._edges())

    def __len__(self) -> int:
        with self._lock:
            return self._graph.number_of_edges()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, UsageGraph):
            return NotImplemented
        return self.field_reads == other.field_reads and self.method_calls == other.method_calls

    def __hash__(self) -> int:
        prime = 31
        result = prime + hash(self.field_reads)
        return prime * result + hash(self.method_calls)

    def __repr__(self) -> str:
        stats = self.get_statistics()
        return (
            f"UsageGraph(field_reads={stats['field_reads']}, "
            f"method_calls={stats['method_calls']})"
        )
