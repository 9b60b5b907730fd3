"""Read-only views over a static usage graph, keyed by dotted class names."""

from .entities import EdgeType, to_dotted_name
from .storage import UsageGraph


def get_static_methods(graph: UsageGraph) -> dict[str, set[str]]:
    """Map each dotted class name to the static methods invoked on it.

    Args:
        graph: Usage graph to query

    Returns:
        Dictionary of class name -> method names. Classes that are never
        called into are absent.
    """
    static_methods: dict[str, set[str]] = {}
    for call in graph.method_calls:
        class_name = to_dotted_name(call.target_class)
        static_methods.setdefault(class_name, set()).add(call.target_method)
    return static_methods


def _sources_targeting(graph: UsageGraph, target_class: str, edge_type: EdgeType) -> set[str]:
    """Collect the source classes of edges of one kind that point at a class.

    Args:
        graph: Usage graph to query
        target_class: Class name, internal or dotted
        edge_type: Relation to look at

    Returns:
        Dotted names of the source classes
    """
    dotted = to_dotted_name(target_class)
    return {
        to_dotted_name(edge.source_class)
        for edge in graph
        if edge.edge_type is edge_type and to_dotted_name(edge.target_class) == dotted
    }


def get_field_readers(graph: UsageGraph, target_class: str) -> set[str]:
    """Get the classes that statically read any field of a class.

    Args:
        graph: Usage graph to query
        target_class: Class name, internal (a/b/C) or dotted (a.b.C)

    Returns:
        Dotted names of the reading classes
    """
    return _sources_targeting(graph, target_class, EdgeType.FIELD_READ)


def get_method_callers(graph: UsageGraph, target_class: str) -> set[str]:
    """Get the classes that statically invoke any method of a class.

    Args:
        graph: Usage graph to query
        target_class: Class name, internal (a/b/C) or dotted (a.b.C)

    Returns:
        Dotted names of the calling classes
    """
    return _sources_targeting(graph, target_class, EdgeType.METHOD_CALL)


def get_class_dependencies(graph: UsageGraph, source_class: str) -> set[str]:
    """Get every class a class reads static fields from or calls static methods on.

    Only direct edges are considered.

    Args:
        graph: Usage graph to query
        source_class: Class name, internal (a/b/C) or dotted (a.b.C)

    Returns:
        Dotted names of the target classes
    """
    dotted = to_dotted_name(source_class)
    return {
        to_dotted_name(edge.target_class)
        for edge in graph
        if to_dotted_name(edge.source_class) == dotted
    }
