"""Graph module for recording static field reads and static method calls."""

from .entities import AnyEdge, EdgeType, FieldReadEdge, MethodCallEdge, UsageEdge, to_dotted_name
from .queries import (
    get_class_dependencies,
    get_field_readers,
    get_method_callers,
    get_static_methods,
)
from .storage import UsageGraph

__all__ = [
    # Entities
    "AnyEdge",
    "EdgeType",
    "FieldReadEdge",
    "MethodCallEdge",
    "UsageEdge",
    "to_dotted_name",
    # Storage
    "UsageGraph",
    # Queries
    "get_class_dependencies",
    "get_field_readers",
    "get_method_callers",
    "get_static_methods",
]
