"""Pydantic models for static usage edges reported by the bytecode scanner."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EdgeType(str, Enum):
    """Kinds of static usage edges."""

    FIELD_READ = "field_read"  # GETSTATIC
    METHOD_CALL = "method_call"  # INVOKESTATIC


def to_dotted_name(internal_name: str) -> str:
    """Convert an internal class name (a/b/C) to its dotted form (a.b.C)."""
    return internal_name.replace("/", ".")


class UsageEdge(BaseModel):
    """Base class for static usage edges.

    Edges are immutable; equality and hashing are computed field by field,
    which is what lets the graph deduplicate repeated observations.
    """

    model_config = ConfigDict(frozen=True)

    source_class: str = Field(..., description="Class containing the access (internal form)")
    source_method: str = Field(..., description="Method containing the access")
    target_class: str = Field(..., description="Class owning the accessed member (internal form)")

    @property
    def target_member(self) -> str:
        """Name of the accessed field or method (to be overridden by subclasses)."""
        raise NotImplementedError

    @property
    def edge_type(self) -> EdgeType:
        """Type of this edge (to be overridden by subclasses)."""
        raise NotImplementedError

    @property
    def source(self) -> tuple[str, str]:
        """Source location as a (class, method) node id."""
        return (self.source_class, self.source_method)

    @property
    def target(self) -> tuple[str, str]:
        """Target location as a (class, member) node id."""
        return (self.target_class, self.target_member)

    def __str__(self) -> str:
        return (
            f"{self.source_class}.{self.source_method} -> "
            f"{self.target_class}.{self.target_member}"
        )


class FieldReadEdge(UsageEdge):
    """A static field read from a method to a field of another class."""

    target_field: str = Field(..., description="Name of the static field read")

    @property
    def target_member(self) -> str:
        return self.target_field

    @property
    def edge_type(self) -> EdgeType:
        return EdgeType.FIELD_READ


class MethodCallEdge(UsageEdge):
    """A static method invocation from a method to a method of another class."""

    target_method: str = Field(..., description="Name of the static method invoked")

    @property
    def target_member(self) -> str:
        return self.target_method

    @property
    def edge_type(self) -> EdgeType:
        return EdgeType.METHOD_CALL


# Type alias for any static usage edge
AnyEdge = FieldReadEdge | MethodCallEdge
