"""Tests for static usage edge entities."""

import pytest
from pydantic import ValidationError

from static_usage.graph import EdgeType, FieldReadEdge, MethodCallEdge, to_dotted_name


def make_read(**overrides) -> FieldReadEdge:
    values = {
        "source_class": "com/foo/Bar",
        "source_method": "init",
        "target_class": "com/foo/Config",
        "target_field": "VERSION",
    }
    values.update(overrides)
    return FieldReadEdge(**values)


class TestToDottedName:
    """Tests for internal to dotted name conversion."""

    def test_converts_slashes(self):
        """Test that every slash becomes a dot."""
        assert to_dotted_name("a/b/C") == "a.b.C"

    def test_leaves_dotted_and_default_package_names(self):
        """Test names without slashes are unchanged."""
        assert to_dotted_name("a.b.C") == "a.b.C"
        assert to_dotted_name("Main") == "Main"
        assert to_dotted_name("") == ""

    def test_keeps_inner_class_separator(self):
        """Test that the inner class separator is not touched."""
        assert to_dotted_name("a/b/Outer$Inner") == "a.b.Outer$Inner"


class TestFieldReadEdge:
    """Tests for FieldReadEdge identity."""

    def test_structural_equality(self):
        """Test that edges with equal components are equal and hash equally."""
        first = make_read()
        second = make_read()

        assert first is not second
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    @pytest.mark.parametrize(
        "field", ["source_class", "source_method", "target_class", "target_field"]
    )
    def test_any_component_distinguishes(self, field):
        """Test that changing any single component yields a different edge."""
        assert make_read() != make_read(**{field: "other"})

    def test_is_immutable(self):
        """Test that edge components cannot be reassigned."""
        read = make_read()
        with pytest.raises(ValidationError):
            read.target_field = "OTHER"

    def test_endpoints_and_type(self):
        """Test node ids, edge type and string form."""
        read = make_read()

        assert read.source == ("com/foo/Bar", "init")
        assert read.target == ("com/foo/Config", "VERSION")
        assert read.edge_type is EdgeType.FIELD_READ
        assert str(read) == "com/foo/Bar.init -> com/foo/Config.VERSION"

    def test_accepts_empty_strings(self):
        """Test that no validation beyond type is applied."""
        read = FieldReadEdge(source_class="", source_method="", target_class="", target_field="")
        assert read.target == ("", "")


class TestMethodCallEdge:
    """Tests for MethodCallEdge identity."""

    def test_structural_equality(self):
        """Test that edges with equal components are equal and hash equally."""
        first = MethodCallEdge(
            source_class="a/A", source_method="run", target_class="b/B", target_method="create"
        )
        second = MethodCallEdge(
            source_class="a/A", source_method="run", target_class="b/B", target_method="create"
        )

        assert first == second
        assert hash(first) == hash(second)
        assert first.edge_type is EdgeType.METHOD_CALL
        assert first.target == ("b/B", "create")

    def test_not_equal_to_field_read_with_same_components(self):
        """Test that the two edge kinds never compare equal."""
        call = MethodCallEdge(
            source_class="a/A", source_method="run", target_class="b/B", target_method="X"
        )
        read = FieldReadEdge(
            source_class="a/A", source_method="run", target_class="b/B", target_field="X"
        )

        assert call != read
        assert len({call, read}) == 2
