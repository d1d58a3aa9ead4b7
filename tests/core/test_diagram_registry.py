"""
Test suite for the diagram registry and handler contract.

System role: Verification of diagram type lookup and tool advertisement
"""

from diagram_planner.core.diagrams.registry import (
    DIAGRAM_REGISTRY,
    DIAGRAM_TOOL_NAME,
    diagram_tool_definition,
    get_handler,
    supported_types,
)
from diagram_planner.core.diagrams.types import DiagramType, RenderCollector
from diagram_planner.models.common import ToolResult
from diagram_planner.models.plans import FlowchartPlan, KanbanPlan, RetroPlan, SwotPlan


class TestRegistry:
    """Lookup by type name."""

    def test_supported_types_in_registration_order(self) -> None:
        assert supported_types() == ["swot", "kanban", "retro", "flowchart"]

    def test_handlers_carry_matching_schema(self) -> None:
        """Each key maps to a handler of the same type with its plan model."""
        expected = {
            "swot": SwotPlan,
            "kanban": KanbanPlan,
            "retro": RetroPlan,
            "flowchart": FlowchartPlan,
        }
        for name, handler in DIAGRAM_REGISTRY.items():
            assert handler.diagram_type == DiagramType(name)
            assert handler.schema is expected[name]
            assert handler.planner_prompt

    def test_unknown_type_returns_none(self) -> None:
        assert get_handler("mindmap") is None

    def test_lookup_is_case_sensitive(self) -> None:
        assert get_handler("SWOT") is None

    def test_custom_registry(self) -> None:
        """Registries are plain mappings and can be narrowed."""
        registry = {"swot": DIAGRAM_REGISTRY["swot"]}

        assert supported_types(registry) == ["swot"]
        assert get_handler("kanban", registry) is None

    def test_json_schema_uses_wire_names(self) -> None:
        """Plan schemas expose diagramType and from/to, not Python names."""
        schema = DIAGRAM_REGISTRY["flowchart"].json_schema

        assert schema["title"] == "FlowchartPlanV1"
        assert "diagramType" in schema["properties"]
        edge_schema = schema["$defs"]["FlowchartEdge"]
        assert set(edge_schema["required"]) == {"from", "to"}


class TestToolDefinition:
    """Tool advertisement for agent runtimes."""

    def test_definition_shape(self) -> None:
        definition = diagram_tool_definition()

        assert definition["name"] == DIAGRAM_TOOL_NAME
        schema = definition["input_schema"]
        assert schema["properties"]["type"]["enum"] == supported_types()
        assert schema["required"] == ["type", "topic"]


class TestRenderCollector:
    """Accumulation of per-object outcomes."""

    def test_success_records_id(self) -> None:
        collector = RenderCollector()

        object_id = collector.record(ToolResult.ok("done", {"id": "abc"}), "Title")

        assert object_id == "abc"
        assert collector.created_ids == ["abc"]

    def test_failure_is_prefixed(self) -> None:
        collector = RenderCollector()

        object_id = collector.record(ToolResult.fail("Object limit reached (5)"), "Frame Done")

        assert object_id is None
        assert collector.errors == ["Frame Done: Object limit reached (5)"]

    def test_finish_with_errors_joins_messages(self) -> None:
        collector = RenderCollector()
        collector.record(ToolResult.ok("done", {"id": "a"}), "Title")
        collector.error("first")
        collector.error("second")

        result = collector.finish("all good", "Widget")

        assert result.success is False
        assert result.message == "Widget partially created with errors: first; second"
        assert result.created_ids == ["a"]

    def test_finish_without_errors(self) -> None:
        collector = RenderCollector()

        result = collector.finish("all good", "Widget")

        assert result.success is True
        assert result.message == "all good"
