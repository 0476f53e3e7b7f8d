"""Tests for the Mermaid architecture (topology) graph."""

from flowscribe.generators.topology import ArchitectureDiagramGenerator
from flowscribe.models import Catalog, Flow


def test_nodes_are_declared_involved_services(enroll_flow: Flow, enroll_catalog: Catalog) -> None:
    flow = enroll_flow.model_copy(update={"involved_service_ids": ("s2",)})
    text = ArchitectureDiagramGenerator().generate(flow, enroll_catalog)

    assert '    S1["Review Svc"]' in text
    assert "Intake Svc" not in text


def test_edge_styles_by_interaction_kind(enroll_catalog: Catalog) -> None:
    flow = Flow.model_validate(
        {
            "name": "Edges",
            "involvedServiceIds": ["s1", "s2"],
            "serviceInteractions": [
                {"fromServiceId": "s1", "toServiceId": "s2", "interactionType": "synchronous", "method": "POST"},
                {"fromServiceId": "s2", "toServiceId": "s1", "interactionType": "asynchronous", "method": "PUBLISH"},
                {"fromServiceId": "s1", "toServiceId": "s2", "interactionType": "event-driven"},
            ],
        }
    )
    text = ArchitectureDiagramGenerator().generate(flow, enroll_catalog)

    assert text.startswith("```mermaid\ngraph LR\n")
    assert '    S1 -->|"POST"| S2' in text
    assert '    S2 -.->|"PUBLISH"| S1' in text
    assert '    S1 ==>|"event-driven"| S2' in text


def test_no_interactions_means_no_edges(enroll_catalog: Catalog) -> None:
    flow = Flow(name="Nodes only", involved_service_ids=["s1", "s2"])
    text = ArchitectureDiagramGenerator().generate(flow, enroll_catalog)

    assert text == '```mermaid\ngraph LR\n    S1["Intake Svc"]\n    S2["Review Svc"]\n```\n'


def test_interactions_outside_node_set_are_skipped(enroll_catalog: Catalog) -> None:
    flow = Flow.model_validate(
        {
            "name": "Partial",
            "involvedServiceIds": ["s1"],
            "serviceInteractions": [{"fromServiceId": "s1", "toServiceId": "s2", "method": "GET"}],
        }
    )
    text = ArchitectureDiagramGenerator().generate(flow, enroll_catalog)

    assert "GET" not in text


def test_unknown_services_render_sentinel_labels() -> None:
    flow = Flow(name="Ghost", involved_service_ids=["ghost-1"])
    text = ArchitectureDiagramGenerator().generate(flow, Catalog())

    assert '    S1["Unknown Service"]' in text
    assert "ghost-" not in text
