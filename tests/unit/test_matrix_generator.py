"""Tests for the service interaction matrix."""

from flowscribe.generators.matrix import NO_SERVICES, InteractionMatrixGenerator, cell_value
from flowscribe.models import Catalog, Flow


def _table(text: str) -> dict[str, list[str]]:
    """Map each row label to its cells."""
    rows = {}
    for line in text.splitlines():
        if line.startswith("| **"):
            cells = [cell.strip() for cell in line.strip("|").split("|")]
            rows[cells[0].strip("*")] = cells[1:]
    return rows


def test_matrix_is_not_forced_symmetric(enroll_catalog: Catalog) -> None:
    flow = Flow.model_validate(
        {
            "name": "One way",
            "involvedServiceIds": ["s1", "s2"],
            "serviceInteractions": [{"fromServiceId": "s1", "toServiceId": "s2", "method": "POST"}],
        }
    )
    rows = _table(InteractionMatrixGenerator().generate(flow, enroll_catalog))

    assert rows["INT"] == ["—", "POST"]
    assert rows["REV"] == ["", "—"]


def test_cells_join_methods_and_fall_back_to_kind(detailed_flow: Flow, enroll_catalog: Catalog) -> None:
    flow = detailed_flow.model_copy(
        update={
            "service_interactions": detailed_flow.service_interactions
            + (detailed_flow.service_interactions[0].model_copy(update={"method": "GET"}),)
        }
    )
    rows = _table(InteractionMatrixGenerator().generate(flow, enroll_catalog))

    assert rows["INT"] == ["—", "POST, GET"]
    assert rows["REV"] == ["event-driven", "—"]


def test_header_uses_stored_order(enroll_catalog: Catalog) -> None:
    flow = Flow(name="Order", involved_service_ids=["s2", "s1"])
    text = InteractionMatrixGenerator().generate(flow, enroll_catalog)

    assert "| From \\ To | REV | INT |" in text
    assert "|---|---|---|" in text
    assert list(_table(text)) == ["REV", "INT"]


def test_detail_listing(detailed_flow: Flow, enroll_catalog: Catalog) -> None:
    text = InteractionMatrixGenerator().generate(detailed_flow, enroll_catalog)

    assert "## Interaction Details" in text
    assert "### 1. Intake Svc → Review Svc" in text
    assert "### 2. Review Svc → Intake Svc" in text
    assert "- **Type:** synchronous" in text
    assert "- **Method:** POST" in text
    assert "- **Endpoint:** /reviews" in text
    assert "- **Data Format:** JSON" in text
    assert "- **Latency:** 120ms" in text
    assert "- **Auth:** OAuth2" in text
    assert "None" not in text


def test_empty_involved_services_returns_notice(detailed_flow: Flow, enroll_catalog: Catalog) -> None:
    flow = detailed_flow.model_copy(update={"involved_service_ids": ()})
    text = InteractionMatrixGenerator().generate(flow, enroll_catalog)

    assert NO_SERVICES in text
    assert "|" not in text


def test_no_interactions_notice(enroll_catalog: Catalog) -> None:
    flow = Flow(name="Quiet", involved_service_ids=["s1"])
    text = InteractionMatrixGenerator().generate(flow, enroll_catalog)

    assert _table(text) == {"INT": ["—"]}
    assert "No detailed service interactions documented." in text


def test_cell_value_ignores_other_pairs(detailed_flow: Flow) -> None:
    interactions = detailed_flow.service_interactions
    assert cell_value(interactions, "s1", "s2") == "POST"
    assert cell_value(interactions, "s1", "s1") == ""


def test_unknown_services_use_sentinel() -> None:
    flow = Flow(name="Ghost", involved_service_ids=["ghost-1"])
    text = InteractionMatrixGenerator().generate(flow, Catalog())

    assert "Unknown Service" in text
    assert "ghost-" not in text
