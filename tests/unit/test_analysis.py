"""Tests for flow statistics, completeness and validation."""

from flowscribe.analysis import (
    completeness,
    flow_stats,
    step_service_ids,
    text_flow,
    unresolved_references,
    validate_flow,
)
from flowscribe.models import Catalog, Flow
from flowscribe.resolver import EntityKind, Missing


def test_flow_stats(detailed_flow: Flow) -> None:
    stats = flow_stats(detailed_flow)

    assert stats.steps == 3
    assert stats.actors == 2
    assert stats.services == 4  # two declared plus two touched by steps
    assert stats.integrations == 3
    assert stats.decision_points == 1
    assert stats.business_rules == 1
    assert stats.error_scenarios == 1


def test_declared_and_step_services_stay_distinct(enroll_flow: Flow) -> None:
    flow = enroll_flow.model_copy(update={"involved_service_ids": ("s9",)})
    assert list(step_service_ids(flow)) == ["s1", "s2"]
    assert flow.involved_service_ids == ("s9",)


def test_completeness_scores(detailed_flow: Flow, enroll_flow: Flow) -> None:
    assert completeness(detailed_flow) == 100
    # name, steps and step quality out of ten always-counted checks
    assert completeness(enroll_flow) == 30
    # only the step-quality check holds when there are no steps at all
    assert completeness(Flow(name="")) == 10


def test_text_flow(enroll_flow: Flow, enroll_catalog: Catalog) -> None:
    assert text_flow(enroll_flow, enroll_catalog) == "AB → AB"
    assert text_flow(Flow(name="Empty"), enroll_catalog) == "No steps defined"


def test_validate_flow_accepts_well_formed_flow(detailed_flow: Flow) -> None:
    assert validate_flow(detailed_flow) == []


def test_validate_flow_reports_problems() -> None:
    flow = Flow.model_validate(
        {
            "name": "ab",
            "steps": [
                {"stepNumber": 1, "action": "Go"},
                {"stepNumber": 3, "action": " ", "isDecisionPoint": True},
            ],
        }
    )
    errors = validate_flow(flow)

    assert "Flow name must be at least 3 characters" in errors
    assert "Step numbers must be sequential starting from 1" in errors
    assert "Step 3 has no action" in errors
    assert "Decision step 3 has no decision criteria" in errors
    assert validate_flow(Flow(name="Empty")) == ["At least one step is required"]


def test_unresolved_references(enroll_catalog: Catalog) -> None:
    flow = Flow.model_validate(
        {
            "name": "Partly broken",
            "involvedServiceIds": ["s1", "ghost-service"],
            "steps": [
                {"stepNumber": 1, "actorId": "a1", "action": "Go", "serviceIds": ["ghost-service"]},
                {"stepNumber": 2, "actorId": "ghost-actor", "action": "Go", "communicationTypeId": "ghost-type"},
            ],
        }
    )
    missing = unresolved_references(flow, enroll_catalog)

    assert missing == [
        Missing(EntityKind.SERVICE, "ghost-service"),
        Missing(EntityKind.ACTOR, "ghost-actor"),
        Missing(EntityKind.INTEGRATION_TYPE, "ghost-type"),
    ]
    assert unresolved_references(Flow(name="Empty"), enroll_catalog) == []
