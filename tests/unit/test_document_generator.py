"""Tests for the Markdown document generator."""

import re

from flowscribe.generators.document import MarkdownDocGenerator
from flowscribe.models import Catalog, Flow


def test_enroll_scenario_has_two_step_sections(enroll_flow: Flow, enroll_catalog: Catalog, clock) -> None:
    md = MarkdownDocGenerator(clock=clock).generate(enroll_flow, enroll_catalog)

    assert re.findall(r"^### Step", md, re.MULTILINE) == ["### Step", "### Step"]
    assert "### Step 1: Submit" in md
    assert "### Step 2: Review" in md
    assert "> **⚡ Decision Point:** complete?" in md
    assert "> - yes" in md and "> - no" in md


def test_metadata_table_and_footer(detailed_flow: Flow, enroll_catalog: Catalog, clock) -> None:
    md = MarkdownDocGenerator(clock=clock).generate(detailed_flow, enroll_catalog)

    assert md.startswith("# Enroll & Verify\n")
    assert "| Priority | High |" in md
    assert "| Status | review |" in md
    assert "| Entry Point | Web portal |" in md
    assert "| Service Domain | Admissions |" in md
    assert "## Actors Involved\n\n- AB - Applicant\n- SYS - Scheduler\n" in md
    assert "**Communication:** Synchronous (REST)" in md
    assert "**Input:** Application form" in md
    assert "**Notifications:** email (applicant)" in md
    assert "## Integration Points" in md
    assert "- **Age limit:** Applicant must be 18+" in md
    assert "## Additional Notes" in md
    assert md.rstrip().endswith("*Generated: 2024-05-01T12:30:00+00:00*")


def test_document_omits_authoring_instructions(detailed_flow: Flow, enroll_catalog: Catalog, clock) -> None:
    md = MarkdownDocGenerator(clock=clock).generate(detailed_flow, enroll_catalog)

    assert "DRAW.IO DIAGRAM REQUIREMENTS" not in md
    assert "SWIMLANES" not in md


def test_missing_fields_are_not_rendered(enroll_flow: Flow, enroll_catalog: Catalog, clock) -> None:
    md = MarkdownDocGenerator(clock=clock).generate(enroll_flow, enroll_catalog)

    assert "| Entry Point | - |" in md
    assert "None" not in md
    assert "## Business Rules" not in md
    assert "## Actors Involved" not in md
    assert "**Communication:**" not in md


def test_empty_steps_document(enroll_catalog: Catalog, clock) -> None:
    md = MarkdownDocGenerator(clock=clock).generate(Flow(name="Empty"), enroll_catalog)

    assert "_No steps defined._" in md
    assert "### Step" not in md


def test_unknown_references(clock) -> None:
    flow = Flow.model_validate(
        {
            "name": "Ghosts",
            "actorIds": ["ghost-actor"],
            "steps": [{"stepNumber": 1, "actorId": "ghost-actor", "action": "Haunt", "serviceIds": ["ghost-service"]}],
            "integrations": [{"fromServiceId": "ghost-a", "toServiceId": "ghost-b", "communicationTypeId": "ghost-t"}],
        }
    )
    md = MarkdownDocGenerator(clock=clock).generate(flow, Catalog())

    assert "**Actor:** Unknown Actor" in md
    assert "- Unknown Service" in md
    assert "- Type: Unknown Type" in md
    assert "ghost-" not in md
