"""Markdown documentation of a flow for archival readability."""

from __future__ import annotations

from typing import List

from ..models import Catalog, Flow, Step
from ..ordered import OrderedSet
from ..resolver import CatalogResolver
from .base import BaseGenerator, one_line


def _cell(value: str | None) -> str:
    if not value:
        return "-"
    return one_line(value).replace("|", "\\|")


class MarkdownDocGenerator(BaseGenerator):
    """Headings, tables and lists describing every part of a flow."""

    format_name = "markdown"
    filename_suffix = ".md"
    media_type = "text/markdown"

    def generate(self, flow: Flow, catalog: Catalog) -> str:
        resolver = CatalogResolver(catalog)
        md: List[str] = [f"# {flow.name}", ""]
        if flow.description:
            md += [f"> {one_line(flow.description)}", ""]

        md += [
            "## Overview",
            "",
            "| Property | Value |",
            "|----------|-------|",
            f"| Priority | {flow.priority} |",
            f"| Status | {flow.status} |",
            f"| Version | {_cell(flow.version)} |",
            f"| Entry Point | {_cell(flow.entry_point)} |",
            f"| Trigger Event | {_cell(flow.trigger_event)} |",
        ]
        if flow.service_domain_id:
            md.append(f"| Service Domain | {_cell(resolver.domain_name(flow.service_domain_id))} |")
        if flow.tags:
            md.append(f"| Tags | {_cell(', '.join(flow.tags))} |")
        md.append("")

        if flow.actor_ids:
            md += ["## Actors Involved", ""]
            md += [f"- {resolver.actor_label(aid)}" for aid in flow.actor_ids]
            md.append("")

        involved = OrderedSet(flow.involved_service_ids)
        if involved:
            md += ["## Involved Services", ""]
            md += [f"- {resolver.service_name(sid)}" for sid in involved]
            md.append("")

        md += ["## Process Flow", ""]
        if not flow.steps:
            md += ["_No steps defined._", ""]
        for step in flow.steps:
            md += self._step(step, resolver)

        if flow.service_interactions:
            md += ["## Service Interactions", ""]
            for interaction in flow.service_interactions:
                md.append(
                    f"- **{resolver.service_name(interaction.from_service_id)}** → "
                    f"**{resolver.service_name(interaction.to_service_id)}** "
                    f"({interaction.interaction_type})"
                )
                for label, value in (
                    ("Method", interaction.method),
                    ("Endpoint", interaction.endpoint),
                    ("Data", interaction.data_exchanged),
                    ("Format", interaction.data_format),
                ):
                    if value:
                        md.append(f"  - {label}: {value}")
            md.append("")

        if flow.integrations:
            md += ["## Integration Points", ""]
            for integration in flow.integrations:
                md.append(
                    f"- **{resolver.service_name(integration.from_service_id)}** → "
                    f"**{resolver.service_name(integration.to_service_id)}**"
                )
                md.append(f"  - Type: {resolver.type_name(integration.communication_type_id)}")
                if integration.data_exchanged:
                    md.append(f"  - Data: {integration.data_exchanged}")
                if integration.frequency:
                    md.append(f"  - Frequency: {integration.frequency}")
            md.append("")

        if flow.business_rules:
            md += ["## Business Rules", ""]
            for rule in flow.business_rules:
                description = f" {rule.description}" if rule.description else ""
                md.append(f"- **{rule.name}:**{description}")
            md.append("")

        if flow.error_scenarios:
            md += ["## Error Scenarios", ""]
            for scenario in flow.error_scenarios:
                md.append(f"- **{scenario.scenario}**")
                if scenario.handling:
                    md.append(f"  - Handling: {scenario.handling}")
                if scenario.notification:
                    md.append(f"  - Notification: {scenario.notification}")
            md.append("")

        perf = flow.performance_requirements
        if not perf.is_empty():
            md += ["## Performance Requirements", ""]
            for label, value in (
                ("Response Time", perf.response_time),
                ("Throughput", perf.throughput),
                ("Availability", perf.availability),
            ):
                if value:
                    md.append(f"- **{label}:** {value}")
            md.append("")

        if flow.notes:
            md += ["## Additional Notes", "", flow.notes, ""]

        md += ["---", f"*Generated: {self.timestamp()}*"]
        return "\n".join(md) + "\n"

    def _step(self, step: Step, resolver: CatalogResolver) -> List[str]:
        md = [
            f"### Step {step.step_number}: {one_line(step.action)}",
            "",
            f"**Actor:** {resolver.actor_label(step.actor_id)}",
            "",
        ]
        if step.service_ids:
            md.append("**Services:**")
            md += [f"- {resolver.service_name(sid)}" for sid in step.service_ids]
            md.append("")
        if step.communication_type_id:
            md += [f"**Communication:** {resolver.type_name(step.communication_type_id)}", ""]
        if step.data_input.description:
            md += [f"**Input:** {step.data_input.description}", ""]
        if step.data_output.description:
            md += [f"**Output:** {step.data_output.description}", ""]
        if step.is_decision_point:
            criteria = f" {step.decision_criteria}" if step.decision_criteria else ""
            md.append(f"> **⚡ Decision Point:**{criteria}")
            if step.conditional_paths:
                md.append(">")
                md += [f"> - {path.condition}" for path in step.conditional_paths]
            md.append("")
        if step.notifications:
            recipients = ", ".join(
                f"{n.type} ({n.recipient})" if n.recipient else n.type
                for n in step.notifications
            )
            md += [f"**Notifications:** {recipients}", ""]
        if step.error_handling:
            md += [f"**Error Handling:** {step.error_handling}", ""]
        md += ["---", ""]
        return md
