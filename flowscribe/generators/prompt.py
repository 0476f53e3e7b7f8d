"""Diagram-authoring prompt for an external draw.io generation agent."""

from __future__ import annotations

import logging
from typing import List

from ..models import Catalog, Flow, ServiceInteraction, Step
from ..ordered import OrderedSet
from ..resolver import CatalogResolver, Found
from .base import BANNER, RULE, BaseGenerator

logger = logging.getLogger(__name__)

ARROW_STYLES = {
    "synchronous": "solid",
    "asynchronous": "dashed",
    "event-driven": "jagged",
}

BADGES = (
    ("automated", "🤖", "Automated step"),
    ("notification", "🔔", "Sends notifications"),
    ("external", "🌐", "External integration"),
    ("datastore", "🗄️", "Datastore access"),
    ("remote", "📡", "Remote call"),
)


def _step_list(steps: List[Step]) -> str:
    return ", ".join(str(step.step_number) for step in steps)


class DrawioPromptGenerator(BaseGenerator):
    """Sectioned instruction text meant to be pasted into a diagram agent."""

    format_name = "prompt"
    filename_suffix = "_drawio_prompt.txt"

    def generate(self, flow: Flow, catalog: Catalog) -> str:
        resolver = CatalogResolver(catalog)
        lines: List[str] = [
            "🔄 GENERATE DRAW.IO DIAGRAM REQUEST",
            "",
            "Please process this microservices flow and generate a draw.io XML file:",
            "",
            BANNER,
            f"PROJECT: {catalog.name}",
            "FLOW DETAILS",
            BANNER,
            "",
        ]
        lines += self._basic_information(flow, resolver)
        lines += self._process_steps(flow, resolver)
        lines += self._service_interactions(flow, resolver)
        lines += self._integrations(flow, resolver)
        lines += self._business_rules(flow)
        lines += self._error_scenarios(flow)
        lines += self._performance(flow)
        lines += self._notes(flow)
        lines += self._requirements(flow, resolver)
        lines += [
            "",
            BANNER,
            f"Generated: {self.timestamp()}",
            BANNER,
        ]
        logger.debug(f"Rendered draw.io prompt for flow {flow.name!r} ({len(flow.steps)} steps)")
        return "\n".join(lines) + "\n"

    # Flow description ------------------------------------------------------

    def _basic_information(self, flow: Flow, resolver: CatalogResolver) -> List[str]:
        lines = ["📋 Basic Information:", f"• Flow Name: {flow.name}"]
        if flow.description:
            lines.append(f"• Description: {flow.description}")
        if flow.service_domain_id:
            lines.append(f"• Service Domain: {resolver.domain_name(flow.service_domain_id)}")
        lines += [
            f"• Priority: {flow.priority}",
            f"• Status: {flow.status}",
            f"• Version: {flow.version}",
        ]
        if flow.entry_point:
            lines.append(f"• Entry Point: {flow.entry_point}")
        if flow.trigger_event:
            lines.append(f"• Trigger Event: {flow.trigger_event}")
        involved = OrderedSet(flow.involved_service_ids)
        if involved:
            lines.append(f"• Services Involved ({len(involved)}):")
            lines += [f"  - {resolver.service_name(sid)}" for sid in involved]
        if flow.actor_ids:
            lines.append("• Actors Involved:")
            lines += [f"  - {resolver.actor_label(aid)}" for aid in flow.actor_ids]
        if flow.tags:
            lines.append(f"• Tags: {', '.join(flow.tags)}")
        lines.append("")
        return lines

    def _process_steps(self, flow: Flow, resolver: CatalogResolver) -> List[str]:
        lines = [f"📊 Process Steps ({len(flow.steps)}):", RULE]
        if not flow.steps:
            lines.append("No steps defined")
        for step in flow.steps:
            lines.append("")
            lines += self._step(step, resolver)
        return lines

    def _step(self, step: Step, resolver: CatalogResolver) -> List[str]:
        lines = [
            f"Step {step.step_number}:",
            f"• Actor: {resolver.actor_label(step.actor_id)}",
            f"• Action: {step.action}",
        ]
        if step.service_ids:
            lines.append("• Services Involved:")
            lines += [f"  - {resolver.service_name(sid)}" for sid in step.service_ids]
        if step.communication_type_id:
            lines.append(f"• Communication: {resolver.type_name(step.communication_type_id)}")
        for label, spec in (("Input", step.data_input), ("Output", step.data_output)):
            if spec.description:
                lines.append(f"• {label}: {spec.description}")
                if spec.data_schema:
                    lines.append(f"  Schema: {spec.data_schema}")
        if step.is_decision_point:
            criteria = f": {step.decision_criteria}" if step.decision_criteria else ""
            lines.append(f"• ⚡ DECISION POINT{criteria}")
            if step.conditional_paths:
                lines.append("  Paths:")
                for path in step.conditional_paths:
                    target = f" → Step {path.next_step}" if path.next_step else ""
                    lines.append(f"  - {path.condition}{target}")
        if step.notifications:
            lines.append("• Notifications:")
            for notification in step.notifications:
                recipient = f": {notification.recipient}" if notification.recipient else ""
                lines.append(f"  - {notification.type}{recipient}")
        if step.events_published:
            lines.append(f"• Events Published: {', '.join(step.events_published)}")
        if step.events_consumed:
            lines.append(f"• Events Consumed: {', '.join(step.events_consumed)}")
        if step.estimated_duration:
            lines.append(f"• Duration: {step.estimated_duration}")
        if step.sla:
            lines.append(f"• SLA: {step.sla}")
        if step.error_handling:
            lines.append(f"• Error Handling: {step.error_handling}")
        return lines

    def _service_interactions(self, flow: Flow, resolver: CatalogResolver) -> List[str]:
        if not flow.service_interactions:
            return []
        lines = [
            "",
            f"🔀 Detailed Service Interactions ({len(flow.service_interactions)}):",
            RULE,
        ]
        for interaction in flow.service_interactions:
            lines.append("")
            lines.append(
                f"• {resolver.service_name(interaction.from_service_id)} → "
                f"{resolver.service_name(interaction.to_service_id)} "
                f"[{interaction.interaction_type}]"
            )
            if interaction.communication_type_id:
                lines.append(f"  Communication: {resolver.type_name(interaction.communication_type_id)}")
            for label, value in (
                ("Method", interaction.method),
                ("Endpoint", interaction.endpoint),
                ("Data", interaction.data_exchanged),
                ("Format", interaction.data_format),
                ("Frequency", interaction.frequency),
                ("Latency", interaction.average_latency),
                ("Auth", interaction.authentication),
                ("Error Handling", interaction.error_handling),
                ("Retry", interaction.retry),
                ("Timeout", interaction.timeout),
                ("Description", interaction.description),
            ):
                if value:
                    lines.append(f"  {label}: {value}")
        return lines

    def _integrations(self, flow: Flow, resolver: CatalogResolver) -> List[str]:
        if not flow.integrations:
            return []
        lines = ["", "🔗 Simple Integration Points:", RULE]
        for integration in flow.integrations:
            lines.append("")
            lines.append(
                f"• {resolver.service_name(integration.from_service_id)} → "
                f"{resolver.service_name(integration.to_service_id)}"
            )
            lines.append(f"  Type: {resolver.type_name(integration.communication_type_id)}")
            for label, value in (
                ("Data", integration.data_exchanged),
                ("Frequency", integration.frequency),
                ("Protocol", integration.protocol),
                ("Auth", integration.authentication),
            ):
                if value:
                    lines.append(f"  {label}: {value}")
        return lines

    def _business_rules(self, flow: Flow) -> List[str]:
        if not flow.business_rules:
            return []
        lines = ["", "📐 Business Rules:", RULE]
        for rule in flow.business_rules:
            description = f": {rule.description}" if rule.description else ""
            lines.append(f"• {rule.name} ({rule.type}){description}")
        return lines

    def _error_scenarios(self, flow: Flow) -> List[str]:
        if not flow.error_scenarios:
            return []
        lines = ["", "⚠️ Error Scenarios:", RULE]
        for scenario in flow.error_scenarios:
            lines.append(f"• Scenario: {scenario.scenario}")
            if scenario.handling:
                lines.append(f"  Handling: {scenario.handling}")
            if scenario.notification:
                lines.append(f"  Notification: {scenario.notification}")
        return lines

    def _performance(self, flow: Flow) -> List[str]:
        perf = flow.performance_requirements
        if perf.is_empty():
            return []
        lines = ["", "⚡ Performance Requirements:", RULE]
        if perf.response_time:
            lines.append(f"• Response Time: {perf.response_time}")
        if perf.throughput:
            lines.append(f"• Throughput: {perf.throughput}")
        if perf.availability:
            lines.append(f"• Availability: {perf.availability}")
        return lines

    def _notes(self, flow: Flow) -> List[str]:
        if not flow.notes:
            return []
        return ["", "📝 Additional Notes:", RULE, flow.notes]

    # Instructions for the diagram agent ------------------------------------

    def _requirements(self, flow: Flow, resolver: CatalogResolver) -> List[str]:
        badges = self._badge_assignments(flow, resolver)
        lines = [
            "",
            BANNER,
            "🎯 DRAW.IO DIAGRAM REQUIREMENTS:",
            BANNER,
            "",
            "Please create a draw.io XML file with the following specifications:",
        ]
        lines += self._swimlanes(flow, resolver)
        lines += self._shapes(flow, resolver)
        lines += self._callouts(flow, resolver)
        lines += self._data_labels(flow, resolver)
        lines += self._decisions(flow)
        lines += self._badges(badges)
        lines += self._colors(flow, resolver)
        lines += self._layout()
        lines += self._legend(flow, resolver, badges)
        return lines

    def _swimlanes(self, flow: Flow, resolver: CatalogResolver) -> List[str]:
        lines = [
            "",
            "1. SWIMLANES:",
            "   • Create one horizontal swimlane for each distinct actor that appears in the steps",
            "   • Label each swimlane with the actor abbreviation and full name",
        ]
        actors = OrderedSet(step.actor_id for step in flow.steps)
        if not actors:
            lines.append("   • No actors appear in the steps")
        lines += [f"   • Swimlane: {resolver.actor_label(aid)}" for aid in actors]
        return lines

    def _shapes(self, flow: Flow, resolver: CatalogResolver) -> List[str]:
        count = len(flow.steps)
        lines = [
            "",
            f"2. PROCESS SHAPES (EXACTLY {count}):",
            f"   • Create exactly {count} rectangle shapes, one for each step",
            f"   • The number of shapes MUST equal the number of steps ({count})",
            "   • NEVER merge, combine, skip or summarize steps",
            "   • Each shape must show the step number, the action text and the services involved",
            "   • Place each shape in the swimlane of its actor",
        ]
        for step in flow.steps:
            services = ", ".join(resolver.service_name(sid) for sid in step.service_ids)
            suffix = f" [{services}]" if services else ""
            lines.append(f"   • Shape {step.step_number}: {step.action}{suffix}")
        return lines

    def _callouts(self, flow: Flow, resolver: CatalogResolver) -> List[str]:
        lines = [
            "",
            "3. SERVICE INTERACTION CALLOUTS:",
            "   • Add a callout for every documented service interaction",
            "   • Arrow styles: solid = synchronous, dashed = asynchronous, jagged = event-driven",
        ]
        if not flow.service_interactions:
            lines.append("   • No detailed service interactions documented")
        for interaction in flow.service_interactions:
            lines.append(f"   • Callout: {self._interaction_summary(interaction, resolver)}")
        return lines

    def _interaction_summary(self, interaction: ServiceInteraction, resolver: CatalogResolver) -> str:
        style = ARROW_STYLES[interaction.interaction_type]
        summary = (
            f"{resolver.service_name(interaction.from_service_id)} → "
            f"{resolver.service_name(interaction.to_service_id)} "
            f"({interaction.interaction_type}, {style} arrow)"
        )
        operation = " ".join(v for v in (interaction.method, interaction.endpoint) if v)
        if operation:
            summary += f": {operation}"
        return summary

    def _data_labels(self, flow: Flow, resolver: CatalogResolver) -> List[str]:
        lines = [
            "",
            "4. DATA LABELS:",
            "   • Put a text label on every connecting arrow describing the data and its format",
        ]
        for step in flow.steps:
            parts = []
            if step.data_input.description:
                parts.append(f"in: {step.data_input.description}")
            if step.data_output.description:
                parts.append(f"out: {step.data_output.description}")
            if parts:
                lines.append(f"   • Step {step.step_number} arrows: {'; '.join(parts)}")
        for interaction in flow.service_interactions:
            if not interaction.data_exchanged:
                continue
            fmt = f" ({interaction.data_format})" if interaction.data_format else ""
            lines.append(
                f"   • {resolver.service_name(interaction.from_service_id)} → "
                f"{resolver.service_name(interaction.to_service_id)}: "
                f"{interaction.data_exchanged}{fmt}"
            )
        return lines

    def _decisions(self, flow: Flow) -> List[str]:
        lines = [
            "",
            "5. DECISION POINTS:",
            "   • Use a diamond shape for each decision step",
            "   • Draw one labeled outgoing edge for every conditional path",
        ]
        if not flow.decision_steps:
            lines.append("   • No decision points in this flow")
        for step in flow.decision_steps:
            criteria = step.decision_criteria or step.action
            lines.append(f"   • Diamond for Step {step.step_number}: {criteria}")
            for path in step.conditional_paths:
                target = f" → Step {path.next_step}" if path.next_step else ""
                lines.append(f"     - Edge: {path.condition}{target}")
        return lines

    def _badge_assignments(self, flow: Flow, resolver: CatalogResolver) -> dict[str, List[Step]]:
        assigned: dict[str, List[Step]] = {key: [] for key, _, _ in BADGES}
        for step in flow.steps:
            actor = resolver.actor(step.actor_id)
            if isinstance(actor, Found) and actor.value.type == "automated":
                assigned["automated"].append(step)
            if isinstance(actor, Found) and actor.value.type == "external":
                assigned["external"].append(step)
            if step.notifications:
                assigned["notification"].append(step)
            for sid in step.service_ids:
                service = resolver.service(sid)
                if isinstance(service, Found) and service.value.database:
                    assigned["datastore"].append(step)
                    break
            if step.communication_type_id and step.service_ids:
                assigned["remote"].append(step)
        return assigned

    def _badges(self, badges: dict[str, List[Step]]) -> List[str]:
        lines = ["", "6. BADGES:"]
        for key, icon, label in BADGES:
            steps = badges[key]
            target = f"Steps {_step_list(steps)}" if steps else "none in this flow"
            lines.append(f"   • {icon} {label}: {target}")
        return lines

    def _colors(self, flow: Flow, resolver: CatalogResolver) -> List[str]:
        styles = self.config.styles
        lines = ["", "7. COLOR CODING:"]
        involved = OrderedSet(flow.involved_service_ids)
        if involved:
            lines.append("   • One color per involved service:")
            for position, sid in enumerate(involved):
                color = styles.palette[position % len(styles.palette)]
                lines.append(f"     - {resolver.service_name(sid)}: {color}")
        domains = OrderedSet()
        if flow.service_domain_id:
            domains.add(flow.service_domain_id)
        for sid in involved:
            owner = resolver.domain_of(sid)
            if isinstance(owner, Found):
                domains.add(owner.value.id)
        for domain_id in domains:
            domain = resolver.domain(domain_id)
            if isinstance(domain, Found):
                lines.append(
                    f"   • Use {domain.value.color} for {domain.value.name} domain elements"
                )
        lines.append(f"   • Fill decision shapes in yellow ({styles.decision_color})")
        error_steps = [step for step in flow.steps if step.error_handling]
        if error_steps:
            lines.append(
                f"   • Use red borders ({styles.error_border_color}) for error-handling "
                f"steps: Steps {_step_list(error_steps)}"
            )
        else:
            lines.append(
                f"   • Use red borders ({styles.error_border_color}) for error-handling steps"
            )
        return lines

    def _layout(self) -> List[str]:
        styles = self.config.styles
        return [
            "",
            "8. LAYOUT:",
            "   • Left-to-right flow direction",
            f"   • Keep at least {styles.min_horizontal_spacing}px horizontal and "
            f"{styles.min_vertical_spacing}px vertical spacing between elements",
            "   • Align every shape with the swimlane of its actor",
            "   • Order swimlanes as listed in section 1",
        ]

    def _legend(
        self, flow: Flow, resolver: CatalogResolver, badges: dict[str, List[Step]]
    ) -> List[str]:
        styles = self.config.styles
        lines = [
            "",
            "9. LEGEND:",
            "   • Add a legend listing every convention used in this diagram:",
        ]
        for position, sid in enumerate(OrderedSet(flow.involved_service_ids)):
            color = styles.palette[position % len(styles.palette)]
            lines.append(f"     - {color}: {resolver.service_name(sid)}")
        kinds = OrderedSet(i.interaction_type for i in flow.service_interactions)
        for kind in kinds:
            lines.append(f"     - {ARROW_STYLES[kind].capitalize()} arrow: {kind}")
        type_ids = OrderedSet(
            step.communication_type_id for step in flow.steps if step.communication_type_id
        )
        for type_id in type_ids:
            integration_type = resolver.integration_type(type_id)
            if isinstance(integration_type, Found):
                style = integration_type.value.style
                lines.append(
                    f"     - {integration_type.value.name}: {style.line_style} line, "
                    f"{style.color}, {style.arrow_type} arrow"
                )
        if flow.decision_steps:
            lines.append(f"     - Yellow diamond ({styles.decision_color}): decision point")
        if any(step.error_handling for step in flow.steps):
            lines.append(f"     - Red border ({styles.error_border_color}): error handling")
        for key, icon, label in BADGES:
            if badges[key]:
                lines.append(f"     - {icon}: {label}")
        return lines
