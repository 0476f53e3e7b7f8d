"""Mermaid sequence diagram of actors calling services step by step."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..models import Catalog, Flow, Step
from ..ordered import OrderedSet
from ..resolver import CatalogResolver
from .base import BaseGenerator, mermaid_text

logger = logging.getLogger(__name__)

INDENT = "    "

# Participants are keyed by (kind, id) so an actor and a service sharing an id
# stay distinct.
ParticipantKey = Tuple[str, Optional[str]]


def collect_participants(flow: Flow) -> OrderedSet[ParticipantKey]:
    """Return step actors and step services in first-seen order.

    Only services referenced by steps are collected; the flow's declared
    involved services are not consulted.
    """

    participants: OrderedSet[ParticipantKey] = OrderedSet()
    for step in flow.steps:
        participants.add(("actor", step.actor_id))
        for service_id in step.service_ids:
            participants.add(("service", service_id))
    return participants


class SequenceDiagramGenerator(BaseGenerator):
    format_name = "sequence"
    filename_suffix = "_sequence.md"
    media_type = "text/markdown"

    def generate(self, flow: Flow, catalog: Catalog) -> str:
        resolver = CatalogResolver(catalog)
        participants = collect_participants(flow)

        def alias(kind: str, entity_id: Optional[str]) -> str:
            return f"P{participants.index((kind, entity_id)) + 1}"

        lines: List[str] = ["```mermaid", "sequenceDiagram"]
        for kind, entity_id in participants:
            if kind == "actor":
                label = resolver.actor_code(entity_id)
                lines.append(f"{INDENT}actor {alias(kind, entity_id)} as {mermaid_text(label)}")
            else:
                label = resolver.service_name(entity_id)
                lines.append(
                    f"{INDENT}participant {alias(kind, entity_id)} as {mermaid_text(label)}"
                )

        for step in flow.steps:
            actor = alias("actor", step.actor_id)
            services = [alias("service", sid) for sid in step.service_ids]
            if step.is_decision_point:
                lines += self._decision(step, actor, services)
            else:
                lines += self._messages(step, actor, services, INDENT)
            if step.error_handling:
                lines.append(
                    f"{INDENT}Note right of {actor}: Error handling: "
                    f"{mermaid_text(step.error_handling)}"
                )

        lines.append("```")
        logger.debug(
            f"Sequence diagram for {flow.name!r}: {len(participants)} participants, "
            f"{len(flow.steps)} steps"
        )
        return "\n".join(lines) + "\n"

    def _messages(self, step: Step, actor: str, services: List[str], indent: str) -> List[str]:
        action = mermaid_text(f"{step.step_number}. {step.action}")
        if not services:
            return [f"{indent}Note over {actor}: {action}"]
        lines = []
        output = step.data_output.description
        for service in services:
            lines.append(f"{indent}{actor}->>{service}: {action}")
            if output:
                lines.append(f"{indent}{service}-->>{actor}: {mermaid_text(output)}")
        return lines

    def _decision(self, step: Step, actor: str, services: List[str]) -> List[str]:
        lines = []
        if step.decision_criteria:
            lines.append(
                f"{INDENT}Note over {actor}: Decision: {mermaid_text(step.decision_criteria)}"
            )
        paths = step.conditional_paths
        first = mermaid_text(paths[0].condition) if paths else "decision"
        lines.append(f"{INDENT}alt {first}")
        lines += self._messages(step, actor, services, INDENT * 2)
        for path in paths[1:]:
            lines.append(f"{INDENT}else {mermaid_text(path.condition)}")
            target = f" → step {path.next_step}" if path.next_step else ""
            lines.append(
                f"{INDENT * 2}Note over {actor}: {mermaid_text(path.condition)}{target}"
            )
        lines.append(f"{INDENT}end")
        return lines
