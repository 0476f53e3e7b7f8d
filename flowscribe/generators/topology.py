"""Mermaid graph of the flow's declared services and their interactions."""

from __future__ import annotations

import logging
from typing import List

from ..models import Catalog, Flow
from ..ordered import OrderedSet
from ..resolver import CatalogResolver
from .base import BaseGenerator, mermaid_text

logger = logging.getLogger(__name__)

EDGE_ARROWS = {
    "synchronous": "-->",
    "asynchronous": "-.->",
}
DEFAULT_ARROW = "==>"


class ArchitectureDiagramGenerator(BaseGenerator):
    """Nodes are exactly ``flow.involved_service_ids``; edges are detailed interactions."""

    format_name = "architecture"
    filename_suffix = "_architecture.md"
    media_type = "text/markdown"

    def generate(self, flow: Flow, catalog: Catalog) -> str:
        resolver = CatalogResolver(catalog)
        nodes = OrderedSet(flow.involved_service_ids)

        lines: List[str] = ["```mermaid", "graph LR"]
        for position, service_id in enumerate(nodes, start=1):
            label = mermaid_text(resolver.service_name(service_id))
            lines.append(f'    S{position}["{label}"]')

        for interaction in flow.service_interactions:
            source, target = interaction.from_service_id, interaction.to_service_id
            if source not in nodes or target not in nodes:
                logger.debug(
                    f"Skipping interaction {interaction.id or '?'}: endpoint outside "
                    "the involved services"
                )
                continue
            arrow = EDGE_ARROWS.get(interaction.interaction_type, DEFAULT_ARROW)
            label = mermaid_text(interaction.method or interaction.interaction_type)
            lines.append(
                f'    S{nodes.index(source) + 1} {arrow}|"{label}"| S{nodes.index(target) + 1}'
            )

        lines.append("```")
        return "\n".join(lines) + "\n"
