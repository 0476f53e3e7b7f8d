"""Service-to-service interaction matrix in Markdown."""

from __future__ import annotations

from typing import List, Optional

from ..models import Catalog, Flow, ServiceInteraction
from ..ordered import OrderedSet
from ..resolver import CatalogResolver
from .base import BaseGenerator, one_line

DIAGONAL = "—"
NO_SERVICES = "No services involved in this flow."


def _escape(value: str) -> str:
    return one_line(value).replace("|", "\\|")


def cell_value(
    interactions: tuple[ServiceInteraction, ...],
    source: Optional[str],
    target: Optional[str],
) -> str:
    """Comma-joined operations of every interaction from ``source`` to ``target``."""

    return ", ".join(
        interaction.method or interaction.interaction_type
        for interaction in interactions
        if interaction.from_service_id == source and interaction.to_service_id == target
    )


class InteractionMatrixGenerator(BaseGenerator):
    format_name = "matrix"
    filename_suffix = "_matrix.md"
    media_type = "text/markdown"

    def generate(self, flow: Flow, catalog: Catalog) -> str:
        resolver = CatalogResolver(catalog)
        services = OrderedSet(flow.involved_service_ids)
        md: List[str] = [f"# Service Interaction Matrix: {flow.name}", ""]
        if not services:
            md.append(NO_SERVICES)
            return "\n".join(md) + "\n"

        headers = [_escape(resolver.service_code(sid)) for sid in services]
        md += [
            "Rows call columns (from → to).",
            "",
            "| From \\ To | " + " | ".join(headers) + " |",
            "|---" * (len(headers) + 1) + "|",
        ]
        for row_id, row_label in zip(services, headers):
            cells = []
            for column_id in services:
                if column_id == row_id:
                    cells.append(DIAGONAL)
                else:
                    cells.append(
                        _escape(cell_value(flow.service_interactions, row_id, column_id))
                    )
            md.append(f"| **{row_label}** | " + " | ".join(cells) + " |")
        md.append("")

        md += ["## Interaction Details", ""]
        if not flow.service_interactions:
            md += ["No detailed service interactions documented.", ""]
        for number, interaction in enumerate(flow.service_interactions, start=1):
            md += self._details(number, interaction, resolver)
        return "\n".join(md).rstrip("\n") + "\n"

    def _details(
        self, number: int, interaction: ServiceInteraction, resolver: CatalogResolver
    ) -> List[str]:
        md = [
            f"### {number}. {resolver.service_name(interaction.from_service_id)} → "
            f"{resolver.service_name(interaction.to_service_id)}",
            "",
            f"- **Type:** {interaction.interaction_type}",
        ]
        if interaction.communication_type_id:
            md.append(f"- **Communication:** {resolver.type_name(interaction.communication_type_id)}")
        for label, value in (
            ("Method", interaction.method),
            ("Endpoint", interaction.endpoint),
            ("Data Format", interaction.data_format),
            ("Data", interaction.data_exchanged),
            ("Frequency", interaction.frequency),
            ("Latency", interaction.average_latency),
            ("Auth", interaction.authentication),
            ("Error Handling", interaction.error_handling),
            ("Retry", interaction.retry),
            ("Timeout", interaction.timeout),
        ):
            if value:
                md.append(f"- **{label}:** {value}")
        if interaction.description:
            md += ["", interaction.description]
        md.append("")
        return md
