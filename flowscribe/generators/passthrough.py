"""Formats that need no traversal beyond a single pass: raw JSON and a short prompt."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from ..models import Catalog, Flow
from ..resolver import CatalogResolver
from .base import BaseGenerator, one_line


def _json_default(value: Any) -> Any:
    # YAML documents may carry dates and timestamps.
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if hasattr(value, "isoformat"):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JSONExportGenerator(BaseGenerator):
    """Serialize the flow document unchanged, with the editor's camelCase keys."""

    format_name = "json"
    filename_suffix = ".json"
    media_type = "application/json"

    def generate(self, flow: Flow, catalog: Catalog) -> str:
        return json.dumps(
            flow.to_document(), indent=2, ensure_ascii=False, default=_json_default
        )


class SimplePromptGenerator(BaseGenerator):
    format_name = "simple"
    filename_suffix = "_simple_prompt.txt"

    def generate(self, flow: Flow, catalog: Catalog) -> str:
        resolver = CatalogResolver(catalog)
        lines = [f"Create a workflow diagram for: {flow.name}", ""]
        if flow.description:
            lines += [one_line(flow.description), ""]
        lines.append("Steps:")
        if not flow.steps:
            lines.append("No steps defined")
        for step in flow.steps:
            lines.append(
                f"{step.step_number}. [{resolver.actor_code(step.actor_id)}] {one_line(step.action)}"
            )
        return "\n".join(lines) + "\n"
