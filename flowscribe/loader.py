"""Load flows and catalogs from JSON or YAML documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .exceptions import ModelLoadError
from .models import Catalog, Flow

logger = logging.getLogger(__name__)


def _read_document(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ModelLoadError(str(path), str(exc)) from exc

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ModelLoadError(str(path), f"invalid document: {exc}") from exc


def _expect_mapping(path: Path, data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ModelLoadError(str(path), "expected a mapping at the top level")
    return data


def parse_flow(data: dict[str, Any]) -> Flow:
    """Validate a flow document.

    Export bundles of the form ``{"flow": {...}, "project": {...}}`` are
    unwrapped first.
    """

    if isinstance(data.get("flow"), dict):
        data = data["flow"]
    return Flow.model_validate(data)


def parse_catalog(data: dict[str, Any]) -> Catalog:
    """Validate a flat catalog or an editor project document."""

    if "serviceRegistry" in data or "actorRegistry" in data:
        return Catalog.from_project(data)
    return Catalog.model_validate(data)


def load_flow(path: Path | str) -> Flow:
    path = Path(path)
    data = _expect_mapping(path, _read_document(path))
    try:
        flow = parse_flow(data)
    except ValidationError as exc:
        raise ModelLoadError(str(path), str(exc)) from exc
    logger.debug(f"Loaded flow {flow.name!r} with {len(flow.steps)} steps from {path}")
    return flow


def load_catalog(path: Path | str) -> Catalog:
    path = Path(path)
    data = _expect_mapping(path, _read_document(path))
    try:
        catalog = parse_catalog(data)
    except ValidationError as exc:
        raise ModelLoadError(str(path), str(exc)) from exc
    logger.debug(
        f"Loaded catalog {catalog.name!r}: {len(catalog.domains)} domains, "
        f"{len(catalog.actors)} actors from {path}"
    )
    return catalog
