"""Read-only summaries and checks over a flow."""

from __future__ import annotations

import logging
from typing import List

from pydantic import BaseModel

from .models import Catalog, Flow
from .ordered import OrderedSet
from .resolver import CatalogResolver, Missing

logger = logging.getLogger(__name__)


class FlowStats(BaseModel):
    steps: int
    actors: int
    services: int
    integrations: int
    decision_points: int
    business_rules: int
    error_scenarios: int


def step_service_ids(flow: Flow) -> OrderedSet[str]:
    """Services referenced by any step, in first-seen order.

    This is distinct from ``flow.involved_service_ids``, which is declared on the
    flow and may list services no step touches.
    """

    return OrderedSet(sid for step in flow.steps for sid in step.service_ids)


def flow_stats(flow: Flow) -> FlowStats:
    return FlowStats(
        steps=len(flow.steps),
        actors=len(OrderedSet(step.actor_id for step in flow.steps if step.actor_id)),
        services=len(flow.involved_service_ids) + len(step_service_ids(flow)),
        integrations=len(flow.integrations) + len(flow.service_interactions),
        decision_points=len(flow.decision_steps),
        business_rules=len(flow.business_rules),
        error_scenarios=len(flow.error_scenarios),
    )


def completeness(flow: Flow) -> int:
    """Percentage of documentation checks the flow satisfies.

    Integration and performance checks only count once they are filled in;
    every other check always counts.
    """

    checks = [
        bool(flow.name.strip()),
        bool(flow.description),
        bool(flow.steps),
        bool(flow.involved_service_ids),
        bool(flow.entry_point),
        bool(flow.trigger_event),
        bool(flow.actor_ids),
        all(step.action and step.actor_id for step in flow.steps),
        bool(flow.business_rules),
        bool(flow.error_scenarios),
    ]
    if flow.integrations or flow.service_interactions:
        checks.append(True)
    if not flow.performance_requirements.is_empty():
        checks.append(True)
    return round(sum(checks) / len(checks) * 100)


def text_flow(flow: Flow, catalog: Catalog) -> str:
    """One-line ``AB → SYS → AB`` summary of who acts in which order."""

    if not flow.steps:
        return "No steps defined"
    resolver = CatalogResolver(catalog)
    return " → ".join(resolver.actor_code(step.actor_id) for step in flow.steps)


def validate_flow(flow: Flow) -> List[str]:
    """Return human-readable problems with the structure of ``flow``."""

    errors: List[str] = []
    if len(flow.name.strip()) < 3:
        errors.append("Flow name must be at least 3 characters")
    if not flow.steps:
        errors.append("At least one step is required")
    numbers = sorted(step.step_number for step in flow.steps)
    if numbers != list(range(1, len(numbers) + 1)):
        errors.append("Step numbers must be sequential starting from 1")
    for step in flow.steps:
        if not step.action.strip():
            errors.append(f"Step {step.step_number} has no action")
        if step.is_decision_point and not step.decision_criteria:
            errors.append(f"Decision step {step.step_number} has no decision criteria")
    return errors


def unresolved_references(flow: Flow, catalog: Catalog) -> List[Missing]:
    """Every catalog lookup the flow triggers that does not resolve."""

    resolver = CatalogResolver(catalog)
    lookups = []
    if flow.service_domain_id:
        lookups.append(resolver.domain(flow.service_domain_id))
    lookups += [resolver.service(sid) for sid in flow.involved_service_ids]
    lookups += [resolver.actor(aid) for aid in flow.actor_ids]
    for step in flow.steps:
        lookups.append(resolver.actor(step.actor_id))
        lookups += [resolver.service(sid) for sid in step.service_ids]
        if step.communication_type_id:
            lookups.append(resolver.integration_type(step.communication_type_id))
    for record in (*flow.service_interactions, *flow.integrations):
        lookups.append(resolver.service(record.from_service_id))
        lookups.append(resolver.service(record.to_service_id))
        if record.communication_type_id:
            lookups.append(resolver.integration_type(record.communication_type_id))

    missing = list(OrderedSet(r for r in lookups if isinstance(r, Missing)))
    for item in missing:
        logger.warning(f"Unresolved {item.kind.value} reference: {item.id!r}")
    return missing
