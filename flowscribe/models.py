"""Pydantic models describing catalogs and workflow flows."""

from __future__ import annotations

import copy
from typing import Any, Literal, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

# Free text the editor may leave blank. Blank values validate to ``None``.
OptionalText = Optional[str]

ActorKind = Literal["human", "automated", "external"]
InteractionKind = Literal["synchronous", "asynchronous", "event-driven"]
Priority = Literal["Low", "Medium", "High", "Critical"]
FlowStatus = Literal["draft", "review", "approved", "deprecated"]


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class Record(BaseModel):
    """Immutable record accepting camelCase or snake_case keys.

    Keys the model does not declare are kept as extras. A blank value (``None``
    or whitespace) for a field with a default falls back to that default, the
    way the editor fills in ``value || default`` when it creates records.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="allow",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _default_when_blank(cls, v: Any, info: ValidationInfo) -> Any:
        if not _is_blank(v) or info.field_name is None:
            return v
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return v
        return field.get_default(call_default_factory=True)


# Catalog ---------------------------------------------------------------------


class Service(Record):
    """A deployable service owned by a domain."""

    id: str
    name: str
    abbreviation: OptionalText = None
    description: OptionalText = None
    database: OptionalText = None


class ServiceDomain(Record):
    """Group of services sharing a display color."""

    id: str
    name: str
    description: OptionalText = None
    color: str = "#607D8B"
    services: tuple[Service, ...] = Field(default_factory=tuple)


class Actor(Record):
    """Human, automated or external participant in a flow."""

    id: str
    abbreviation: str
    full_name: str
    description: OptionalText = None
    type: ActorKind = "human"

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_kind(cls, v: Any) -> Any:
        # The editor stores automated actors as "system".
        if v == "system":
            return "automated"
        return v


class IntegrationStyle(Record):
    line_style: str = "solid"
    color: str = "#2196F3"
    arrow_type: str = "single"


class IntegrationType(Record):
    """Communication style between services (REST, events, queues...)."""

    id: str
    name: str
    abbreviation: OptionalText = None
    description: OptionalText = None
    style: IntegrationStyle = IntegrationStyle()


class Catalog(Record):
    """Project-scoped registries of domains, actors and integration types."""

    name: str = "Untitled Project"
    version: OptionalText = None
    domains: tuple[ServiceDomain, ...] = Field(default_factory=tuple)
    actors: tuple[Actor, ...] = Field(default_factory=tuple)
    integration_types: tuple[IntegrationType, ...] = Field(default_factory=tuple)

    @classmethod
    def from_project(cls, data: dict[str, Any]) -> "Catalog":
        """Build a catalog from the editor's nested project document.

        The editor keeps each registry one level down
        (``serviceRegistry.domains``, ``actorRegistry.actors`` and
        ``integrationTypes.types``). Flat catalog documents are accepted too.
        """

        service_registry = data.get("serviceRegistry") or {}
        actor_registry = data.get("actorRegistry") or {}
        type_registry = data.get("integrationTypes", data.get("integration_types"))
        if isinstance(type_registry, dict):
            types = type_registry.get("types", [])
        else:
            types = type_registry or []

        return cls.model_validate(
            {
                "name": data.get("name") or "Untitled Project",
                "version": data.get("version"),
                "domains": service_registry.get("domains", data.get("domains", [])),
                "actors": actor_registry.get("actors", data.get("actors", [])),
                "integrationTypes": types,
            }
        )


# Flow ------------------------------------------------------------------------


class DataSpec(Record):
    """Description and optional schema of data entering or leaving a step."""

    description: OptionalText = None
    data_schema: OptionalText = Field(default=None, alias="schema")


class ConditionalPath(Record):
    condition: str
    next_step: Optional[int] = None
    description: OptionalText = None


class Notification(Record):
    type: str = "email"
    recipient: OptionalText = None


class Step(Record):
    """A single numbered action performed by an actor."""

    id: OptionalText = None
    step_number: int = Field(..., ge=1)
    actor_id: OptionalText = None
    action: str = ""
    service_ids: tuple[str, ...] = Field(default_factory=tuple)
    communication_type_id: OptionalText = None

    data_input: DataSpec = DataSpec()
    data_output: DataSpec = DataSpec()

    is_decision_point: bool = False
    decision_criteria: OptionalText = None
    conditional_paths: tuple[ConditionalPath, ...] = Field(default_factory=tuple)

    notifications: tuple[Notification, ...] = Field(default_factory=tuple)
    events_published: tuple[str, ...] = Field(default_factory=tuple)
    events_consumed: tuple[str, ...] = Field(default_factory=tuple)

    estimated_duration: OptionalText = None
    sla: OptionalText = None
    error_handling: OptionalText = None


class ServiceInteraction(Record):
    """Detailed, typed record of one service calling another."""

    id: OptionalText = None
    from_service_id: OptionalText = None
    to_service_id: OptionalText = None
    interaction_type: InteractionKind = "synchronous"
    communication_type_id: OptionalText = None
    method: OptionalText = None
    endpoint: OptionalText = None
    data_exchanged: OptionalText = None
    data_format: OptionalText = "JSON"
    frequency: OptionalText = None
    average_latency: OptionalText = None
    authentication: OptionalText = None
    error_handling: OptionalText = None
    retry: OptionalText = None
    timeout: OptionalText = None
    description: OptionalText = None


class Integration(Record):
    """Coarse legacy integration record kept for older flows."""

    id: OptionalText = None
    from_service_id: OptionalText = None
    to_service_id: OptionalText = None
    communication_type_id: OptionalText = None
    data_exchanged: OptionalText = None
    frequency: OptionalText = None
    protocol: OptionalText = None
    authentication: OptionalText = None


class BusinessRule(Record):
    name: str
    description: OptionalText = None
    type: str = "validation"


class ErrorScenario(Record):
    scenario: str
    handling: OptionalText = None
    notification: OptionalText = None


class PerformanceRequirements(Record):
    response_time: OptionalText = None
    throughput: OptionalText = None
    availability: OptionalText = None

    def is_empty(self) -> bool:
        return not (self.response_time or self.throughput or self.availability)


class Flow(Record):
    """A documented workflow spanning any number of services and domains."""

    id: OptionalText = None
    name: str
    description: OptionalText = None

    service_domain_id: OptionalText = None
    involved_service_ids: tuple[str, ...] = Field(default_factory=tuple)

    priority: Priority = "Medium"
    status: FlowStatus = "draft"
    version: str = "1.0"

    entry_point: OptionalText = None
    trigger_event: OptionalText = None
    actor_ids: tuple[str, ...] = Field(default_factory=tuple)
    tags: tuple[str, ...] = Field(default_factory=tuple)

    steps: tuple[Step, ...] = Field(default_factory=tuple)
    integrations: tuple[Integration, ...] = Field(default_factory=tuple)
    service_interactions: tuple[ServiceInteraction, ...] = Field(
        default_factory=tuple
    )
    business_rules: tuple[BusinessRule, ...] = Field(default_factory=tuple)
    error_scenarios: tuple[ErrorScenario, ...] = Field(default_factory=tuple)
    performance_requirements: PerformanceRequirements = PerformanceRequirements()

    notes: OptionalText = None

    # Mapping the flow was validated from, exported unchanged by to_document().
    _source: Optional[dict[str, Any]] = PrivateAttr(default=None)

    @classmethod
    def model_validate(cls, obj: Any, *args: Any, **kwargs: Any) -> "Flow":
        flow = super().model_validate(obj, *args, **kwargs)
        if isinstance(obj, dict):
            flow._source = copy.deepcopy(obj)
        return flow

    def model_copy(self, *, update: Optional[dict[str, Any]] = None, deep: bool = False) -> "Flow":
        copied = super().model_copy(update=update, deep=deep)
        if update:
            copied._source = None
        return copied

    def to_document(self) -> dict[str, Any]:
        """Return the flow as an editor document.

        A flow validated from a mapping returns that mapping as it was given,
        including blank values and keys the model does not declare. A flow
        built or edited in code is dumped with camelCase keys, leaving out
        fields that were never set.
        """

        if self._source is not None:
            return copy.deepcopy(self._source)
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    @property
    def decision_steps(self) -> tuple[Step, ...]:
        return tuple(step for step in self.steps if step.is_decision_point)


__all__ = [
    "ActorKind",
    "InteractionKind",
    "Priority",
    "FlowStatus",
    "Service",
    "ServiceDomain",
    "Actor",
    "IntegrationStyle",
    "IntegrationType",
    "Catalog",
    "DataSpec",
    "ConditionalPath",
    "Notification",
    "Step",
    "ServiceInteraction",
    "Integration",
    "BusinessRule",
    "ErrorScenario",
    "PerformanceRequirements",
    "Flow",
]
