"""Catalog lookups returning typed found/missing results."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

from .models import Actor, Catalog, IntegrationType, Service, ServiceDomain

T = TypeVar("T")


class EntityKind(str, enum.Enum):
    SERVICE = "service"
    ACTOR = "actor"
    INTEGRATION_TYPE = "integration_type"
    DOMAIN = "domain"


SENTINELS: dict[EntityKind, str] = {
    EntityKind.SERVICE: "Unknown Service",
    EntityKind.ACTOR: "Unknown Actor",
    EntityKind.INTEGRATION_TYPE: "Unknown Type",
    EntityKind.DOMAIN: "Unknown Domain",
}


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class Missing:
    kind: EntityKind
    id: Optional[str]

    @property
    def label(self) -> str:
        return SENTINELS[self.kind]


Resolved = Union[Found[T], Missing]


def label_for(resolved: "Resolved[T]", render: Callable[[T], str]) -> str:
    """Render a found value, or the sentinel label for a miss."""
    if isinstance(resolved, Found):
        return render(resolved.value)
    return resolved.label


class CatalogResolver:
    """Name and label lookups over a single catalog.

    Lookups never raise: an id that is ``None`` or not present in the catalog
    resolves to :class:`Missing`, which renders as the fixed sentinel label for
    its entity kind.
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    # Raw lookups -------------------------------------------------------------

    def service(self, service_id: Optional[str]) -> Resolved[Service]:
        for domain in self.catalog.domains:
            for service in domain.services:
                if service.id == service_id:
                    return Found(service)
        return Missing(EntityKind.SERVICE, service_id)

    def actor(self, actor_id: Optional[str]) -> Resolved[Actor]:
        for actor in self.catalog.actors:
            if actor.id == actor_id:
                return Found(actor)
        return Missing(EntityKind.ACTOR, actor_id)

    def integration_type(self, type_id: Optional[str]) -> Resolved[IntegrationType]:
        for integration_type in self.catalog.integration_types:
            if integration_type.id == type_id:
                return Found(integration_type)
        return Missing(EntityKind.INTEGRATION_TYPE, type_id)

    def domain(self, domain_id: Optional[str]) -> Resolved[ServiceDomain]:
        for domain in self.catalog.domains:
            if domain.id == domain_id:
                return Found(domain)
        return Missing(EntityKind.DOMAIN, domain_id)

    def domain_of(self, service_id: Optional[str]) -> Resolved[ServiceDomain]:
        """Return the domain owning ``service_id``."""
        for domain in self.catalog.domains:
            if any(service.id == service_id for service in domain.services):
                return Found(domain)
        return Missing(EntityKind.DOMAIN, None)

    # Display labels ----------------------------------------------------------

    def service_name(self, service_id: Optional[str]) -> str:
        return label_for(self.service(service_id), lambda s: s.name)

    def service_code(self, service_id: Optional[str]) -> str:
        return label_for(self.service(service_id), lambda s: s.abbreviation or s.name)

    def actor_label(self, actor_id: Optional[str]) -> str:
        return label_for(
            self.actor(actor_id), lambda a: f"{a.abbreviation} - {a.full_name}"
        )

    def actor_code(self, actor_id: Optional[str]) -> str:
        return label_for(self.actor(actor_id), lambda a: a.abbreviation)

    def type_name(self, type_id: Optional[str]) -> str:
        return label_for(self.integration_type(type_id), lambda t: t.name)

    def domain_name(self, domain_id: Optional[str]) -> str:
        return label_for(self.domain(domain_id), lambda d: d.name)


__all__ = [
    "EntityKind",
    "SENTINELS",
    "Found",
    "Missing",
    "Resolved",
    "label_for",
    "CatalogResolver",
]
