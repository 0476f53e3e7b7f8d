"""Built-in catalogs to start documenting flows without writing a registry first."""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List

from .exceptions import UnknownTemplateError
from .models import Catalog

INTEGRATION_TYPES: List[Dict[str, Any]] = [
    {
        "name": "Synchronous (REST)",
        "abbreviation": "REST",
        "description": "Request-response over HTTP/HTTPS",
        "style": {"lineStyle": "solid", "color": "#2196F3", "arrowType": "single"},
    },
    {
        "name": "Asynchronous (Events)",
        "abbreviation": "Event",
        "description": "Publish-subscribe events",
        "style": {"lineStyle": "dashed", "color": "#FF9800", "arrowType": "double"},
    },
    {
        "name": "Message Queue",
        "abbreviation": "MQ",
        "description": "Queue-based messaging (RabbitMQ, Kafka, ...)",
        "style": {"lineStyle": "dotted", "color": "#9C27B0", "arrowType": "filled"},
    },
]

HWMS_EXTRA_TYPES: List[Dict[str, Any]] = [
    {
        "name": "Direct DB",
        "abbreviation": "DB",
        "description": "Direct database access",
        "style": {"lineStyle": "dashed", "color": "#F44336", "arrowType": "database"},
    },
    {
        "name": "GraphQL",
        "abbreviation": "GQL",
        "description": "GraphQL API communication",
        "style": {"lineStyle": "solid", "color": "#E10098", "arrowType": "single"},
    },
    {
        "name": "gRPC",
        "abbreviation": "gRPC",
        "description": "High-performance RPC framework",
        "style": {"lineStyle": "solid", "color": "#00ADD8", "arrowType": "double"},
    },
]


def _slug(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")


def _build(
    name: str,
    domains: List[Dict[str, Any]],
    actors: List[Dict[str, Any]],
    integration_types: List[Dict[str, Any]],
) -> Catalog:
    """Assign stable ids derived from names and abbreviations."""

    return Catalog.model_validate(
        {
            "name": name,
            "version": "1.0.0",
            "domains": [
                {
                    **domain,
                    "id": f"domain-{_slug(domain['name'])}",
                    "services": [
                        {**service, "id": f"service-{_slug(service['abbreviation'])}"}
                        for service in domain["services"]
                    ],
                }
                for domain in domains
            ],
            "actors": [
                {**actor, "id": f"actor-{_slug(actor['abbreviation'])}"} for actor in actors
            ],
            "integrationTypes": [
                {**itype, "id": f"type-{_slug(itype['abbreviation'])}"}
                for itype in integration_types
            ],
        }
    )


def _service(name: str, abbreviation: str, description: str, database: str) -> Dict[str, str]:
    return {
        "name": name,
        "abbreviation": abbreviation,
        "description": description,
        "database": database,
    }


def _actor(abbreviation: str, full_name: str, description: str, kind: str = "human") -> Dict[str, str]:
    return {
        "abbreviation": abbreviation,
        "fullName": full_name,
        "description": description,
        "type": kind,
    }


def ecommerce_catalog() -> Catalog:
    return _build(
        "E-Commerce Platform",
        domains=[
            {
                "name": "Customer Management",
                "color": "#4CAF50",
                "services": [
                    _service("User Service", "US", "User authentication and profiles", "User DB"),
                    _service("Customer Service", "CS", "Customer data and preferences", "Customer DB"),
                ],
            },
            {
                "name": "Product Catalog",
                "color": "#2196F3",
                "services": [
                    _service("Product Service", "PS", "Product catalog and details", "Product DB"),
                    _service("Inventory Service", "IS", "Stock management", "Inventory DB"),
                ],
            },
            {
                "name": "Order Management",
                "color": "#FF9800",
                "services": [
                    _service("Cart Service", "CartS", "Shopping cart management", "Cart DB"),
                    _service("Order Service", "OS", "Order processing", "Order DB"),
                    _service("Payment Service", "PayS", "Payment processing", "Payment DB"),
                ],
            },
        ],
        actors=[
            _actor("Customer", "Customer", "End user shopping on the platform"),
            _actor("Admin", "Administrator", "Platform administrator"),
            _actor("System", "System", "Automated processes", "automated"),
        ],
        integration_types=INTEGRATION_TYPES,
    )


def hwms_catalog() -> Catalog:
    return _build(
        "HWMS - Health Workforce Management System",
        domains=[
            {
                "name": "Education & Certification",
                "color": "#4CAF50",
                "services": [
                    _service("Education Management Service", "EMS", "Educational programs and certifications", "Education DB"),
                    _service("Council Connect Service", "CCS", "Certification verification with councils", "Council DB"),
                ],
            },
            {
                "name": "Workforce Development",
                "color": "#2196F3",
                "services": [
                    _service("Internship Service", "IS", "Internship programs and placements", "Internship DB"),
                    _service("Deployment Service", "DS", "Workforce deployment and assignments", "Placement DB"),
                    _service("Fellowship Service", "FS", "Fellowship programs", "Fellowship DB"),
                    _service("Residency Service", "RS", "Medical residency programs", "Residency DB"),
                    _service("Authorization Service", "AS", "Authentication and authorization", "Auth DB"),
                ],
            },
            {
                "name": "Service Delivery",
                "color": "#FF9800",
                "services": [
                    _service("Deployment Management Service", "DMS", "Ongoing deployments", "Deployment DB"),
                    _service("Facility & Equipment Management Service", "FEMS", "Facilities and equipment", "Facility DB"),
                ],
            },
            {
                "name": "Human Resources",
                "color": "#9C27B0",
                "services": [
                    _service("Vacancy Management Service", "VMS", "Job vacancies and postings", "Vacancy DB"),
                    _service("Staff Management Service", "SMS", "Staff records and profiles", "Staff DB"),
                ],
            },
            {
                "name": "Shared Services",
                "color": "#607D8B",
                "services": [
                    _service("User Service", "US", "User account management", "User DB"),
                    _service("File Service", "FileS", "File storage and management", "File Storage"),
                    _service("Notification Service", "NS", "Email, SMS and push notifications", "Notification DB"),
                    _service("Message/Chat Service", "MCS", "In-app messaging and chat", "Message DB"),
                    _service("Q/A & Support Service", "QAS", "Help desk and support ticketing", "Support DB"),
                    _service("Payment/Counter Service", "PCS", "Payments and financial transactions", "Payment DB"),
                ],
            },
        ],
        actors=[
            _actor("PHP", "Prospect Health Professional", "Health workers seeking employment or training"),
            _actor("HPT", "Health Professional Trainee", "Professionals enrolled in training programs"),
            _actor("HP", "Health Professional", "Certified, employed healthcare professionals"),
            _actor("IAU", "Institution Admin User", "Administrative staff at healthcare institutions"),
            _actor("Admin", "System Administrator", "Platform administrators"),
            _actor("Council", "Council Member", "Professional council members"),
            _actor("HR", "HR Personnel", "Recruitment and workforce planning staff"),
            _actor("Student", "Student", "Students in health professional education"),
            _actor("System", "System/Automated Process", "Scheduled jobs and background tasks", "automated"),
        ],
        integration_types=INTEGRATION_TYPES + HWMS_EXTRA_TYPES,
    )


TEMPLATES: Dict[str, Callable[[], Catalog]] = {
    "ecommerce": ecommerce_catalog,
    "hwms": hwms_catalog,
}


def get_template(name: str) -> Catalog:
    factory = TEMPLATES.get(name.lower())
    if factory is None:
        raise UnknownTemplateError(
            f"Unknown catalog template: {name} (choose from {', '.join(TEMPLATES)})"
        )
    return factory()
