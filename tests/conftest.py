"""Shared catalogs, flows and a fixed clock for flowscribe tests."""

import copy
from datetime import datetime, timezone

import pytest

from flowscribe.models import Catalog, Flow

FIXED_TIME = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_TIME


ENROLL_CATALOG = {
    "name": "Admissions",
    "domains": [
        {
            "id": "d1",
            "name": "Admissions",
            "color": "#4CAF50",
            "services": [
                {"id": "s1", "name": "Intake Svc", "abbreviation": "INT", "database": "Intake DB"},
                {"id": "s2", "name": "Review Svc", "abbreviation": "REV"},
            ],
        }
    ],
    "actors": [
        {"id": "a1", "abbreviation": "AB", "fullName": "Applicant", "type": "human"},
        {"id": "a2", "abbreviation": "SYS", "fullName": "Scheduler", "type": "system"},
    ],
    "integrationTypes": [
        {
            "id": "t1",
            "name": "Synchronous (REST)",
            "abbreviation": "REST",
            "style": {"lineStyle": "solid", "color": "#2196F3", "arrowType": "single"},
        }
    ],
}

ENROLL_FLOW = {
    "name": "Enroll",
    "steps": [
        {
            "stepNumber": 1,
            "actorId": "a1",
            "action": "Submit",
            "serviceIds": ["s1"],
            "isDecisionPoint": False,
        },
        {
            "stepNumber": 2,
            "actorId": "a1",
            "action": "Review",
            "serviceIds": ["s1", "s2"],
            "isDecisionPoint": True,
            "decisionCriteria": "complete?",
            "conditionalPaths": [{"condition": "yes"}, {"condition": "no"}],
        },
    ],
}


@pytest.fixture
def clock():
    return fixed_clock


@pytest.fixture
def enroll_catalog() -> Catalog:
    return Catalog.model_validate(ENROLL_CATALOG)


@pytest.fixture
def enroll_flow() -> Flow:
    return Flow.model_validate(ENROLL_FLOW)


@pytest.fixture
def detailed_flow() -> Flow:
    """Flow exercising every optional section."""
    return Flow.model_validate(
        {
            "id": "flow-1",
            "name": "Enroll & Verify",
            "description": "Applicant enrollment with automated verification",
            "serviceDomainId": "d1",
            "involvedServiceIds": ["s1", "s2"],
            "priority": "High",
            "status": "review",
            "entryPoint": "Web portal",
            "triggerEvent": "Applicant clicks submit",
            "actorIds": ["a1", "a2"],
            "tags": ["admissions", "onboarding"],
            "steps": [
                {
                    "stepNumber": 1,
                    "actorId": "a1",
                    "action": "Submit application",
                    "serviceIds": ["s1"],
                    "communicationTypeId": "t1",
                    "dataInput": {"description": "Application form", "schema": "ApplicationV2"},
                    "dataOutput": {"description": "Application id"},
                },
                {
                    "stepNumber": 2,
                    "actorId": "a2",
                    "action": "Verify documents",
                    "serviceIds": ["s2"],
                    "isDecisionPoint": True,
                    "decisionCriteria": "Documents valid?",
                    "conditionalPaths": [
                        {"condition": "valid", "nextStep": 3},
                        {"condition": "invalid"},
                    ],
                    "notifications": [{"type": "email", "recipient": "applicant"}],
                    "errorHandling": "Retry three times then flag for manual review",
                    "estimatedDuration": "5m",
                },
                {
                    "stepNumber": 3,
                    "actorId": "a1",
                    "action": "Confirm enrollment",
                    "serviceIds": [],
                },
            ],
            "serviceInteractions": [
                {
                    "fromServiceId": "s1",
                    "toServiceId": "s2",
                    "interactionType": "synchronous",
                    "method": "POST",
                    "endpoint": "/reviews",
                    "dataExchanged": "Application payload",
                    "averageLatency": "120ms",
                    "authentication": "OAuth2",
                },
                {
                    "fromServiceId": "s2",
                    "toServiceId": "s1",
                    "interactionType": "event-driven",
                    "endpoint": "review.completed",
                    "dataExchanged": "Review outcome",
                },
            ],
            "integrations": [
                {
                    "fromServiceId": "s1",
                    "toServiceId": "s2",
                    "communicationTypeId": "t1",
                    "dataExchanged": "Nightly sync",
                    "frequency": "daily",
                }
            ],
            "businessRules": [{"name": "Age limit", "description": "Applicant must be 18+"}],
            "errorScenarios": [
                {"scenario": "Intake down", "handling": "Queue submission", "notification": "ops"}
            ],
            "performanceRequirements": {"responseTime": "< 2s", "availability": "99.9%"},
            "notes": "Reviewed with the admissions team.",
        }
    )


@pytest.fixture
def enroll_flow_data() -> dict:
    return copy.deepcopy(ENROLL_FLOW)


@pytest.fixture
def enroll_catalog_data() -> dict:
    return copy.deepcopy(ENROLL_CATALOG)
