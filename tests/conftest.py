"""Shared fixtures for the certmap test suite."""

import copy

import pytest

from certmap.core.types import Catalog
from certmap.parsing.catalog import parse_imported_data

RAW_CATALOG = {
    "certs": [
        {"id": "a1", "vendor": "AWS", "level": "Fundamentals", "title": "Cloud Practitioner", "roles": ["General"]},
        {"id": "a2", "vendor": "AWS", "level": "Associate", "title": "Solutions Architect Associate", "roles": ["Architect"]},
    ],
    "links": [
        {"id": "l1", "sourceId": "a1", "targetId": "a2", "type": "required"},
    ],
}

RICH_CATALOG = {
    "certs": [
        {"id": "clf", "vendor": "AWS", "level": "Fundamentals", "levelDisplay": "Foundational",
         "title": "Cloud Practitioner", "exam": "CLF-C02", "roles": ["General"], "domain": "Cloud"},
        {"id": "saa", "vendor": "AWS", "level": "Associate", "title": "Solutions Architect Associate",
         "exam": "SAA-C03", "roles": ["Architect"], "domain": "Cloud",
         "description": "Design resilient architectures"},
        {"id": "dva", "vendor": "AWS", "level": "Associate", "title": "Developer Associate",
         "exam": "DVA-C02", "roles": ["DevOps"], "domain": "Cloud"},
        {"id": "mla", "vendor": "AWS", "level": "Associate", "title": "Machine Learning Engineer",
         "roles": ["Data&AI"], "domain": "Machine Learning"},
        {"id": "sap", "vendor": "AWS", "level": "Professional-Expert", "levelDisplay": "Professional",
         "title": "Solutions Architect Professional", "exam": "SAP-C02", "roles": ["Architect"], "domain": "Cloud"},
        {"id": "scs", "vendor": "AWS", "level": "Specialty", "title": "Security Specialty",
         "roles": ["Security"], "domain": "Security"},
        {"id": "az900", "vendor": "Azure", "level": "Fundamentals", "title": "Azure Fundamentals",
         "exam": "AZ-900", "roles": ["General"]},
    ],
    "links": [
        {"id": "clf-saa", "sourceId": "clf", "targetId": "saa", "type": "recommended"},
        {"id": "saa-sap", "sourceId": "saa", "targetId": "sap", "type": "required",
         "trainingTitle": "Advanced Architecting", "trainingUrl": "https://example.com/advanced"},
        {"id": "dva-sap", "sourceId": "dva", "targetId": "sap", "type": "recommended"},
        {"id": "saa-scs", "sourceId": "saa", "targetId": "scs", "type": "recommended"},
        {"id": "az900-clf", "sourceId": "az900", "targetId": "clf", "type": "recommended"},
    ],
}


@pytest.fixture
def raw_catalog() -> dict:
    """Two AWS certs joined by one required link."""
    return copy.deepcopy(RAW_CATALOG)


@pytest.fixture
def rich_raw_catalog() -> dict:
    """Several AWS certs, one Azure cert and a cross-vendor link."""
    return copy.deepcopy(RICH_CATALOG)


@pytest.fixture
def catalog(raw_catalog) -> Catalog:
    return parse_imported_data(raw_catalog)


@pytest.fixture
def rich_catalog(rich_raw_catalog) -> Catalog:
    return parse_imported_data(rich_raw_catalog)
