"""Shared fixtures: isolated settings and a realistic borrower checklist."""

from typing import List

import pytest

from filing_engine.config import get_settings
from filing_engine.models.checklist import ChecklistRequirement

SETTINGS_ENV_VARS = (
    "GEMINI_API_KEY",
    "MODEL_NAME",
    "ENABLE_LLM_FALLBACK",
    "REVIEW_CONFIDENCE_THRESHOLD",
    "CHECKLIST_MATCH_THRESHOLD",
    "TRUSTED_PROXIES",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Each test starts from default settings, unaffected by the host environment."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir("/")  # keep a developer's .env out of the tests
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def checklist_items() -> List[ChecklistRequirement]:
    return [
        ChecklistRequirement(
            id="kyc-proof-of-address",
            name="Certified Proof of Address",
            category="KYC",
            matching_document_types=["Proof of Address", "Utility Bill", "Bank Statement", "KYC Document"],
        ),
        ChecklistRequirement(
            id="kyc-proof-of-id",
            name="Certified Proof of ID",
            category="KYC",
            matching_document_types=["Proof of ID", "Passport", "Driver's License", "ID Document", "KYC Document"],
        ),
        ChecklistRequirement(
            id="kyc-business-bank-statements",
            name="Business Bank Statements (3 months)",
            category="KYC",
            matching_document_types=["Bank Statement", "Financial Statement", "KYC Document"],
        ),
        ChecklistRequirement(
            id="kyc-personal-bank-statements",
            name="Personal Bank Statements (3 months)",
            category="KYC",
            matching_document_types=["Bank Statement", "Financial Statement", "KYC Document"],
        ),
        ChecklistRequirement(
            id="kyc-track-record-excel",
            name="Track Record - Excel Version",
            category="KYC",
            matching_document_types=["Track Record", "Spreadsheet", "Financial Model"],
        ),
        ChecklistRequirement(
            id="kyc-assets-liabilities",
            name="Assets & Liabilities Statement",
            category="KYC",
            matching_document_types=["Assets & Liabilities", "Net Worth Statement", "Financial Statement", "KYC Document"],
        ),
        ChecklistRequirement(
            id="project-appraisal",
            name="Appraisal",
            category="Appraisals",
            matching_document_types=["Appraisal", "Feasibility Study", "Development Appraisal", "Financial Model"],
        ),
        ChecklistRequirement(
            id="project-floorplans",
            name="Floorplans",
            category="Plans",
            matching_document_types=["Floor Plans", "Floorplan"],
        ),
        ChecklistRequirement(
            id="project-site-plan",
            name="Site Plan",
            category="Plans",
            matching_document_types=["Site Plans", "Site Layout"],
        ),
    ]
