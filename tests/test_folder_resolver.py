"""Tests for the folder-resolution policy."""

import pytest

from filing_engine.services.folder_resolver import (
    NO_MAPPING_REASON,
    NO_PROJECT_REASON,
    resolve_folder,
)


def test_appraisal_without_project_is_demoted():
    resolution = resolve_folder("appraisal", has_project_context=False)

    assert resolution.level == "client"
    assert resolution.folder_type == "miscellaneous"
    assert resolution.reason == NO_PROJECT_REASON


def test_appraisal_with_project():
    resolution = resolve_folder("appraisal", has_project_context=True)

    assert resolution.level == "project"
    assert resolution.folder_type == "appraisals"
    assert resolution.reason == "Direct category match"


def test_client_level_folders_ignore_project_context():
    with_project = resolve_folder("KYC", True)
    without_project = resolve_folder("KYC", False)

    assert with_project == without_project
    assert with_project.level == "client"
    assert with_project.folder_type == "kyc"


def test_label_is_trimmed_and_lowercased():
    resolution = resolve_folder("  Term Sheet ", True)

    assert resolution.folder_type == "terms_comparison"
    assert resolution.reason == "Direct category match"


def test_canonical_document_type():
    resolution = resolve_folder("Floor Plans", True)

    assert resolution.level == "project"
    assert resolution.folder_type == "background"
    assert resolution.reason == "Document type match: Floor Plans"


def test_category_default():
    resolution = resolve_folder("Legal Documents", True)

    assert resolution.level == "project"
    assert resolution.folder_type == "post_completion"
    assert resolution.reason == "Category match: Legal Documents"


def test_partial_match_in_map_order():
    resolution = resolve_folder("Quarterly cash flow forecast", True)

    assert resolution.level == "project"
    assert resolution.folder_type == "operational_model"
    assert resolution.reason == "Partial match: cash flow"


def test_partial_match_demoted_without_project():
    resolution = resolve_folder("Quarterly cash flow forecast", False)

    assert resolution.folder_type == "miscellaneous"
    assert resolution.reason == NO_PROJECT_REASON


@pytest.mark.parametrize("label", ["", "   ", None, "qqq"])
def test_unknown_or_empty_label_goes_to_miscellaneous(label):
    resolution = resolve_folder(label, True)

    assert resolution.level == "client"
    assert resolution.folder_type == "miscellaneous"
    assert resolution.reason == NO_MAPPING_REASON
