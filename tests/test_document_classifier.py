"""Tests for the filename and content classifiers."""

import pytest

from filing_engine.models.catalog import ContentDetectionRule, DocumentTypePattern
from filing_engine.services.document_classifier import classify_content, classify_filename


# ---------------------------------------------------------------------------
# Filename classifier
# ---------------------------------------------------------------------------

class TestClassifyFilename:
    """First-match-wins filename patterns."""

    @pytest.mark.parametrize("file_name,expected_type", [
        ("Share_Charge_ABC.pdf", "Share Charge"),
        ("PASSPORT-john.smith.PDF", "Passport"),
        ("Council_Tax_Bill_2024.pdf", "Utility Bill"),
        ("HSBC_Bank_Statement_Jan.pdf", "Bank Statement"),
        ("Valuation_Report_RICS.pdf", "RedBook Valuation"),
        ("Term_Sheet_v2.pdf", "Term Sheet"),
        ("Debenture_Final.pdf", "Debenture"),
        ("PG_John_Smith.pdf", "Personal Guarantee"),
        ("SHA_2023.pdf", "Shareholders Agreement"),
        ("Terms_HOT.pdf", "Indicative Terms"),
    ])
    def test_known_filenames(self, file_name, expected_type):
        hint = classify_filename(file_name)
        assert hint is not None
        assert hint.file_type == expected_type

    def test_share_charge_wins_over_shareholders_agreement(self):
        hint = classify_filename("Share_Charge_ABC.pdf")

        assert hint.file_type == "Share Charge"
        assert hint.category == "Legal Documents"
        assert hint.folder == "post_completion"
        assert hint.confidence == 0.85
        assert hint.reason == 'Filename contains "share charge"'

    def test_case_and_separator_insensitive(self):
        variants = ["Site_Plan.PDF", "site-plan.pdf", "SITE.PLAN.pdf", "site plan.pdf"]
        hints = [classify_filename(v) for v in variants]

        assert all(h is not None for h in hints)
        assert {h.file_type for h in hints} == {"Site Plans"}

    def test_unknown_filename_returns_none(self):
        assert classify_filename("random_file.pdf") is None

    @pytest.mark.parametrize("file_name", ["", "   ", "___.---"])
    def test_empty_filename_returns_none(self, file_name):
        assert classify_filename(file_name) is None

    def test_excluded_context_skips_pattern(self):
        hint = classify_filename("passport_photo_guidelines.pdf")

        assert hint is not None
        assert hint.file_type != "Passport"
        assert hint.file_type == "Indicative Terms"

    @pytest.mark.parametrize("file_name", [
        "site_photo_march.jpg",
        "Hotel_Accommodation_Schedule.pdf",
        "progress_photographs.zip",
    ])
    def test_hot_keyword_fires_inside_longer_words(self, file_name):
        # "hot" (heads of terms) is checked before the photo and schedule patterns.
        assert classify_filename(file_name).file_type == "Indicative Terms"

    def test_valuation_guide_is_not_a_valuation(self):
        hint = classify_filename("valuation_methodology_guide.pdf")
        assert hint is None or hint.file_type != "RedBook Valuation"

    def test_floor_plan_meeting_notes_are_not_plans(self):
        hint = classify_filename("Floor_Plan_Discussion_Notes.pdf")
        assert hint is None or hint.file_type != "Floor Plans"

    def test_invoice_template_is_excluded(self):
        hint = classify_filename("invoice_template.xlsx")
        assert hint is None or hint.file_type != "Invoice"

    def test_custom_pattern_list(self):
        patterns = [
            DocumentTypePattern(
                keywords=("drone",), file_type="Drone Survey", category="Inspections", folder="credit_submission"
            )
        ]

        hint = classify_filename("Drone_Survey_North.pdf", patterns)

        assert hint.file_type == "Drone Survey"
        assert hint.folder == "credit_submission"
        assert classify_filename("Passport.pdf", patterns) is None

    def test_unicode_filename(self):
        assert classify_filename("résumé_données.pdf") is None
        assert classify_filename("Pässport_passport.pdf").file_type == "Passport"


# ---------------------------------------------------------------------------
# Content classifier
# ---------------------------------------------------------------------------

class TestClassifyContent:
    """Weighted content rules over summary and keywords."""

    def test_passport_summary(self):
        decision = classify_content("This is a UK passport biodata page showing the MRZ.", [])

        assert decision.file_type == "Passport"
        assert decision.category == "KYC"
        assert decision.suggested_folder == "kyc"
        assert decision.target_level == "client"
        # passport + biodata + mrz = 30 -> capped
        assert decision.confidence == 0.95
        assert decision.checklist_matches == ["kyc-proof-of-id"]

    def test_provided_keyword_scores_one_and_a_half(self):
        decision = classify_content("", ["Floor Plan"])

        assert decision.file_type == "Floor Plans"
        assert decision.category == "Plans"
        assert decision.suggested_folder == "background"
        assert decision.target_level == "project"
        # 10 * 1.5 = 15 -> 0.5 + 0.3
        assert decision.confidence == pytest.approx(0.8)
        assert decision.checklist_matches == ["project-floorplans"]

    def test_keyword_contained_in_rule_keyword_matches(self):
        decision = classify_content("", ["bank"])

        assert decision.file_type == "Bank Statement"
        assert decision.confidence == pytest.approx(0.8)
        assert decision.checklist_matches == [
            "kyc-business-bank-statements",
            "kyc-personal-bank-statements",
        ]

    def test_tie_keeps_first_rule(self):
        decision = classify_content("Debenture and share charge documents", [])

        assert decision.file_type == "Debenture"
        assert decision.confidence == pytest.approx(0.7)

    def test_planning_uses_category_default_folder(self):
        decision = classify_content("Planning permission granted; decision notice attached.", [])

        assert decision.file_type == "Planning Documentation"
        assert decision.category == "Professional Reports"
        assert decision.suggested_folder == "credit_submission"
        assert decision.target_level == "project"
        assert decision.checklist_matches == ["project-planning-decision"]

    @pytest.mark.parametrize("summary,keywords", [
        ("", []),
        (None, None),
        ("lorem ipsum dolor sit amet", []),
        ("", [""]),
        ("", ["   "]),
    ])
    def test_no_match_returns_none(self, summary, keywords):
        assert classify_content(summary, keywords) is None

    def test_rule_weight_drives_confidence(self):
        light = [ContentDetectionRule(keywords=("widget",), file_type="Widget Spec", weight=5)]
        heavy = [ContentDetectionRule(keywords=("widget",), file_type="Widget Spec", weight=20)]

        assert classify_content("a widget", [], light).confidence == pytest.approx(0.6)
        assert classify_content("a widget", [], heavy).confidence == pytest.approx(0.9)

    def test_unknown_type_falls_back_to_other(self):
        rules = [ContentDetectionRule(keywords=("widget",), file_type="Widget Spec", weight=5)]

        decision = classify_content("a widget drawing", [], rules)

        assert decision.file_type == "Widget Spec"
        assert decision.category == "Other"
        assert decision.suggested_folder == "miscellaneous"
        assert decision.target_level == "client"
        assert decision.checklist_matches == []
        assert decision.confidence == pytest.approx(0.6)

    def test_idempotent(self):
        summary = "RICS Red Book valuation report for the property."
        keywords = ["valuation", "rics"]

        assert classify_content(summary, keywords) == classify_content(summary, keywords)

    @pytest.mark.parametrize("summary,keywords", [
        ("gas bill", []),
        ("monitoring report on construction progress and site inspection", ["monitoring report"]),
        ("development appraisal with gross development value and profit on cost", ["feasibility"]),
        ("term sheet", ["term sheet", "loan terms", "indicative terms"]),
    ])
    def test_confidence_within_bounds(self, summary, keywords):
        decision = classify_content(summary, keywords)

        assert decision is not None
        assert 0.5 <= decision.confidence <= 0.95
