"""Tests for starter folder templates and bootstrap planning."""

import pytest

from filing_engine.services.folder_templates import get_folder_template, plan_folder_bootstrap


class TestGetFolderTemplate:

    @pytest.mark.parametrize("client_type,level,count", [
        ("borrower", "client", 4),
        ("borrower", "project", 8),
        ("lender", "client", 4),
        ("lender", "project", 7),
    ])
    def test_template_sizes(self, client_type, level, count):
        assert len(get_folder_template(client_type, level)) == count

    def test_entries_are_in_display_order(self):
        template = get_folder_template("borrower", "project")

        assert [e.order for e in template] == list(range(1, 9))
        assert template[0].folder_key == "background"
        assert template[-1].folder_key == "operational_model"

    def test_kyc_is_nested_under_background(self):
        by_key = {e.folder_key: e for e in get_folder_template("borrower", "client")}

        assert by_key["kyc"].parent_key == "background"
        assert by_key["background_docs"].parent_key == "background"
        assert by_key["background"].parent_key is None

    def test_input_is_normalized(self):
        assert get_folder_template(" Lender ", "PROJECT") == get_folder_template("lender", "project")

    @pytest.mark.parametrize("client_type,level", [("broker", "client"), ("borrower", "portfolio"), ("", "")])
    def test_unknown_values_raise(self, client_type, level):
        with pytest.raises(ValueError):
            get_folder_template(client_type, level)


class TestPlanFolderBootstrap:

    def test_new_project_gets_every_template_folder(self):
        plan = plan_folder_bootstrap("proj-123", "project", [])

        assert plan.created is True
        assert plan.folders_count == 8
        assert all(f.owner_id == "proj-123" for f in plan.folders)
        assert all(f.level == "project" for f in plan.folders)
        assert [f.folder_key for f in plan.folders][:2] == ["background", "terms_comparison"]

    def test_client_folders_keep_parent_keys(self):
        plan = plan_folder_bootstrap("client-9", "client", [])
        by_key = {f.folder_key: f for f in plan.folders}

        assert by_key["kyc"].parent_folder_key == "background"
        assert by_key["miscellaneous"].parent_folder_key is None

    def test_lender_client_type(self):
        plan = plan_folder_bootstrap("lender-1", "project", [], client_type="lender")

        assert plan.folders_count == 7
        assert plan.folders[0].folder_key == "term_sheets"

    def test_existing_folders_are_left_alone(self):
        plan = plan_folder_bootstrap("proj-123", "project", ["background", "notes"])

        assert plan.created is False
        assert plan.folders_count == 2
        assert plan.folders == []

    @pytest.mark.parametrize("owner_id", ["", "   "])
    def test_blank_owner_raises(self, owner_id):
        with pytest.raises(ValueError, match="owner_id"):
            plan_folder_bootstrap(owner_id, "client", [])

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError, match="Unknown level"):
            plan_folder_bootstrap("proj-123", "portfolio", [])
