"""Tests for the command-line interface."""

import json

import pytest

from filing_engine.cli import create_parser, load_checklist, main


@pytest.fixture
def checklist_file(tmp_path, checklist_items):
    path = tmp_path / "checklist.json"
    path.write_text(json.dumps([item.model_dump() for item in checklist_items]))
    return str(path)


class TestParser:

    def test_classify_arguments(self):
        args = create_parser().parse_args(
            ["classify", "Passport.pdf", "-s", "summary text", "-k", "a, b", "--no-project"]
        )

        assert args.command == "classify"
        assert args.file_name == "Passport.pdf"
        assert args.summary == "summary text"
        assert args.keywords == "a, b"
        assert args.no_project is True

    def test_match_requires_checklist(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["match", "Passport.pdf"])


class TestLoadChecklist:

    def test_loads_requirements(self, checklist_file):
        items = load_checklist(checklist_file)
        assert items[0].id == "kyc-proof-of-address"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValueError, match="not found"):
            load_checklist(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        with pytest.raises(ValueError, match="not valid JSON"):
            load_checklist(str(path))

    def test_invalid_shape(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"name": "no id"}]))

        with pytest.raises(ValueError, match="Invalid checklist"):
            load_checklist(str(path))


class TestCommands:

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_classify(self, capsys):
        assert main(["classify", "Debenture_Final.pdf"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["file_type"] == "Debenture"
        assert data["suggested_folder"] == "post_completion"
        assert data["method"] == "filename"

    def test_classify_by_content_without_project(self, capsys):
        code = main([
            "classify", "scan_0001.pdf",
            "--summary", "Development appraisal showing profit on cost",
            "--no-project",
        ])

        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["method"] == "content_keywords"
        assert data["file_type"] == "Appraisal"
        assert data["suggested_folder"] == "miscellaneous"
        assert data["needs_review"] is True

    def test_classify_with_checklist(self, capsys, checklist_file):
        assert main(["classify", "Passport_JohnSmith.pdf", "-c", checklist_file]) == 0

        data = json.loads(capsys.readouterr().out)
        assert "kyc-proof-of-id" in data["checklist_matches"]

    def test_match(self, capsys, checklist_file):
        assert main(["match", "Passport_JohnSmith.pdf", "--checklist", checklist_file]) == 0

        matches = json.loads(capsys.readouterr().out)
        assert matches[0]["requirement_id"] == "kyc-proof-of-id"

    def test_match_missing_checklist_file(self, capsys, tmp_path):
        assert main(["match", "Passport.pdf", "--checklist", str(tmp_path / "missing.json")]) == 1
        assert "Error: Checklist file not found" in capsys.readouterr().err

    def test_resolve(self, capsys):
        assert main(["resolve", "appraisal", "--no-project"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["level"] == "client"
        assert data["folder_type"] == "miscellaneous"

    def test_folders_template(self, capsys):
        assert main(["folders", "-t", "lender", "-l", "project"]) == 0

        entries = json.loads(capsys.readouterr().out)
        assert len(entries) == 7

    def test_folders_bootstrap_with_existing(self, capsys):
        assert main(["folders", "-l", "project", "-o", "proj-1", "-e", "background,notes"]) == 0

        plan = json.loads(capsys.readouterr().out)
        assert plan == {"created": False, "folders_count": 2, "folders": []}

    def test_folders_unknown_level(self, capsys):
        assert main(["folders", "-l", "portfolio"]) == 1
        assert "Unknown level" in capsys.readouterr().err
