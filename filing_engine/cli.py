"""
Command-line interface for the document filing engine.

Usage:
    python -m filing_engine classify FILE_NAME [--summary TEXT] [--keywords a,b] [--no-project]
    python -m filing_engine match FILE_NAME --checklist checklist.json
    python -m filing_engine resolve CATEGORY [--no-project]
    python -m filing_engine folders [--client-type borrower] [--level client] [--owner ID]
"""

import argparse
import json
import sys
from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from filing_engine.config import get_settings
from filing_engine.models.checklist import ChecklistRequirement
from filing_engine.services.checklist_matcher import match_checklist
from filing_engine.services.document_classifier import file_document
from filing_engine.services.folder_resolver import resolve_folder
from filing_engine.services.folder_templates import get_folder_template, plan_folder_bootstrap
from filing_engine.services.gemini_client import get_fallback_client

_CHECKLIST_ADAPTER = TypeAdapter(List[ChecklistRequirement])


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="filing-engine",
        description="Document filing CLI - classify files and plan folders locally"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    classify_parser = subparsers.add_parser("classify", help="Classify a file and pick its folder")
    classify_parser.add_argument("file_name", help="Filename to classify")
    classify_parser.add_argument("--summary", "-s", default=None, help="Extracted text summary")
    classify_parser.add_argument(
        "--keywords", "-k", default="",
        help="Comma-separated extracted keywords"
    )
    classify_parser.add_argument(
        "--no-project", action="store_true",
        help="No project selected (project-level documents go to miscellaneous)"
    )
    classify_parser.add_argument(
        "--checklist", "-c", default=None,
        help="JSON file with checklist requirements to match against"
    )

    match_parser = subparsers.add_parser("match", help="Score a filename against a checklist")
    match_parser.add_argument("file_name", help="Filename to match")
    match_parser.add_argument(
        "--checklist", "-c", required=True,
        help="JSON file with a list of {id, name, category, matching_document_types}"
    )

    resolve_parser = subparsers.add_parser("resolve", help="Resolve the folder for a category")
    resolve_parser.add_argument("category", help="Category or document type")
    resolve_parser.add_argument("--no-project", action="store_true", help="No project selected")

    folders_parser = subparsers.add_parser("folders", help="Show or plan starter folders")
    folders_parser.add_argument(
        "--client-type", "-t", default="borrower",
        help="borrower or lender (default: borrower)"
    )
    folders_parser.add_argument(
        "--level", "-l", default="client",
        help="client or project (default: client)"
    )
    folders_parser.add_argument(
        "--owner", "-o", default=None,
        help="Client/project ID; plans a bootstrap instead of listing the template"
    )
    folders_parser.add_argument(
        "--existing", "-e", default="",
        help="Comma-separated folder keys that already exist for the owner"
    )

    return parser


def _split_csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def load_checklist(path: str) -> List[ChecklistRequirement]:
    """Read checklist requirements from a JSON file.

    Raises:
        ValueError: If the file is missing, not JSON, or not a list of requirements.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        raise ValueError(f"Checklist file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Checklist file is not valid JSON: {e}")

    try:
        return _CHECKLIST_ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid checklist in {path}: {e.error_count()} error(s)")


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2))


def classify_command(args: argparse.Namespace) -> int:
    settings = get_settings()
    items: Optional[List[ChecklistRequirement]] = None
    if args.checklist:
        items = load_checklist(args.checklist)

    decision = file_document(
        args.file_name,
        summary=args.summary,
        keywords=_split_csv(args.keywords),
        has_project_context=not args.no_project,
        checklist_items=items,
        gemini_client=get_fallback_client(settings),
        settings=settings,
    )
    _print_json(decision.model_dump())
    return 0


def match_command(args: argparse.Namespace) -> int:
    items = load_checklist(args.checklist)
    matches = match_checklist(args.file_name, items)
    _print_json([m.model_dump() for m in matches])
    return 0


def resolve_command(args: argparse.Namespace) -> int:
    resolution = resolve_folder(args.category, has_project_context=not args.no_project)
    _print_json(resolution.model_dump())
    return 0


def folders_command(args: argparse.Namespace) -> int:
    if args.owner:
        plan = plan_folder_bootstrap(
            args.owner, args.level, _split_csv(args.existing), client_type=args.client_type
        )
        _print_json(plan.model_dump())
    else:
        entries = get_folder_template(args.client_type, args.level)
        _print_json([e.model_dump() for e in entries])
    return 0


COMMANDS = {
    "classify": classify_command,
    "match": match_command,
    "resolve": resolve_command,
    "folders": folders_command,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    handler = COMMANDS.get(args.command)
    if handler is None:
        print(f"Unknown command: {args.command}")
        return 1

    try:
        return handler(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
