"""Starter folder templates and folder bootstrap planning.

Each client type has a client-level and a project-level template. Bootstrap
returns the folders a caller should create for a new client or project; it
never creates anything itself.
"""

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

from filing_engine.models.folders import FolderBootstrapPlan, FolderRecord, FolderTemplateEntry

logger = logging.getLogger(__name__)

CLIENT_TYPES = ("borrower", "lender")
LEVELS = ("client", "project")


def _entry(name: str, folder_key: str, order: int, description: str,
           parent_key: Optional[str] = None) -> FolderTemplateEntry:
    return FolderTemplateEntry(
        name=name, folder_key=folder_key, order=order, parent_key=parent_key, description=description
    )


FOLDER_TEMPLATES: Mapping[Tuple[str, str], Tuple[FolderTemplateEntry, ...]] = MappingProxyType({
    ("borrower", "client"): (
        _entry("Background", "background", 1, "Parent folder for KYC and background documents"),
        _entry("KYC", "kyc", 2, "Know Your Customer documents", parent_key="background"),
        _entry("Background Docs", "background_docs", 3, "Background documentation", parent_key="background"),
        _entry("Miscellaneous", "miscellaneous", 4, "Unclassified or pending files"),
    ),
    ("borrower", "project"): (
        _entry("Background", "background", 1, "Project background documents"),
        _entry("Terms Comparison", "terms_comparison", 2, "Loan term comparisons and analysis"),
        _entry("Terms Request", "terms_request", 3, "Term requests and negotiations"),
        _entry("Credit Submission", "credit_submission", 4, "Credit application and submission documents"),
        _entry("Post-completion Documents", "post_completion", 5, "Documents after project completion"),
        _entry("Appraisals", "appraisals", 6, "Property valuations and appraisals"),
        _entry("Notes", "notes", 7, "Internal notes and memos"),
        _entry("Operational Model", "operational_model", 8, "Financial and operational models"),
    ),
    ("lender", "client"): (
        _entry("KYC", "kyc", 1, "Know Your Customer documents"),
        _entry("Agreements", "agreements", 2, "Master agreements and contracts"),
        _entry("Correspondence", "correspondence", 3, "General correspondence"),
        _entry("Miscellaneous", "miscellaneous", 4, "Unclassified or pending files"),
    ),
    ("lender", "project"): (
        _entry("Term Sheets", "term_sheets", 1, "Loan term sheets"),
        _entry("Facility Documents", "facility_documents", 2, "Facility agreements and documents"),
        _entry("Security Documents", "security_documents", 3, "Security and collateral documents"),
        _entry("Drawdown Requests", "drawdown_requests", 4, "Drawdown requests and approvals"),
        _entry("Monitoring Reports", "monitoring_reports", 5, "Progress and monitoring reports"),
        _entry("Correspondence", "correspondence", 6, "Project-specific correspondence"),
        _entry("Miscellaneous", "miscellaneous", 7, "Unclassified or pending files"),
    ),
})


def get_folder_template(client_type: str, level: str) -> List[FolderTemplateEntry]:
    """Template folders for a client type and level, in display order.

    Raises:
        ValueError: If the client type or level is unknown.
    """
    key = ((client_type or "").strip().lower(), (level or "").strip().lower())
    if key[0] not in CLIENT_TYPES:
        raise ValueError(f"Unknown client type {client_type!r}; expected one of {', '.join(CLIENT_TYPES)}")
    if key[1] not in LEVELS:
        raise ValueError(f"Unknown level {level!r}; expected one of {', '.join(LEVELS)}")
    return sorted(FOLDER_TEMPLATES[key], key=lambda entry: entry.order)


def plan_folder_bootstrap(
    owner_id: str,
    level: str,
    existing: Sequence[str],
    client_type: str = "borrower",
) -> FolderBootstrapPlan:
    """Plan the starter folders for a new client or project.

    Args:
        owner_id: Client or project identifier.
        level: "client" or "project".
        existing: Folder keys the owner already has.
        client_type: "borrower" or "lender".

    Returns:
        A plan with ``created=False`` and no folders when ``existing`` is
        non-empty, otherwise every template folder.

    Raises:
        ValueError: On a blank owner id or an unknown client type or level.
    """
    if not owner_id or not owner_id.strip():
        raise ValueError("owner_id must not be empty")

    template = get_folder_template(client_type, level)
    normalized_level = level.strip().lower()

    if existing:
        logger.debug(f"{normalized_level} {owner_id} already has {len(existing)} folders; skipping bootstrap")
        return FolderBootstrapPlan(created=False, folders_count=len(existing), folders=[])

    folders = [
        FolderRecord(
            owner_id=owner_id.strip(),
            level=normalized_level,
            folder_key=entry.folder_key,
            name=entry.name,
            parent_folder_key=entry.parent_key,
        )
        for entry in template
    ]
    logger.info(f"Planned {len(folders)} {normalized_level} folders for {owner_id}")
    return FolderBootstrapPlan(created=True, folders_count=len(folders), folders=folders)
