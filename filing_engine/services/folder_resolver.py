"""Folder-resolution policy: free-text category -> (level, folder key).

Project-level placements are demoted to the client's miscellaneous folder
when the caller has no project to file into.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from filing_engine.models.folders import FolderResolution
from filing_engine.services.type_mapping import (
    DEFAULT_FOLDER,
    DEFAULT_LEVEL,
    find_category_default,
    get_type_mapping,
)
from filing_engine.utils.normalizers import normalize_label

logger = logging.getLogger(__name__)

NO_PROJECT_REASON = "No project selected for project-level document"
NO_MAPPING_REASON = "No category mapping found"

# Free-text labels and the folder they file to. Order matters for partial matches.
CATEGORY_TO_FOLDER_MAP: Mapping[str, Tuple[str, str]] = MappingProxyType({
    # Project level
    "appraisal": ("project", "appraisals"),
    "appraisals": ("project", "appraisals"),
    "valuation": ("project", "appraisals"),
    "red book valuation": ("project", "appraisals"),
    "rics valuation": ("project", "appraisals"),

    "term sheet": ("project", "terms_comparison"),
    "termsheet": ("project", "terms_comparison"),
    "loan terms": ("project", "terms_comparison"),
    "terms comparison": ("project", "terms_comparison"),

    "term request": ("project", "terms_request"),
    "terms request": ("project", "terms_request"),
    "loan request": ("project", "terms_request"),

    "credit memo": ("project", "credit_submission"),
    "credit submission": ("project", "credit_submission"),
    "credit application": ("project", "credit_submission"),

    "completion certificate": ("project", "post_completion"),
    "post completion": ("project", "post_completion"),
    "closing documents": ("project", "post_completion"),
    "settlement": ("project", "post_completion"),

    "financial model": ("project", "operational_model"),
    "operating model": ("project", "operational_model"),
    "operating statement": ("project", "operational_model"),
    "cash flow": ("project", "operational_model"),
    "pro forma": ("project", "operational_model"),

    "note": ("project", "notes"),
    "notes": ("project", "notes"),
    "memo": ("project", "notes"),
    "internal memo": ("project", "notes"),

    "background": ("project", "background"),
    "project background": ("project", "background"),

    # Client level
    "kyc": ("client", "kyc"),
    "kyc document": ("client", "kyc"),
    "identity verification": ("client", "kyc"),
    "passport": ("client", "kyc"),
    "id document": ("client", "kyc"),

    "client background": ("client", "background_docs"),
    "company information": ("client", "background_docs"),
    "corporate documents": ("client", "background_docs"),
})


def _lookup(label: str) -> Optional[Tuple[str, str, str]]:
    """Return (level, folder, reason) for a normalized label, or None."""
    if label in CATEGORY_TO_FOLDER_MAP:
        level, folder = CATEGORY_TO_FOLDER_MAP[label]
        return level, folder, "Direct category match"

    mapping = get_type_mapping(label)
    if mapping is not None:
        return mapping.level, mapping.folder, f"Document type match: {mapping.file_type}"

    category_default = find_category_default(label)
    if category_default is not None:
        name, info = category_default
        return info["level"], info["folder"], f"Category match: {name}"

    for key, (level, folder) in CATEGORY_TO_FOLDER_MAP.items():
        if key in label or label in key:
            return level, folder, f"Partial match: {key}"

    return None


def resolve_folder(category: Optional[str], has_project_context: bool) -> FolderResolution:
    """Decide where a document with ``category`` is filed.

    Args:
        category: Free-text category or canonical document type.
        has_project_context: Whether a project is available to file into.

    Returns:
        FolderResolution with level, folder key and the rule that fired.
    """
    label = normalize_label(category)
    found = _lookup(label) if label else None

    if found is None:
        logger.debug(f"No folder mapping for category {category!r}")
        return FolderResolution(level=DEFAULT_LEVEL, folder_type=DEFAULT_FOLDER, reason=NO_MAPPING_REASON)

    level, folder, reason = found
    if level == "project" and not has_project_context:
        return FolderResolution(level="client", folder_type=DEFAULT_FOLDER, reason=NO_PROJECT_REASON)

    return FolderResolution(level=level, folder_type=folder, reason=reason)
