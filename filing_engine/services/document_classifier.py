"""Layered document classifier and filing cascade.

Decides the canonical document type of an uploaded file using a cascade of
increasingly expensive methods:

1. Filename patterns (instant, first match wins)
2. Weighted content rules over the extracted summary and keywords
3. Gemini single-label call (optional fallback)
4. "Other Document" in the client's miscellaneous folder
"""

import logging
from typing import List, Optional, Sequence

from google import genai

from filing_engine.config import Settings, get_settings
from filing_engine.models.catalog import ContentDetectionRule, DocumentTypePattern
from filing_engine.models.checklist import ChecklistRequirement, FilenameMatchResult
from filing_engine.models.classification import (
    ClassificationDecision,
    ClassificationHint,
    FilingDecision,
)
from filing_engine.models.folders import FolderResolution
from filing_engine.services.checklist_matcher import match_checklist
from filing_engine.services.folder_resolver import NO_PROJECT_REASON, resolve_folder
from filing_engine.services.patterns import CONTENT_DETECTION_RULES, FILENAME_PATTERNS
from filing_engine.services.type_mapping import (
    DEFAULT_FOLDER,
    get_all_file_types,
    get_category_for_type,
    get_checklist_ids_for_type,
    get_folder_for_category,
    get_type_mapping,
)
from filing_engine.utils.normalizers import normalize_filename, normalize_keywords
from filing_engine.utils.retry import retry_with_backoff

logger = logging.getLogger(__name__)

FILENAME_CONFIDENCE = 0.85
GEMINI_CONFIDENCE = 0.75
FALLBACK_TYPE = "Other Document"
FALLBACK_CATEGORY = "General"

# Provided keywords count for more than summary hits.
KEYWORD_BOOST = 1.5


# ---------------------------------------------------------------------------
# Layer 1 - Filename patterns
# ---------------------------------------------------------------------------

def classify_filename(
    file_name: str,
    patterns: Sequence[DocumentTypePattern] = FILENAME_PATTERNS,
) -> Optional[ClassificationHint]:
    """Return a type hint from the first pattern whose keyword occurs in the filename.

    A pattern whose ``exclude_if`` substrings appear in the filename is skipped
    entirely and matching continues with the next pattern.
    """
    normalized = normalize_filename(file_name)
    if not normalized.strip():
        return None

    for pattern in patterns:
        for keyword in pattern.keywords:
            if keyword not in normalized:
                continue
            if any(exclude in normalized for exclude in pattern.exclude_if):
                break
            return ClassificationHint(
                file_type=pattern.file_type,
                category=pattern.category,
                folder=pattern.folder,
                level=pattern.level,
                confidence=FILENAME_CONFIDENCE,
                reason=f'Filename contains "{keyword}"',
            )

    return None


# ---------------------------------------------------------------------------
# Layer 2 - Weighted content rules
# ---------------------------------------------------------------------------

def _score_rule(rule: ContentDetectionRule, summary: str, keywords: List[str]) -> float:
    score = 0.0
    for rule_keyword in rule.keywords:
        if rule_keyword in summary:
            score += rule.weight
        if any(k == rule_keyword or k in rule_keyword or rule_keyword in k for k in keywords):
            score += rule.weight * KEYWORD_BOOST
    return score


def classify_content(
    summary: Optional[str],
    keywords: Optional[Sequence[str]],
    rules: Sequence[ContentDetectionRule] = CONTENT_DETECTION_RULES,
) -> Optional[ClassificationDecision]:
    """Score every rule against the summary and keywords and keep the best.

    Ties keep the earlier rule. Returns None when no rule scores above zero.
    Confidence is ``min(0.5 + score * 0.02, 0.95)``.
    """
    summary_lower = (summary or "").lower()
    keywords_lower = normalize_keywords(keywords)

    best_rule: Optional[ContentDetectionRule] = None
    best_score = 0.0
    for rule in rules:
        score = _score_rule(rule, summary_lower, keywords_lower)
        if score > best_score:
            best_score = score
            best_rule = rule

    if best_rule is None:
        return None

    category = get_category_for_type(best_rule.file_type)
    placement = get_folder_for_category(category)
    confidence = min(0.5 + best_score * 0.02, 0.95)

    logger.debug(
        f"Content rules picked {best_rule.file_type!r} (score={best_score}, confidence={confidence:.2f})"
    )

    return ClassificationDecision(
        file_type=best_rule.file_type,
        category=category,
        suggested_folder=placement["folder"],
        target_level=placement["level"],
        confidence=confidence,
        checklist_matches=get_checklist_ids_for_type(best_rule.file_type),
    )


# ---------------------------------------------------------------------------
# Layer 3 - Gemini fallback
# ---------------------------------------------------------------------------

def _build_gemini_prompt(file_name: str, summary: Optional[str], keywords: List[str]) -> str:
    type_list = "\n".join(f"- {t}" for t in get_all_file_types())
    sample = (summary or "")[:2000]
    return (
        "You are a document classifier for a commercial lending team. "
        "Reply with EXACTLY one document type from the list below and nothing else.\n\n"
        f"{type_list}\n\n"
        f"Filename: {file_name}\n"
        f"Keywords: {', '.join(keywords)}\n"
        f"---\n{sample}\n---"
    )


@retry_with_backoff(max_retries=3)
def _generate_label(gemini_client: genai.Client, model: str, prompt: str) -> str:
    from google.genai import types

    response = gemini_client.models.generate_content(
        model=model,
        contents=prompt,
        config=types.GenerateContentConfig(temperature=0.0),
    )
    return (response.text or "").strip()


def _classify_by_gemini(
    file_name: str,
    summary: Optional[str],
    keywords: List[str],
    gemini_client: genai.Client,
    model: str = "gemini-3-flash-preview",
) -> Optional[ClassificationHint]:
    """Ask Gemini for one canonical type. Unknown answers return None."""
    prompt = _build_gemini_prompt(file_name, summary, keywords)
    answer = _generate_label(gemini_client, model, prompt).strip(" .\"'")

    mapping = get_type_mapping(answer)
    if mapping is None:
        logger.warning(f"Gemini returned unknown document type {answer!r} for {file_name!r}")
        return None

    return ClassificationHint(
        file_type=mapping.file_type,
        category=mapping.category,
        folder=mapping.folder,
        level=mapping.level,
        confidence=GEMINI_CONFIDENCE,
        reason=f"Gemini answer: {mapping.file_type}",
    )


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------

def _place(
    file_type: str,
    category: str,
    folder: Optional[str],
    level: Optional[str],
    has_project_context: bool,
) -> FolderResolution:
    """Run the placement policy for a classified type.

    Catalogued types go through ``resolve_folder``; ``folder=None`` means the
    caller has no folder of its own. Custom types, and custom overrides of a
    catalogued type, keep the folder their pattern names. Their level is the
    pattern level or, failing that, the category default level, still subject
    to the no-project demotion.
    """
    mapping = get_type_mapping(file_type)
    if mapping is not None and folder in (None, mapping.folder):
        return resolve_folder(file_type, has_project_context)

    folder = folder or DEFAULT_FOLDER
    level = level or get_folder_for_category(category)["level"]
    if level == "project" and not has_project_context:
        return FolderResolution(level="client", folder_type=DEFAULT_FOLDER, reason=NO_PROJECT_REASON)
    return FolderResolution(level=level, folder_type=folder, reason=f"Pattern folder: {folder}")


def file_document(
    file_name: str,
    summary: Optional[str] = None,
    keywords: Optional[Sequence[str]] = None,
    has_project_context: bool = True,
    checklist_items: Optional[Sequence[ChecklistRequirement]] = None,
    gemini_client: Optional[genai.Client] = None,
    settings: Optional[Settings] = None,
    patterns: Sequence[DocumentTypePattern] = FILENAME_PATTERNS,
) -> FilingDecision:
    """Classify a document and decide where it is filed.

    Args:
        file_name: Original filename of the upload.
        summary: Extracted text summary (needed for layers 2-3).
        keywords: Keywords extracted alongside the summary.
        has_project_context: Whether a project is available to file into.
        checklist_items: Outstanding requirements to score the filename against.
        gemini_client: Gemini client (layer 3 only, when enabled in settings).
        settings: Settings override; defaults to ``get_settings()``.
        patterns: Filename pattern catalog, e.g. merged with custom types.

    Returns:
        FilingDecision with type, placement, confidence and checklist matches.
    """
    settings = settings or get_settings()
    keyword_list = normalize_keywords(keywords)

    file_type = FALLBACK_TYPE
    category = FALLBACK_CATEGORY
    folder: Optional[str] = DEFAULT_FOLDER
    level: Optional[str] = None
    confidence = 0.0
    method = "fallback"
    reason: Optional[str] = "No classification layer matched"
    checklist_ids: List[str] = []

    # Layer 1: filename
    hint = classify_filename(file_name, patterns)
    if hint is not None:
        file_type, category, folder, level = hint.file_type, hint.category, hint.folder, hint.level
        confidence, method, reason = hint.confidence, "filename", hint.reason
        checklist_ids = get_checklist_ids_for_type(file_type)
    else:
        # Layer 2: content rules
        decision = None
        if summary or keyword_list:
            decision = classify_content(summary, keyword_list)
        if decision is not None:
            file_type, category, folder = decision.file_type, decision.category, None
            confidence, method = decision.confidence, "content_keywords"
            reason = f"Content rules matched {decision.file_type}"
            checklist_ids = list(decision.checklist_matches)
        elif gemini_client is not None and settings.enable_llm_fallback:
            # Layer 3: Gemini
            try:
                gemini_hint = _classify_by_gemini(
                    file_name, summary, keyword_list, gemini_client, settings.model_name
                )
            except Exception as e:
                logger.warning(f"Gemini classification failed for {file_name!r}: {e}")
                gemini_hint = None
            if gemini_hint is not None:
                file_type, category, folder = gemini_hint.file_type, gemini_hint.category, gemini_hint.folder
                level = gemini_hint.level
                confidence, method, reason = gemini_hint.confidence, "gemini", gemini_hint.reason
                checklist_ids = get_checklist_ids_for_type(file_type)

    if method == "fallback":
        logger.warning(f"No classification layer matched {file_name!r}; filing as {FALLBACK_TYPE}")

    placement = _place(file_type, category, folder, level, has_project_context)

    filename_matches: List[FilenameMatchResult] = []
    if checklist_items:
        filename_matches = match_checklist(file_name, checklist_items)
        for match in filename_matches:
            if match.score >= settings.checklist_match_threshold and match.requirement_id not in checklist_ids:
                checklist_ids.append(match.requirement_id)

    demoted = placement.reason == NO_PROJECT_REASON
    needs_review = confidence < settings.review_confidence_threshold or demoted

    logger.debug(
        f"Filed {file_name!r} as {file_type!r} via {method} -> "
        f"{placement.level}/{placement.folder_type} (review={needs_review})"
    )

    return FilingDecision(
        file_type=file_type,
        category=category,
        suggested_folder=placement.folder_type,
        target_level=placement.level,
        confidence=confidence,
        method=method,
        placement_reason=placement.reason,
        checklist_matches=checklist_ids,
        filename_matches=filename_matches,
        needs_review=needs_review,
        reason=reason,
    )
