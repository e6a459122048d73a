"""Score a filename against outstanding checklist requirements.

Each requirement is scored by four heuristics in order of precedence. A later
heuristic can only raise the score, never lower it:

1. Requirement name in filename              -> 0.9
2. Acceptable document type in filename      -> 0.85
3. Related alias from the alias table        -> 0.8
4. Overlap of significant words (fallback)   -> 0.6
"""

import logging
from typing import List, Optional, Sequence, Tuple

from filing_engine.models.checklist import (
    ChecklistRequirement,
    EnrichedChecklistItem,
    FilenameMatchResult,
    MatchTier,
)
from filing_engine.services.patterns import CHECKLIST_PATTERN_ALIASES
from filing_engine.utils.normalizers import (
    collapse_whitespace,
    filename_tokens,
    normalize_filename,
    normalize_requirement_name,
)

logger = logging.getLogger(__name__)

NAME_SCORE = 0.9
DOCUMENT_TYPE_SCORE = 0.85
ALIAS_SCORE = 0.8
KEYWORD_SCORE = 0.6

MIN_WORD_LENGTH = 4


def _first_word(text: str) -> str:
    return text.split(" ")[0]


def _is_related(pattern_key: str, item_name: str, types: List[str]) -> bool:
    """Whether an alias-table entry concerns this requirement."""
    key_word = _first_word(pattern_key)
    for doc_type in types:
        if key_word in doc_type or _first_word(doc_type) in pattern_key:
            return True
    return key_word in item_name


def _word_matches(word: str, parts: List[str]) -> bool:
    for part in parts:
        if part == word:
            return True
        if word in part and len(word) >= MIN_WORD_LENGTH:
            return True
        if part in word and len(part) >= max(MIN_WORD_LENGTH, len(word) * 0.6):
            return True
    return False


def _score_requirement(
    item: ChecklistRequirement,
    normalized: str,
    tokens: List[str],
) -> Tuple[float, str, Optional[MatchTier]]:
    item_name = item.name.lower()
    types = [t.strip().lower() for t in item.matching_document_types if t and t.strip()]
    best_score = 0.0
    best_reason = ""
    tier: Optional[MatchTier] = None

    # 1. Requirement name
    name_pattern = normalize_requirement_name(item.name)
    if name_pattern.strip() and name_pattern in normalized:
        best_score, best_reason, tier = NAME_SCORE, "Filename contains requirement name", "name"

    # 2. Acceptable document types
    if best_score < NAME_SCORE:
        for doc_type in item.matching_document_types:
            if not doc_type or not doc_type.strip():
                continue
            if collapse_whitespace(doc_type.lower()) in normalized and best_score < DOCUMENT_TYPE_SCORE:
                best_score = DOCUMENT_TYPE_SCORE
                best_reason = f"Filename matches document type: {doc_type}"
                tier = "document_type"

    # 3. Alias table
    for pattern_key, aliases in CHECKLIST_PATTERN_ALIASES.items():
        if not _is_related(pattern_key, item_name, types):
            continue
        for alias in aliases:
            if (alias in normalized or alias in tokens) and best_score < ALIAS_SCORE:
                best_score = ALIAS_SCORE
                best_reason = f'Filename pattern "{alias}" matches requirement'
                tier = "alias"

    # 4. Significant word overlap
    if best_score < KEYWORD_SCORE:
        item_words = [w for w in item_name.split() if len(w) > 3]
        parts = [p for p in tokens if len(p) >= MIN_WORD_LENGTH]
        matching = [w for w in item_words if _word_matches(w, parts)]
        if len(matching) >= 2 or (matching and len(item_words) <= 2):
            best_score = KEYWORD_SCORE
            best_reason = f"Filename contains keywords: {', '.join(matching)}"
            tier = "keywords"

    return best_score, best_reason, tier


def match_checklist(
    file_name: str,
    items: Sequence[ChecklistRequirement],
) -> List[FilenameMatchResult]:
    """Score ``file_name`` against each requirement.

    Returns only requirements that scored above zero, highest score first.
    Equal scores keep the input order.
    """
    normalized = normalize_filename(file_name)
    tokens = filename_tokens(normalized)
    if not tokens:
        return []

    matches: List[FilenameMatchResult] = []
    for item in items:
        score, reason, tier = _score_requirement(item, normalized, tokens)
        if score > 0 and tier is not None:
            matches.append(
                FilenameMatchResult(requirement_id=item.id, score=score, reason=reason, tier=tier)
            )

    matches.sort(key=lambda m: m.score, reverse=True)
    if matches:
        logger.debug(f"{file_name!r}: best checklist match {matches[0].requirement_id} ({matches[0].score})")
    return matches


def enrich_checklist_items(
    items: Sequence[ChecklistRequirement],
    file_name: str,
) -> List[EnrichedChecklistItem]:
    """Pair every requirement with its filename match score and reason (or None)."""
    by_id = {m.requirement_id: m for m in match_checklist(file_name, items)}
    enriched = []
    for item in items:
        match = by_id.get(item.id)
        enriched.append(
            EnrichedChecklistItem(
                requirement=item,
                filename_match_score=match.score if match else None,
                filename_match_reason=match.reason if match else None,
            )
        )
    return enriched
