"""Normalize filenames, labels and keyword lists for rule matching."""

import re
from typing import Iterable, List, Optional

_SEPARATORS = re.compile(r"[_\-.]")
_WHITESPACE = re.compile(r"\s+")
_PARENS = re.compile(r"[()]")


def normalize_filename(file_name: Optional[str]) -> str:
    """Lowercase and turn '_', '-' and '.' into spaces. None becomes ''."""
    if not file_name:
        return ""
    return _SEPARATORS.sub(" ", file_name.lower())


def filename_tokens(normalized: str) -> List[str]:
    """Split a normalized filename on whitespace, dropping empty parts."""
    return normalized.split()


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text)


def normalize_requirement_name(name: str) -> str:
    """Lowercase, collapse whitespace and strip parentheses: 'Bank Statements (3 months)' -> 'bank statements 3 months'."""
    return _PARENS.sub("", collapse_whitespace(name.lower()))


def normalize_label(label: Optional[str]) -> str:
    """Trim and lowercase a free-text category label."""
    if not label:
        return ""
    return label.strip().lower()


def normalize_keywords(keywords: Optional[Iterable[str]]) -> List[str]:
    """Lowercase keywords and drop blanks. Order is preserved."""
    if not keywords:
        return []
    return [k.lower() for k in keywords if k and k.strip()]


def dedupe_keywords(keywords: Iterable[str]) -> List[str]:
    """Lowercase, trim, drop empties and keep first-seen order."""
    seen = set()
    result = []
    for keyword in keywords:
        cleaned = (keyword or "").strip().lower()
        if cleaned and cleaned not in seen:
            seen.add(cleaned)
            result.append(cleaned)
    return result
