"""Build filename patterns from user-defined document types.

Custom definitions extend or override the built-in catalog. The merged list
is passed to ``classify_filename(patterns=...)``; nothing is cached here.
"""

import logging
from typing import Iterable, List, Sequence

from filing_engine.models.catalog import DocumentTypePattern, FileTypeDefinition
from filing_engine.services.patterns import FILENAME_PATTERNS
from filing_engine.services.type_mapping import get_folder_for_category
from filing_engine.utils.normalizers import dedupe_keywords

logger = logging.getLogger(__name__)


def pattern_from_definition(definition: FileTypeDefinition) -> DocumentTypePattern:
    """Convert one definition. Raises ValueError when it yields no keywords."""
    keywords = dedupe_keywords(
        list(definition.keywords)
        + list(definition.filename_patterns)
        + [learned.keyword for learned in definition.learned_keywords]
    )
    if not keywords:
        raise ValueError(f"File type {definition.file_type!r} has no keywords")

    placement = get_folder_for_category(definition.category)
    return DocumentTypePattern(
        keywords=tuple(keywords),
        file_type=definition.file_type,
        category=definition.category,
        folder=definition.target_folder_key or placement["folder"],
        level=definition.target_level or placement["level"],
        exclude_if=tuple(dedupe_keywords(definition.exclude_patterns)),
    )


def generate_patterns_from_definitions(
    definitions: Iterable[FileTypeDefinition],
) -> List[DocumentTypePattern]:
    """Patterns for every active definition that has at least one keyword."""
    patterns = []
    for definition in definitions:
        if not definition.is_active:
            continue
        try:
            patterns.append(pattern_from_definition(definition))
        except ValueError as e:
            logger.debug(f"Skipping definition: {e}")
    return patterns


def merge_patterns_with_hardcoded(
    custom: Sequence[DocumentTypePattern],
    builtin: Sequence[DocumentTypePattern] = FILENAME_PATTERNS,
) -> List[DocumentTypePattern]:
    """Custom patterns first, then built-in patterns whose type is not overridden."""
    overridden = {p.file_type.lower() for p in custom}
    fallback = [p for p in builtin if p.file_type.lower() not in overridden]
    return list(custom) + fallback


def build_pattern_catalog(definitions: Iterable[FileTypeDefinition]) -> List[DocumentTypePattern]:
    """Merged catalog for a set of custom definitions."""
    return merge_patterns_with_hardcoded(generate_patterns_from_definitions(definitions))
