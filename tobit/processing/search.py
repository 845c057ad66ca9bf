"""
Concordance search: every occurrence of a query with its verse context.

A plain linear scan over all words. Matching is a case-insensitive substring
test against each word's surface form; context is taken from the same verse
only.
"""

from __future__ import annotations

from typing import Iterable, List

from tobit.core.constants import CONTEXT_WINDOW
from tobit.core.models import Document, ManuscriptHit, Occurrence, Unit, Word


def _join(words: Iterable[Word]) -> str:
    return " ".join(word.surface_form for word in words)


def unit_occurrences(unit: Unit, needle: str, identifier: str, window: int = CONTEXT_WINDOW) -> List[Occurrence]:
    """
    Matches within one verse.

    Args:
        unit: Verse to scan
        needle: Lower-cased query
        identifier: Identifier of the containing document
        window: Maximum number of context words on each side
    """
    occurrences: List[Occurrence] = []
    words = unit.words
    for position, word in enumerate(words):
        if not word.surface_form or needle not in word.surface_form.lower():
            continue
        occurrences.append(
            Occurrence(
                word=word.surface_form,
                left_context=_join(words[max(0, position - window) : position]),
                right_context=_join(words[position + 1 : position + 1 + window]),
                unit_index=unit.index,
                identifier=identifier,
            )
        )
    return occurrences


def search_document(document: Document, query: str, window: int = CONTEXT_WINDOW) -> List[Occurrence]:
    if not query or not query.strip():
        return []
    needle = query.lower()
    occurrences: List[Occurrence] = []
    for unit in document.units:
        occurrences.extend(unit_occurrences(unit, needle, document.identifier, window))
    return occurrences


def search(corpus: Iterable[Document], query: str, window: int = CONTEXT_WINDOW) -> List[ManuscriptHit]:
    """
    Find every word containing `query` across the corpus.

    Args:
        corpus: Documents in corpus order
        query: Search term; empty or whitespace-only returns no hits
        window: Context words to keep on each side (never crossing a verse)

    Returns:
        List[ManuscriptHit]: One entry per document with at least one match,
        in corpus order
    """
    if not query or not query.strip():
        return []

    hits: List[ManuscriptHit] = []
    for document in corpus:
        occurrences = search_document(document, query, window)
        if occurrences:
            hits.append(ManuscriptHit(document=document, occurrences=occurrences))
    return hits
