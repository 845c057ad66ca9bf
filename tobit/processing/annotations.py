"""
Annotation tables: loading CSV rows and reconciling them into parsed words.

Rows are matched to words by surface form, first come first served, across
the whole document. Two occurrences of the same form in different verses
draw successive rows from one shared queue.
"""

from __future__ import annotations

import csv
import io
import logging
from collections import deque
from typing import Deque, Dict, Iterable, List, Optional

from tobit.core.constants import ANNOTATION_COLUMNS
from tobit.core.models import AnnotationRow, Document, Word

logger = logging.getLogger(__name__)

LINGUISTIC_FIELDS = ("lemma", "grammar", "english_gloss", "greek_gloss")


def read_annotation_table(text: str) -> List[AnnotationRow]:
    """
    Parse an annotation table with a header row.

    Columns are `O` (surface form), `Lemma`, `Gram`, `Eng` and `Grc`. Blank
    lines and rows without a surface form are skipped; missing cells are
    read as empty strings.
    """
    rows: List[AnnotationRow] = []
    if not text:
        return rows

    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    for record in reader:
        values = {field: (record.get(column) or "") for field, column in ANNOTATION_COLUMNS.items()}
        values["key"] = values["key"].strip()
        if not values["key"]:
            continue
        rows.append(AnnotationRow(**values))
    return rows


class AnnotationQueue:
    """Rows grouped by surface form, each group consumed front to back."""

    def __init__(self, rows: Iterable[AnnotationRow]) -> None:
        self._queues: Dict[str, Deque[AnnotationRow]] = {}
        for row in rows:
            if row.key:
                self._queues.setdefault(row.key, deque()).append(row)

    def pop(self, key: str) -> Optional[AnnotationRow]:
        """Remove and return the next row for `key`, or None if exhausted."""
        queue = self._queues.get(key)
        if not queue:
            return None
        return queue.popleft()

    def remaining(self, key: Optional[str] = None) -> int:
        if key is not None:
            return len(self._queues.get(key, ()))
        return sum(len(queue) for queue in self._queues.values())

    def __bool__(self) -> bool:
        return bool(self._queues)


def apply_row(word: Word, row: AnnotationRow) -> Word:
    """Copy the row's non-empty fields onto the word; empty cells never erase."""
    for field in LINGUISTIC_FIELDS:
        value = getattr(row, field)
        if value:
            setattr(word, field, value)
    return word


def reconcile(document: Document, rows: Optional[Iterable[AnnotationRow]]) -> Document:
    """
    Merge an annotation table into a parsed document, in place.

    Words are visited in reading order (verse by verse, word by word). Each
    word takes the next unused row for its surface form, if any. A document
    can be reconciled once; later calls leave it unchanged.

    Args:
        document: Freshly parsed document
        rows: Annotation rows in table order; None or empty is a no-op

    Returns:
        Document: The same document object
    """
    queue = AnnotationQueue(rows or ())
    if not queue:
        return document
    if document.reconciled:
        logger.warning("%s is already reconciled; ignoring annotation table", document.identifier)
        return document

    annotated = 0
    for unit in document.units:
        for word in unit.words:
            row = queue.pop(word.surface_form)
            if row is not None:
                apply_row(word, row)
                annotated += 1

    document.reconciled = True
    logger.debug(
        "Reconciled %s: %d words annotated, %d rows unused",
        document.identifier,
        annotated,
        queue.remaining(),
    )
    return document
