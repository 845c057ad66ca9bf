"""
Chapter headings.

Witnesses mark chapters inconsistently: some with a dedicated "chapter"
label, some with a roman numeral in the index field, some with the label
mixed into a short line of text. Each convention is a named rule; a unit is
a heading if any rule matches.
"""

from __future__ import annotations

import re
from typing import Callable, List, Tuple

from tobit.core.constants import CHAPTER_MARKER, MAX_MARKER_UNIT_WORDS, ROMAN_NUMERAL_PATTERN
from tobit.core.models import Document, Unit

_ROMAN_NUMERAL_RE = re.compile(ROMAN_NUMERAL_PATTERN, re.IGNORECASE)


def is_marker_text(unit: Unit) -> bool:
    """The unit's text is exactly the chapter label."""
    return unit.source_text == CHAPTER_MARKER


def is_roman_numeral_heading(unit: Unit) -> bool:
    """A roman-numeral index on a unit with no words."""
    return bool(_ROMAN_NUMERAL_RE.fullmatch(unit.index)) and not unit.words


def is_marker_in_short_text(unit: Unit) -> bool:
    """The chapter label appears in the text of a unit with at most two words."""
    return CHAPTER_MARKER in unit.source_text and len(unit.words) <= MAX_MARKER_UNIT_WORDS


CHAPTER_RULES: Tuple[Callable[[Unit], bool], ...] = (
    is_marker_text,
    is_roman_numeral_heading,
    is_marker_in_short_text,
)


def is_chapter_boundary(unit: Unit) -> bool:
    return any(rule(unit) for rule in CHAPTER_RULES)


def chapter_index(document: Document) -> List[str]:
    """Index values of the chapter headings, in document order."""
    return [unit.index for unit in document.units if is_chapter_boundary(unit)]
