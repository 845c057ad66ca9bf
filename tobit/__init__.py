"""
Tobit: a multi-witness annotated corpus of the Old Georgian Book of Tobit.

This package parses manuscript editions, merges their annotation tables,
and provides concordance search and chapter navigation over the corpus.
"""

from tobit.core.models import AnnotationRow, Corpus, Document, ManuscriptHit, Occurrence, Unit, Word
from tobit.processing.annotations import reconcile
from tobit.processing.chapters import chapter_index, is_chapter_boundary
from tobit.processing.corpus import aggregate, load_corpus
from tobit.processing.parse import parse_manuscript
from tobit.processing.search import search

__version__ = "0.1.0"

__all__ = [
    # Models
    "AnnotationRow",
    "Corpus",
    "Document",
    "ManuscriptHit",
    "Occurrence",
    "Unit",
    "Word",
    # Pipeline
    "parse_manuscript",
    "reconcile",
    "aggregate",
    "load_corpus",
    "search",
    "is_chapter_boundary",
    "chapter_index",
]
