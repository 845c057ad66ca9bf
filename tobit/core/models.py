"""
Core domain models for the manuscript corpus.

Defines typed structures for annotated words, verse units, manuscript
documents, annotation table rows, concordance hits, the corpus container, and
the ingestion configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, Field, computed_field


class Word(BaseModel):
    """A tokenized word with its linguistic annotation."""

    surface_form: str = Field(default="", frozen=True)
    lemma: str = ""
    grammar: str = ""
    english_gloss: str = ""
    greek_gloss: str = ""

    @property
    def has_annotation(self) -> bool:
        return bool(self.lemma or self.grammar or self.english_gloss or self.greek_gloss)


class Unit(BaseModel):
    """One verse (or heading) of a manuscript."""

    index: str
    source_text: str = ""
    translation: str = ""
    words: List[Word] = Field(default_factory=list)

    @property
    def display_text(self) -> str:
        """Tokenized words when present, otherwise the raw source text."""
        if self.words:
            return " ".join(word.surface_form for word in self.words)
        return self.source_text


class AnnotationNote(BaseModel):
    """A numbered commentary note attached to a manuscript."""

    count: int
    note: str = ""


class Document(BaseModel):
    """A single manuscript witness with its metadata and units."""

    identifier: str
    title: str = ""
    editor: str = ""
    contact: str = ""
    publisher: str = ""
    publication_place: str = ""
    publication_date: str = ""
    source_status: str = ""
    location: str = ""
    date_of_origin: str = ""
    notes_text: str = ""

    units: List[Unit] = Field(default_factory=list)
    annotation_notes: List[AnnotationNote] = Field(default_factory=list)
    reconciled: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.units

    def metadata_fields(self) -> List[Tuple[str, str]]:
        """
        Return the non-empty descriptive fields as (label, value) pairs.

        The order follows the manuscript description sidebar: title first,
        free-text notes last.
        """
        fields = [
            ("Title", self.title),
            ("Editor", self.editor),
            ("Contact", self.contact),
            ("Publisher", self.publisher),
            ("Place of publication", self.publication_place),
            ("Publication date", self.publication_date),
            ("Source", self.source_status),
            ("Location", self.location),
            ("Date", self.date_of_origin),
            ("Additional information", self.notes_text),
        ]
        return [(label, value) for label, value in fields if value]


class AnnotationRow(BaseModel):
    """One row of a manuscript's annotation table."""

    key: str
    lemma: str = ""
    grammar: str = ""
    english_gloss: str = ""
    greek_gloss: str = ""


class Occurrence(BaseModel):
    """A single concordance line."""

    word: str
    left_context: str = ""
    right_context: str = ""
    unit_index: str
    identifier: str


class ManuscriptHit(BaseModel):
    """All occurrences of a query within one manuscript."""

    document: Document
    occurrences: List[Occurrence] = Field(default_factory=list)

    @computed_field  # type: ignore[misc]
    @property
    def count(self) -> int:
        return len(self.occurrences)


@dataclass(frozen=True)
class Corpus:
    """The loaded manuscripts, in configured order."""

    documents: Tuple[Document, ...] = ()

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    def __len__(self) -> int:
        return len(self.documents)

    def get(self, key: str) -> Optional[Document]:
        """Look up a manuscript by identifier, then by display title."""
        for document in self.documents:
            if document.identifier == key:
                return document
        for document in self.documents:
            if document.title == key:
                return document
        return None


class ManuscriptSource(BaseModel):
    """Where to find one manuscript's markup and annotation table."""

    markup_source: str
    annotation_source: Optional[str] = None
    display_title: str = ""


class CorpusConfig(BaseModel):
    """Ingestion configuration: manuscripts in display order."""

    base: str = ""
    manuscripts: List[ManuscriptSource] = Field(default_factory=list)
    max_workers: int = Field(default=5, ge=1)
