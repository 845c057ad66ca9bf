"""
Corpus assembly: ingest each configured manuscript and keep the successes.

Manuscripts are loaded concurrently; a failure in one never affects the
others, and the corpus keeps the configured order regardless of which load
finishes first.
"""

from __future__ import annotations

import csv
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import PurePosixPath
from typing import List, Optional, Sequence, Tuple, Union

from tqdm import tqdm

from tobit.core.errors import SourceFetchError
from tobit.core.models import Corpus, CorpusConfig, Document, ManuscriptSource
from tobit.core.utils import read_source
from tobit.processing.annotations import read_annotation_table, reconcile
from tobit.processing.parse import parse_manuscript

logger = logging.getLogger(__name__)

LoadResult = Tuple[ManuscriptSource, Union[Document, BaseException, None]]


def source_identifier(source: ManuscriptSource) -> str:
    """The markup file name, used as the document identifier."""
    return PurePosixPath(source.markup_source.replace("\\", "/")).name or source.markup_source


def ingest_manuscript(source: ManuscriptSource, base: str = "") -> Document:
    """
    Read, parse and annotate one manuscript.

    A missing, unreadable or malformed annotation table is not an error: the
    document keeps the annotations found in its markup.

    Raises:
        SourceFetchError: If the markup itself cannot be read
    """
    markup = read_source(source.markup_source, base)
    document = parse_manuscript(markup, source_identifier(source))
    if source.display_title:
        document.title = source.display_title

    if source.annotation_source:
        try:
            rows = read_annotation_table(read_source(source.annotation_source, base))
        except (SourceFetchError, csv.Error) as e:
            logger.info("No annotation table for %s, using markup annotations only: %s", document.identifier, e)
        else:
            reconcile(document, rows)
    return document


def aggregate(load_results: Sequence[LoadResult]) -> Corpus:
    """
    Build a corpus from per-manuscript load outcomes.

    Failed loads (an exception or None in place of a document) are dropped;
    the survivors keep their relative order.
    """
    documents: List[Document] = []
    for source, outcome in load_results:
        if isinstance(outcome, Document):
            documents.append(outcome)
        else:
            logger.warning("Dropping manuscript %s: %s", source.markup_source, outcome or "not loaded")
    return Corpus(documents=tuple(documents))


def _ingest_safely(source: ManuscriptSource, base: str) -> Union[Document, Exception]:
    try:
        return ingest_manuscript(source, base)
    except Exception as e:  # isolate each manuscript
        logger.error("Error loading %s: %s", source.markup_source, e)
        return e


def load_corpus(config: CorpusConfig, progress: bool = False, max_workers: Optional[int] = None) -> Corpus:
    """
    Ingest every configured manuscript concurrently and aggregate the results.

    Args:
        config: Manuscripts in display order, plus their base location
        progress: Show a progress bar while loading
        max_workers: Thread pool size; defaults to the configured value

    Returns:
        Corpus: Only the manuscripts that loaded, in configured order
    """
    sources = list(config.manuscripts)
    if not sources:
        return Corpus()

    workers = max_workers or config.max_workers
    with ThreadPoolExecutor(max_workers=min(workers, len(sources))) as pool:
        futures = [pool.submit(_ingest_safely, source, config.base) for source in sources]
        outcomes = [
            future.result()
            for future in tqdm(futures, total=len(futures), desc="Loading manuscripts", disable=not progress)
        ]
    return aggregate(list(zip(sources, outcomes)))
