"""
Plain-text rendering of manuscripts and concordances using Jinja2 templates.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from tobit.core.constants import CHAPTER_MARKER
from tobit.core.models import Document, ManuscriptHit
from tobit.processing.chapters import chapter_index, is_chapter_boundary

CONTEXT_COLUMN_WIDTH = 40


def _rjust(value: str, width: int) -> str:
    return (value or "").rjust(width)


def _env(template_dir: Optional[str] = None) -> Environment:
    dir_path = Path(template_dir) if template_dir else Path(__file__).parent / "templates"
    env = Environment(
        loader=FileSystemLoader(str(dir_path)),
        autoescape=select_autoescape([]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["rjust"] = _rjust
    env.globals["is_chapter"] = is_chapter_boundary
    env.globals["marker"] = CHAPTER_MARKER
    return env


def render_manuscript(
    document: Document,
    glosses: bool = False,
    template_name: str = "manuscript.txt.j2",
    template_dir: Optional[str] = None,
) -> str:
    """Metadata header, chapter list, then each verse with its translation."""
    template = _env(template_dir).get_template(template_name)
    return template.render(doc=document, chapters=chapter_index(document), glosses=glosses)


def render_concordance(
    hits: List[ManuscriptHit],
    query: str,
    width: int = CONTEXT_COLUMN_WIDTH,
    template_name: str = "concordance.txt.j2",
    template_dir: Optional[str] = None,
) -> str:
    template = _env(template_dir).get_template(template_name)
    return template.render(hits=hits, query=query, width=width)
