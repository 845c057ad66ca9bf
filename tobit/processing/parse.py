"""
Manuscript markup parser: XML edition files to `Document` objects.

The parser is total. Missing elements become empty strings, and markup that
does not parse at all yields an empty document rather than an exception.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional

from tobit.core.constants import INFO_FIELDS, SOURCE_DESC_FIELDS, WORD_FIELDS
from tobit.core.models import Document, Unit, Word

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else tag


def _strip_namespaces(root: ET.Element) -> None:
    for el in root.iter():
        el.tag = _local_name(el.tag)


def find_first(parent: Optional[ET.Element], tag: str) -> Optional[ET.Element]:
    """First element named `tag` at or below `parent`, in document order."""
    if parent is None:
        return None
    return next(parent.iter(tag), None)


def child_items(parent: Optional[ET.Element]) -> List[ET.Element]:
    """Direct `item` children only; nested items belong to other sections."""
    if parent is None:
        return []
    return [child for child in parent if child.tag == "item"]


def text_content(el: Optional[ET.Element]) -> str:
    """Concatenated text of an element and its descendants."""
    if el is None:
        return ""
    return "".join(el.itertext())


def field_text(parent: Optional[ET.Element], tag: str) -> str:
    return text_content(find_first(parent, tag))


def _read_fields(parent: Optional[ET.Element], mapping: Dict[str, str]) -> Dict[str, str]:
    return {field: field_text(parent, tag) for field, tag in mapping.items()}


def parse_word(item: ET.Element) -> Word:
    return Word(**_read_fields(item, WORD_FIELDS))


def parse_unit(item: ET.Element, position: int) -> Unit:
    """
    Build a unit from a content `item`.

    Args:
        item: The `item` element under `content`
        position: 1-based position, used when the item has no index
    """
    words = [parse_word(tag_item) for tag_item in child_items(find_first(item, "tags"))]
    return Unit(
        index=field_text(item, "index") or str(position),
        source_text=field_text(item, "text"),
        translation=field_text(item, "translation"),
        words=words,
    )


def parse_xml(markup_text: str) -> Optional[ET.Element]:
    """Parse markup into a namespace-free element tree, or None if malformed."""
    if not markup_text:
        return None
    try:
        root = ET.fromstring(markup_text.lstrip("\ufeff \t\r\n"))
    except (ET.ParseError, ValueError) as e:
        logger.warning("Malformed manuscript markup: %s", e)
        return None
    _strip_namespaces(root)
    return root


def parse_manuscript(markup_text: str, identifier: str) -> Document:
    """
    Parse one manuscript's XML into a `Document`.

    Metadata is read from `Info` (and its `SourceDesc`), units from the direct
    `item` children of `content`. Order is preserved exactly; nothing is
    sorted, filtered or deduplicated.

    Args:
        markup_text: The XML source
        identifier: Stable key for the document, usually the file name

    Returns:
        Document: Possibly empty, never None
    """
    root = parse_xml(markup_text)
    if root is None:
        return Document(identifier=identifier)

    info = find_first(root, "Info")
    metadata = _read_fields(info, INFO_FIELDS)
    metadata.update(_read_fields(find_first(info, "SourceDesc"), SOURCE_DESC_FIELDS))

    items = child_items(find_first(root, "content"))
    units = [parse_unit(item, position) for position, item in enumerate(items, start=1)]

    logger.debug(
        "Parsed %s: %d units, %d words",
        identifier,
        len(units),
        sum(len(unit.words) for unit in units),
    )
    return Document(identifier=identifier, units=units, **metadata)
