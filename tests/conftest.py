"""
Pytest configuration and shared manuscript fixtures.

Ensures the project root is on sys.path so that `import tobit` works
regardless of how pytest is invoked (e.g., `pytest` or `pytest tests/`).
"""

import os
import sys
from typing import List

import pytest


def _ensure_project_root_on_sys_path(sys_path: List[str]) -> None:
    """
    Add the project root directory to sys.path if it is not already present.

    :param sys_path: The current Python sys.path list.
    :return: None
    """
    tests_dir = os.path.dirname(__file__)
    project_root = os.path.abspath(os.path.join(tests_dir, os.pardir))
    if project_root not in sys_path:
        sys_path.insert(0, project_root)


_ensure_project_root_on_sys_path(sys.path)

from tobit.core.models import Document, Unit, Word  # noqa: E402


SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<document>
  <Info>
    <title>ოშკის ბიბლია</title>
    <editor>N. Editor</editor>
    <email>editor@example.org</email>
    <publisher>Tbilisi University</publisher>
    <pubPlace>Tbilisi</pubPlace>
    <publish_date>2021</publish_date>
    <SourceDesc>
      <sourceStatus>manuscript</sourceStatus>
      <location>Mount Athos</location>
      <date>978</date>
      <additionalDetail>Copied at Oshki.</additionalDetail>
    </SourceDesc>
  </Info>
  <content>
    <item>
      <index>I</index>
      <text>თავი</text>
    </item>
    <item>
      <index>1</index>
      <text>წიგნი სიტყუათა ტობითისი</text>
      <translation>The book of the words of Tobit</translation>
      <tags>
        <item>
          <ogeo>წიგნი</ogeo>
          <lemma>წიგნი</lemma>
          <gram>N.Nom.Sg</gram>
          <eng>book</eng>
          <grc>βίβλος</grc>
        </item>
        <item>
          <ogeo>სიტყუათა</ogeo>
        </item>
        <item>
          <ogeo>ტობითისი</ogeo>
          <eng>of Tobit</eng>
        </item>
      </tags>
    </item>
    <item>
      <text>ძე ტობიელისი</text>
      <tags>
        <item><ogeo>ძე</ogeo></item>
        <item><ogeo>ტობიელისი</ogeo></item>
      </tags>
    </item>
  </content>
</document>
"""

SAMPLE_CSV = """O,Lemma,Gram,Eng,Grc
სიტყუათა,სიტყუაჲ,N.Gen.Pl,of the words,λόγων
ძე,ძე,N.Nom.Sg,son,υἱός
ტობითისი,,,,Τωβιθ
"""


def make_unit(index: str, *forms: str, source_text: str = "") -> Unit:
    """Helper to build a unit from bare surface forms."""
    return Unit(index=index, source_text=source_text, words=[Word(surface_form=f) for f in forms])


@pytest.fixture
def sample_xml() -> str:
    return SAMPLE_XML


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def two_unit_document() -> Document:
    """Verse 1 is `a b`, verse 2 is `b c`."""
    return Document(
        identifier="T.xml",
        title="Test witness",
        units=[make_unit("1", "a", "b"), make_unit("2", "b", "c")],
    )


@pytest.fixture
def manuscript_dir(tmp_path):
    """A directory holding two witnesses, one of them without a table."""
    (tmp_path / "O.xml").write_text(SAMPLE_XML, encoding="utf-8")
    (tmp_path / "modified_anot_O.csv").write_text(SAMPLE_CSV, encoding="utf-8")
    (tmp_path / "I.xml").write_text(
        "<document><Info><title>A-570</title></Info><content>"
        "<item><index>1</index><tags><item><ogeo>ძე</ogeo></item><item><ogeo>წიგნი</ogeo></item></tags></item>"
        "</content></document>",
        encoding="utf-8",
    )
    return tmp_path
