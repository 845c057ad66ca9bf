"""
Unit tests for the manuscript markup parser.
"""

from tobit.processing.parse import parse_manuscript


class TestMetadata:
    """Test extraction of the Info block."""

    def test_reads_all_metadata_fields(self, sample_xml):
        doc = parse_manuscript(sample_xml, "O.xml")

        assert doc.identifier == "O.xml"
        assert doc.title == "ოშკის ბიბლია"
        assert doc.editor == "N. Editor"
        assert doc.contact == "editor@example.org"
        assert doc.publisher == "Tbilisi University"
        assert doc.publication_place == "Tbilisi"
        assert doc.publication_date == "2021"
        assert doc.source_status == "manuscript"
        assert doc.location == "Mount Athos"
        assert doc.date_of_origin == "978"
        assert doc.notes_text == "Copied at Oshki."
        assert doc.annotation_notes == []

    def test_missing_fields_do_not_affect_others(self):
        xml = "<document><Info><publisher>P</publisher><SourceDesc><date>11th c.</date></SourceDesc></Info></document>"

        doc = parse_manuscript(xml, "X.xml")

        assert doc.publisher == "P"
        assert doc.date_of_origin == "11th c."
        assert doc.title == ""
        assert doc.location == ""

    def test_source_desc_without_info_fields(self):
        xml = "<document><content><item><index>1</index></item></content></document>"

        doc = parse_manuscript(xml, "X.xml")

        assert doc.metadata_fields() == []
        assert len(doc.units) == 1


class TestUnits:
    """Test content units and their words."""

    def test_units_in_document_order(self, sample_xml):
        doc = parse_manuscript(sample_xml, "O.xml")

        assert [u.index for u in doc.units] == ["I", "1", "3"]

    def test_missing_index_falls_back_to_position(self, sample_xml):
        doc = parse_manuscript(sample_xml, "O.xml")

        assert doc.units[2].index == "3"
        assert doc.units[2].translation == ""

    def test_unit_text_and_translation(self, sample_xml):
        unit = parse_manuscript(sample_xml, "O.xml").units[1]

        assert unit.source_text == "წიგნი სიტყუათა ტობითისი"
        assert unit.translation == "The book of the words of Tobit"

    def test_words_and_their_fields(self, sample_xml):
        words = parse_manuscript(sample_xml, "O.xml").units[1].words

        assert [w.surface_form for w in words] == ["წიგნი", "სიტყუათა", "ტობითისი"]
        assert words[0].lemma == "წიგნი"
        assert words[0].grammar == "N.Nom.Sg"
        assert words[0].english_gloss == "book"
        assert words[0].greek_gloss == "βίβλος"
        assert words[1].lemma == ""
        assert words[2].english_gloss == "of Tobit"
        assert words[2].greek_gloss == ""

    def test_heading_unit_has_no_words(self, sample_xml):
        unit = parse_manuscript(sample_xml, "O.xml").units[0]

        assert unit.words == []
        assert unit.source_text == "თავი"

    def test_nested_items_are_not_units(self, sample_xml):
        doc = parse_manuscript(sample_xml, "O.xml")

        # Five word items are nested below content, but only three units sit directly under it
        assert len(doc.units) == 3

    def test_duplicate_words_are_kept(self):
        xml = (
            "<document><content><item><index>1</index><tags>"
            "<item><ogeo>და</ogeo></item><item><ogeo>და</ogeo></item>"
            "</tags></item></content></document>"
        )

        words = parse_manuscript(xml, "X.xml").units[0].words

        assert [w.surface_form for w in words] == ["და", "და"]

    def test_namespaced_markup(self):
        xml = (
            '<document xmlns="urn:example:tobit"><Info><title>T</title></Info>'
            "<content><item><index>1</index><tags><item><ogeo>ძე</ogeo></item></tags></item></content></document>"
        )

        doc = parse_manuscript(xml, "X.xml")

        assert doc.title == "T"
        assert doc.units[0].words[0].surface_form == "ძე"


class TestDegradedInput:
    """Malformed or empty markup yields an empty document, never an error."""

    def test_zero_units(self):
        doc = parse_manuscript("<document><Info><title>T</title></Info><content/></document>", "X.xml")

        assert doc.units == []
        assert doc.is_empty
        assert doc.title == "T"

    def test_no_content_block(self):
        doc = parse_manuscript("<document/>", "X.xml")

        assert doc.units == []

    def test_malformed_markup(self):
        doc = parse_manuscript("<document><content><item>", "X.xml")

        assert doc.identifier == "X.xml"
        assert doc.units == []
        assert doc.title == ""

    def test_empty_string(self):
        doc = parse_manuscript("", "X.xml")

        assert doc.is_empty

    def test_byte_order_mark_is_ignored(self):
        doc = parse_manuscript("\ufeff<document><Info><title>T</title></Info></document>", "X.xml")

        assert doc.title == "T"
