"""
Core Constants Module.

This module defines constants and configuration values used across the application.
"""

# Transport configuration
DEFAULT_TIMEOUT = 10  # seconds
DEFAULT_ENCODING = "utf-8"
MANUSCRIPTS_ENV_VAR = "TOBIT_MANUSCRIPTS"

# Chapter headings are labelled with the Georgian word for "chapter"
CHAPTER_MARKER = "თავი"
ROMAN_NUMERAL_PATTERN = r"^M{0,4}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$"
MAX_MARKER_UNIT_WORDS = 2

# Concordance
CONTEXT_WINDOW = 3

# Annotation table columns
ANNOTATION_COLUMNS = {
    "key": "O",
    "lemma": "Lemma",
    "grammar": "Gram",
    "english_gloss": "Eng",
    "greek_gloss": "Grc",
}

# Markup element names for word annotations
WORD_FIELDS = {
    "surface_form": "ogeo",
    "lemma": "lemma",
    "grammar": "gram",
    "english_gloss": "eng",
    "greek_gloss": "grc",
}

# Markup element names for manuscript metadata
INFO_FIELDS = {
    "title": "title",
    "editor": "editor",
    "contact": "email",
    "publisher": "publisher",
    "publication_place": "pubPlace",
    "publication_date": "publish_date",
}
SOURCE_DESC_FIELDS = {
    "source_status": "sourceStatus",
    "location": "location",
    "date_of_origin": "date",
    "notes_text": "additionalDetail",
}

# Default witnesses, in display order
DEFAULT_MANUSCRIPTS = [
    {"markup_source": "O.xml", "annotation_source": "modified_anot_O.csv", "display_title": "ოშკის ბიბლია (Ath.1)"},
    {"markup_source": "I.xml", "annotation_source": "modified_anot_I.csv", "display_title": "A-570"},
    {"markup_source": "D.xml", "annotation_source": "modified_anot_D.csv", "display_title": "H-885"},
    {"markup_source": "M.xml", "annotation_source": "modified_anot_M.csv", "display_title": "m7125"},
    {"markup_source": "F.xml", "annotation_source": "modified_anot_F.csv", "display_title": "A-646"},
]

# Error messages
ERROR_SOURCE_UNAVAILABLE = "Could not read manuscript source: {source}"
ERROR_INVALID_CONFIG = "Invalid corpus configuration: {path}"
