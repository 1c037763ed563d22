"""Unit tests for core/frontmatter.py"""

import pytest

from folio.core.frontmatter import dump_frontmatter, parse_attributes, parse_frontmatter, parse_scalar


SAMPLE = """\
---
title: "A, B: Test"
year: 2021
tags:
  - alpha
  - beta
featured: true
---
Body text here."""


# --- parse_frontmatter ---

def test_parse_sample_document():
    """Quoted, numeric, list and boolean values decode to their types; body follows the block."""
    attributes, body = parse_frontmatter(SAMPLE)
    assert attributes == {"title": "A, B: Test", "year": 2021, "tags": ["alpha", "beta"], "featured": True}
    assert body == "Body text here."


@pytest.mark.parametrize("text", [
    "",
    "# Just markdown\n\nBody.",
    "title: no delimiter\n---\n",
    "--- not a delimiter\nkey: value\n---\n",
    "----\nkey: value\n----\n",
])
def test_no_leading_delimiter_returns_text_unchanged(text):
    """Without an exact '---' first line the whole input is body and attributes are empty."""
    assert parse_frontmatter(text) == ({}, text)


def test_delimiter_with_surrounding_whitespace():
    """Delimiter lines are compared after stripping."""
    attributes, body = parse_frontmatter("  ---  \nkey: v\n --- \nBody")
    assert attributes == {"key": "v"}
    assert body == "Body"


def test_leading_byte_order_mark():
    """A UTF-8 byte-order mark before the opening delimiter is ignored."""
    attributes, body = parse_frontmatter("\ufeff---\ntitle: T\n---\nBody")
    assert attributes == {"title": "T"}
    assert body == "Body"


def test_missing_closing_delimiter():
    """No closing '---' makes the remainder frontmatter and the body empty."""
    attributes, body = parse_frontmatter("---\ntitle: Open\nsummary: never closed")
    assert attributes == {"title": "Open", "summary": "never closed"}
    assert body == ""


def test_crlf_line_endings():
    """\\r\\n and \\n are equivalent line separators."""
    attributes, body = parse_frontmatter("---\r\ntitle: Hello\r\n---\r\nLine one\r\nLine two")
    assert attributes == {"title": "Hello"}
    assert body == "Line one\nLine two"


def test_body_keeps_later_delimiters():
    """Only the first closing delimiter ends the block; later ones stay in the body."""
    _, body = parse_frontmatter("---\na: 1\n---\nabove\n---\nbelow")
    assert body == "above\n---\nbelow"


def test_unpacks_as_named_tuple():
    """The result exposes attributes and body by name."""
    parsed = parse_frontmatter("---\na: 1\n---\nx")
    assert parsed.attributes == {"a": 1}
    assert parsed.body == "x"


# --- parse_attributes ---

def test_empty_key_is_empty_list():
    """'key:' with no items decodes to an empty list."""
    assert parse_attributes(["images:", "title: T"]) == {"images": [], "title": "T"}


def test_list_items_are_scalars():
    """List items go through scalar decoding."""
    attrs = parse_attributes(["values:", "  - 1", "  - true", '  - "2021"', "  - plain"])
    assert attrs == {"values": [1, True, "2021", "plain"]}


def test_list_item_without_indent():
    """A dash line needs no leading whitespace."""
    assert parse_attributes(["tags:", "- a", "- b"]) == {"tags": ["a", "b"]}


def test_list_item_without_active_key_ignored():
    """A list item before any key line is ignored."""
    assert parse_attributes(["- orphan", "title: T"]) == {"title": "T"}


def test_list_item_after_scalar_ignored():
    """A list item cannot turn a scalar value into a list."""
    assert parse_attributes(["year: 2020", "- 2021"]) == {"year": 2020}


def test_multiline_quoted_scalar():
    """A quoted value continued on an indented line is joined with one space and unquoted."""
    attrs = parse_attributes(['description: "Part one', '  continues here"'])
    assert attrs == {"description": "Part one continues here"}


def test_multiline_single_quotes_over_three_lines():
    """Continuation keeps going until the matching quote closes it."""
    attrs = parse_attributes(["summary: 'one", "  two", "  three'", "next: x"])
    assert attrs == {"summary": "one two three", "next": "x"}


def test_multiline_indented_key_is_continuation():
    """While a quoted value is open, an indented key-like line is content."""
    attrs = parse_attributes(['summary: "see', '  note: this"'])
    assert attrs == {"summary": "see note: this"}


def test_multiline_unterminated_at_end():
    """An open quoted value at end of input loses its opening quote."""
    attrs = parse_attributes(['summary: "never', "  closed"])
    assert attrs == {"summary": "never closed"}


def test_multiline_interrupted_by_key():
    """A new key line closes an open quoted value."""
    attrs = parse_attributes(['summary: "dangling', "title: T"])
    assert attrs == {"summary": "dangling", "title": "T"}


def test_soft_wrapped_plain_string():
    """An indented line after a plain string value is appended with a space."""
    attrs = parse_attributes(["summary: a long", "  wrapped line"])
    assert attrs == {"summary": "a long wrapped line"}


def test_soft_wrap_does_not_apply_to_numbers():
    """Indented text after a non-string value is ignored."""
    attrs = parse_attributes(["year: 2021", "  extra"])
    assert attrs == {"year": 2021}


def test_invalid_key_ignored():
    """Keys outside [A-Za-z0-9_] are ignored."""
    assert parse_attributes(["bad-key: x", "good_key: y"]) == {"good_key": "y"}


def test_blank_lines_skipped():
    """Blank lines do not end lists."""
    assert parse_attributes(["tags:", "", "  - a", "   ", "  - b"]) == {"tags": ["a", "b"]}


def test_value_containing_colon():
    """Only the first colon separates key and value."""
    assert parse_attributes(["link: https://example.com/a"]) == {"link": "https://example.com/a"}


def test_preserves_key_order():
    """Attributes keep their declaration order."""
    attrs = parse_attributes(["b: 1", "a: 2", "c: 3"])
    assert list(attrs) == ["b", "a", "c"]


def test_repeated_key_last_wins():
    """A repeated key replaces the previous value."""
    assert parse_attributes(["title: one", "title: two"]) == {"title": "two"}


# --- parse_scalar ---

@pytest.mark.parametrize("text,expected", [
    ('"quoted"', "quoted"),
    ("'single'", "single"),
    ('"2021"', "2021"),
    ('"true"', "true"),
    ('"a \\" b"', 'a \\" b'),
    ("true", True),
    ("false", False),
    ("True", "True"),
    ("2021", 2021),
    ("-3", -3),
    ("+4", 4),
    ("1.5", 1.5),
    (".5", 0.5),
    ("1e3", 1000),
    ("1.", 1),
    ("1.5e1", 15),
    ("2.50", 2.5),
    ("  7  ", 7),
    ("2021-01-15", "2021-01-15"),
    ("12abc", "12abc"),
    ("0x10", "0x10"),
    ("inf", "inf"),
    ("NaN", "NaN"),
    ("1e999", "1e999"),
    ("", ""),
    ('"', '"'),
    ("plain text", "plain text"),
])
def test_parse_scalar(text, expected):
    """Scalars are typed by precedence: quoted, boolean, finite number, else string."""
    result = parse_scalar(text)
    assert result == expected
    assert type(result) is type(expected)


# --- dump_frontmatter ---

def test_dump_frontmatter_format():
    """Lists become dash items; strings are double-quoted; numbers and booleans are bare."""
    text = dump_frontmatter({"title": "Hello", "year": 2021, "tags": ["a", "b"], "pinned": False}, "Body")
    assert text == '---\ntitle: "Hello"\nyear: 2021\ntags:\n  - "a"\n  - "b"\npinned: false\n---\nBody'


def test_dump_frontmatter_empty_list_and_none():
    """An empty list is a bare key; None is an empty quoted string."""
    text = dump_frontmatter({"images": [], "link": None})
    assert text == '---\nimages:\nlink: ""\n---\n'


def test_dump_then_parse_restores_attributes():
    """Serialized frontmatter decodes back to the same attribute map."""
    attrs = {"title": "A, B: Test", "year": 2021, "tags": ["alpha", "beta"], "images": [], "featured": True}
    parsed = parse_frontmatter(dump_frontmatter(attrs, "Body"))
    assert parsed == (attrs, "Body")
