"""Tests for XML and URL escaping."""

import xml.etree.ElementTree as ET

import pytest

from gvsvg.core.escape import xml_comment_string, xml_string, xml_url_string


class TestXmlString:

    def test_markup_characters(self):
        assert xml_string("a & b <c> \"d\" 'e'") == "a &amp; b &lt;c&gt; &quot;d&quot; &#39;e&#39;"

    @pytest.mark.parametrize("text,expected", [
        ("AT&T", "AT&amp;T"),
        ("&", "&amp;"),
        ("&amp;", "&amp;amp;"),
        ("&#45;", "&amp;#45;"),
        ("&#x41;", "&amp;#x41;"),
    ])
    def test_every_ampersand_is_escaped(self, text, expected):
        assert xml_string(text) == expected

    @pytest.mark.parametrize("text", [
        "AT&amp;T &lt;x&gt;",
        "a & b <c> \"d\" 'e'",
        "&#x41;&nbsp;&#;",
    ])
    def test_parser_reads_back_the_original_text(self, text):
        element = ET.fromstring(f'<text title="{xml_string(text)}">{xml_string(text)}</text>')

        assert element.text == text
        assert element.get("title") == text

    def test_hyphens_and_non_ascii_are_kept(self):
        assert xml_string("sans-Serif café ✓") == "sans-Serif café ✓"

    def test_plain_text_unchanged(self):
        assert xml_string("node1") == "node1"


class TestXmlCommentString:

    def test_no_double_hyphen_survives(self):
        escaped = xml_comment_string("a--b -> c")
        assert "--" not in escaped
        assert escaped == "a&#45;&#45;b &#45;&gt; c"


class TestXmlUrlString:

    def test_query_ampersand(self):
        assert xml_url_string("http://x/?a&b") == "http://x/?a&amp;b"

    def test_control_characters_and_spaces_are_percent_encoded(self):
        assert xml_url_string("http://x/a b\n\x7f") == "http://x/a%20b%0A%7F"

    def test_quotes_and_brackets(self):
        assert xml_url_string("a\"b'<c>") == "a&quot;b&#39;&lt;c&gt;"

    def test_existing_percent_escapes_are_kept(self):
        assert xml_url_string("http://x/a%20b-c") == "http://x/a%20b-c"
