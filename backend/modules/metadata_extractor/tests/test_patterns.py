"""Tests for pattern matching in metadata extraction."""

import pytest

from modules.metadata_extractor.patterns import (
    META_NAMES,
    OPEN_GRAPH_PROPERTIES,
    TagPatternMatcher,
)


class TestTagPatternMatcher:
    """Test pattern matching functionality."""

    @pytest.fixture
    def matcher(self):
        return TagPatternMatcher()

    def test_meta_name_before_content(self, matcher):
        html = '<meta property="og:title" content="Hello World">'
        assert matcher.extract_meta_values(html, "og:title") == ["Hello World"]

    def test_meta_content_before_name(self, matcher):
        html = '<meta content="Hello World" property="og:title" />'
        assert matcher.extract_meta_values(html, "og:title") == ["Hello World"]

    def test_meta_name_attribute_and_single_quotes(self, matcher):
        html = "<meta name='description' content='A short summary'>"
        assert matcher.extract_meta_values(html, "description") == ["A short summary"]

    def test_meta_is_case_insensitive(self, matcher):
        html = '<META NAME="Robots" CONTENT="noindex">'
        assert matcher.extract_meta_values(html, "robots") == ["noindex"]

    def test_meta_collects_all_matches_in_order(self, matcher):
        html = """
        <meta property="og:image" content="https://example.com/a.png">
        <meta name="description" content="ignored">
        <meta content="https://example.com/b.png" property="og:image">
        <meta property="og:image" content="https://example.com/c.png">
        """
        assert matcher.extract_meta_values(html, "og:image") == [
            "https://example.com/a.png",
            "https://example.com/b.png",
            "https://example.com/c.png",
        ]

    def test_meta_attributes_do_not_leak_between_elements(self, matcher):
        html = '<meta name="author" content="Ada"><meta name="keywords" content="python">'
        assert matcher.extract_meta_values(html, "author") == ["Ada"]
        assert matcher.extract_meta_values(html, "keywords") == ["python"]

    def test_meta_without_content_is_skipped(self, matcher):
        html = '<meta name="viewport"><meta charset="utf-8">'
        assert matcher.extract_meta_values(html, "viewport") == []

    def test_meta_requires_exact_name(self, matcher):
        html = '<meta property="og:title:extra" content="no"><meta name="og:titles" content="no">'
        assert matcher.extract_meta_values(html, "og:title") == []

    def test_meta_data_attribute_is_not_a_name(self, matcher):
        html = '<meta data-name="description" content="no">'
        assert matcher.extract_meta_values(html, "description") == []

    def test_meta_value_stops_at_first_quote(self, matcher):
        html = '<meta name="description" content="Don\'t panic">'
        assert matcher.extract_meta_values(html, "description") == ["Don"]

    def test_meta_family_has_every_field(self, matcher):
        html = '<meta property="og:site_name" content="Example">'
        family = matcher.extract_meta_family(html, OPEN_GRAPH_PROPERTIES)

        assert set(family) == set(OPEN_GRAPH_PROPERTIES)
        assert family["site_name"] == ["Example"]
        assert family["title"] == []

    def test_meta_family_empty_document(self, matcher):
        family = matcher.extract_meta_family("<html></html>", META_NAMES)
        assert all(values == [] for values in family.values())

    def test_title_first_match_wins(self, matcher):
        html = "<head><TITLE>First</TITLE></head><svg><title>Second</title></svg>"
        assert matcher.extract_title(html) == "First"

    def test_title_absent_or_empty(self, matcher):
        assert matcher.extract_title("<html><head></head></html>") is None
        assert matcher.extract_title("<title></title>") is None

    def test_link_first_match_either_order(self, matcher):
        html = """
        <link href="https://example.com/first" rel="canonical">
        <link rel="canonical" href="https://example.com/second">
        """
        assert matcher.extract_link(html, "canonical") == "https://example.com/first"

    def test_link_icon_exact_rel(self, matcher):
        html = '<link rel="shortcut icon" href="/old.ico"><link rel="icon" href="/favicon.ico">'
        assert matcher.extract_link(html, "icon") == "/favicon.ico"

    def test_link_absent(self, matcher):
        assert matcher.extract_link('<link rel="stylesheet" href="a.css">', "canonical") is None

    def test_links_collect_all_in_order(self, matcher):
        html = """
        <link rel="alternate" hreflang="fr" href="https://example.com/fr">
        <link rel="stylesheet" href="/site.css">
        <link href="https://example.com/de" rel="alternate">
        """
        assert matcher.extract_links(html, "alternate") == [
            "https://example.com/fr",
            "https://example.com/de",
        ]

    def test_ld_json_blocks_span_lines(self, matcher):
        html = """
        <script type="application/ld+json">
        {"@type": "Organization",
         "name": "Example"}
        </script>
        <script>var x = 1;</script>
        <script type='application/ld+json'>[1, 2]</script>
        """
        blocks = matcher.extract_ld_json_blocks(html)

        assert len(blocks) == 2
        assert '"Organization"' in blocks[0]
        assert blocks[1] == "[1, 2]"

    def test_link_patterns_compiled_up_front(self, matcher):
        compiled = dict(matcher.link_patterns)
        html = '<link rel="canonical" href="/c"><link rel="icon" href="/i"><link rel="alternate" href="/a">'

        assert matcher.extract_link(html, "canonical") == "/c"
        assert matcher.extract_link(html, "icon") == "/i"
        assert matcher.extract_links(html, "alternate") == ["/a"]
        assert matcher.extract_link('<link rel="author" href="/me">', "author") == "/me"
        assert set(compiled) == {"canonical", "icon", "alternate"}
        assert matcher.link_patterns == compiled
