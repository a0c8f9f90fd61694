"""Pattern definitions and matching for webpage metadata tags."""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional


# Record field -> tag name, per tag family
OPEN_GRAPH_PROPERTIES: Dict[str, str] = {
    "title": "og:title",
    "description": "og:description",
    "image": "og:image",
    "url": "og:url",
    "type": "og:type",
    "site_name": "og:site_name",
}

TWITTER_PROPERTIES: Dict[str, str] = {
    "card": "twitter:card",
    "site": "twitter:site",
    "creator": "twitter:creator",
    "title": "twitter:title",
    "description": "twitter:description",
    "image": "twitter:image",
}

META_NAMES: Dict[str, str] = {
    "description": "description",
    "keywords": "keywords",
    "author": "author",
    "viewport": "viewport",
    "robots": "robots",
}

LINK_RELS = ("canonical", "icon", "alternate")

# Quoted attribute value; stops at the first quote of either kind
_VALUE = r'["\']([^"\']*)["\']'


@dataclass
class TagPattern:
    """Compiled pattern that captures one attribute value per element."""
    name: str
    pattern: re.Pattern

    def first(self, html: str) -> Optional[str]:
        match = self.pattern.search(html)
        if not match:
            return None
        return _captured(match)

    def all(self, html: str) -> List[str]:
        return [_captured(match) for match in self.pattern.finditer(html)]


def _captured(match: re.Match) -> str:
    """Return whichever alternative's group matched."""
    for value in match.groups():
        if value is not None:
            return value
    return ""


def _keyed_element_pattern(element: str, key_attr: str, key: str, value_attr: str) -> re.Pattern:
    """Build a pattern for <element> where key_attr equals key, capturing value_attr.

    Both attribute orders are accepted. Attributes are only matched inside the
    element's own angle brackets.
    """
    key_match = rf'\s{key_attr}\s*=\s*["\']{re.escape(key)}["\']'
    value_match = rf'\s{value_attr}\s*=\s*{_VALUE}'
    return re.compile(
        rf'<{element}\b[^>]*?{key_match}[^>]*?{value_match}'
        rf'|<{element}\b[^>]*?{value_match}[^>]*?{key_match}',
        re.IGNORECASE,
    )


class TagPatternMatcher:
    """Matches meta, link, title and JSON-LD script elements in raw HTML."""

    def __init__(self):
        self.meta_patterns = self._compile_meta_patterns()
        self.link_patterns = {rel: self._link_pattern(rel) for rel in LINK_RELS}
        self.title_pattern = re.compile(r'<title\b[^>]*>(.*?)</title>', re.IGNORECASE)
        self.ld_json_pattern = re.compile(
            r'<script\b[^>]*?\stype\s*=\s*["\']application/ld\+json["\'][^>]*>(.*?)</script\s*>',
            re.IGNORECASE | re.DOTALL,
        )

    def _compile_meta_patterns(self) -> Dict[str, TagPattern]:
        """Compile meta patterns for every known tag name."""
        patterns = {}
        for table in (OPEN_GRAPH_PROPERTIES, TWITTER_PROPERTIES, META_NAMES):
            for tag_name in table.values():
                patterns[tag_name] = self._meta_pattern(tag_name)
        return patterns

    @staticmethod
    def _meta_pattern(tag_name: str) -> TagPattern:
        return TagPattern(
            name=tag_name,
            pattern=_keyed_element_pattern("meta", "(?:name|property)", tag_name, "content"),
        )

    @staticmethod
    def _link_pattern(rel: str) -> TagPattern:
        return TagPattern(
            name=rel,
            pattern=_keyed_element_pattern("link", "rel", rel, "href"),
        )

    def extract_meta_values(self, html: str, name: str) -> List[str]:
        """Extract content of every meta element named `name`, in document order."""
        pattern = self.meta_patterns.get(name) or self._meta_pattern(name)
        return pattern.all(html)

    def extract_meta_family(self, html: str, table: Dict[str, str]) -> Dict[str, List[str]]:
        """Run one meta pass per entry of a field -> tag name table."""
        return {
            field: self.extract_meta_values(html, tag_name)
            for field, tag_name in table.items()
        }

    def extract_title(self, html: str) -> Optional[str]:
        """Extract the first document title."""
        match = self.title_pattern.search(html)
        if not match:
            return None
        return match.group(1) or None

    def extract_link(self, html: str, rel: str) -> Optional[str]:
        """Extract href of the first link element with the given rel."""
        pattern = self.link_patterns.get(rel.lower()) or self._link_pattern(rel)
        return pattern.first(html) or None

    def extract_links(self, html: str, rel: str) -> List[str]:
        """Extract hrefs of all link elements with the given rel."""
        pattern = self.link_patterns.get(rel.lower()) or self._link_pattern(rel)
        return pattern.all(html)

    def extract_ld_json_blocks(self, html: str) -> List[str]:
        """Extract the raw text of every application/ld+json script block."""
        return [match.group(1) for match in self.ld_json_pattern.finditer(html)]
