"""Main metadata extraction class that fetches a page and coordinates pattern matching."""

import json
from typing import Any, List, Optional

import httpx
from loguru import logger

from api.config import Settings, get_settings
from shared.exceptions import FetchError, ValidationError
from .models import LinkRelations, MetaTags, MetadataRecord, OpenGraphTags, TwitterTags
from .patterns import META_NAMES, OPEN_GRAPH_PROPERTIES, TWITTER_PROPERTIES, TagPatternMatcher


class MetadataExtractor:
    """Extracts title, meta tags, link relations and JSON-LD from a webpage."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.transport = transport
        self.pattern_matcher = TagPatternMatcher()

    async def extract(self, url: Optional[str]) -> MetadataRecord:
        """Fetch a document and extract its metadata.

        Args:
            url: Absolute URL of the document

        Returns:
            Extracted metadata record

        Raises:
            ValidationError: If url is missing or empty
            FetchError: If the document cannot be retrieved
        """
        url = (url or "").strip()
        if not url:
            raise ValidationError("URL is required")

        logger.info(f"Extracting metadata from {url}")
        html = await self._fetch(url)
        return self.parse(html, url)

    async def _fetch(self, url: str) -> str:
        """Retrieve the document body; any HTTP status is accepted."""
        client_kwargs = {"follow_redirects": self.settings.fetch_follow_redirects}
        if self.settings.fetch_timeout is not None:
            client_kwargs["timeout"] = self.settings.fetch_timeout
        if self.transport is not None:
            client_kwargs["transport"] = self.transport

        try:
            async with httpx.AsyncClient(**client_kwargs) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
            logger.error(f"Failed to fetch {url}: {e}")
            raise FetchError(url, e) from e

        logger.debug(f"GET {url} - {response.status_code} ({len(response.content)} bytes)")
        return response.text

    def parse(self, html: str, url: str) -> MetadataRecord:
        """Extract metadata from an already retrieved document.

        Args:
            html: Raw document markup
            url: URL the document was retrieved from

        Returns:
            Extracted metadata record
        """
        matcher = self.pattern_matcher

        record = MetadataRecord(
            url=url,
            title=matcher.extract_title(html),
            open_graph=OpenGraphTags(**matcher.extract_meta_family(html, OPEN_GRAPH_PROPERTIES)),
            twitter=TwitterTags(**matcher.extract_meta_family(html, TWITTER_PROPERTIES)),
            meta=MetaTags(**matcher.extract_meta_family(html, META_NAMES)),
            links=LinkRelations(
                canonical=matcher.extract_link(html, "canonical"),
                icon=matcher.extract_link(html, "icon"),
                alternate=matcher.extract_links(html, "alternate"),
            ),
            schema_org=self._parse_structured_data(html),
        )

        logger.info(f"Extracted metadata - Title: {record.title is not None}, "
                    f"Open Graph: {_count(record.open_graph)}, Twitter: {_count(record.twitter)}, "
                    f"Meta: {_count(record.meta)}, Alternates: {len(record.links.alternate)}, "
                    f"Schema.org: {len(record.schema_org)}")

        return record

    def _parse_structured_data(self, html: str) -> List[Any]:
        """Parse JSON-LD blocks, dropping any that are not valid JSON."""
        parsed = []
        for block in self.pattern_matcher.extract_ld_json_blocks(html):
            try:
                parsed.append(json.loads(block, parse_constant=_reject_constant))
            except (ValueError, RecursionError) as e:
                logger.debug(f"Skipping malformed JSON-LD block: {e}")
        return parsed


def _reject_constant(name: str):
    """Reject NaN and Infinity, which are not valid JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def _count(tags) -> int:
    """Total number of values across a tag family."""
    return sum(len(values) for values in tags.model_dump().values())
