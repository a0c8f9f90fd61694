"""Metadata extraction module for webpages."""

from .extractor import MetadataExtractor
from .models import MetadataRecord
from .patterns import TagPatternMatcher

__all__ = ["MetadataExtractor", "MetadataRecord", "TagPatternMatcher"]
