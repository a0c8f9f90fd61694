"""Pydantic models for webpage metadata extraction."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExtractionRequest(BaseModel):
    """Request body for POST /parse-metadata."""

    url: Optional[str] = None

    @field_validator("url", mode="before")
    @classmethod
    def normalize_url(cls, value: object) -> str:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ValueError("URL must be a string")
        return value.strip()


class OpenGraphTags(BaseModel):
    """Open Graph properties (og:*) in document order."""

    title: List[str] = Field(default_factory=list)
    description: List[str] = Field(default_factory=list)
    image: List[str] = Field(default_factory=list)
    url: List[str] = Field(default_factory=list)
    type: List[str] = Field(default_factory=list)
    site_name: List[str] = Field(default_factory=list, alias="siteName")

    model_config = ConfigDict(populate_by_name=True)


class TwitterTags(BaseModel):
    """Twitter Card properties (twitter:*) in document order."""

    card: List[str] = Field(default_factory=list)
    site: List[str] = Field(default_factory=list)
    creator: List[str] = Field(default_factory=list)
    title: List[str] = Field(default_factory=list)
    description: List[str] = Field(default_factory=list)
    image: List[str] = Field(default_factory=list)


class MetaTags(BaseModel):
    """Generic named meta tags."""

    description: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    author: List[str] = Field(default_factory=list)
    viewport: List[str] = Field(default_factory=list)
    robots: List[str] = Field(default_factory=list)


class LinkRelations(BaseModel):
    """Link relations; canonical and icon keep only the first match."""

    canonical: Optional[str] = None
    icon: Optional[str] = None
    alternate: List[str] = Field(default_factory=list)


class MetadataRecord(BaseModel):
    """Everything discoverable about one fetched document."""

    url: str
    title: Optional[str] = None
    open_graph: OpenGraphTags = Field(default_factory=OpenGraphTags, alias="openGraph")
    twitter: TwitterTags = Field(default_factory=TwitterTags)
    meta: MetaTags = Field(default_factory=MetaTags)
    links: LinkRelations = Field(default_factory=LinkRelations)
    schema_org: List[Any] = Field(default_factory=list, alias="schemaOrg")

    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON-compatible response body."""
        return self.model_dump(mode="json", by_alias=True)


class ErrorResponse(BaseModel):
    """Error body returned by the extraction endpoint."""

    error: str
