"""FastAPI router for webpage metadata extraction."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from .extractor import MetadataExtractor
from .models import ErrorResponse, ExtractionRequest

router = APIRouter(tags=["metadata"])

# Dependency to get the extractor
_extractor = None


def get_extractor() -> MetadataExtractor:
    """Get metadata extractor instance."""
    global _extractor
    if _extractor is None:
        _extractor = MetadataExtractor()
    return _extractor


@router.post(
    "/parse-metadata",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def parse_metadata(
    request: ExtractionRequest,
    extractor: MetadataExtractor = Depends(get_extractor),
) -> Dict[str, Any]:
    """Fetch a webpage and return its title, meta tags, links and JSON-LD.

    ValidationError and FetchError propagate to the application's
    exception handlers, which render them as {"error": message}.
    """
    record = await extractor.extract(request.url)
    return record.to_wire()
