"""Custom exceptions for the DevTools API."""

from typing import Any, Dict, Optional


class DevToolsException(Exception):
    """Base exception for all DevTools errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(DevToolsException):
    """Raised when input validation fails."""
    pass


class FetchError(DevToolsException):
    """Raised when a target document cannot be retrieved."""
    
    def __init__(self, url: str, cause: Exception):
        super().__init__(
            f"Failed to fetch {url}: {cause}",
            details={"url": url, "error": str(cause)},
        )
        self.url = url
