from typing import Any, Dict, Optional


class CrockfordError(Exception):
    """Base exception for all codec errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class EntropyError(CrockfordError):
    """Raised when the secure random source cannot supply bytes.

    Never retried: identifiers must not fall back to weaker randomness.
    """

    def __init__(self, message: str, requested: int = 0, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context)
        self.requested = requested


class DecodeError(CrockfordError, ValueError):
    """Raised when text is not a valid unpadded encoding for an alphabet."""

    def __init__(self, message: str, text: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context)
        self.text = text


def handle_entropy_error(e: Exception, requested: int) -> EntropyError:
    """Convert an OS randomness failure to EntropyError with context."""
    if isinstance(e, EntropyError):
        return e

    context = {
        "original_error": str(e),
        "error_type": type(e).__name__
    }

    return EntropyError(f"Secure random source failed to supply {requested} bytes: {e}", requested, context)
