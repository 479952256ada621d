# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the layers: the base error class and small
# helpers for readable type names and comma-separated settings.
# =============================================================================

from typing import Any, get_origin


# =============================================================================
# Formatting Helpers
# =============================================================================

def type_name(value: Any) -> str:
    """
    Return a short, readable name for a type or callable.

    Used in dependency-resolution error messages so that a binding graph
    like ProductService -> ProductRepository reads naturally.

    Example:
        type_name(ProductService)  # "ProductService"
        type_name(list[int])       # "list[int]"
    """
    if get_origin(value) is not None:
        # Parameterized generics forward __qualname__ to their origin
        return repr(value).replace("typing.", "")
    return getattr(value, "__qualname__", None) or getattr(value, "__name__", None) or repr(value)


def split_csv(value: str) -> list[str]:
    """
    Split a comma-separated string into trimmed, non-empty parts.

    Example:
        split_csv("http://a.com, http://b.com,") -> ["http://a.com", "http://b.com"]
    """
    return [part.strip() for part in value.split(",") if part.strip()]


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        class MissingBindingError(DependencyResolutionError):
            def __init__(self, service_type: type):
                super().__init__(f"No binding for {service_type}", code="MISSING_BINDING")
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }
