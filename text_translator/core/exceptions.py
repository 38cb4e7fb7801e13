"""
Domain exceptions for the translation pipeline.

These exceptions are transport-independent. Network and HTTP failures are
not wrapped here; they reach the caller as the httpx exceptions they are.
"""


class DomainException(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, error_code: str):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


# ============================================================================
# Alignment Exceptions
# ============================================================================


class AlignmentParseError(DomainException):
    """Raw alignment string contains a tuple that is not `a:b-c:d`."""

    def __init__(self, entry: str):
        super().__init__(message=f"Malformed alignment entry '{entry}'", error_code="ALIGNMENT_PARSE_ERROR")
        self.entry = entry
