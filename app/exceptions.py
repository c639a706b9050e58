"""
Custom exception classes for hello service.

Provides specific exceptions for startup failures so the entry point can
report them and exit with a non-zero status.
"""

from typing import Any, Dict, List, Optional


class HelloServiceException(Exception):
    """
    Base exception for all hello service errors.

    All custom exceptions should inherit from this class
    for consistent error handling.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize hello service exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(HelloServiceException):
    """
    Exception raised when settings fail validation at startup.

    Carries the names of the offending environment variables.
    """

    def __init__(
        self,
        fields: List[str],
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            fields: Names of the settings that failed validation
            message: Optional custom error message
            details: Additional context about the error
        """
        self.fields = fields
        default_message = f"Invalid configuration for: {', '.join(fields)}"
        super().__init__(message or default_message, details)
