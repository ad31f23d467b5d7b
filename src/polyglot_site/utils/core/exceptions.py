"""
Basic exception classes for Polyglot Site.

This module contains fundamental exception classes that are used throughout
the codebase without creating import cycles. Every failure in the build layer
is fatal to the build; ``recoverable`` is recorded for reporting only.
"""

from __future__ import annotations

from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors for appropriate reporting."""

    CONFIGURATION = "configuration"
    QUERY = "query"
    CATALOG = "catalog"
    CONTENT = "content"
    UNKNOWN = "unknown"


class SiteBuildError(Exception):
    """Base exception class for Polyglot Site specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        context: object | None = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.context: object | None = context
        self.recoverable: bool = recoverable


class ConfigurationError(SiteBuildError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            context=context,
        )


class QueryError(SiteBuildError):
    """Content query errors, either reported by the endpoint or raised in transport."""

    def __init__(
        self,
        message: str,
        errors: list[object] | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.QUERY,
            severity=ErrorSeverity.CRITICAL,
            context=context,
        )
        self.errors: list[object] = list(errors or [])


class CatalogCompileError(SiteBuildError):
    """The external translation catalog compiler failed."""

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CATALOG,
            severity=ErrorSeverity.CRITICAL,
            context=context,
        )
        self.returncode: int | None = returncode


class ContentError(SiteBuildError):
    """Local content could not be read or parsed."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONTENT,
            severity=ErrorSeverity.MEDIUM,
            context=context,
        )
