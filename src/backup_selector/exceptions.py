"""Error taxonomy for backup-selector.

Only problems that stop a scan are modelled as exceptions. Candidates that
fail the extension filter or a size limit are routine rejections and never
raise.
"""

from __future__ import annotations


class BackupSelectorError(Exception):
    """Base exception for all backup-selector errors."""

    def __init__(self, message: str, context: dict[str, object] | None = None) -> None:
        """Initialize BackupSelectorError.

        Args:
            message: Error message
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.context: dict[str, object] = context or {}


class ScanSourceError(BackupSelectorError):
    """Exception raised when the scan root cannot be read at all."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        context: dict[str, object] | None = None,
    ) -> None:
        """Initialize ScanSourceError.

        Args:
            message: Error message
            source: Root directory or archive that failed
            context: Additional context information
        """
        full_context = context or {}
        if source is not None:
            full_context["source"] = source

        super().__init__(message, full_context)
        self.source: str | None = source


class SourceNotFoundError(ScanSourceError):
    """Exception raised when the root directory or archive does not exist."""


class InvalidArchiveError(ScanSourceError):
    """Exception raised when the root is not a readable zip archive."""


class ConfigurationError(BackupSelectorError):
    """Exception raised when configuration loading or validation fails."""


class EnvironmentVariableError(BackupSelectorError):
    """Exception raised when a ${VARIABLE} reference cannot be resolved."""
