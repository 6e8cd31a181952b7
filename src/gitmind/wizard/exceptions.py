"""
GitMind Wizard Exceptions

Custom exception types for adapters and configuration, with remediation hints.
Screens catch these and show the message; they never escape a screen.
"""

from typing import Optional


class GitMindError(Exception):
    """Base exception for all GitMind errors."""

    def __init__(
        self,
        message: str,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        """Initialize the error.

        Args:
            message: Human-readable error message
            remediation: Suggested fix for the user
            details: Technical details for debugging
        """
        super().__init__(message)
        self.message = message
        self.remediation = remediation
        self.details = details

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.remediation:
            parts.append(f"To fix: {self.remediation}")
        return "\n".join(parts)


class ConfigError(GitMindError):
    """Configuration loading and persistence errors."""

    def __init__(
        self,
        message: str,
        config_path: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.config_path = config_path
        if not remediation and config_path:
            remediation = f"Check that {config_path} is readable, writable and valid YAML"
        super().__init__(message, remediation, details)


class GitError(GitMindError):
    """Errors from running git commands."""

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.command = command
        if not remediation and command:
            remediation = f"Try running '{command}' manually to see the full output"
        super().__init__(message, remediation, details)


class GitHubError(GitMindError):
    """Errors from the GitHub CLI (gh)."""

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.command = command
        if not remediation:
            remediation = "Make sure gh is installed and authenticated: gh auth login"
        super().__init__(message, remediation, details)


class ValidationError(GitMindError):
    """Input validation errors."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        expected_format: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.field = field
        self.expected_format = expected_format
        if not remediation and field and expected_format:
            remediation = f"The {field} should be in format: {expected_format}"
        super().__init__(message, remediation, details)


# Error code mapping for CLI exit codes
ERROR_CODES = {
    ConfigError: 10,
    GitError: 11,
    GitHubError: 12,
    ValidationError: 14,
    GitMindError: 1,
}


def get_error_code(error: Exception) -> int:
    """Get the exit code for an error type."""
    for error_type, code in ERROR_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1
