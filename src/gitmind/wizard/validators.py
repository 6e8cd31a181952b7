"""
GitMind Wizard Validators

Credential and input validation utilities.
"""

import re
from typing import Tuple

DEFAULT_MAX_DIFF_SIZE = 100000

# Characters git refuses in ref names (see git check-ref-format)
_INVALID_REF_CHARS = re.compile(r'[\x00-\x20\x7f~^:?*\[\\]')


def validate_cerebras_key(key: str) -> Tuple[bool, str]:
    """Validate Cerebras API key format.

    Args:
        key: The API key to validate

    Returns:
        Tuple of (is_valid, message)
    """
    if not key:
        return False, "API key is required"

    if not key.startswith("csk-"):
        return False, "Cerebras API keys should start with 'csk-'"

    if len(key) < 12:
        return False, "API key appears too short"

    return True, "Valid Cerebras API key format"


def validate_api_key(key: str, provider: str = "cerebras") -> Tuple[bool, str]:
    """Validate an API key for the given provider.

    Unknown providers only get the presence check.
    """
    if provider == "cerebras":
        return validate_cerebras_key(key)
    if not key:
        return False, "API key is required"
    return True, "API key provided"


def validate_branch_name(name: str) -> Tuple[bool, str]:
    """Validate a git branch name.

    Args:
        name: The branch name to validate

    Returns:
        Tuple of (is_valid, message)
    """
    if not name:
        return False, "Branch name is required"

    if _INVALID_REF_CHARS.search(name):
        return False, "Branch names cannot contain spaces or any of ~ ^ : ? * [ \\"

    if name.startswith(("-", "/")) or name.endswith(("/", ".", ".lock")):
        return False, "Invalid branch name"

    if ".." in name or "//" in name or "@{" in name or name == "@":
        return False, "Invalid branch name"

    if any(part.startswith(".") for part in name.split("/")):
        return False, "Branch name components cannot start with '.'"

    return True, "Valid branch name"


def validate_repo_name(name: str) -> Tuple[bool, str]:
    """Validate a GitHub repository name."""
    if not name:
        return False, "Repository name is required"

    if not re.match(r'^[A-Za-z0-9._-]+$', name):
        return False, "Repository names may only contain letters, digits, '.', '-' and '_'"

    if name in (".", ".."):
        return False, "Invalid repository name"

    return True, "Valid repository name"


def validate_max_diff_size(value: str) -> Tuple[bool, str]:
    """Validate the max diff size field (a positive integer of bytes)."""
    value = value.strip()
    if not value:
        return False, "Max diff size is required"

    if not value.isdigit() or int(value) <= 0:
        return False, "Max diff size must be a positive number of bytes"

    return True, "Valid max diff size"


def parse_max_diff_size(value: str) -> int:
    """Parse the max diff size field, falling back to the default.

    Anything that is not a positive integer yields DEFAULT_MAX_DIFF_SIZE.
    """
    is_valid, _ = validate_max_diff_size(value)
    if not is_valid:
        return DEFAULT_MAX_DIFF_SIZE
    return int(value.strip())
