"""
Live preview examples for the commit and naming screens.

Both functions are pure: the same widget state always yields the same
string. Screens call them after every mutation that can change the result.
"""

from typing import Sequence

CONVENTION_CONVENTIONAL = 0
CONVENTION_CUSTOM = 1
CONVENTION_NONE = 2

DEFAULT_COMMIT_TEMPLATE = "{type}({scope}): {description}"
DEFAULT_BRANCH_PATTERN = "feature/{description}"

NO_TYPES_PREVIEW = "feat: add new feature"
FREEFORM_PREVIEW = "Add user authentication to API endpoints"
BREAKING_SUFFIX = "\n\nBREAKING CHANGE: authentication is now required"

NO_RESTRICTION_PREVIEW = (
    "Any branch name is allowed\n\n"
    "Examples:\n"
    "  my-feature\n"
    "  fix-bug-123\n"
    "  experiment"
)
NO_PREFIXES_PREVIEW = "No prefixes selected"
MAX_BRANCH_EXAMPLES = 3

# Example tokens substituted into templates and patterns
COMMIT_EXAMPLES = {
    "{type}": "feat",
    "{scope}": "api",
    "{description}": "add user authentication",
    "{body}": "Adds JWT-based login and token refresh endpoints.",
}
BRANCH_EXAMPLES = {
    "{description}": "user-authentication",
    "{issue}": "123",
}


def _substitute(template: str, tokens: dict) -> str:
    result = template
    for placeholder, example in tokens.items():
        result = result.replace(placeholder, example)
    return result


def commit_preview(
    convention: int,
    types: Sequence[str],
    require_scope: bool = False,
    require_breaking: bool = False,
    template: str = ""
) -> str:
    """Build an example commit message for the selected convention.

    Args:
        convention: Index of the selected convention (conventional, custom, none)
        types: Checked commit types, in display order
        require_scope: Whether conventional commits need a scope
        require_breaking: Whether the breaking change footer is required
        template: Custom template text; empty falls back to the default

    Returns:
        A literal example commit message
    """
    if convention == CONVENTION_CONVENTIONAL:
        if not types:
            return NO_TYPES_PREVIEW
        example_type = types[0]
        if require_scope:
            preview = f"{example_type}(api): add user authentication endpoint"
        else:
            preview = f"{example_type}: add user authentication endpoint"
        if require_breaking:
            preview += BREAKING_SUFFIX
        return preview

    if convention == CONVENTION_CUSTOM:
        return _substitute(template or DEFAULT_COMMIT_TEMPLATE, COMMIT_EXAMPLES)

    return FREEFORM_PREVIEW


def branch_preview(enforce: bool, pattern: str, prefixes: Sequence[str]) -> str:
    """Build example branch names for the naming screen.

    Args:
        enforce: Whether naming rules are enforced at all
        pattern: Branch pattern; empty falls back to the default
        prefixes: Checked prefixes, in display order

    Returns:
        A literal, multi-line example
    """
    if not enforce:
        return NO_RESTRICTION_PREVIEW

    pattern = pattern or DEFAULT_BRANCH_PATTERN
    if not prefixes:
        return NO_PREFIXES_PREVIEW

    examples = []
    for prefix in list(prefixes)[:MAX_BRANCH_EXAMPLES]:
        example = _substitute(pattern.replace("{prefix}", prefix), BRANCH_EXAMPLES)
        if "{prefix}" not in pattern:
            example = f"{prefix}/{example}"
        examples.append(f"  {example}")

    return "Valid branch names:\n\n" + "\n".join(examples)
