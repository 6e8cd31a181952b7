"""
GitMind Wizard UI Helpers

Shared rendering pieces for wizard screens (headers, progress, footers,
key/value rows) and secret masking, built on the rich library. Every
helper takes the Theme explicitly.
"""

import io
import re
from typing import Sequence, Tuple

from rich.console import Console, RenderableType
from rich.text import Text

from gitmind.wizard.theme import Theme


# Patterns that indicate a secret value
SECRET_PATTERNS = [
    "token", "password", "secret", "key", "credential",
    "api_key", "apikey", "auth", "bearer",
]

# Regex patterns for common secret formats
SECRET_REGEXES = [
    r'csk-[a-zA-Z0-9\-]{8,}',  # Cerebras API keys
    r'sk-[a-zA-Z0-9\-]{20,}',  # OpenAI / Anthropic style keys
    r'ghp_[a-zA-Z0-9]{36,}',  # GitHub PAT
    r'gho_[a-zA-Z0-9]{36,}',  # GitHub OAuth
]

SEPARATOR_WIDTH = 70


def mask_secrets(text: str, mask: str = "********") -> str:
    """Mask secrets in a string.

    Args:
        text: The text that may contain secrets
        mask: The string to replace secrets with

    Returns:
        Text with secrets masked
    """
    if not text:
        return text

    result = text

    # Mask known secret patterns in key=value format
    for pattern in SECRET_PATTERNS:
        regex = rf'({pattern}["\']?\s*[=:]\s*["\']?)([^"\'\s]+)(["\']?)'
        result = re.sub(regex, rf'\1{mask}\3', result, flags=re.IGNORECASE)

    # Mask specific secret formats
    for regex in SECRET_REGEXES:
        result = re.sub(regex, mask, result)

    return result


def is_secret_key(key: str) -> bool:
    """Check if a key name indicates it holds a secret value."""
    key_lower = key.lower()
    return any(pattern in key_lower for pattern in SECRET_PATTERNS)


def mask_api_key(key: str) -> str:
    """Mask an API key for display, keeping the first and last 4 characters.

    Keys of 8 characters or fewer are fully masked. Returns an empty string
    for an empty key so callers can decide how to show "not set".
    """
    if not key:
        return ""
    if len(key) <= 8:
        return "*" * len(key)
    return key[:4] + "*" * (len(key) - 8) + key[-4:]


def capitalize_first(value: str) -> str:
    """Upper-case the first character only."""
    if not value:
        return value
    return value[0].upper() + value[1:]


def render_step_header(theme: Theme, title: str, step: int, total_steps: int) -> Text:
    """Render a screen title with its step counter."""
    header = Text(title, style=theme.header)
    header.append("\n")
    header.append(f"Step {step} of {total_steps}", style=theme.muted)
    return header


def render_progress_dots(theme: Theme, step: int, total_steps: int) -> Text:
    """Render the dotted progress indicator used on the welcome screen."""
    text = Text(f"Step {step} of {total_steps}  ", style=theme.muted)
    for i in range(1, total_steps + 1):
        if i == step:
            text.append("☑", style=theme.focused)
        elif i < step:
            text.append("✓", style=theme.success)
        else:
            text.append("☐", style=theme.muted)
        if i < total_steps:
            text.append(" ")
    return text


def render_separator(theme: Theme, width: int = SEPARATOR_WIDTH) -> Text:
    return Text("─" * width, style=theme.border)


def render_help(theme: Theme, text: str) -> Text:
    return Text(f"  {text}", style=theme.help)


def render_footer(theme: Theme, shortcuts: Sequence[Tuple[str, str]]) -> Text:
    """Render a footer line of (key, description) shortcut pairs."""
    footer = Text()
    for i, (key, description) in enumerate(shortcuts):
        if i:
            footer.append("  ")
        footer.append(key, style=theme.shortcut_key)
        footer.append(" ")
        footer.append(description, style=theme.shortcut_desc)
    return footer


def render_key_value(theme: Theme, key: str, value: str, value_style: str = "") -> Text:
    """Render an indented, fixed-width key/value row."""
    row = Text("  ")
    row.append(f"{key + ':':<21}", style=theme.label)
    row.append(value, style=value_style or theme.muted)
    return row


def render_status(theme: Theme, ok: bool, message: str) -> Text:
    """Render a ✓ / ! status line."""
    if ok:
        line = Text("✓ ", style=theme.status_ok)
    else:
        line = Text("! ", style=theme.status_warning)
    line.append(message, style=theme.text)
    return line


def render_error(theme: Theme, message: str) -> Text:
    return Text(f"Error: {message}", style=theme.status_error)


def render_to_text(renderable: RenderableType, width: int = 100) -> str:
    """Render a rich renderable to plain text (no colour codes)."""
    console = Console(
        file=io.StringIO(),
        width=width,
        record=True,
        color_system=None,
        force_terminal=False,
    )
    console.print(renderable)
    return console.export_text()
