"""
GitMind Wizard Theme

Colour palettes for the wizard. A Theme is constructed once and passed
explicitly into every render call.
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class Theme:
    """A named colour palette with derived rich style strings."""
    name: str
    description: str
    primary: str
    secondary: str
    success: str
    warning: str
    error: str
    muted: str
    border: str
    text: str

    @property
    def header(self) -> str:
        return f"bold {self.primary}"

    @property
    def label(self) -> str:
        return f"bold {self.text}"

    @property
    def help(self) -> str:
        return f"italic {self.muted}"

    @property
    def focused(self) -> str:
        return f"bold {self.primary}"

    @property
    def selected(self) -> str:
        return self.secondary

    @property
    def status_ok(self) -> str:
        return f"bold {self.success}"

    @property
    def status_warning(self) -> str:
        return f"bold {self.warning}"

    @property
    def status_error(self) -> str:
        return f"bold {self.error}"

    @property
    def shortcut_key(self) -> str:
        return f"bold {self.primary}"

    @property
    def shortcut_desc(self) -> str:
        return self.muted


THEMES: Dict[str, Theme] = {
    "claude-warm": Theme(
        name="claude-warm",
        description="Professional warm theme with orange-rust accents (default)",
        primary="#C15F3C",
        secondary="#A14A2F",
        success="#7A9A6E",
        warning="#D4945A",
        error="#C16B6B",
        muted="#B1ADA1",
        border="#3A3631",
        text="#E8E6E3",
    ),
    "ocean-blue": Theme(
        name="ocean-blue",
        description="Cool blue theme for focus and reduced eye strain",
        primary="#4A90E2",
        secondary="#357ABD",
        success="#6EA06E",
        warning="#E2A04A",
        error="#E24A4A",
        muted="#A1B1C1",
        border="#2A3641",
        text="#E3E8ED",
    ),
    "forest-green": Theme(
        name="forest-green",
        description="Natural green theme for balanced, calming coding",
        primary="#6B9A6B",
        secondary="#557A55",
        success="#7AAA7A",
        warning="#D4A45A",
        error="#C17B6B",
        muted="#A1B1A1",
        border="#2A3A2A",
        text="#E3EDE3",
    ),
    "monochrome": Theme(
        name="monochrome",
        description="Minimalist grayscale theme for distraction-free coding",
        primary="#888888",
        secondary="#666666",
        success="#999999",
        warning="#AAAAAA",
        error="#777777",
        muted="#666666",
        border="#333333",
        text="#EEEEEE",
    ),
    "twilight": Theme(
        name="twilight",
        description="Purple-blue theme optimized for evening coding sessions",
        primary="#8B7EC8",
        secondary="#6B5FA8",
        success="#7AAA88",
        warning="#D9A85A",
        error="#C17B8B",
        muted="#ADA1C1",
        border="#2A2541",
        text="#EDE8F5",
    ),
}

DEFAULT_THEME = "claude-warm"


def get_theme(name: str) -> Theme:
    """Get a theme by name, falling back to the default theme."""
    return THEMES.get(name, THEMES[DEFAULT_THEME])


def get_theme_names() -> List[str]:
    """Get all theme names in registration order."""
    return list(THEMES.keys())
