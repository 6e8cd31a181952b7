"""
Welcome Step

Introduces GitMind and offers to skip setup entirely.
"""

from typing import List

from rich.console import Group, RenderableType
from rich.text import Text

from gitmind.wizard import keys
from gitmind.wizard.steps.base import Screen
from gitmind.wizard.ui import render_footer, render_progress_dots, render_separator

LOGO = r"""
   ____ _ _   __  __ _           _
  / ___(_) |_|  \/  (_)_ __   __| |
 | |  _| | __| |\/| | | '_ \ / _` |
 | |_| | | |_| |  | | | | | | (_| |
  \____|_|\__|_|  |_|_|_| |_|\__,_|
"""

WELCOME_TEXT = (
    "Welcome to GitMind! This wizard will help you configure your workspace.\n\n"
    "We'll set up Git integration, AI providers, and workflow preferences.\n"
    "The setup takes approximately 2-3 minutes to complete."
)


class WelcomeScreen(Screen):
    """Enter continues; Esc or q skips the whole wizard."""

    title = "Welcome"
    shortcuts = [("Enter", "Continue"), ("Esc", "Skip setup")]

    def handle_key(self, key: str):
        if key == keys.ENTER:
            self.wants_continue = True
        elif key in (keys.ESC, "q"):
            self.wants_skip = True

    def render_body(self) -> List[RenderableType]:
        return [
            Text(LOGO, style=self.theme.header),
            Text("AI-Powered Git Workflow Intelligence", style=f"italic {self.theme.muted}"),
            Text(""),
            render_progress_dots(self.theme, self.step, self.total_steps),
            Text(""),
            Text(WELCOME_TEXT, style=self.theme.text),
        ]

    def render(self) -> RenderableType:
        return Group(
            *self.render_body(),
            Text(""),
            render_separator(self.theme),
            render_footer(self.theme, self.shortcuts),
        )
