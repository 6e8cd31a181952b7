"""
Summary Step

Shows the collected configuration and asks for confirmation before it is
written to disk.
"""

from typing import List

from rich.console import RenderableType
from rich.text import Text

from gitmind.wizard import keys
from gitmind.wizard.steps.base import Screen
from gitmind.wizard.ui import capitalize_first, mask_api_key, render_key_value
from gitmind.wizard.widgets import Button

SAVE = "save"
BACK = "back"


class SummaryScreen(Screen):
    """Read-only review with Save & Continue and Go Back buttons."""

    title = "Configuration Summary"
    description = "Review your configuration before saving:"
    shortcuts = [("Tab/←→", "Navigate"), ("Enter", "Confirm"), ("Esc", "Back")]

    def __init__(self, wizard):
        super().__init__(wizard)
        self.buttons = {SAVE: Button("Save & Continue"), BACK: Button("Go Back")}

    def visible_fields(self) -> List[str]:
        return [SAVE, BACK]

    def handle_key(self, key: str):
        field = self.focused_field()
        if key == keys.ENTER:
            if field == SAVE:
                self.wants_save = True
            else:
                self.wants_back = True
        elif key in (keys.LEFT, keys.UP):
            if field == BACK:
                self.focus = 0
            else:
                self.wants_back = True
        elif key in (keys.RIGHT, keys.DOWN, keys.TAB):
            self.focus_next()
        elif key == keys.ESC:
            self.wants_back = True

    # Rendering

    def _yes_no(self, value: bool) -> Text:
        if value:
            return Text("Yes", style=self.theme.status_ok)
        return Text("No", style=self.theme.status_warning)

    def _row(self, key: str, value) -> Text:
        if isinstance(value, Text):
            row = render_key_value(self.theme, key, "")
            row.append_text(value)
            return row
        return render_key_value(self.theme, key, value)

    def _section(self, title: str) -> List[RenderableType]:
        return [Text(""), Text(title, style=self.theme.header), Text("")]

    def render_body(self) -> List[RenderableType]:
        config = self.config
        body: List[RenderableType] = []

        body.extend(self._section("Git Configuration"))
        body.append(self._row("Main Branch", config.git.main_branch))
        body.append(self._row("Protected Branches", ", ".join(config.git.protected_branches)))
        body.append(self._row("Auto-push", self._yes_no(config.git.auto_push)))
        body.append(self._row("Auto-pull", self._yes_no(config.git.auto_pull)))

        body.extend(self._section("GitHub Integration"))
        body.append(self._row("Enabled", self._yes_no(config.github.enabled)))
        if config.github.enabled:
            body.append(self._row("Default Visibility", config.github.default_visibility))
            body.append(self._row("Default License", config.github.default_license))
            body.append(self._row("Default .gitignore", config.github.default_gitignore))

        body.extend(self._section("Commit Conventions"))
        body.append(self._row("Convention", capitalize_first(config.commits.convention)))
        if config.commits.convention == "conventional":
            body.append(self._row("Allowed Types", ", ".join(config.commits.types)))
            body.append(self._row("Require Scope", self._yes_no(config.commits.require_scope)))
            body.append(self._row("Require Breaking", self._yes_no(config.commits.require_breaking)))
        elif config.commits.convention == "custom":
            body.append(self._row("Template", config.commits.custom_template))

        body.extend(self._section("Branch Naming"))
        body.append(self._row("Enforce Patterns", self._yes_no(config.naming.enforce)))
        if config.naming.enforce:
            body.append(self._row("Pattern", config.naming.pattern))
            body.append(self._row("Allowed Prefixes", ", ".join(config.naming.allowed_prefixes)))

        body.extend(self._section("AI Provider"))
        body.append(self._row("Provider", capitalize_first(config.ai.provider)))
        masked = mask_api_key(config.ai.api_key)
        if masked:
            body.append(self._row("API Key", masked))
        else:
            body.append(self._row("API Key", Text("Not set", style=self.theme.status_error)))
        body.append(self._row("Tier", capitalize_first(config.ai.api_tier)))
        body.append(self._row("Default Model", config.ai.default_model))
        body.append(self._row("Fallback Model", config.ai.fallback_model))
        body.append(self._row("Include Context", self._yes_no(config.ai.include_context)))

        body.append(Text(""))
        buttons = Text()
        for field in self.visible_fields():
            button = self.buttons[field]
            button.focused = field == self.focused_field()
            buttons.append_text(button.render(self.theme))
            buttons.append("  ")
        body.append(buttons)
        return body
