"""
Naming Step

Branch naming rules with a live preview of matching branch names.
"""

from typing import List

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from gitmind.wizard.preview import DEFAULT_BRANCH_PATTERN, branch_preview
from gitmind.wizard.steps.base import CONTINUE, FormScreen
from gitmind.wizard.ui import render_help
from gitmind.wizard.widgets import Button, Checkbox, CheckboxGroup, TextField

ENFORCE = "enforce"
PATTERN = "pattern"
PREFIXES = "prefixes"
CUSTOM_PREFIX = "custom_prefix"

DEFAULT_PREFIXES = ["feature", "hotfix", "bugfix", "release", "refactor"]


class NamingScreen(FormScreen):
    """Branch naming convention settings."""

    title = "Branch Naming Patterns"
    description = "Configure branch naming conventions for consistency."

    def __init__(self, wizard):
        super().__init__(wizard)
        naming = self.config.naming

        prefixes = DEFAULT_PREFIXES + [p for p in naming.allowed_prefixes if p not in DEFAULT_PREFIXES]
        if naming.enforce and naming.allowed_prefixes:
            checked = [p in naming.allowed_prefixes for p in prefixes]
        else:
            checked = [True] * len(prefixes)

        self.widgets = {
            ENFORCE: Checkbox("Enforce branch naming patterns", naming.enforce),
            PATTERN: TextField(
                "Branch Pattern",
                DEFAULT_BRANCH_PATTERN,
                value=naming.pattern or DEFAULT_BRANCH_PATTERN
            ),
            PREFIXES: CheckboxGroup("Allowed Prefixes", prefixes, checked),
            CUSTOM_PREFIX: TextField("Add Custom Prefix", "chore"),
            CONTINUE: Button("Continue"),
        }
        self.preview = ""
        self.update_preview()

    @property
    def enforced(self) -> bool:
        return self.widgets[ENFORCE].checked

    def visible_fields(self) -> List[str]:
        if self.enforced:
            return [ENFORCE, PATTERN, PREFIXES, CUSTOM_PREFIX, CONTINUE]
        return [ENFORCE, CONTINUE]

    def update(self, key: str):
        super().update(key)
        self.update_preview()

    def update_preview(self):
        self.preview = branch_preview(
            self.enforced,
            self.widgets[PATTERN].value,
            self.widgets[PREFIXES].get_checked(),
        )

    def on_enter(self, field: str, widget):
        if field == CUSTOM_PREFIX:
            self.add_custom_prefix()
        else:
            super().on_enter(field, widget)

    def on_left(self, field: str):
        if field == ENFORCE:
            self.wants_back = True

    def add_custom_prefix(self):
        field = self.widgets[CUSTOM_PREFIX]
        prefix = field.value.strip().strip("/")
        if not prefix:
            return
        group = self.widgets[PREFIXES]
        if prefix in group.labels():
            group.items[group.labels().index(prefix)].checked = True
        else:
            group.add(prefix, True)
        field.value = ""

    def submit(self):
        self.save_to_config()
        self.wants_continue = True

    def save_to_config(self):
        naming = self.config.naming
        naming.enforce = self.enforced
        naming.pattern = self.widgets[PATTERN].value
        naming.allowed_prefixes = self.widgets[PREFIXES].get_checked()

    def render_body(self) -> List[RenderableType]:
        body: List[RenderableType] = []
        for field in self.visible_fields():
            if field == CONTINUE:
                body.append(Panel(
                    Text(self.preview, style=self.theme.text),
                    title="Preview",
                    border_style=self.theme.border,
                    expand=False,
                ))
                body.append(Text(""))
            body.append(self.render_widget(field))
            if field == ENFORCE:
                body.append(render_help(self.theme, "Require branches to follow naming patterns"))
            elif field == PATTERN:
                body.append(render_help(self.theme, "Use placeholders: {prefix}, {description}, {issue}"))
            elif field == CUSTOM_PREFIX:
                body.append(render_help(self.theme, "Press Enter to add it to the list"))
            body.append(Text(""))
        return body
