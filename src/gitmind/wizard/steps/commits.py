"""
Commits Step

Commit message convention with a live example of the resulting format.
"""

from typing import List

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from gitmind.wizard.preview import (
    CONVENTION_CONVENTIONAL,
    CONVENTION_CUSTOM,
    DEFAULT_COMMIT_TEMPLATE,
    commit_preview,
)
from gitmind.wizard.steps.base import CONTINUE, FormScreen
from gitmind.wizard.ui import render_help
from gitmind.wizard.widgets import Button, Checkbox, CheckboxGroup, RadioGroup, TextField

CONVENTION = "convention"
TYPES = "types"
REQUIRE_SCOPE = "require_scope"
REQUIRE_BREAKING = "require_breaking"
TEMPLATE = "template"

CONVENTION_OPTIONS = [
    "Conventional Commits (recommended)",
    "Custom Template",
    "None (freeform)",
]
CONVENTION_VALUES = ["conventional", "custom", "none"]

DEFAULT_COMMIT_TYPES = ["feat", "fix", "docs", "style", "refactor", "test", "chore"]


class CommitsScreen(FormScreen):
    """Commit convention settings.

    Which fields are visible depends on the selected convention; the focus
    cursor only ever cycles over the visible ones.
    """

    title = "Commit Conventions"
    description = "Choose how you want to format commit messages."

    def __init__(self, wizard):
        super().__init__(wizard)
        commits = self.config.commits

        types = DEFAULT_COMMIT_TYPES + [t for t in commits.types if t not in DEFAULT_COMMIT_TYPES]
        if commits.convention == "conventional" and commits.types:
            checked = [t in commits.types for t in types]
        else:
            checked = [True] * len(types)

        convention = (
            CONVENTION_VALUES.index(commits.convention)
            if commits.convention in CONVENTION_VALUES else CONVENTION_CONVENTIONAL
        )

        self.widgets = {
            CONVENTION: RadioGroup("Commit Convention", CONVENTION_OPTIONS, convention),
            TYPES: CheckboxGroup("Allowed Commit Types", types, checked),
            REQUIRE_SCOPE: Checkbox("Require scope in commits", commits.require_scope),
            REQUIRE_BREAKING: Checkbox("Require breaking change marker", commits.require_breaking),
            TEMPLATE: TextField("Custom Template", DEFAULT_COMMIT_TEMPLATE, value=commits.custom_template),
            CONTINUE: Button("Continue"),
        }
        self.preview = ""
        self.update_preview()

    @property
    def convention(self) -> int:
        return self.widgets[CONVENTION].selected

    def visible_fields(self) -> List[str]:
        if self.convention == CONVENTION_CONVENTIONAL:
            return [CONVENTION, TYPES, REQUIRE_SCOPE, REQUIRE_BREAKING, CONTINUE]
        if self.convention == CONVENTION_CUSTOM:
            return [CONVENTION, TEMPLATE, CONTINUE]
        return [CONVENTION, CONTINUE]

    def update(self, key: str):
        super().update(key)
        self.update_preview()

    def update_preview(self):
        w = self.widgets
        self.preview = commit_preview(
            self.convention,
            w[TYPES].get_checked(),
            w[REQUIRE_SCOPE].checked,
            w[REQUIRE_BREAKING].checked,
            w[TEMPLATE].value,
        )

    def on_left(self, field: str):
        if field in (REQUIRE_SCOPE, REQUIRE_BREAKING, CONTINUE):
            self.wants_back = True

    def submit(self):
        self.save_to_config()
        self.wants_continue = True

    def save_to_config(self):
        commits = self.config.commits
        w = self.widgets
        commits.convention = CONVENTION_VALUES[self.convention]
        if self.convention == CONVENTION_CONVENTIONAL:
            commits.types = w[TYPES].get_checked()
            commits.require_scope = w[REQUIRE_SCOPE].checked
            commits.require_breaking = w[REQUIRE_BREAKING].checked
            commits.custom_template = ""
        elif self.convention == CONVENTION_CUSTOM:
            commits.types = []
            commits.require_scope = False
            commits.require_breaking = False
            commits.custom_template = w[TEMPLATE].value
        else:
            commits.types = []
            commits.require_scope = False
            commits.require_breaking = False
            commits.custom_template = ""

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
            if field == TEMPLATE:
                body.append(render_help(
                    self.theme, "Placeholders: {type} {scope} {description} {body}"
                ))
            body.append(Text(""))
        return body
