"""
Branches Step

Main branch, protected branches and push/pull automation.
"""

from typing import List

from rich.console import RenderableType
from rich.text import Text

from gitmind.wizard.steps.base import CONTINUE, FormScreen
from gitmind.wizard.ui import render_help
from gitmind.wizard.validators import validate_branch_name
from gitmind.wizard.widgets import Button, Checkbox, CheckboxGroup, TextField

MAIN_BRANCH = "main_branch"
PROTECTED = "protected"
CUSTOM_BRANCH = "custom_branch"
AUTO_PUSH = "auto_push"
AUTO_PULL = "auto_pull"

PROTECTED_BRANCH_OPTIONS = ["main", "master", "develop", "production"]


class BranchesScreen(FormScreen):
    """Branch protection settings."""

    title = "Branch Configuration"
    description = "Configure your main branch and which branches GitMind should protect."
    shortcuts = [
        ("Tab/↑↓", "Navigate"),
        ("Space", "Toggle"),
        ("Enter", "Add/Select"),
        ("p", "Auto-pull"),
        ("←", "Back"),
    ]

    def __init__(self, wizard):
        super().__init__(wizard)
        git = self.config.git

        options = PROTECTED_BRANCH_OPTIONS + [
            b for b in git.protected_branches if b not in PROTECTED_BRANCH_OPTIONS
        ]
        checked = [option in git.protected_branches for option in options]

        self.widgets = {
            MAIN_BRANCH: TextField("Main Branch", "main", value=git.main_branch or "main"),
            PROTECTED: CheckboxGroup("Protected Branches", options, checked),
            CUSTOM_BRANCH: TextField("Add Custom Branch", "release/*"),
            AUTO_PUSH: Checkbox("Auto-push after commit", git.auto_push),
            AUTO_PULL: Checkbox("Auto-pull before operations", git.auto_pull),
            CONTINUE: Button("Continue"),
        }
        self.error_field = ""

    def on_enter(self, field: str, widget):
        if field == CUSTOM_BRANCH:
            self.add_custom_branch()
        else:
            super().on_enter(field, widget)

    def on_left(self, field: str):
        if field == MAIN_BRANCH:
            self.wants_back = True

    def on_edit(self, field: str):
        if field == self.error_field:
            self.set_error("", "")

    def on_shortcut(self, field: str, key: str):
        if key in ("p", "P"):
            self.widgets[AUTO_PULL].toggle()

    def set_error(self, field: str, message: str):
        self.error_field = field
        self.error = message

    def add_custom_branch(self):
        field = self.widgets[CUSTOM_BRANCH]
        name = field.value.strip()
        if not name:
            return
        is_valid, message = validate_branch_name(name)
        if not is_valid:
            self.set_error(CUSTOM_BRANCH, message)
            return

        group = self.widgets[PROTECTED]
        if name in group.labels():
            group.items[group.labels().index(name)].checked = True
        else:
            group.add(name, True)
        field.value = ""
        self.set_error("", "")

    def submit(self):
        main_branch = self.widgets[MAIN_BRANCH].value.strip()
        if not main_branch:
            self.set_error(MAIN_BRANCH, "Main branch is required")
            return
        is_valid, message = validate_branch_name(main_branch)
        if not is_valid:
            self.set_error(MAIN_BRANCH, message)
            return

        self.save_to_config(main_branch)
        self.wants_continue = True

    def save_to_config(self, main_branch: str):
        git = self.config.git
        git.main_branch = main_branch
        git.protected_branches = self.widgets[PROTECTED].get_checked()
        git.auto_push = self.widgets[AUTO_PUSH].checked
        git.auto_pull = self.widgets[AUTO_PULL].checked

    def render_body(self) -> List[RenderableType]:
        body: List[RenderableType] = []
        for field in self.visible_fields():
            body.append(self.render_widget(field))
            if field == MAIN_BRANCH:
                body.append(render_help(self.theme, "The branch your releases are cut from"))
            elif field == PROTECTED:
                body.append(render_help(self.theme, "GitMind warns before committing directly to these"))
            elif field == CUSTOM_BRANCH:
                body.append(render_help(self.theme, "Press Enter to add it to the list"))
            body.append(Text(""))
        return body
