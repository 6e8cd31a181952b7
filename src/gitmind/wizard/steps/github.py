"""
GitHub Step

Creates a GitHub repository for the workspace through the gh CLI. When gh
is missing or unauthenticated, or the repository already has an origin
remote, the screen only explains the situation and lets the user move on.
"""

from pathlib import Path
from typing import List

from rich.console import RenderableType
from rich.text import Text

from gitmind.git_ops import GITIGNORE_TEMPLATES, LICENSE_TEMPLATES, CreateRepoOptions
from gitmind.wizard import keys
from gitmind.wizard.exceptions import GitHubError, ValidationError
from gitmind.wizard.logging_config import get_logger
from gitmind.wizard.steps.base import CONTINUE, FormScreen
from gitmind.wizard.ui import render_help, render_status
from gitmind.wizard.validators import validate_repo_name
from gitmind.wizard.widgets import Button, Checkbox, Dropdown, RadioGroup, TextField

logger = get_logger("wizard.github")

REPO_NAME = "repo_name"
DESCRIPTION = "description"
VISIBILITY = "visibility"
LICENSE = "license"
GITIGNORE = "gitignore"
ADD_README = "add_readme"
ENABLE_ISSUES = "enable_issues"
ENABLE_WIKI = "enable_wiki"
ENABLE_PROJECTS = "enable_projects"

VISIBILITY_OPTIONS = ["Public", "Private"]


def _index_of(options: List[str], value: str) -> int:
    return options.index(value) if value in options else 0


class GitHubScreen(FormScreen):
    """GitHub repository creation."""

    title = "GitHub Repository"
    description = "Create a GitHub repository for this workspace."
    shortcuts = [("Tab/↑↓", "Navigate"), ("Space/←→", "Select"), ("s", "Skip"), ("Esc", "Back")]

    def __init__(self, wizard):
        super().__init__(wizard)
        self.github_ops = wizard.github_ops
        self.git_ops = wizard.git_ops
        self.repo_path = Path(wizard.repo_path)

        self.gh_available = False
        self.gh_authenticated = False
        self.has_remote = False
        self.check_complete = False
        self.created = False

        github = self.config.github
        self.widgets = {
            REPO_NAME: TextField("Repository Name", "my-project", value=self.repo_path.resolve().name),
            DESCRIPTION: TextField("Description", "Created with GitMind"),
            VISIBILITY: RadioGroup(
                "Visibility",
                VISIBILITY_OPTIONS,
                1 if github.default_visibility == "private" else 0
            ),
            LICENSE: Dropdown("License", LICENSE_TEMPLATES, _index_of(LICENSE_TEMPLATES, github.default_license)),
            GITIGNORE: Dropdown(
                ".gitignore Template",
                GITIGNORE_TEMPLATES,
                _index_of(GITIGNORE_TEMPLATES, github.default_gitignore)
            ),
            ADD_README: Checkbox("Add README.md", True),
            ENABLE_ISSUES: Checkbox("Enable Issues", github.enable_issues),
            ENABLE_WIKI: Checkbox("Enable Wiki", github.enable_wiki),
            ENABLE_PROJECTS: Checkbox("Enable Projects", github.enable_projects),
            CONTINUE: Button("Create Repository"),
        }

    def init(self):
        self.gh_available = self.github_ops.is_available()
        self.gh_authenticated = self.gh_available and self.github_ops.is_authenticated()
        self.has_remote = self.git_ops.has_remote(self.repo_path)
        self.check_complete = True
        logger.debug(
            f"gh available={self.gh_available} authenticated={self.gh_authenticated} "
            f"remote={self.has_remote}"
        )

    @property
    def form_mode(self) -> bool:
        return self.gh_available and self.gh_authenticated and not self.has_remote

    def handle_key(self, key: str):
        if not self.form_mode:
            if key == keys.ENTER:
                self.wants_continue = True
            elif key == keys.ESC:
                self.wants_back = True
            elif key in ("s", "S"):
                self.skip()
            return
        super().handle_key(key)

    def skip(self):
        self.wants_skip = True
        self.wants_continue = True

    def on_shortcut(self, field: str, key: str):
        if key in ("s", "S"):
            self.skip()

    def on_edit(self, field: str):
        if field == REPO_NAME:
            self.error = ""

    def submit(self):
        repo_name = self.widgets[REPO_NAME].value
        is_valid, message = validate_repo_name(repo_name)
        if not is_valid:
            self.error = message
            return
        self.create_repository()

    def build_options(self) -> CreateRepoOptions:
        w = self.widgets
        return CreateRepoOptions(
            name=w[REPO_NAME].value,
            description=w[DESCRIPTION].value,
            visibility=w[VISIBILITY].get_selected().lower(),
            license=w[LICENSE].get_selected(),
            gitignore=w[GITIGNORE].get_selected(),
            add_readme=w[ADD_README].checked,
            enable_issues=w[ENABLE_ISSUES].checked,
            enable_wiki=w[ENABLE_WIKI].checked,
            enable_projects=w[ENABLE_PROJECTS].checked,
        )

    def create_repository(self):
        options = self.build_options()
        try:
            owner = self.github_ops.current_user()
            self.github_ops.create_repository(options)
        except (GitHubError, ValidationError) as e:
            self.error = e.message
            return

        try:
            self.github_ops.set_remote(self.repo_path, self.github_ops.repo_url(owner, options.name))
        except GitHubError as e:
            self.error = f"Repository created but failed to set remote: {e.message}"
            return

        self.save_to_config(options)
        self.error = ""
        self.created = True
        self.wants_continue = True

    def save_to_config(self, options: CreateRepoOptions):
        github = self.config.github
        github.enabled = True
        github.default_visibility = options.visibility
        github.default_license = options.license
        github.default_gitignore = options.gitignore
        github.enable_issues = options.enable_issues
        github.enable_wiki = options.enable_wiki
        github.enable_projects = options.enable_projects

    def render_body(self) -> List[RenderableType]:
        if not self.gh_available:
            return [
                render_status(self.theme, False, "GitHub CLI (gh) not found"),
                Text(""),
                Text("Install it from https://cli.github.com/ to create repositories.", style=self.theme.muted),
                Text("Press Enter to continue or s to skip.", style=self.theme.muted),
            ]
        if not self.gh_authenticated:
            return [
                render_status(self.theme, False, "GitHub CLI is not authenticated"),
                Text(""),
                Text("Run 'gh auth login' and restart setup to create a repository.", style=self.theme.muted),
                Text("Press Enter to continue or s to skip.", style=self.theme.muted),
            ]
        if self.has_remote:
            return [
                render_status(self.theme, True, "Remote origin already configured"),
                Text(""),
                Text("Press Enter to continue.", style=self.theme.muted),
            ]

        body: List[RenderableType] = []
        for field in self.visible_fields():
            body.append(self.render_widget(field))
            if field == GITIGNORE:
                body.append(render_help(self.theme, "Use ←/→ to choose while a list is open"))
        return body
