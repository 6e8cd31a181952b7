"""
Git Repository Step

Detects whether the workspace is a git repository and offers to run
``git init`` when it is not.
"""

from typing import List

from rich.console import RenderableType
from rich.text import Text

from gitmind.wizard import keys
from gitmind.wizard.exceptions import GitError
from gitmind.wizard.logging_config import get_logger
from gitmind.wizard.steps.base import Screen
from gitmind.wizard.ui import render_status

logger = get_logger("wizard.git_init")


class GitInitScreen(Screen):
    """Repository detection and initialisation.

    Enter continues when a repository exists, otherwise it runs git init.
    A failed init leaves the error on screen and can be retried.
    """

    title = "Git Repository Setup"
    shortcuts = [("Enter", "Continue / Initialize"), ("s", "Skip"), ("←/Esc", "Back")]

    def __init__(self, wizard):
        super().__init__(wizard)
        self.git_ops = wizard.git_ops
        self.repo_path = wizard.repo_path
        self.is_git_repo = False
        self.has_remote = False
        self.init_complete = False

    def init(self):
        self.is_git_repo = self.git_ops.is_git_repo(self.repo_path)
        self.has_remote = self.is_git_repo and self.git_ops.has_remote(self.repo_path)

    def handle_key(self, key: str):
        if key == keys.ENTER:
            if self.is_git_repo or self.init_complete:
                self.wants_continue = True
            else:
                self.initialize()
        elif key in (keys.LEFT, keys.ESC):
            self.wants_back = True
        elif key in ("s", "S"):
            self.wants_continue = True

    def initialize(self):
        try:
            self.git_ops.init_repository(self.repo_path)
        except GitError as e:
            logger.debug(f"git init failed: {e}")
            self.error = e.message
            return
        self.error = ""
        self.init_complete = True
        self.is_git_repo = True

    def render_body(self) -> List[RenderableType]:
        muted = self.theme.muted
        if self.init_complete:
            return [render_status(self.theme, True, "Git repository initialized")]

        if not self.is_git_repo:
            return [
                render_status(self.theme, False, "No git repository found"),
                Text(""),
                Text(
                    "GitMind works best with git repositories. "
                    "Press Enter to initialize one now.",
                    style=muted
                ),
            ]

        body: List[RenderableType] = [render_status(self.theme, True, "Git repository detected")]
        if self.has_remote:
            body.append(Text(""))
            body.append(Text(
                "Your workspace is already a git repository with remote. You're all set!",
                style=muted
            ))
        else:
            body.append(render_status(self.theme, False, "No remote configured"))
            body.append(Text(""))
            body.append(Text(
                "Your repository doesn't have a remote origin.\n"
                "You can configure GitHub integration in the next step.",
                style=muted
            ))
        return body
