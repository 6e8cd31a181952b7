"""
GitMind Wizard Orchestrator

A state machine over the setup steps. Forward transitions build a fresh
screen from the current configuration; backward transitions reactivate the
screen instance that was left, exactly as it was.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Type, Union

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from gitmind.config import Config, ConfigManager
from gitmind.git_ops import GitHubOperations, GitOperations
from gitmind.wizard.exceptions import ConfigError
from gitmind.wizard.keys import CANCEL_KEY
from gitmind.wizard.logging_config import get_logger
from gitmind.wizard.steps import Screen, register_default_steps
from gitmind.wizard.theme import Theme, get_theme

logger = get_logger("wizard")

TOTAL_STEPS = 8


class WizardStep(Enum):
    """Wizard steps in forward order."""
    WELCOME = "welcome"
    GIT_INIT = "git_init"
    GITHUB = "github"
    BRANCHES = "branches"
    COMMITS = "commits"
    NAMING = "naming"
    AI = "ai"
    SUMMARY = "summary"
    COMPLETE = "complete"


STEP_ORDER: List[WizardStep] = list(WizardStep)


@dataclass
class StepDefinition:
    """Definition of a wizard step."""
    step: WizardStep
    title: str
    description: str
    screen_cls: Type[Screen]


class WizardOrchestrator:
    """Drives the setup screens and owns the shared configuration."""

    def __init__(
        self,
        config: Optional[Config] = None,
        config_manager: Optional[ConfigManager] = None,
        git_ops: Optional[GitOperations] = None,
        github_ops: Optional[GitHubOperations] = None,
        repo_path: Optional[Path] = None,
        theme: Optional[Theme] = None,
        register_defaults: bool = True
    ):
        self.config = config or Config()
        self.config_manager = config_manager or ConfigManager()
        self.git_ops = git_ops or GitOperations()
        self.github_ops = github_ops or GitHubOperations()
        self.repo_path = Path(repo_path) if repo_path else Path.cwd()
        self.theme = theme or get_theme(self.config.ui.theme)

        self.steps: Dict[WizardStep, StepDefinition] = {}
        self.screens: Dict[WizardStep, Screen] = {}
        self.step = WizardStep.WELCOME
        self.current_step = 1
        self.total_steps = TOTAL_STEPS

        self.completed = False
        self.cancelled = False
        self.save_error = ""

        if register_defaults:
            register_default_steps(self)
            self.start()

    def add_step(
        self,
        step: Union[WizardStep, str],
        title: str,
        description: str,
        screen_cls: Type[Screen]
    ):
        """Register the screen class for a step."""
        step = WizardStep(step)
        self.steps[step] = StepDefinition(
            step=step,
            title=title,
            description=description,
            screen_cls=screen_cls
        )

    def start(self):
        """Build and activate the first screen."""
        self.step = WizardStep.WELCOME
        self.current_step = 1
        self._activate_fresh(WizardStep.WELCOME)

    @property
    def active_screen(self) -> Optional[Screen]:
        return self.screens.get(self.step)

    def is_completed(self) -> bool:
        return self.completed

    def is_cancelled(self) -> bool:
        return self.cancelled

    def handle_key(self, key: str):
        """Process one key: the global cancel key, otherwise the active screen.

        At most one transition happens per key. Keys received after the
        wizard completed or was cancelled are ignored.
        """
        if self.completed or self.cancelled:
            return

        if key == CANCEL_KEY:
            self.cancel()
            return

        screen = self.active_screen
        if screen is None:
            return

        screen.update(key)

        if screen.should_save():
            self.save_and_complete()
        elif screen.should_continue():
            self.go_forward()
        elif screen.should_go_back():
            self.go_back()
        elif screen.should_skip() and self.step == WizardStep.WELCOME:
            self.cancel()

    def go_forward(self):
        index = STEP_ORDER.index(self.step)
        next_step = STEP_ORDER[index + 1]
        if next_step == WizardStep.COMPLETE:
            self.save_and_complete()
            return

        logger.debug(f"Wizard forward: {self.step.value} -> {next_step.value}")
        self.current_step += 1
        self.step = next_step
        self._activate_fresh(next_step)

    def go_back(self):
        index = STEP_ORDER.index(self.step)
        if index == 0:
            return
        previous = STEP_ORDER[index - 1]
        logger.debug(f"Wizard back: {self.step.value} -> {previous.value}")
        self.current_step -= 1
        self.step = previous

    def _activate_fresh(self, step: WizardStep):
        screen = self.steps[step].screen_cls(self)
        self.screens[step] = screen
        screen.init()

    def cancel(self):
        logger.debug(f"Wizard cancelled at {self.step.value}")
        self.cancelled = True

    def save_and_complete(self):
        """Persist the configuration and finish.

        A failed save is recorded in save_error; the wizard still completes.
        """
        try:
            self.config_manager.save(self.config)
        except ConfigError as e:
            logger.error(f"Failed to save configuration: {e}")
            self.save_error = e.message
        self.step = WizardStep.COMPLETE
        self.completed = True
        logger.debug("Wizard complete")

    def render(self) -> RenderableType:
        if self.cancelled:
            return Panel(
                Text("Setup cancelled. Run 'gitmind onboard' to start again.", style=self.theme.muted),
                border_style=self.theme.border,
            )

        if self.completed:
            lines: List[RenderableType] = []
            if self.save_error:
                lines.append(Text(f"Error: {self.save_error}", style=self.theme.status_error))
            else:
                lines.append(Text("✓ Configuration saved", style=self.theme.status_ok))
                lines.append(Text(str(self.config_manager.path), style=self.theme.muted))
                lines.append(Text(""))
                lines.append(Text("GitMind is ready to use.", style=self.theme.text))
            return Panel(Group(*lines), title="Setup Complete", border_style=self.theme.primary)

        return self.active_screen.render()
