"""
GitMind Wizard Steps

One screen class per wizard step.
"""

from gitmind.wizard.steps.base import FormScreen, Screen
from gitmind.wizard.steps.welcome import WelcomeScreen
from gitmind.wizard.steps.git_init import GitInitScreen
from gitmind.wizard.steps.github import GitHubScreen
from gitmind.wizard.steps.branches import BranchesScreen
from gitmind.wizard.steps.commits import CommitsScreen
from gitmind.wizard.steps.naming import NamingScreen
from gitmind.wizard.steps.ai import AIScreen
from gitmind.wizard.steps.summary import SummaryScreen

# Step definitions for the wizard orchestrator, in forward order
WIZARD_STEPS = [
    {
        "step": "welcome",
        "title": "Welcome",
        "description": "Overview of GitMind and what will be configured",
        "screen": WelcomeScreen,
    },
    {
        "step": "git_init",
        "title": "Git Repository",
        "description": "Detect or initialize the git repository",
        "screen": GitInitScreen,
    },
    {
        "step": "github",
        "title": "GitHub",
        "description": "Optionally create a GitHub repository",
        "screen": GitHubScreen,
    },
    {
        "step": "branches",
        "title": "Branches",
        "description": "Main branch, protected branches and automation",
        "screen": BranchesScreen,
    },
    {
        "step": "commits",
        "title": "Commits",
        "description": "Commit message convention",
        "screen": CommitsScreen,
    },
    {
        "step": "naming",
        "title": "Branch Naming",
        "description": "Branch naming rules",
        "screen": NamingScreen,
    },
    {
        "step": "ai",
        "title": "AI Provider",
        "description": "AI provider, credentials and models",
        "screen": AIScreen,
    },
    {
        "step": "summary",
        "title": "Summary",
        "description": "Review and save the configuration",
        "screen": SummaryScreen,
    },
]


def register_default_steps(wizard):
    """Register every default step on the wizard."""
    for definition in WIZARD_STEPS:
        wizard.add_step(
            definition["step"],
            definition["title"],
            definition["description"],
            definition["screen"],
        )


__all__ = [
    "Screen",
    "FormScreen",
    "WelcomeScreen",
    "GitInitScreen",
    "GitHubScreen",
    "BranchesScreen",
    "CommitsScreen",
    "NamingScreen",
    "AIScreen",
    "SummaryScreen",
    "WIZARD_STEPS",
    "register_default_steps",
]
