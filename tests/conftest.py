"""Shared fixtures and fakes for GitMind tests."""

import logging
from pathlib import Path

import pytest

from gitmind.config import Config
from gitmind.wizard.exceptions import ConfigError, GitError, GitHubError


class FakeGitOps:
    """In-memory stand-in for GitOperations."""

    def __init__(self, is_repo=True, remote=False, init_error=None):
        self.is_repo = is_repo
        self.remote = remote
        self.init_error = init_error
        self.init_calls = []

    def is_git_repo(self, path):
        return self.is_repo

    def has_remote(self, path, name="origin"):
        return self.remote

    def init_repository(self, path):
        self.init_calls.append(Path(path))
        if self.init_error:
            raise GitError(self.init_error, command="git init")
        self.is_repo = True


class FakeGitHubOps:
    """In-memory stand-in for GitHubOperations."""

    def __init__(self, available=True, authenticated=True, user="octocat",
                 create_error=None, remote_error=None):
        self.available = available
        self.authenticated = authenticated
        self.user = user
        self.create_error = create_error
        self.remote_error = remote_error
        self.created = []
        self.remotes = []

    def is_available(self):
        return self.available

    def is_authenticated(self):
        return self.authenticated

    def current_user(self):
        return self.user

    def create_repository(self, options):
        if self.create_error:
            raise GitHubError(self.create_error)
        self.created.append(options)

    def set_remote(self, path, url, name="origin"):
        if self.remote_error:
            raise GitHubError(self.remote_error)
        self.remotes.append((name, url))

    @staticmethod
    def repo_url(owner, name):
        return f"https://github.com/{owner}/{name}.git"


class FakeConfigManager:
    """Records saved configurations instead of writing files."""

    def __init__(self, path=None, save_error=None):
        self.path = path or Path("/tmp/gitmind-test/config.yaml")
        self.save_error = save_error
        self.saved = []

    def exists(self):
        return bool(self.saved)

    def load(self):
        return self.saved[-1] if self.saved else Config()

    def save(self, config):
        if self.save_error:
            raise ConfigError(self.save_error, config_path=str(self.path))
        self.saved.append(config)


@pytest.fixture
def git_ops():
    return FakeGitOps()


@pytest.fixture
def github_ops():
    return FakeGitHubOps()


@pytest.fixture
def config_manager(tmp_path):
    return FakeConfigManager(path=tmp_path / "config.yaml")


@pytest.fixture
def make_wizard(tmp_path, git_ops, github_ops, config_manager):
    """Factory for a wizard wired to fakes; keyword arguments override them."""
    from gitmind.wizard.orchestrator import WizardOrchestrator

    def _make(**overrides):
        params = {
            "config": Config(),
            "config_manager": config_manager,
            "git_ops": git_ops,
            "github_ops": github_ops,
            "repo_path": tmp_path,
        }
        params.update(overrides)
        return WizardOrchestrator(**params)

    return _make


@pytest.fixture
def wizard(make_wizard):
    return make_wizard()


def press(target, *keys):
    """Feed keys to a wizard or screen one at a time."""
    for key in keys:
        if hasattr(target, "update"):
            target.update(key)
        else:
            target.handle_key(key)


def type_text(target, text):
    press(target, *list(text))


def focus_on(screen, field):
    """Move the focus cursor directly to a visible field."""
    screen.focus = screen.visible_fields().index(field)


@pytest.fixture
def reset_gitmind_logger():
    """Close and drop handlers installed by setup_logging."""
    yield
    logger = logging.getLogger("gitmind")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
