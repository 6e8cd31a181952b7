"""
GitMind Configuration

The configuration model filled in by the setup wizard and its YAML
persistence. Screens read a Config at construction time and write to it
only on a forward transition; ConfigManager is the single place that
touches the file on disk.
"""

import os
from dataclasses import MISSING, asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from gitmind.wizard.exceptions import ConfigError
from gitmind.wizard.logging_config import get_logger

logger = get_logger("config")

CONFIG_VERSION = "2.0"
CONFIG_ENV_VAR = "GITMIND_CONFIG"

CONVENTIONS = ["conventional", "custom", "none"]
VISIBILITIES = ["public", "private"]


@dataclass
class GitConfig:
    main_branch: str = "main"
    protected_branches: List[str] = field(default_factory=lambda: ["main", "master", "develop"])
    auto_push: bool = False
    auto_pull: bool = False


@dataclass
class GitHubConfig:
    enabled: bool = False
    default_visibility: str = "public"
    default_license: str = "MIT"
    default_gitignore: str = "Go"
    enable_issues: bool = True
    enable_wiki: bool = False
    enable_projects: bool = False
    pr_default_base: str = "main"
    pr_use_template: bool = True
    pr_default_draft: bool = False
    pr_default_labels: List[str] = field(default_factory=list)
    pr_auto_delete_branch: bool = False


@dataclass
class CommitsConfig:
    convention: str = "conventional"
    types: List[str] = field(
        default_factory=lambda: ["feat", "fix", "docs", "style", "refactor", "test", "chore"]
    )
    require_scope: bool = False
    require_breaking: bool = False
    custom_template: str = ""


@dataclass
class NamingConfig:
    enforce: bool = False
    pattern: str = "feature/{description}"
    allowed_prefixes: List[str] = field(
        default_factory=lambda: ["feature", "hotfix", "bugfix", "release", "refactor"]
    )


@dataclass
class AIConfig:
    provider: str = "cerebras"
    api_key: str = ""
    api_tier: str = "free"
    default_model: str = "llama-3.3-70b"
    fallback_model: str = "llama3.1-8b"
    max_diff_size: int = 100000
    include_context: bool = True


@dataclass
class UIConfig:
    theme: str = "claude-warm"


def _field_default(f):
    if f.default is not MISSING:
        return f.default
    return f.default_factory()


def _section_from_dict(section_cls, data: Any):
    """Build a section dataclass from a YAML mapping.

    Unknown keys are ignored. Null values and values whose type does not
    match the field's default fall back to that default.
    """
    if not isinstance(data, dict):
        return section_cls()

    values = {}
    for f in fields(section_cls):
        if f.name not in data:
            continue
        value = data[f.name]
        expected = type(_field_default(f))
        if type(value) is not expected:
            logger.warning(f"Ignoring {section_cls.__name__}.{f.name}: expected {expected.__name__}")
            continue
        if expected is list:
            value = [str(item) for item in value if item is not None]
        values[f.name] = value
    return section_cls(**values)


@dataclass
class Config:
    """Complete GitMind configuration."""
    version: str = CONFIG_VERSION
    git: GitConfig = field(default_factory=GitConfig)
    github: GitHubConfig = field(default_factory=GitHubConfig)
    commits: CommitsConfig = field(default_factory=CommitsConfig)
    naming: NamingConfig = field(default_factory=NamingConfig)
    ai: AIConfig = field(default_factory=AIConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Config":
        """Build a Config from parsed YAML.

        Unknown keys are ignored and missing keys take their defaults.
        """
        data = data or {}
        version = data.get("version", CONFIG_VERSION)
        return cls(
            version="" if version is None else str(version),
            git=_section_from_dict(GitConfig, data.get("git")),
            github=_section_from_dict(GitHubConfig, data.get("github")),
            commits=_section_from_dict(CommitsConfig, data.get("commits")),
            naming=_section_from_dict(NamingConfig, data.get("naming")),
            ai=_section_from_dict(AIConfig, data.get("ai")),
            ui=_section_from_dict(UIConfig, data.get("ui")),
        )

    def validate(self) -> List[str]:
        """Check the configuration for consistency.

        Returns:
            List of error messages; empty when the configuration is valid
        """
        errors = []

        if not self.git.main_branch:
            errors.append("git.main_branch cannot be empty")

        if self.github.enabled and self.github.default_visibility not in VISIBILITIES:
            errors.append("github.default_visibility must be 'public' or 'private'")

        if self.commits.convention not in CONVENTIONS:
            errors.append("commits.convention must be 'conventional', 'custom', or 'none'")
        elif self.commits.convention == "conventional" and not self.commits.types:
            errors.append("commits.types cannot be empty when using conventional commits")
        elif self.commits.convention == "custom" and not self.commits.custom_template:
            errors.append("commits.custom_template cannot be empty when using custom convention")

        if not self.ai.provider:
            errors.append("ai.provider cannot be empty")
        if not self.ai.api_key:
            errors.append("ai.api_key cannot be empty")
        if not self.ai.default_model:
            errors.append("ai.default_model cannot be empty")

        return errors

    def is_protected_branch(self, branch: str) -> bool:
        return branch in self.git.protected_branches

    def is_valid_commit_type(self, commit_type: str) -> bool:
        return commit_type in self.commits.types

    def is_valid_branch_prefix(self, prefix: str) -> bool:
        """Check a branch prefix; every prefix is valid when naming is not enforced."""
        if not self.naming.enforce:
            return True
        return prefix in self.naming.allowed_prefixes


def get_default_config_path() -> Path:
    """Get the config file path, honouring GITMIND_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".gitmind" / "config.yaml"


class ConfigManager:
    """Loads and saves the configuration file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else get_default_config_path()

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Config:
        """Load the configuration, returning defaults when the file is missing.

        Raises:
            ConfigError: If the file cannot be read or is not valid YAML
        """
        if not self.path.exists():
            logger.debug(f"No config at {self.path}, using defaults")
            return Config()

        try:
            data = yaml.safe_load(self.path.read_text())
        except yaml.YAMLError as e:
            raise ConfigError(
                "Configuration file is not valid YAML",
                config_path=str(self.path),
                details=str(e)
            ) from e
        except OSError as e:
            raise ConfigError(
                "Failed to read configuration file",
                config_path=str(self.path),
                details=str(e)
            ) from e

        if data is not None and not isinstance(data, dict):
            raise ConfigError(
                "Configuration file must contain a mapping",
                config_path=str(self.path)
            )

        return Config.from_dict(data)

    def save(self, config: Config):
        """Write the configuration as YAML with owner-only permissions.

        Raises:
            ConfigError: If the directory or file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False)
            )
            os.chmod(self.path, 0o600)
        except OSError as e:
            raise ConfigError(
                "Failed to save configuration",
                config_path=str(self.path),
                details=str(e)
            ) from e

        logger.info(f"Configuration saved to {self.path}")


def should_run_onboarding(config: Config, git_ops, repo_path: Path) -> bool:
    """Decide whether the setup wizard should run for this repository.

    True when no API key is configured, the path is not a git repository,
    or the configuration has no version.
    """
    if not config.ai.api_key:
        return True
    if not git_ops.is_git_repo(repo_path):
        return True
    if not config.version:
        return True
    return False
