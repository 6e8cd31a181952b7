"""
Git and GitHub adapters.

Thin wrappers around the ``git`` and ``gh`` executables. Query helpers
report plain booleans; operations that change state raise GitError or
GitHubError with the command output in ``details``.
"""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from gitmind.wizard.exceptions import GitError, GitHubError, ValidationError
from gitmind.wizard.logging_config import get_logger
from gitmind.wizard.validators import validate_repo_name

logger = get_logger("git_ops")

QUERY_TIMEOUT = 5
COMMAND_TIMEOUT = 60

LICENSE_TEMPLATES = [
    "None",
    "MIT",
    "Apache-2.0",
    "GPL-3.0",
    "BSD-3-Clause",
    "BSD-2-Clause",
    "ISC",
    "MPL-2.0",
    "LGPL-3.0",
    "AGPL-3.0",
]

GITIGNORE_TEMPLATES = [
    "None",
    "Go",
    "Node",
    "Python",
    "Java",
    "Rust",
    "C",
    "C++",
    "Ruby",
    "PHP",
    "Swift",
    "Kotlin",
    "VisualStudio",
    "JetBrains",
]


def _run(args: List[str], cwd: Optional[Path] = None, timeout: int = QUERY_TIMEOUT) -> subprocess.CompletedProcess:
    return subprocess.run(
        args,
        cwd=str(cwd) if cwd else None,
        capture_output=True,
        text=True,
        timeout=timeout
    )


class GitOperations:
    """Repository inspection and initialisation through the git CLI."""

    def __init__(self, git_path: str = "git"):
        self.git_path = git_path

    def is_git_repo(self, path: Path) -> bool:
        """Check if path is inside a git working tree.

        Returns:
            True if ``git rev-parse --git-dir`` succeeds
        """
        try:
            result = _run([self.git_path, "rev-parse", "--git-dir"], cwd=Path(path).resolve())
            return result.returncode == 0 and bool(result.stdout.strip())
        except (subprocess.TimeoutExpired, FileNotFoundError, OSError) as e:
            logger.debug(f"git rev-parse failed in {path}: {e}")
            return False

    def has_remote(self, path: Path, name: str = "origin") -> bool:
        """Check if the repository has a remote with the given name."""
        try:
            result = _run([self.git_path, "remote", "get-url", name], cwd=path)
            return result.returncode == 0
        except (subprocess.TimeoutExpired, FileNotFoundError, OSError) as e:
            logger.debug(f"git remote get-url failed in {path}: {e}")
            return False

    def init_repository(self, path: Path):
        """Run ``git init`` in path.

        Raises:
            GitError: If git is missing or the command fails
        """
        command = f"{self.git_path} init"
        try:
            result = _run([self.git_path, "init"], cwd=path, timeout=COMMAND_TIMEOUT)
        except FileNotFoundError as e:
            raise GitError(
                "git is not installed or not in PATH",
                command=command,
                remediation="Install git from https://git-scm.com/downloads"
            ) from e
        except (subprocess.TimeoutExpired, OSError) as e:
            raise GitError("Failed to initialize repository", command=command, details=str(e)) from e

        if result.returncode != 0:
            logger.warning(f"git init failed in {path}: {result.stderr.strip()}")
            raise GitError(
                "Failed to initialize repository",
                command=command,
                details=result.stderr.strip() or result.stdout.strip()
            )

        logger.info(f"Initialized git repository in {path}")


@dataclass
class CreateRepoOptions:
    """Options for ``gh repo create``."""
    name: str
    description: str = ""
    visibility: str = "public"
    license: str = "None"
    gitignore: str = "None"
    add_readme: bool = True
    enable_issues: bool = True
    enable_wiki: bool = False
    enable_projects: bool = False

    def to_args(self) -> List[str]:
        """Build the gh arguments.

        gh has no flag for projects on create; enable_projects is stored in
        the configuration only.
        """
        args = ["repo", "create", self.name]
        args.append("--private" if self.visibility == "private" else "--public")
        if self.description:
            args.extend(["--description", self.description])
        if self.license and self.license != "None":
            args.extend(["--license", self.license])
        if self.gitignore and self.gitignore != "None":
            args.extend(["--gitignore", self.gitignore])
        if self.add_readme:
            args.append("--add-readme")
        if not self.enable_issues:
            args.append("--disable-issues")
        if not self.enable_wiki:
            args.append("--disable-wiki")
        return args


class GitHubOperations:
    """Repository creation and lookups through the GitHub CLI (gh)."""

    def __init__(self, gh_path: str = "gh", git_path: str = "git"):
        self.gh_path = gh_path
        self.git_path = git_path

    def is_available(self) -> bool:
        try:
            return _run([self.gh_path, "--version"]).returncode == 0
        except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
            return False

    def is_authenticated(self) -> bool:
        try:
            return _run([self.gh_path, "auth", "status"]).returncode == 0
        except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
            return False

    def _gh(self, args: List[str], message: str, timeout: int = COMMAND_TIMEOUT) -> str:
        command = " ".join([self.gh_path] + args)
        try:
            result = _run([self.gh_path] + args, timeout=timeout)
        except FileNotFoundError as e:
            raise GitHubError(
                "GitHub CLI (gh) is not installed",
                command=command,
                remediation="Install gh from https://cli.github.com/"
            ) from e
        except (subprocess.TimeoutExpired, OSError) as e:
            raise GitHubError(message, command=command, details=str(e)) from e

        if result.returncode != 0:
            logger.warning(f"{command} failed: {result.stderr.strip()}")
            raise GitHubError(
                message,
                command=command,
                details=result.stderr.strip() or result.stdout.strip()
            )
        return result.stdout.strip()

    def current_user(self) -> str:
        """Get the authenticated GitHub login."""
        return self._gh(["api", "user", "--jq", ".login"], "Failed to get GitHub username")

    def create_repository(self, options: CreateRepoOptions):
        is_valid, message = validate_repo_name(options.name)
        if not is_valid:
            raise ValidationError(
                message,
                field="repository name",
                expected_format="letters, digits, '.', '-' and '_'"
            )
        self._gh(options.to_args(), "Failed to create repository")
        logger.info(f"Created GitHub repository {options.name}")

    def set_remote(self, path: Path, url: str, name: str = "origin"):
        """Point the remote at url, adding it if it does not exist yet."""
        try:
            exists = _run([self.git_path, "remote", "get-url", name], cwd=path).returncode == 0
            action = "set-url" if exists else "add"
            result = _run([self.git_path, "remote", action, name, url], cwd=path)
        except (subprocess.TimeoutExpired, FileNotFoundError, OSError) as e:
            raise GitHubError(
                "Failed to set remote",
                command=f"git remote add {name} {url}",
                details=str(e)
            ) from e

        if result.returncode != 0:
            raise GitHubError(
                "Failed to set remote",
                command=f"git remote {action} {name} {url}",
                details=result.stderr.strip()
            )

    @staticmethod
    def repo_url(owner: str, name: str) -> str:
        return f"https://github.com/{owner}/{name}.git"
