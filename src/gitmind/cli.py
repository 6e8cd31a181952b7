"""
GitMind Command Line Interface

Main entry point for the gitmind CLI.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.live import Live
from rich.table import Table

from gitmind.config import ConfigManager, should_run_onboarding
from gitmind.git_ops import GitOperations
from gitmind.wizard import keys
from gitmind.wizard.exceptions import ConfigError, get_error_code
from gitmind.wizard.logging_config import get_log_path, get_logger, setup_logging
from gitmind.wizard.orchestrator import WizardOrchestrator
from gitmind.wizard.ui import is_secret_key, mask_api_key

console = Console()
logger = get_logger("cli")

# Common terminal escape sequences; anything else is passed through as-is
ESCAPE_SEQUENCES = {
    "\r": keys.ENTER,
    "\n": keys.ENTER,
    "\t": keys.TAB,
    "\x1b": keys.ESC,
    "\x1b[Z": keys.SHIFT_TAB,
    "\x1b[A": keys.UP,
    "\x1b[B": keys.DOWN,
    "\x1b[C": keys.RIGHT,
    "\x1b[D": keys.LEFT,
    "\x1bOA": keys.UP,
    "\x1bOB": keys.DOWN,
    "\x1bOC": keys.RIGHT,
    "\x1bOD": keys.LEFT,
    "\x1b[3~": keys.DELETE,
    "\x7f": keys.BACKSPACE,
    "\x08": keys.BACKSPACE,
    "\x03": keys.CTRL_C,
    # Windows console
    "\xe0H": keys.UP,
    "\xe0P": keys.DOWN,
    "\xe0M": keys.RIGHT,
    "\xe0K": keys.LEFT,
    "\xe0S": keys.DELETE,
    "\x00H": keys.UP,
    "\x00P": keys.DOWN,
    "\x00M": keys.RIGHT,
    "\x00K": keys.LEFT,
}


def decode_key(raw: str) -> str:
    """Translate raw terminal input into a logical key name."""
    return ESCAPE_SEQUENCES.get(raw, raw)


def read_key() -> str:
    try:
        return decode_key(click.getchar())
    except (KeyboardInterrupt, EOFError):
        return keys.CTRL_C


def get_gitmind_home() -> Path:
    return Path.home() / ".gitmind"


def load_config_or_exit(manager: ConfigManager, json_output: bool = False):
    try:
        return manager.load()
    except ConfigError as e:
        if json_output:
            print(json.dumps({"valid": False, "errors": [e.message]}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        sys.exit(get_error_code(e))


@click.group()
@click.version_option(package_name="gitmind")
def main():
    """GitMind: AI-powered git workflow assistant"""
    pass


def run_wizard(wizard: WizardOrchestrator):
    """Drive the wizard from the keyboard until it completes or is cancelled."""
    with Live(wizard.render(), console=console, screen=True, auto_refresh=False) as live:
        while not (wizard.is_completed() or wizard.is_cancelled()):
            wizard.handle_key(read_key())
            live.update(wizard.render(), refresh=True)
    console.print(wizard.render())


@main.command()
@click.option("--path", type=click.Path(file_okay=False), help="Repository path (default: current directory)")
@click.option("--force", is_flag=True, help="Run setup even if GitMind is already configured")
def onboard(path: Optional[str], force: bool):
    """Run the interactive setup wizard.

    Examples:
        gitmind onboard            # Set up the current repository
        gitmind onboard --force    # Run setup again
    """
    repo_path = Path(path) if path else Path.cwd()
    setup_logging(log_file=get_log_path(get_gitmind_home()), quiet=True)

    manager = ConfigManager()
    config = load_config_or_exit(manager)
    git_ops = GitOperations()

    if not force and not should_run_onboarding(config, git_ops, repo_path):
        console.print("[green]✓[/green] GitMind is already configured.")
        console.print("  Run [cyan]gitmind onboard --force[/cyan] to change your settings.")
        return

    wizard = WizardOrchestrator(
        config=config,
        config_manager=manager,
        git_ops=git_ops,
        repo_path=repo_path,
    )
    logger.info(f"Starting setup wizard in {repo_path}")
    run_wizard(wizard)

    if wizard.is_cancelled():
        sys.exit(1)
    if wizard.save_error:
        logger.error(f"Setup finished without saving: {wizard.save_error}")


@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command()
def show():
    """Show current configuration."""
    manager = ConfigManager()
    cfg = load_config_or_exit(manager)

    if not manager.exists():
        console.print("[yellow]No configuration file yet; showing defaults.[/yellow]")
        console.print("Run [cyan]gitmind onboard[/cyan] to configure GitMind.")
        console.print()

    table = Table(title="GitMind Configuration", title_justify="left")
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    table.add_row("version", cfg.version)
    for section, values in cfg.to_dict().items():
        if not isinstance(values, dict):
            continue
        for key, value in values.items():
            if isinstance(value, list):
                shown = ", ".join(str(v) for v in value)
            elif is_secret_key(key):
                shown = mask_api_key(str(value)) or "[red]Not set[/red]"
            else:
                shown = str(value)
            table.add_row(f"{section}.{key}", shown)

    console.print(table)


@config.command()
def path():
    """Print the configuration file path."""
    click.echo(str(ConfigManager().path))


@config.command()
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def validate(json_output: bool):
    """Validate configuration file."""
    manager = ConfigManager()

    if not manager.exists():
        if json_output:
            print(json.dumps({"valid": False, "errors": ["Config not found"]}))
        else:
            console.print("[red]Configuration not found. Run 'gitmind onboard' first.[/red]")
        sys.exit(1)

    cfg = load_config_or_exit(manager, json_output)
    errors = cfg.validate()
    is_valid = len(errors) == 0

    if json_output:
        print(json.dumps({
            "valid": is_valid,
            "errors": errors,
        }, indent=2))
    else:
        console.print("[bold blue]Configuration Validation[/bold blue]")
        console.print()

        if errors:
            console.print("[red]Errors:[/red]")
            for err in errors:
                console.print(f"  [red]✗[/red] {err}")
            console.print()

        if is_valid:
            console.print("[green]Configuration is valid.[/green]")
        else:
            console.print("[red]Configuration has errors.[/red]")

    sys.exit(0 if is_valid else 1)


if __name__ == "__main__":
    main()
