"""Main CLI entry point."""

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console

from ric import __version__
from ric.config import load_settings
from ric.github.client import GitHubClient
from ric.github.url import parse_target
from ric.models.review import ReviewConfig
from ric.models.target import RunOptions
from ric.status import ConsoleStatusReporter
from ric.utils.logging import setup_logging
from ric.utils.review import run_review

app = typer.Typer(
    name="ric",
    help="Review a GitHub repository or pull request in your editor",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def _version_callback(value: bool):
    if value:
        console.print(f"ric version {__version__}")
        raise typer.Exit()


@app.command()
def review(
    ctx: typer.Context,
    url: Optional[str] = typer.Argument(
        None, help="GitHub repository or pull request URL", show_default=False
    ),
    deep: Optional[bool] = typer.Option(
        None,
        "--deep/--shallow",
        "-d/-s",
        help="Clone deep or shallow. By default PRs are cloned with full depth "
        "and repos are cloned with depth 1.",
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information",
    ),
):
    """
    Clone a repository or pull request into a temporary directory and open it.

    Example:
        ric https://github.com/owner/repo/pull/123
    """
    if not url:
        typer.echo(ctx.get_help())
        raise typer.Exit(1)

    reporter = ConsoleStatusReporter(console)
    try:
        settings = load_settings()
        setup_logging("DEBUG" if verbose else settings.log_level)

        target = parse_target(url)
        config = ReviewConfig(
            target=target,
            options=RunOptions.for_target(target, deep),
            editor_command=settings.editor_command,
            default_branch=settings.default_branch,
        )
        github_client = GitHubClient(
            token=settings.github_token, base_url=settings.github_api_url
        )

        result = asyncio.run(run_review(config, github_client, reporter))
        logger.debug("Review of %s finished after %.1fs", url, result.duration_sec or 0.0)
    except Exception as e:
        reporter.fail(f"Could not review {reporter.name(url)}")
        logger.error("Review of %s failed: %s", url, e)
        console.print("\n\n[bold underline red]An error occurred:[/bold underline red]\n")
        if e.__traceback__ is not None:
            console.print_exception()
        else:
            console.print(str(e), markup=False)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
