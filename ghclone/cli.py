"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from ghclone.async_client import AsyncGitHubClient
from ghclone.clients.repos import DEFAULT_URL_FIELD, URL_FIELDS
from ghclone.exceptions import GhCloneError
from ghclone.git import GitHelper
from ghclone.logging import configure_logging
from ghclone.orchestrator import CloneOrchestrator
from ghclone.transport import DEFAULT_BASE_URL
from ghclone.types.clones import CloneOutcome, CloneReport
from ghclone.types.repos import RepositoryRef

EXIT_FATAL = 1
EXIT_CLONE_FAILURES = 2

typer_app = typer.Typer(pretty_exceptions_show_locals=False, add_completion=False)


def _print_progress(completed: int, total: int, outcome: CloneOutcome) -> None:
    status = "ok" if outcome.succeeded else f"FAILED ({outcome.reason})"
    typer.echo(f"[{completed}/{total}] {outcome.ref.name} ... {status}")


def _print_summary(report: CloneReport) -> None:
    typer.echo(
        f"Cloned {len(report.succeeded)} of {len(report.outcomes)} repositories into {report.destination}"
    )
    if report.failed:
        typer.echo(f"{len(report.failed)} repositories failed to clone:", err=True)
        for outcome in report.failed:
            typer.echo(f"  {outcome.ref.name}: {outcome.reason}", err=True)


async def _enumerate(
    account: str, token: str | None, base_url: str, url_field: str
) -> list[RepositoryRef]:
    async with AsyncGitHubClient(token=token, base_url=base_url, url_field=url_field) as client:
        return await client.repos.enumerate(account)


@typer_app.command()
def run(
    account: Annotated[str, Argument(help="Account (user or organization) whose repositories are listed.")],
    dest: Annotated[
        Path, Option("--dest", "-d", envvar="GHCLONE_DEST", help="Directory under which ACCOUNT/ is created.")
    ] = Path("."),
    token: Annotated[
        str | None, Option("--token", envvar="GITHUB_TOKEN", help="Access token sent as a bearer credential.")
    ] = None,
    clone: Annotated[bool, Option("--clone/--no-clone", help="Clone the repositories instead of only listing them.")] = False,
    base_url: Annotated[str, Option("--base-url", envvar="GHCLONE_BASE_URL", help="API base URL.")] = DEFAULT_BASE_URL,
    url_field: Annotated[
        str, Option("--url-field", envvar="GHCLONE_URL_FIELD", help=f"Clone URL field: {', '.join(URL_FIELDS)}.")
    ] = DEFAULT_URL_FIELD,
    jobs: Annotated[int | None, Option("--jobs", "-j", min=1, help="Maximum simultaneous clones (default: unbounded).")] = None,
    depth: Annotated[int | None, Option("--depth", min=1, help="Create shallow clones with this history depth.")] = None,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """List every repository of ACCOUNT and optionally clone them all."""
    configure_logging(level=logging.DEBUG if verbose else logging.ERROR)

    destination = dest / account
    if clone and destination.exists():
        typer.echo(f"Error: destination already exists: {destination}", err=True)
        raise typer.Exit(code=EXIT_FATAL)

    try:
        refs = asyncio.run(_enumerate(account, token, base_url, url_field))
    except GhCloneError as e:
        typer.echo(f"Error: failed to list repositories of {account}: {e}", err=True)
        raise typer.Exit(code=EXIT_FATAL)

    if not clone:
        for ref in refs:
            typer.echo(f"{ref.name}\t{ref.clone_url}")
        typer.echo(f"{len(refs)} repositories found for {account}", err=True)
        return

    if not refs:
        typer.echo(f"No repositories found for {account}, nothing to clone")
        return

    orchestrator = CloneOrchestrator(
        git=GitHelper(depth=depth),
        max_concurrency=jobs,
        on_progress=_print_progress,
    )

    try:
        report = asyncio.run(orchestrator.clone_all(refs, destination))
    except GhCloneError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_FATAL)

    _print_summary(report)
    if not report.ok:
        raise typer.Exit(code=EXIT_CLONE_FAILURES)


def main() -> None:
    load_dotenv()
    typer_app()


if __name__ == "__main__":
    main()
