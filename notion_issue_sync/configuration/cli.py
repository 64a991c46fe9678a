"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import logging

import structlog
import typer
from dotenv import load_dotenv
from pydantic import ValidationError

from notion_issue_sync.configuration.exceptions import RequiredConfigurationElementError
from notion_issue_sync.configuration.reconcile import reconcile_sync_configuration
from notion_issue_sync.synchronize.driver import run_sync_workflow

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


def configure_logging(debug: bool) -> None:
    """Emit structlog events at DEBUG level in debug mode, INFO otherwise."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO))


@typer_app.callback()
def main() -> None:
    """Mirror the issues of a GitHub repository into a Notion database."""


@typer_app.command(name="sync")
def sync_cli() -> None:
    """Create or update one Notion row per GitHub issue.

    All settings come from environment variables (or a .env file): NOTION_DATABASE_ID,
    GITHUB_REPO_OWNER, GITHUB_REPO_NAME, GITHUB_KEY and NOTION_KEY.
    """
    try:
        config = asyncio.run(reconcile_sync_configuration())
    except (RequiredConfigurationElementError, ValidationError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    configure_logging(config.debug)
    typer.echo(f"Synchronizing issues from {config.github_repo_owner}/{config.github_repo_name} into Notion database {config.notion_database_id}")
    result = asyncio.run(run_sync_workflow(config))
    typer.echo(f"Notion database is in sync with GitHub again. Created {result.created_count} rows, updated {result.updated_count} rows.")


if __name__ == "__main__":
    typer_app()
