"""Command line entry-point.

Usage:
    PROJECTS=app:lib jenkins-builder -c creds.json -h https://ci.example.com

Exit codes are the ones carried by `core.errors`; a failed dispatch exits
with the code returned by the dispatcher.
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError

from cli.ui_components import build_error_console, configure_logging, print_error
from core.config import APP_NAME, APP_VERSION, AppSettings
from core.domain.models import Arguments
from core.errors import InvalidSettingsError, JenkinsBuilderError
from core.services.build_pipeline import trigger_builds

app = typer.Typer(
    add_completion=False,
    help="Trigger Jenkins builds for every project listed in $PROJECTS.",
)

_console = build_error_console()


def exit_code_for(result: int) -> int:
    """Maps a dispatch result to a process exit status.

    The OS keeps only the low byte, so results like HTTP 512 would read as
    success; those become 1.
    """

    if result != 0 and result % 256 == 0:
        return 1
    return result


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


@app.command()
def build(
    credential_file: Path = typer.Option(
        ...,
        "--credential-file",
        "-c",
        metavar="FILE",
        help="Read user credentials from this JSON file.",
    ),
    jenkins_host: str = typer.Option(
        ...,
        "--jenkins-host",
        "-h",
        metavar="HOST",
        help="Base URL of Jenkins.",
    ),
    strict_status: bool | None = typer.Option(
        None,
        "--strict-status/--no-strict-status",
        help="Fail on HTTP statuses >= 400 (default: JENKINS_BUILDER_STRICT_STATUS or off).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Trigger one build per project, stopping at the first failure."""

    if not jenkins_host:
        raise typer.BadParameter("must not be empty", param_hint="'--jenkins-host'")

    try:
        settings = AppSettings()
    except ValidationError as exc:
        error = InvalidSettingsError(f"invalid configuration: {exc}")
        print_error(_console, error)
        raise typer.Exit(code=error.exit_code) from exc

    configure_logging("DEBUG" if verbose else settings.log_level, _console)

    arguments = Arguments(credentials_path=credential_file, jenkins_host=jenkins_host)
    try:
        result = trigger_builds(arguments, settings, strict_status=strict_status)
    except JenkinsBuilderError as exc:
        print_error(_console, exc)
        raise typer.Exit(code=exc.exit_code) from exc

    if result != 0:
        raise typer.Exit(code=exit_code_for(result))


def run() -> None:
    app(prog_name=APP_NAME)
