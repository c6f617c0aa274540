"""Build triggering orchestration.

This module holds the whole run: resolve the project list, load credentials,
build the shared client and dispatch projects one by one. The CLI only turns
flags into `Arguments` and errors into exit codes, which keeps this flow
usable from tests or other entry-points without touching the terminal.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from adapters.credentials_loader import load_credentials
from adapters.http_client import build_http_client
from adapters.jenkins_dispatcher import JenkinsDispatcher
from core.config import AppSettings, read_projects_env
from core.domain.models import Arguments
from core.interfaces.trigger import BuildTrigger

logger = logging.getLogger(__name__)

PROJECT_SEPARATOR = ":"


def split_projects(raw: str) -> list[str]:
    """Splits a colon-separated project list.

    Order and duplicates are kept; empty segments (`a::b`, `:a`, `a:`) are
    skipped.
    """

    return [name for name in raw.split(PROJECT_SEPARATOR) if name]


def run_builds(projects: Iterable[str], trigger: BuildTrigger) -> int:
    """Dispatches `projects` in order, stopping at the first failure.

    Returns the first non-zero result, or 0 when every dispatch succeeded.
    """

    for project in projects:
        result = trigger.trigger(project)
        if result != 0:
            logger.debug("Stopping after '%s' failed with %d", project, result)
            return result
    return 0


def trigger_builds(
    arguments: Arguments,
    settings: AppSettings | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    strict_status: bool | None = None,
) -> int:
    """Runs one full invocation and returns the process status.

    Raises `JenkinsBuilderError` subclasses for configuration, credential and
    client failures; dispatch failures come back as the return value.
    """

    settings = settings or AppSettings()
    if strict_status is None:
        strict_status = settings.strict_status

    projects = split_projects(read_projects_env(environ))
    credentials = load_credentials(arguments.credentials_path)

    with build_http_client(credentials, settings) as client:
        dispatcher = JenkinsDispatcher(
            client,
            arguments.jenkins_host,
            strict_status=strict_status,
        )
        return run_builds(projects, dispatcher)
