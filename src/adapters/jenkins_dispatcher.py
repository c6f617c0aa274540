"""Jenkins build dispatcher.

Issues `POST <host>/job/<project>/build` with an empty body on a shared
authenticated client.

Status handling:
- Lenient (default): any completed request is a successful dispatch. HTTP
  errors (e.g. 401 for bad credentials) are only logged as warnings.
- Strict: a final status >= 400 is a failure and its code is returned.
- Transport errors are always failures.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from core.errors import TRANSPORT_FAILURE_CODE
from core.interfaces.trigger import BuildTrigger

logger = logging.getLogger(__name__)


def build_project_url(jenkins_host: str, project: str) -> str:
    """Returns the build-trigger URL for `project`.

    Trailing slashes on the host are dropped. The project is percent-encoded,
    keeping `/` so folder paths (`folder/job/app`) reach nested jobs.
    """

    base = jenkins_host.rstrip("/")
    return f"{base}/job/{quote(project, safe='/')}/build"


class JenkinsDispatcher(BuildTrigger):
    """Triggers builds on one Jenkins host."""

    def __init__(
        self,
        client: httpx.Client,
        jenkins_host: str,
        *,
        strict_status: bool = False,
    ) -> None:
        self._client = client
        self._jenkins_host = jenkins_host
        self._strict_status = strict_status

    def trigger(self, project: str) -> int:
        url = build_project_url(self._jenkins_host, project)
        logger.debug("POST %s", url)
        try:
            response = self._client.post(url, content=b"")
        except (httpx.TransportError, httpx.InvalidURL) as exc:
            logger.error("Couldn't build project '%s': %s", project, str(exc) or type(exc).__name__)
            return TRANSPORT_FAILURE_CODE

        status = response.status_code
        if status >= 400:
            if self._strict_status:
                logger.error("Couldn't build project '%s': HTTP %d", project, status)
                return status
            logger.warning("Jenkins answered HTTP %d for project '%s'", status, project)
            return 0

        logger.info("Triggered build of '%s' (HTTP %d)", project, status)
        return 0
