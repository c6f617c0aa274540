"""Error taxonomy for the builder.

Every failure that ends the process carries the exit code it maps to, so the
CLI only needs to print the message and exit.
"""

from __future__ import annotations

import errno

# No response was received, so there is no HTTP status to report.
TRANSPORT_FAILURE_CODE = errno.ECONNABORTED


class JenkinsBuilderError(Exception):
    """Base class for fatal errors."""

    exit_code: int = 1

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class MissingProjectsError(JenkinsBuilderError):
    """`PROJECTS` is not set."""

    exit_code = errno.EINVAL


class CredentialsError(JenkinsBuilderError):
    """Base class for credential file problems."""


class CredentialsFileError(CredentialsError):
    """The credential file could not be stat'ed, opened or read."""

    exit_code = errno.EIO


class InvalidCredentialsJSONError(CredentialsError):
    """The credential file is not valid JSON."""

    exit_code = 1


class MissingCredentialFieldError(CredentialsError):
    """A required string field is absent or has the wrong type."""

    _codes = {"user": 2, "token": 3}

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            f"Credentials file is missing valid '{field}' key",
            exit_code=self._codes.get(field, 1),
        )


class InvalidSettingsError(JenkinsBuilderError):
    """A `JENKINS_BUILDER_*` setting failed validation."""

    # sysexits.h EX_CONFIG
    exit_code = 78


class HttpClientError(JenkinsBuilderError):
    """The HTTP client could not be created."""

    exit_code = errno.ENOMEM
