"""Domain models (Pydantic v2).

Notes:
- These models describe *what* the inputs are, not *how* they are obtained.
- Both are frozen: they are built once and shared read-only.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Arguments(BaseModel):
    """Command-line inputs that every run needs."""

    model_config = ConfigDict(frozen=True)

    credentials_path: Path = Field(
        ...,
        description="JSON file holding the Jenkins user and API token.",
    )
    jenkins_host: str = Field(
        ...,
        min_length=1,
        description="Base URL of Jenkins (e.g. 'https://ci.example.com').",
    )


class Credentials(BaseModel):
    """Basic-auth credentials for Jenkins.

    Values are kept exactly as read; no trimming or normalization.
    """

    model_config = ConfigDict(frozen=True)

    user: str = Field(..., description="Jenkins user name.")
    token: str = Field(..., repr=False, description="API token or password.")

    def as_auth(self) -> tuple[str, str]:
        return self.user, self.token
