"""Build trigger contract.

Why Protocol:
- The driver depends on a structural contract, not on the HTTP dispatcher,
  so the loop can be exercised with a fake trigger.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BuildTrigger(Protocol):
    """Minimal contract for starting a build.

    Rules:
    - `trigger` is synchronous; dispatch is strictly sequential.
    - Returns 0 on success, a non-zero status code otherwise.
    """

    def trigger(self, project: str) -> int:
        """Starts a build of `project` and returns its result code."""

        ...
