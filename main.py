"""Runs jenkins-builder from a source checkout.

    PROJECTS=api:worker python -m main -c creds.json -h https://ci.example.com

Puts `src/` on the import path first, so no install is required.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
