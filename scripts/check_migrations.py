#!/usr/bin/env python
"""
Verify that the models match the migrations.
Fails CI when a model change has no migration yet.
"""

import os
import subprocess
import sys


def main() -> int:
    """Run ``alembic check`` against the configured database."""
    print("Checking if migrations are in sync with models...")

    result = subprocess.run(
        ["alembic", "check"],
        capture_output=True,
        text=True,
        check=False,
        env={"PYTHONPATH": "src", **os.environ},
    )
    output = result.stdout + result.stderr

    if "New upgrade operations detected" in output:
        print("Pending model changes not captured in migrations:")
        print(output)
        return 1

    if result.returncode != 0:
        print(f"Alembic command failed: {output}")
        return 1

    print("Models and migrations are in sync")
    return 0


if __name__ == "__main__":
    sys.exit(main())
