"""Shared printing of commit and push outcomes."""

from noted.git.propagate import COMMITTED, FAILED, RepoOutcome

_MARKS = {COMMITTED: "+", FAILED: "!"}


def print_outcomes(outcomes: list[RepoOutcome]) -> int:
    """Print one line per outcome; return 1 if any failed."""
    for entry in outcomes:
        print(f"  {_MARKS.get(entry.status, '-')} {entry.describe()}")
    return 0 if all(o.ok for o in outcomes) else 1
