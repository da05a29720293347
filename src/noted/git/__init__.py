"""Git module - repository location, submodule detection and commit propagation."""

from noted.git.propagate import CommitOutcome, RepoOutcome, propagate_commit
from noted.git.push import push_repository
from noted.git.repo import NoRepositoryError, find_repository_root, find_tool_root
from noted.git.superproject import detect_superproject, find_superproject_root

__all__ = [
    "CommitOutcome",
    "RepoOutcome",
    "propagate_commit",
    "push_repository",
    "NoRepositoryError",
    "find_repository_root",
    "find_tool_root",
    "detect_superproject",
    "find_superproject_root",
]
