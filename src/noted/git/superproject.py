"""Submodule detection and .gitmodules enumeration.

A workspace is a submodule of the parent notes repository. Detection asks
git for the superproject's working tree; any failure of that query means
"not a submodule" unless the caller asks for the three-way result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from noted.git.repo import _run_git
from noted.paths import GITMODULES_FILE

logger = logging.getLogger(__name__)


@dataclass
class SuperprojectDetection:
    """Outcome of asking whether a repository is a submodule."""

    path: Path | None = None
    error: str | None = None

    @property
    def is_submodule(self) -> bool:
        return self.path is not None

    @property
    def inconclusive(self) -> bool:
        return self.error is not None


def detect_superproject(repo_root: Path | str) -> SuperprojectDetection:
    """Query git for the superproject enclosing repo_root.

    Returns:
        Detection with ``path`` set when repo_root is a submodule, ``error``
        set when the query itself failed, neither when it is standalone.
    """
    root = Path(repo_root)
    try:
        result = _run_git(["rev-parse", "--show-superproject-working-tree"], root)
    except OSError as exc:
        logger.debug("Superproject query failed in %s: %s", root, exc)
        return SuperprojectDetection(error=str(exc))

    if result.returncode != 0:
        detail = result.stderr.strip() or f"git exited with {result.returncode}"
        logger.debug("Superproject query failed in %s: %s", root, detail)
        return SuperprojectDetection(error=detail)

    output = result.stdout.strip()
    if not output:
        return SuperprojectDetection()
    return SuperprojectDetection(path=Path(output).resolve())


def find_superproject_root(repo_root: Path | str) -> Path | None:
    """Return the superproject's root, or None if repo_root is not a submodule.

    A failed query is treated the same as "not a submodule".
    """
    return detect_superproject(repo_root).path


def list_submodule_paths(parent_root: Path | str) -> list[Path]:
    """Read submodule paths registered in .gitmodules.

    Returns:
        Absolute submodule paths in file order; empty if there is no
        .gitmodules.
    """
    root = Path(parent_root)
    if not (root / GITMODULES_FILE).is_file():
        return []

    result = _run_git(
        ["config", "--file", GITMODULES_FILE, "--get-regexp", r"^submodule\..*\.path$"],
        root,
    )
    if result.returncode != 0:
        return []

    paths = []
    for line in result.stdout.strip().split("\n"):
        if not line.strip():
            continue
        _, _, rel = line.partition(" ")
        paths.append(root / rel.strip())
    return paths
