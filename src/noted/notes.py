"""Folders and notes inside a workspace."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from noted.git.propagate import CommitOutcome, propagate_commit
from noted.git.repo import is_tool_root
from noted.naming import check_name, existing_entries, existing_notes, next_available_name

logger = logging.getLogger(__name__)


def _note_path(directory: Path, name: str) -> Path:
    return directory / (name if name.endswith(".md") else f"{name}.md")


def add_folder(
    directory: Path | str,
    name: str = "untitled-folder",
    track: bool = True,
    branch: str = "main",
) -> dict:
    """Create a folder (with a .gitkeep) and commit it unless untracked.

    Returns:
        Dict with keys: name, path, outcome (None when untracked).

    Raises:
        RuntimeError: If directory is the parent repository root.
        ValueError: If name is a path rather than a plain name.
    """
    here = Path(directory).resolve()
    if is_tool_root(here):
        raise RuntimeError("Folders cannot be created in the main noted repository.")
    check_name(name)

    final_name = next_available_name(name, existing_entries(here))
    folder_path = here / final_name
    folder_path.mkdir()
    (folder_path / ".gitkeep").write_text("")
    logger.info("Added folder %s", folder_path)

    outcome = None
    if track:
        outcome = propagate_commit(here, f"Add folder: {final_name}", branch=branch)
    return {"name": final_name, "path": folder_path, "outcome": outcome}


def delete_folder(directory: Path | str, name: str, branch: str = "main") -> CommitOutcome:
    """Remove a folder recursively and commit the deletion."""
    here = Path(directory).resolve()
    folder_path = here / check_name(name)
    if not folder_path.is_dir():
        raise FileNotFoundError(f"Folder '{name}' does not exist.")

    shutil.rmtree(folder_path)
    logger.info("Deleted folder %s", folder_path)
    return propagate_commit(here, f"Delete folder: {name}", branch=branch)


def list_folders(directory: Path | str) -> list[str]:
    """Names of the non-hidden subdirectories of directory."""
    here = Path(directory)
    return sorted(
        child.name for child in here.iterdir()
        if child.is_dir() and not child.name.startswith(".")
    )


def add_note(
    directory: Path | str,
    name: str = "untitled-note",
    track: bool = True,
    branch: str = "main",
) -> dict:
    """Create a Markdown note titled with its name and commit it unless untracked.

    Returns:
        Dict with keys: name, path, outcome (None when untracked).

    Raises:
        RuntimeError: If directory is the parent repository root.
        ValueError: If name is a path rather than a plain name.
    """
    here = Path(directory).resolve()
    if is_tool_root(here):
        raise RuntimeError("Notes cannot be created in the main noted repository.")
    check_name(name)

    base = name[: -len(".md")] if name.endswith(".md") else name
    final_name = next_available_name(base, existing_notes(here))
    note_path = _note_path(here, final_name)
    note_path.write_text(f"# {final_name}\n")
    logger.info("Created note %s", note_path)

    outcome = None
    if track:
        outcome = propagate_commit(here, f"Add note: {final_name}", branch=branch)
    return {"name": final_name, "path": note_path, "outcome": outcome}


def delete_note(directory: Path | str, name: str, branch: str = "main") -> CommitOutcome:
    """Delete a note, given with or without its .md extension, and commit."""
    here = Path(directory).resolve()
    note_path = _note_path(here, check_name(name))
    if not note_path.is_file():
        raise FileNotFoundError(f"Note '{name}' does not exist.")

    note_path.unlink()
    logger.info("Deleted note %s", note_path)
    return propagate_commit(here, f"Delete note: {note_path.stem}", branch=branch)


def list_notes(directory: Path | str) -> list[str]:
    """Names (without .md) of the notes in directory."""
    here = Path(directory)
    return sorted(
        child.name[: -len(".md")] for child in here.iterdir()
        if child.is_file() and child.name.endswith(".md")
    )
