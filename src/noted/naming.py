"""Collision-free names for new workspaces, folders and notes."""

from __future__ import annotations

from pathlib import Path


def next_available_name(base: str, existing: set[str] | frozenset[str]) -> str:
    """Return base, or base-1, base-2, ... whichever is first not in existing."""
    if base not in existing:
        return base
    counter = 1
    while f"{base}-{counter}" in existing:
        counter += 1
    return f"{base}-{counter}"


def existing_entries(directory: Path) -> set[str]:
    """Names of every entry (file or directory) in directory."""
    if not directory.is_dir():
        return set()
    return {child.name for child in directory.iterdir()}


def existing_notes(directory: Path) -> set[str]:
    """Stems of the Markdown files in directory."""
    if not directory.is_dir():
        return set()
    return {
        child.name[: -len(".md")]
        for child in directory.iterdir()
        if child.name.endswith(".md")
    }


def check_name(name: str) -> str:
    """Reject names that are paths rather than a single directory entry.

    Raises:
        ValueError: If name is empty, "." or "..", or contains a separator.
    """
    if not name or name in (".", "..") or Path(name).name != name or "\\" in name:
        raise ValueError(f"Invalid name: {name!r}. Names cannot contain path separators.")
    return name
