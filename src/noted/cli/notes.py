"""Folder and note CLI commands."""

import argparse

from noted.cli.report import print_outcomes

_ERRORS = (RuntimeError, FileNotFoundError, ValueError)


def cmd_folder_add(args: argparse.Namespace) -> int:
    from noted.notes import add_folder

    try:
        result = add_folder(
            args.path,
            name=args.name or args.settings["folder_name"],
            track=not args.untracked,
            branch=args.settings["default_branch"],
        )
    except _ERRORS as exc:
        print(f"  ERROR: {exc}")
        return 1

    print(f"  Added folder: {result['name']}")
    if result["outcome"] is None:
        print("  (untracked, not committed)")
        return 0
    return print_outcomes(result["outcome"].repositories)


def cmd_folder_delete(args: argparse.Namespace) -> int:
    from noted.notes import delete_folder

    try:
        outcome = delete_folder(args.path, args.name, branch=args.settings["default_branch"])
    except _ERRORS as exc:
        print(f"  ERROR: {exc}")
        return 1

    print(f"  Deleted folder: {args.name}")
    return print_outcomes(outcome.repositories)


def cmd_folder_list(args: argparse.Namespace) -> int:
    from noted.notes import list_folders

    folders = list_folders(args.path)
    if not folders:
        print("  No folders found.")
    for name in folders:
        print(f"  {name}")
    return 0


def cmd_note_add(args: argparse.Namespace) -> int:
    from noted.notes import add_note

    try:
        result = add_note(
            args.path,
            name=args.name or args.settings["note_name"],
            track=not args.untracked,
            branch=args.settings["default_branch"],
        )
    except _ERRORS as exc:
        print(f"  ERROR: {exc}")
        return 1

    print(f"  Created note: {result['name']}")
    if result["outcome"] is None:
        print("  (untracked, not committed)")
        return 0
    return print_outcomes(result["outcome"].repositories)


def cmd_note_delete(args: argparse.Namespace) -> int:
    from noted.notes import delete_note

    try:
        outcome = delete_note(args.path, args.name, branch=args.settings["default_branch"])
    except _ERRORS as exc:
        print(f"  ERROR: {exc}")
        return 1

    print(f"  Deleted note: {args.name.removesuffix('.md')}")
    return print_outcomes(outcome.repositories)


def cmd_note_list(args: argparse.Namespace) -> int:
    from noted.notes import list_notes

    notes = list_notes(args.path)
    if not notes:
        print("  No notes found in the current workspace.")
    for name in notes:
        print(f"  {name}")
    return 0
