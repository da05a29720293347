"""Unified CLI for noted.

Usage:
    noted start [--name N] [--local | --remote [new|<url>]]
    noted workspace add [name] [--url <url>]
    noted workspace delete <name>
    noted workspace list [-a]
    noted workspace add-remote <name> <url>
    noted workspace remove-remote <name>
    noted folder add [name] [--untracked]
    noted folder delete <name>
    noted folder list
    noted note add [name] [--untracked]
    noted note delete <name>
    noted note list
    noted update [--all]
    noted upload [--all]

Global options:
    -C/--path <dir>     run as if started in <dir>
    --settings <file>   settings.yaml to use
    -v/--verbose        log every git call
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from noted.cli.notes import (
    cmd_folder_add,
    cmd_folder_delete,
    cmd_folder_list,
    cmd_note_add,
    cmd_note_delete,
    cmd_note_list,
)
from noted.cli.start import cmd_start
from noted.cli.sync import cmd_update, cmd_upload
from noted.cli.workspace import (
    cmd_workspace_add,
    cmd_workspace_add_remote,
    cmd_workspace_delete,
    cmd_workspace_list,
    cmd_workspace_remove_remote,
)
from noted.settings import load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="noted",
        description='A note-taking tool with git version control. Get started with "noted start".',
    )
    parser.add_argument(
        "-C", "--path", default=".",
        help="Run as if noted was started in this directory",
    )
    parser.add_argument(
        "--settings", default=None,
        help="Path to settings.yaml",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every git call",
    )
    sub = parser.add_subparsers(dest="command")

    # start
    start = sub.add_parser(
        "start", help="Initialize the parent repository that holds all workspaces",
    )
    start.add_argument("-n", "--name", default=None, help="Repository name")
    start.add_argument(
        "-l", "--local", action="store_true",
        help="Initialize as a local repository",
    )
    start.add_argument(
        "-r", "--remote", nargs="?", const="new", default=None,
        help='Publish to a remote: "new" creates a GitHub repository, or give a URL',
    )

    # workspace
    ws = sub.add_parser("workspace", help="Manage workspaces inside the parent repository")
    ws_sub = ws.add_subparsers(dest="subcommand")

    ws_add = ws_sub.add_parser("add", help="Add a new workspace")
    ws_add.add_argument("name", nargs="?", default=None)
    ws_add.add_argument("-u", "--url", default=None, help="Remote URL for the workspace")

    ws_del = ws_sub.add_parser("delete", help="Delete a workspace")
    ws_del.add_argument("name")

    ws_ls = ws_sub.add_parser("list", help="List workspaces")
    ws_ls.add_argument(
        "-a", "--all", action="store_true",
        help="Show commit and state for each workspace",
    )

    ws_remote = ws_sub.add_parser("add-remote", help="Add a remote origin to a workspace")
    ws_remote.add_argument("name")
    ws_remote.add_argument("url")

    ws_unremote = ws_sub.add_parser("remove-remote", help="Remove a workspace's remote origin")
    ws_unremote.add_argument("name")

    # folder
    folder = sub.add_parser("folder", help="Manage folders within a workspace")
    folder_sub = folder.add_subparsers(dest="subcommand")

    folder_add = folder_sub.add_parser("add", help="Add a new folder")
    folder_add.add_argument("name", nargs="?", default=None)
    folder_add.add_argument(
        "-u", "--untracked", action="store_true",
        help="Create the folder without committing it",
    )

    folder_del = folder_sub.add_parser("delete", help="Delete a folder")
    folder_del.add_argument("name")

    folder_sub.add_parser("list", help="List folders")

    # note
    note = sub.add_parser("note", help="Manage notes within a workspace")
    note_sub = note.add_subparsers(dest="subcommand")

    note_add = note_sub.add_parser("add", help="Add a new note")
    note_add.add_argument("name", nargs="?", default=None)
    note_add.add_argument(
        "-u", "--untracked", action="store_true",
        help="Create the note without committing it",
    )

    note_del = note_sub.add_parser("delete", help="Delete a note")
    note_del.add_argument("name")

    note_sub.add_parser("list", help="List notes")

    # update / upload
    for command, help_text in (
        ("update", "Commit and push the current workspace and its parent"),
        ("upload", "Like update, with commit messages summarizing the changes"),
    ):
        cmd = sub.add_parser(command, help=help_text)
        cmd.add_argument(
            "--all", action="store_true",
            help="Process every workspace (run from the parent repository)",
        )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        args.settings = load_settings(args.settings)
    except (ValueError, yaml.YAMLError) as exc:
        print(f"  ERROR: {exc}")
        return 1
    args.path = Path(args.path).expanduser().resolve()
    if args.command != "start" and not args.path.is_dir():
        print(f"  ERROR: Directory does not exist: {args.path}")
        return 1

    dispatch = {
        ("workspace", "add"): cmd_workspace_add,
        ("workspace", "delete"): cmd_workspace_delete,
        ("workspace", "list"): cmd_workspace_list,
        ("workspace", "add-remote"): cmd_workspace_add_remote,
        ("workspace", "remove-remote"): cmd_workspace_remove_remote,
        ("folder", "add"): cmd_folder_add,
        ("folder", "delete"): cmd_folder_delete,
        ("folder", "list"): cmd_folder_list,
        ("note", "add"): cmd_note_add,
        ("note", "delete"): cmd_note_delete,
        ("note", "list"): cmd_note_list,
    }

    # Handle top-level commands (no subcommand)
    if args.command == "start":
        return cmd_start(args)
    if args.command == "update":
        return cmd_update(args)
    if args.command == "upload":
        return cmd_upload(args)

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
