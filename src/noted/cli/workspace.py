"""Workspace CLI commands."""

import argparse

from noted.cli.report import print_outcomes

_ERRORS = (RuntimeError, FileNotFoundError, ValueError)


def cmd_workspace_add(args: argparse.Namespace) -> int:
    from noted.workspace import add_workspace

    settings = args.settings
    try:
        result = add_workspace(
            args.path,
            name=args.name or settings["workspace_name"],
            url=args.url,
            branch=settings["default_branch"],
            remote_name=settings["remote_name"],
        )
    except _ERRORS as exc:
        print(f"  ERROR: {exc}")
        return 1

    print(f"  Added workspace: {result['name']}")
    if result["url"]:
        print(f"  Remote: {result['url']}")
    return print_outcomes(result["outcome"].repositories)


def cmd_workspace_delete(args: argparse.Namespace) -> int:
    from noted.workspace import delete_workspace

    try:
        outcome = delete_workspace(args.path, args.name, branch=args.settings["default_branch"])
    except _ERRORS as exc:
        print(f"  ERROR: {exc}")
        return 1

    print(f"  Deleted workspace: {args.name}")
    return print_outcomes(outcome.repositories)


def cmd_workspace_list(args: argparse.Namespace) -> int:
    from noted.workspace import list_workspaces

    workspaces = list_workspaces(args.path)
    if not workspaces:
        print("  No workspaces found.")
        return 0

    for ws in workspaces:
        if args.all:
            print(f"  {ws['name']:<30} {ws['sha'][:8]}  {ws['state']}")
        else:
            print(f"  {ws['name']}")
    return 0


def cmd_workspace_add_remote(args: argparse.Namespace) -> int:
    from noted.workspace import add_workspace_remote

    settings = args.settings
    try:
        outcome = add_workspace_remote(
            args.path, args.name, args.url,
            branch=settings["default_branch"],
            remote_name=settings["remote_name"],
        )
    except _ERRORS as exc:
        print(f"  ERROR: {exc}")
        return 1

    print(f"  Added remote {args.url} to workspace: {args.name}")
    return print_outcomes(outcome.repositories)


def cmd_workspace_remove_remote(args: argparse.Namespace) -> int:
    from noted.workspace import remove_workspace_remote

    settings = args.settings
    try:
        outcome = remove_workspace_remote(
            args.path, args.name,
            branch=settings["default_branch"],
            remote_name=settings["remote_name"],
        )
    except _ERRORS as exc:
        print(f"  ERROR: {exc}")
        return 1

    print(f"  Removed remote from workspace: {args.name}")
    return print_outcomes(outcome.repositories)
