"""Update and upload CLI commands."""

import argparse

from noted.cli.report import print_outcomes


def _run_sync(args: argparse.Namespace, summarize: bool) -> int:
    from noted.sync import sync_all, sync_workspace

    settings = args.settings
    run = sync_all if args.all else sync_workspace
    try:
        report = run(
            args.path,
            branch=settings["default_branch"],
            remote=settings["remote_name"],
            summarize=summarize,
        )
    except RuntimeError as exc:
        print(f"  ERROR: {exc}")
        return 1

    if not report.outcomes:
        print("  Nothing to do.")
        return 0
    return print_outcomes(report.outcomes)


def cmd_update(args: argparse.Namespace) -> int:
    return _run_sync(args, summarize=False)


def cmd_upload(args: argparse.Namespace) -> int:
    return _run_sync(args, summarize=True)
