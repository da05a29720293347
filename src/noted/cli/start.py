"""Parent repository CLI command."""

import argparse


def cmd_start(args: argparse.Namespace) -> int:
    from noted.parent import init_parent
    from noted.remote import GitHubCliRemoteCreator

    settings = args.settings
    if args.local and args.remote:
        print("  ERROR: You cannot specify both --local and --remote at the same time.")
        return 1

    mode, remote_url = "local", None
    if args.remote == "new":
        mode = "github"
    elif args.remote:
        mode, remote_url = "url", args.remote

    creator = None
    if mode == "github":
        creator = GitHubCliRemoteCreator(
            visibility=settings["github_visibility"],
            remote=settings["remote_name"],
        )

    name = args.name or settings["parent_name"]
    try:
        result = init_parent(
            name=name,
            location=args.path,
            remote=mode,
            remote_url=remote_url,
            creator=creator,
            branch=settings["default_branch"],
            remote_name=settings["remote_name"],
        )
    except (ValueError, FileExistsError, RuntimeError) as exc:
        print(f"  ERROR: {exc}")
        return 1

    config = result["config"]
    print(f"  Initialized {name} at {result['path']}")
    print(f"  Type: {config['parent_type']}")
    if config["remote_url"]:
        print(f"  Remote: {config['remote_url']} ({config['remote_type']})")

    push = result["push"]
    if push is not None:
        print(f"  Push: {push.describe()}")
        if not push.ok:
            return 1
    return 0
