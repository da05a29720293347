"""Templates for generated README files."""

PARENT_README = """\
# {name}

This repository is managed by `noted`. Each workspace is a git submodule
holding its own folders and Markdown notes.

## Usage

```bash
noted workspace add <name>     # create a workspace
cd <name>
noted folder add <name>        # create a folder
noted note add <name>          # create a note
noted update                   # commit and push the workspace
noted update --all             # from here: commit and push every workspace
```

## Cloning

```bash
git clone --recurse-submodules <this-repo-url> {name}
# Or after cloning:
git submodule update --init --recursive
```
"""

WORKSPACE_README = "# {name}"


def render_parent_readme(name: str) -> str:
    return PARENT_README.format(name=name)


def render_workspace_readme(name: str) -> str:
    return WORKSPACE_README.format(name=name)
