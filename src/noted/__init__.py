"""noted - notes and workspaces versioned as git submodules."""

__version__ = "1.0.0"
