"""Generate VS Code workspace files for Cargo projects."""

__version__ = "0.1.0"
