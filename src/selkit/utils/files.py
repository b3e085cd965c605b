"""Utility functions for locating the project root and the .selkit directory."""

from pathlib import Path

MARKERS = {'.git', 'pyproject.toml', '.selkit', 'requirements.txt'}


def get_project_root() -> Path:
    """Find the project root by searching upwards from the Current Working Directory.

    Stops at the first directory containing a marker file.
    """
    current_path = Path.cwd()

    for parent in [current_path] + list(current_path.parents):
        if any((parent / marker).exists() for marker in MARKERS):
            return parent

    # No markers (e.g. running in /tmp)
    return current_path


def get_logs_path() -> Path:
    """Return the path to the logs directory in .selkit."""
    return get_project_root() / '.selkit' / 'logs'


def is_initialized() -> bool:
    """Check if the .selkit directory exists in the project root."""
    selkit_dir = get_project_root() / '.selkit'
    return selkit_dir.is_dir() and (selkit_dir / 'logs').is_dir()


def init_selkit() -> Path:
    """Initialize the .selkit directory and return its path."""
    selkit_dir = get_project_root() / '.selkit'
    (selkit_dir / 'logs').mkdir(parents=True, exist_ok=True)

    # Keep generated files out of source control
    gitignore = selkit_dir / '.gitignore'
    if not gitignore.exists():
        gitignore.write_text('# Automatically created by selkit\n*\n')

    return selkit_dir
