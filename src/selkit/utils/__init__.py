"""Utility components for selkit."""

from selkit.utils.files import get_logs_path, get_project_root, init_selkit, is_initialized
from selkit.utils.logging import setup_local_logging

__all__ = [
    'get_logs_path',
    'get_project_root',
    'init_selkit',
    'is_initialized',
    'setup_local_logging',
]
