"""Core functionality for RepoTyper"""

from repotyper.core.config import load_config, save_config, create_config, config_exists
from repotyper.core.comments import strip_comments, remove_comments
from repotyper.core.chunking import split_into_chunks
from repotyper.core.loader import load_project, load_project_async

__all__ = [
    "load_config",
    "save_config",
    "create_config",
    "config_exists",
    "strip_comments",
    "remove_comments",
    "split_into_chunks",
    "load_project",
    "load_project_async",
]
