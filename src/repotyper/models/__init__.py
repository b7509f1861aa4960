"""Data models for RepoTyper"""

from repotyper.models.chunk import Chunk
from repotyper.models.config import RepoTyperConfig, TypingSettings
from repotyper.models.language import LanguageProfile
from repotyper.models.project import Project, SourceFile
from repotyper.models.session import SessionState, SessionStatus, SpecialKey, Statistics

__all__ = [
    "Chunk",
    "LanguageProfile",
    "Project",
    "RepoTyperConfig",
    "SessionState",
    "SessionStatus",
    "SourceFile",
    "SpecialKey",
    "Statistics",
    "TypingSettings",
]
