"""Data models for commit history and settings."""

from aiwork.models.commit import CommitRecord
from aiwork.models.config import RepositoryConfig, Settings

__all__ = [
    "CommitRecord",
    "RepositoryConfig",
    "Settings",
]
