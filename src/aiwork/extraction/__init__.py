"""Git history extraction."""

from aiwork.extraction.git_extractor import GitExtractor

__all__ = ["GitExtractor"]
