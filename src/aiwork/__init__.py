"""aiwork - AI-generated work reports from git history."""

__version__ = "1.0.0"
