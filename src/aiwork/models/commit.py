"""Data models for Git commit information."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommitRecord(BaseModel):
    """A single commit read from the repository history."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "hash": "abc123def4567890abc123def4567890abc123de",
                "timestamp": "2024-01-15T10:30:00+00:00",
                "subject": "Fix authentication bug",
                "body": "Resolves issue with token validation",
                "author_name": "John Doe",
                "author_email": "john@example.com",
            }
        },
    )

    hash: str = Field(..., description="Full commit SHA hash")
    timestamp: datetime = Field(..., description="Authored timestamp")
    subject: str = Field(..., description="First line of the commit message")
    body: str = Field("", description="Commit message after the subject line")
    author_name: str = Field(..., description="Author name")
    author_email: str = Field(..., description="Author email")

    @property
    def short_hash(self) -> str:
        """Short commit SHA hash (7 chars)."""
        return self.hash[:7]
