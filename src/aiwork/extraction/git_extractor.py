"""Git repository history extraction."""

from datetime import datetime, timedelta, timezone
from typing import Iterator, List, Optional

import git
import structlog
from git import Commit, Repo

from aiwork.errors import RetrievalError
from aiwork.models import CommitRecord, RepositoryConfig

logger = structlog.get_logger(__name__)


class GitExtractor:
    """Reads commit history from a Git repository."""

    def __init__(self, config: RepositoryConfig) -> None:
        """Initialize the GitExtractor.

        Args:
            config: Repository configuration

        Raises:
            RetrievalError: If repository path is invalid
        """
        self.config = config
        if not config.repo_path.exists():
            raise RetrievalError(f"Repository path does not exist: {config.repo_path}")

        try:
            self.repo = Repo(config.repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise RetrievalError(f"Invalid Git repository: {config.repo_path}") from e

    def extract_commits(
        self,
        days: int = 1,
        author_email: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> List[CommitRecord]:
        """Extract commits made within the last ``days`` days.

        Args:
            days: Size of the lookback window in days
            author_email: Only commits whose author matches this value
            now: End of the window (defaults to the current time)

        Returns:
            CommitRecord objects, newest first

        Raises:
            ValueError: If days is not positive
            RetrievalError: If the log cannot be read
        """
        if days <= 0:
            raise ValueError(f"days must be positive, got {days}")

        until = (now or datetime.now(timezone.utc)).astimezone()
        since = until - timedelta(days=days)

        # git filters on the committer date; rebased work keeps its old author date
        commits = [
            record
            for record in self.iter_commits(since=since, until=until, author=author_email)
            if since <= record.timestamp <= until
        ]
        logger.debug(
            "commits_extracted",
            repo=str(self.config.repo_path),
            days=days,
            author=author_email,
            count=len(commits),
        )
        return commits

    def iter_commits(
        self,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
        author: Optional[str] = None,
        max_count: Optional[int] = None,
    ) -> Iterator[CommitRecord]:
        """Iterate over commits reachable from the configured branch.

        Args:
            since: Only commits after this date
            until: Only commits before this date
            author: Author pattern passed to ``git log --author``
            max_count: Maximum number of commits to yield

        Yields:
            CommitRecord objects

        Raises:
            RetrievalError: If the log command fails
        """
        kwargs = {}
        if max_count:
            kwargs["max_count"] = max_count
        if since:
            kwargs["since"] = since.isoformat(timespec="seconds")
        if until:
            kwargs["until"] = until.isoformat(timespec="seconds")
        if author:
            kwargs["author"] = author

        try:
            for commit in self.repo.iter_commits(self.config.branch, **kwargs):
                yield self._to_record(commit)
        except git.exc.GitCommandError as e:
            raise RetrievalError(f"Failed to get git logs: {e}") from e
        except ValueError as e:
            # Raised by GitPython when HEAD does not point at a commit yet
            raise RetrievalError(f"Failed to get git logs: {e}") from e

    def _to_record(self, commit: Commit) -> CommitRecord:
        """Convert a GitPython Commit object into a CommitRecord.

        Args:
            commit: GitPython Commit object

        Returns:
            CommitRecord object
        """
        message = commit.message.strip()
        subject, _, body = message.partition("\n")

        return CommitRecord(
            hash=commit.hexsha,
            timestamp=commit.authored_datetime,
            subject=subject.strip(),
            body=body.strip(),
            author_name=commit.author.name or "",
            author_email=commit.author.email or "",
        )
