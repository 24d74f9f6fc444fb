"""Prompt templates for work report generation."""

from typing import Sequence

from aiwork.models import CommitRecord

NO_COMMITS_MESSAGE = "No commits found for the specified period."

SYSTEM_PROMPT = """You are a helpful assistant that generates professional work reports from git commit messages.
Your task is to:
1. Analyze the provided git commits
2. Group related commits together
3. Create a clear, concise work report summarizing what was accomplished
4. Use bullet points and clear formatting
5. Highlight key achievements and completed features
6. Mention any bug fixes or improvements made

Format the report professionally but keep it concise and easy to read."""


def format_commits(commits: Sequence[CommitRecord]) -> str:
    """Render commits as the text block sent to the model.

    Each commit becomes ``- <subject>``, followed by an indented
    ``Details: <body>`` line when the body is non-empty.

    Args:
        commits: Commits to render, in the order they should appear

    Returns:
        Formatted text, or NO_COMMITS_MESSAGE when there are no commits
    """
    if not commits:
        return NO_COMMITS_MESSAGE

    lines = []
    for commit in commits:
        lines.append(f"- {commit.subject}")
        if commit.body:
            lines.append(f"  Details: {commit.body}")
    return "\n".join(lines)


def build_user_prompt(logs_text: str) -> str:
    """Wrap formatted commits in the user instruction."""
    return f"Please generate a work report based on these git commits:\n\n{logs_text}"
