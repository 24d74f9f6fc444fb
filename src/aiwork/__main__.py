"""Allow ``python -m aiwork``."""

from aiwork.cli import app

app(prog_name="ai-work")
