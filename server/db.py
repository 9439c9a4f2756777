"""database initialization helpers."""

from server.project_db import init_db as init_project_db


def init_all() -> None:
    """initialize all sqlite tables."""
    init_project_db()
