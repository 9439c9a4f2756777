"""SQLite storage for project documents."""

import os
import sqlite3
from pathlib import Path

from mapper.models.project import Project

DEFAULT_DB_PATH = Path(__file__).parent / "data" / "mapper.db"
MAPPER_DB_PATH = Path(os.getenv("MAPPER_DB_PATH", str(DEFAULT_DB_PATH)))


def _connect() -> sqlite3.Connection:
    MAPPER_DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(MAPPER_DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn


def init_db() -> None:
    with _connect() as conn:
        conn.execute(
            """
            create table if not exists projects (
                project_id text primary key,
                project_json text not null,
                name text not null,
                status text not null,
                owner text,
                created_at text not null,
                updated_at text not null
            )
            """
        )
        conn.execute(
            "create index if not exists idx_projects_created_at on projects(created_at)"
        )
        conn.commit()


def upsert_project(project: Project) -> None:
    """insert or overwrite a project document (last write wins)."""
    with _connect() as conn:
        conn.execute(
            """
            insert into projects (
                project_id, project_json, name, status, owner, created_at, updated_at
            )
            values (?, ?, ?, ?, ?, ?, ?)
            on conflict(project_id) do update set
                project_json = excluded.project_json,
                name = excluded.name,
                status = excluded.status,
                updated_at = excluded.updated_at
            """,
            (
                project.id,
                project.model_dump_json(by_alias=True),
                project.name,
                project.status,
                project.owner,
                project.created_at,
                project.last_modified,
            ),
        )
        conn.commit()


def get_project(project_id: str) -> Project | None:
    with _connect() as conn:
        row = conn.execute(
            "select project_json from projects where project_id = ?",
            (project_id,),
        ).fetchone()
    if not row:
        return None
    return Project.model_validate_json(row["project_json"])


def list_projects(owner: str | None = None) -> list[Project]:
    """all projects, newest first; only ``owner``'s when given."""
    with _connect() as conn:
        if owner is None:
            rows = conn.execute(
                "select project_json from projects order by created_at desc, rowid desc"
            ).fetchall()
        else:
            rows = conn.execute(
                """
                select project_json from projects
                where owner = ? or owner is null
                order by created_at desc, rowid desc
                """,
                (owner,),
            ).fetchall()
    return [Project.model_validate_json(row["project_json"]) for row in rows]


def count_projects() -> int:
    with _connect() as conn:
        row = conn.execute("select count(*) as total from projects").fetchone()
    return row["total"]


def delete_project(project_id: str) -> None:
    with _connect() as conn:
        conn.execute("delete from projects where project_id = ?", (project_id,))
        conn.commit()
