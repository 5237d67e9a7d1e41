"""SQLite log of search runs and application outcomes."""

import sqlite3
from datetime import datetime
from pathlib import Path

from jobpilot.core.schemas import ApplicationOutcome, ApplicationStatus

_APPLICATIONS_TABLE = """
CREATE TABLE IF NOT EXISTS applications (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    job_url     TEXT NOT NULL,
    status      TEXT NOT NULL,
    message     TEXT NOT NULL DEFAULT '',
    timestamp   TEXT NOT NULL
);
"""

_APPLICATIONS_INDEX = """
CREATE INDEX IF NOT EXISTS idx_applications_job_url ON applications (job_url);
"""

_SEARCH_RUNS_TABLE = """
CREATE TABLE IF NOT EXISTS search_runs (
    id               INTEGER PRIMARY KEY AUTOINCREMENT,
    sites            TEXT NOT NULL,
    title            TEXT NOT NULL,
    experience_level TEXT NOT NULL,
    raw_count        INTEGER NOT NULL,
    filtered_count   INTEGER NOT NULL,
    started_at       TEXT NOT NULL,
    finished_at      TEXT NOT NULL
);
"""

_DONE_STATUSES = (ApplicationStatus.APPLIED.value, ApplicationStatus.ALREADY_APPLIED.value)


def init_db(path: str | Path) -> sqlite3.Connection:
    """Create the database and tables, returning a connection."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute(_APPLICATIONS_TABLE)
    conn.execute(_APPLICATIONS_INDEX)
    conn.execute(_SEARCH_RUNS_TABLE)
    conn.commit()
    return conn


def record_outcome(conn: sqlite3.Connection, outcome: ApplicationOutcome) -> int:
    """Append an application outcome. Returns the row ID.

    Every attempt is kept; retries of the same URL add new rows.
    """
    cursor = conn.execute(
        "INSERT INTO applications (job_url, status, message, timestamp) VALUES (?, ?, ?, ?)",
        (outcome.job_url, outcome.status.value, outcome.message, outcome.timestamp.isoformat()),
    )
    conn.commit()
    return cursor.lastrowid or 0


def list_outcomes(conn: sqlite3.Connection, job_url: str | None = None) -> list[ApplicationOutcome]:
    """Return recorded outcomes, oldest first, optionally for one URL."""
    if job_url is None:
        rows = conn.execute(
            "SELECT job_url, status, message, timestamp FROM applications ORDER BY id",
        ).fetchall()
    else:
        rows = conn.execute(
            "SELECT job_url, status, message, timestamp FROM applications "
            "WHERE job_url = ? ORDER BY id",
            (job_url,),
        ).fetchall()
    return [
        ApplicationOutcome(
            job_url=row["job_url"],
            status=ApplicationStatus(row["status"]),
            message=row["message"],
            timestamp=datetime.fromisoformat(row["timestamp"]),
        )
        for row in rows
    ]


def has_applied(conn: sqlite3.Connection, job_url: str) -> bool:
    """True if any recorded attempt for the URL ended applied or already_applied."""
    row = conn.execute(
        "SELECT 1 FROM applications WHERE job_url = ? AND status IN (?, ?) LIMIT 1",
        (job_url, *_DONE_STATUSES),
    ).fetchone()
    return row is not None


def insert_search_run(
    conn: sqlite3.Connection,
    sites: list[str],
    title: str,
    experience_level: str,
    raw_count: int,
    filtered_count: int,
    started_at: datetime,
    finished_at: datetime,
) -> int:
    """Record a completed search run. Returns the row ID."""
    cursor = conn.execute(
        """
        INSERT INTO search_runs
            (sites, title, experience_level, raw_count, filtered_count, started_at, finished_at)
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        (
            ",".join(sites),
            title,
            experience_level,
            raw_count,
            filtered_count,
            started_at.isoformat(),
            finished_at.isoformat(),
        ),
    )
    conn.commit()
    return cursor.lastrowid or 0
