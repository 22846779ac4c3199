"""
SQLite reference store for vPIC lookups.

Stores:
- vpic_makes: make id/name as published by vPIC
- vpic_models: model id/name, owned by a make
- vpic_model_years: which model years each model is offered in

Uses aiosqlite for async SQLite access. The database file lives at
backend/data/vpic.db and is auto-created on first startup; it is filled by
import_vpic_reference.py.
"""

import logging
from pathlib import Path

import aiosqlite

logger = logging.getLogger(__name__)

# Database file location
DB_PATH = Path(__file__).parent.parent / "data" / "vpic.db"

_db: aiosqlite.Connection | None = None


async def get_db() -> aiosqlite.Connection:
    """Get or create the database connection."""
    global _db
    if _db is None:
        DB_PATH.parent.mkdir(parents=True, exist_ok=True)
        _db = await aiosqlite.connect(str(DB_PATH))
        _db.row_factory = aiosqlite.Row
        await _db.execute("PRAGMA journal_mode=WAL")
        await _db.execute("PRAGMA foreign_keys=ON")
        await _init_tables(_db)
        logger.info(f"SQLite database initialized at {DB_PATH}")
    return _db


async def close_db():
    """Close the database connection."""
    global _db
    if _db:
        await _db.close()
        _db = None
        logger.info("SQLite database connection closed")


async def _init_tables(db: aiosqlite.Connection):
    """Create tables if they don't exist."""
    await db.executescript("""
        CREATE TABLE IF NOT EXISTS vpic_makes (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL,
            created_at TEXT NOT NULL DEFAULT (datetime('now'))
        );

        CREATE TABLE IF NOT EXISTS vpic_models (
            id INTEGER PRIMARY KEY,
            make_id INTEGER NOT NULL REFERENCES vpic_makes(id) ON DELETE CASCADE,
            name TEXT NOT NULL,
            created_at TEXT NOT NULL DEFAULT (datetime('now'))
        );

        CREATE INDEX IF NOT EXISTS idx_vpic_models_make
            ON vpic_models(make_id);

        CREATE TABLE IF NOT EXISTS vpic_model_years (
            model_id INTEGER NOT NULL REFERENCES vpic_models(id) ON DELETE CASCADE,
            year INTEGER NOT NULL,
            PRIMARY KEY (model_id, year)
        );

        CREATE INDEX IF NOT EXISTS idx_vpic_model_years_year
            ON vpic_model_years(year);
    """)
    await db.commit()


# ─── Writes (importer) ───────────────────────────────────────────────


async def upsert_make(make_id: int, name: str) -> None:
    """Insert a make, or rename it if the id already exists."""
    db = await get_db()
    await db.execute(
        """INSERT INTO vpic_makes (id, name) VALUES (?, ?)
           ON CONFLICT(id) DO UPDATE SET name = excluded.name""",
        (make_id, name.strip()),
    )
    await db.commit()


async def upsert_model(model_id: int, make_id: int, name: str) -> None:
    """Insert a model, or update its make/name if the id already exists."""
    db = await get_db()
    await db.execute(
        """INSERT INTO vpic_models (id, make_id, name) VALUES (?, ?, ?)
           ON CONFLICT(id) DO UPDATE SET make_id = excluded.make_id, name = excluded.name""",
        (model_id, make_id, name.strip()),
    )
    await db.commit()


async def add_model_year(model_id: int, year: int) -> bool:
    """Record that a model is offered in a year. Returns False if already known."""
    db = await get_db()
    cursor = await db.execute(
        "INSERT OR IGNORE INTO vpic_model_years (model_id, year) VALUES (?, ?)",
        (model_id, year),
    )
    await db.commit()
    return cursor.rowcount > 0


# ─── Reads ───────────────────────────────────────────────────────────


async def get_years() -> list[int]:
    """All model years with at least one model, newest first."""
    db = await get_db()
    cursor = await db.execute("SELECT DISTINCT year FROM vpic_model_years ORDER BY year DESC")
    rows = await cursor.fetchall()
    return [row["year"] for row in rows]


async def get_makes_for_year(year: int) -> list[dict]:
    """Makes offering at least one model in the given year, by name."""
    db = await get_db()
    cursor = await db.execute(
        """SELECT mk.id, mk.name, mk.created_at
           FROM vpic_makes mk
           JOIN vpic_models md ON md.make_id = mk.id
           JOIN vpic_model_years my ON my.model_id = md.id
           WHERE my.year = ?
           GROUP BY mk.id
           ORDER BY mk.name COLLATE NOCASE, mk.id""",
        (year,),
    )
    rows = await cursor.fetchall()
    return [dict(row) for row in rows]


async def get_models_for_make_year(make_id: int, year: int) -> list[dict]:
    """Models of a make offered in the given year, by name."""
    db = await get_db()
    cursor = await db.execute(
        """SELECT md.id, md.name, md.make_id, mk.name AS make_name, md.created_at
           FROM vpic_models md
           JOIN vpic_makes mk ON mk.id = md.make_id
           JOIN vpic_model_years my ON my.model_id = md.id
           WHERE md.make_id = ? AND my.year = ?
           ORDER BY md.name COLLATE NOCASE, md.id""",
        (make_id, year),
    )
    rows = await cursor.fetchall()
    return [dict(row) for row in rows]
