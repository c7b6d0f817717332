"""Versioned schema migrations tracked in a ``migrations`` table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from sqlalchemy import Column, MetaData, String, Table, delete, insert, select, text
from sqlalchemy.engine import Connection, Engine

from .models import Base

log = logging.getLogger(__name__)

_metadata = MetaData()
_history = Table("migrations", _metadata, Column("id", String(255), primary_key=True))


class MigrationError(Exception):
    """A migration could not be applied or rolled back."""


@dataclass(frozen=True)
class Migration:
    """A named schema change with an optional way back."""

    id: str
    migrate: Callable[[Connection], None]
    rollback: Optional[Callable[[Connection], None]] = None


class Migrator:
    """Applies migrations in order, recording which ones have run."""

    def __init__(self, engine: Engine, migrations):
        self._engine = engine
        self._migrations = list(migrations)
        if not self._migrations:
            raise MigrationError("no migrations defined")
        seen = set()
        for migration in self._migrations:
            if not migration.id:
                raise MigrationError("migration is missing an id")
            if migration.id in seen:
                raise MigrationError(f"duplicate migration id: {migration.id}")
            seen.add(migration.id)

    def _done(self) -> set[str]:
        _metadata.create_all(self._engine, checkfirst=True)
        with self._engine.connect() as conn:
            return set(conn.scalars(select(_history.c.id)))

    def applied(self):
        """Ids of the applied migrations, in migration order."""
        done = self._done()
        return [m.id for m in self._migrations if m.id in done]

    def migrate(self):
        """Apply every migration that has not run yet."""
        done = self._done()
        for migration in self._migrations:
            if migration.id in done:
                continue
            try:
                with self._engine.begin() as conn:
                    migration.migrate(conn)
                    conn.execute(insert(_history).values(id=migration.id))
            except Exception as exc:
                raise MigrationError(f"migration {migration.id} failed: {exc}") from exc
            log.info("Applied migration %s", migration.id)

    def rollback_last(self):
        """Undo the most recent applied migration and return its id."""
        done = self._done()
        last = next((m for m in reversed(self._migrations) if m.id in done), None)
        if last is None:
            raise MigrationError("no migration to roll back")
        if last.rollback is None:
            raise MigrationError(f"migration {last.id} cannot be rolled back")
        try:
            with self._engine.begin() as conn:
                last.rollback(conn)
                conn.execute(delete(_history).where(_history.c.id == last.id))
        except Exception as exc:
            raise MigrationError(f"rollback of {last.id} failed: {exc}") from exc
        return last.id


def _auto_migrate(table_name: str) -> Callable[[Connection], None]:
    def run(conn: Connection) -> None:
        tables = {}

        def visit(table):
            if table.name in tables:
                return
            for fk in table.foreign_keys:
                visit(fk.column.table)
            tables[table.name] = table

        visit(Base.metadata.tables[table_name])
        Base.metadata.create_all(conn, tables=list(tables.values()), checkfirst=True)

    return run


def _drop_table(table_name: str) -> Callable[[Connection], None]:
    def run(conn: Connection) -> None:
        quoted = conn.dialect.identifier_preparer.quote(table_name)
        conn.execute(text(f"DROP TABLE IF EXISTS {quoted}"))

    return run


def create_user_table():
    return Migration("20250430_create_users_table", _auto_migrate("users"), _drop_table("users"))


def create_service_table():
    return Migration(
        "20250430_create_services_table", _auto_migrate("services"), _drop_table("services")
    )


def create_offering_table():
    return Migration(
        "20250430_create_offerings_table", _auto_migrate("offerings"), _drop_table("offering")
    )


def create_vacancy_table():
    return Migration(
        "20250430_create_vacancies_table", _auto_migrate("vacancies"), _drop_table("vacancies")
    )


def create_requesting_users_table():
    return Migration(
        "20250430_create_requesting_users_table",
        _auto_migrate("requesting_users"),
        _drop_table("requesting_users"),
    )


def create_scheduling_table():
    return Migration(
        "20250430_create_scheduling_table",
        _auto_migrate("schedulings"),
        _drop_table("schedulings"),
    )


def all_migrations():
    """The application's migrations in the order they run."""
    return [
        create_user_table(),
        create_service_table(),
        create_offering_table(),
        create_requesting_users_table(),
        create_scheduling_table(),
        create_vacancy_table(),
    ]


def run_migrations(engine):
    """Apply all pending migrations and return the applied ids."""
    migrator = Migrator(engine, all_migrations())
    migrator.migrate()
    log.info("Migrations executed successfully!")
    return migrator.applied()