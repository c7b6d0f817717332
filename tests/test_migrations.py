import pytest
from sqlalchemy import create_engine, inspect, text

from agendamento.migrations import (
    Migration,
    MigrationError,
    Migrator,
    all_migrations,
    create_scheduling_table,
    create_service_table,
    create_user_table,
    run_migrations,
)

EXPECTED_IDS = [
    "20250430_create_users_table",
    "20250430_create_services_table",
    "20250430_create_offerings_table",
    "20250430_create_requesting_users_table",
    "20250430_create_scheduling_table",
    "20250430_create_vacancies_table",
]


@pytest.fixture
def engine(tmp_path):
    return create_engine(f"sqlite:///{tmp_path / 'db.sqlite'}")


def _tables(engine):
    return set(inspect(engine).get_table_names())


def test_all_migrations_order():
    assert [m.id for m in all_migrations()] == EXPECTED_IDS


def test_run_migrations_creates_tables(engine):
    applied = run_migrations(engine)
    assert applied == EXPECTED_IDS
    assert {
        "users",
        "services",
        "offerings",
        "vacancies",
        "requesting_users",
        "schedulings",
        "migrations",
    } <= _tables(engine)


def test_migrate_is_idempotent(engine):
    run_migrations(engine)
    assert run_migrations(engine) == EXPECTED_IDS
    with engine.connect() as conn:
        count = conn.execute(text("SELECT COUNT(*) FROM migrations")).scalar_one()
    assert count == len(EXPECTED_IDS)


def test_dependencies_are_created_with_table(engine):
    Migrator(engine, [create_user_table(), create_scheduling_table()]).migrate()
    assert {"schedulings", "vacancies", "offerings", "services", "users"} <= _tables(engine)


def test_rollback_last_drops_vacancies(engine):
    run_migrations(engine)
    migrator = Migrator(engine, all_migrations())
    assert migrator.rollback_last() == "20250430_create_vacancies_table"
    assert "vacancies" not in _tables(engine)
    assert migrator.applied() == EXPECTED_IDS[:-1]


def test_rollback_without_applied(engine):
    with pytest.raises(MigrationError):
        Migrator(engine, all_migrations()).rollback_last()


def test_rollback_missing_function(engine):
    migrator = Migrator(engine, [Migration("only_up", lambda conn: None)])
    migrator.migrate()
    with pytest.raises(MigrationError):
        migrator.rollback_last()
    assert migrator.applied() == ["only_up"]


def test_duplicate_ids_rejected(engine):
    with pytest.raises(MigrationError, match="duplicate"):
        Migrator(engine, [create_user_table(), create_user_table()])


def test_empty_migrations_rejected(engine):
    with pytest.raises(MigrationError):
        Migrator(engine, [])


def test_missing_id_rejected(engine):
    with pytest.raises(MigrationError):
        Migrator(engine, [Migration("", lambda conn: None)])


def test_failing_migration_not_recorded(engine):
    bad = Migration("bad", lambda conn: conn.execute(text("SELECT * FROM missing_table")))
    migrator = Migrator(engine, [create_user_table(), bad, create_service_table()])
    with pytest.raises(MigrationError, match="bad"):
        migrator.migrate()
    assert migrator.applied() == ["20250430_create_users_table"]
    assert "services" not in _tables(engine)