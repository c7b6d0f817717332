# agendamento

The backend for a service-scheduling application. Providers publish
services. Services have weekly offerings. Offerings open vacancies, and
customers book those vacancies as schedulings.

## Contents

- `agendamento.models`: SQLAlchemy 2.0 declarative models.
  - Entities: `User`, `Service`, `Offering`, `Vacancy`, `RequestingUser` and `Scheduling`.
  - All entities inherit the columns of the abstract `Base`. These are `id` (a UUID generated on insert), `created_at`, `updated_at` (refreshed on update) and `deleted_at` (indexed and nullable).
  - `DayOfWeek` is an `IntEnum`, Sunday = 0 to Saturday = 6. `str()` gives the Portuguese name, for example `"Segunda"`. `DayOfWeek.from_db(value)` accepts only integers in range and raises `ValueError` for anything else.
  - `SchedulingStatus` has the values `pending`, `cancelled` and `accepted`. `SchedulingStatus.from_db(value)` accepts only those strings and raises `ValueError` for anything else. New schedulings default to `pending`.
  - `UserRole` has the values `admin`, `provider` and `customer`. A user's `role` defaults to `provider`.
- `agendamento.config`:
  - `build_dsn(env)` builds a PostgreSQL keyword DSN (`host=... port=... user=... password=... dbname=... sslmode=...`) from the `DB_*` entries of a mapping. Missing entries become empty values.
  - `connect_db(url=None)` returns a SQLAlchemy engine. When it is given a URL, it uses that URL. Without one, it loads `.env` if that file is present, logs a warning if it is not, and connects to PostgreSQL with the DSN built from the environment.
- `agendamento.migrations`: versioned schema migrations. The ids of applied migrations are recorded in a `migrations` table.
  - `Migration` is a frozen dataclass with the fields `id`, `migrate` and an optional `rollback`. Each field takes a callable that receives a connection.
  - `Migrator(engine, migrations)` rejects an empty list, a missing id or a duplicate id by raising `MigrationError`.
    - `migrate()` applies the pending migrations in order, each in its own transaction.
    - `applied()` lists the applied ids in migration order.
    - `rollback_last()` undoes the newest applied migration and returns its id.
    - A failure raises `MigrationError`.
  - `create_user_table()`, `create_service_table()`, `create_offering_table()`, `create_vacancy_table()`, `create_requesting_users_table()` and `create_scheduling_table()` each return the migration for one table.
    - A migration also creates any tables that its foreign keys point to, if they do not exist yet.
    - A rollback drops the table. The one exception is the offerings rollback, which drops a table named `offering`, so the `offerings` table is left in place.
  - `all_migrations()` returns them in the order users, services, offerings, requesting users, schedulings, vacancies.
  - `run_migrations(engine)` applies them all and returns the applied ids.
- `agendamento.routes`: `create_app()` returns the Flask application.
- `agendamento.main`: `main(argv=None)` is the entry point of the `agendamento` command.

## Installation

```
pip install .
```

When no `--database-url` is given, the server connects to PostgreSQL through SQLAlchemy's default PostgreSQL driver. This package does not install that driver; install it separately (for example `pip install psycopg2-binary`).

## Configuration

When no database URL is given, the connection settings come from these environment variables. If a `.env` file is present in the working directory, it is read first.

| Variable      | Meaning                          |
|---------------|----------------------------------|
| `DB_HOST`     | database host                    |
| `DB_PORT`     | database port                    |
| `DB_USER`     | database user                    |
| `DB_PASSWORD` | database password                |
| `DB_NAME`     | database name                    |
| `DB_SSLMODE`  | SSL mode, for example `disable`  |

Example `.env`:

```
DB_HOST=localhost
DB_PORT=5432
DB_USER=user
DB_PASSWORD=password
DB_NAME=agendamento
DB_SSLMODE=disable
```

## Running the server

```
agendamento [--database-url URL] [--host HOST] [--port PORT]
```

This command does the following, in order:

1. Connects to the database. If `--database-url` is given, it uses that URL; otherwise it uses the `DB_*` settings above.
2. Checks the connection with `SELECT 1`.
3. Applies any pending migrations.
4. Serves the API with Flask's built-in server on `--host` (default `0.0.0.0`) and `--port` (default `3000`).

If connecting, the check or migrating fails, the command logs the error and exits with status 1.

## Endpoints

| Method | Path            | Response                               |
|--------|-----------------|----------------------------------------|
| GET    | `/ping`         | `200 {"message": "hehehe funcionou"}`  |
| GET    | `/api/v1/users` | `202 {"status": "ok"}`                 |

## Using the pieces directly

```python
from agendamento.config import connect_db
from agendamento.migrations import run_migrations
from agendamento.routes import create_app

engine = connect_db("sqlite:///agendamento.db")
print(run_migrations(engine))

app = create_app()
client = app.test_client()
print(client.get("/ping").get_json())
```

## Limitations

The package defines the data model and the schema, but the HTTP API does not use them yet. No endpoint reads or writes users, services, offerings, vacancies or schedulings. `/api/v1/users` returns a fixed status and does not return a list. There is no authentication and no e-mail or messaging notifications.

## Tests

```
pip install .[test]
pytest
```