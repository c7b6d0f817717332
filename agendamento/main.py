"""Command that connects to the database, migrates it and serves the API."""

import argparse
import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .config import connect_db
from .migrations import MigrationError, run_migrations
from .routes import create_app

log = logging.getLogger(__name__)


def main(argv=None):
    """Run the server; return a non-zero status if startup fails."""
    parser = argparse.ArgumentParser(prog="agendamento", description="Scheduling API server.")
    parser.add_argument(
        "--database-url", help="database URL; the DB_* environment variables by default"
    )
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    try:
        engine = connect_db(args.database_url)
    except (SQLAlchemyError, ImportError) as exc:
        log.error("Falha ao conectar no DB: %s", exc)
        return 1

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        log.error("Falha no ping ao banco de dados: %s", exc)
        return 1
    log.info("Banco de dados conectado com sucesso!")

    try:
        run_migrations(engine)
    except MigrationError as exc:
        log.error("Failed to migrate: %s", exc)
        return 1

    create_app().run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())