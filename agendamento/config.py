"""Database connection settings."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import create_engine

log = logging.getLogger(__name__)

_DSN_FIELDS = (
    ("host", "DB_HOST"),
    ("port", "DB_PORT"),
    ("user", "DB_USER"),
    ("password", "DB_PASSWORD"),
    ("dbname", "DB_NAME"),
    ("sslmode", "DB_SSLMODE"),
)


def build_dsn(env):
    """Build a PostgreSQL keyword DSN from the DB_* entries of a mapping."""
    return " ".join(f"{key}={env.get(var, '')}" for key, var in _DSN_FIELDS)


def connect_db(url=None):
    """Create an engine for ``url``, or for PostgreSQL configured by the environment."""
    if url is not None:
        return create_engine(url)
    env_file = Path(".env")
    if env_file.is_file():
        load_dotenv(env_file)
    else:
        log.warning(
            "Aviso: não foi possível ler o .env, confiando em variáveis de ambiente do sistema"
        )
    return create_engine("postgresql://", connect_args={"dsn": build_dsn(os.environ)})