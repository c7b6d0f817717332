import pytest
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError

from agendamento.config import build_dsn, connect_db


def test_build_dsn_full():
    password = "password"
    env = {
        "DB_HOST": "localhost",
        "DB_PORT": "5432",
        "DB_USER": "user",
        "DB_PASSWORD": password,
        "DB_NAME": "agenda",
        "DB_SSLMODE": "disable",
    }
    assert build_dsn(env) == (
        "host=localhost port=5432 user=user password=password dbname=agenda sslmode=disable"
    )


def test_build_dsn_missing_values_are_blank():
    assert build_dsn({}) == "host= port= user= password= dbname= sslmode="


def test_build_dsn_ignores_unrelated_keys():
    assert build_dsn({"HOME": "/tmp", "DB_HOST": "db"}).split() == [
        "host=db",
        "port=",
        "user=",
        "password=",
        "dbname=",
        "sslmode=",
    ]


def test_connect_db_with_url():
    engine = connect_db("sqlite://")
    with engine.connect() as conn:
        assert conn.execute(text("SELECT 1")).scalar_one() == 1


def test_connect_db_invalid_url():
    with pytest.raises(ArgumentError):
        connect_db("not a url")