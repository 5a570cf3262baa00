"""Unit tests for PostgresConfig validation and URL handling."""

import pytest  # type: ignore

from pkg.postgre.type import PostgresConfig


class TestPostgresConfig:
    @pytest.mark.parametrize(
        "url",
        [
            "postgresql://u:p@localhost:5432/reviews",
            "postgres://u:p@localhost:5432/reviews",
            "postgresql+asyncpg://u:p@localhost:5432/reviews",
        ],
    )
    def test_async_url(self, url):
        config = PostgresConfig(database_url=url)
        assert config.async_url == "postgresql+asyncpg://u:p@localhost:5432/reviews"

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"database_url": ""}, "required"),
            ({"database_url": "mysql://u@h/db"}, "PostgreSQL"),
            ({"database_url": "postgresql://h/db", "pool_size": 0}, "pool_size"),
            ({"database_url": "postgresql://h/db", "max_overflow": -1}, "max_overflow"),
            ({"database_url": "postgresql://h/db", "schema": " "}, "schema"),
        ],
    )
    def test_invalid(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            PostgresConfig(**kwargs)
