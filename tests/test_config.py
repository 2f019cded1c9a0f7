import os
import unittest
from unittest.mock import patch

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from sqlalchemy.engine import make_url

from app.core.config import Settings
from app.db import session as db_session


class SettingsTests(unittest.TestCase):
    def test_database_url_is_assembled_from_parts(self):
        cfg = Settings(
            _env_file=None,
            DATABASE_URL="",
            DB_USER="ui",
            DB_PASSWORD="s3cret",
            DB_HOST="db.internal",
            DB_PORT=6543,
            DB_DATABASE="forms",
        )
        url = make_url(cfg.database_url)
        self.assertEqual(url.drivername, "postgresql+psycopg")
        self.assertEqual(url.username, "ui")
        self.assertEqual(url.password, "s3cret")
        self.assertEqual(url.host, "db.internal")
        self.assertEqual(url.port, 6543)
        self.assertEqual(url.database, "forms")

    def test_explicit_database_url_wins(self):
        cfg = Settings(_env_file=None, DATABASE_URL="sqlite+pysqlite:///./local.db", DB_HOST="ignored")
        self.assertEqual(cfg.database_url, "sqlite+pysqlite:///./local.db")

    def test_initial_value_token_modes(self):
        self.assertEqual(Settings(_env_file=None, INITIAL_VALUE_TOKEN_CASE="upper").initial_value_tokens, {"TRUE": True, "FALSE": False})
        self.assertEqual(Settings(_env_file=None, INITIAL_VALUE_TOKEN_CASE="lower").initial_value_tokens, {"true": True, "false": False})
        both = Settings(_env_file=None, INITIAL_VALUE_TOKEN_CASE="both").initial_value_tokens
        self.assertEqual(set(both), {"TRUE", "FALSE", "true", "false"})
        self.assertEqual(Settings(_env_file=None, INITIAL_VALUE_TOKEN_CASE="").initial_value_tokens, {"TRUE": True, "FALSE": False})

    def test_cors_origins_list(self):
        cfg = Settings(_env_file=None, CORS_ORIGINS="http://a.example, http://b.example,")
        self.assertEqual(cfg.cors_origins_list, ["http://a.example", "http://b.example"])

    def test_postgres_engine_options_include_ssl_and_statement_timeout(self):
        with patch.multiple(db_session.settings, DB_SSL=True, DB_STATEMENT_TIMEOUT_MS=2500, DB_SCHEMA="testapi"):
            kwargs = db_session._engine_kwargs("postgresql+psycopg://u:p@localhost/forms")
        self.assertEqual(kwargs["connect_args"]["sslmode"], "require")
        self.assertEqual(kwargs["connect_args"]["options"], "-c statement_timeout=2500")
        self.assertEqual(kwargs["execution_options"], {"schema_translate_map": {None: "testapi"}})
        self.assertTrue(kwargs["pool_pre_ping"])
