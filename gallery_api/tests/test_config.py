import logging

import pytest

from src.core.logging import LoggingContextFilter, correlation_id_var, tenant_id_var
from src.core.settings import AppSettings
from src.db.config import Settings


class TestDatabaseSettings:
    def test_url_assembled_from_parts(self):
        s = Settings(
            POSTGRES_URL=None,
            POSTGRES_USER="gallery",
            POSTGRES_PASSWORD="secret",
            POSTGRES_DB="galleries",
            POSTGRES_HOST="db",
            POSTGRES_PORT=6543,
        )

        assert s.database_url == "postgresql://gallery:secret@db:6543/galleries"
        assert s.async_database_url == "postgresql+asyncpg://gallery:secret@db:6543/galleries"

    @pytest.mark.parametrize(
        "url, async_url, sync_url",
        [
            ("postgresql://u:p@h/d", "postgresql+asyncpg://u:p@h/d", "postgresql://u:p@h/d"),
            ("postgresql+psycopg://u:p@h/d", "postgresql+asyncpg://u:p@h/d", "postgresql://u:p@h/d"),
            ("postgres://u:p@h/d", "postgresql+asyncpg://u:p@h/d", "postgresql://u:p@h/d"),
        ],
    )
    def test_driver_variants(self, url, async_url, sync_url):
        s = Settings(POSTGRES_URL=url)

        assert s.async_database_url == async_url
        assert s.sync_database_url == sync_url

    def test_missing_configuration_raises(self):
        s = Settings(POSTGRES_URL=None, POSTGRES_USER=None, POSTGRES_PASSWORD=None, POSTGRES_DB=None)

        with pytest.raises(ValueError, match="Database configuration missing"):
            _ = s.database_url


class TestAppSettings:
    def test_cors_origins_accept_comma_separated_string(self):
        s = AppSettings(CORS_ORIGINS="https://a.example.com, https://b.example.com")

        assert s.CORS_ORIGINS == ["https://a.example.com", "https://b.example.com"]

    def test_log_level_is_upper_cased(self):
        assert AppSettings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


class TestLoggingContext:
    def _record(self):
        return logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

    def test_placeholders_outside_request(self):
        record = self._record()

        assert LoggingContextFilter().filter(record) is True
        assert record.correlation_id == "-"
        assert record.tenant_id == "-"

    def test_values_from_context(self):
        token_c = correlation_id_var.set("req-1")
        token_t = tenant_id_var.set("tenant-1")
        try:
            record = self._record()
            LoggingContextFilter().filter(record)
        finally:
            correlation_id_var.reset(token_c)
            tenant_id_var.reset(token_t)

        assert record.correlation_id == "req-1"
        assert record.tenant_id == "tenant-1"
