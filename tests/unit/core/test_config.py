"""Core 설정 모듈 테스트."""

import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """다른 테스트의 환경 변수가 기본값 테스트에 섞이지 않도록 제거."""
    for name in [
        "DB2JSONSCHEMA_MYSQL_HOST",
        "DB2JSONSCHEMA_MYSQL_PORT",
        "DB2JSONSCHEMA_MYSQL_DATABASE",
        "DB2JSONSCHEMA_DATETIME_PATTERN",
        "DB2JSONSCHEMA_JSON_INDENT",
    ]:
        monkeypatch.delenv(name, raising=False)


class TestSettingsDefaults:
    """기본값 적용 테스트."""

    def test_mysql_defaults(self):
        """MySQL 설정의 기본값이 올바르게 적용되어야 한다."""
        from db2jsonschema.core.config import Settings

        settings = Settings(_env_file=None)

        assert settings.mysql_host == "localhost"
        assert settings.mysql_port == 3306
        assert settings.mysql_user == "root"
        assert settings.mysql_password == ""
        assert settings.mysql_database == "information_schema"

    def test_generation_defaults(self):
        """생성 설정의 기본값이 올바르게 적용되어야 한다."""
        from db2jsonschema.core.config import DEFAULT_DATETIME_PATTERN, Settings

        settings = Settings(_env_file=None)

        assert settings.datetime_pattern == DEFAULT_DATETIME_PATTERN
        assert settings.datetime_pattern == (
            "[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}"
        )
        assert settings.document_title is None
        assert settings.json_indent is None


class TestSettingsFromEnv:
    """환경변수에서 설정 로드 테스트."""

    def test_load_mysql_config_from_env(self, monkeypatch):
        """환경변수에서 MySQL 설정을 로드할 수 있어야 한다."""
        monkeypatch.setenv("DB2JSONSCHEMA_MYSQL_HOST", "mysql.example.com")
        monkeypatch.setenv("DB2JSONSCHEMA_MYSQL_PORT", "13306")
        monkeypatch.setenv("DB2JSONSCHEMA_MYSQL_DATABASE", "shop")

        from db2jsonschema.core.config import Settings

        settings = Settings(_env_file=None)

        assert settings.mysql_host == "mysql.example.com"
        assert settings.mysql_port == 13306
        assert settings.mysql_database == "shop"

    def test_load_datetime_pattern_from_env(self, monkeypatch):
        """환경변수에서 DATETIME 패턴을 로드할 수 있어야 한다."""
        monkeypatch.setenv("DB2JSONSCHEMA_DATETIME_PATTERN", "^.*$")

        from db2jsonschema.core.config import Settings

        settings = Settings(_env_file=None)

        assert settings.datetime_pattern == "^.*$"
