"""애플리케이션 설정 모듈."""

from typing import Optional

from pydantic_settings import BaseSettings

# 기본 DATETIME 패턴 (MySQL DATETIME/TIMESTAMP 문자열 형식)
DEFAULT_DATETIME_PATTERN = "[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}"


class Settings(BaseSettings):
    """애플리케이션 설정."""

    # MySQL 데이터베이스 설정
    mysql_host: str = "localhost"
    mysql_port: int = 3306
    mysql_user: str = "root"
    mysql_password: str = ""
    mysql_database: str = "information_schema"
    mysql_connect_timeout: int = 10

    # JSON Schema 생성 설정
    datetime_pattern: str = DEFAULT_DATETIME_PATTERN
    document_title: Optional[str] = None
    json_indent: Optional[int] = None

    # 로깅 설정
    log_level: str = "WARNING"

    model_config = {
        "env_prefix": "DB2JSONSCHEMA_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
