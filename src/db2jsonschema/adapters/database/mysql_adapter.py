"""MySQL 데이터베이스 어댑터."""

import logging
from typing import Any, Optional, Sequence

import pymysql
import pymysql.cursors

from db2jsonschema.core.config import Settings
from db2jsonschema.core.exceptions import SourceError

logger = logging.getLogger(__name__)


class MySQLAdapter:
    """MySQL 데이터베이스 어댑터."""

    def __init__(self, settings: Settings) -> None:
        """어댑터 초기화.

        Args:
            settings: 애플리케이션 설정
        """
        self._settings = settings
        self._connection: Any = None

    def connect(self) -> Any:
        """MySQL 데이터베이스에 연결.

        Returns:
            데이터베이스 연결 객체

        Raises:
            SourceError: 연결 실패 시
        """
        address = f"{self._settings.mysql_host}:{self._settings.mysql_port}"
        logger.info("connecting to mysql %s/%s", address, self._settings.mysql_database)
        try:
            self._connection = pymysql.connect(
                host=self._settings.mysql_host,
                port=self._settings.mysql_port,
                user=self._settings.mysql_user,
                password=self._settings.mysql_password,
                database=self._settings.mysql_database,
                connect_timeout=self._settings.mysql_connect_timeout,
                charset="utf8mb4",
                cursorclass=pymysql.cursors.DictCursor,
            )
        except pymysql.MySQLError as e:
            raise SourceError(f"failed to connect to mysql {address}: {e}") from e
        return self._connection

    def execute_query(
        self, query: str, params: Optional[Sequence[Any]] = None
    ) -> list[dict[str, Any]]:
        """SELECT 쿼리를 실행하고 결과를 반환.

        Args:
            query: 실행할 SQL 쿼리
            params: 바인딩 파라미터

        Returns:
            딕셔너리 리스트 형태의 쿼리 결과
        """
        if self._connection is None:
            raise RuntimeError("연결이 설정되지 않았습니다. connect()를 먼저 호출하세요.")

        with self._connection.cursor() as cursor:
            cursor.execute(query, params)
            return list(cursor.fetchall())

    def close(self) -> None:
        """연결을 닫음."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.info("mysql connection closed")

    def __enter__(self) -> "MySQLAdapter":
        self.connect()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
