"""스키마 소스 - 데이터베이스에서 테이블/컬럼 메타데이터를 조회."""

import logging
from typing import Any, Protocol, Sequence

import pymysql

from db2jsonschema.core.exceptions import SourceError, UnsupportedTypeError
from db2jsonschema.core.models import Column, ColumnType, Table
from db2jsonschema.schema.type_classifier import classify

logger = logging.getLogger(__name__)

# max_length 가 의미 있는 타입
STRING_FAMILY = (ColumnType.STRING, ColumnType.ENUM)


class SchemaSource(Protocol):
    """테이블 메타데이터 소스 프로토콜."""

    def get_tables(self) -> list[Table]:
        """정규화된 테이블 목록을 반환."""
        ...


class StaticSchemaSource:
    """이미 준비된 테이블 목록을 그대로 돌려주는 소스."""

    def __init__(self, tables: Sequence[Table]) -> None:
        self._tables = list(tables)

    def get_tables(self) -> list[Table]:
        return list(self._tables)


class MySQLSchemaSource:
    """INFORMATION_SCHEMA.COLUMNS 에서 테이블 메타데이터를 빌드하는 소스."""

    QUERY = """
        SELECT TABLE_NAME, COLUMN_NAME, COLUMN_TYPE, IS_NULLABLE,
               CHARACTER_MAXIMUM_LENGTH, COLUMN_DEFAULT
        FROM INFORMATION_SCHEMA.COLUMNS
        WHERE TABLE_SCHEMA = %s
        ORDER BY TABLE_NAME, ORDINAL_POSITION
    """

    def __init__(self, mysql_adapter: Any, database: str) -> None:
        """스키마 소스 초기화.

        Args:
            mysql_adapter: 연결된 MySQL 어댑터
            database: 조회할 스키마(데이터베이스) 이름
        """
        self._mysql_adapter = mysql_adapter
        self._database = database

    def get_tables(self) -> list[Table]:
        """테이블 메타데이터를 조회.

        Returns:
            테이블 리스트 (테이블 이름순, 컬럼은 정의 순서)

        Raises:
            SourceError: 쿼리 실행 실패 시
            UnsupportedTypeError: 지원하지 않는 컬럼 타입이 있을 때
        """
        try:
            rows = self._mysql_adapter.execute_query(self.QUERY, (self._database,))
        except pymysql.MySQLError as e:
            raise SourceError(f"failed to read columns of {self._database}: {e}") from e

        tables: dict[str, Table] = {}
        for row in rows:
            table_name = row["TABLE_NAME"]
            table = tables.get(table_name)
            if table is None:
                table = tables[table_name] = Table(name=table_name)
            table.columns.append(self._build_column(table_name, row))

        logger.info("read %d tables from %s", len(tables), self._database)
        return list(tables.values())

    def _build_column(self, table_name: str, row: dict[str, Any]) -> Column:
        """조회 결과 한 행을 Column 으로 변환."""
        column_name = row["COLUMN_NAME"]
        raw_type = _as_text(row["COLUMN_TYPE"])

        try:
            classified = classify(raw_type)
        except UnsupportedTypeError as e:
            raise e.with_location(table_name, column_name) from e

        max_length = None
        if classified.column_type in STRING_FAMILY:
            max_length = row.get("CHARACTER_MAXIMUM_LENGTH")

        default = row.get("COLUMN_DEFAULT")
        return Column(
            name=column_name,
            column_type=classified.column_type,
            nullable=row["IS_NULLABLE"] == "YES",
            max_length=int(max_length) if max_length is not None else None,
            enum_values=classified.enum_values,
            unsigned=classified.unsigned,
            default=_as_text(default) if default is not None else None,
        )


def _as_text(value: Any) -> str:
    # 일부 서버 버전은 COLUMN_TYPE/COLUMN_DEFAULT 를 bytes 로 돌려준다
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)
