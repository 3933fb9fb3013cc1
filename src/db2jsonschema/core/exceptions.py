"""db2jsonschema 예외 정의."""

from typing import Optional


class Db2JsonSchemaError(Exception):
    """db2jsonschema 기본 예외."""

    pass


class UnsupportedTypeError(Db2JsonSchemaError):
    """분류하거나 JSON Schema 타입으로 변환할 수 없는 컬럼 타입."""

    def __init__(
        self,
        raw_type: str,
        table: Optional[str] = None,
        column: Optional[str] = None,
    ) -> None:
        self.raw_type = raw_type
        self.table = table
        self.column = column
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        message = f"unsupported type: {self.raw_type}"
        if self.table and self.column:
            message += f" (column {self.table}.{self.column})"
        elif self.column:
            message += f" (column {self.column})"
        return message

    def with_location(self, table: str, column: str) -> "UnsupportedTypeError":
        """테이블/컬럼 정보를 붙인 새 예외를 반환."""
        return UnsupportedTypeError(self.raw_type, table=table, column=column)


class SourceError(Db2JsonSchemaError):
    """메타데이터 소스(연결, 쿼리, 결과 읽기) 실패."""

    pass


class SerializationError(Db2JsonSchemaError):
    """JSON Schema 문서 직렬화 실패."""

    pass


class DuplicateTableError(Db2JsonSchemaError):
    """같은 이름의 테이블이 한 문서에 두 번 등장."""

    def __init__(self, table: str) -> None:
        self.table = table
        super().__init__(f"duplicate table name: {table}")
