"""JSON Schema 변환기 - 테이블 메타데이터를 JSON Schema 문서로 변환.

출력 문서 형태 (테이블 스키마는 definitions 아래에 두고 $ref 로 참조)::

    {
      "$schema": "http://json-schema.org/draft-07/schema#",
      "type": "object",
      "properties": {
        "users": {"type": "array", "items": {"$ref": "#/definitions/users"}}
      },
      "definitions": {
        "users": {
          "type": "object",
          "title": "users",
          "properties": {"id": {"type": "integer"}},
          "required": ["id"]
        }
      }
    }
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from db2jsonschema.core.config import DEFAULT_DATETIME_PATTERN
from db2jsonschema.core.exceptions import (
    DuplicateTableError,
    SerializationError,
    UnsupportedTypeError,
)
from db2jsonschema.core.models import Column, ColumnType, Table

logger = logging.getLogger(__name__)

JSON_SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"

# 픽스처에서 원시 값("RAW=...")을 허용하기 위한 공용 정의 이름
RAW_VALUE_DEFINITION = "testfixtures-raw"
RAW_VALUE_PATTERN = "RAW=.*"

DATETIME_DESCRIPTION = "(datetime)"

JSON_SCHEMA_TYPES: dict[ColumnType, str] = {
    ColumnType.INTEGER: "integer",
    ColumnType.FLOAT: "number",
    ColumnType.BOOLEAN: "boolean",
    ColumnType.STRING: "string",
    ColumnType.ENUM: "string",
    ColumnType.DATE: "string",
    ColumnType.DATETIME: "string",
    ColumnType.JSON: "string",
}


@dataclass(frozen=True)
class TranslatorSettings:
    """변환 설정.

    Attributes:
        datetime_pattern: DATETIME 컬럼에 붙일 정규식
        title: 문서 title (None 이면 생략)
        allow_raw_values: 컬럼마다 "RAW=..." 문자열을 허용하는 anyOf 를 붙일지 여부
    """

    datetime_pattern: str = DEFAULT_DATETIME_PATTERN
    title: Optional[str] = None
    allow_raw_values: bool = False


def to_json_schema_type(column_type: ColumnType) -> str:
    """ColumnType을 JSON Schema 기본 타입으로 변환.

    Raises:
        UnsupportedTypeError: 매핑이 없는 타입일 때
    """
    try:
        return JSON_SCHEMA_TYPES[column_type]
    except (KeyError, TypeError):
        raise UnsupportedTypeError(str(getattr(column_type, "value", column_type))) from None


def definition_ref(name: str) -> str:
    """definitions 항목을 가리키는 $ref 값 (JSON Pointer 이스케이프 적용)."""
    token = name.replace("~", "~0").replace("/", "~1")
    return f"#/definitions/{token}"


class SchemaTranslator:
    """테이블 메타데이터를 JSON Schema 문서로 변환하는 서비스."""

    def __init__(self, settings: Optional[TranslatorSettings] = None) -> None:
        """변환기 초기화.

        Args:
            settings: 변환 설정 (None 이면 기본값)
        """
        self._settings = settings or TranslatorSettings()

    @property
    def settings(self) -> TranslatorSettings:
        """현재 변환 설정."""
        return self._settings

    def translate_column(self, column: Column) -> dict[str, Any]:
        """컬럼 하나의 스키마를 생성.

        Args:
            column: 컬럼 메타데이터

        Returns:
            컬럼 JSON Schema

        Raises:
            UnsupportedTypeError: 변환할 수 없는 타입일 때
        """
        schema: dict[str, Any] = {"type": to_json_schema_type(column.column_type)}

        if column.enum_values:
            schema["enum"] = list(column.enum_values)

        if column.max_length and column.max_length > 0:
            schema["maxLength"] = column.max_length

        if column.column_type == ColumnType.DATE:
            schema["format"] = "date"

        if column.column_type == ColumnType.DATETIME:
            schema["pattern"] = self._settings.datetime_pattern
            schema["description"] = DATETIME_DESCRIPTION

        if self._settings.allow_raw_values:
            return {"anyOf": [schema, {"$ref": definition_ref(RAW_VALUE_DEFINITION)}]}

        return schema

    def translate_table(self, table: Table) -> dict[str, Any]:
        """테이블 하나의 스키마(행 하나를 나타내는 object)를 생성.

        Args:
            table: 테이블 메타데이터

        Returns:
            테이블 JSON Schema

        Raises:
            UnsupportedTypeError: 변환할 수 없는 컬럼이 있을 때 (테이블/컬럼 정보 포함)
        """
        properties: dict[str, Any] = {}
        required: list[str] = []

        for column in table.columns:
            try:
                properties[column.name] = self.translate_column(column)
            except UnsupportedTypeError as e:
                raise e.with_location(table.name, column.name) from e

            # 기본값이 있으면 DB가 채워 주므로 NOT NULL 이어도 필수가 아님
            if column.required and column.name not in required:
                required.append(column.name)

        return {
            "type": "object",
            "title": table.name,
            "properties": properties,
            "required": required,
        }

    def translate(self, tables: Iterable[Table]) -> dict[str, Any]:
        """전체 테이블을 하나의 JSON Schema 문서로 조립.

        실패 시 부분 결과 없이 예외를 전파한다.

        Args:
            tables: 테이블 메타데이터 (순서 유지)

        Returns:
            JSON Schema 문서

        Raises:
            UnsupportedTypeError: 변환할 수 없는 컬럼이 있을 때
            DuplicateTableError: 테이블 이름이 중복될 때
        """
        document: dict[str, Any] = {"$schema": JSON_SCHEMA_DRAFT}
        if self._settings.title is not None:
            document["title"] = self._settings.title
        document["type"] = "object"

        properties: dict[str, Any] = {}
        definitions: dict[str, Any] = {}
        if self._settings.allow_raw_values:
            definitions[RAW_VALUE_DEFINITION] = {
                "type": "string",
                "pattern": RAW_VALUE_PATTERN,
            }

        for table in tables:
            table_schema = self.translate_table(table)
            title = table_schema["title"]
            if title in properties or title in definitions:
                raise DuplicateTableError(title)

            logger.debug("translated table %s (%d columns)", title, len(table.columns))
            properties[title] = {
                "type": "array",
                "items": {"$ref": definition_ref(title)},
            }
            definitions[title] = table_schema

        document["properties"] = properties
        document["definitions"] = definitions
        return document


def to_json(document: dict[str, Any], indent: Optional[int] = None) -> bytes:
    """JSON Schema 문서를 UTF-8 JSON 바이트로 직렬화.

    Raises:
        SerializationError: 인코딩할 수 없는 값이 있을 때
    """
    try:
        text = json.dumps(document, indent=indent, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"failed to serialize JSON Schema: {e}") from e
    return text.encode("utf-8")
