"""JSON Schema 생성 오케스트레이터."""

import logging
from typing import Any, Optional

from db2jsonschema.schema.schema_source import SchemaSource
from db2jsonschema.schema.translator import SchemaTranslator, TranslatorSettings, to_json

logger = logging.getLogger(__name__)


class SchemaGenerator:
    """스키마 소스에서 테이블을 읽어 JSON Schema 문서를 생성."""

    def __init__(
        self,
        source: SchemaSource,
        settings: Optional[TranslatorSettings] = None,
    ) -> None:
        """생성기 초기화.

        Args:
            source: 테이블 메타데이터 소스
            settings: 변환 설정
        """
        self._source = source
        self._translator = SchemaTranslator(settings)

    def generate(self) -> dict[str, Any]:
        """JSON Schema 문서를 생성.

        소스는 한 번만 호출되며, 어느 단계에서든 실패하면 예외를 그대로 전파한다.

        Returns:
            JSON Schema 문서
        """
        tables = self._source.get_tables()
        logger.info("generating JSON Schema for %d tables", len(tables))
        for table in tables:
            logger.debug("%s", table)

        return self._translator.translate(tables)

    def generate_json(self, indent: Optional[int] = None) -> bytes:
        """JSON Schema 문서를 생성하고 직렬화.

        Args:
            indent: 들여쓰기 칸 수 (None 이면 한 줄)

        Returns:
            UTF-8 JSON 바이트
        """
        return to_json(self.generate(), indent=indent)
