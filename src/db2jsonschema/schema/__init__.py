"""스키마 모듈 - 타입 분류, 메타데이터 소스, JSON Schema 변환."""
