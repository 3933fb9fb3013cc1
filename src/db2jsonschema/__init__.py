"""데이터베이스 스키마를 JSON Schema로 변환하는 도구."""

__version__ = "0.1.0"
