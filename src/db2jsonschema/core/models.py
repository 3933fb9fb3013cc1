"""Core 데이터 모델 정의."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ColumnType(str, Enum):
    """소스에 독립적인 컬럼 타입.

    분류기(소스별)와 변환기(공통) 사이의 경계. 새로운 데이터베이스 백엔드는
    이 열거형만 만들어 내면 변환기를 그대로 재사용할 수 있다.
    """

    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    STRING = "string"
    DATE = "date"
    DATETIME = "datetime"
    ENUM = "enum"
    JSON = "json"


@dataclass
class Column:
    """컬럼 메타데이터."""

    name: str
    column_type: ColumnType
    nullable: bool
    max_length: Optional[int] = None
    enum_values: list[str] = field(default_factory=list)
    unsigned: bool = False
    default: Optional[str] = None

    def __post_init__(self) -> None:
        is_enum = self.column_type == ColumnType.ENUM
        if is_enum != bool(self.enum_values):
            raise ValueError(
                f"column {self.name!r}: enum_values must be set if and only if "
                f"column_type is enum (got {self.column_type!r}, {self.enum_values!r})"
            )

    @property
    def required(self) -> bool:
        """INSERT 시 값이 반드시 필요한지 여부 (NOT NULL 이고 기본값 없음)."""
        return not self.nullable and self.default is None

    def __str__(self) -> str:
        column_type = getattr(self.column_type, "value", self.column_type)
        return (
            f"Name: {self.name}, Type: {column_type}, Nullable: {self.nullable}, "
            f"MaxLength: {self.max_length or 0}, Enum: {self.enum_values}, "
            f"Unsigned: {self.unsigned}, Default: {self.default}"
        )


@dataclass
class Table:
    """테이블 메타데이터."""

    name: str
    columns: list[Column] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [f"Table: {self.name}"]
        lines.extend(f"  {column}" for column in self.columns)
        return "\n".join(lines)
