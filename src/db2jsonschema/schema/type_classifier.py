"""컬럼 타입 분류기 - MySQL 타입 문자열을 ColumnType으로 변환."""

import re
from dataclasses import dataclass, field
from typing import Callable

from db2jsonschema.core.exceptions import UnsupportedTypeError
from db2jsonschema.core.models import ColumnType

# 괄호로 둘러싼 인자 목록: "(11)", "(10,2)", "('a','b')"
_ARGUMENTS_PATTERN = re.compile(r"\((?:[^()']|'(?:[^']|'')*')*\)")
# enum 리터럴: 'value' ('' 는 작은따옴표 하나)
_ENUM_LITERAL_PATTERN = re.compile(r"'((?:[^']|'')*)'")

Predicate = Callable[[str, str], bool]


def _contains(*needles: str) -> Predicate:
    return lambda base, _full: any(needle in base for needle in needles)


def _is_tinyint_1(_base: str, full: str) -> bool:
    return full == "tinyint(1)"


# 순서가 곧 우선순위: 먼저 매칭된 규칙이 이긴다.
# tinyint(1)은 int보다, datetime/timestamp는 date보다 먼저 검사해야 한다.
CLASSIFICATION_RULES: tuple[tuple[Predicate, ColumnType], ...] = (
    (_is_tinyint_1, ColumnType.BOOLEAN),
    (_contains("int"), ColumnType.INTEGER),
    (_contains("float", "double", "decimal"), ColumnType.FLOAT),
    (_contains("char", "text"), ColumnType.STRING),
    (_contains("enum"), ColumnType.ENUM),
    (_contains("datetime", "timestamp"), ColumnType.DATETIME),
    (_contains("date"), ColumnType.DATE),
    (_contains("json"), ColumnType.JSON),
)


@dataclass(frozen=True)
class ClassifiedType:
    """분류 결과."""

    column_type: ColumnType
    enum_values: list[str] = field(default_factory=list)
    unsigned: bool = False


def classify_type(raw_type: str) -> ColumnType:
    """타입 문자열의 ColumnType만 판별.

    Args:
        raw_type: INFORMATION_SCHEMA.COLUMNS.COLUMN_TYPE 값 (예: "varchar(255)")

    Returns:
        분류된 ColumnType

    Raises:
        UnsupportedTypeError: 어느 규칙에도 해당하지 않을 때
    """
    full = raw_type.strip().lower()
    # 인자 목록은 매칭에서 제외: enum('print') 가 int 로 분류되지 않도록
    base = _ARGUMENTS_PATTERN.sub("", full)

    for predicate, column_type in CLASSIFICATION_RULES:
        if predicate(base, full):
            return column_type

    raise UnsupportedTypeError(raw_type)


def parse_enum_values(raw_type: str) -> list[str]:
    """enum('a','b') 에서 값 목록을 선언 순서대로 추출.

    Args:
        raw_type: enum 타입 문자열

    Returns:
        따옴표를 제거한 값 리스트 (중복 유지)
    """
    start = raw_type.find("(")
    end = raw_type.rfind(")")
    if start == -1 or end <= start:
        return []

    arguments = raw_type[start + 1 : end]
    return [
        literal.replace("''", "'")
        for literal in _ENUM_LITERAL_PATTERN.findall(arguments)
    ]


def classify(raw_type: str) -> ClassifiedType:
    """타입 문자열을 분류하고 enum 값과 unsigned 여부를 함께 반환.

    Args:
        raw_type: 컬럼 타입 문자열 (예: "int(11) unsigned", "enum('x','y')")

    Returns:
        ClassifiedType

    Raises:
        UnsupportedTypeError: 지원하지 않는 타입일 때
    """
    column_type = classify_type(raw_type)

    enum_values: list[str] = []
    if column_type == ColumnType.ENUM:
        enum_values = parse_enum_values(raw_type)
        if not enum_values:
            raise UnsupportedTypeError(raw_type)

    return ClassifiedType(
        column_type=column_type,
        enum_values=enum_values,
        unsigned="unsigned" in raw_type.lower(),
    )
