"""db2jsonschema 명령행 인터페이스.

사용법:
    db2jsonschema mysql -d mydb                       # 표준 출력으로 JSON Schema 출력
    db2jsonschema mysql -d mydb -o schema.json        # 파일로 저장
    db2jsonschema mysql -d mydb --allow-raw-values    # "RAW=..." 픽스처 값 허용
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from db2jsonschema import __version__
from db2jsonschema.adapters.database.mysql_adapter import MySQLAdapter
from db2jsonschema.core.config import Settings
from db2jsonschema.core.exceptions import Db2JsonSchemaError
from db2jsonschema.generator import SchemaGenerator
from db2jsonschema.schema.schema_source import MySQLSchemaSource
from db2jsonschema.schema.translator import TranslatorSettings

logger = logging.getLogger("db2jsonschema")

err_console = Console(stderr=True)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """인자 파서 생성. 기본값은 설정(환경 변수/.env)에서 가져온다."""
    parser = argparse.ArgumentParser(
        prog="db2jsonschema",
        description="데이터베이스 스키마를 JSON Schema로 변환",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    mysql = subparsers.add_parser("mysql", help="MySQL 스키마를 JSON Schema로 변환")
    mysql.add_argument("-H", "--host", default=settings.mysql_host, help="MySQL 호스트")
    mysql.add_argument("-P", "--port", type=int, default=settings.mysql_port, help="MySQL 포트")
    mysql.add_argument("-u", "--user", default=settings.mysql_user, help="MySQL 사용자")
    mysql.add_argument("-p", "--password", default=settings.mysql_password, help="MySQL 비밀번호")
    mysql.add_argument("-d", "--database", default=settings.mysql_database, help="MySQL 데이터베이스")
    mysql.add_argument(
        "--datetime-pattern",
        default=settings.datetime_pattern,
        help="DATETIME 컬럼에 적용할 정규식",
    )
    mysql.add_argument("--title", default=settings.document_title, help="문서 title")
    mysql.add_argument(
        "--allow-raw-values",
        action="store_true",
        help='모든 컬럼에 "RAW=..." 문자열을 허용',
    )
    mysql.add_argument(
        "--indent",
        type=int,
        default=settings.json_indent,
        help="JSON 들여쓰기 칸 수 (생략 시 한 줄)",
    )
    mysql.add_argument("-o", "--output", type=Path, default=None, help="출력 파일 경로")
    mysql.add_argument("-v", "--verbose", action="store_true", help="디버그 로그 출력")
    mysql.set_defaults(handler=run_mysql)

    return parser


def configure_logging(level: str) -> None:
    """rich 핸들러로 로깅 설정 (stderr)."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def run_mysql(args: argparse.Namespace, settings: Settings) -> bytes:
    """MySQL 에서 스키마를 읽어 JSON Schema 바이트를 반환."""
    connection_settings = settings.model_copy(
        update={
            "mysql_host": args.host,
            "mysql_port": args.port,
            "mysql_user": args.user,
            "mysql_password": args.password,
            "mysql_database": args.database,
        }
    )
    translator_settings = TranslatorSettings(
        datetime_pattern=args.datetime_pattern,
        title=args.title,
        allow_raw_values=args.allow_raw_values,
    )

    with MySQLAdapter(connection_settings) as adapter:
        source = MySQLSchemaSource(adapter, args.database)
        generator = SchemaGenerator(source, translator_settings)
        return generator.generate_json(indent=args.indent)


def write_output(data: bytes, output: Optional[Path]) -> None:
    """결과를 파일 또는 표준 출력에 기록."""
    if output is None:
        sys.stdout.buffer.write(data + b"\n")
        sys.stdout.buffer.flush()
        return

    output.write_bytes(data + b"\n")
    logger.info("wrote JSON Schema to %s", output)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """메인 함수."""
    try:
        settings = Settings()
    except ValidationError as e:
        _exit_with_error(f"invalid configuration: {e}")

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        data = args.handler(args, settings)
        write_output(data, args.output)
    except Exception as e:
        if not isinstance(e, Db2JsonSchemaError):
            logger.debug("unexpected failure", exc_info=True)
        _exit_with_error(str(e))


def _exit_with_error(message: str) -> NoReturn:
    err_console.print(f"[red]Error: {escape(message)}[/red]", highlight=False)
    sys.exit(1)


if __name__ == "__main__":
    main()
