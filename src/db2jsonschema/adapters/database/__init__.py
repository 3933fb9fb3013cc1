"""데이터베이스 어댑터 모듈."""

from db2jsonschema.adapters.database.mysql_adapter import MySQLAdapter

__all__ = ["MySQLAdapter"]
