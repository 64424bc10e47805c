from __future__ import annotations

# schema가 없는 엔티티는 이 그룹으로 묶는다
DEFAULT_SCHEMA = "public"


class DBMLKeywords:
    TABLE = "Table"
    NOTE_BLOCK = "Note"
    INDEXES = "indexes"
    PK = "pk"
    INCREMENT = "increment"
    UNIQUE = "unique"
    NOT_NULL = "not null"
    DEFAULT = "default"
    NOTE = "note"
    REF = "ref"


class PrismaScalars:
    STRING = "String"
    BOOLEAN = "Boolean"
    INT = "Int"
    BIG_INT = "BigInt"
    FLOAT = "Float"
    DECIMAL = "Decimal"
    DATE_TIME = "DateTime"
    JSON = "Json"
    BYTES = "Bytes"


# 이 타입의 literal default는 따옴표로 감싼다
QUOTED_SCALARS = frozenset({PrismaScalars.STRING, PrismaScalars.JSON})
