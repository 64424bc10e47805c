from __future__ import annotations


class DBMLGenerationError(ValueError):
    """입력 모델로부터 DBML을 만들 수 없을 때의 공통 예외."""


class MalformedSchemaError(DBMLGenerationError):
    """관계 대상 엔티티 또는 식별자 필드를 찾을 수 없음."""


class OrphanRelationError(DBMLGenerationError):
    def __init__(self, entity: str, field: str, relation_name: str):
        self.entity = entity
        self.field = field
        self.relation_name = relation_name
        super().__init__(
            f"Relation '{relation_name}' on {entity}.{field} has no counterpart field"
        )


class SchemaLoadError(DBMLGenerationError):
    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot load schema from {source}: {reason}")
