"""Implicit many-to-many 관계 → join table 블록 생성."""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Sequence, Tuple

from dbml_generator.errors import MalformedSchemaError, OrphanRelationError
from dbml_generator.keywords import DBMLKeywords
from dbml_generator.model import Entity, Field, find_by_type


@dataclass
class JoinSide:
    owner: Entity
    field: Field  # relation_to_fields 가 채워진 복사본


def is_implicit_many_to_many(f: Field) -> bool:
    return (
        f.is_relation
        and f.is_list
        and not f.relation_from_fields
        and not f.relation_to_fields
    )


def collect_join_sides(entities: Sequence[Entity]) -> List[JoinSide]:
    """
    implicit many-to-many 후보 필드를 모은다.
    입력에는 relation_to_fields 가 비어 있으므로, 필드를 선언한 엔티티의
    id 필드 이름으로 채운 복사본을 만든다. 원본은 건드리지 않는다.
    """
    sides: List[JoinSide] = []
    for entity in entities:
        id_names = [f.name for f in entity.id_fields()]
        for f in entity.fields:
            if is_implicit_many_to_many(f):
                sides.append(JoinSide(owner=entity, field=replace(f, relation_to_fields=id_names)))
    return sides


def _has_counterpart(entities: Sequence[Entity], side: JoinSide) -> bool:
    for entity in entities:
        for f in entity.fields:
            if f.relation_name != side.field.relation_name:
                continue
            if entity is side.owner and f.name == side.field.name:
                continue
            return True
    return False


def _join_target(entities: Sequence[Entity], side: JoinSide) -> tuple[Entity, Field]:
    target = find_by_type(entities, side.field.type)
    if target is None:
        raise MalformedSchemaError(
            f"{side.owner.name}.{side.field.name}: relation target '{side.field.type}' not found"
        )
    if not side.field.relation_to_fields:
        raise MalformedSchemaError(
            f"{side.owner.name}.{side.field.name}: entity '{side.owner.name}' has no id field"
        )
    # composite id 는 첫 번째 id 필드만 사용
    id_name = side.field.relation_to_fields[0]
    id_field = target.get_field(id_name)
    if id_field is None:
        raise MalformedSchemaError(
            f"{side.owner.name}.{side.field.name}: '{target.name}' has no field '{id_name}'"
        )
    return target, id_field


def render_join_column(side: JoinSide, entities: Sequence[Entity], map_to_db_schema: bool = False) -> str:
    target, id_field = _join_target(entities, side)
    column = f"{side.field.name.lower()}Id"
    ref = f"{target.qualified_name(map_to_db_schema)}.{id_field.name}"
    return f"  {column} {id_field.type} [{DBMLKeywords.REF}: > {ref}]"


def render_join_table(
    first: JoinSide,
    second: JoinSide,
    entities: Sequence[Entity],
    map_to_db_schema: bool = False,
) -> str:
    # join table 의 schema 는 먼저 등장한 쪽(first)의 소유 엔티티를 따른다
    prefix = f"{first.owner.schema}." if first.owner.schema else ""
    columns = "\n".join(
        render_join_column(side, entities, map_to_db_schema) for side in (first, second)
    )
    return f"{DBMLKeywords.TABLE} {prefix}{first.field.relation_name} {{\n{columns}\n}}"


def iter_join_pairs(entities: Sequence[Entity]) -> Iterator[Tuple[JoinSide, JoinSide]]:
    """
    relation_name 이 같은 후보 두 개를 (first, second) 로 짝지어 돌려준다.
    짝이 후보 집합에 없으면 one-to-many 의 "many" 쪽이므로 건너뛴다.
    입력 어디에도 짝이 없으면 OrphanRelationError.
    """
    queue = collect_join_sides(entities)
    while queue:
        first = queue.pop(0)
        relation = first.field.relation_name
        second: Optional[JoinSide] = next(
            (s for s in queue if s.field.relation_name == relation), None
        )
        if second is not None:
            yield first, second
        elif not _has_counterpart(entities, first):
            raise OrphanRelationError(first.owner.name, first.field.name, relation)
        queue = [s for s in queue if s.field.relation_name != relation]


def generate_many_to_many_tables(
    entities: Sequence[Entity],
    map_to_db_schema: bool = False,
) -> List[str]:
    """짝마다 join table 블록을 하나씩 만든다."""
    return [
        render_join_table(first, second, entities, map_to_db_schema)
        for first, second in iter_join_pairs(entities)
    ]
