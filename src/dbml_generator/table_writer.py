from __future__ import annotations
from typing import Dict, List, Optional, Sequence

from dbml_generator.keywords import DBMLKeywords, DEFAULT_SCHEMA, QUOTED_SCALARS
from dbml_generator.model import Entity, Field, FieldDefault, find_by_type


def escape_note(text: str) -> str:
    return text.replace("'", "\\'")


def format_literal_default(f: Field) -> str:
    value = f.default
    if isinstance(value, bool):
        value = "true" if value else "false"
    if f.type in QUOTED_SCALARS or f.kind == "enum":
        return f"{DBMLKeywords.DEFAULT}: '{value}'"
    return f"{DBMLKeywords.DEFAULT}: {value}"


def _has_literal_default(f: Field) -> bool:
    if not f.has_default_value or f.default is None:
        return False
    return not isinstance(f.default, (FieldDefault, list, dict))


def col_settings(f: Field) -> str:
    settings = []
    if f.is_id:
        settings.append(DBMLKeywords.PK)
    if f.default_function == "autoincrement":
        settings.append(DBMLKeywords.INCREMENT)
    if f.default_function == "now":
        settings.append(f"{DBMLKeywords.DEFAULT}: `now()`")
    if f.is_unique:
        settings.append(DBMLKeywords.UNIQUE)
    # id 컬럼은 암묵적으로 not null
    if f.is_required and not f.is_id:
        settings.append(DBMLKeywords.NOT_NULL)
    if _has_literal_default(f):
        settings.append(format_literal_default(f))
    if f.documentation:
        settings.append(f"{DBMLKeywords.NOTE}: '{escape_note(f.documentation)}'")
    return f" [{', '.join(settings)}]" if settings else ""


def render_field_type(f: Field, entities: Sequence[Entity], map_to_db_schema: bool = False) -> str:
    type_name = f.type
    if map_to_db_schema:
        target = find_by_type(entities, f.type)
        if target and target.db_name:
            type_name = target.db_name
    # to-many 관계 필드는 가상 필드라 [] 를 붙이지 않는다
    if f.is_list and not f.is_relation:
        return f"{type_name}[]"
    return type_name


def render_fields(
    fields: Sequence[Field],
    entities: Sequence[Entity],
    map_to_db_schema: bool = False,
    include_relation_fields: bool = True,
) -> str:
    if not include_relation_fields:
        fields = [f for f in fields if not f.is_relation]
    return "\n".join(
        f"  {f.name} {render_field_type(f, entities, map_to_db_schema)}{col_settings(f)}"
        for f in fields
    )


def composite_unique_groups(entity: Entity) -> List[List[str]]:
    # 단일 컬럼 unique는 필드 설정([unique])으로 이미 표시됨
    return [group for group in entity.unique_fields if len(group) > 1]


def render_indexes(entity: Entity) -> str:
    lines = []
    if entity.primary_key:
        lines.append(f"    ({', '.join(entity.primary_key)}) [{DBMLKeywords.PK}]")
    for group in composite_unique_groups(entity):
        lines.append(f"    ({', '.join(group)}) [{DBMLKeywords.UNIQUE}]")
    if not lines:
        return ""
    body = "\n".join(lines)
    return f"\n\n  {DBMLKeywords.INDEXES} {{\n{body}\n  }}"


def render_note(documentation: Optional[str]) -> str:
    if not documentation:
        return ""
    return f"\n\n  {DBMLKeywords.NOTE_BLOCK}: '{escape_note(documentation)}'"


def render_table(
    entity: Entity,
    entities: Sequence[Entity],
    map_to_db_schema: bool = False,
    include_relation_fields: bool = True,
) -> str:
    return (
        f"{DBMLKeywords.TABLE} {entity.qualified_name(map_to_db_schema)} {{\n"
        + render_fields(entity.fields, entities, map_to_db_schema, include_relation_fields)
        + render_indexes(entity)
        + render_note(entity.documentation)
        + "\n}"
    )


def group_by_schema(entities: Sequence[Entity]) -> Dict[str, List[Entity]]:
    """schema별로 묶는다. dict 삽입 순서 = 처음 등장한 순서."""
    groups: Dict[str, List[Entity]] = {}
    for entity in entities:
        groups.setdefault(entity.schema or DEFAULT_SCHEMA, []).append(entity)
    return groups


def generate_tables(
    entities: Sequence[Entity],
    map_to_db_schema: bool = False,
    include_relation_fields: bool = True,
) -> List[str]:
    """
    엔티티마다 Table 블록을 만든다.
    schema 그룹마다 `// Schema: <name>` 주석 블록을 먼저 넣는다.
    """
    blocks: List[str] = []
    for schema, members in group_by_schema(entities).items():
        blocks.append(f"// Schema: {schema}")
        for entity in members:
            blocks.append(render_table(entity, entities, map_to_db_schema, include_relation_fields))
    return blocks
