from __future__ import annotations
from pathlib import Path
from typing import Sequence

from dbml_generator.keywords import DEFAULT_SCHEMA
from dbml_generator.many_to_many import iter_join_pairs
from dbml_generator.model import Entity


def many_to_many_relations(entities: Sequence[Entity]) -> list[tuple[str, str, str]]:
    """(relation_name, 첫 번째 엔티티, 두 번째 엔티티) 목록. join table 과 같은 짝."""
    return [
        (first.field.relation_name, first.owner.name, second.owner.name)
        for first, second in iter_join_pairs(entities)
    ]


def write_summary_md(entities: Sequence[Entity], out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    m2m = many_to_many_relations(entities)

    lines = []
    lines.append("# Schema Summary\n")
    lines.append(f"- Tables: {len(entities)}")
    lines.append(f"- Many-to-many relations: {len(m2m)}\n")

    lines.append("## Tables\n")
    for entity in entities:
        lines.append(f"### {entity.schema or DEFAULT_SCHEMA}.{entity.name}")
        if entity.db_name:
            lines.append(f"_db name: `{entity.db_name}`_\n")
        for f in entity.fields:
            flags = []
            if f.is_id: flags.append("PK")
            if f.is_unique: flags.append("UNIQUE")
            if f.is_required and not f.is_id: flags.append("NOT NULL")
            if f.is_list: flags.append("LIST")
            flag_s = f" ({', '.join(flags)})" if flags else ""
            rel_s = f" → relation `{f.relation_name}`" if f.is_relation else ""
            lines.append(f"- `{f.name}`: {f.type}{flag_s}{rel_s}")
        if entity.documentation:
            lines.append(f"\n> {entity.documentation}")
        lines.append("")

    lines.append("## Many-to-many\n")
    for relation, left, right in m2m:
        lines.append(f"- {relation}: {left} <> {right}")
    lines.append("")

    out_path.write_text("\n".join(lines), encoding="utf-8")
    return out_path
