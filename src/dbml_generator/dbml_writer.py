from __future__ import annotations
import logging
from pathlib import Path
from typing import Sequence

from dbml_generator.many_to_many import generate_many_to_many_tables
from dbml_generator.model import Entity
from dbml_generator.table_writer import generate_tables

logger = logging.getLogger(__name__)


def to_dbml(
    entities: Sequence[Entity],
    map_to_db_schema: bool = False,
    include_relation_fields: bool = True,
) -> str:
    tables = generate_tables(entities, map_to_db_schema, include_relation_fields)
    join_tables = generate_many_to_many_tables(entities, map_to_db_schema)
    logger.debug("Rendered %d table blocks, %d join tables", len(tables), len(join_tables))

    blocks = tables + join_tables
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


def write_dbml(
    entities: Sequence[Entity],
    out_path: Path,
    map_to_db_schema: bool = False,
    include_relation_fields: bool = True,
) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(
        to_dbml(entities, map_to_db_schema, include_relation_fields), encoding="utf-8"
    )
    return out_path
