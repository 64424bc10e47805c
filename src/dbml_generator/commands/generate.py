"""DBML 생성: DMMF JSON → DBML (+ 요약 MD)."""
from __future__ import annotations
from pathlib import Path
from typing import Optional

from rich.console import Console

from dbml_generator.config import settings
from dbml_generator.loader import load_entities
from dbml_generator.dbml_writer import write_dbml
from dbml_generator.docs_writer import write_summary_md

console = Console()


def run_generate(
    input_path: Path,
    out_dir: Path | None = None,
    out_name: str | None = None,
    map_to_db_schema: bool | None = None,
    include_relation_fields: bool | None = None,
    summary_name: Optional[str] = None,
) -> tuple[Path, Path | None]:
    """
    입력 파일을 읽어 DBML을 생성한다. None 인 옵션은 settings 값을 쓴다.
    반환: (dbml_path, md_path 또는 None)
    """
    base = out_dir or settings.dbml_output_dir
    dbml_path = base / (out_name or settings.dbml_output_name)
    if map_to_db_schema is None:
        map_to_db_schema = settings.map_to_db_schema
    if include_relation_fields is None:
        include_relation_fields = settings.include_relation_fields

    console.print(f"[bold]Input:[/bold] {input_path}")
    entities = load_entities(input_path)
    console.print(f"Loaded [green]{len(entities)}[/green] models")

    write_dbml(
        entities,
        dbml_path,
        map_to_db_schema=map_to_db_schema,
        include_relation_fields=include_relation_fields,
    )
    console.print(f"[bold green]DBML:[/bold green] {dbml_path}")

    md_path = None
    if summary_name:
        md_path = write_summary_md(entities, base / summary_name)
        console.print(f"[bold green]MD:[/bold green]   {md_path}")
    return dbml_path, md_path
