"""
DBML 생성 CLI.
- dbml-gen generate schema.json : DBML (+ 요약 MD) 생성
- dbml-gen watch schema.json    : 입력 파일이 바뀔 때마다 다시 생성
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from dbml_generator.commands.generate import run_generate
from dbml_generator.errors import DBMLGenerationError
from dbml_generator.watch import watch_file

console = Console()

app = typer.Typer(
    name="dbml-gen",
    add_completion=False,
    help="DMMF(JSON) 데이터 모델 → DBML 스키마 생성",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _input_arg() -> Path:
    return typer.Argument(..., exists=True, dir_okay=False, help="DMMF JSON 파일 경로")


def _map_opt() -> Optional[bool]:
    return typer.Option(
        None,
        "--map-to-db-schema/--no-map-to-db-schema",
        help="테이블 이름에 dbName(@@map) 사용. 기본값은 설정(DBML_MAP_TO_DB_SCHEMA)",
    )


def _relations_opt() -> Optional[bool]:
    return typer.Option(
        None,
        "--include-relation-fields/--exclude-relation-fields",
        help="Table 블록에 relation 필드 포함 여부. 기본값은 설정(DBML_INCLUDE_RELATION_FIELDS)",
    )


@app.command("generate")
def generate(
    input_path: Path = _input_arg(),
    out_dir: Optional[Path] = typer.Option(None, help="출력 디렉터리 (기본: DBML_OUTPUT_DIR)"),
    out_name: Optional[str] = typer.Option(None, help="출력 DBML 파일명 (기본: DBML_OUTPUT_NAME)"),
    map_to_db_schema: Optional[bool] = _map_opt(),
    include_relation_fields: Optional[bool] = _relations_opt(),
    summary: bool = typer.Option(False, "--summary/--no-summary", help="요약 MD도 생성"),
    summary_name: str = typer.Option("schema_summary.md", help="요약 MD 파일명"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="디버그 로그 출력"),
):
    """DBML 파일을 한 번 생성한다."""
    _configure_logging(verbose)
    try:
        run_generate(
            input_path,
            out_dir=out_dir,
            out_name=out_name,
            map_to_db_schema=map_to_db_schema,
            include_relation_fields=include_relation_fields,
            summary_name=summary_name if summary else None,
        )
    except DBMLGenerationError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)


@app.command("watch")
def watch(
    input_path: Path = _input_arg(),
    out_dir: Optional[Path] = typer.Option(None, help="출력 디렉터리 (기본: DBML_OUTPUT_DIR)"),
    out_name: Optional[str] = typer.Option(None, help="출력 DBML 파일명 (기본: DBML_OUTPUT_NAME)"),
    map_to_db_schema: Optional[bool] = _map_opt(),
    include_relation_fields: Optional[bool] = _relations_opt(),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="디버그 로그 출력"),
):
    """입력 파일을 감시하며 바뀔 때마다 DBML을 다시 생성한다."""
    _configure_logging(verbose)

    def regenerate():
        return run_generate(
            input_path,
            out_dir=out_dir,
            out_name=out_name,
            map_to_db_schema=map_to_db_schema,
            include_relation_fields=include_relation_fields,
        )

    try:
        regenerate()
    except (DBMLGenerationError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
    console.print(f"[yellow]Watching[/yellow] {input_path} (Ctrl+C to stop)")
    watch_file(input_path, regenerate)


if __name__ == "__main__":
    app()
