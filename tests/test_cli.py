import json

from typer.testing import CliRunner

import dbml_generator.commands.generate as generate_command
from dbml_generator.cli import app
from dbml_generator.config import Settings

runner = CliRunner()


def test_generate_writes_dbml_and_summary(tmp_path, dmmf_file):
    out_dir = tmp_path / "out"
    result = runner.invoke(app, ["generate", str(dmmf_file), "--out-dir", str(out_dir), "--summary"])

    assert result.exit_code == 0, result.output
    dbml = (out_dir / "schema.dbml").read_text(encoding="utf-8")
    assert "Table blog.Post {" in dbml
    assert "Table blog.PostTags {" in dbml
    assert (out_dir / "schema_summary.md").exists()


def test_generate_options(tmp_path, dmmf_file):
    out_dir = tmp_path / "out"
    result = runner.invoke(app, [
        "generate", str(dmmf_file),
        "--out-dir", str(out_dir),
        "--out-name", "db.dbml",
        "--map-to-db-schema",
        "--exclude-relation-fields",
    ])

    assert result.exit_code == 0, result.output
    dbml = (out_dir / "db.dbml").read_text(encoding="utf-8")
    assert "Table blog.posts {" in dbml
    assert "  tags Tag" not in dbml
    assert "  postsId Int [ref: > blog.posts.id]" in dbml
    assert not (out_dir / "schema_summary.md").exists()


def test_generate_reports_orphan_relation(tmp_path):
    path = tmp_path / "orphan.json"
    path.write_text(json.dumps([
        {"name": "Post", "fields": [
            {"name": "id", "type": "Int", "isId": True},
            {"name": "tags", "type": "Tag", "kind": "object", "isList": True,
             "relationName": "PostTags", "relationFromFields": [], "relationToFields": []},
        ]},
        {"name": "Tag", "fields": [{"name": "id", "type": "Int", "isId": True}]},
    ]), encoding="utf-8")

    result = runner.invoke(app, ["generate", str(path), "--out-dir", str(tmp_path / "out")])
    assert result.exit_code == 1


def test_generate_reports_invalid_input(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[", encoding="utf-8")
    result = runner.invoke(app, ["generate", str(path), "--out-dir", str(tmp_path / "out")])
    assert result.exit_code == 1
    assert not (tmp_path / "out" / "schema.dbml").exists()


def test_generate_missing_input(tmp_path):
    result = runner.invoke(app, ["generate", str(tmp_path / "nope.json")])
    assert result.exit_code != 0


def test_generate_uses_settings_when_flags_omitted(tmp_path, dmmf_file, monkeypatch):
    configured = Settings(
        _env_file=None,
        DBML_OUTPUT_DIR=tmp_path / "configured",
        DBML_OUTPUT_NAME="configured.dbml",
        DBML_MAP_TO_DB_SCHEMA="true",
        DBML_INCLUDE_RELATION_FIELDS="false",
    )
    monkeypatch.setattr(generate_command, "settings", configured)

    result = runner.invoke(app, ["generate", str(dmmf_file)])

    assert result.exit_code == 0, result.output
    dbml = (tmp_path / "configured" / "configured.dbml").read_text(encoding="utf-8")
    assert "Table blog.posts {" in dbml
    assert "  tags Tag" not in dbml


def test_generate_flags_override_settings(tmp_path, dmmf_file, monkeypatch):
    configured = Settings(
        _env_file=None,
        DBML_MAP_TO_DB_SCHEMA="true",
        DBML_INCLUDE_RELATION_FIELDS="false",
    )
    monkeypatch.setattr(generate_command, "settings", configured)

    result = runner.invoke(app, [
        "generate", str(dmmf_file),
        "--out-dir", str(tmp_path / "out"),
        "--no-map-to-db-schema",
        "--include-relation-fields",
    ])

    assert result.exit_code == 0, result.output
    dbml = (tmp_path / "out" / "schema.dbml").read_text(encoding="utf-8")
    assert "Table blog.Post {" in dbml
    assert "  tags Tag" in dbml
