from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from dbml_generator.errors import SchemaLoadError
from dbml_generator.model import Entity, Field, FieldDefault
from dbml_generator.schema_models import (
    DatamodelModel,
    FieldDefaultModel,
    FieldModel,
    ModelModel,
)

logger = logging.getLogger(__name__)


def _models_payload(data: Any) -> Any:
    """
    허용하는 입력 형태:
      1) {"datamodel": {"models": [...]}}  (DMMF 전체)
      2) {"models": [...]}
      3) [...]  (model 리스트)
    """
    if isinstance(data, list):
        return {"models": data}
    if isinstance(data, dict) and "datamodel" in data:
        return data["datamodel"]
    return data


def _to_field(fm: FieldModel) -> Field:
    default = fm.default
    if isinstance(default, FieldDefaultModel):
        default = FieldDefault(name=default.name, args=list(default.args))
    return Field(
        name=fm.name,
        type=fm.type,
        kind=fm.kind,
        is_list=fm.is_list,
        is_id=fm.is_id,
        is_unique=fm.is_unique,
        is_required=fm.is_required,
        has_default_value=fm.has_default_value,
        default=default,
        relation_name=fm.relation_name,
        relation_from_fields=fm.relation_from_fields,
        relation_to_fields=fm.relation_to_fields,
        documentation=fm.documentation,
    )


def model_to_entity(mm: ModelModel) -> Entity:
    return Entity(
        name=mm.name,
        fields=[_to_field(f) for f in mm.fields],
        db_name=mm.db_name,
        schema=mm.schema_name,
        primary_key=list(mm.primary_key.fields) if mm.primary_key else None,
        unique_fields=[list(g) for g in mm.unique_fields],
        documentation=mm.documentation,
    )


def parse_entities(data: Any, source: str = "<data>") -> List[Entity]:
    try:
        datamodel = DatamodelModel.model_validate(_models_payload(data))
    except ValidationError as e:
        raise SchemaLoadError(source, str(e)) from e
    entities = [model_to_entity(m) for m in datamodel.models]
    logger.debug("Parsed %d entities from %s", len(entities), source)
    return entities


def load_entities(path: Path) -> List[Entity]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(str(path), str(e)) from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(str(path), f"invalid JSON ({e})") from e
    return parse_entities(data, source=str(path))
