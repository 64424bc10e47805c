"""DMMF(JSON) 입력 검증용 Pydantic 모델."""
from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional


class _DMMFModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FieldDefaultModel(_DMMFModel):
    name: str
    args: List[Any] = Field(default_factory=list)


class FieldModel(_DMMFModel):
    name: str
    type: str
    kind: str = "scalar"
    is_list: bool = Field(default=False, alias="isList")
    is_id: bool = Field(default=False, alias="isId")
    is_unique: bool = Field(default=False, alias="isUnique")
    is_required: bool = Field(default=False, alias="isRequired")
    has_default_value: bool = Field(default=False, alias="hasDefaultValue")
    default: Any = None
    relation_name: Optional[str] = Field(default=None, alias="relationName")
    relation_from_fields: Optional[List[str]] = Field(default=None, alias="relationFromFields")
    relation_to_fields: Optional[List[str]] = Field(default=None, alias="relationToFields")
    documentation: Optional[str] = None

    @field_validator("default", mode="before")
    @classmethod
    def coerce_default(cls, v: Any) -> Any:
        # {"name": "autoincrement", "args": []} 형태는 구조화된 default
        if isinstance(v, dict) and "name" in v:
            return FieldDefaultModel.model_validate(v)
        return v


class PrimaryKeyModel(_DMMFModel):
    name: Optional[str] = None
    fields: List[str] = Field(default_factory=list)


class ModelModel(_DMMFModel):
    name: str
    db_name: Optional[str] = Field(default=None, alias="dbName")
    schema_name: Optional[str] = Field(default=None, alias="schema")
    fields: List[FieldModel] = Field(default_factory=list)
    primary_key: Optional[PrimaryKeyModel] = Field(default=None, alias="primaryKey")
    unique_fields: List[List[str]] = Field(default_factory=list, alias="uniqueFields")
    documentation: Optional[str] = None


class DatamodelModel(_DMMFModel):
    models: List[ModelModel] = Field(default_factory=list)
