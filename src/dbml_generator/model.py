from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Union

@dataclass
class FieldDefault:
    name: str
    args: List[Any] = field(default_factory=list)

LiteralValue = Union[str, int, float, bool]

@dataclass
class Field:
    name: str
    type: str
    kind: str = "scalar"  # scalar / enum / object
    is_list: bool = False
    is_id: bool = False
    is_unique: bool = False
    is_required: bool = False
    has_default_value: bool = False
    default: Optional[Union[LiteralValue, FieldDefault, List[LiteralValue]]] = None
    relation_name: Optional[str] = None
    relation_from_fields: Optional[List[str]] = None
    relation_to_fields: Optional[List[str]] = None
    documentation: Optional[str] = None

    @property
    def is_relation(self) -> bool:
        return bool(self.relation_name)

    @property
    def default_function(self) -> Optional[str]:
        if isinstance(self.default, FieldDefault):
            return self.default.name
        return None

@dataclass
class Entity:
    name: str
    fields: List[Field] = field(default_factory=list)
    db_name: Optional[str] = None
    schema: Optional[str] = None
    primary_key: Optional[List[str]] = None
    unique_fields: List[List[str]] = field(default_factory=list)
    documentation: Optional[str] = None

    def id_fields(self) -> List[Field]:
        return [f for f in self.fields if f.is_id]

    def get_field(self, name: str) -> Optional[Field]:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def table_name(self, map_to_db_schema: bool = False) -> str:
        if map_to_db_schema and self.db_name:
            return self.db_name
        return self.name

    def qualified_name(self, map_to_db_schema: bool = False) -> str:
        prefix = f"{self.schema}." if self.schema else ""
        return f"{prefix}{self.table_name(map_to_db_schema)}"


def find_by_type(entities: Sequence[Entity], type_name: str) -> Optional[Entity]:
    """
    type 이름으로 엔티티를 찾는다. 없으면 None.
    None이면 호출자는 scalar/외부 타입으로 보고 type 이름을 그대로 쓴다.
    """
    for entity in entities:
        if entity.name == type_name:
            return entity
    return None
