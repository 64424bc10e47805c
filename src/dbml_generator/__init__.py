from dbml_generator.model import Entity, Field, FieldDefault, find_by_type
from dbml_generator.table_writer import generate_tables
from dbml_generator.many_to_many import generate_many_to_many_tables
from dbml_generator.dbml_writer import to_dbml, write_dbml

__all__ = [
    "Entity",
    "Field",
    "FieldDefault",
    "find_by_type",
    "generate_tables",
    "generate_many_to_many_tables",
    "to_dbml",
    "write_dbml",
]
