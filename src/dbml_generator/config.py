from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    dbml_output_dir: Path = Field(default=Path("./out"), alias="DBML_OUTPUT_DIR")
    dbml_output_name: str = Field(default="schema.dbml", alias="DBML_OUTPUT_NAME")

    map_to_db_schema: bool = Field(default=False, alias="DBML_MAP_TO_DB_SCHEMA")
    include_relation_fields: bool = Field(default=True, alias="DBML_INCLUDE_RELATION_FIELDS")

settings = Settings()
