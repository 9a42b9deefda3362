"""Model and schema-test types derived from the virtual file system."""

from pydantic import BaseModel, Field


class ParsedSql(BaseModel):
    """What the heuristic parser could recover from one model's SQL."""

    refs: list[str] = Field(default_factory=list)
    materialization: str = "view"
    columns: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class Model(BaseModel):
    """
    A dbt model, recomputed from the VFS on every command.

    ``name`` comes from the file name alone, so two files with the same
    name are both valid models but collide wherever callers key by name.
    """

    name: str
    path: str
    raw_sql: str
    refs: list[str] = Field(default_factory=list)  # In order of appearance, duplicates kept
    materialization: str = "view"
    columns: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    def qualified_id(self, project: str) -> str:
        return f"{project}.{self.name}"

    @property
    def unique_refs(self) -> list[str]:
        return list(dict.fromkeys(self.refs))


class SchemaTest(BaseModel):
    """A generic test declared on a model column in a schema YAML file."""

    model_name: str
    column_name: str
    test_name: str

    model_config = {"frozen": True}

    @property
    def unique_id(self) -> str:
        return f"{self.test_name}_{self.model_name}_{self.column_name}"
