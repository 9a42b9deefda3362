"""Build artifacts - manifest.json and catalog.json.

Artifacts are written into the VFS under the target prefix and never read
back by later commands.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from dbt_simulator.domain import Model

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ArtifactMetadata(BaseModel):
    """Header shared by every artifact."""

    dbt_version: str
    generated_at: str
    project_name: str

    model_config = {"frozen": True}

    @classmethod
    def create(cls, dbt_version: str, project_name: str, clock: Clock = utc_now) -> ArtifactMetadata:
        """Create metadata stamped with the current time."""
        return cls(
            dbt_version=dbt_version,
            generated_at=clock().isoformat(),
            project_name=project_name,
        )


class NodeConfig(BaseModel):
    materialized: str = "view"

    model_config = {"frozen": True}


class ManifestNode(BaseModel):
    """One model node in the manifest."""

    resource_type: str = "model"
    name: str
    package_name: str
    original_file_path: str
    config: NodeConfig = Field(default_factory=NodeConfig)
    depends_on: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class Manifest(BaseModel):
    """The generated description of all built nodes and their dependencies."""

    metadata: ArtifactMetadata
    nodes: dict[str, ManifestNode] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls,
        models: Sequence[Model],
        known_models: Sequence[Model],
        project_name: str,
        dbt_version: str,
        clock: Clock = utc_now,
    ) -> Manifest:
        """
        Build the manifest for ``models``.

        ``depends_on`` keeps only references to models in ``known_models``
        (the whole project, not just the selection), de-duplicated.
        """
        known = {m.name for m in known_models}
        nodes: dict[str, ManifestNode] = {}
        for model in models:
            nodes[model.qualified_id(project_name)] = ManifestNode(
                name=model.name,
                package_name=project_name,
                original_file_path=model.path,
                config=NodeConfig(materialized=model.materialization),
                depends_on=[
                    f"{project_name}.{ref}" for ref in model.unique_refs if ref in known
                ],
            )
        return cls(
            metadata=ArtifactMetadata.create(dbt_version, project_name, clock),
            nodes=nodes,
        )

    def to_json(self) -> str:
        """Serialize manifest to JSON string."""
        return json.dumps(self.model_dump(), indent=2) + "\n"


class CatalogNode(BaseModel):
    unique_id: str
    name: str
    original_file_path: str
    columns: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class Catalog(BaseModel):
    """What ``docs generate`` would have catalogued."""

    metadata: ArtifactMetadata
    nodes: list[CatalogNode] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls,
        models: Sequence[Model],
        project_name: str,
        dbt_version: str,
        clock: Clock = utc_now,
    ) -> Catalog:
        return cls(
            metadata=ArtifactMetadata.create(dbt_version, project_name, clock),
            nodes=[
                CatalogNode(
                    unique_id=m.qualified_id(project_name),
                    name=m.name,
                    original_file_path=m.path,
                    columns=m.columns,
                )
                for m in models
            ],
        )

    def to_json(self) -> str:
        """Serialize catalog to JSON string."""
        return json.dumps(self.model_dump(), indent=2) + "\n"
