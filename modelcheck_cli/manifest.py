"""Discover model and diagram files from a model project manifest."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .config import FOLDER_ITEM, CheckConfig
from .document_store import DocumentStore
from .models import DocumentRole, ProjectFiles

logger = logging.getLogger(__name__)

ITEM_INCLUDE_SELECTOR = f"/ns:Project/ns:ItemGroup/*[local-name()!='{FOLDER_ITEM}']/@Include"


class ManifestReader:
    """Read ``Project/ItemGroup`` entries and classify them by suffix."""

    def __init__(self, store: DocumentStore, config: CheckConfig) -> None:
        self.store = store
        self.config = config

    def read(self, manifest_path: Path) -> ProjectFiles:
        manifest_path = manifest_path.resolve()
        project_dir = manifest_path.parent
        manifest = self.store.load(manifest_path, DocumentRole.MANIFEST)

        items: List[str] = self.store.query(manifest, ITEM_INCLUDE_SELECTOR)
        files = ProjectFiles(manifest_path=manifest_path, project_dir=project_dir)

        model_suffix = self.config.model_suffix.lower()
        diagram_suffix = self.config.diagram_suffix.lower()
        for item in items:
            lowered = item.lower()
            is_model = lowered.endswith(model_suffix)
            is_diagram = lowered.endswith(diagram_suffix)
            if is_model:
                files.model_paths.append(self._full_path(project_dir, item))
            if is_diagram:
                files.diagram_paths.append(self._full_path(project_dir, item))
            if not (is_model or is_diagram):
                logger.debug("Skipping manifest item %s", item)

        logger.info(
            "Manifest %s lists %d model(s) and %d diagram(s)",
            manifest_path.name,
            len(files.model_paths),
            len(files.diagram_paths),
        )
        return files

    @staticmethod
    def _full_path(project_dir: Path, include: str) -> Path:
        # Include values are written with Windows separators
        return (project_dir / include.replace("\\", "/")).resolve()
