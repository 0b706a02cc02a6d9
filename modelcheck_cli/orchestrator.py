"""Run a complete check: manifest, load, extract, resolve, report."""

from __future__ import annotations

import logging
from itertools import chain
from pathlib import Path
from typing import List, Optional

from .config import CheckConfig
from .document_store import DocumentStore
from .extractor import ReferenceExtractor
from .manifest import ManifestReader
from .models import Corpus, Diagnostic, DocumentRole, ProjectFiles
from .reporter import Reporter
from .resolver import Resolver

logger = logging.getLogger(__name__)


class ModelChecker:
    """Coordinates manifest reading, document loading, and reference checks."""

    def __init__(
        self,
        config: Optional[CheckConfig] = None,
        reporter: Optional[Reporter] = None,
        store: Optional[DocumentStore] = None,
    ):
        self.config = config or CheckConfig()
        self.reporter = reporter or Reporter()
        self.store = store or DocumentStore()
        self.manifest_reader = ManifestReader(self.store, self.config)
        self.extractor = ReferenceExtractor(self.store, self.config)

    def load(self, files: ProjectFiles) -> Corpus:
        """Load every model and diagram; any failure aborts the whole run."""
        corpus = Corpus(
            models=[self.store.load(path, DocumentRole.MODEL) for path in files.model_paths],
            diagrams=[self.store.load(path, DocumentRole.DIAGRAM) for path in files.diagram_paths],
        )
        logger.info("Loaded %d model(s) and %d diagram(s)", len(corpus.models), len(corpus.diagrams))
        return corpus

    def check(self, corpus: Corpus) -> List[Diagnostic]:
        """Resolve element references, then monikers, reporting each failure."""
        resolver = Resolver(self.store, corpus, self.config)
        references = chain(
            self.extractor.element_refs(corpus.diagrams),
            self.extractor.moniker_refs(corpus.documents),
        )

        diagnostics: List[Diagnostic] = []
        checked = 0
        for reference in references:
            checked += 1
            diagnostic = resolver.check(reference)
            if diagnostic is None:
                continue
            self.reporter.report(diagnostic)
            diagnostics.append(diagnostic)

        logger.info("Checked %d reference(s), %d unresolved", checked, len(diagnostics))
        return diagnostics

    def run(self, manifest_path: Path) -> List[Diagnostic]:
        files = self.manifest_reader.read(manifest_path)
        return self.check(self.load(files))
