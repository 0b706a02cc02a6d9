"""Resolve references against the loaded corpus and classify the outcome."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional, Tuple

from .config import ID_ATTRIBUTE, CheckConfig
from .document_store import DocumentStore, local_name
from .extractor import IDENTIFIED_NODE_SELECTOR
from .models import Corpus, Diagnostic, Document, DocumentRole, Reference, ReferenceKind

logger = logging.getLogger(__name__)

Match = Tuple[Document, Any]


class Resolver:
    """Look up definition candidates for references.

    Element references are searched in model documents only and never match
    moniker nodes. Moniker references are searched across every document and
    only match nodes whose tag equals the expected type. Both lookups are
    served from indexes built once over the corpus, in document order.
    """

    def __init__(self, store: DocumentStore, corpus: Corpus, config: CheckConfig) -> None:
        self.store = store
        self.corpus = corpus
        self.config = config
        self._definitions: Dict[str, List[Match]] = defaultdict(list)
        self._typed: Dict[Tuple[str, str], List[Match]] = defaultdict(list)
        self._build_indexes()

    def _build_indexes(self) -> None:
        for document in self.corpus.documents:
            is_model = document.role is DocumentRole.MODEL
            for node in self.store.query(document, IDENTIFIED_NODE_SELECTOR):
                tag = local_name(node)
                node_id = self.store.query_attr(node, ID_ATTRIBUTE)
                self._typed[(tag, node_id)].append((document, node))
                if is_model and not tag.endswith(self.config.moniker_suffix):
                    self._definitions[node_id].append((document, node))

    def _matches(self, reference: Reference) -> List[Match]:
        if reference.kind is ReferenceKind.ELEMENT:
            return self._definitions.get(reference.id, [])
        return self._typed.get((reference.expected_type, reference.id), [])

    def resolve(self, reference: Reference) -> List[Any]:
        """Return every candidate definition node for *reference*."""
        return [node for _, node in self._matches(reference)]

    def check(self, reference: Reference) -> Optional[Diagnostic]:
        """Return a diagnostic unless *reference* has exactly one definition."""
        matches = self._matches(reference)
        if len(matches) == 1:
            document, _ = matches[0]
            logger.debug(
                "%s %s resolved in %s %s",
                reference.expected_type,
                reference.id,
                document.doc_type,
                document.name,
            )
            return None
        return Diagnostic(
            kind=reference.kind,
            source_doc_type=reference.source_doc_type,
            source_doc_name=reference.source_doc_name,
            expected_type=reference.expected_type,
            id=reference.id,
            found_count=len(matches),
        )
