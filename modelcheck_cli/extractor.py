"""Extract element-definition and moniker references from loaded documents."""

from __future__ import annotations

from typing import Iterable, Iterator

from .config import ELEMENT_DEFINITION_TAG, ID_ATTRIBUTE, CheckConfig
from .document_store import DocumentStore, local_name
from .models import Document, Reference, ReferenceKind

ELEMENT_DEFINITION_SELECTOR = f"//ns:{ELEMENT_DEFINITION_TAG}[@{ID_ATTRIBUTE}]"
IDENTIFIED_NODE_SELECTOR = f"//*[@{ID_ATTRIBUTE}]"


class ReferenceExtractor:
    """Classify reference nodes into :class:`ReferenceKind` variants.

    Classification happens once here; the resolver only ever dispatches on
    ``Reference.kind``.
    """

    def __init__(self, store: DocumentStore, config: CheckConfig) -> None:
        self.store = store
        self.config = config

    def element_refs(self, diagrams: Iterable[Document]) -> Iterator[Reference]:
        """Yield one reference per ``elementDefinition`` node under a diagram shape."""
        for diagram in diagrams:
            for node in self.store.query(diagram, ELEMENT_DEFINITION_SELECTOR):
                parent = node.getparent()
                if parent is None:
                    # elementDefinition as the document root has no owning shape
                    continue
                yield self._reference(ReferenceKind.ELEMENT, diagram, node, local_name(parent))

    def moniker_refs(self, documents: Iterable[Document]) -> Iterator[Reference]:
        """Yield one reference per ``*Moniker`` node, expecting the stripped tag type."""
        suffix = self.config.moniker_suffix
        for document in documents:
            for node in self.store.query(document, IDENTIFIED_NODE_SELECTOR):
                tag = local_name(node)
                if tag.endswith(suffix):
                    yield self._reference(ReferenceKind.MONIKER, document, node, tag[: -len(suffix)])

    def _reference(self, kind: ReferenceKind, document: Document, node, expected_type: str) -> Reference:
        return Reference(
            kind=kind,
            id=self.store.query_attr(node, ID_ATTRIBUTE),
            expected_type=expected_type,
            source_doc_type=document.doc_type,
            source_doc_name=document.name,
            document=document,
            node=node,
        )
