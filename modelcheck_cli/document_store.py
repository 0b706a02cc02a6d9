"""XML document loading and namespace-scoped XPath querying.

Every query is evaluated against a :class:`NamespaceContext` built from the
queried document's own root namespace, so selectors are written once with the
``ns:`` alias and work for any namespace (or none) the files declare.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from lxml import etree

from .config import NAME_ATTRIBUTE, NAMESPACE_ALIAS
from .errors import DocumentLoadError
from .models import Document, DocumentRole

logger = logging.getLogger(__name__)


def local_name(node: Any) -> str:
    """Tag name of *node* without its namespace."""
    return etree.QName(node).localname


@dataclass(frozen=True)
class NamespaceContext:
    """Binds one document's default namespace to a single selector alias."""

    uri: str
    alias: str = NAMESPACE_ALIAS

    @classmethod
    def for_document(cls, document: Document) -> "NamespaceContext":
        return cls(document.namespace)

    @property
    def namespaces(self) -> Dict[str, str]:
        return {self.alias: self.uri} if self.uri else {}

    def bind(self, selector: str) -> str:
        """Return *selector* ready for evaluation in this context.

        Un-namespaced documents cannot match prefixed steps, so the alias is
        dropped from the selector for them.
        """
        if self.uri:
            return selector
        return re.sub(rf"(?<![\w.-]){re.escape(self.alias)}:(?=[A-Za-z_*])", "", selector)


class DocumentStore:
    """Load XML files into memory and answer selector queries over them."""

    def __init__(self) -> None:
        self._parser = etree.XMLParser(resolve_entities=False, no_network=True)

    def load(self, path: Path, role: DocumentRole) -> Document:
        """Parse *path* completely.

        Raises:
            DocumentLoadError: The file is missing, unreadable, or not
                well-formed XML. No recovered or partial trees are returned.
        """
        try:
            with open(path, "rb") as f:
                tree = etree.parse(f, self._parser)
        except OSError as exc:
            raise DocumentLoadError(path, exc.strerror or str(exc)) from exc
        except etree.XMLSyntaxError as exc:
            raise DocumentLoadError(path, str(exc)) from exc

        root = tree.getroot()
        qname = etree.QName(root)
        document = Document(
            path=path,
            role=role,
            root=root,
            doc_type=qname.localname,
            name=root.get(NAME_ATTRIBUTE, ""),
            namespace=qname.namespace or "",
        )
        logger.debug("Loaded %s %s '%s' from %s", role.value, document.doc_type, document.name, path)
        return document

    def query(self, document: Document, selector: str) -> List[Any]:
        """Evaluate an XPath *selector* against *document*.

        The ``ns:`` alias refers to the document's own root namespace.
        """
        context = NamespaceContext.for_document(document)
        return document.root.xpath(
            context.bind(selector),
            namespaces=context.namespaces,
            smart_strings=False,
        )

    @staticmethod
    def query_attr(node: Any, name: str) -> Optional[str]:
        return node.get(name)
