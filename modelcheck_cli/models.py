"""Core data models shared by loading, extraction, and resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, List


class DocumentRole(str, Enum):
    MODEL = "model"
    DIAGRAM = "diagram"
    MANIFEST = "manifest"


class ReferenceKind(str, Enum):
    ELEMENT = "element"
    MONIKER = "moniker"


@dataclass
class Document:
    """A parsed XML document held read-only for the whole run."""

    path: Path
    role: DocumentRole
    root: Any = field(repr=False)
    doc_type: str
    name: str
    namespace: str = ""


@dataclass
class Reference:
    kind: ReferenceKind
    id: str
    expected_type: str
    source_doc_type: str
    source_doc_name: str
    document: Document = field(repr=False)
    node: Any = field(repr=False)


@dataclass(frozen=True)
class Diagnostic:
    """A reference that did not resolve to exactly one definition."""

    kind: ReferenceKind
    source_doc_type: str
    source_doc_name: str
    expected_type: str
    id: str
    found_count: int

    def format(self) -> str:
        return (
            f"{self.source_doc_type} {self.source_doc_name} / "
            f"{self.expected_type} {self.id} --> {self.found_count} found!"
        )


@dataclass
class ProjectFiles:
    manifest_path: Path
    project_dir: Path
    model_paths: List[Path] = field(default_factory=list)
    diagram_paths: List[Path] = field(default_factory=list)


@dataclass
class Corpus:
    """All documents loaded for one run, models first."""

    models: List[Document] = field(default_factory=list)
    diagrams: List[Document] = field(default_factory=list)

    @property
    def documents(self) -> List[Document]:
        return self.models + self.diagrams
