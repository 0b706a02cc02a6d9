"""Pytest configuration and fixtures for ModelCheck tests."""

import io
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Dict, Generator, List, Optional, Tuple

import pytest

from modelcheck_cli.orchestrator import ModelChecker
from modelcheck_cli.reporter import Reporter

PROJECT_NS = "http://schemas.microsoft.com/developer/msbuild/2003"
MODEL_NS = "http://schemas.microsoft.com/dsltools/ModelStore"
DIAGRAM_NS = "http://schemas.microsoft.com/dsltools/UmlClassDiagram"


def model_xml(body: str, name: str = "Design", root: str = "Model", namespace: str = MODEL_NS) -> str:
    """Wrap *body* in a model document root."""
    xmlns = f' xmlns="{namespace}"' if namespace else ""
    return f'<?xml version="1.0" encoding="utf-8"?>\n<{root}{xmlns} name="{name}">\n{body}\n</{root}>\n'


def diagram_xml(body: str, name: str = "Overview", root: str = "Diagram", namespace: str = DIAGRAM_NS) -> str:
    """Wrap *body* in a diagram document root."""
    return model_xml(body, name=name, root=root, namespace=namespace)


def manifest_xml(items: List[Tuple[str, str]], namespace: str = PROJECT_NS) -> str:
    """Build a project manifest with one ``ItemGroup`` of ``(element, Include)`` items."""
    xmlns = f' xmlns="{namespace}"' if namespace else ""
    entries = "\n".join(f'    <{tag} Include="{include}" />' for tag, include in items)
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<Project ToolsVersion="4.0"{xmlns}>\n'
        f"  <ItemGroup>\n{entries}\n  </ItemGroup>\n"
        "</Project>\n"
    )


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_project_path() -> Path:
    """Get path to the sample model project."""
    return Path(__file__).parent / "fixtures" / "sample_project"


@pytest.fixture
def sample_manifest(sample_project_path: Path) -> Path:
    return sample_project_path / "Sample.modelproj"


@pytest.fixture
def make_project(temp_dir: Path) -> Callable[..., Path]:
    """Write files plus a manifest listing them; returns the manifest path.

    Every file is listed as a ``Content`` item unless explicit *items* are
    given.
    """

    def _make(files: Dict[str, str], items: Optional[List[Tuple[str, str]]] = None) -> Path:
        for rel_path, content in files.items():
            path = temp_dir / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        if items is None:
            items = [("Content", rel_path) for rel_path in files]
        manifest = temp_dir / "Design.modelproj"
        manifest.write_text(manifest_xml(items), encoding="utf-8")
        return manifest

    return _make


@pytest.fixture
def run_check() -> Callable[[Path], Tuple[list, str]]:
    """Run a full check, returning the diagnostics and the reported text."""

    def _run(manifest: Path) -> Tuple[list, str]:
        stream = io.StringIO()
        diagnostics = ModelChecker(reporter=Reporter(stream)).run(manifest)
        return diagnostics, stream.getvalue()

    return _run
