"""Shared fixtures and helpers for tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

from keys_lsp.core.registry import DocumentRegistry
from tests.stubs import StubDocuments

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def json_parser() -> Parser:
    """Return a tree-sitter parser for JSON."""
    return get_parser("json")


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON document (object or raw text) under tmp_path and return its path."""

    def _write(name: str, content: Any) -> Path:
        path = tmp_path / name
        text = content if isinstance(content, str) else json.dumps(content, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def translations(write_json: Callable[[str, Any], Path]) -> Path:
    return write_json(
        "translations.json",
        {
            "greeting": "hello",
            "nested": {"works": "yes", "deeper": {"leaf": "bottom"}},
            "count": 3,
        },
    )


@pytest.fixture
def registry(translations: Path) -> DocumentRegistry:
    return DocumentRegistry({"tr": translations})


@pytest.fixture
def stub_documents() -> StubDocuments:
    return StubDocuments()
