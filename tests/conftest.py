"""Shared pytest fixtures for effort scoring tests."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from effort.core.settings import get_cached_settings
from effort.graph import (
    ClassificationModel,
    FileModel,
    GraphContext,
    GraphRewrite,
    InlineHintModel,
)


@pytest.fixture
def graph_context() -> GraphContext:
    """Return an empty analysis graph."""
    return GraphContext()


@pytest.fixture
def legacy_file(graph_context: GraphContext) -> FileModel:
    """Return a file with classification effort 5 and hint effort 3."""
    file = graph_context.add_file(FileModel(file_path="src/com/acme/LegacyBean.java"))
    graph_context.add_classification(
        ClassificationModel(classification="EJB 2.x Session Bean", effort=5), file
    )
    graph_context.add_hint(
        InlineHintModel(title="JNDI lookup", effort=1, file_id=file.id, line_number=12)
    )
    graph_context.add_hint(
        InlineHintModel(
            title="Proprietary descriptor", effort=2, file_id=file.id, line_number=40
        )
    )
    return file


@pytest.fixture
def clean_file(graph_context: GraphContext) -> FileModel:
    """Return a file with no classifications and no hints."""
    return graph_context.add_file(FileModel(file_path="src/com/acme/Util.java"))


@pytest.fixture
def event(graph_context: GraphContext) -> GraphRewrite:
    """Return a rewrite event for the shared graph."""
    return GraphRewrite(graph_context=graph_context)


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Iterator[None]:
    """Keep config files and EFFORT_ env vars from leaking into tests."""
    for name in list(os.environ):
        if name.startswith("EFFORT_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_cached_settings.cache_clear()
    yield
    get_cached_settings.cache_clear()
