"""Tests for the template method registry."""

from typing import Any

import pytest

from effort.core.settings import EffortSettings
from effort.graph import FileModel, GraphRewrite
from effort.reporting import (
    GetEffortForFile,
    MethodNotFoundError,
    MethodRegistry,
    TemplateMethod,
    create_default_registry,
    get_registry,
)


class RunIdMethod(TemplateMethod):
    """Template method returning the bound run id."""

    argument_count = 0

    def __init__(self) -> None:
        self.event: GraphRewrite | None = None

    @property
    def method_name(self) -> str:
        return "runId"

    def set_context(self, event: GraphRewrite) -> None:
        self.event = event

    def exec(self, arguments: list[Any]) -> Any:
        assert self.event is not None
        return self.event.run_id


class TestMethodRegistry:
    """Tests for MethodRegistry."""

    @pytest.fixture
    def registry(self) -> MethodRegistry:
        registry = MethodRegistry()
        registry.register("runId", RunIdMethod)
        return registry

    def test_bind_sets_context(
        self, registry: MethodRegistry, event: GraphRewrite
    ) -> None:
        methods = registry.bind(event)
        assert methods["runId"]() == event.run_id

    def test_bind_creates_fresh_instances(
        self, registry: MethodRegistry, event: GraphRewrite
    ) -> None:
        assert registry.bind(event)["runId"] is not registry.bind(event)["runId"]

    def test_unknown_method(self, registry: MethodRegistry) -> None:
        with pytest.raises(MethodNotFoundError) as exc_info:
            registry.get_factory("missing")
        assert exc_info.value.method_name == "missing"

    def test_unregister(self, registry: MethodRegistry) -> None:
        assert registry.unregister("runId") is True
        assert registry.unregister("runId") is False
        assert registry.list_methods() == []


class TestDefaultRegistry:
    """Tests for the settings-driven default registry."""

    def test_default_method(self, event: GraphRewrite, legacy_file: FileModel) -> None:
        registry = create_default_registry(EffortSettings(_skip_file_loading=True))
        assert registry.list_methods() == ["getMigrationEffortPointsForFile"]
        method = registry.bind(event)["getMigrationEffortPointsForFile"]
        assert isinstance(method, GetEffortForFile)
        assert method(legacy_file) == 8

    def test_settings_override(
        self, event: GraphRewrite, legacy_file: FileModel
    ) -> None:
        settings = EffortSettings(
            _skip_file_loading=True,
            scoring={"providers": ["hint"], "method_name": "hintEffort"},
        )
        registry = create_default_registry(settings)
        assert registry.is_registered("hintEffort")
        assert registry.bind(event)["hintEffort"](legacy_file) == 3

    def test_global_registry(self) -> None:
        assert get_registry() is get_registry()
