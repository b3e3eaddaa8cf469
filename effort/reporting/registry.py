"""Template method registry, bound per rendering pass."""

from collections.abc import Callable

from effort.core.exceptions import EffortError
from effort.core.settings import EffortSettings, get_cached_settings
from effort.graph import GraphRewrite

from .base import TemplateMethod
from .effort_method import GetEffortForFile

MethodFactory = Callable[[], TemplateMethod]


class MethodNotFoundError(EffortError):
    """Raised when a template method name is not registered."""

    def __init__(self, method_name: str) -> None:
        self.method_name = method_name
        super().__init__(f"Template method not found: {method_name}")


class MethodRegistry:
    """Registry of template method factories.

    ``bind`` creates new method instances on every call, so two rendering
    passes never share a method bound to the wrong analysis run.
    """

    def __init__(self) -> None:
        self._methods: dict[str, MethodFactory] = {}

    def register(self, method_name: str, factory: MethodFactory) -> None:
        """Register a template method factory under a name."""
        self._methods[method_name] = factory

    def unregister(self, method_name: str) -> bool:
        """Unregister a method.

        Returns:
            True if the method was removed, False if it didn't exist.
        """
        if method_name in self._methods:
            del self._methods[method_name]
            return True
        return False

    def get_factory(self, method_name: str) -> MethodFactory:
        """Get the factory registered under a name.

        Raises:
            MethodNotFoundError: If the name is not registered.
        """
        if method_name not in self._methods:
            raise MethodNotFoundError(method_name)
        return self._methods[method_name]

    def bind(self, event: GraphRewrite) -> dict[str, TemplateMethod]:
        """Create every registered method and bind it to ``event``.

        Returns:
            Mapping of method name to a freshly bound method instance.
        """
        bound: dict[str, TemplateMethod] = {}
        for method_name, factory in self._methods.items():
            method = factory()
            method.set_context(event)
            bound[method_name] = method
        return bound

    def list_methods(self) -> list[str]:
        """List all registered method names."""
        return list(self._methods.keys())

    def is_registered(self, method_name: str) -> bool:
        """Check if a method name is registered."""
        return method_name in self._methods


def create_default_registry(settings: EffortSettings | None = None) -> MethodRegistry:
    """Create a registry holding the built-in methods configured by settings."""
    settings = settings or get_cached_settings()
    method_name = settings.scoring.method_name
    provider_names = list(settings.scoring.providers)

    registry = MethodRegistry()
    registry.register(
        method_name,
        lambda: GetEffortForFile(
            provider_names=provider_names, method_name=method_name
        ),
    )
    return registry


_default_registry: MethodRegistry | None = None


def get_registry() -> MethodRegistry:
    """Get the global template method registry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry
