"""Score provider registry for building providers per analysis context."""

from collections.abc import Callable, Sequence

from effort.core.exceptions import EffortError
from effort.graph import GraphContext
from effort.services import ClassificationService, InlineHintService

from .base import ScoreProvider

ProviderFactory = Callable[[GraphContext], ScoreProvider]


class ProviderNotFoundError(EffortError):
    """Raised when a score provider name is not registered."""

    def __init__(self, provider_name: str) -> None:
        self.provider_name = provider_name
        super().__init__(f"Score provider not found: {provider_name}")


class ProviderRegistry:
    """Registry of score provider factories.

    Factories are called with a GraphContext, so every analysis context gets
    its own provider instances.
    """

    def __init__(self) -> None:
        """Initialize the registry with built-in providers."""
        self._providers: dict[str, ProviderFactory] = {}

        self.register("classification", ClassificationService)
        self.register("hint", InlineHintService)

    def register(self, provider_name: str, factory: ProviderFactory) -> None:
        """Register a provider factory.

        Args:
            provider_name: Unique identifier for the provider.
            factory: Callable building a provider bound to a GraphContext.
        """
        self._providers[provider_name] = factory

    def unregister(self, provider_name: str) -> bool:
        """Unregister a provider.

        Returns:
            True if the provider was removed, False if it didn't exist.
        """
        if provider_name in self._providers:
            del self._providers[provider_name]
            return True
        return False

    def get_factory(self, provider_name: str) -> ProviderFactory:
        """Get the factory registered under a name.

        Raises:
            ProviderNotFoundError: If the name is not registered.
        """
        if provider_name not in self._providers:
            raise ProviderNotFoundError(provider_name)
        return self._providers[provider_name]

    def create(self, provider_name: str, graph_context: GraphContext) -> ScoreProvider:
        """Create one provider bound to a graph context."""
        return self.get_factory(provider_name)(graph_context)

    def create_all(
        self,
        graph_context: GraphContext,
        provider_names: Sequence[str] | None = None,
    ) -> list[ScoreProvider]:
        """Create providers bound to a graph context.

        Args:
            graph_context: Context every provider is bound to.
            provider_names: Providers to create, in order. Defaults to every
                registered provider in registration order.

        Returns:
            Freshly constructed providers.

        Raises:
            ProviderNotFoundError: If any name is not registered.
        """
        names = self.list_providers() if provider_names is None else provider_names
        return [self.create(name, graph_context) for name in names]

    def list_providers(self) -> list[str]:
        """List all registered provider names."""
        return list(self._providers.keys())

    def is_registered(self, provider_name: str) -> bool:
        """Check if a provider name is registered."""
        return provider_name in self._providers


_default_registry: ProviderRegistry | None = None


def get_registry() -> ProviderRegistry:
    """Get the global provider registry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ProviderRegistry()
    return _default_registry
