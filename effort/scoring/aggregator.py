"""Per-file migration effort aggregation."""

import logging
from collections.abc import Sequence

from effort.core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidArgumentTypeError,
    InvalidScoreError,
)
from effort.graph import FileModel, GraphContext, GraphRewrite

from .base import ScoreProvider
from .models import EffortBreakdown
from .registry import ProviderRegistry, get_registry

logger = logging.getLogger(__name__)


class EffortAggregator:
    """
    Sums the effort points every bound score provider reports for a file.

    The total for a file is:
        Effort = Σ provider_i.score(file)

    With the default providers this is classification effort plus hint
    effort. Providers are bound to exactly one GraphContext; use
    ``for_context`` to build a fresh aggregator per analysis run instead of
    sharing one across runs.
    """

    def __init__(
        self,
        graph_context: GraphContext | None = None,
        providers: Sequence[ScoreProvider] | None = None,
    ) -> None:
        """
        Initialize the aggregator.

        Args:
            graph_context: Analysis context the providers are bound to.
                If None, the aggregator is unbound until ``bind`` is called.
            providers: Provider instances already bound to ``graph_context``.
        """
        self._graph_context = graph_context
        self._providers: tuple[ScoreProvider, ...] = ()
        self._set_providers(providers or ())

    @classmethod
    def for_context(
        cls,
        context: GraphRewrite | GraphContext,
        provider_names: Sequence[str] | None = None,
        registry: ProviderRegistry | None = None,
    ) -> "EffortAggregator":
        """
        Build an aggregator with fresh providers bound to a context.

        Args:
            context: Rewrite event or graph context of the analysis run.
            provider_names: Providers to sum. Defaults to every registered one.
            registry: Provider registry. Defaults to the global registry.

        Returns:
            A bound EffortAggregator.
        """
        aggregator = cls()
        aggregator.bind(context, provider_names, registry)
        return aggregator

    def bind(
        self,
        context: GraphRewrite | GraphContext,
        provider_names: Sequence[str] | None = None,
        registry: ProviderRegistry | None = None,
    ) -> None:
        """Replace the providers with new ones bound to ``context``."""
        graph_context = (
            context.graph_context if isinstance(context, GraphRewrite) else context
        )
        registry = registry or get_registry()
        self._set_providers(registry.create_all(graph_context, provider_names))
        self._graph_context = graph_context
        logger.debug(
            "Bound effort providers %s to analysis context",
            [p.name for p in self._providers],
        )

    def _set_providers(self, providers: Sequence[ScoreProvider]) -> None:
        names = [p.name for p in providers]
        if len(set(names)) != len(names):
            raise ConfigurationError(f"Duplicate score provider names: {names}")
        self._providers = tuple(providers)

    @property
    def is_bound(self) -> bool:
        """Whether providers are bound to an analysis context."""
        return self._graph_context is not None and bool(self._providers)

    @property
    def providers(self) -> tuple[ScoreProvider, ...]:
        """Bound providers, in summation order."""
        return self._providers

    def _check_ready(self, file: object) -> FileModel:
        graph_context = self._graph_context
        if graph_context is None or not self._providers:
            raise ConfigurationError(
                "Effort providers are not bound to an analysis context"
            )
        if file is None:
            raise InvalidArgumentError("File must not be None")
        if not isinstance(file, FileModel):
            raise InvalidArgumentTypeError("FileModel", file)
        if not graph_context.contains(file):
            raise InvalidArgumentError(
                f"File {file.file_path} ({file.id}) is not in the bound "
                "analysis context"
            )
        return file

    def _score(self, provider: ScoreProvider, file: FileModel) -> int:
        points = provider.score(file)
        if isinstance(points, bool) or not isinstance(points, int) or points < 0:
            raise InvalidScoreError(provider.name, points)
        return points

    def compute(self, file: FileModel) -> int:
        """
        Compute total migration effort points for a file.

        Args:
            file: File vertex from the bound analysis context.

        Returns:
            Sum of every provider's effort points.

        Raises:
            ConfigurationError: If no providers are bound.
            InvalidArgumentError: If file is None or not in the bound context.
            InvalidScoreError: If a provider returns a negative or non-int value.
        """
        file = self._check_ready(file)
        total = sum(self._score(provider, file) for provider in self._providers)
        logger.debug("Migration effort for %s: %d", file.file_path, total)
        return total

    def breakdown(self, file: FileModel) -> EffortBreakdown:
        """
        Compute per-provider effort contributions for a file.

        Raises the same errors as ``compute``; ``breakdown(f).total`` equals
        ``compute(f)``.
        """
        file = self._check_ready(file)
        contributions = {
            provider.name: self._score(provider, file) for provider in self._providers
        }
        return EffortBreakdown(
            file_id=file.id,
            file_path=file.file_path,
            contributions=contributions,
        )
