"""Template method returning migration effort points for a file."""

import logging
from collections.abc import Sequence
from typing import Any

from effort.core.exceptions import ConfigurationError, InvalidArgumentCountError
from effort.core.settings import DEFAULT_METHOD_NAME
from effort.graph import GraphRewrite
from effort.scoring import EffortAggregator, ProviderRegistry

from .base import TemplateMethod, as_file_unit

logger = logging.getLogger(__name__)


class GetEffortForFile(TemplateMethod):
    """
    Gets the number of effort points involved in migrating a file.

    Called from a template as follows:

        {{ getMigrationEffortPointsForFile(file) }}

    The result is the sum of classification and hint effort for the file,
    returned as an int without formatting.
    """

    def __init__(
        self,
        provider_names: Sequence[str] | None = None,
        method_name: str = DEFAULT_METHOD_NAME,
        registry: ProviderRegistry | None = None,
    ) -> None:
        """
        Initialize the method.

        Args:
            provider_names: Score providers to sum. Defaults to every
                registered provider.
            method_name: Name the template calls this method by.
            registry: Provider registry. Defaults to the global registry.
        """
        self._provider_names = provider_names
        self._method_name = method_name
        self._registry = registry
        self._aggregator: EffortAggregator | None = None

    @property
    def method_name(self) -> str:
        return self._method_name

    @property
    def aggregator(self) -> EffortAggregator | None:
        """Aggregator bound by the last ``set_context`` call."""
        return self._aggregator

    def set_context(self, event: GraphRewrite) -> None:
        self._aggregator = EffortAggregator.for_context(
            event, self._provider_names, self._registry
        )
        logger.debug("Bound %s to run %s", self._method_name, event.run_id)

    def exec(self, arguments: list[Any]) -> int:
        """
        Compute effort points for the single FileModel argument.

        Raises:
            InvalidArgumentCountError: Unless exactly one argument is given.
            InvalidArgumentTypeError: If the argument does not wrap a FileModel.
            ConfigurationError: If ``set_context`` was never called.
        """
        if len(arguments) != self.argument_count:
            raise InvalidArgumentCountError(
                self._method_name, self.argument_count, len(arguments)
            )
        file = as_file_unit(arguments[0])

        if self._aggregator is None:
            raise ConfigurationError(
                f"{self._method_name} called before set_context"
            )
        return self._aggregator.compute(file)
