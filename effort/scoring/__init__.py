"""Per-file migration effort aggregation."""

from .aggregator import EffortAggregator
from .base import ScoreProvider
from .models import EffortBreakdown
from .registry import (
    ProviderNotFoundError,
    ProviderRegistry,
    get_registry,
)

__all__ = [
    "EffortAggregator",
    "EffortBreakdown",
    "ProviderNotFoundError",
    "ProviderRegistry",
    "ScoreProvider",
    "get_registry",
]
