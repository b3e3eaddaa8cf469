"""Score providers backed by the analysis graph."""

from .classification import ClassificationService
from .inline_hint import InlineHintService

__all__ = ["ClassificationService", "InlineHintService"]
