"""In-memory analysis graph boundary."""

from .context import GraphContext, GraphRewrite
from .models import ClassificationModel, FileModel, InlineHintModel

__all__ = [
    "ClassificationModel",
    "FileModel",
    "GraphContext",
    "GraphRewrite",
    "InlineHintModel",
]
