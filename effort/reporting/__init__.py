"""Template integration for effort scoring."""

from .base import TemplateArgument, TemplateMethod, as_file_unit, unwrap_argument
from .effort_method import GetEffortForFile
from .registry import (
    MethodNotFoundError,
    MethodRegistry,
    create_default_registry,
    get_registry,
)
from .renderer import TemplateRenderer

__all__ = [
    "GetEffortForFile",
    "MethodNotFoundError",
    "MethodRegistry",
    "TemplateArgument",
    "TemplateMethod",
    "TemplateRenderer",
    "as_file_unit",
    "create_default_registry",
    "get_registry",
    "unwrap_argument",
]
