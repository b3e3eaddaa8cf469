"""Base template method interface and argument unwrapping."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from jinja2 import Undefined

from effort.core.exceptions import InvalidArgumentCountError, InvalidArgumentTypeError
from effort.graph import FileModel, GraphRewrite


@dataclass(frozen=True)
class TemplateArgument:
    """Host-side wrapper around a value handed to a template method."""

    wrapped: Any

    def get_wrapped_object(self) -> Any:
        """Return the wrapped domain object."""
        return self.wrapped


def unwrap_argument(argument: Any) -> Any:
    """
    Strip the template wrapper from an argument.

    Objects exposing ``get_wrapped_object()`` are unwrapped; anything else is
    returned as is.

    Raises:
        InvalidArgumentTypeError: If the argument is an undefined template
            value.
    """
    if isinstance(argument, Undefined):
        raise InvalidArgumentTypeError("FileModel", argument)
    getter = getattr(argument, "get_wrapped_object", None)
    if callable(getter):
        return getter()
    return argument


def as_file_unit(argument: Any) -> FileModel:
    """
    Convert a template argument to a FileModel.

    Raises:
        InvalidArgumentTypeError: If the unwrapped value is not a FileModel.
    """
    value = unwrap_argument(argument)
    if not isinstance(value, FileModel):
        raise InvalidArgumentTypeError("FileModel", value)
    return value


class TemplateMethod(ABC):
    """Base class for functions exposed to report templates.

    A method instance is bound to one rendering pass via ``set_context``
    and is then called from the template like a plain function. Arguments
    are positional only; a keyword argument is rejected as a count error.
    """

    argument_count: int = 1

    @property
    @abstractmethod
    def method_name(self) -> str:
        """Return the name the template calls this method by."""

    @abstractmethod
    def set_context(self, event: GraphRewrite) -> None:
        """Bind the method to the analysis run being rendered."""

    @abstractmethod
    def exec(self, arguments: list[Any]) -> Any:
        """Execute the method with the raw template arguments."""

    def __call__(self, *arguments: Any, **keywords: Any) -> Any:
        if keywords:
            raise InvalidArgumentCountError(
                self.method_name,
                self.argument_count,
                len(arguments) + len(keywords),
            )
        return self.exec(list(arguments))
