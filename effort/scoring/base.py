"""Score provider interface."""

from typing import Protocol, runtime_checkable

from effort.graph import FileModel


@runtime_checkable
class ScoreProvider(Protocol):
    """Anything that can report effort points for a file.

    Implementations are bound to one analysis context at construction and
    must be read-only against it.
    """

    name: str

    def score(self, file: FileModel) -> int:
        """Return the non-negative effort points this source attributes."""
        ...
