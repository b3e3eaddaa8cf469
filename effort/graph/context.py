"""Analysis context: the graph state providers query."""

import uuid
from dataclasses import dataclass, field

from effort.core.exceptions import FileNotInGraphError

from .models import ClassificationModel, FileModel, InlineHintModel


class GraphContext:
    """
    In-memory analysis graph for one analysis run.

    Holds file, classification and hint vertices keyed by id. Lookups that
    miss raise FileNotInGraphError rather than returning empty results.
    """

    def __init__(self) -> None:
        self._files: dict[str, FileModel] = {}
        self._classifications: dict[str, ClassificationModel] = {}
        self._hints: dict[str, InlineHintModel] = {}

    def add_file(self, file: FileModel) -> FileModel:
        """Add a file vertex, returning it for chaining."""
        self._files[file.id] = file
        return file

    def add_classification(
        self,
        classification: ClassificationModel,
        *files: FileModel,
    ) -> ClassificationModel:
        """
        Add a classification vertex and attach it to the given files.

        Args:
            classification: Classification to add.
            *files: Files to attach; each must already be in the graph.

        Returns:
            The stored classification.

        Raises:
            FileNotInGraphError: If any of the files is not in the graph.
        """
        for file in files:
            self.get_file(file.id)
            classification.file_ids.add(file.id)
        self._classifications[classification.id] = classification
        return classification

    def add_hint(self, hint: InlineHintModel) -> InlineHintModel:
        """
        Add a hint vertex.

        Raises:
            FileNotInGraphError: If the hint's file is not in the graph.
        """
        self.get_file(hint.file_id)
        self._hints[hint.id] = hint
        return hint

    def get_file(self, file_id: str) -> FileModel:
        """
        Look up a file vertex by id.

        Raises:
            FileNotInGraphError: If no file has this id.
        """
        try:
            return self._files[file_id]
        except KeyError:
            raise FileNotInGraphError(file_id) from None

    def contains(self, file: FileModel) -> bool:
        """Check whether the file vertex belongs to this graph."""
        return file.id in self._files

    def files(self) -> list[FileModel]:
        """Return all file vertices in insertion order."""
        return list(self._files.values())

    def classifications_for(self, file: FileModel) -> list[ClassificationModel]:
        """Return classifications attached to a file."""
        self.get_file(file.id)
        return [c for c in self._classifications.values() if file.id in c.file_ids]

    def hints_for(self, file: FileModel) -> list[InlineHintModel]:
        """Return hints located in a file."""
        self.get_file(file.id)
        return [h for h in self._hints.values() if h.file_id == file.id]


@dataclass(frozen=True)
class GraphRewrite:
    """One analysis run's rewrite event, carrying its graph context."""

    graph_context: GraphContext
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))
