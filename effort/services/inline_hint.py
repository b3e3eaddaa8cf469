"""Effort contributed by hints flagged inside a file."""

import logging

from effort.graph import FileModel, GraphContext, InlineHintModel

logger = logging.getLogger(__name__)


class InlineHintService:
    """Score provider summing the effort of every hint located in a file."""

    name = "hint"

    def __init__(self, graph_context: GraphContext) -> None:
        self.graph_context = graph_context

    def get_hints(self, file: FileModel) -> list[InlineHintModel]:
        """Return the hints located in a file."""
        return self.graph_context.hints_for(file)

    def score(self, file: FileModel) -> int:
        """
        Get the migration effort points for a file's hints.

        Raises:
            FileNotInGraphError: If the file is not in the analysis graph.
        """
        hints = self.get_hints(file)
        points = sum(h.effort for h in hints)
        logger.debug(
            "Hint effort for %s: %d (%d hints)", file.file_path, points, len(hints)
        )
        return points

    get_migration_effort_points = score
