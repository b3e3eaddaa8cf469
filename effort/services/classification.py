"""Effort contributed by a file's classifications."""

import logging

from effort.graph import ClassificationModel, FileModel, GraphContext

logger = logging.getLogger(__name__)


class ClassificationService:
    """
    Score provider summing the effort of every classification on a file.

    A classification attached to a file contributes its full effort once,
    regardless of how many other files share it.
    """

    name = "classification"

    def __init__(self, graph_context: GraphContext) -> None:
        self.graph_context = graph_context

    def get_classifications(self, file: FileModel) -> list[ClassificationModel]:
        """Return the classifications attached to a file."""
        return self.graph_context.classifications_for(file)

    def score(self, file: FileModel) -> int:
        """
        Get the migration effort points for a file's classifications.

        Args:
            file: File to score.

        Returns:
            Sum of classification effort, 0 when the file is unclassified.

        Raises:
            FileNotInGraphError: If the file is not in the analysis graph.
        """
        classifications = self.get_classifications(file)
        points = sum(c.effort for c in classifications)
        logger.debug(
            "Classification effort for %s: %d (%d classifications)",
            file.file_path,
            points,
            len(classifications),
        )
        return points

    get_migration_effort_points = score
