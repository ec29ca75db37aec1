"""Analysis passes: listeners run after the semantic pass that write to the report."""

from typing import TYPE_CHECKING, Any, Optional

from ruby_semantic_linter.domain.iterator import Listener
from ruby_semantic_linter.domain.node import Node

if TYPE_CHECKING:
    from ruby_semantic_linter.domain.services.association_tracker import AssociationTracker


class AnalysisPass(Listener):
    """
    Base class for checks.

    A pass reads the associations the tracker recorded and reports through
    the shared report. Subclasses set ``name`` and return their handlers.
    """

    name: str = "analysis-pass"

    def __init__(self, report: Any = None, tracker: Optional["AssociationTracker"] = None) -> None:
        super().__init__(report)
        self.tracker = tracker

    def warning(self, message: str, node: Optional[Node] = None) -> bool:
        if self.report is None:
            return False
        return self.report.warning(message, node, check=self.name)

    def error(self, message: str, node: Optional[Node] = None) -> bool:
        if self.report is None:
            return False
        return self.report.error(message, node, check=self.name)
