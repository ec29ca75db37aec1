"""Append-only sink for diagnostics."""

from typing import Iterable, Optional

from ruby_semantic_linter.domain.constants import REPORT_LEVELS
from ruby_semantic_linter.domain.entities import Diagnostic
from ruby_semantic_linter.domain.node import Node


class Report:
    """
    Collects diagnostics in the order passes emit them.

    Entries for disabled levels are dropped. The report also owns the
    per-node record of which checks already reported a node, so one check
    marking a node never suppresses another check on the same node.
    """

    def __init__(self, levels: Iterable[str] = REPORT_LEVELS, file: Optional[str] = None) -> None:
        self.levels = tuple(levels)
        self.file = file
        self.entries: list[Diagnostic] = []
        self._reported: dict[int, set[str]] = {}
        # Keeps marked nodes alive so their ids are not reused.
        self._marked_nodes: dict[int, Node] = {}

    def add(self, level: str, message: str, node: Optional[Node] = None, check: Optional[str] = None) -> bool:
        """Append an entry; returns False when ``level`` is disabled."""
        if level not in self.levels:
            return False

        line = node.line if node is not None else None
        column = node.column if node is not None else None
        code = node.code if node is not None else None
        self.entries.append(
            Diagnostic(level=level, message=message, line=line, column=column, file=self.file, check=check, code=code)
        )
        return True

    def error(self, message: str, node: Optional[Node] = None, check: Optional[str] = None) -> bool:
        return self.add("error", message, node, check)

    def warning(self, message: str, node: Optional[Node] = None, check: Optional[str] = None) -> bool:
        return self.add("warning", message, node, check)

    def info(self, message: str, node: Optional[Node] = None, check: Optional[str] = None) -> bool:
        return self.add("info", message, node, check)

    def mark_reported(self, node: Node, check: str) -> None:
        self._reported.setdefault(id(node), set()).add(check)
        self._marked_nodes[id(node)] = node
        node.reported = True

    def is_reported(self, node: Node, check: str) -> bool:
        return check in self._reported.get(id(node), set())

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
