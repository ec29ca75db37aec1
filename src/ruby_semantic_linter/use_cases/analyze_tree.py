"""Use Case: Analyze Tree - run the semantic pass, then every enabled check."""

from typing import Iterable, Optional, Sequence

from ruby_semantic_linter.domain.constants import REPORT_LEVELS
from ruby_semantic_linter.domain.definitions import Definition
from ruby_semantic_linter.domain.entities import ListenerFault
from ruby_semantic_linter.domain.iterator import TreeIterator
from ruby_semantic_linter.domain.node import Node
from ruby_semantic_linter.domain.protocols import (
    ConstantResolverProtocol,
    NodeSourceProtocol,
    TelemetryPort,
)
from ruby_semantic_linter.domain.registry import DefinitionRegistry
from ruby_semantic_linter.domain.report import Report
from ruby_semantic_linter.domain.rules import AnalysisPass
from ruby_semantic_linter.domain.rules.useless_equality import UselessEqualityCheck
from ruby_semantic_linter.domain.services.association_tracker import AssociationTracker

DUMP_SUFFIX = ".json"

AVAILABLE_CHECKS: dict[str, type[AnalysisPass]] = {
    UselessEqualityCheck.name: UselessEqualityCheck,
}


def select_checks(names: Optional[Iterable[str]] = None) -> list[type[AnalysisPass]]:
    """Check classes for ``names`` (all of them when None). Unknown names raise ValueError."""
    if names is None:
        return list(AVAILABLE_CHECKS.values())
    selected = []
    for name in names:
        if name not in AVAILABLE_CHECKS:
            raise ValueError(f"Unknown check '{name}'. Available: {', '.join(sorted(AVAILABLE_CHECKS))}")
        selected.append(AVAILABLE_CHECKS[name])
    return selected


class AnalyzeTreeUseCase:
    """Orchestrate one analysis run per node tree."""

    def __init__(
        self,
        root: Definition,
        telemetry: TelemetryPort,
        resolver: Optional[ConstantResolverProtocol] = None,
        node_source: Optional[NodeSourceProtocol] = None,
        checks: Optional[Sequence[type[AnalysisPass]]] = None,
        levels: Iterable[str] = REPORT_LEVELS,
    ) -> None:
        self.root = root
        self.telemetry = telemetry
        self.resolver = resolver
        self.node_source = node_source
        self.checks = list(checks) if checks is not None else select_checks()
        self.levels = tuple(levels)
        self.faults: list[ListenerFault] = []

    def execute(self, nodes: list[Node], file: Optional[str] = None) -> Report:
        """
        Analyze one tree.

        Pass 1 binds the tracker alone so every association exists before any
        check looks at it; pass 2 walks the same nodes with the checks bound.
        """
        report = Report(levels=self.levels, file=file)
        registry = DefinitionRegistry(self.root)

        loaded_files: set[str] = set()
        if file is not None:
            loaded_files.add(file[: -len(DUMP_SUFFIX)] if file.endswith(DUMP_SUFFIX) else file)

        semantic = TreeIterator(report)
        tracker = semantic.bind(
            AssociationTracker,
            registry=registry,
            resolver=self.resolver,
            node_source=self.node_source,
            telemetry=self.telemetry,
            loaded_files=loaded_files,
        )

        try:
            self.telemetry.step(f"Semantic pass: {file or '<nodes>'}")
            semantic.iterate(nodes)
        finally:
            registry.restore(1)

        analysis = TreeIterator(report)
        for check in self.checks:
            analysis.bind(check, tracker=tracker)

        self.telemetry.step(f"Running {len(self.checks)} check(s)")
        analysis.iterate(nodes)

        self._record_faults(semantic.faults + analysis.faults, file)
        return report

    def execute_files(self, paths: Iterable[str]) -> list[Report]:
        """Load each node dump through the node source and analyze it."""
        if self.node_source is None:
            raise ValueError("A node source is required to analyze files.")

        reports = []
        for path in paths:
            nodes = self.node_source.load_nodes(path)
            reports.append(self.execute(nodes, file=path))
        return reports

    def _record_faults(self, faults: list[ListenerFault], file: Optional[str]) -> None:
        for fault in faults:
            self.telemetry.error(
                f"{file or '<nodes>'}:{fault.line}: {fault.listener} failed on {fault.phase} {fault.event}: {fault.error}"
            )
        self.faults.extend(faults)
