"""Pytest configuration and shared fixtures.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
on the import path.
"""

from typing import Any, Callable

import pytest

from ruby_semantic_linter.domain.definitions import Definition
from ruby_semantic_linter.domain.iterator import TreeIterator
from ruby_semantic_linter.domain.node import Node
from ruby_semantic_linter.domain.registry import DefinitionRegistry
from ruby_semantic_linter.domain.report import Report
from ruby_semantic_linter.domain.services.association_tracker import AssociationTracker
from ruby_semantic_linter.infrastructure.services.stub_authority import StubAuthority


@pytest.fixture(scope="session")
def core_root() -> Definition:
    """The frozen core library root, built once for the whole session."""
    return StubAuthority().build_root()


@pytest.fixture
def nodes() -> Callable[..., list[Node]]:
    """Build nodes from raw records."""

    def build(*records: dict[str, Any]) -> list[Node]:
        return [Node.from_record(record) for record in records]

    return build


@pytest.fixture
def semantic_pass(core_root: Definition) -> Callable[..., AssociationTracker]:
    """Walk nodes with a tracker over a fresh registry and return the tracker."""

    def run(tree: list[Node], **options: Any) -> AssociationTracker:
        registry = options.pop("registry", None) or DefinitionRegistry(core_root)
        iterator = TreeIterator(Report())
        tracker = iterator.bind(AssociationTracker, registry=registry, **options)
        iterator.iterate(tree)
        assert iterator.faults == []
        return tracker

    return run
